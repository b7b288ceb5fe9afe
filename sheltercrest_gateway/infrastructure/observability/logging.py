"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from sheltercrest_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_quote(request_id: str, fee_model: str, monthly_rent: Decimal, total: Decimal) -> None:
    """Log initial payment quote for analysis"""
    logging.info(
        "Quote computed",
        extra={
            "request_id": request_id,
            "step": "quote_complete",
            "fee_model": fee_model,
            "monthly_rent": str(monthly_rent),
            "total": str(total),
        },
    )


def log_late_fee(request_id: str, tier: str, day_of_month: int, fee: Decimal) -> None:
    """Log late payment penalty lookup"""
    logging.info(
        "Late fee computed",
        extra={
            "request_id": request_id,
            "step": "late_fee_complete",
            "tier": tier,
            "day_of_month": day_of_month,
            "fee": str(fee),
        },
    )


def log_eligibility(request_id: str, eligible: bool, reasons: tuple) -> None:
    """Log eligibility outcome with the failed criteria"""
    logging.info(
        "Eligibility checked",
        extra={
            "request_id": request_id,
            "step": "eligibility_complete",
            "outcome": "eligible" if eligible else "not_eligible",
            "reasons": list(reasons),
        },
    )
