"""GET /v1/late-fee - late payment penalty endpoints"""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query

from sheltercrest_gateway.api.dependencies import get_request_id
from sheltercrest_gateway.api.v1.schemas import LateFeeResponse, LateFeeScheduleResponse, LateFeeTierSchema
from sheltercrest_gateway.domain.exceptions import InvalidArgumentError
from sheltercrest_gateway.domain.fees import (
    LATE_FEE_SCHEDULE,
    compute_late_payment_fee,
    format_currency,
    late_fee_tier,
)
from sheltercrest_gateway.infrastructure.observability.logging import log_late_fee
from sheltercrest_gateway.infrastructure.observability.metrics import record_late_fee

router = APIRouter()


@router.get("/late-fee", response_model=LateFeeResponse)
def get_late_fee(
    amount: Decimal = Query(..., ge=0, description="Payment amount in GHS"),
    day_of_month: int = Query(..., ge=1, le=31, description="Day of month the payment is made"),
    request_id: str = Depends(get_request_id),
):
    """Penalty owed on a payment made on the given day of the month"""
    try:
        tier = late_fee_tier(day_of_month)
        fee = compute_late_payment_fee(amount, day_of_month)
    except InvalidArgumentError as e:
        logging.warning(f"Invalid late fee request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_late_fee(tier.name)
    log_late_fee(request_id, tier.name, day_of_month, fee)

    return LateFeeResponse(
        amount=amount,
        day_of_month=day_of_month,
        tier=tier.name,
        rate=tier.rate,
        fee=fee,
        formatted_fee=format_currency(fee),
    )


@router.get("/late-fee/schedule", response_model=LateFeeScheduleResponse)
def get_late_fee_schedule():
    """Full day-of-month penalty schedule, grace period and next cycle included"""
    return LateFeeScheduleResponse(
        tiers=[
            LateFeeTierSchema(
                name=tier.name,
                first_day=tier.first_day,
                last_day=tier.last_day,
                rate=tier.rate,
            )
            for tier in LATE_FEE_SCHEDULE
        ]
    )
