"""Prometheus metrics for monitoring quotes, late fees, and eligibility outcomes"""

from prometheus_client import Counter, Histogram

# Fee metrics
quote_counter = Counter(
    "sheltercrest_quote_total",
    "Initial payment quotes computed",
    ["fee_model"],  # four_fee | deposit_interest_only
)

late_fee_counter = Counter(
    "sheltercrest_late_fee_total",
    "Late fee lookups by penalty tier",
    ["tier"],  # grace | first_late | second_late | third_late | next_cycle
)

# Eligibility metrics
eligibility_counter = Counter(
    "sheltercrest_eligibility_total",
    "Eligibility checks by outcome",
    ["outcome"],  # eligible | not_eligible
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_quote(fee_model: str) -> None:
    quote_counter.labels(fee_model=fee_model).inc()


def record_late_fee(tier: str) -> None:
    late_fee_counter.labels(tier=tier).inc()


def record_eligibility(eligible: bool) -> None:
    """Record eligibility outcome for monitoring pass rates"""
    outcome = "eligible" if eligible else "not_eligible"
    eligibility_counter.labels(outcome=outcome).inc()
