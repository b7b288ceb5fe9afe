"""Rent-assistance fee engine - initial payment breakdown and late-payment penalties"""

import math
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Tuple

from sheltercrest_gateway.domain.exceptions import InvalidArgumentError
from sheltercrest_gateway.domain.models import (
    DepositInterestOnlyBreakdown,
    FeeModel,
    FourFeeBreakdown,
    InitialPaymentBreakdown,
    LateFeeTier,
)

DEPOSIT_MONTHS = 2
INTEREST_RATE = Decimal("0.28")
VISIT_FEE = Decimal("120")  # GHS, property visit
PROCESSING_FEE = Decimal("60")  # GHS, document processing

CURRENCY_SYMBOL = "GH₵"
CENTS = Decimal("0.01")

LATE_FEE_SCHEDULE: Tuple[LateFeeTier, ...] = (
    LateFeeTier(name="grace", first_day=1, last_day=3, rate=Decimal("0")),
    LateFeeTier(name="first_late", first_day=4, last_day=10, rate=Decimal("0.10")),
    LateFeeTier(name="second_late", first_day=11, last_day=18, rate=Decimal("0.15")),
    LateFeeTier(name="third_late", first_day=19, last_day=25, rate=Decimal("0.25")),
    LateFeeTier(name="next_cycle", first_day=26, last_day=31, rate=Decimal("0")),
)


def to_decimal(value, name: str = "amount") -> Decimal:
    """
    Coerce a caller-supplied numeric value to a finite Decimal.

    Floats go through str() so 1200.1 becomes Decimal("1200.1") rather than
    its binary expansion.

    Raises:
        InvalidArgumentError: value is not finite or not numeric
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number, got bool")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgumentError(f"{name} must be finite, got {value}")
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except ArithmeticError as e:
            raise InvalidArgumentError(f"{name} is not a number: {value!r}") from e
    else:
        raise InvalidArgumentError(f"{name} must be a number, got {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidArgumentError(f"{name} must be finite, got {amount}")

    return amount


def to_amount(value, name: str = "amount") -> Decimal:
    """
    Coerce a caller-supplied monetary value to a non-negative Decimal.

    Raises:
        InvalidArgumentError: value is negative, not finite, or not numeric
    """
    amount = to_decimal(value, name)
    if amount < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {amount}")

    return amount


def compute_initial_payment(
    monthly_rent,
    fee_model: FeeModel = FeeModel.FOUR_FEE,
) -> InitialPaymentBreakdown:
    """
    Compute what an applicant pays up front for a given monthly rent.

    Four-fee model:
    - deposit = 2 months' rent
    - interest = 28% of ONE month's rent
    - service fee = 1 month's rent, visit fee = 120, processing fee = 60

    Deposit-interest-only model:
    - deposit = 2 months' rent
    - interest = 28% of the deposit

    Example:
        1000 (four-fee) → 2000 + 280 + 1000 + 120 + 60 = 3460
        1200 (deposit-interest-only) → 2400 + 672 = 3072

    Raises:
        InvalidArgumentError: monthly_rent is negative or not numeric
    """
    rent = to_amount(monthly_rent, "monthly_rent")
    try:
        fee_model = FeeModel(fee_model)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown fee model: {fee_model!r}") from e
    deposit = rent * DEPOSIT_MONTHS

    if fee_model is FeeModel.DEPOSIT_INTEREST_ONLY:
        interest = deposit * INTEREST_RATE
        return DepositInterestOnlyBreakdown(
            deposit=deposit,
            interest=interest,
            total=deposit + interest,
        )

    service_fee = rent
    interest = rent * INTEREST_RATE

    return FourFeeBreakdown(
        deposit=deposit,
        interest=interest,
        service_fee=service_fee,
        visit_fee=VISIT_FEE,
        processing_fee=PROCESSING_FEE,
        total=deposit + interest + service_fee + VISIT_FEE + PROCESSING_FEE,
    )


def late_fee_tier(day_of_month: int) -> LateFeeTier:
    """
    Find the penalty tier for the day of the month a payment lands on.

    Raises:
        InvalidArgumentError: day_of_month is not an int in 1-31
    """
    if isinstance(day_of_month, bool) or not isinstance(day_of_month, int):
        raise InvalidArgumentError(f"day_of_month must be an integer, got {day_of_month!r}")

    for tier in LATE_FEE_SCHEDULE:
        if tier.covers(day_of_month):
            return tier

    raise InvalidArgumentError(f"day_of_month must be between 1 and 31, got {day_of_month}")


def compute_late_payment_fee(amount, day_of_month: int) -> Decimal:
    """
    Penalty owed on a payment made on the given day of the month.

    Days 1-3 are the grace period and days 26-31 roll into the next cycle,
    both free. Each call is independent of payment history.
    """
    due = to_amount(amount)
    tier = late_fee_tier(day_of_month)
    return due * tier.rate


def compute_late_payment_fee_on(amount, paid_on: date) -> Decimal:
    """Penalty owed on a payment made on a calendar date"""
    return compute_late_payment_fee(amount, paid_on.day)


def format_currency(amount) -> str:
    """
    Render an amount for display, e.g. Decimal("1234.5") → "GH₵1,234.50".

    Rounds half-up to the pesewa. Negative amounts are accepted here since
    this is presentation only.

    Raises:
        InvalidArgumentError: amount is not finite or not numeric
    """
    value = to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.2f}"
