"""Text blocks for rental assistance agreements and payment receipts"""

from typing import List

from sheltercrest_gateway.domain.exceptions import InvalidArgumentError
from sheltercrest_gateway.domain.fees import LATE_FEE_SCHEDULE, format_currency, to_amount
from sheltercrest_gateway.domain.models import InitialPaymentBreakdown

COMPONENT_LABELS = {
    "deposit": "Deposit Amount",
    "interest": "Interest Amount",
    "service_fee": "Service Fee",
    "visit_fee": "Property Visit Fee",
    "processing_fee": "Document Processing Fee",
}


def ordinal(day: int) -> str:
    """1 → "1st", 12 → "12th", 22 → "22nd" """
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def build_assistance_details(monthly_rent, breakdown: InitialPaymentBreakdown) -> List[str]:
    """Lines summarising the rent and every component of the initial payment"""
    lines = [f"Monthly Rent Amount: {format_currency(to_amount(monthly_rent, 'monthly_rent'))}"]

    for name, value in breakdown.components().items():
        lines.append(f"{COMPONENT_LABELS[name]}: {format_currency(value)}")

    lines.append(f"Total Initial Payment: {format_currency(breakdown.total)}")
    return lines


def build_payment_terms(due_day: int = 28) -> List[str]:
    """
    Payment terms block, with penalty lines taken from the late-fee schedule.

    Tiers with a zero rate (grace period, next cycle) are not listed.

    Raises:
        InvalidArgumentError: due_day is not an int in 1-31
    """
    if isinstance(due_day, bool) or not isinstance(due_day, int) or not 1 <= due_day <= 31:
        raise InvalidArgumentError(f"due_day must be an integer between 1 and 31, got {due_day!r}")

    terms = [
        "The Tenant agrees to make monthly payments according to the established payment schedule.",
        f"Payments are due on the {ordinal(due_day)} of each month.",
        "Late payment penalties:",
    ]

    for tier in LATE_FEE_SCHEDULE:
        if tier.rate == 0:
            continue
        percent = (tier.rate * 100).normalize()
        terms.append(f"   • {ordinal(tier.first_day)}-{ordinal(tier.last_day)}: {percent:f}% penalty")

    return terms
