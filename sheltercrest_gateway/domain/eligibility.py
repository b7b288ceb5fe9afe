"""Pre-application eligibility checks for rent assistance"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sheltercrest_gateway.domain.exceptions import InvalidArgumentError
from sheltercrest_gateway.domain.fees import to_amount
from sheltercrest_gateway.domain.models import EligibilityAnswers, EligibilityResult

EMPLOYMENT_STATUSES = ("full-time", "part-time", "contract", "self-employed", "unemployed")
EMPLOYMENT_DURATIONS = ("<6m", "6m-1y", "1y-3y", "3y+")
QUALIFYING_DURATIONS = ("6m-1y", "1y-3y", "3y+")
MIN_CREDIT_SCORE = 600
DEFAULT_MAX_RENT_TO_INCOME = Decimal("0.30")


def rent_to_income_ratio(monthly_rent, annual_salary) -> Decimal:
    """Share of annual salary that goes to rent"""
    rent = to_amount(monthly_rent, "monthly_rent")
    salary = to_amount(annual_salary, "annual_salary")
    if salary == 0:
        raise InvalidArgumentError("annual_salary must be positive")
    return rent * 12 / salary


def check_eligibility(
    answers: EligibilityAnswers,
    checked_at: datetime | None = None,
    max_rent_to_income: Decimal = DEFAULT_MAX_RENT_TO_INCOME,
) -> EligibilityResult:
    """
    Evaluate questionnaire answers against the basic eligibility criteria.

    Criteria:
    - Full-time employee
    - At least 6 months with current employer
    - Annual rent at or below max_rent_to_income of annual salary (30% by default)
    - Credit score >= 600

    Every failed criterion is reported in reasons, not just the first.

    Raises:
        InvalidArgumentError: unknown employment answers, non-integer credit score,
            non-positive salary, negative rent
    """
    if answers.employment_status not in EMPLOYMENT_STATUSES:
        raise InvalidArgumentError(f"Unknown employment status: {answers.employment_status!r}")
    if answers.employment_duration not in EMPLOYMENT_DURATIONS:
        raise InvalidArgumentError(f"Unknown employment duration: {answers.employment_duration!r}")
    if isinstance(answers.credit_score, bool) or not isinstance(answers.credit_score, int):
        raise InvalidArgumentError(f"credit_score must be an integer, got {answers.credit_score!r}")

    ratio = rent_to_income_ratio(answers.monthly_rent, answers.annual_salary)
    threshold = to_amount(max_rent_to_income, "max_rent_to_income")

    reasons = []
    if answers.employment_status != "full-time":
        reasons.append("Not a full-time employee")
    if answers.employment_duration not in QUALIFYING_DURATIONS:
        reasons.append("Employed for less than 6 months")
    if ratio > threshold:
        reasons.append(f"Rent exceeds {(threshold * 100).normalize():f}% of annual income")
    if answers.credit_score < MIN_CREDIT_SCORE:
        reasons.append("Credit score below 600")

    return EligibilityResult(
        eligible=not reasons,
        rent_to_income_ratio=ratio,
        checked_at=checked_at or datetime.now(timezone.utc),
        reasons=tuple(reasons),
    )


def result_expires_at(result: EligibilityResult, validity_days: int = 30) -> datetime:
    """Moment after which a stored eligibility result must be re-checked"""
    return result.checked_at + timedelta(days=validity_days)


def is_result_expired(
    result: EligibilityResult,
    now: datetime | None = None,
    validity_days: int = 30,
) -> bool:
    now = now or datetime.now(timezone.utc)
    return now > result_expires_at(result, validity_days)
