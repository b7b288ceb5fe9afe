"""Unit tests for initial payment and late fee calculation"""

import pytest
from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal
from sheltercrest_gateway.domain.exceptions import InvalidArgumentError
from sheltercrest_gateway.domain.fees import (
    LATE_FEE_SCHEDULE,
    compute_initial_payment,
    compute_late_payment_fee,
    compute_late_payment_fee_on,
    format_currency,
    late_fee_tier,
    to_amount,
)
from sheltercrest_gateway.domain.models import (
    DepositInterestOnlyBreakdown,
    FeeModel,
    FourFeeBreakdown,
    InitialPaymentBreakdown,
)


def test_four_fee_breakdown():
    """Test four-fee model on 1000 GHS rent"""
    breakdown = compute_initial_payment(1000)

    assert isinstance(breakdown, FourFeeBreakdown)
    assert breakdown.fee_model is FeeModel.FOUR_FEE
    assert breakdown.deposit == 2000
    assert breakdown.service_fee == 1000
    assert breakdown.visit_fee == 120
    assert breakdown.processing_fee == 60
    assert breakdown.interest == 280  # 28% of one month, not two
    assert breakdown.total == 3460


def test_four_fee_zero_rent_keeps_fixed_fees():
    """Test zero rent leaves only visit + processing fees"""
    breakdown = compute_initial_payment(0)

    assert breakdown.deposit == 0
    assert breakdown.service_fee == 0
    assert breakdown.interest == 0
    assert breakdown.visit_fee == 120
    assert breakdown.processing_fee == 60
    assert breakdown.total == 180


def test_deposit_interest_only_breakdown():
    """Test deposit-interest-only model charges 28% on the deposit"""
    breakdown = compute_initial_payment(1200, FeeModel.DEPOSIT_INTEREST_ONLY)

    assert isinstance(breakdown, DepositInterestOnlyBreakdown)
    assert breakdown.deposit == 2400
    assert breakdown.interest == 672
    assert breakdown.total == 3072
    assert set(breakdown.components()) == {"deposit", "interest"}


def test_fee_model_accepts_string_value():
    breakdown = compute_initial_payment(1200, "deposit_interest_only")
    assert breakdown.fee_model is FeeModel.DEPOSIT_INTEREST_ONLY


def test_unknown_fee_model_rejected():
    with pytest.raises(InvalidArgumentError):
        compute_initial_payment(1200, "three_fee")


@pytest.mark.parametrize("fee_model", list(FeeModel))
@pytest.mark.parametrize("rent", ["0", "1", "850.50", "1200", "3333.33", "99999.99"])
def test_total_is_sum_of_components(fee_model, rent):
    """Test total has no hidden adjustments"""
    breakdown = compute_initial_payment(Decimal(rent), fee_model)

    assert breakdown.total == sum(breakdown.components().values())
    assert breakdown.total >= 0
    assert all(value >= 0 for value in breakdown.components().values())


@pytest.mark.parametrize("fee_model", list(FeeModel))
def test_total_non_decreasing_in_rent(fee_model):
    rents = [Decimal(r) for r in ("0", "0.01", "500", "500.01", "1200", "5000")]
    totals = [compute_initial_payment(r, fee_model).total for r in rents]

    assert totals == sorted(totals)


def test_initial_payment_is_reproducible():
    """Test identical input gives identical, immutable output"""
    first = compute_initial_payment("1234.56")
    second = compute_initial_payment("1234.56")

    assert first == second
    with pytest.raises(FrozenInstanceError):
        first.total = Decimal("0")


def test_float_rent_uses_decimal_repr():
    """Test 0.1-style floats do not leak binary noise into amounts"""
    breakdown = compute_initial_payment(1000.1)
    assert breakdown.deposit == Decimal("2000.2")


@pytest.mark.parametrize("bad", [-1, Decimal("-0.01"), "-5", float("nan"), float("inf"), "abc", True, None])
def test_invalid_rent_rejected(bad):
    with pytest.raises(InvalidArgumentError):
        compute_initial_payment(bad)


def test_invalid_argument_is_value_error():
    """Test callers catching ValueError still see domain errors"""
    with pytest.raises(ValueError):
        compute_initial_payment(-100)


def test_late_fee_scenarios():
    assert compute_late_payment_fee(1200, 2) == 0
    assert compute_late_payment_fee(1200, 15) == 180  # 15% of 1200
    assert compute_late_payment_fee(1200, 30) == 0


@pytest.mark.parametrize(
    "day, rate",
    [
        (1, "0"),
        (3, "0"),  # last grace day
        (4, "0.10"),  # first late day
        (10, "0.10"),
        (11, "0.15"),
        (18, "0.15"),
        (19, "0.25"),
        (25, "0.25"),
        (26, "0"),  # next cycle
        (31, "0"),
    ],
)
def test_late_fee_tier_boundaries(day, rate):
    """Test tier boundaries land exactly, no off-by-one"""
    assert late_fee_tier(day).rate == Decimal(rate)
    assert compute_late_payment_fee(1000, day) == 1000 * Decimal(rate)


def test_schedule_partitions_every_day():
    """Test each day 1-31 falls in exactly one tier"""
    for day in range(1, 32):
        matching = [tier for tier in LATE_FEE_SCHEDULE if tier.covers(day)]
        assert len(matching) == 1, f"day {day} matched {len(matching)} tiers"


@pytest.mark.parametrize("amount", ["0", "0.01", "999.99", "1200", "50000"])
def test_late_fee_bounded_by_top_rate(amount):
    for day in range(1, 32):
        fee = compute_late_payment_fee(Decimal(amount), day)
        assert 0 <= fee <= Decimal(amount) * Decimal("0.25")


@pytest.mark.parametrize("day", [0, 32, -1, 100])
def test_late_fee_day_out_of_range_rejected(day):
    with pytest.raises(InvalidArgumentError):
        compute_late_payment_fee(1200, day)


@pytest.mark.parametrize("day", [15.0, "15", True, None])
def test_late_fee_non_integer_day_rejected(day):
    with pytest.raises(InvalidArgumentError):
        compute_late_payment_fee(1200, day)


def test_late_fee_negative_amount_rejected():
    with pytest.raises(InvalidArgumentError):
        compute_late_payment_fee(-1, 15)


def test_late_fee_on_payment_date():
    assert compute_late_payment_fee_on(1200, date(2025, 7, 20)) == 300
    assert compute_late_payment_fee_on(1200, date(2025, 7, 28)) == 0


def test_to_amount_strips_whitespace():
    assert to_amount(" 12.50 ") == Decimal("12.50")


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("3460"), "GH₵3,460.00"),
        (Decimal("0"), "GH₵0.00"),
        (Decimal("1234567.891"), "GH₵1,234,567.89"),
        (Decimal("0.125"), "GH₵0.13"),  # half-up
        (Decimal("0.135"), "GH₵0.14"),
        (Decimal("0.005"), "GH₵0.01"),
        (Decimal("-5"), "-GH₵5.00"),
        (180, "GH₵180.00"),
        (672.5, "GH₵672.50"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


@pytest.mark.parametrize("bad", ["abc", None, Decimal("NaN"), Decimal("Infinity"), float("nan"), float("inf"), True])
def test_format_currency_rejects_non_numeric(bad):
    """Test display formatting fails with the domain error, not a raw decimal error"""
    with pytest.raises(InvalidArgumentError):
        format_currency(bad)


def test_breakdown_base_cannot_be_instantiated():
    """Test only the concrete fee-model variants can be built"""
    with pytest.raises(TypeError):
        InitialPaymentBreakdown(deposit=Decimal("1"), interest=Decimal("1"), total=Decimal("2"))


def test_four_fee_breakdown_requires_every_fee():
    """Test a hand-built four-fee breakdown cannot silently drop fees"""
    with pytest.raises(TypeError):
        FourFeeBreakdown(deposit=Decimal("2000"), interest=Decimal("280"), total=Decimal("2280"))
