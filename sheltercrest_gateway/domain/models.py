"""Domain models - immutable dataclasses representing fee and eligibility values"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, Tuple


class FeeModel(str, Enum):
    """Initial payment formula in force"""

    FOUR_FEE = "four_fee"  # 28% of one month's rent plus service, visit, processing fees
    DEPOSIT_INTEREST_ONLY = "deposit_interest_only"  # 28% of the two-month deposit


@dataclass(frozen=True)
class InitialPaymentBreakdown(ABC):
    """Base for the amount an applicant pays before assistance starts"""

    deposit: Decimal
    interest: Decimal
    total: Decimal

    @property
    @abstractmethod
    def fee_model(self) -> FeeModel:
        ...

    @abstractmethod
    def components(self) -> Dict[str, Decimal]:
        """Named components that sum to total, in display order"""


@dataclass(frozen=True, kw_only=True)
class FourFeeBreakdown(InitialPaymentBreakdown):
    """Deposit, interest on one month's rent, and three extra fees"""

    service_fee: Decimal
    visit_fee: Decimal
    processing_fee: Decimal

    @property
    def fee_model(self) -> FeeModel:
        return FeeModel.FOUR_FEE

    def components(self) -> Dict[str, Decimal]:
        return {
            "deposit": self.deposit,
            "interest": self.interest,
            "service_fee": self.service_fee,
            "visit_fee": self.visit_fee,
            "processing_fee": self.processing_fee,
        }


@dataclass(frozen=True)
class DepositInterestOnlyBreakdown(InitialPaymentBreakdown):
    """Deposit plus interest charged on the deposit"""

    @property
    def fee_model(self) -> FeeModel:
        return FeeModel.DEPOSIT_INTEREST_ONLY

    def components(self) -> Dict[str, Decimal]:
        return {"deposit": self.deposit, "interest": self.interest}


@dataclass(frozen=True)
class LateFeeTier:
    """Penalty rate applied to payments made within a day-of-month range (inclusive)"""

    name: str
    first_day: int
    last_day: int
    rate: Decimal

    def covers(self, day_of_month: int) -> bool:
        return self.first_day <= day_of_month <= self.last_day


@dataclass(frozen=True)
class EligibilityAnswers:
    """Questionnaire answers from the eligibility checker"""

    employment_status: str  # "full-time", "part-time", "contract", "self-employed", "unemployed"
    employment_duration: str  # "<6m", "6m-1y", "1y-3y", "3y+"
    annual_salary: Decimal
    monthly_rent: Decimal
    credit_score: int


@dataclass(frozen=True)
class EligibilityResult:
    """Outcome of an eligibility check"""

    eligible: bool
    rent_to_income_ratio: Decimal
    checked_at: datetime
    reasons: Tuple[str, ...] = ()
