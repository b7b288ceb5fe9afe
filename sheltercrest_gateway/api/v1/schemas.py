"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from sheltercrest_gateway.domain.models import FeeModel


class QuoteRequest(BaseModel):
    """Request body for POST /v1/quote and POST /v1/agreement/terms"""

    monthly_rent: Decimal = Field(..., ge=0, description="Monthly rent in GHS")
    fee_model: Optional[FeeModel] = Field(None, description="Defaults to the configured fee model")


class QuoteResponse(BaseModel):
    """Response for POST /v1/quote"""

    fee_model: FeeModel
    monthly_rent: Decimal
    deposit: Decimal
    interest: Decimal
    service_fee: Optional[Decimal] = None
    visit_fee: Optional[Decimal] = None
    processing_fee: Optional[Decimal] = None
    total: Decimal
    formatted_total: str


class AgreementTermsResponse(BaseModel):
    """Response for POST /v1/agreement/terms"""

    fee_model: FeeModel
    details: List[str]
    payment_terms: List[str]


class LateFeeResponse(BaseModel):
    """Response for GET /v1/late-fee"""

    amount: Decimal
    day_of_month: int
    tier: str
    rate: Decimal
    fee: Decimal
    formatted_fee: str


class LateFeeTierSchema(BaseModel):
    """Single tier of the late-fee schedule"""

    name: str
    first_day: int
    last_day: int
    rate: Decimal


class LateFeeScheduleResponse(BaseModel):
    """Response for GET /v1/late-fee/schedule"""

    tiers: List[LateFeeTierSchema]


class EligibilityRequest(BaseModel):
    """Request body for POST /v1/eligibility"""

    employment_status: str = Field(..., min_length=1, description="full-time, part-time, contract, ...")
    employment_duration: str = Field(..., min_length=1, description="<6m, 6m-1y, 1y-3y, 3y+")
    annual_salary: Decimal = Field(..., gt=0, description="Annual salary in GHS")
    monthly_rent: Decimal = Field(..., ge=0, description="Monthly rent in GHS")
    credit_score: int = Field(..., ge=0)


class EligibilityResponse(BaseModel):
    """Response for POST /v1/eligibility"""

    eligible: bool
    rent_to_income_ratio: Decimal
    reasons: List[str]
    checked_at: datetime
    expires_at: datetime
