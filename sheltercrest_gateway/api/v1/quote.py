"""POST /v1/quote and POST /v1/agreement/terms - initial payment endpoints"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from sheltercrest_gateway.api.dependencies import get_request_id, get_settings
from sheltercrest_gateway.api.v1.schemas import AgreementTermsResponse, QuoteRequest, QuoteResponse
from sheltercrest_gateway.config import Settings
from sheltercrest_gateway.domain.agreement import build_assistance_details, build_payment_terms
from sheltercrest_gateway.domain.exceptions import InvalidArgumentError
from sheltercrest_gateway.domain.fees import compute_initial_payment, format_currency
from sheltercrest_gateway.domain.models import FourFeeBreakdown
from sheltercrest_gateway.infrastructure.observability.logging import log_quote
from sheltercrest_gateway.infrastructure.observability.metrics import record_quote

router = APIRouter()


@router.post("/quote", response_model=QuoteResponse)
def create_quote(
    request_body: QuoteRequest,
    request_id: str = Depends(get_request_id),
    app_settings: Settings = Depends(get_settings),
):
    """
    Compute the initial payment an applicant owes for a monthly rent.

    Extra fee fields are only present under the four-fee model.
    """
    fee_model = request_body.fee_model or app_settings.fee_model

    try:
        breakdown = compute_initial_payment(request_body.monthly_rent, fee_model)
    except InvalidArgumentError as e:
        logging.warning(f"Invalid quote request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_quote(breakdown.fee_model.value)
    log_quote(request_id, breakdown.fee_model.value, request_body.monthly_rent, breakdown.total)

    response = QuoteResponse(
        fee_model=breakdown.fee_model,
        monthly_rent=request_body.monthly_rent,
        deposit=breakdown.deposit,
        interest=breakdown.interest,
        total=breakdown.total,
        formatted_total=format_currency(breakdown.total),
    )
    if isinstance(breakdown, FourFeeBreakdown):
        response.service_fee = breakdown.service_fee
        response.visit_fee = breakdown.visit_fee
        response.processing_fee = breakdown.processing_fee

    return response


@router.post("/agreement/terms", response_model=AgreementTermsResponse)
def get_agreement_terms(
    request_body: QuoteRequest,
    request_id: str = Depends(get_request_id),
    app_settings: Settings = Depends(get_settings),
):
    """
    Render the assistance details and payment terms printed on the agreement.

    Returns:
        Display lines with amounts already formatted in GHS
    """
    fee_model = request_body.fee_model or app_settings.fee_model

    try:
        breakdown = compute_initial_payment(request_body.monthly_rent, fee_model)
    except InvalidArgumentError as e:
        logging.warning(f"Invalid agreement request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    return AgreementTermsResponse(
        fee_model=breakdown.fee_model,
        details=build_assistance_details(request_body.monthly_rent, breakdown),
        payment_terms=build_payment_terms(app_settings.payment_due_day),
    )
