"""POST /v1/eligibility - rent assistance eligibility check"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from sheltercrest_gateway.api.dependencies import get_request_id, get_settings
from sheltercrest_gateway.api.v1.schemas import EligibilityRequest, EligibilityResponse
from sheltercrest_gateway.config import Settings
from sheltercrest_gateway.domain.eligibility import check_eligibility, result_expires_at
from sheltercrest_gateway.domain.exceptions import InvalidArgumentError
from sheltercrest_gateway.domain.models import EligibilityAnswers
from sheltercrest_gateway.infrastructure.observability.logging import log_eligibility
from sheltercrest_gateway.infrastructure.observability.metrics import record_eligibility

router = APIRouter()


@router.post("/eligibility", response_model=EligibilityResponse)
def create_eligibility_check(
    request_body: EligibilityRequest,
    request_id: str = Depends(get_request_id),
    app_settings: Settings = Depends(get_settings),
):
    """
    Evaluate eligibility questionnaire answers.

    The result is valid for eligibility_validity_days; clients store it and
    re-check once expires_at has passed.
    """
    answers = EligibilityAnswers(
        employment_status=request_body.employment_status,
        employment_duration=request_body.employment_duration,
        annual_salary=request_body.annual_salary,
        monthly_rent=request_body.monthly_rent,
        credit_score=request_body.credit_score,
    )

    try:
        result = check_eligibility(answers, max_rent_to_income=app_settings.max_rent_to_income)
    except InvalidArgumentError as e:
        logging.warning(f"Invalid eligibility answers: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_eligibility(result.eligible)
    log_eligibility(request_id, result.eligible, result.reasons)

    return EligibilityResponse(
        eligible=result.eligible,
        rent_to_income_ratio=result.rent_to_income_ratio,
        reasons=list(result.reasons),
        checked_at=result.checked_at,
        expires_at=result_expires_at(result, app_settings.eligibility_validity_days),
    )
