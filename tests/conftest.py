"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from fastapi.testclient import TestClient

from sheltercrest_gateway.api.main import create_app
from sheltercrest_gateway.domain.models import EligibilityAnswers


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def eligible_answers() -> EligibilityAnswers:
    """Full-time applicant, 2 years in the job, rent at 24% of salary, good credit"""
    return EligibilityAnswers(
        employment_status="full-time",
        employment_duration="1y-3y",
        annual_salary=Decimal("60000"),
        monthly_rent=Decimal("1200"),
        credit_score=680,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
