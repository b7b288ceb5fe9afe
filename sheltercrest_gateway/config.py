"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sheltercrest_gateway.domain.models import FeeModel


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "sheltercrest-gateway"
    log_level: str = "INFO"

    # Fees
    fee_model: FeeModel = FeeModel.FOUR_FEE
    payment_due_day: int = Field(28, ge=1, le=31)

    # Eligibility
    max_rent_to_income: Decimal = Decimal("0.30")
    eligibility_validity_days: int = 30


settings = Settings()
