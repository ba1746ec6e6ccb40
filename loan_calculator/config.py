"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-calculator"
    log_level: str = "INFO"

    # Schedules
    default_repayment_kind: str = "annuity"  # used when a request omits "kind"
    max_term_months: int = 600  # 50 years
    max_annual_rate: float = 1000.0  # percent


settings = Settings()
