"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode secrets or connection strings in code.
"""

import os
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Bookkeeping Ledger"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Storage
    # "sql" uses DATABASE_URL; "memory" keeps everything in process.
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "sql").lower()
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./bookkeeping.db"
    )

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Ledger rules
    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "USD")
    # Entries must balance exactly unless a tolerance is configured.
    # Only useful for data migrated from float-based systems.
    BALANCE_TOLERANCE: Decimal = Decimal(os.getenv("BALANCE_TOLERANCE", "0"))
    STRICT_ORGANIZATION_LOOKUP: bool = (
        os.getenv("STRICT_ORGANIZATION_LOOKUP", "false").lower() == "true"
    )

    # Quick entries and dashboard
    CASH_ACCOUNT_CODE: str = os.getenv("CASH_ACCOUNT_CODE", "1111")
    SALES_ACCOUNT_CODE: str = os.getenv("SALES_ACCOUNT_CODE", "4100")
    EXPENSE_ACCOUNT_CODE: str = os.getenv("EXPENSE_ACCOUNT_CODE", "5100")
    CASH_ACCOUNT_PREFIX: str = os.getenv("CASH_ACCOUNT_PREFIX", "111")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls. This avoids reading
    environment variables repeatedly.
    """
    return Settings()
