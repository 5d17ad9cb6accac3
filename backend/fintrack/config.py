"""
Application configuration using Pydantic settings.
"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Fintrack"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/db.sqlite"

    # Reconciliation
    reconciliation_amount_tolerance: Decimal = Decimal("12.0")
    reconciliation_date_window_days: int = 5
    reconciliation_fetch_padding_days: int = 10  # Must be >= the date window

    # Bank sync deduplication
    bank_sync_amount_tolerance: Decimal = Decimal("0.01")  # Exact to the cent
    bank_sync_date_window_days: int = 3

    # Server
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
