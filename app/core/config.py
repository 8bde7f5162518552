"""
Application configuration.
All settings are loaded from environment variables (or a local .env file).
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ===========================================
    # APPLICATION
    # ===========================================
    app_env: str = "local"

    # ===========================================
    # REWARDS / OFFERS
    # ===========================================
    # JSON file with a list of offers, used by scripts/print_offers.py
    offers_seed_file: str | None = None
    offers_currency_symbol: str = "$"

    # ===========================================
    # LOGGING
    # ===========================================
    log_level: str = "INFO"
    log_file: str | None = None
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Validate level name against the logging module."""
        level = v.upper().strip()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log_level: {v}")
        return level

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
