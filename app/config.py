"""Application configuration management."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Settings
    app_name: str = "Quote Scanner - deterministic window/door quote grading"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = (
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    )
    log_date_format: str = "%Y-%m-%d %H:%M:%S"

    # Opening count hint supplied by the caller when extraction found none
    scanner_min_opening_count_hint: int = Field(
        default=1,
        ge=1,
        description="Smallest opening count hint accepted from callers"
    )
    scanner_max_opening_count_hint: int = Field(
        default=200,
        ge=1,
        description="Largest opening count hint accepted from callers"
    )

    # Diagnostics
    scanner_log_signals: bool = Field(
        default=False,
        description="Log the validated extraction signals at DEBUG level"
    )

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance.

    Returns:
        Settings: Application settings loaded from environment
    """
    return Settings()


# Global settings instance
settings = get_settings()
