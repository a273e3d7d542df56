# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Mail relay settings are deliberately optional: a missing host or credential
surfaces as a dispatch failure on the contact route, not a startup error.
"""

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "savantfs-web"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Mail relay (SMTP) --
    SMTP_HOST: str | None = Field(
        default=None,
        description="SMTP relay host. Enquiries fail with a 500 until this is set.",
    )
    SMTP_PORT: int = Field(
        default=587,
        description="SMTP relay port. Plain connection upgraded with STARTTLS.",
    )
    SMTP_USER: str | None = None
    SMTP_PASS: SecretStr | None = None
    SMTP_TIMEOUT: float | None = Field(
        default=None,
        description="Socket timeout in seconds. Unset uses the transport default.",
    )

    # -- Enquiry addressing --
    ENQUIRY_FROM_NAME: str = "SavantFS Website"
    ENQUIRY_FROM_ADDRESS: str = "info@savantfs.com.au"
    ENQUIRY_TO_ADDRESS: str = Field(
        default="sakib@savantfs.com.au",
        description="Operator mailbox that receives every enquiry.",
    )
    ENQUIRY_FALLBACK_REPLY_TO: str = Field(
        default="info@savantfs.com.au",
        description="Reply-To used when the submitter gave no email address.",
    )


settings = Settings()
