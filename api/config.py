"""
API Configuration Management

Provides centralized configuration handling with environment-aware settings
management, secure secret retrieval, and validation.

Design Considerations:
- Settings constructed once per process and injected into handlers
- Secrets held as SecretStr and never logged
- Missing provider credentials reported per request, not at startup
- Default values with proper documentation
"""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field, SecretStr, field_validator

from recap.integrations.gemini.client import DEFAULT_MODEL
from recap.ingest.extractor import DEFAULT_MAX_UPLOAD_BYTES
from recap.notifications.dispatcher import MailCredentials, DEFAULT_SMTP_HOST, DEFAULT_SMTP_PORT


class EnvironmentType(str, Enum):
    """Valid environment types for configuration context."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class APISettings(BaseSettings):
    """
    API configuration settings with environment-specific defaults and validation.

    Values come from environment variables or a ``.env`` file. Provider and
    mail credentials are optional here; the services that need them raise a
    configuration error when they are absent.
    """
    # Environment Configuration
    ENVIRONMENT: EnvironmentType = Field(
        default=EnvironmentType.DEVELOPMENT,
        description="Runtime environment context"
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    # API Settings
    API_TITLE: str = Field(
        default="Meeting Recap API",
        description="API title for documentation"
    )
    API_DESCRIPTION: str = Field(
        default="Transcript upload, AI meeting summaries and summary emails",
        description="API description for documentation"
    )
    API_VERSION: str = Field(
        default="1.0.0",
        description="API version"
    )

    # CORS Settings
    CORS_ORIGINS: str = Field(
        default="*",
        validate_default=True,
        description="Comma-separated list of allowed origins for CORS"
    )
    CORS_METHODS: str = Field(
        default="GET,POST,OPTIONS",
        validate_default=True,
        description="Comma-separated list of allowed methods for CORS"
    )

    # Transcript Upload
    MAX_UPLOAD_BYTES: int = Field(
        default=DEFAULT_MAX_UPLOAD_BYTES,
        gt=0,
        description="Largest accepted transcript upload in bytes"
    )

    # Generative AI Provider
    GEMINI_API_KEY: Optional[SecretStr] = Field(
        default=None,
        description="API key for the Gemini API"
    )
    GEMINI_MODEL: str = Field(
        default=DEFAULT_MODEL,
        description="Gemini model used for summaries"
    )

    # Mail Transport
    GMAIL_USER: Optional[str] = Field(
        default=None,
        description="Mail account used to authenticate with the SMTP server"
    )
    GMAIL_APP_PASSWORD: Optional[SecretStr] = Field(
        default=None,
        description="App password for the mail account (16 characters, spaces ignored)"
    )
    GMAIL_FROM: Optional[str] = Field(
        default=None,
        description="Display From address of outgoing mail"
    )
    SMTP_HOST: str = Field(
        default=DEFAULT_SMTP_HOST,
        description="SMTP server host"
    )
    SMTP_PORT: int = Field(
        default=DEFAULT_SMTP_PORT,
        description="SMTP server port (STARTTLS)"
    )
    SMTP_TIMEOUT_SECONDS: Optional[float] = Field(
        default=None,
        description="SMTP socket timeout; transport default when unset"
    )

    @field_validator("CORS_ORIGINS")
    @classmethod
    def parse_cors_origins(cls, value: str) -> list:
        """Parse comma-separated CORS origins into list."""
        if value == "*":
            return ["*"]
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    @field_validator("CORS_METHODS")
    @classmethod
    def parse_cors_methods(cls, value: str) -> list:
        """Parse comma-separated CORS methods into list."""
        return [method.strip() for method in value.split(",") if method.strip()]

    @field_validator("GMAIL_APP_PASSWORD")
    @classmethod
    def strip_app_password(cls, value: Optional[SecretStr]) -> Optional[SecretStr]:
        """App passwords are often copied with separating spaces."""
        if value is None:
            return None
        stripped = value.get_secret_value().replace(" ", "")
        return SecretStr(stripped) if stripped else None

    @field_validator("GEMINI_API_KEY")
    @classmethod
    def drop_blank_api_key(cls, value: Optional[SecretStr]) -> Optional[SecretStr]:
        if value is None or not value.get_secret_value().strip():
            return None
        return value

    @property
    def gemini_api_key(self) -> Optional[str]:
        return self.GEMINI_API_KEY.get_secret_value() if self.GEMINI_API_KEY else None

    def mail_credentials(self) -> MailCredentials:
        """Mail account settings for the notification dispatcher."""
        return MailCredentials(
            user=self.GMAIL_USER or None,
            app_password=self.GMAIL_APP_PASSWORD.get_secret_value() if self.GMAIL_APP_PASSWORD else None,
            from_address=self.GMAIL_FROM or None,
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> APISettings:
    """
    Retrieve validated API settings.

    Settings are read once per process; call ``get_settings.cache_clear()``
    to reload them.

    Returns:
        Validated API settings object

    Raises:
        ValidationError: If configuration fails validation
    """
    return APISettings()
