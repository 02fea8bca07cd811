"""
Configuration management for the Portfolio API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import get_logger

logger = get_logger(__name__)

# Used to scope queries when no owner email is configured
OWNER_EMAIL_PLACEHOLDER = "default_value"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be set with the ``PORTFOLIO_`` prefix. The connection
    string, listen address, port and owner email also accept the plain
    names used by the container image (``MONGO_DB_URI``, ``AXUM_ADDRESS``,
    ``PORT``, ``USER_EMAIL``).
    """

    # Database
    mongo_db_uri: str = Field(
        validation_alias=AliasChoices("PORTFOLIO_MONGO_DB_URI", "MONGO_DB_URI"),
    )
    database_name: str = "personal"

    # Content owner used to scope every query
    user_email: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PORTFOLIO_USER_EMAIL", "USER_EMAIL"),
    )

    # API Settings
    api_host: str = Field(
        validation_alias=AliasChoices("PORTFOLIO_API_HOST", "AXUM_ADDRESS"),
    )
    api_port: int = Field(
        validation_alias=AliasChoices("PORTFOLIO_API_PORT", "PORT"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    greeting: str = "Hello, JM AAcera man!"

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PORTFOLIO_",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance; raises pydantic.ValidationError when required values are missing
settings = Settings()

if settings.debug:
    logger.debug(
        "Settings initialized",
        environment=settings.environment,
        database_name=settings.database_name,
    )


def get_owner_email() -> str:
    """Return the email every query is scoped to, or the placeholder when unset."""
    if settings.user_email:
        return settings.user_email
    logger.warning(
        "USER_EMAIL is not set, using default value",
        placeholder=OWNER_EMAIL_PLACEHOLDER,
    )
    return OWNER_EMAIL_PLACEHOLDER
