"""Environment-derived settings for the LearningSuite MCP server."""

from __future__ import annotations

from pydantic import SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from learningsuite_mcp_server.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.learningsuite.io/api/v1"


class Settings(BaseSettings):
    """Process configuration read from ``LEARNINGSUITE_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEARNINGSUITE_",
        env_file=".env",
        extra="ignore",
    )

    api_key: SecretStr
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Build :class:`Settings`, converting a missing API key into a config error."""
    try:
        settings = Settings()
    except ValidationError as error:
        raise ConfigurationError(
            "LEARNINGSUITE_API_KEY environment variable is required"
        ) from error
    if not settings.api_key.get_secret_value().strip():
        raise ConfigurationError(
            "LEARNINGSUITE_API_KEY environment variable is required"
        )
    return settings
