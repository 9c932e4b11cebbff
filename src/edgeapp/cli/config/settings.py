"""Configuration settings for the edgeapp CLI."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from edgeapp.cli.core.constants import DEFAULT_API_BASE_URL, ENV_PREFIX


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    This uses Pydantic Settings for environment variable loading. Only
    EDGEAPP_-prefixed variables are read (e.g. EDGEAPP_API_KEY).
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    # API settings
    API_BASE_URL: str = DEFAULT_API_BASE_URL
    API_KEY: str = ""

    # General settings
    VERBOSE: bool = False


# Create a singleton settings instance
settings = Settings()
