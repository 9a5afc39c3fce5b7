"""
Formulary configuration using pydantic-settings.

All settings can be set via environment variables with FORMULARY_ prefix,
or via Docker secrets in /run/secrets directory.
"""

from importlib.metadata import version

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get version from package metadata
try:
    VERSION = version("formulary")
except Exception:
    VERSION = "0.0.0"


class Settings(BaseSettings):
    """
    Formulary configuration using pydantic-settings.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables with FORMULARY_ prefix
    2. .env file
    3. Docker secrets in /run/secrets directory
    """

    model_config = SettingsConfigDict(
        env_prefix="formulary_",
        env_file=".env",
        secrets_dir="/run/secrets",
        extra="ignore",
    )

    debug: bool = Field(default=False)

    # HTTP configuration
    http_timeout: float = Field(default=30.0)
    follow_redirects: bool = Field(default=True)
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows; U; Windows NT 6.0; en-US; rv:1.1) "
        f"formulary/{VERSION}"
    )
