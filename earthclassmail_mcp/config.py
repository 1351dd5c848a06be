"""Runtime configuration for the Earth Class Mail MCP server."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

# ─── Configuration ───────────────────────────────────────────────────────────

BASE_URL = "https://api.earthclassmail.com/v1"
API_KEY_ENV = "EARTHCLASSMAIL_API_KEY"
API_KEY_HELP = "Get your API key from: Earth Class Mail → Settings → Integrations → Generate Key"

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 50

# Single attempt, no client-side deadline.
REQUEST_TIMEOUT = None


class ConfigError(Exception):
    """Raised when the server cannot be configured from the environment."""


class Settings(BaseModel):
    """Immutable process configuration, built once at startup."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    api_key: str = Field(..., min_length=1, repr=False)
    base_url: str = BASE_URL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read the API credential from the environment.

    Raises:
        ConfigError: if the credential variable is unset or blank.
    """
    env = os.environ if environ is None else environ
    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} environment variable is required")
    return Settings(api_key=api_key)
