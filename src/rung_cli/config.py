"""Runtime configuration loaded from ``RUNG_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class RungSettings(BaseSettings):
    """rung-cli settings.

    Every field can be overridden through the environment, e.g.
    ``RUNG_API_URL=http://localhost:3000/api``.
    """

    model_config = SettingsConfigDict(env_prefix="RUNG_", extra="ignore")

    api_url: str = "https://app.rung.com.br/api"
    """Base URL of the Rung API (categories are read from ``/categories``)."""

    request_timeout: float = 10.0
    """Timeout in seconds for API calls."""

    log_level: str = "WARNING"
    """Default log level when ``--verbose`` is not given."""

    sdk_version: str = "1.0.0"
    """Version of rung-cli pinned in generated project manifests."""


@lru_cache(maxsize=1)
def get_settings() -> RungSettings:
    """Return the process-wide settings instance."""
    return RungSettings()
