"""Process-wide settings.

The only setting is the *disclose* switch, which decides whether source
locations appear in rendered errors.  It is read from the environment
(``TYG_TEMPLATE_DISCLOSE``) the first time :func:`get_settings` is
called and stays fixed for the rest of the process.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX: str = "TYG_TEMPLATE_"
DISCLOSE_ENV_VAR: str = f"{ENV_PREFIX}DISCLOSE"


class Settings(BaseSettings):
    """Read-only runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    disclose: bool = False
    """Render source file and line in every error that carries them."""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the settings for this process, loading them on first use."""
    return Settings()
