"""Runtime settings — env vars and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``RETRY_AFTER_*`` prefix, nested with ``__``
                    (e.g. ``RETRY_AFTER_DATES__CENTURY_PIVOT=50``)
  3. Code defaults — baked into the section models

The settings object is frozen and read once per process via
:func:`get_settings`.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from retry_after.config.models import DateConfig


class RetryAfterSettings(BaseSettings):
    """Unified settings for the retry_after package.

    Attributes:
        dates: HTTP-date parsing options.
        verbose: Emit DEBUG logs from the ``retry_after`` logger.
        log_json: Render logs as JSON lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RETRY_AFTER_",
        "env_nested_delimiter": "__",
    }

    dates: DateConfig = Field(default_factory=DateConfig)
    verbose: bool = False
    log_json: bool = False


@lru_cache(maxsize=1)
def get_settings() -> RetryAfterSettings:
    """Return the process-wide settings, built on first use."""
    return RetryAfterSettings()


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
