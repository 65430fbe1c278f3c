"""Process-wide defaults, from env vars and code defaults.

Priority chain (highest to lowest):
  1. Init kwargs
  2. Env vars: ``TIMEKIT_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings

# pendulum tokens; text in brackets is literal.
ATOM = "YYYY-MM-DD[T]HH:mm:ssZ"


class TimekitSettings(BaseSettings):
    """Defaults consumed by :class:`timekit.formatting.FormattingPolicy`.

    Attributes:
        default_format: Format used when neither the call nor the value
            supplies one.
        default_timezone: Timezone identifier or offset to render in.
            None means the host's local timezone, looked up lazily.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TIMEKIT_",
    }

    default_format: str = ATOM
    default_timezone: str | None = None

    verbose: bool = False
    log_json: bool = False

    @field_validator("default_format")
    @classmethod
    def _non_empty_format(cls, value: str) -> str:
        if not value:
            raise ValueError("default_format must not be empty")
        return value

    @field_validator("default_timezone")
    @classmethod
    def _blank_timezone_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value
