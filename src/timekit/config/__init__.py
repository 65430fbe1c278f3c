"""
timekit.config
~~~~~~~~~~~~~~

Process settings and logging setup.

Settings are read from ``TIMEKIT_*`` environment variables on top of
code-baked defaults::

    TIMEKIT_DEFAULT_FORMAT="YYYY-MM-DD HH:mm"
    TIMEKIT_DEFAULT_TIMEZONE=Europe/Paris

Public API
----------
TimekitSettings    Frozen pydantic-settings model.
ATOM               ISO-8601 with UTC offset, the default render format.
configure_logging  Route timekit's structlog output to stderr.
"""

from __future__ import annotations

from timekit.config.logging import configure_logging
from timekit.config.settings import ATOM, TimekitSettings

__all__ = [
    "ATOM",
    "TimekitSettings",
    "configure_logging",
]
