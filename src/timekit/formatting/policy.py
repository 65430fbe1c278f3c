from __future__ import annotations

import datetime as _dt
import logging
from typing import Any, Optional

import pendulum

from timekit._exceptions import InvalidArgument
from timekit.config.settings import TimekitSettings
from timekit.tz import TimezoneRef, resolve_timezone

logger = logging.getLogger(__name__)


class FormattingPolicy:
    """
    Default format and default timezone used to render dates as text.

    The default timezone is resolved lazily: unless the settings name one,
    the host's local timezone is looked up on first read and cached until
    ``set_timezone`` or ``reset`` is called.
    """

    def __init__(self, settings: Optional[TimekitSettings] = None) -> None:
        self._settings: TimekitSettings = settings if settings is not None else TimekitSettings()
        self._default_format: str = self._settings.default_format
        self._timezone: Optional[TimezoneRef] = None
        self.reset()

    # ── default format ───────────────────────────────────────────────────

    def get_default_format(self) -> str:
        return self._default_format

    def set_default_format(self, fmt: str) -> None:
        if not fmt:
            raise InvalidArgument("Default format must not be empty.")
        logger.debug("Default format set to %r", fmt)
        self._default_format = fmt

    # ── default timezone ─────────────────────────────────────────────────

    def get_timezone(self) -> TimezoneRef:
        if self._timezone is None:
            self._timezone = resolve_timezone(None)
            logger.debug("Default timezone resolved to %s", self._timezone.name)
        return self._timezone

    def set_timezone(self, tz: Any) -> None:
        self._timezone = resolve_timezone(tz)
        logger.debug("Default timezone set to %s", self._timezone.name)

    @property
    def settings(self) -> TimekitSettings:
        return self._settings

    def reset(self) -> None:
        """Restore the defaults this policy was constructed with."""
        self._default_format = self._settings.default_format
        configured = self._settings.default_timezone
        self._timezone = resolve_timezone(configured) if configured is not None else None
        logger.debug("Formatting defaults reset")

    # ── rendering ────────────────────────────────────────────────────────

    def format(self, value: Any, fmt: Optional[str] = None) -> str:
        """
        Render *value* in the default timezone.

        *value* may be a timekit ``DateTime``, any ``datetime.datetime`` or
        a string pendulum can parse.  The format is, in order: *fmt*, the
        format stored on *value*, the policy default.
        """
        dt, stored = self._coerce(value)
        effective = fmt or stored or self._default_format
        return dt.in_timezone(self.get_timezone()).format(effective)

    def _coerce(self, value: Any) -> tuple[pendulum.DateTime, Optional[str]]:
        from timekit.dates import DateTime

        if isinstance(value, DateTime):
            return value.to_pendulum(), value.stored_format

        if isinstance(value, _dt.datetime):
            if value.tzinfo is None:
                return DateTime(value).to_pendulum(), None
            return pendulum.instance(value), None

        if isinstance(value, str):
            return DateTime(value).to_pendulum(), None

        raise InvalidArgument(f"Cannot format a {type(value).__name__}")

    def __repr__(self) -> str:
        tz = self._timezone.name if self._timezone is not None else None
        return (
            f"FormattingPolicy(default_format={self._default_format!r}, "
            f"timezone={tz!r})"
        )
