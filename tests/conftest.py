"""Shared pytest fixtures for timekit tests."""

from __future__ import annotations

import pendulum
import pytest

from timekit import formatting
from timekit.config import ATOM, TimekitSettings
from timekit.formatting import FormattingPolicy

# Fixed host timezone for every test: no DST, far from UTC.
HOST_TZ = "Asia/Tokyo"


@pytest.fixture(autouse=True)
def host_timezone(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the host's local timezone."""
    tz = pendulum.timezone(HOST_TZ)
    monkeypatch.setattr(pendulum, "local_timezone", lambda: tz)
    return HOST_TZ


@pytest.fixture(autouse=True)
def default_policy(monkeypatch: pytest.MonkeyPatch, host_timezone: str) -> FormattingPolicy:
    """A fresh process-wide policy, independent of TIMEKIT_* env vars."""
    policy = FormattingPolicy(TimekitSettings(default_format=ATOM, default_timezone=None))
    monkeypatch.setattr(formatting, "default_policy", policy)
    return policy
