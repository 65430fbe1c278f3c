"""
tests/formatting/test_policy.py

Covers:
  - Default format getter/setter
  - Lazy default timezone, caching and explicit setting
  - Format precedence: explicit → stored on the value → policy default
  - Rendering normalised to the default timezone
  - String and datetime inputs
  - reset() and the module-level facade
"""

import datetime

import pendulum
import pytest

from timekit import formatting
from timekit.config import ATOM, TimekitSettings
from timekit.dates import DateTime, InvalidArgument, InvalidTimezone
from timekit.formatting import FormattingPolicy


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def utc_policy():
    return FormattingPolicy(TimekitSettings(default_format=ATOM, default_timezone="UTC"))


@pytest.fixture
def lazy_policy():
    return FormattingPolicy(TimekitSettings(default_format=ATOM, default_timezone=None))


@pytest.fixture
def paris_morning():
    return DateTime.create(2020, 5, 17, 8, 30, 0, timezone="Europe/Paris")


# ── Default format ────────────────────────────────────────────────────────────

class TestDefaultFormat:

    def test_initial_is_atom(self, lazy_policy):
        assert lazy_policy.get_default_format() == ATOM

    def test_from_settings(self):
        policy = FormattingPolicy(TimekitSettings(default_format="YYYY"))
        assert policy.get_default_format() == "YYYY"

    def test_set(self, lazy_policy):
        lazy_policy.set_default_format("DD.MM.YYYY")
        assert lazy_policy.get_default_format() == "DD.MM.YYYY"

    def test_empty_rejected(self, lazy_policy):
        with pytest.raises(InvalidArgument):
            lazy_policy.set_default_format("")


# ── Default timezone ──────────────────────────────────────────────────────────

class TestDefaultTimezone:

    def test_lazily_resolves_host_zone(self, lazy_policy, host_timezone):
        assert lazy_policy.get_timezone().name == host_timezone

    def test_cached_after_first_read(self, lazy_policy, monkeypatch):
        calls = []

        def fake_local():
            calls.append(1)
            return pendulum.timezone("Europe/Paris")

        monkeypatch.setattr(pendulum, "local_timezone", fake_local)
        first = lazy_policy.get_timezone()
        second = lazy_policy.get_timezone()
        assert first is second
        assert len(calls) == 1

    def test_from_settings(self, utc_policy):
        assert utc_policy.get_timezone().name == "UTC"

    def test_set_by_name(self, lazy_policy):
        lazy_policy.set_timezone("Europe/Paris")
        assert lazy_policy.get_timezone().name == "Europe/Paris"

    def test_set_none_resolves_host_zone(self, utc_policy, host_timezone):
        utc_policy.set_timezone(None)
        assert utc_policy.get_timezone().name == host_timezone

    def test_set_invalid_raises_and_keeps_previous(self, utc_policy):
        with pytest.raises(InvalidTimezone):
            utc_policy.set_timezone("Not/AZone")
        assert utc_policy.get_timezone().name == "UTC"

    def test_invalid_settings_timezone_raises(self):
        with pytest.raises(InvalidTimezone):
            FormattingPolicy(TimekitSettings(default_timezone="Not/AZone"))


# ── Format precedence ─────────────────────────────────────────────────────────

class TestPrecedence:

    def test_explicit_format_wins(self, utc_policy, paris_morning):
        paris_morning.set_format("DD/MM")
        utc_policy.set_default_format("HH:mm")
        assert utc_policy.format(paris_morning, "YYYY") == "2020"

    def test_stored_format_beats_default(self, utc_policy, paris_morning):
        paris_morning.set_format("YYYY/MM")
        assert utc_policy.format(paris_morning) == "2020/05"

    def test_default_when_nothing_stored(self, utc_policy, paris_morning):
        assert utc_policy.format(paris_morning) == "2020-05-17T06:30:00+00:00"

    def test_changed_default_is_used(self, utc_policy, paris_morning):
        utc_policy.set_default_format("HH:mm")
        assert utc_policy.format(paris_morning) == "06:30"


# ── Timezone normalisation ────────────────────────────────────────────────────

class TestNormalisation:

    def test_renders_in_default_zone(self, paris_morning):
        policy = FormattingPolicy(TimekitSettings(default_timezone="Asia/Tokyo"))
        assert policy.format(paris_morning) == "2020-05-17T15:30:00+09:00"

    def test_does_not_touch_value(self, utc_policy, paris_morning):
        utc_policy.format(paris_morning)
        assert paris_morning.timezone_name == "Europe/Paris"
        assert paris_morning.hour == 8

    def test_fixed_offset_default(self, paris_morning):
        policy = FormattingPolicy(TimekitSettings(default_timezone="-03:00"))
        assert policy.format(paris_morning, "HH:mm Z") == "03:30 -03:00"


# ── Input types ───────────────────────────────────────────────────────────────

class TestInputs:

    def test_string(self, lazy_policy):
        assert lazy_policy.format("2020-01-01T00:00:00+00:00") == "2020-01-01T09:00:00+09:00"

    def test_string_without_offset_read_in_host_zone(self, utc_policy):
        assert utc_policy.format("2020-01-01 09:00:00") == "2020-01-01T00:00:00+00:00"

    def test_unparseable_string(self, utc_policy):
        with pytest.raises(InvalidArgument):
            utc_policy.format("definitely not a date")

    def test_aware_datetime(self, utc_policy):
        value = datetime.datetime(2020, 1, 1, 12, tzinfo=datetime.timezone(datetime.timedelta(hours=2)))
        assert utc_policy.format(value, "HH:mm") == "10:00"

    def test_naive_datetime_read_in_host_zone(self, utc_policy):
        assert utc_policy.format(datetime.datetime(2020, 1, 1, 9), "HH:mm") == "00:00"

    def test_pendulum_datetime(self, utc_policy):
        value = pendulum.datetime(2020, 1, 1, 12, tz="Europe/Paris")
        assert utc_policy.format(value, "HH:mm") == "11:00"

    @pytest.mark.parametrize("value", [42, None, datetime.date(2020, 1, 1)])
    def test_unsupported_types(self, utc_policy, value):
        with pytest.raises(InvalidArgument):
            utc_policy.format(value)


# ── Reset ─────────────────────────────────────────────────────────────────────

class TestReset:

    def test_reset_restores_settings(self, utc_policy):
        utc_policy.set_default_format("YYYY")
        utc_policy.set_timezone("Europe/Paris")
        utc_policy.reset()
        assert utc_policy.get_default_format() == ATOM
        assert utc_policy.get_timezone().name == "UTC"

    def test_reset_clears_lazy_cache(self, lazy_policy, monkeypatch):
        assert lazy_policy.get_timezone().name == "Asia/Tokyo"
        monkeypatch.setattr(pendulum, "local_timezone", lambda: pendulum.timezone("Europe/Paris"))
        assert lazy_policy.get_timezone().name == "Asia/Tokyo"
        lazy_policy.reset()
        assert lazy_policy.get_timezone().name == "Europe/Paris"

    def test_repr(self, utc_policy):
        assert "UTC" in repr(utc_policy)


# ── Module facade ─────────────────────────────────────────────────────────────

class TestModuleFacade:

    def test_uses_default_policy(self, default_policy):
        formatting.set_default_format("YYYY")
        assert default_policy.get_default_format() == "YYYY"
        assert formatting.get_default_format() == "YYYY"

    def test_timezone_round_trip(self):
        formatting.set_timezone("Europe/Paris")
        assert formatting.get_timezone().name == "Europe/Paris"

    def test_set_timezone_invalid(self):
        with pytest.raises(InvalidTimezone):
            formatting.set_timezone("Not/AZone")

    def test_set_timezone_none(self, host_timezone):
        formatting.set_timezone("UTC")
        formatting.set_timezone(None)
        assert formatting.get_timezone().name == host_timezone

    def test_format(self):
        formatting.set_timezone("UTC")
        assert formatting.format("2020-01-01T09:00:00+09:00", "YYYY-MM-DD HH:mm") == "2020-01-01 00:00"

    def test_resolve_timezone_exported(self):
        assert formatting.resolve_timezone("UTC").name == "UTC"

    def test_reset_defaults(self):
        formatting.set_default_format("YYYY")
        formatting.reset_defaults()
        assert formatting.get_default_format() == ATOM
