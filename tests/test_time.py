# tests/test_time.py

import pytest
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from celnav.core.errors import NaiveDateTimeError, TimeFieldError
from celnav.core.time import (
    FULL_DAY,
    MILLIS_PER_DAY,
    ZERO,
    Time,
    local_midnight,
    local_instant,
    millis_between,
    require_aware,
)


@pytest.mark.parametrize(
    "fields, message",
    [
        (dict(hour=24), "Hour"),
        (dict(hour=-1), "Hour"),
        (dict(min=60), "Minute"),
        (dict(sec=60), "Second"),
        (dict(ms=1000), "Millisecond"),
    ],
)
def test_field_ranges(fields, message):
    with pytest.raises(TimeFieldError, match=message):
        Time(**fields)


def test_totals():
    t = Time(days=1, hour=2, min=3, sec=4, ms=5)
    assert t.to_total_minutes() == 1440 + 123
    assert t.to_total_ms() == MILLIS_PER_DAY + ((2 * 60 + 3) * 60 + 4) * 1000 + 5
    assert FULL_DAY.to_total_ms() == MILLIS_PER_DAY
    assert ZERO.to_total_ms() == 0


def test_from_total_ms_normalizes():
    assert Time.from_total_ms(MILLIS_PER_DAY + 61_001) == Time(days=1, hour=0, min=1, sec=1, ms=1)
    assert Time.from_total_ms(12 * 3_600_000) == Time(hour=12)


def test_negative_totals_borrow_from_days():
    t = Time.from_total_ms(-1)
    assert t == Time(days=-1, hour=23, min=59, sec=59, ms=999)
    assert t.to_total_ms() == -1


def test_ordering_matches_total_ms():
    values = [Time(hour=5), Time(days=-1, hour=23), Time(hour=4, min=59, sec=59, ms=999), Time(days=1)]
    assert sorted(values) == sorted(values, key=Time.to_total_ms)


def test_str():
    assert str(Time(hour=6, min=5, sec=9)) == "06:05:09"
    assert str(Time(days=1, hour=0, min=30)) == "+1d 00:30:00"
    assert str(Time(days=-1, hour=23)) == "-1d 23:00:00"


def test_local_day_helpers():
    tz = timezone(timedelta(hours=-5))
    dt = datetime(2024, 3, 20, 15, 30, 12, 345_678, tzinfo=tz)
    assert local_midnight(dt) == datetime(2024, 3, 20, tzinfo=tz)
    assert local_instant(dt, Time(hour=6, min=1)) == datetime(2024, 3, 20, 6, 1, tzinfo=tz)
    assert local_instant(dt, Time(days=1, hour=1)) == datetime(2024, 3, 21, 1, 0, tzinfo=tz)
    assert local_instant(dt, Time(hour=6)).tzinfo is tz
    assert millis_between(local_midnight(dt), dt) == ((15 * 60 + 30) * 60 + 12) * 1000 + 345
    assert millis_between(dt, local_midnight(dt)) < 0


def test_local_instant_counts_elapsed_time_across_dst():
    """
    US spring-forward, 2024-03-10: clocks jump from 02:00 EST to 03:00 EDT, so
    six elapsed hours after midnight is 07:00 on the wall clock.
    """
    ny = ZoneInfo("America/New_York")
    dt = datetime(2024, 3, 10, 0, 30, tzinfo=ny)
    six = local_instant(dt, Time(hour=6))
    assert six.utcoffset() == timedelta(hours=-4)
    assert (six.hour, six.minute) == (7, 0)
    assert six.astimezone(timezone.utc) == datetime(2024, 3, 10, 11, 0, tzinfo=timezone.utc)
    assert millis_between(local_midnight(dt), six) == 6 * 3_600_000


def test_require_aware():
    dt = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert require_aware(dt) is dt
    with pytest.raises(NaiveDateTimeError):
        require_aware(datetime(2024, 1, 1))
