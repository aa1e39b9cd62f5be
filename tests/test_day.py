# tests/test_day.py

import logging
import pytest
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from celnav.core.errors import NaiveDateTimeError
from celnav.core.time import MILLIS_PER_DAY
from celnav.core.types import Coordinate, HorizonCorrection
from celnav.engines import profiles
from celnav.engines.day import lunar_event_day, solar_event_day
from celnav.reference.lunar_phase import SYNODIC_MONTH


def tz(hours: float) -> timezone:
    return timezone(timedelta(hours=hours))


QUITO = Coordinate(-0.1807, -78.4678)
MURMANSK = Coordinate(68.9585, 33.0827)
BARROW = Coordinate(71.2906, -156.7886)
SOUTH_POLE = Coordinate(-90.0, 0.0)
NORTH_POLE = Coordinate(90.0, 0.0)
NEW_YORK = Coordinate(40.7128, -74.006)
GOLDEN = Coordinate(39.742476, -105.1786)


def minutes(t) -> float:
    return t.to_total_ms() / 60000.0


def test_nrel_spa_sunrise_sunset_golden():
    """
    NREL SPA (Reda & Andreas 2003), Appendix A.5: 2003-10-17, UTC-7, Golden CO.
    Sunrise 13:12:43 UT (06:12:43 local), sunset 00:20:19 UT next day (17:20:19 local).
    """
    day = solar_event_day(GOLDEN, profiles.SUNRISE, datetime(2003, 10, 17, 12, 0, tzinfo=tz(-7)))
    assert day.state == "RISEN_AND_SET"
    rise, set_ = day.events
    assert minutes(rise.time) == pytest.approx(6 * 60 + 12.7, abs=4.0)
    assert minutes(set_.time) == pytest.approx(17 * 60 + 20.3, abs=4.0)
    assert 95.0 < rise.azimuth < 110.0
    assert 250.0 < set_.azimuth < 265.0


def test_quito_equinox_day_is_about_twelve_hours():
    day = solar_event_day(QUITO, profiles.SUNRISE, datetime(2024, 3, 20, 12, 0, tzinfo=tz(-5)))
    assert day.state == "RISEN_AND_SET"
    assert [e.kind for e in day.events] == ["RISE", "SET"]
    assert 700.0 < minutes(day.day_length) < 740.0
    assert 11 * 60 < minutes(day.meridian_crossing) < 13 * 60


def test_equator_greenwich_equinox():
    day = solar_event_day(Coordinate(0.0, 0.0), profiles.SUNRISE, datetime(2023, 3, 20, 6, 0, tzinfo=timezone.utc))
    assert len(day.events) == 2
    assert 700.0 < minutes(day.day_length) < 740.0


@pytest.mark.parametrize(
    "coord, dt, state",
    [
        (SOUTH_POLE, datetime(2024, 12, 21, tzinfo=timezone.utc), "POLAR_DAY"),
        (SOUTH_POLE, datetime(2024, 6, 21, tzinfo=timezone.utc), "POLAR_NIGHT"),
        (NORTH_POLE, datetime(2024, 6, 21, tzinfo=timezone.utc), "POLAR_DAY"),
        (NORTH_POLE, datetime(2024, 12, 21, tzinfo=timezone.utc), "POLAR_NIGHT"),
        (MURMANSK, datetime(2024, 6, 21, tzinfo=tz(3)), "POLAR_DAY"),
        (MURMANSK, datetime(2024, 12, 21, tzinfo=tz(3)), "POLAR_NIGHT"),
        (MURMANSK, datetime(2025, 12, 1, tzinfo=tz(3)), "POLAR_NIGHT"),
        (BARROW, datetime(2024, 6, 21, tzinfo=tz(-8)), "POLAR_DAY"),
    ],
)
def test_polar_states(coord, dt, state):
    day = solar_event_day(coord, profiles.SUNRISE, dt)
    assert day.state == state
    assert day.events == ()
    assert day.meridian_crossing is None
    assert day.antimeridian_crossing is None
    if state == "POLAR_DAY":
        assert day.day_length.to_total_ms() == MILLIS_PER_DAY
        assert day.night_length.to_total_ms() == 0
    else:
        assert day.day_length.to_total_ms() == 0
        assert day.night_length.to_total_ms() == MILLIS_PER_DAY


def test_murmansk_sun_returns_in_january():
    day = solar_event_day(MURMANSK, profiles.SUNRISE, datetime(2025, 1, 12, tzinfo=tz(3)))
    assert day.state != "POLAR_NIGHT"
    assert any(e.kind == "RISE" for e in day.events)


@pytest.mark.parametrize(
    "coord, dt",
    [
        (QUITO, datetime(2024, 3, 20, tzinfo=tz(-5))),
        (GOLDEN, datetime(2024, 7, 4, tzinfo=tz(-6))),
        (MURMANSK, datetime(2025, 1, 20, tzinfo=tz(3))),
        (Coordinate(-33.87, 151.21), datetime(2024, 9, 1, tzinfo=tz(10))),
    ],
)
def test_lengths_sum_to_a_day_and_events_are_ordered(coord, dt):
    day = solar_event_day(coord, profiles.SUNRISE, dt)
    total = day.day_length.to_total_ms() + day.night_length.to_total_ms()
    assert total == MILLIS_PER_DAY
    ms = [e.time.to_total_ms() for e in day.events]
    assert ms == sorted(ms)
    assert all(0.0 <= e.azimuth <= 360.0 for e in day.events)


def test_clock_time_of_query_does_not_matter():
    a = solar_event_day(QUITO, profiles.SUNRISE, datetime(2024, 3, 20, 0, 0, tzinfo=tz(-5)))
    b = solar_event_day(QUITO, profiles.SUNRISE, datetime(2024, 3, 20, 12, 34, 56, tzinfo=tz(-5)))
    assert a == b


def test_clock_time_does_not_matter_on_a_dst_change_day():
    """US spring-forward, 2024-03-10: a query after the jump sees the same day as one before it."""
    ny = ZoneInfo("America/New_York")
    before = solar_event_day(NEW_YORK, profiles.SUNRISE, datetime(2024, 3, 10, 0, 30, tzinfo=ny))
    after = solar_event_day(NEW_YORK, profiles.SUNRISE, datetime(2024, 3, 10, 12, 0, tzinfo=ny))
    assert before == after
    # sunrise is about 07:10 EDT, i.e. about 06:10 of elapsed time since midnight EST
    assert 5 * 60 + 50 < minutes(before.events[0].time) < 6 * 60 + 30


def test_lower_threshold_gives_a_longer_day():
    dt = datetime(2024, 3, 20, tzinfo=tz(-5))
    plain = solar_event_day(QUITO, profiles.SUNRISE, dt)
    civil = solar_event_day(QUITO, HorizonCorrection(-6.0, False), dt)
    assert civil.day_length.to_total_ms() > plain.day_length.to_total_ms()


def test_naive_datetime_rejected():
    with pytest.raises(NaiveDateTimeError):
        solar_event_day(QUITO, profiles.SUNRISE, datetime(2024, 3, 20))


def test_lunar_day_fields_in_range():
    for k in range(0, 30, 3):
        dt = datetime(2024, 5, 1, tzinfo=tz(1)) + timedelta(days=k)
        day = lunar_event_day(Coordinate(52.52, 13.405), profiles.MOONRISE, dt)
        assert 0.0 <= day.age_in_days < SYNODIC_MONTH
        assert 0.0 <= day.illumination_percent <= 100.0
        assert 0 <= len(day.events) <= 3
        if day.visible_length is not None:
            total = day.visible_length.to_total_ms() + day.invisible_length.to_total_ms()
            assert total == MILLIS_PER_DAY


def test_lunar_phase_near_full_and_new_moon():
    # full moon 2024-04-23 23:49 UT, new moon 2024-04-08 18:21 UT
    full = lunar_event_day(QUITO, profiles.MOONRISE, datetime(2024, 4, 23, tzinfo=timezone.utc))
    new = lunar_event_day(QUITO, profiles.MOONRISE, datetime(2024, 4, 8, tzinfo=timezone.utc))
    assert full.illumination_percent > 95.0
    assert new.illumination_percent < 5.0
    assert abs(full.age_in_days - SYNODIC_MONTH / 2.0) < 1.5


def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="celnav.engines.day")
    solar_event_day(QUITO, profiles.SUNRISE, datetime(2024, 3, 20, tzinfo=tz(-5)))
    assert any("RISEN_AND_SET" in r.getMessage() for r in caplog.records)


def test_moon_at_the_pole_stays_up_or_down_for_days():
    """At the pole the Moon is up exactly while its declination is north, about half of each 27.3 d month."""
    start = datetime(2024, 5, 1, tzinfo=timezone.utc)
    days = [lunar_event_day(NORTH_POLE, profiles.MOONRISE, start + timedelta(days=k)) for k in range(28)]
    states = {d.state for d in days}
    assert "FULL_DAY" in states
    assert "FULL_NIGHT" in states
    for d in days:
        if d.state == "FULL_DAY":
            assert d.events == ()
            assert d.visible_length.to_total_ms() == MILLIS_PER_DAY
        if d.state == "FULL_NIGHT":
            assert d.events == ()
            assert d.invisible_length.to_total_ms() == MILLIS_PER_DAY
