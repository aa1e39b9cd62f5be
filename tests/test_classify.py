# tests/test_classify.py

import pytest

from celnav.core.time import FULL_DAY, ZERO, Time
from celnav.core.types import Event
from celnav.engines.classify import (
    classify_lunar,
    classify_solar,
    day_lengths,
    meridian_crossings,
)


def ev(kind: str, hour: int, minute: int = 0) -> Event:
    return Event(kind=kind, azimuth=90.0 if kind == "RISE" else 270.0, time=Time(hour=hour, min=minute))


@pytest.mark.parametrize(
    "events, state",
    [
        ([ev("RISE", 6), ev("SET", 18)], "RISEN_AND_SET"),
        ([ev("SET", 2), ev("RISE", 5)], "SET_AND_RISEN"),
        ([ev("SET", 9)], "ONLY_SET"),
        ([ev("RISE", 9)], "ONLY_RISEN"),
        ([ev("RISE", 1), ev("SET", 12), ev("RISE", 23)], "RISE_SET_RISE"),
        ([ev("SET", 1), ev("RISE", 12), ev("SET", 23)], "SET_RISE_SET"),
        ([ev("RISE", 1), ev("RISE", 2)], "ERROR"),
        ([ev("RISE", 1), ev("RISE", 2), ev("SET", 3)], "ERROR"),
        ([ev("RISE", 1), ev("SET", 2), ev("RISE", 3), ev("SET", 4)], "ERROR"),
    ],
)
def test_classify_event_patterns(events, state):
    assert classify_solar(events, 1.0, -1.0) == state
    assert classify_lunar(events, 1.0, -1.0) == state


def test_no_events_uses_end_of_day_vertical():
    assert classify_solar([], 0.3, 0.3) == "POLAR_DAY"
    assert classify_solar([], -0.3, -0.3) == "POLAR_NIGHT"
    assert classify_lunar([], 0.3, 0.3) == "FULL_DAY"
    assert classify_lunar([], -0.3, -0.3) == "FULL_NIGHT"
    assert classify_solar([], 0.0, 0.0) == "ERROR"


def test_coincident_rise_and_set_uses_midnight_vertical():
    events = [ev("RISE", 12), ev("SET", 12)]
    assert classify_solar(events, 0.0, 0.5) == "SET_IS_RISEN"
    assert classify_solar(events, 0.0, -0.5) == "RISEN_IS_SET"
    assert classify_solar(events, 0.0, 0.0) == "ERROR"


def test_rise_then_set_lengths_and_midpoints():
    events = [ev("RISE", 6), ev("SET", 18)]
    light, dark = day_lengths(events, "RISEN_AND_SET")
    assert light == Time(hour=12)
    assert dark == Time(hour=12)
    meridian, anti = meridian_crossings(events, "RISEN_AND_SET", light, dark)
    assert meridian == Time(hour=12)
    assert anti == Time(hour=0)


def test_set_then_rise_wraps_meridian():
    events = [ev("SET", 2), ev("RISE", 5)]
    light, dark = day_lengths(events, "SET_AND_RISEN")
    assert light == Time(hour=21)
    assert dark == Time(hour=3)
    meridian, anti = meridian_crossings(events, "SET_AND_RISEN", light, dark)
    assert meridian == Time(hour=13, min=30)
    assert anti == Time(hour=3, min=30)


def test_lengths_always_cover_the_day():
    for events in (
        [ev("RISE", 7, 13), ev("SET", 19, 2)],
        [ev("SET", 3, 40)],
        [ev("RISE", 22, 10)],
        [ev("RISE", 1), ev("SET", 12, 30), ev("RISE", 23, 59)],
    ):
        light, dark = day_lengths(events, "ANY")
        assert light.to_total_ms() + dark.to_total_ms() == FULL_DAY.to_total_ms()


def test_lengths_without_events():
    assert day_lengths([], "POLAR_DAY") == (FULL_DAY, ZERO)
    assert day_lengths([], "FULL_NIGHT") == (ZERO, FULL_DAY)
    assert day_lengths([], "ERROR") == (None, None)


def test_midpoints_only_for_two_event_days():
    events = [ev("SET", 9)]
    light, dark = day_lengths(events, "ONLY_SET")
    assert meridian_crossings(events, "ONLY_SET", light, dark) == (None, None)
