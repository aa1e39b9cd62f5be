"""
celnav.engines.day
---
One local calendar day of rise/set events for the Sun or the Moon.

The evaluated day is the local date of `dt`, with the UTC offset in force at
its local midnight; the clock time of `dt` does not matter. Event times count
elapsed time from that midnight instant.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Tuple

from ..core.types import (
    Coordinate,
    EquatorialPosition,
    Event,
    HorizonCorrection,
    LunarEventDay,
    SolarEventDay,
)
from ..reference.lunar_phase import age_of_moon, illumination
from ..reference.position import adjust_for_next_ascension, moon_position, sun_position
from ..reference.time_scales import TimeBasis, time_basis
from .classify import classify_lunar, classify_solar, day_lengths, meridian_crossings
from .crossing import find_crossings

log = logging.getLogger(__name__)

PositionFn = Callable[[float], EquatorialPosition]


def _scan(
    position: PositionFn,
    correction: HorizonCorrection,
    coordinate: Coordinate,
    basis: TimeBasis,
) -> Tuple[List[Event], float, float]:
    today = position(basis.days_since_epoch)
    tomorrow = adjust_for_next_ascension(today, position(basis.days_since_epoch + 1.0))
    events, first_v, last_v = find_crossings(correction, coordinate, basis.lst, today, tomorrow)
    return events, last_v, first_v


def solar_event_day(coordinate: Coordinate, correction: HorizonCorrection, dt: datetime) -> SolarEventDay:
    basis = time_basis(dt, coordinate.longitude)
    events, last_v, first_v = _scan(sun_position, correction, coordinate, basis)
    state = classify_solar(events, last_v, first_v)
    light, dark = day_lengths(events, state)
    meridian, antimeridian = meridian_crossings(events, state, light, dark)
    log.debug("sun %s %s: %s with %d event(s)", coordinate, basis.midnight.date(), state, len(events))
    return SolarEventDay(
        events=tuple(events),
        state=state,
        day_length=light,
        night_length=dark,
        meridian_crossing=meridian,
        antimeridian_crossing=antimeridian,
    )


def lunar_event_day(coordinate: Coordinate, correction: HorizonCorrection, dt: datetime) -> LunarEventDay:
    basis = time_basis(dt, coordinate.longitude)
    events, last_v, first_v = _scan(moon_position, correction, coordinate, basis)
    state = classify_lunar(events, last_v, first_v)
    visible, invisible = day_lengths(events, state)
    meridian, antimeridian = meridian_crossings(events, state, visible, invisible)

    age = age_of_moon(basis.jd + 1.0)
    log.debug("moon %s %s: %s with %d event(s), age %.2f d", coordinate, basis.midnight.date(), state, len(events), age)
    return LunarEventDay(
        events=tuple(events),
        state=state,
        visible_length=visible,
        invisible_length=invisible,
        meridian_crossing=meridian,
        antimeridian_crossing=antimeridian,
        age_in_days=age,
        illumination_percent=illumination(age),
    )
