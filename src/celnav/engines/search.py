"""
celnav.engines.search
---
Bounded forward search for the next day with events, and conversion of
day-relative events into absolute datetimes or millisecond offsets.

The horizon is 365 days unless CELNAV_SEARCH_DAYS is set.
"""
from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from ..core.time import local_instant, millis_between, require_aware
from ..core.types import (
    AbsoluteEvent,
    Coordinate,
    EventDay,
    HorizonCorrection,
    RelativeEvent,
    ShortEvent,
    UpcomingEventDay,
)

log = logging.getLogger(__name__)

DEFAULT_SEARCH_DAYS = 365

DayFn = Callable[[Coordinate, HorizonCorrection, datetime], EventDay]


def search_days() -> int:
    raw = os.environ.get("CELNAV_SEARCH_DAYS", "").strip()
    if not raw:
        return DEFAULT_SEARCH_DAYS
    try:
        n = int(raw)
    except ValueError as e:
        raise ValueError(f"CELNAV_SEARCH_DAYS must be a positive integer, got {raw!r}") from e
    if n <= 0:
        raise ValueError(f"CELNAV_SEARCH_DAYS must be a positive integer, got {raw!r}")
    return n


def relative_events(day: EventDay, dt: datetime, offset_days: int) -> List[RelativeEvent]:
    """Events of the day offset_days after dt, as ms from dt; past events dropped."""
    day_dt = dt + timedelta(days=offset_days)
    out = []
    for e in day.events:
        millis = millis_between(dt, local_instant(day_dt, e.time))
        if millis >= 0:
            out.append(RelativeEvent(kind=e.kind, azimuth=e.azimuth, time=e.time, millis=millis))
    return out


def absolute_events(day: EventDay, dt: datetime, offset_days: int) -> List[AbsoluteEvent]:
    """Events of the day offset_days after dt, as aware datetimes in dt's zone; past events dropped."""
    day_dt = dt + timedelta(days=offset_days)
    out = []
    for e in day.events:
        when = local_instant(day_dt, e.time)
        if millis_between(dt, when) >= 0:
            out.append(AbsoluteEvent(kind=e.kind, azimuth=e.azimuth, when=when))
    return out


def _upcoming(
    day_fn: DayFn,
    convert: Callable[[EventDay, datetime, int], list],
    coordinate: Coordinate,
    correction: HorizonCorrection,
    dt: datetime,
) -> UpcomingEventDay:
    require_aware(dt)
    pre_state = day_fn(coordinate, correction, dt - timedelta(days=1)).state
    horizon = search_days()
    for i in range(horizon + 1):
        day = day_fn(coordinate, correction, dt + timedelta(days=i))
        if not day.events:
            continue
        events = convert(day, dt, i)
        if events:
            log.debug("next events for %s found %d day(s) after %s", coordinate, i, dt.isoformat())
            return UpcomingEventDay(events=tuple(events), day=day, pre_state=pre_state)
    log.debug("no events for %s within %d day(s) of %s", coordinate, horizon, dt.isoformat())
    return UpcomingEventDay()


def upcoming_relative(
    day_fn: DayFn, coordinate: Coordinate, correction: HorizonCorrection, dt: datetime
) -> UpcomingEventDay:
    return _upcoming(day_fn, relative_events, coordinate, correction, dt)


def upcoming_absolute(
    day_fn: DayFn, coordinate: Coordinate, correction: HorizonCorrection, dt: datetime
) -> UpcomingEventDay:
    return _upcoming(day_fn, absolute_events, coordinate, correction, dt)


def upcoming_short(
    day_fn: DayFn, coordinate: Coordinate, correction: HorizonCorrection, dt: datetime
) -> Optional[ShortEvent]:
    found = upcoming_relative(day_fn, coordinate, correction, dt)
    if not found.events:
        return None
    first = found.events[0]
    return ShortEvent(kind=first.kind, millis=first.millis)  # type: ignore[union-attr]
