"""
celnav.engines.ring
---
Light-phase ("ring") intervals between two solar thresholds.

Both thresholds are scanned for the same local day, their same-day events are
tagged LOWER/UPPER and merged by time, and the merged stream is paired into
tracks:

  * first event LOWER-SET or UPPER-RISE   -> [local midnight, event]
  * last event LOWER-RISE or UPPER-SET    -> [event, next midnight]
  * adjacent (LOWER-RISE, UPPER-RISE),
             (UPPER-SET, LOWER-SET),
             (LOWER-RISE, LOWER-SET)      -> [e_i, e_i+1]
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Literal, Optional, Tuple

from ..core.errors import HorizonOrderError
from ..core.time import MILLIS_PER_DAY, Time, local_instant, local_midnight, millis_between, require_aware
from ..core.types import (
    Coordinate,
    Event,
    EventPoint,
    EventTrack,
    RingProfile,
    SolarEventDay,
    SolarRingEventDay,
)
from .day import solar_event_day

log = logging.getLogger(__name__)

Edge = Literal["LOWER", "UPPER"]

_OPENING_PAIRS = (
    (("LOWER", "RISE"), ("UPPER", "RISE")),
    (("UPPER", "SET"), ("LOWER", "SET")),
    (("LOWER", "RISE"), ("LOWER", "SET")),
)


def check_profile(profile: RingProfile) -> None:
    lo = profile.lower.angle_from_horizon
    hi = profile.upper.angle_from_horizon
    if hi < lo:
        raise HorizonOrderError(
            "Invalid horizon corrections: "
            f"upper.angle_from_horizon ({hi}) must be >= lower.angle_from_horizon ({lo})"
        )


def _merge(lower: SolarEventDay, upper: SolarEventDay) -> List[Tuple[Edge, Event]]:
    tagged: List[Tuple[Edge, Event]] = [("LOWER", e) for e in lower.events]
    tagged += [("UPPER", e) for e in upper.events]
    tagged = [(edge, e) for edge, e in tagged if e.time.days == 0]
    tagged.sort(key=lambda p: p[1].time.to_total_ms())
    return tagged


def pair_tracks(dt: datetime, profile: RingProfile, merged: List[Tuple[Edge, Event]]) -> List[EventTrack]:
    """Pair a merged, time-sorted LOWER/UPPER stream into tracks on dt's local day."""
    tracks: List[EventTrack] = []
    if not merged:
        return tracks

    midnight = local_midnight(dt)
    edge, first = merged[0]
    if (edge, first.kind) in (("LOWER", "SET"), ("UPPER", "RISE")):
        tracks.append(
            EventTrack(
                kind=profile.kind,
                start=EventPoint("RISE", midnight),
                finish=EventPoint("SET", local_instant(dt, first.time), first.azimuth),
            )
        )

    edge, last = merged[-1]
    if (edge, last.kind) in (("LOWER", "RISE"), ("UPPER", "SET")):
        next_midnight = local_midnight(midnight + timedelta(days=1))
        tracks.append(
            EventTrack(
                kind=profile.kind,
                start=EventPoint("RISE", local_instant(dt, last.time), last.azimuth),
                finish=EventPoint("SET", next_midnight),
            )
        )

    for (e0, a), (e1, b) in zip(merged, merged[1:]):
        if ((e0, a.kind), (e1, b.kind)) in _OPENING_PAIRS:
            tracks.append(
                EventTrack(
                    kind=profile.kind,
                    start=EventPoint("RISE", local_instant(dt, a.time), a.azimuth),
                    finish=EventPoint("SET", local_instant(dt, b.time), b.azimuth),
                )
            )
    tracks.sort(key=lambda t: millis_between(midnight, t.start.when))
    return tracks


def _residuals(lower: SolarEventDay, ring_ms: int) -> Tuple[Optional[Time], Optional[Time]]:
    before = 0
    after = 0
    if lower.day_length is not None:
        day = lower.day_length.to_total_ms()
        before = day - ring_ms
        after = MILLIS_PER_DAY - day
    elif lower.night_length is not None:
        after = lower.night_length.to_total_ms()
        before = MILLIS_PER_DAY - after - ring_ms

    if before == 0 and after == 0:
        return lower.day_length, lower.night_length
    return Time.from_total_ms(before), Time.from_total_ms(after)


def ring_event_day(coordinate: Coordinate, profile: RingProfile, dt: datetime) -> SolarRingEventDay:
    """
    Tracks of one light phase on dt's local day.

    daylight_before_ring is the lower threshold's day length minus the ring;
    darkness_after_ring is the rest of the day. With no tracks both fall back to
    the lower threshold's own day/night lengths.
    """
    check_profile(profile)
    require_aware(dt)

    lower = solar_event_day(coordinate, profile.lower, dt)
    upper = solar_event_day(coordinate, profile.upper, dt)
    merged = _merge(lower, upper)
    tracks = pair_tracks(dt, profile, merged)
    ring_ms = sum(t.duration_ms() for t in tracks)
    log.debug("%s %s: %d merged event(s) -> %d track(s)", profile.kind, dt.date(), len(merged), len(tracks))

    if tracks:
        before, after = _residuals(lower, ring_ms)
    else:
        before, after = lower.day_length, lower.night_length
    return SolarRingEventDay(
        events=tuple(tracks),
        daylight_before_ring=before,
        ring_duration=Time.from_total_ms(ring_ms),
        darkness_after_ring=after,
    )
