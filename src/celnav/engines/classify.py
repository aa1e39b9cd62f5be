"""
celnav.engines.classify
---
Turns a day's crossing list into a horizon-crossing state and derives the
light/dark durations and the meridian/antimeridian times.

Solar and lunar days share one grammar; only the names of the two
no-crossing states differ (POLAR_DAY/POLAR_NIGHT vs FULL_DAY/FULL_NIGHT).
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..core.time import FULL_DAY, MILLIS_PER_DAY, ZERO, Time
from ..core.types import Event, LunarState, SolarState


def _classify(
    events: Sequence[Event],
    current_vertical: float,
    previous_vertical: float,
    always_up: str,
    always_down: str,
) -> str:
    n = len(events)
    if n == 0:
        if current_vertical > 0:
            return always_up
        if current_vertical < 0:
            return always_down
        return "ERROR"

    if n == 1:
        return "ONLY_SET" if events[0].kind == "SET" else "ONLY_RISEN"

    if n == 2:
        first, second = events
        t0 = first.time.to_total_ms()
        t1 = second.time.to_total_ms()
        if first.kind == "RISE" and second.kind == "SET" and t0 < t1:
            return "RISEN_AND_SET"
        if first.kind == "SET" and second.kind == "RISE" and t0 < t1:
            return "SET_AND_RISEN"
        if first.kind != second.kind and t0 == t1:
            if previous_vertical > 0:
                return "SET_IS_RISEN"
            if previous_vertical < 0:
                return "RISEN_IS_SET"
        return "ERROR"

    if n == 3:
        a, b, c = (e.kind for e in events)
        if a == "RISE" and c == "RISE" and b != "RISE":
            return "RISE_SET_RISE"
        if a == "SET" and c == "SET" and b != "SET":
            return "SET_RISE_SET"
        return "ERROR"

    return "ERROR"


def classify_solar(events: Sequence[Event], current_vertical: float, previous_vertical: float) -> SolarState:
    """
    current_vertical: vertical position at the end of the day (hour 24).
    previous_vertical: vertical position at local midnight; breaks ties between
    coincident RISE and SET.
    """
    return _classify(events, current_vertical, previous_vertical, "POLAR_DAY", "POLAR_NIGHT")  # type: ignore[return-value]


def classify_lunar(events: Sequence[Event], current_vertical: float, previous_vertical: float) -> LunarState:
    return _classify(events, current_vertical, previous_vertical, "FULL_DAY", "FULL_NIGHT")  # type: ignore[return-value]


def day_lengths(events: Sequence[Event], state: str) -> Tuple[Optional[Time], Optional[Time]]:
    """
    (light, dark) over the local day.

    Walks the events in order, assuming the body is below the threshold before
    a leading RISE and above it before a leading SET. Without events only the
    always-up/always-down states have lengths.
    """
    if not events:
        if state in ("POLAR_DAY", "FULL_DAY"):
            return FULL_DAY, ZERO
        if state in ("POLAR_NIGHT", "FULL_NIGHT"):
            return ZERO, FULL_DAY
        return None, None

    prev = events[0].time.to_total_ms()
    is_up = events[0].kind == "RISE"
    light, dark = (0, prev) if is_up else (prev, 0)

    for e in events[1:]:
        cur = e.time.to_total_ms()
        if is_up:
            light += cur - prev
        else:
            dark += cur - prev
        is_up = not is_up
        prev = cur

    tail = MILLIS_PER_DAY - events[-1].time.to_total_ms()
    if events[-1].kind == "SET":
        dark += tail
    else:
        light += tail
    return Time.from_total_ms(light), Time.from_total_ms(dark)


def meridian_crossings(
    events: Sequence[Event],
    state: str,
    light: Optional[Time],
    dark: Optional[Time],
) -> Tuple[Optional[Time], Optional[Time]]:
    """
    (meridian, antimeridian) as midpoints of the light and dark spans.

    Defined only for the two canonical two-event days; spans that would start
    before midnight wrap to the end of the day.
    """
    if len(events) != 2:
        return None, None

    t0 = events[0].time.to_total_ms()
    first = events[0].kind

    meridian: Optional[Time] = None
    antimeridian: Optional[Time] = None
    if first == "RISE" and state == "RISEN_AND_SET":
        if light is not None:
            meridian = Time.from_total_ms(t0 + light.to_total_ms() // 2)
        if dark is not None:
            half = dark.to_total_ms() // 2
            antimeridian = Time.from_total_ms(t0 - half if t0 - half >= 0 else MILLIS_PER_DAY - half)
    elif first == "SET" and state == "SET_AND_RISEN":
        if light is not None:
            half = light.to_total_ms() // 2
            meridian = Time.from_total_ms(t0 - half if t0 - half >= 0 else MILLIS_PER_DAY - half)
        if dark is not None:
            antimeridian = Time.from_total_ms(t0 + dark.to_total_ms() // 2)
    return meridian, antimeridian
