from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional, Tuple, Union

from .errors import CoordinateRangeError, IlluminationRangeError
from .time import Time, millis_between

EventKind = Literal["RISE", "SET"]

SolarState = Literal[
    "RISEN_AND_SET",
    "SET_AND_RISEN",
    "ONLY_SET",
    "ONLY_RISEN",
    "POLAR_DAY",
    "POLAR_NIGHT",
    "SET_RISE_SET",
    "RISE_SET_RISE",
    "RISEN_IS_SET",
    "SET_IS_RISEN",
    "ERROR",
]

LunarState = Literal[
    "RISEN_AND_SET",
    "SET_AND_RISEN",
    "ONLY_SET",
    "ONLY_RISEN",
    "FULL_DAY",
    "FULL_NIGHT",
    "SET_RISE_SET",
    "RISE_SET_RISE",
    "RISEN_IS_SET",
    "SET_IS_RISEN",
    "ERROR",
]

TrackKind = Literal[
    "MAGIC_HOUR",
    "BLUE_HOUR",
    "CIVIL_TWILIGHT",
    "NAUTICAL_TWILIGHT",
    "ASTRONOMICAL_TWILIGHT",
    "POLY",
]


@dataclass(frozen=True)
class Coordinate:
    """Observer location in degrees (longitude positive East)."""
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise CoordinateRangeError("Latitude must be between -90.0 and 90.0 degrees inclusive.")
        if not -180.0 <= self.longitude <= 180.0:
            raise CoordinateRangeError("Longitude must be between -180.0 and 180.0 degrees inclusive.")


@dataclass(frozen=True)
class EquatorialPosition:
    """Right ascension and declination (radians)."""
    ra: float
    dec: float


@dataclass(frozen=True)
class HorizonCorrection:
    """
    Crossing threshold: signed offset from the horizon (degrees, negative below)
    and whether the 0.833 degree refraction allowance is applied.
    """
    angle_from_horizon: float = 0.0
    include_refraction: bool = True


@dataclass(frozen=True)
class RingProfile:
    """Pair of thresholds bounding a named light phase."""
    kind: TrackKind
    lower: HorizonCorrection
    upper: HorizonCorrection


@dataclass(frozen=True)
class Event:
    kind: EventKind
    azimuth: float
    time: Time


@dataclass(frozen=True)
class SolarEventDay:
    events: Tuple[Event, ...]
    state: SolarState
    day_length: Optional[Time] = None
    night_length: Optional[Time] = None
    meridian_crossing: Optional[Time] = None
    antimeridian_crossing: Optional[Time] = None


@dataclass(frozen=True)
class LunarEventDay:
    events: Tuple[Event, ...]
    state: LunarState
    visible_length: Optional[Time] = None
    invisible_length: Optional[Time] = None
    meridian_crossing: Optional[Time] = None
    antimeridian_crossing: Optional[Time] = None
    age_in_days: float = 0.0
    illumination_percent: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.illumination_percent <= 100.0:
            raise IlluminationRangeError("Illumination percent must be between 0 and 100 inclusive.")


EventDay = Union[SolarEventDay, LunarEventDay]


@dataclass(frozen=True)
class EventPoint:
    kind: EventKind
    when: datetime
    azimuth: Optional[float] = None


@dataclass(frozen=True)
class EventTrack:
    kind: TrackKind
    start: EventPoint
    finish: EventPoint

    def duration_ms(self) -> int:
        return millis_between(self.start.when, self.finish.when)


@dataclass(frozen=True)
class SolarRingEventDay:
    events: Tuple[EventTrack, ...]
    daylight_before_ring: Optional[Time]
    ring_duration: Time
    darkness_after_ring: Optional[Time]


@dataclass(frozen=True)
class RelativeEvent:
    kind: EventKind
    azimuth: float
    time: Time
    millis: int


@dataclass(frozen=True)
class AbsoluteEvent:
    kind: EventKind
    azimuth: float
    when: datetime


@dataclass(frozen=True)
class UpcomingEventDay:
    """
    First day (from the query day on) with events not yet passed.

    day is the underlying day record; pre_state classifies the day before the query.
    """
    events: Tuple[Union[RelativeEvent, AbsoluteEvent], ...] = ()
    day: Optional[EventDay] = None
    pre_state: Optional[str] = None


@dataclass(frozen=True)
class ShortEvent:
    kind: EventKind
    millis: int
