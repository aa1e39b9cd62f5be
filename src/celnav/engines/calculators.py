"""
celnav.engines.calculators
---
Solar and lunar calculators: one object per body, sharing the search and
conversion layer, differing in the position model, the default threshold and
the day record they return.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union

from ..core.types import (
    Coordinate,
    HorizonCorrection,
    LunarEventDay,
    RingProfile,
    ShortEvent,
    SolarEventDay,
    SolarRingEventDay,
    TrackKind,
    UpcomingEventDay,
)
from . import profiles
from .day import lunar_event_day, solar_event_day
from .ring import ring_event_day
from .search import DayFn, upcoming_absolute, upcoming_relative, upcoming_short


@dataclass(frozen=True)
class _BodyCalculator:
    body: str
    default_correction: HorizonCorrection
    day_fn: DayFn = field(repr=False)

    def info(self) -> Dict[str, Any]:
        return {
            "body": self.body,
            "default_correction": {
                "angle_from_horizon": self.default_correction.angle_from_horizon,
                "include_refraction": self.default_correction.include_refraction,
            },
        }

    def _corr(self, correction: Optional[HorizonCorrection]) -> HorizonCorrection:
        return self.default_correction if correction is None else correction

    def calculate_event_day(
        self, coordinate: Coordinate, dt: datetime, correction: Optional[HorizonCorrection] = None
    ) -> Union[SolarEventDay, LunarEventDay]:
        return self.day_fn(coordinate, self._corr(correction), dt)

    def find_upcoming_relative_event_day(
        self, coordinate: Coordinate, dt: datetime, correction: Optional[HorizonCorrection] = None
    ) -> UpcomingEventDay:
        return upcoming_relative(self.day_fn, coordinate, self._corr(correction), dt)

    def find_upcoming_absolute_event_day(
        self, coordinate: Coordinate, dt: datetime, correction: Optional[HorizonCorrection] = None
    ) -> UpcomingEventDay:
        return upcoming_absolute(self.day_fn, coordinate, self._corr(correction), dt)

    def find_upcoming_relative_short_event(
        self, coordinate: Coordinate, dt: datetime, correction: Optional[HorizonCorrection] = None
    ) -> Optional[ShortEvent]:
        return upcoming_short(self.day_fn, coordinate, self._corr(correction), dt)


@dataclass(frozen=True)
class SolarCalculator(_BodyCalculator):
    body: str = "sun"
    default_correction: HorizonCorrection = profiles.SUNRISE
    day_fn: DayFn = field(default=solar_event_day, repr=False)

    def calculate_ring_event_day(
        self,
        coordinate: Coordinate,
        dt: datetime,
        lower: HorizonCorrection,
        upper: HorizonCorrection,
        kind: TrackKind = "POLY",
    ) -> SolarRingEventDay:
        return ring_event_day(coordinate, RingProfile(kind, lower, upper), dt)

    def ring(self, coordinate: Coordinate, dt: datetime, profile: RingProfile) -> SolarRingEventDay:
        return ring_event_day(coordinate, profile, dt)

    def magic_hour(self, coordinate: Coordinate, dt: datetime) -> SolarRingEventDay:
        return ring_event_day(coordinate, profiles.MAGIC_HOUR, dt)

    def blue_hour(self, coordinate: Coordinate, dt: datetime) -> SolarRingEventDay:
        return ring_event_day(coordinate, profiles.BLUE_HOUR, dt)

    def civil_twilight(self, coordinate: Coordinate, dt: datetime) -> SolarRingEventDay:
        return ring_event_day(coordinate, profiles.CIVIL_TWILIGHT, dt)

    def nautical_twilight(self, coordinate: Coordinate, dt: datetime) -> SolarRingEventDay:
        return ring_event_day(coordinate, profiles.NAUTICAL_TWILIGHT, dt)

    def astronomical_twilight(self, coordinate: Coordinate, dt: datetime) -> SolarRingEventDay:
        return ring_event_day(coordinate, profiles.ASTRONOMICAL_TWILIGHT, dt)


@dataclass(frozen=True)
class LunarCalculator(_BodyCalculator):
    body: str = "moon"
    default_correction: HorizonCorrection = profiles.MOONRISE
    day_fn: DayFn = field(default=lunar_event_day, repr=False)


def make_calculator(name: str) -> _BodyCalculator:
    if name == "solar":
        return SolarCalculator()
    if name == "lunar":
        return LunarCalculator()
    raise KeyError(f"Unknown calculator kind '{name}'")
