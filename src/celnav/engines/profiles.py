"""
celnav.engines.profiles
---
Named horizon thresholds and the ring (light-phase) profiles built from them.

Angles are degrees from the geometric horizon, negative below it. Only the
plain sunrise threshold and the upper edge of civil twilight carry the
refraction allowance.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..core.types import HorizonCorrection, RingProfile

SUNRISE = HorizonCorrection(0.0, True)
MOONRISE = HorizonCorrection(0.0, False)

MAGIC_HOUR = RingProfile("MAGIC_HOUR", HorizonCorrection(-4.0, False), HorizonCorrection(6.0, False))
BLUE_HOUR = RingProfile("BLUE_HOUR", HorizonCorrection(-6.0, False), HorizonCorrection(-4.0, False))
CIVIL_TWILIGHT = RingProfile("CIVIL_TWILIGHT", HorizonCorrection(-6.0, False), HorizonCorrection(0.0, True))
NAUTICAL_TWILIGHT = RingProfile("NAUTICAL_TWILIGHT", HorizonCorrection(-12.0, False), HorizonCorrection(-6.0, False))
ASTRONOMICAL_TWILIGHT = RingProfile(
    "ASTRONOMICAL_TWILIGHT", HorizonCorrection(-18.0, False), HorizonCorrection(-12.0, False)
)

STANDARD_CORRECTIONS: Dict[str, HorizonCorrection] = {
    "sunrise": SUNRISE,
    "moonrise": MOONRISE,
}

STANDARD_RINGS: Dict[str, RingProfile] = {
    "magic_hour": MAGIC_HOUR,
    "blue_hour": BLUE_HOUR,
    "civil_twilight": CIVIL_TWILIGHT,
    "nautical_twilight": NAUTICAL_TWILIGHT,
    "astronomical_twilight": ASTRONOMICAL_TWILIGHT,
}


@dataclass
class ProfileRegistry:
    _rings: Dict[str, RingProfile] = field(default_factory=lambda: dict(STANDARD_RINGS))

    def get(self, name: str) -> RingProfile:
        if name not in self._rings:
            raise KeyError(f"Unknown ring profile '{name}'. Available: {sorted(self._rings)}")
        return self._rings[name]

    def list(self) -> List[str]:
        return sorted(self._rings.keys())

    def register(self, name: str, profile: RingProfile, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._rings):
            raise KeyError(f"Ring profile '{name}' already exists. Use overwrite=True to replace.")
        self._rings[name] = profile


def get_correction(name: str) -> HorizonCorrection:
    if name not in STANDARD_CORRECTIONS:
        raise KeyError(f"Unknown horizon correction '{name}'. Available: {sorted(STANDARD_CORRECTIONS)}")
    return STANDARD_CORRECTIONS[name]
