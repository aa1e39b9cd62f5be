from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .core.calculator import Calculator, CalculatorRegistry
from .core.types import (
    Coordinate,
    HorizonCorrection,
    LunarEventDay,
    RingProfile,
    SolarEventDay,
    SolarRingEventDay,
)
from .engines import profiles
from .engines.calculators import LunarCalculator, SolarCalculator
from .engines.day import lunar_event_day as _lunar_event_day
from .engines.day import solar_event_day as _solar_event_day
from .engines.ring import ring_event_day as _ring_event_day

_registry: Optional[CalculatorRegistry] = None
_rings = profiles.ProfileRegistry()

def set_registry(reg: CalculatorRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalculatorRegistry:
    if _registry is None:
        raise RuntimeError("Calculator registry not initialized")
    return _registry

def list_calculators() -> List[str]:
    return _reg().list()

def get_calculator(name: str) -> Calculator:
    return _reg().get(name)

def calculator_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def register_calculator(name: str, calculator: Calculator, *, overwrite: bool = False) -> None:
    _reg().register(name, calculator, overwrite=overwrite)


@dataclass(frozen=True)
class CelestialNavigationEvents:
    """Entry object handing out the solar and lunar calculators."""
    registry: CalculatorRegistry

    def solar(self) -> SolarCalculator:
        return self.registry.get("solar")  # type: ignore[return-value]

    def lunar(self) -> LunarCalculator:
        return self.registry.get("lunar")  # type: ignore[return-value]

def provide() -> CelestialNavigationEvents:
    return CelestialNavigationEvents(_reg())

# ============================================================
# Ring profiles
# ============================================================

def list_ring_profiles() -> List[str]:
    return _rings.list()

def get_ring_profile(name: str) -> RingProfile:
    return _rings.get(name)

def register_ring_profile(name: str, profile: RingProfile, *, overwrite: bool = False) -> None:
    _rings.register(name, profile, overwrite=overwrite)

# ============================================================
# Direct day calculations
# ============================================================

def _coord(location: Union[Coordinate, tuple]) -> Coordinate:
    if isinstance(location, Coordinate):
        return location
    lat, lon = location
    return Coordinate(float(lat), float(lon))

def _correction(correction: Union[None, str, HorizonCorrection], default: HorizonCorrection) -> HorizonCorrection:
    if correction is None:
        return default
    if isinstance(correction, str):
        return profiles.get_correction(correction)
    return correction

def solar_event_day(
    location: Union[Coordinate, tuple],
    dt: datetime,
    *,
    correction: Union[None, str, HorizonCorrection] = None,
) -> SolarEventDay:
    """Sun events for dt's local day; location is a Coordinate or (lat, lon)."""
    return _solar_event_day(_coord(location), _correction(correction, profiles.SUNRISE), dt)

def lunar_event_day(
    location: Union[Coordinate, tuple],
    dt: datetime,
    *,
    correction: Union[None, str, HorizonCorrection] = None,
) -> LunarEventDay:
    return _lunar_event_day(_coord(location), _correction(correction, profiles.MOONRISE), dt)

def ring_event_day(
    location: Union[Coordinate, tuple],
    dt: datetime,
    profile: Union[str, RingProfile],
) -> SolarRingEventDay:
    """Light-phase tracks for dt's local day; profile is a registered name or a RingProfile."""
    ring = _rings.get(profile) if isinstance(profile, str) else profile
    return _ring_event_day(_coord(location), ring, dt)
