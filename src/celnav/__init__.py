"""celnav public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    CelestialNavigationEvents,
    provide,
    solar_event_day,
    lunar_event_day,
    ring_event_day,
    list_calculators,
    get_calculator,
    calculator_info,
    register_calculator,
    list_ring_profiles,
    get_ring_profile,
    register_ring_profile,
)
from .core.errors import CelnavError
from .core.time import Time
from .core.types import Coordinate, HorizonCorrection, RingProfile

__all__ = [
    "CelestialNavigationEvents",
    "provide",
    "solar_event_day",
    "lunar_event_day",
    "ring_event_day",
    "list_calculators",
    "get_calculator",
    "calculator_info",
    "register_calculator",
    "list_ring_profiles",
    "get_ring_profile",
    "register_ring_profile",
    "CelnavError",
    "Time",
    "Coordinate",
    "HorizonCorrection",
    "RingProfile",
]
