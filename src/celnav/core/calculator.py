from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol

from .types import Coordinate, EventDay, HorizonCorrection, ShortEvent, UpcomingEventDay

class Calculator(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def calculate_event_day(
        self, coordinate: Coordinate, dt: datetime, correction: Optional[HorizonCorrection] = None
    ) -> EventDay: ...
    def find_upcoming_relative_event_day(
        self, coordinate: Coordinate, dt: datetime, correction: Optional[HorizonCorrection] = None
    ) -> UpcomingEventDay: ...
    def find_upcoming_absolute_event_day(
        self, coordinate: Coordinate, dt: datetime, correction: Optional[HorizonCorrection] = None
    ) -> UpcomingEventDay: ...
    def find_upcoming_relative_short_event(
        self, coordinate: Coordinate, dt: datetime, correction: Optional[HorizonCorrection] = None
    ) -> Optional[ShortEvent]: ...

@dataclass
class CalculatorRegistry:
    _calculators: Dict[str, Calculator]

    def get(self, name: str) -> Calculator:
        if name not in self._calculators:
            raise KeyError(f"Unknown calculator '{name}'. Available: {sorted(self._calculators)}")
        return self._calculators[name]

    def list(self) -> List[str]:
        return sorted(self._calculators.keys())

    def register(self, name: str, calculator: Calculator, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calculators):
            raise KeyError(f"Calculator '{name}' already exists. Use overwrite=True to replace.")
        self._calculators[name] = calculator
