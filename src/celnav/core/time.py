from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .errors import NaiveDateTimeError, TimeFieldError

MILLIS_PER_DAY = 86_400_000
MINUTES_PER_DAY = 1440


@dataclass(frozen=True, order=True)
class Time:
    """
    Day-relative clock time with a signed whole-day offset.

    Ordering compares (days, hour, min, sec, ms), which matches total milliseconds.
    """
    days: int = 0
    hour: int = 0
    min: int = 0
    sec: int = 0
    ms: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise TimeFieldError("Hour must be between 0 and 23 inclusive.")
        if not 0 <= self.min <= 59:
            raise TimeFieldError("Minute must be between 0 and 59 inclusive.")
        if not 0 <= self.sec <= 59:
            raise TimeFieldError("Second must be between 0 and 59 inclusive.")
        if not 0 <= self.ms <= 999:
            raise TimeFieldError("Millisecond must be between 0 and 999 inclusive.")

    def __str__(self) -> str:
        clock = f"{self.hour:02d}:{self.min:02d}:{self.sec:02d}"
        if self.days == 0:
            return clock
        sign = "+" if self.days > 0 else "-"
        return f"{sign}{abs(self.days)}d {clock}"

    def to_total_minutes(self) -> int:
        return self.days * MINUTES_PER_DAY + self.hour * 60 + self.min

    def to_total_ms(self) -> int:
        return ((self.to_total_minutes() * 60) + self.sec) * 1000 + self.ms

    @classmethod
    def from_total_ms(cls, total: int) -> "Time":
        """Floor-normalize a signed millisecond count; negatives borrow from days."""
        total_s, ms = divmod(int(total), 1000)
        total_m, sec = divmod(total_s, 60)
        total_h, minutes = divmod(total_m, 60)
        days, hour = divmod(total_h, 24)
        return cls(days=days, hour=hour, min=minutes, sec=sec, ms=ms)


FULL_DAY = Time(days=1)
ZERO = Time()


def require_aware(dt: datetime) -> datetime:
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise NaiveDateTimeError(f"datetime must carry a UTC offset, got naive {dt.isoformat()}")
    return dt


def local_midnight(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def millis_between(start: datetime, end: datetime) -> int:
    """Elapsed milliseconds from start to end, measured on UTC instants."""
    delta = end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def local_instant(dt: datetime, t: Time) -> datetime:
    """
    Instant t after local midnight of dt's date, expressed in dt's zone.

    Elapsed time is counted from the midnight instant, so a DST change later
    in the day shifts the wall clock but not the instant.
    """
    midnight = local_midnight(dt).astimezone(timezone.utc)
    return (midnight + timedelta(milliseconds=t.to_total_ms())).astimezone(dt.tzinfo)
