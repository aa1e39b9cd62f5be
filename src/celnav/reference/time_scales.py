from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import math

from ..core.time import local_midnight, require_aware
from .deltat import estimate_delta_t

JD_J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
HOURS_PER_DAY = 24
SECONDS_PER_DAY = 86400.0

# Gregorian reform: first JD after 1582-10-04 (Julian)
_JD_GREGORIAN_REFORM = 2299160.0


# ============================================================
# Julian Date (Meeus, Astronomical Algorithms ch. 7)
# ============================================================

def julian_date(dt: datetime, delta_t_seconds: float = 0.0) -> float:
    """
    Julian Date of an aware datetime, evaluated on its UTC wall clock.

    delta_t_seconds (ΔT = TT - UT) is added as a fraction of a day, so passing
    a ΔT estimate yields JD(TT). Dates from 1582-10-15 on get the Gregorian
    century correction; earlier dates are treated as Julian calendar dates.
    Sub-second parts are ignored.
    """
    u = require_aware(dt).astimezone(timezone.utc)
    y = u.year
    m = u.month
    day = u.day + (u.hour + (u.minute + u.second / 60.0) / 60.0) / 24.0
    if m < 3:
        y -= 1
        m += 12

    jd = math.floor(365.25 * (y + 4716.0)) + math.floor(30.6001 * (m + 1)) + day - 1524.5
    if jd > _JD_GREGORIAN_REFORM:
        century = math.floor(y / 100.0)
        jd += 2.0 - century + math.floor(century / 4.0)
    return jd + delta_t_seconds / SECONDS_PER_DAY


def utc_offset_hours(dt: datetime) -> float:
    return require_aware(dt).utcoffset().total_seconds() / 3600.0


def timezone_shift(dt: datetime) -> float:
    """Signed day fraction -offset/24 (east of Greenwich is negative)."""
    return -utc_offset_hours(dt) / HOURS_PER_DAY


def utc_decimal_year(dt: datetime) -> float:
    """year + day_of_year / 365.25 on the UTC calendar."""
    u = require_aware(dt).astimezone(timezone.utc)
    return u.year + u.timetuple().tm_yday / 365.25


# ============================================================
# Sidereal time
# ============================================================

def local_sidereal_time(days_since_epoch: float, longitude_deg: float, tz_shift: float) -> float:
    """
    Local sidereal time (radians) at local midnight.

    days_since_epoch is JD(0h UT) - J2000.0; tz_shift is the signed day
    fraction from timezone_shift(). The turn fraction is truncated toward zero,
    so the result lies in (-2π, 2π).
    """
    st = (
        24110.5
        + 8640184.813 * (days_since_epoch / DAYS_PER_CENTURY)
        + 86636.6 * tz_shift
        + 86400.0 * (longitude_deg / 360.0)
    ) / SECONDS_PER_DAY
    st -= int(st)
    return st * 2.0 * math.pi


# ============================================================
# Per-day time basis
# ============================================================

@dataclass(frozen=True)
class TimeBasis:
    """
    Everything the hourly crossing scan needs about the evaluated local day.

    Every field is taken at local midnight of dt's date, including the UTC
    offset, so any dt on the same local date gives the same basis. jd is the
    truncated JD(TT) of local midnight; days_since_epoch already includes
    tz_shift; lst is the local sidereal time at local midnight.
    """
    midnight: datetime
    jd: int
    delta_t: float
    tz_shift: float
    days_since_epoch: float
    lst: float


def time_basis(dt: datetime, longitude_deg: float) -> TimeBasis:
    midnight = local_midnight(require_aware(dt))
    delta_t = estimate_delta_t(utc_decimal_year(midnight))
    jd = int(julian_date(midnight, delta_t))
    days = jd - JD_J2000 + 0.5
    shift = timezone_shift(midnight)
    lst = local_sidereal_time(days, longitude_deg, shift)
    return TimeBasis(
        midnight=midnight,
        jd=jd,
        delta_t=delta_t,
        tz_shift=shift,
        days_since_epoch=days + shift,
        lst=lst,
    )
