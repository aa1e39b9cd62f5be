"""
celnav.engines.crossing
---
Hourly horizon-crossing scan.

The body's "vertical position" (sine of altitude minus the threshold) is
sampled at the 25 hour boundaries of the local day, with RA/Dec linearly
interpolated between today's and tomorrow's positions. A sign change inside
an hour is refined by a parabola through the boundary and mid-hour samples.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from ..core.time import Time
from ..core.types import Coordinate, EquatorialPosition, Event, HorizonCorrection

HOURS_PER_DAY = 24
MS_PER_HOUR = 3_600_000

# sidereal advance per solar hour (radians)
EARTH_ROTATION_PER_HOUR = math.radians(15.0) * 1.0027379

REFRACTED_ZENITH_DEG = 90.833
GEOMETRIC_ZENITH_DEG = 90.0


@dataclass(frozen=True)
class _Observer:
    sin_lat: float
    cos_lat: float
    threshold: float

    def vertical(self, dec: float, ha: float) -> float:
        return self.sin_lat * math.sin(dec) + self.cos_lat * math.cos(dec) * math.cos(ha) - self.threshold


def adjusted_zenith(correction: HorizonCorrection) -> float:
    """cos(zenith distance) shifted by the correction angle (radians)."""
    z = REFRACTED_ZENITH_DEG if correction.include_refraction else GEOMETRIC_ZENITH_DEG
    return math.cos(math.radians(z)) + math.radians(correction.angle_from_horizon)


def _azimuth_deg(obs: _Observer, dec: float, ha: float) -> float:
    num = -math.cos(dec) * math.sin(ha)
    den = obs.cos_lat * math.sin(dec) - obs.sin_lat * math.cos(dec) * math.cos(ha)
    if den == 0.0:
        az = math.copysign(90.0, num)
    else:
        az = math.degrees(math.atan(num / den))
    if den < 0:
        az += 180.0
    if az < 0:
        az += 360.0
    if az > 360.0:
        az -= 360.0
    return az


def _root_fraction(prev: float, mid: float, cur: float) -> Tuple[bool, float]:
    """
    Fraction t in the hour where the parabola through (0, prev), (1/2, mid), (1, cur)
    vanishes. Returns (False, 0.0) when the discriminant is negative.
    """
    a = 2.0 * cur - 4.0 * mid + 2.0 * prev
    b = 4.0 * mid - 3.0 * prev - cur
    if a == 0.0:
        # degenerate parabola: straight line through the endpoints
        return True, -prev / b
    disc = b * b - 4.0 * a * prev
    if disc < 0:
        return False, 0.0
    root = math.sqrt(disc)
    t = (-b + root) / (2.0 * a)
    if t > 1.0 or t < 0.0:
        t = (-b - root) / (2.0 * a)
    return True, t


def _hour_step(
    hour: int,
    obs: _Observer,
    lst: float,
    ra0: float,
    ra1: float,
    dec0: float,
    dec1: float,
    prev_v: float,
) -> Tuple[List[Event], float]:
    ha0 = lst + hour * EARTH_ROTATION_PER_HOUR - ra0
    ha1 = lst + (hour + 1) * EARTH_ROTATION_PER_HOUR - ra1
    v = obs.vertical(dec1, ha1)

    events: List[Event] = []
    if (prev_v > 0) == (v > 0):
        return events, v

    avg_dec = (dec0 + dec1) / 2.0
    mid = obs.vertical(avg_dec, (ha0 + ha1) / 2.0)
    ok, t = _root_fraction(prev_v, mid, v)
    if not ok:
        return events, v

    ha_event = ha0 + t * (ha1 - ha0)
    az = _azimuth_deg(obs, avg_dec, ha_event)
    when = Time.from_total_ms(int((hour + t) * MS_PER_HOUR))
    if prev_v < 0 and v > 0:
        events.append(Event(kind="RISE", azimuth=az, time=when))
    if prev_v > 0 and v < 0:
        events.append(Event(kind="SET", azimuth=az, time=when))
    return events, v


def find_crossings(
    correction: HorizonCorrection,
    coordinate: Coordinate,
    lst: float,
    today: EquatorialPosition,
    tomorrow: EquatorialPosition,
) -> Tuple[List[Event], float, float]:
    """
    Scan the 24 hours of a local day for threshold crossings.

    lst is the local sidereal time at local midnight (radians); tomorrow's RA
    must already be unwrapped with adjust_for_next_ascension().

    Returns (events sorted by time, vertical position at local midnight,
    vertical position at the final hour boundary).
    A sign change whose parabola has no real root yields no event.
    """
    lat = math.radians(coordinate.latitude)
    obs = _Observer(math.sin(lat), math.cos(lat), adjusted_zenith(correction))

    d_ra = tomorrow.ra - today.ra
    d_dec = tomorrow.dec - today.dec

    ra0, dec0 = today.ra, today.dec
    first_v = obs.vertical(today.dec, lst - today.ra)
    prev_v = first_v
    found: List[Event] = []
    for hour in range(HOURS_PER_DAY):
        frac = (hour + 1) / HOURS_PER_DAY
        ra1 = today.ra + frac * d_ra
        dec1 = today.dec + frac * d_dec
        events, prev_v = _hour_step(hour, obs, lst, ra0, ra1, dec0, dec1, prev_v)
        found.extend(events)
        ra0, dec0 = ra1, dec1

    found.sort(key=lambda e: e.time.to_total_ms())
    return found, first_v, prev_v
