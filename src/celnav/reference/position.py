"""
celnav.reference.position
---
Low-precision geocentric equatorial positions of the Sun and the Moon.

Series after van Flandern & Pulkkinen (1979), "Low-precision formulae for
planetary positions", ApJS 41, 391. Mean arguments are linear in the day
count d and given in turns; every periodic term is a multiple-angle
combination of them. The three sums (v, u, w) feed a common
ecliptic-to-equatorial step:

    ra  = L + asin(w / sqrt(u - v^2))
    dec = asin(v / sqrt(u))

Accuracy is of the order of a few arcminutes for the Sun and a fraction of a
degree for the Moon, which is ample for rise/set work.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

from ..core.types import EquatorialPosition
from .time_scales import DAYS_PER_CENTURY

TWO_PI = 2.0 * math.pi

# A term is (trig, coef, multipliers). trig is "s"/"c" for sin/cos, or
# "Ts"/"Tc" when the term also carries the centuries-since-1900 factor.
Term = Tuple[str, float, Tuple[int, ...]]


def normalize_turns(x: float) -> float:
    """Reduce a fractional-turn angle into [0, 2π) (floor modulo, also for x < 0)."""
    return (x % 1.0) * TWO_PI


def _mean_args(d: float, elements: Sequence[Tuple[float, float]]) -> Tuple[float, ...]:
    return tuple(normalize_turns(a0 + a1 * d) for a0, a1 in elements)


def _series(terms: Sequence[Term], args: Sequence[float], t1900: float, const: float = 0.0) -> float:
    acc = const
    for trig, coef, mult in terms:
        x = 0.0
        for k, a in zip(mult, args):
            if k:
                x += k * a
        val = math.sin(x) if trig[-1] == "s" else math.cos(x)
        if trig[0] == "T":
            val *= t1900
        acc += coef * val
    return acc


def _equatorial(mean_lon: float, u: float, v: float, w: float) -> EquatorialPosition:
    ra = mean_lon + math.asin(w / math.sqrt(u - v * v))
    dec = math.asin(v / math.sqrt(u))
    return EquatorialPosition(ra=ra, dec=dec)


def _t1900(d: float) -> float:
    return d / DAYS_PER_CENTURY + 1.0


# ============================================================
# Sun
# ============================================================

# Mean longitude L, mean anomaly G, Moon mean longitude Lm, lunar node N,
# Venus V, Mars Ma, Jupiter J (turns, linear in d)
SUN_ELEMENTS = (
    (0.779072, 0.00273790931),
    (0.993126, 0.00273777850),
    (0.606434, 0.03660110129),
    (0.347343, -0.00014709391),
    (0.140023, 0.00445036173),
    (0.053856, 0.00145561327),
    (0.056531, 0.00023080893),
)

#                         L   G  Lm  N   V  Ma   J
SUN_V_TERMS: Tuple[Term, ...] = (
    ("s", +0.39785, (1, 0, 0, 0, 0, 0, 0)),
    ("s", -0.01000, (1, -1, 0, 0, 0, 0, 0)),
    ("s", +0.00333, (1, 1, 0, 0, 0, 0, 0)),
    ("Ts", -0.00021, (1, 0, 0, 0, 0, 0, 0)),
    ("s", +0.00004, (1, 2, 0, 0, 0, 0, 0)),
    ("c", -0.00004, (1, 0, 0, 0, 0, 0, 0)),
    ("s", -0.00004, (-1, 0, 0, 1, 0, 0, 0)),
    ("Ts", +0.00003, (1, -1, 0, 0, 0, 0, 0)),
)

SUN_U_TERMS: Tuple[Term, ...] = (
    ("c", -0.03349, (0, 1, 0, 0, 0, 0, 0)),
    ("c", -0.00014, (2, 0, 0, 0, 0, 0, 0)),
    ("c", +0.00008, (1, 0, 0, 0, 0, 0, 0)),
    ("s", -0.00003, (0, 1, 0, 0, 0, 0, -1)),
)

SUN_W_TERMS: Tuple[Term, ...] = (
    ("s", -0.04129, (2, 0, 0, 0, 0, 0, 0)),
    ("s", +0.03211, (0, 1, 0, 0, 0, 0, 0)),
    ("s", +0.00104, (2, -1, 0, 0, 0, 0, 0)),
    ("s", -0.00035, (2, 1, 0, 0, 0, 0, 0)),
    ("Ts", -0.00008, (0, 1, 0, 0, 0, 0, 0)),
    ("s", -0.00008, (0, 0, 0, 1, 0, 0, 0)),
    ("s", +0.00007, (0, 2, 0, 0, 0, 0, 0)),
    ("Ts", +0.00005, (2, 0, 0, 0, 0, 0, 0)),
    ("s", +0.00003, (-1, 0, 1, 0, 0, 0, 0)),
    ("c", -0.00002, (0, 1, 0, 0, 0, 0, -1)),
    ("s", +0.00002, (0, 4, 0, 0, 0, -8, 3)),
    ("s", -0.00002, (0, 1, 0, 0, -1, 0, 0)),
    ("c", -0.00002, (0, 2, 0, 0, -2, 0, 0)),
)


def sun_position(d: float) -> EquatorialPosition:
    """
    Sun (ra, dec) in radians.

    d: days since J2000.0 (JD 2451545.0), fractional days allowed.
    """
    t = _t1900(d)
    args = _mean_args(d, SUN_ELEMENTS)
    v = _series(SUN_V_TERMS, args, t)
    u = _series(SUN_U_TERMS, args, t, const=1.0)
    w = _series(SUN_W_TERMS, args, t, const=-0.00010)
    return _equatorial(args[0], u, v, w)


# ============================================================
# Moon
# ============================================================

# Mean longitude Lm, mean anomaly Gm, argument of latitude F, elongation D,
# lunar node N, solar anomaly Gs, solar longitude Ls, Venus V
MOON_MEAN_LONGITUDE = (0.606434, 0.03660110129)
MOON_ELEMENTS = (
    (0.374897, 0.03629164709),
    (0.259091, 0.03674819520),
    (0.827362, 0.03386319198),
    (0.347343, -0.00014709391),
    (0.993126, 0.00273777850),
    (0.779072, 0.00273790931),
    (0.505498, 0.00445046867),
)

#                          Gm   F   D   N  Gs  Ls   V
MOON_V_TERMS: Tuple[Term, ...] = (
    ("s", +0.39558, (0, 1, 0, 1, 0, 0, 0)),
    ("s", +0.08200, (0, 1, 0, 0, 0, 0, 0)),
    ("s", +0.03257, (1, -1, 0, -1, 0, 0, 0)),
    ("s", +0.01092, (1, 1, 0, 1, 0, 0, 0)),
    ("s", +0.00666, (1, -1, 0, 0, 0, 0, 0)),
    ("s", -0.00644, (1, 1, -2, 1, 0, 0, 0)),
    ("s", -0.00331, (0, 1, -2, 1, 0, 0, 0)),
    ("s", -0.00304, (0, 1, -2, 0, 0, 0, 0)),
    ("s", -0.00240, (1, -1, -2, -1, 0, 0, 0)),
    ("s", +0.00226, (1, 1, 0, 0, 0, 0, 0)),
    ("s", -0.00108, (1, 1, -2, 0, 0, 0, 0)),
    ("s", -0.00079, (0, 1, 0, -1, 0, 0, 0)),
    ("s", +0.00078, (0, 1, 2, 1, 0, 0, 0)),
    ("s", +0.00066, (0, 1, 0, 1, -1, 0, 0)),
    ("s", -0.00062, (0, 1, 0, 1, 1, 0, 0)),
    ("s", -0.00050, (1, -1, -2, 0, 0, 0, 0)),
    ("s", +0.00045, (2, 1, 0, 1, 0, 0, 0)),
    ("s", -0.00031, (2, 1, -2, 1, 0, 0, 0)),
    ("s", -0.00027, (1, 1, -2, 1, 1, 0, 0)),
    ("s", -0.00024, (0, 1, -2, 1, 1, 0, 0)),
    ("Ts", -0.00021, (0, 1, 0, 1, 0, 0, 0)),
    ("s", +0.00018, (0, 1, -1, 1, 0, 0, 0)),
    ("s", +0.00016, (0, 1, 2, 0, 0, 0, 0)),
    ("s", +0.00016, (1, -1, 0, -1, -1, 0, 0)),
    ("s", -0.00016, (2, -1, 0, -1, 0, 0, 0)),
    ("s", -0.00015, (0, 1, -2, 0, 1, 0, 0)),
    ("s", -0.00012, (1, -1, -2, -1, 1, 0, 0)),
    ("s", -0.00011, (1, -1, 0, -1, 1, 0, 0)),
    ("s", +0.00009, (1, 1, 0, 1, -1, 0, 0)),
    ("s", +0.00009, (2, 1, 0, 0, 0, 0, 0)),
    ("s", +0.00008, (2, -1, 0, 0, 0, 0, 0)),
    ("s", +0.00008, (1, 1, 2, 1, 0, 0, 0)),
    ("s", -0.00008, (0, 3, -2, 1, 0, 0, 0)),
    ("s", +0.00007, (1, -1, 2, 0, 0, 0, 0)),
    ("s", -0.00007, (2, -1, -2, -1, 0, 0, 0)),
    ("s", -0.00007, (1, 1, 0, 1, 1, 0, 0)),
    ("s", -0.00006, (0, 1, 1, 1, 0, 0, 0)),
    ("s", +0.00006, (0, 1, -2, 0, -1, 0, 0)),
    ("s", +0.00006, (1, -1, 0, 1, 0, 0, 0)),
    ("s", +0.00006, (0, 1, 2, 1, -1, 0, 0)),
    ("s", -0.00005, (1, 1, -2, 0, 1, 0, 0)),
    ("s", -0.00004, (2, 1, -2, 0, 0, 0, 0)),
    ("s", +0.00004, (1, -3, 0, -1, 0, 0, 0)),
    ("s", +0.00004, (1, -1, 0, 0, -1, 0, 0)),
    ("s", -0.00003, (1, -1, 0, 0, 1, 0, 0)),
    ("s", +0.00003, (0, 1, -1, 0, 0, 0, 0)),
    ("s", +0.00003, (0, 1, -2, 1, -1, 0, 0)),
    ("s", -0.00003, (0, 1, -2, -1, 0, 0, 0)),
    ("s", +0.00003, (1, 1, -2, 1, -1, 0, 0)),
    ("s", +0.00003, (0, 1, 0, 0, -1, 0, 0)),
    ("s", -0.00003, (0, 1, -1, 1, -1, 0, 0)),
    ("s", -0.00002, (1, -1, -2, 0, 1, 0, 0)),
    ("s", -0.00002, (0, 1, 0, 0, 1, 0, 0)),
    ("s", +0.00002, (1, 1, -1, 1, 0, 0, 0)),
    ("s", -0.00002, (1, 1, 0, -1, 0, 0, 0)),
    ("s", +0.00002, (3, 1, 0, 1, 0, 0, 0)),
    ("s", -0.00002, (2, -1, -4, -1, 0, 0, 0)),
    ("s", +0.00002, (1, -1, -2, -1, -1, 0, 0)),
    ("Ts", -0.00002, (1, -1, 0, -1, 0, 0, 0)),
    ("s", -0.00002, (1, -1, -4, -1, 0, 0, 0)),
    ("s", -0.00002, (1, 1, -4, 0, 0, 0, 0)),
    ("s", -0.00002, (2, -1, -2, 0, 0, 0, 0)),
    ("s", +0.00002, (1, 1, 2, 0, 0, 0, 0)),
    ("s", +0.00002, (1, 1, 0, 0, -1, 0, 0)),
)

MOON_U_TERMS: Tuple[Term, ...] = (
    ("c", -0.10828, (1, 0, 0, 0, 0, 0, 0)),
    ("c", -0.01880, (1, 0, -2, 0, 0, 0, 0)),
    ("c", -0.01479, (0, 0, 2, 0, 0, 0, 0)),
    ("c", +0.00181, (2, 0, -2, 0, 0, 0, 0)),
    ("c", -0.00147, (2, 0, 0, 0, 0, 0, 0)),
    ("c", -0.00105, (0, 0, 2, 0, -1, 0, 0)),
    ("c", -0.00075, (1, 0, -2, 0, 1, 0, 0)),
    ("c", -0.00067, (1, 0, 0, 0, -1, 0, 0)),
    ("c", +0.00057, (0, 0, 1, 0, 0, 0, 0)),
    ("c", +0.00055, (1, 0, 0, 0, 1, 0, 0)),
    ("c", -0.00046, (1, 0, 2, 0, 0, 0, 0)),
    ("c", +0.00041, (1, -2, 0, 0, 0, 0, 0)),
    ("c", +0.00024, (0, 0, 0, 0, 1, 0, 0)),
    ("c", +0.00017, (0, 0, 2, 0, 1, 0, 0)),
    ("c", -0.00013, (1, 0, -2, 0, -1, 0, 0)),
    ("c", -0.00010, (1, 0, -4, 0, 0, 0, 0)),
    ("c", -0.00009, (0, 0, 1, 0, 1, 0, 0)),
    ("c", +0.00007, (2, 0, -2, 0, 1, 0, 0)),
    ("c", +0.00006, (3, 0, -2, 0, 0, 0, 0)),
    ("c", +0.00006, (0, 2, -2, 0, 0, 0, 0)),
    ("c", -0.00005, (0, 0, 2, 0, -2, 0, 0)),
    ("c", -0.00005, (2, 0, -4, 0, 0, 0, 0)),
    ("c", +0.00005, (1, 2, -2, 0, 0, 0, 0)),
    ("c", -0.00005, (1, 0, -1, 0, 0, 0, 0)),
    ("c", -0.00004, (1, 0, 2, 0, -1, 0, 0)),
    ("c", -0.00004, (3, 0, 0, 0, 0, 0, 0)),
    ("c", -0.00003, (1, 0, -4, 0, 1, 0, 0)),
    ("c", -0.00003, (2, -2, 0, 0, 0, 0, 0)),
    ("c", -0.00003, (0, 2, 0, 0, 0, 0, 0)),
)

MOON_W_TERMS: Tuple[Term, ...] = (
    ("s", +0.10478, (1, 0, 0, 0, 0, 0, 0)),
    ("s", -0.04105, (0, 2, 0, 2, 0, 0, 0)),
    ("s", -0.02130, (1, 0, -2, 0, 0, 0, 0)),
    ("s", -0.01779, (0, 2, 0, 1, 0, 0, 0)),
    ("s", +0.01774, (0, 0, 0, 1, 0, 0, 0)),
    ("s", +0.00987, (0, 0, 2, 0, 0, 0, 0)),
    ("s", -0.00338, (1, -2, 0, -2, 0, 0, 0)),
    ("s", -0.00309, (0, 0, 0, 0, 1, 0, 0)),
    ("s", -0.00190, (0, 2, 0, 0, 0, 0, 0)),
    ("s", -0.00144, (1, 0, 0, 1, 0, 0, 0)),
    ("s", -0.00144, (1, -2, 0, -1, 0, 0, 0)),
    ("s", -0.00113, (1, 2, 0, 2, 0, 0, 0)),
    ("s", -0.00094, (1, 0, -2, 0, 1, 0, 0)),
    ("s", -0.00092, (2, 0, -2, 0, 0, 0, 0)),
    ("s", +0.00071, (0, 0, 2, 0, -1, 0, 0)),
    ("s", +0.00070, (2, 0, 0, 0, 0, 0, 0)),
    ("s", +0.00067, (1, 2, -2, 2, 0, 0, 0)),
    ("s", +0.00066, (0, 2, -2, 1, 0, 0, 0)),
    ("s", -0.00066, (0, 0, 2, 1, 0, 0, 0)),
    ("s", +0.00061, (1, 0, 0, 0, -1, 0, 0)),
    ("s", -0.00058, (0, 0, 1, 0, 0, 0, 0)),
    ("s", -0.00049, (1, 2, 0, 1, 0, 0, 0)),
    ("s", -0.00049, (1, 0, 0, -1, 0, 0, 0)),
    ("s", -0.00042, (1, 0, 0, 0, 1, 0, 0)),
    ("s", +0.00034, (0, 2, -2, 2, 0, 0, 0)),
    ("s", -0.00026, (0, 2, -2, 0, 0, 0, 0)),
    ("s", +0.00025, (1, -2, -2, -2, 0, 0, 0)),
    ("s", +0.00024, (1, -2, 0, 0, 0, 0, 0)),
    ("s", +0.00023, (1, 2, -2, 1, 0, 0, 0)),
    ("s", +0.00023, (1, 0, -2, -1, 0, 0, 0)),
    ("s", +0.00019, (1, 0, 2, 0, 0, 0, 0)),
    ("s", +0.00012, (1, 0, -2, 0, -1, 0, 0)),
    ("s", +0.00011, (1, 0, -2, 1, 0, 0, 0)),
    ("s", +0.00011, (1, -2, -2, -1, 0, 0, 0)),
    ("s", -0.00010, (0, 0, 2, 0, 1, 0, 0)),
    ("s", +0.00009, (1, 0, -1, 0, 0, 0, 0)),
    ("s", +0.00008, (0, 0, 1, 0, 1, 0, 0)),
    ("s", -0.00008, (0, 2, 2, 2, 0, 0, 0)),
    ("s", -0.00008, (0, 0, 0, 2, 0, 0, 0)),
    ("s", -0.00007, (0, 2, 0, 2, -1, 0, 0)),
    ("s", +0.00006, (0, 2, 0, 2, 1, 0, 0)),
    ("s", -0.00005, (1, 2, 0, 0, 0, 0, 0)),
    ("s", +0.00005, (3, 0, 0, 0, 0, 0, 0)),
    ("s", -0.00005, (1, 0, 0, 0, 0, 16, -18)),
    ("s", -0.00005, (2, 2, 0, 2, 0, 0, 0)),
    ("Ts", +0.00004, (0, 2, 0, 2, 0, 0, 0)),
    ("c", +0.00004, (1, 0, 0, 0, 0, 16, -18)),
    ("s", -0.00004, (1, -2, 2, 0, 0, 0, 0)),
    ("s", -0.00004, (1, 0, -4, 0, 0, 0, 0)),
    ("s", -0.00004, (3, 0, -2, 0, 0, 0, 0)),
    ("s", -0.00004, (0, 2, 2, 1, 0, 0, 0)),
    ("s", -0.00004, (0, 0, 2, -1, 0, 0, 0)),
    ("s", -0.00003, (0, 0, 0, 0, 2, 0, 0)),
    ("s", -0.00003, (1, 0, -2, 0, 2, 0, 0)),
    ("s", +0.00003, (0, 2, -2, 1, 1, 0, 0)),
    ("s", -0.00003, (0, 0, 2, 1, -1, 0, 0)),
    ("s", +0.00003, (2, 2, -2, 2, 0, 0, 0)),
    ("s", +0.00003, (0, 0, 2, 0, -2, 0, 0)),
    ("s", -0.00003, (2, 0, -2, 0, 1, 0, 0)),
    ("s", +0.00003, (1, 2, -2, 2, 1, 0, 0)),
    ("s", -0.00003, (2, 0, -4, 0, 0, 0, 0)),
    ("s", +0.00002, (0, 2, -2, 2, 1, 0, 0)),
    ("s", -0.00002, (2, 2, 0, 1, 0, 0, 0)),
    ("s", -0.00002, (2, 0, 0, -1, 0, 0, 0)),
    ("Tc", +0.00002, (1, 0, 0, 0, 0, 16, -18)),
    ("s", +0.00002, (0, 0, 4, 0, 0, 0, 0)),
    ("s", -0.00002, (0, 2, -1, 2, 0, 0, 0)),
    ("s", -0.00002, (1, 2, -2, 0, 0, 0, 0)),
    ("s", -0.00002, (2, 0, 0, 1, 0, 0, 0)),
    ("s", -0.00002, (2, -2, 0, -1, 0, 0, 0)),
    ("s", +0.00002, (1, 0, 2, 0, -1, 0, 0)),
    ("s", +0.00002, (2, 0, 0, 0, -1, 0, 0)),
    ("s", -0.00002, (1, 0, -4, 0, 1, 0, 0)),
    ("Ts", +0.00002, (1, 0, 0, 0, 0, 16, -18)),
    ("s", -0.00002, (1, -2, 0, -2, -1, 0, 0)),
    ("s", +0.00002, (2, -2, 0, -2, 0, 0, 0)),
    ("s", -0.00002, (1, 0, 2, 1, 0, 0, 0)),
    ("s", -0.00002, (1, -2, 2, -1, 0, 0, 0)),
)


def moon_position(d: float) -> EquatorialPosition:
    """
    Moon (ra, dec) in radians, geocentric.

    d: days since J2000.0, as for sun_position().
    """
    t = _t1900(d)
    mean_lon = normalize_turns(MOON_MEAN_LONGITUDE[0] + MOON_MEAN_LONGITUDE[1] * d)
    args = _mean_args(d, MOON_ELEMENTS)
    v = _series(MOON_V_TERMS, args, t)
    u = _series(MOON_U_TERMS, args, t, const=1.0)
    w = _series(MOON_W_TERMS, args, t)
    return _equatorial(mean_lon, u, v, w)


def adjust_for_next_ascension(today: EquatorialPosition, tomorrow: EquatorialPosition) -> EquatorialPosition:
    """Unwrap tomorrow's RA by +2π when it fell below today's, so hourly interpolation stays monotonic."""
    if tomorrow.ra < today.ra:
        return EquatorialPosition(ra=tomorrow.ra + TWO_PI, dec=tomorrow.dec)
    return tomorrow
