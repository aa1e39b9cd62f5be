"""
celnav.reference.deltat
---
Espenak–Meeus (NASA Five Millennium Canon) piecewise polynomial ΔT = TT - UT.

Valid up to decimal year 3000; later years raise DeltaTDomainError.
"""
from __future__ import annotations

from typing import Tuple

from ..core.errors import DeltaTDomainError

MAX_YEAR = 3000.0

# (upper bound exclusive, origin, scale, coefficients in ascending powers)
# u = (y - origin) / scale
_SEGMENTS: Tuple[Tuple[float, float, float, Tuple[float, ...]], ...] = (
    (-500.0, 1820.0, 100.0, (-20.0, 0.0, 32.0)),
    (500.0, 0.0, 100.0, (10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521)),
    (1600.0, 1000.0, 100.0, (1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073)),
    (1700.0, 1600.0, 1.0, (120.0, -0.9808, -0.01532, 1.0 / 7129.0)),
    (1800.0, 1700.0, 1.0, (8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0)),
    (1860.0, 1800.0, 1.0, (13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436,
                           0.0000121272, -0.0000001699, 0.000000000875)),
    (1900.0, 1860.0, 1.0, (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1.0 / 233174.0)),
    (1920.0, 1900.0, 1.0, (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)),
    (1941.0, 1920.0, 1.0, (21.20, 0.84493, -0.076100, 0.0020936)),
    (1961.0, 1950.0, 1.0, (29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0)),
    (1986.0, 1975.0, 1.0, (45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0)),
    (2005.0, 2000.0, 1.0, (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599)),
    (2015.0, 2005.0, 1.0, (64.69, 0.2930)),
)

_LATE = (2015.0, 1.0, (67.62, 0.3645, 0.0039755))


def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def estimate_delta_t(y: float) -> float:
    """
    ΔT in seconds for decimal year y.

    Branches follow the Canon polynomials; the last segment (2015..3000) is a
    quadratic extrapolation.
    """
    for upper, origin, scale, coeffs in _SEGMENTS:
        if y < upper:
            return _poly((y - origin) / scale, coeffs)
    if y <= MAX_YEAR:
        origin, scale, coeffs = _LATE
        return _poly((y - origin) / scale, coeffs)
    raise DeltaTDomainError("Delta T estimation is not available for years > 3000.")

