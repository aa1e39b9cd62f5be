#ephemeris/skyfield_positions.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from . import require_ephemeris

# J2000.0, origin of the day count used by reference.position
JD_DAY_ZERO = 2451545.0


def wrap_pi(rad: float) -> float:
    return (rad + math.pi) % (2.0 * math.pi) - math.pi


@dataclass
class SkyfieldPositions:
    """
    Apparent geocentric RA/Dec (true equator and equinox of date) from a JPL kernel.

    Requires optional deps:
      pip install "celnav[ephemeris]"
    The kernel (default de421.bsp) is downloaded by Skyfield on first use.
    """
    ts: object
    earth: object
    sun: object
    moon: object

    @classmethod
    def load(cls, kernel: str = "de421.bsp") -> "SkyfieldPositions":
        require_ephemeris()
        from skyfield.api import load  # type: ignore

        eph = load(kernel)
        return cls(ts=load.timescale(), earth=eph["earth"], sun=eph["sun"], moon=eph["moon"])

    def radec(self, body: str, d: float) -> Tuple[float, float]:
        """(ra, dec) in radians for body 'sun' or 'moon' at day count d (TT ≈ UT)."""
        target = self.sun if body == "sun" else self.moon
        t = self.ts.tt_jd(JD_DAY_ZERO + d)
        ra, dec, _ = self.earth.at(t).observe(target).apparent().radec(epoch="date")
        return ra.radians, dec.radians
