from __future__ import annotations

import math

SYNODIC_MONTH = 29.530588853

# JD of the reference new moon (2000-01-06 14:24 UT)
NEW_MOON_EPOCH_JD = 2451550.1


def age_of_moon(jd: float) -> float:
    """Days since the last mean new moon, in [0, SYNODIC_MONTH)."""
    n = (jd - NEW_MOON_EPOCH_JD) / SYNODIC_MONTH
    frac = n - math.trunc(n)
    if frac < 0:
        frac += 1.0
    age = frac * SYNODIC_MONTH
    # frac may round up to exactly 1.0 for tiny negative n
    return age if age < SYNODIC_MONTH else 0.0


def _cosine_phase(age: float) -> float:
    return 50.0 * (1.0 + math.cos(2.0 * math.pi * (age + SYNODIC_MONTH / 2.0) / SYNODIC_MONTH))


def illumination(age: float) -> float:
    """
    Illuminated percentage from the moon's age.

    Symmetric cosine model averaged over the previous and current day; good to
    about ±5 % against the true phase-angle value.
    """
    return (_cosine_phase(age - 1.0) + _cosine_phase(age)) / 2.0
