#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from typing import List, Optional

from celnav.reference.position import moon_position, sun_position
from celnav.ephemeris.skyfield_positions import SkyfieldPositions, wrap_pi


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "celnav[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "celnav[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate low-precision Sun/Moon RA/Dec against a JPL kernel via Skyfield.")
    p.add_argument("--year-start", type=int, default=1950)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--step-days", type=float, default=7.3)
    p.add_argument("--kernel", default="de421.bsp")
    p.add_argument("--out-png", default="", help="Optional residual plot")
    args = p.parse_args(argv)

    np = _need_numpy()

    print(f"Loading {args.kernel} ...")
    ref = SkyfieldPositions.load(args.kernel)

    d_start = (args.year_start - 2000) * 365.25
    d_end = (args.year_end - 2000) * 365.25
    ds = np.arange(d_start, d_end, args.step_days)
    print(f"Comparing {len(ds)} epochs from {args.year_start} to {args.year_end}...")

    res = {"sun": ([], []), "moon": ([], [])}
    for d in ds:
        for body, model in (("sun", sun_position), ("moon", moon_position)):
            pos = model(float(d))
            ra, dec = ref.radec(body, float(d))
            # RA residual scaled to great-circle arc
            res[body][0].append(math.degrees(wrap_pi(pos.ra - ra)) * math.cos(dec) * 60.0)
            res[body][1].append(math.degrees(pos.dec - dec) * 60.0)

    print()
    print("Residuals (model - ephemeris), arcminutes")
    for body in ("sun", "moon"):
        dra = np.asarray(res[body][0])
        ddec = np.asarray(res[body][1])
        print(f"  {body:<4} RA·cosδ  rms {np.sqrt(np.mean(dra ** 2)):7.3f}  max {np.max(np.abs(dra)):7.3f}")
        print(f"  {body:<4} Dec      rms {np.sqrt(np.mean(ddec ** 2)):7.3f}  max {np.max(np.abs(ddec)):7.3f}")

    if not args.out_png:
        return 0

    plt = _need_matplotlib()
    years = 2000 + ds / 365.25
    fig, axs = plt.subplots(2, 1, figsize=(12, 7), sharex=True)
    for ax, body in zip(axs, ("sun", "moon")):
        ax.scatter(years, res[body][0], s=1, alpha=0.5, label="RA·cosδ")
        ax.scatter(years, res[body][1], s=1, alpha=0.5, label="Dec")
        ax.set_title(f"{body.capitalize()} position error (model - {args.kernel})")
        ax.set_ylabel("Error (arcmin)")
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper right", markerscale=6)
    axs[-1].set_xlabel("Year")
    plt.tight_layout()
    plt.savefig(args.out_png, dpi=150)
    print(f"Plot saved to {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
