#!/usr/bin/env python3
"""
Sweep one year of days at a location and plot day length, night length and
the event times of the Sun (or visible/invisible length of the Moon).

Days without a defined length (ERROR states) are left as gaps.
"""
from __future__ import annotations

import argparse
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from celnav.core.types import Coordinate
from celnav.engines import profiles
from celnav.engines.day import lunar_event_day, solar_event_day


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
    p = argparse.ArgumentParser(description="Day length over a year at one location.")
    p.add_argument("--lat", type=float, default=68.9585)
    p.add_argument("--lon", type=float, default=33.0827)
    p.add_argument("--utc-offset", type=float, default=3.0, help="Fixed UTC offset in hours")
    p.add_argument("--year", type=int, default=2024)
    p.add_argument("--body", choices=["sun", "moon"], default="sun")
    p.add_argument("--out-png", default="daylength_year.png")
    p.add_argument("--no-plot", action="store_true", help="Print summary only")
    args = p.parse_args(argv)

    np = _need_numpy()

    tz = timezone(timedelta(hours=args.utc_offset))
    coord = Coordinate(args.lat, args.lon)
    start = date(args.year, 1, 1)
    n_days = (date(args.year + 1, 1, 1) - start).days

    light_h = np.full(n_days, np.nan)
    states: dict = {}
    for i in range(n_days):
        dt = datetime.combine(start + timedelta(days=i), datetime.min.time(), tzinfo=tz)
        if args.body == "sun":
            day = solar_event_day(coord, profiles.SUNRISE, dt)
            light = day.day_length
        else:
            day = lunar_event_day(coord, profiles.MOONRISE, dt)
            light = day.visible_length
        states[day.state] = states.get(day.state, 0) + 1
        if light is not None:
            light_h[i] = light.to_total_ms() / 3_600_000.0

    print(f"{args.body} at ({args.lat}, {args.lon}), {args.year}, UTC{args.utc_offset:+g}")
    for state, count in sorted(states.items()):
        print(f"  {state:<15} {count:4d} days")
    if np.any(np.isfinite(light_h)):
        print(f"  light hours: min {np.nanmin(light_h):.2f}  max {np.nanmax(light_h):.2f}  mean {np.nanmean(light_h):.2f}")

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(np.arange(n_days) + 1, light_h, lw=1.2)
    ax.set_xlabel("day of year")
    ax.set_ylabel("hours above threshold")
    ax.set_ylim(-0.5, 24.5)
    ax.set_title(f"{args.body} light length, lat {args.lat:g} lon {args.lon:g}, {args.year}")
    ax.grid(alpha=0.3)
    fig.tight_layout()
    fig.savefig(args.out_png, dpi=120)
    print(f"Saved plot: {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
