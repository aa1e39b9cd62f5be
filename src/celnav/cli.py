from __future__ import annotations

import argparse
from datetime import datetime
import importlib
import inspect
import logging
import sys


def _parse_dt(s: str) -> datetime:
    """ISO-8601 with a UTC offset; 'Z' is accepted for UTC."""
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        raise SystemExit(f"datetime needs a UTC offset, e.g. {s}+00:00")
    return dt


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _fmt(t) -> str:
    return "-" if t is None else str(t)


def _print_events(events) -> None:
    if not events:
        print("  (no crossings)")
    for e in events:
        print(f"  {e.kind:<4} {e.time}  az {e.azimuth:7.2f}")


def _location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("lat", type=float, help="Observer latitude in degrees")
    p.add_argument("lon", type=float, help="Observer longitude in degrees (positive East)")
    p.add_argument("datetime", help="ISO-8601 local time with offset, e.g. 2024-03-20T12:00-05:00")


def cmd_sun(argv: list[str]) -> int:
    import celnav

    p = argparse.ArgumentParser(prog="celnav sun", description="Sunrise/sunset for one local day.")
    _location_args(p)
    p.add_argument("--correction", default="sunrise", help="Named horizon correction")
    args = p.parse_args(argv)

    day = celnav.solar_event_day((args.lat, args.lon), _parse_dt(args.datetime), correction=args.correction)
    print(f"State: {day.state}")
    _print_events(day.events)
    print(f"Day length          : {_fmt(day.day_length)}")
    print(f"Night length        : {_fmt(day.night_length)}")
    print(f"Meridian crossing   : {_fmt(day.meridian_crossing)}")
    print(f"Antimeridian        : {_fmt(day.antimeridian_crossing)}")
    return 0


def cmd_moon(argv: list[str]) -> int:
    import celnav

    p = argparse.ArgumentParser(prog="celnav moon", description="Moonrise/moonset and phase for one local day.")
    _location_args(p)
    p.add_argument("--correction", default="moonrise", help="Named horizon correction")
    args = p.parse_args(argv)

    day = celnav.lunar_event_day((args.lat, args.lon), _parse_dt(args.datetime), correction=args.correction)
    print(f"State: {day.state}")
    _print_events(day.events)
    print(f"Visible length      : {_fmt(day.visible_length)}")
    print(f"Invisible length    : {_fmt(day.invisible_length)}")
    print(f"Meridian crossing   : {_fmt(day.meridian_crossing)}")
    print(f"Antimeridian        : {_fmt(day.antimeridian_crossing)}")
    print(f"Age (days)          : {day.age_in_days:.3f}")
    print(f"Illumination (%)    : {day.illumination_percent:.1f}")
    return 0


def cmd_ring(argv: list[str]) -> int:
    import celnav

    p = argparse.ArgumentParser(prog="celnav ring", description="Light-phase intervals (twilight, magic hour, ...).")
    _location_args(p)
    p.add_argument("--profile", default="civil_twilight", choices=celnav.list_ring_profiles())
    args = p.parse_args(argv)

    ring = celnav.ring_event_day((args.lat, args.lon), _parse_dt(args.datetime), args.profile)
    for tr in ring.events:
        print(f"  {tr.kind}: {tr.start.when.isoformat()} -> {tr.finish.when.isoformat()}")
    if not ring.events:
        print("  (no intervals)")
    print(f"Daylight before ring: {_fmt(ring.daylight_before_ring)}")
    print(f"Ring duration       : {_fmt(ring.ring_duration)}")
    print(f"Darkness after ring : {_fmt(ring.darkness_after_ring)}")
    return 0


def cmd_next(argv: list[str]) -> int:
    import celnav

    p = argparse.ArgumentParser(prog="celnav next", description="Next day with rise/set events (up to a year ahead).")
    p.add_argument("body", choices=["sun", "moon"])
    _location_args(p)
    p.add_argument("--absolute", action="store_true", help="Print calendar datetimes instead of ms offsets")
    args = p.parse_args(argv)

    calc = celnav.get_calculator("solar" if args.body == "sun" else "lunar")
    coord = celnav.Coordinate(args.lat, args.lon)
    dt = _parse_dt(args.datetime)
    if args.absolute:
        found = calc.find_upcoming_absolute_event_day(coord, dt)
        for e in found.events:
            print(f"  {e.kind:<4} {e.when.isoformat()}  az {e.azimuth:7.2f}")
    else:
        found = calc.find_upcoming_relative_event_day(coord, dt)
        for e in found.events:
            print(f"  {e.kind:<4} in {e.millis} ms ({e.time})  az {e.azimuth:7.2f}")
    if not found.events:
        print("  (no events within the search horizon)")
    else:
        print(f"Previous day state: {found.pre_state}")
    return 0


def cmd_deltat(argv: list[str]) -> int:
    from celnav.reference.deltat import estimate_delta_t

    p = argparse.ArgumentParser(prog="celnav deltat", description="Estimated ΔT = TT - UT (seconds).")
    p.add_argument("year", type=float, help="Decimal year")
    args = p.parse_args(argv)

    print(f"ΔT({args.year:g}) = {estimate_delta_t(args.year):.3f} s")
    return 0


def cmd_jd(argv: list[str]) -> int:
    from celnav.reference import time_scales as ts
    from celnav.reference.deltat import estimate_delta_t

    p = argparse.ArgumentParser(prog="celnav jd", description="Julian Date (UT and TT) of an ISO datetime.")
    p.add_argument("datetime", help="ISO-8601 with offset")
    args = p.parse_args(argv)

    dt = _parse_dt(args.datetime)
    dT = estimate_delta_t(ts.utc_decimal_year(dt))
    print(f"JD_UT = {ts.julian_date(dt):.6f}")
    print(f"ΔT    = {dT:.3f} s")
    print(f"JD_TT = {ts.julian_date(dt, dT):.6f}")
    return 0


def cmd_profiles(argv: list[str]) -> int:
    import celnav
    from celnav.engines.profiles import STANDARD_CORRECTIONS

    argparse.ArgumentParser(prog="celnav profiles", description="List named thresholds and ring profiles.").parse_args(argv)

    print("Horizon corrections:")
    for name, c in sorted(STANDARD_CORRECTIONS.items()):
        print(f"  {name:<24} {c.angle_from_horizon:+6.1f} deg  refraction={c.include_refraction}")
    print("Ring profiles:")
    for name in celnav.list_ring_profiles():
        r = celnav.get_ring_profile(name)
        print(f"  {name:<24} {r.lower.angle_from_horizon:+6.1f} .. {r.upper.angle_from_horizon:+6.1f} deg")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="celnav", description="Sun and Moon rise/set, twilight and phase toolkit.")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("sun", help="Sunrise/sunset for one local day")
    sub.add_parser("moon", help="Moonrise/moonset and phase for one local day")
    sub.add_parser("ring", help="Light-phase intervals (twilight, magic hour, ...)")
    sub.add_parser("next", help="Next day with rise/set events")
    sub.add_parser("deltat", help="Estimated ΔT for a decimal year")
    sub.add_parser("jd", help="Julian Date of an ISO datetime")
    sub.add_parser("profiles", help="List named thresholds and ring profiles")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument("tool", choices=["daylength-year"], help="Which diagnostic to run")

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-positions"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "sun":
        return cmd_sun(rest)

    if args.cmd == "moon":
        return cmd_moon(rest)

    if args.cmd == "ring":
        return cmd_ring(rest)

    if args.cmd == "next":
        return cmd_next(rest)

    if args.cmd == "deltat":
        return cmd_deltat(rest)

    if args.cmd == "jd":
        return cmd_jd(rest)

    if args.cmd == "profiles":
        return cmd_profiles(rest)

    if args.cmd == "diag":
        tool_map = {
            "daylength-year": "celnav.diagnostics.daylength_year",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-positions": "celnav.diagnostics.ephem.validate_positions",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
