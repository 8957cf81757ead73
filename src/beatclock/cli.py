from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import sys
from datetime import datetime, timedelta, timezone
from typing import Optional

from .core.errors import BeatClockError


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


def _add_position_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, default=None, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, default=None, help="Observer longitude in degrees (positive East)")
    p.add_argument("--oracles", default="reference", help="Oracle set (reference, skyfield)")
    p.add_argument("--json", action="store_true", help="Print the structured record as JSON")


def _oracle_error(e: Exception) -> int:
    msg = e.args[0] if isinstance(e, KeyError) and e.args else e
    print(f"error: {msg}", file=sys.stderr)
    return 2


def _print_reading(reading, as_json: bool) -> None:
    if as_json:
        print(json.dumps(reading.as_dict(), indent=2))
    else:
        print(reading)


def cmd_now(argv: list[str]) -> int:
    import beatclock

    p = argparse.ArgumentParser(prog="beatclock now", description="Beat clock for the current instant")
    _add_position_args(p)
    args = p.parse_args(argv)

    pos = beatclock.position_from(args.lat, args.lon)
    try:
        reading = beatclock.clock_reading(datetime.now(timezone.utc), pos, oracles=args.oracles)
    except (KeyError, BeatClockError) as e:
        return _oracle_error(e)
    _print_reading(reading, args.json)
    return 0


def cmd_convert(argv: list[str]) -> int:
    import beatclock
    from beatclock.core.time import parse_instant

    p = argparse.ArgumentParser(prog="beatclock convert", description="Gregorian date/time -> beat clock")
    p.add_argument("date", help="YYYY-MM-DD or ISO 8601 date-time (UTC if no offset)")
    _add_position_args(p)
    args = p.parse_args(argv)

    now = parse_instant(args.date)
    if now is None:
        print(f"invalid date: {args.date!r}", file=sys.stderr)
        return 1

    pos = beatclock.position_from(args.lat, args.lon)
    try:
        reading = beatclock.clock_reading(now, pos, oracles=args.oracles)
    except (KeyError, BeatClockError) as e:
        return _oracle_error(e)
    _print_reading(reading, args.json)
    return 0


def cmd_equinox(argv: list[str]) -> int:
    from beatclock.engines import equinox as eq

    p = argparse.ArgumentParser(prog="beatclock equinox", description="Mean March equinox and day-zero anchor")
    p.add_argument("year", type=int, help="Gregorian year")
    p.add_argument("--to-year", type=int, default=None, help="Print a range of years")
    args = p.parse_args(argv)

    y1 = args.to_year if args.to_year is not None else args.year
    if y1 < args.year:
        raise SystemExit("--to-year must be >= year")

    for y in range(args.year, y1 + 1):
        raw = eq.march_equinox_instant(y)
        anchor = eq.estimate_march_equinox(y)
        print(f"{y}  JDE={eq.march_equinox_jde(y):.5f}  equinox={raw:%Y-%m-%d %H:%M} UTC  anchor={anchor:%Y-%m-%d %H:%M} UTC")
    return 0


def cmd_new_moon(argv: list[str]) -> int:
    import beatclock
    from beatclock.core.time import parse_instant

    p = argparse.ArgumentParser(prog="beatclock new-moon", description="Next new moon after an instant (hourly scan)")
    p.add_argument("--after", default=None, help="Start instant (default: now)")
    p.add_argument("--count", type=int, default=1, help="Number of successive new moons")
    p.add_argument("--oracles", default="reference")
    args = p.parse_args(argv)

    after: Optional[datetime] = datetime.now(timezone.utc) if args.after is None else parse_instant(args.after)
    if after is None:
        print(f"invalid date: {args.after!r}", file=sys.stderr)
        return 1

    try:
        lunar = beatclock.get_oracles(args.oracles).lunar
    except (KeyError, BeatClockError) as e:
        return _oracle_error(e)
    for _ in range(max(1, args.count)):
        after = beatclock.next_new_moon(after, lunar)
        print(after.strftime("%Y-%m-%d %H:%M UTC"))
        # skip past the current new-moon band before scanning again
        after += timedelta(days=2)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="beatclock", description="Holocene / lunation / beat / solar clock.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More log output (repeatable)")
    p.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("now", help="Beat clock for the current instant")
    sub.add_parser("convert", help="Beat clock for a given date/time")
    sub.add_parser("equinox", help="Mean March equinox and anchor for a year")
    sub.add_parser("new-moon", help="Next new moon after an instant")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["equinox-anchors", "new-moon-offsets", "solar-day"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    level = logging.ERROR if args.quiet else (logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)]
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

    if args.cmd == "now":
        return cmd_now(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "equinox":
        return cmd_equinox(rest)

    if args.cmd == "new-moon":
        return cmd_new_moon(rest)

    if args.cmd == "diag":
        tool_map = {
            "equinox-anchors": "beatclock.diagnostics.equinox_anchors",
            "new-moon-offsets": "beatclock.diagnostics.new_moon_offsets",
            "solar-day": "beatclock.diagnostics.solar_day",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
