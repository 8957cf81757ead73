from __future__ import annotations

import argparse
from datetime import datetime
from typing import List, Tuple

import beatclock
from beatclock.engines import equinox as eq
from beatclock.engines.lunation import first_new_moon_after


def anchor_rows(year_from: int, year_to: int, *, oracles: str = "reference") -> List[Tuple[int, float, datetime, datetime, datetime]]:
    """(year, JDE, raw equinox, anchor, first new moon after anchor) per year."""
    lunar = beatclock.get_oracles(oracles).lunar
    rows = []
    for y in range(year_from, year_to + 1):
        anchor = eq.estimate_march_equinox(y)
        rows.append((y, eq.march_equinox_jde(y), eq.march_equinox_instant(y), anchor, first_new_moon_after(anchor, lunar)))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Table of equinox anchors and the first new moon after each.")
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--oracles", default="reference")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    header = f"{'Year':<6}{'JDE':<16}{'Equinox (UTC)':<19}{'Anchor (UTC)':<19}{'New moon (UTC)':<19}{'Gap (d)':>8}"
    print(header)
    print("-" * len(header))
    for y, jde, raw, anchor, nm in anchor_rows(args.from_year, args.to_year, oracles=args.oracles):
        gap = (nm - anchor).total_seconds() / 86400.0
        print(f"{y:<6}{jde:<16.5f}{raw:%Y-%m-%d %H:%M}  {anchor:%Y-%m-%d %H:%M}  {nm:%Y-%m-%d %H:%M}  {gap:>8.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
