#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import timedelta

import beatclock
from beatclock.core.time import instant_to_jd
from beatclock.engines.equinox import estimate_march_equinox
from beatclock.reference import astro_args as aa


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "beatclock[diagnostics]"') from e


def scan_offsets(np, year_from: int, year_to: int, *, per_year: int = 13, oracles: str = "reference"):
    """
    Located new moons vs the Meeus mean new moon, in hours.

    Starts at each year's equinox anchor and chains the hourly scan forward
    ``per_year`` times. Mean-phase offsets include the true-minus-mean
    anomaly terms (up to ~14 h), so the spread is expected.
    """
    lunar = beatclock.get_oracles(oracles).lunar
    offsets = []
    for y in range(year_from, year_to + 1):
        t = estimate_march_equinox(y)
        for _ in range(per_year):
            t = beatclock.next_new_moon(t, lunar)
            jd = instant_to_jd(t)
            mean_jd = aa.jde_mean_new_moon(aa.lunation_index(jd))
            offsets.append((jd - mean_jd) * 24.0)
            t += timedelta(days=2)
    return np.asarray(offsets, dtype=float)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Statistics of hourly-scan new moons against Meeus mean new moons.")
    p.add_argument("--from-year", type=int, default=2024)
    p.add_argument("--to-year", type=int, default=2026)
    p.add_argument("--per-year", type=int, default=13)
    p.add_argument("--oracles", default="reference")
    args = p.parse_args(argv)

    np = _need_numpy()
    off = scan_offsets(np, args.from_year, args.to_year, per_year=args.per_year, oracles=args.oracles)

    print(f"new moons scanned : {off.size}")
    print(f"mean offset (h)   : {off.mean():+.2f}")
    print(f"std offset (h)    : {off.std():.2f}")
    print(f"min / max (h)     : {off.min():+.2f} / {off.max():+.2f}")
    print(f"median |off| (h)  : {np.median(np.abs(off)):.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
