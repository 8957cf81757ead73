#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import datetime, timedelta, timezone

import beatclock
from beatclock.core.time import parse_instant
from beatclock.core.types import SolarTag


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "beatclock[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "beatclock[diagnostics]"') from e


def build_series(np, start: datetime, pos: beatclock.GeoPosition, *, hours: float, step_min: int, oracles: str):
    """Hours since start, signed solar percent (+day, -night, NaN unknown)."""
    sun = beatclock.get_oracles(oracles).sun
    n = int(hours * 60 // step_min) + 1
    x = np.arange(n) * step_min / 60.0
    y = np.empty(n, dtype=float)
    for i in range(n):
        st = beatclock.solar_phase(start + timedelta(minutes=i * step_min), pos, sun)
        if st.tag is SolarTag.UNKNOWN:
            y[i] = np.nan
        else:
            y[i] = st.percent if st.tag is SolarTag.DAY else -st.percent
    return x, y


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot the solar percent (day > 0, night < 0) over a span of time.")
    p.add_argument("--lat", type=float, default=51.5)
    p.add_argument("--lon", type=float, default=-0.12)
    p.add_argument("--start", default=None, help="Start instant (default: today 00:00 UTC)")
    p.add_argument("--hours", type=float, default=48.0)
    p.add_argument("--step-min", type=int, default=10)
    p.add_argument("--oracles", default="reference")
    p.add_argument("--outbase", default="solar_day")
    args = p.parse_args(argv)

    if args.start is None:
        start = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    else:
        start = parse_instant(args.start)
        if start is None:
            raise SystemExit(f"invalid --start: {args.start!r}")

    pos = beatclock.position_from(args.lat, args.lon)
    if pos is None:
        raise SystemExit("--lat/--lon out of range")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, start, pos, hours=args.hours, step_min=args.step_min, oracles=args.oracles)

    fig, ax = plt.subplots(figsize=(9.2, 4.0), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.axhline(0.0, color="0.5", linewidth=0.8)
    ax.plot(x, y, color="tab:orange", linewidth=1.4)
    ax.set_xlabel(f"Hours since {start:%Y-%m-%d %H:%M} UTC")
    ax.set_ylabel("Solar percent (day +, night -)")
    ax.set_title(f"Solar phase at {pos.latitude:.2f}, {pos.longitude:.2f}")

    fig.savefig(args.outbase + ".png", dpi=150)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
