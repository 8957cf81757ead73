"""
beatclock.engines.equinox
-------------------------
Mean March equinox and the day-zero anchor derived from it.

The anchor is not the equinox itself: the equinox instant is moved back to
the most recent ``anchor_hour`` (23:00 UTC by default) so day counting cuts
over at a fixed clock time every year.
"""

from __future__ import annotations
from datetime import datetime, timedelta

from ..core.time import jd_to_instant
from .specs import ClockParams, DEFAULT_PARAMS


def march_equinox_jde(year: int) -> float:
    """Mean March equinox (JDE) from the Meeus polynomial, Y in millennia from 2000."""
    Y = (year - 2000) / 1000
    return (
        2451623.80984
        + 365242.37404 * Y
        + 0.05169 * Y ** 2
        - 0.00411 * Y ** 3
        - 0.00057 * Y ** 4
    )


def march_equinox_instant(year: int) -> datetime:
    """Raw equinox instant; JDE is read directly as UTC (no ΔT)."""
    return jd_to_instant(march_equinox_jde(year))


def snap_to_anchor(t: datetime, *, params: ClockParams = DEFAULT_PARAMS) -> datetime:
    anchor = t.replace(hour=params.anchor_hour, minute=0, second=0, microsecond=0)
    if t.hour < params.anchor_hour:
        anchor -= timedelta(days=1)
    return anchor


def estimate_march_equinox(year: int, *, params: ClockParams = DEFAULT_PARAMS) -> datetime:
    """Equinox anchor for a Gregorian year."""
    return snap_to_anchor(march_equinox_instant(year), params=params)
