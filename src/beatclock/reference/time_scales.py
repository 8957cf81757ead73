from __future__ import annotations

import math
from datetime import datetime

from ..core.time import JD_UNIX_EPOCH, instant_to_jd


# ============================================================
# JD / JDN helpers
# ============================================================

def jd_to_jdn(jd: float) -> int:
    """JDN of the civil (midnight-based) day containing JD: floor(JD + 0.5)."""
    return int(math.floor(jd + 0.5))


def decimal_year_from_jd(jd: float) -> float:
    """Decimal year, Julian-year approximation; adequate for ΔT."""
    return 1970.0 + (jd - JD_UNIX_EPOCH) / 365.25


# ============================================================
# ΔT (= TT - UT), seconds
# ============================================================

def delta_t_seconds(y: float) -> float:
    """
    Espenak–Meeus ΔT for the modern branches, long-term parabola elsewhere.

    Coarse outside 1986..2150, which is fine at the precision the clock needs.
    """
    if 1986.0 <= y < 2005.0:
        t = y - 2000.0
        return 63.86 + 0.3345 * t - 0.060374 * t ** 2 + 0.0017275 * t ** 3 + 0.000651814 * t ** 4 + 0.00002373599 * t ** 5
    if 2005.0 <= y < 2050.0:
        t = y - 2000.0
        return 62.92 + 0.32217 * t + 0.005589 * t ** 2
    u = (y - 1820.0) / 100.0
    if 2050.0 <= y < 2150.0:
        return -20.0 + 32.0 * u * u - 0.5628 * (2150.0 - y)
    return -20.0 + 32.0 * u * u


def jd_utc_to_jd_tt(jd_utc: float) -> float:
    """JD(UTC) -> JD(TT), taking UT1 = UTC."""
    return jd_utc + delta_t_seconds(decimal_year_from_jd(jd_utc)) / 86400.0


def instant_to_jd_tt(t: datetime) -> float:
    return jd_utc_to_jd_tt(instant_to_jd(t))


# ============================================================
# Local Mean Time (LMT)
# ============================================================

def lmt_offset_days(longitude_deg_east: float) -> float:
    """LMT - UTC in days; 360° -> 1 day."""
    return longitude_deg_east / 360.0


def local_noon_jd(t: datetime, longitude_deg_east: float) -> float:
    """
    JD(UTC) of the local mean noon of the LMT calendar day containing t.

    Integral JDs fall on 12:00 UTC, so local mean noon is the LMT day's JDN
    shifted west by the longitude.
    """
    off = lmt_offset_days(longitude_deg_east)
    return jd_to_jdn(instant_to_jd(t) + off) - off
