# reference/lunar.py

from __future__ import annotations

import math

from . import astro_args as aa
from .solar import solar_longitude


# (d, m, m', f, coefficient in microdegrees)
# Meeus table 47.A, longitude column.
LUNAR_LON_TERMS = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
    (2, -2, -1, 0, 2011),
    (2, 0, 1, -2, -1977),
    (4, 0, -3, 0, -1736),
    (4, -1, -1, 0, -1671),
    (2, 1, 1, 0, -1557),
    (1, 1, -2, 0, 1492),
    (2, 0, -4, 0, -1422),
    (4, -1, -2, 0, -1205),
    (2, 1, 0, -2, -1111),
    (2, -1, 1, -2, -1100),
    (2, -1, 2, 0, -811),
    (0, 0, 4, 0, 769),
    (2, 0, -2, 2, 717),
    (0, 0, 2, 2, -712),
    (1, 0, 2, 0, -663),
    (1, 1, -1, 0, -565),
    (1, 0, -2, 0, -523),
    (4, 0, -4, 0, 492),
    (4, -2, -1, 0, -488),
    (2, 2, -1, 0, -469),
    (2, 2, 0, 0, -440),
    (0, 1, 3, 0, -425),
    (4, 0, 1, 0, -418),
    (0, 0, 2, -2, 386),
    (2, 0, -5, 0, 371),
    (2, 2, -2, 0, 362),
)


def lunar_longitude_deg(jd_tt: float) -> float:
    """Apparent geocentric lunar longitude (degrees) for a JD(TT)."""
    T = aa.T_centuries(jd_tt)
    fa = aa.fundamental_args(T)
    E = aa.eccentricity_factor(T)

    D_rad = math.radians(fa.D_deg)
    M_rad = math.radians(fa.M_deg)
    Mp_rad = math.radians(fa.Mp_deg)
    F_rad = math.radians(fa.F_deg)

    lon_sum_microdeg = 0.0
    for d, m, mp, f, coef in LUNAR_LON_TERMS:
        if m:
            coef *= E ** abs(m)
        lon_sum_microdeg += coef * math.sin(d * D_rad + m * M_rad + mp * Mp_rad + f * F_rad)

    nutation_lon = -0.00478 * math.sin(math.radians(fa.Omega_deg))
    return aa.wrap_deg(fa.Lp_deg + lon_sum_microdeg * 1e-6 + nutation_lon)


def elongation_deg(jd_tt: float) -> float:
    """Moon minus Sun apparent longitude, wrapped to [0,360)."""
    return aa.wrap_deg(lunar_longitude_deg(jd_tt) - solar_longitude(jd_tt).L_app_deg)


def phase_fraction(jd_tt: float) -> float:
    """Synodic phase in [0,1): 0 new, 0.25 first quarter, 0.5 full, 0.75 last quarter."""
    return (elongation_deg(jd_tt) / 360.0) % 1.0
