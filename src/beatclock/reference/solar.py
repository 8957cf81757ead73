# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from . import astro_args as aa
from . import time_scales as ts


# Standard altitude of the Sun's upper limb at rise/set, refraction included.
H0_SUNRISE_DEG = -0.833


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    """
    True and apparent solar longitude for a JD(TT) from the truncated
    equation of centre (~0.01 deg).
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)
    M_rad = math.radians(sm.M_deg)

    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )
    L_true = aa.wrap_deg(sm.L0_deg + C_sun)

    # aberration and leading nutation term
    Omega_rad = math.radians(aa.fundamental_args(T).Omega_deg)
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def solar_declination_deg(L_app_deg: float, eps_deg: float) -> float:
    sin_delta = math.sin(math.radians(eps_deg)) * math.sin(math.radians(L_app_deg))
    return math.degrees(math.asin(sin_delta))


def equation_of_time_minutes(jd_tt: float) -> float:
    """Apparent minus mean solar time, minutes."""
    T = aa.T_centuries(jd_tt)
    L0_deg = aa.solar_mean_elements(T).L0_deg
    eps_rad = math.radians(aa.mean_obliquity_deg(T))
    L_app_rad = math.radians(solar_longitude(jd_tt).L_app_deg)

    # right ascension, quadrant preserved
    alpha_deg = aa.wrap_deg(math.degrees(math.atan2(math.cos(eps_rad) * math.sin(L_app_rad), math.cos(L_app_rad))))
    return 4.0 * (aa.wrap_deg(L0_deg - alpha_deg + 180.0) - 180.0)


def hour_angle_deg(jd_tt: float, lat_deg: float, h0_deg: float = H0_SUNRISE_DEG) -> Optional[float]:
    """
    Semi-diurnal arc H0 (degrees) from cos H0 = (sin h0 - sin φ sin δ) / (cos φ cos δ).
    None if the Sun does not cross h0 that day (polar day/night).
    """
    T = aa.T_centuries(jd_tt)
    delta_rad = math.radians(solar_declination_deg(solar_longitude(jd_tt).L_app_deg, aa.mean_obliquity_deg(T)))
    lat_rad = math.radians(lat_deg)

    denom = math.cos(lat_rad) * math.cos(delta_rad)
    if denom == 0.0:
        return None
    cos_H0 = (math.sin(math.radians(h0_deg)) - math.sin(lat_rad) * math.sin(delta_rad)) / denom
    if cos_H0 < -1.0 or cos_H0 > 1.0:
        return None
    return math.degrees(math.acos(cos_H0))


@dataclass(frozen=True)
class SunEvents:
    """Sunrise/sunset of one local solar day as JD(UTC); either may be absent."""
    rise_jd: Optional[float]
    set_jd: Optional[float]


def sun_events_jd(
    jd_utc: float,
    lat_deg: float,
    lon_deg_east: float,
    h0_deg: float = H0_SUNRISE_DEG,
) -> SunEvents:
    """
    Sunrise and sunset around the local mean noon of the LMT day containing jd_utc.

    One refinement pass re-evaluates declination and EOT at each first-guess
    event time.
    """
    off = ts.lmt_offset_days(lon_deg_east)
    jd_noon = ts.jd_to_jdn(jd_utc + off) - off

    jd_tt_noon = ts.jd_utc_to_jd_tt(jd_noon)
    H0 = hour_angle_deg(jd_tt_noon, lat_deg, h0_deg)
    if H0 is None:
        return SunEvents(rise_jd=None, set_jd=None)
    eot_noon = equation_of_time_minutes(jd_tt_noon)

    def refine(sign: float) -> Optional[float]:
        # sign = -1 for rise, +1 for set; 15 deg of hour angle per hour
        guess = jd_noon + (sign * H0 / 15.0 - eot_noon / 60.0) / 24.0
        jd_tt = ts.jd_utc_to_jd_tt(guess)
        H = hour_angle_deg(jd_tt, lat_deg, h0_deg)
        if H is None:
            return guess  # boundary crossed into polar regime; keep the first guess
        return jd_noon + (sign * H / 15.0 - equation_of_time_minutes(jd_tt) / 60.0) / 24.0

    return SunEvents(rise_jd=refine(-1.0), set_jd=refine(1.0))
