from __future__ import annotations

from dataclasses import dataclass
from math import fmod


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0


# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


# ------------------------------------------------------------
# Fundamental arguments (Meeus / ELP2000-style; degrees)
# ------------------------------------------------------------

@dataclass(frozen=True)
class FundamentalArgs:
    """Lunar fundamental arguments, degrees in [0,360)."""
    Lp_deg: float     # Moon mean longitude
    D_deg: float      # mean elongation
    M_deg: float      # Sun mean anomaly
    Mp_deg: float     # Moon mean anomaly
    F_deg: float      # argument of latitude
    Omega_deg: float  # ascending node


def fundamental_args(T: float) -> FundamentalArgs:
    """
    Meeus chapter 47 polynomials:
      L' = 218.3164477 + 481267.88123421 T - 0.0015786 T^2 + T^3/538841 - T^4/65194000
      D  = 297.8501921 + 445267.1114034  T - 0.0018819 T^2 + T^3/545868  - T^4/113065000
      M  = 357.5291092 + 35999.0502909  T - 0.0001536 T^2 + T^3/24490000
      M' = 134.9633964 + 477198.8675055 T + 0.0087414 T^2 + T^3/69699   - T^4/14712000
      F  = 93.2720950  + 483202.0175233 T - 0.0036539 T^2 - T^3/3526000 + T^4/863310000
      Ω  = 125.04452   - 1934.136261    T + 0.0020708 T^2 + T^3/450000
    """
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2
    return FundamentalArgs(
        Lp_deg=wrap_deg(218.3164477 + 481267.88123421 * T - 0.0015786 * T2 + T3 / 538841.0 - T4 / 65194000.0),
        D_deg=wrap_deg(297.8501921 + 445267.1114034 * T - 0.0018819 * T2 + T3 / 545868.0 - T4 / 113065000.0),
        M_deg=wrap_deg(357.5291092 + 35999.0502909 * T - 0.0001536 * T2 + T3 / 24490000.0),
        Mp_deg=wrap_deg(134.9633964 + 477198.8675055 * T + 0.0087414 * T2 + T3 / 69699.0 - T4 / 14712000.0),
        F_deg=wrap_deg(93.2720950 + 483202.0175233 * T - 0.0036539 * T2 - T3 / 3526000.0 + T4 / 863310000.0),
        Omega_deg=wrap_deg(125.04452 - 1934.136261 * T + 0.0020708 * T2 + T3 / 450000.0),
    )


def eccentricity_factor(T: float) -> float:
    """Scales lunar terms that depend on the Sun's mean anomaly."""
    return 1.0 - 0.002516 * T - 0.0000074 * (T * T)


# ------------------------------------------------------------
# Sun mean elements and obliquity
# ------------------------------------------------------------

@dataclass(frozen=True)
class SolarMean:
    L0_deg: float  # mean longitude of Sun
    M_deg: float   # mean anomaly of Sun


def solar_mean_elements(T: float) -> SolarMean:
    T2 = T * T
    return SolarMean(
        L0_deg=wrap_deg(280.46646 + 36000.76983 * T + 0.0003032 * T2),
        M_deg=wrap_deg(357.52911 + 35999.05029 * T - 0.0001537 * T2),
    )


def mean_obliquity_deg(T: float) -> float:
    """Mean obliquity of the ecliptic (IAU 2000/2006 form), degrees."""
    T2 = T * T
    eps_arcsec = (
        84381.406
        - 46.836769 * T
        - 0.0001831 * T2
        + 0.00200340 * T2 * T
        - 0.000000576 * T2 * T2
        - 0.0000000434 * T2 * T2 * T
    )
    return arcsec_to_deg(eps_arcsec)


# ------------------------------------------------------------
# Mean new moon (Meeus mean phases)
# ------------------------------------------------------------

MEAN_SYNODIC_MONTH = 29.530588861


def jde_mean_new_moon(k: float) -> float:
    """
    Mean JDE (TT) of the k-th new moon counted from 2000 January 6:
      JDE = 2451550.09766 + 29.530588861 k + 0.00015437 T^2 - 0.000000150 T^3 + 0.00000000073 T^4,
      T = k / 1236.85.
    """
    T = k / 1236.85
    T2 = T * T
    return (
        2451550.09766
        + MEAN_SYNODIC_MONTH * k
        + 0.00015437 * T2
        - 0.000000150 * T2 * T
        + 0.00000000073 * T2 * T2
    )


def lunation_index(jd: float) -> int:
    """Nearest Meeus lunation index k for a JD."""
    return round((jd - 2451550.09766) / MEAN_SYNODIC_MONTH)
