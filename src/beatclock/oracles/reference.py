"""
beatclock.oracles.reference
---------------------------
Pure-Python oracles backed by the truncated analytical series in
``beatclock.reference``. No external data; accurate to minutes, which is
well inside what the hourly new-moon scan and the percent outputs resolve.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

from ..core.oracles import Oracles
from ..core.time import instant_to_jd, jd_to_instant
from ..core.types import SunTimes
from ..reference import lunar, solar
from ..reference import time_scales as ts


@dataclass(frozen=True)
class ReferenceLunarPhase:
    def phase(self, t: datetime) -> float:
        return lunar.phase_fraction(ts.instant_to_jd_tt(t))


@dataclass(frozen=True)
class ReferenceSunTimes:
    h0_deg: float = solar.H0_SUNRISE_DEG

    def sun_times(self, t: datetime, lat: float, lon: float) -> SunTimes:
        ev = solar.sun_events_jd(instant_to_jd(t), lat, lon, self.h0_deg)
        return SunTimes(
            sunrise=jd_to_instant(ev.rise_jd) if ev.rise_jd is not None else None,
            sunset=jd_to_instant(ev.set_jd) if ev.set_jd is not None else None,
        )


def reference_oracles() -> Oracles:
    return Oracles(lunar=ReferenceLunarPhase(), sun=ReferenceSunTimes())
