# ephemeris/skyfield_oracles.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from . import require_ephemeris
from ..core.errors import OracleUnavailableError
from ..core.oracles import Oracles
from ..core.time import jd_to_instant
from ..core.types import SunTimes
from ..reference import time_scales as ts

logger = logging.getLogger(__name__)

DEFAULT_KERNEL = "de421.bsp"
CACHE_ENV = "BEATCLOCK_SKYFIELD_DIR"


@dataclass(frozen=True, eq=False)
class SkyfieldOracles:
    """
    Lunar phase and sunrise/sunset from a JPL kernel through Skyfield.

    The kernel is downloaded on first use into ``$BEATCLOCK_SKYFIELD_DIR``
    (default ``~/.skyfield``).
    """
    eph: object
    timescale: object

    @classmethod
    def load(cls, kernel: str = DEFAULT_KERNEL, directory: Optional[str] = None) -> "SkyfieldOracles":
        require_ephemeris()
        from skyfield.api import Loader

        directory = directory or os.environ.get(CACHE_ENV) or os.path.expanduser("~/.skyfield")
        os.makedirs(directory, exist_ok=True)
        load = Loader(directory)
        try:
            eph = load(kernel)
        except OSError as e:
            raise OracleUnavailableError(f"Could not load ephemeris kernel '{kernel}' into {directory}") from e
        logger.info("loaded ephemeris %s from %s", kernel, directory)
        return cls(eph=eph, timescale=load.timescale())

    def phase(self, t: datetime) -> float:
        from skyfield import almanac

        deg = almanac.moon_phase(self.eph, self.timescale.from_datetime(t)).degrees
        return (float(deg) / 360.0) % 1.0

    def sun_times(self, t: datetime, lat: float, lon: float) -> SunTimes:
        from skyfield import almanac
        from skyfield.api import wgs84

        # Same local mean solar day as the reference oracle
        jd_noon = ts.local_noon_jd(t, lon)
        t0 = self.timescale.from_datetime(jd_to_instant(jd_noon - 0.5))
        t1 = self.timescale.from_datetime(jd_to_instant(jd_noon + 0.5))

        observer = wgs84.latlon(latitude_degrees=lat, longitude_degrees=lon)
        times, events = almanac.find_discrete(t0, t1, almanac.sunrise_sunset(self.eph, observer))

        sunrise = sunset = None
        for ti, ei in zip(times, events):
            if ei and sunrise is None:
                sunrise = ti.utc_datetime()
            if (not ei) and sunset is None:
                sunset = ti.utc_datetime()
        return SunTimes(sunrise=sunrise, sunset=sunset)

    def as_oracles(self) -> Oracles:
        return Oracles(lunar=self, sun=self)


def skyfield_oracles() -> Oracles:
    return SkyfieldOracles.load().as_oracles()
