"""
beatclock.engines.solar_phase
-----------------------------
Day/night tag and percent of the current day or night elapsed.

The bounding pair of events is taken from the sun-times oracle for the day of
``now``. Outside daylight, the missing side (previous sunset before dawn, next
sunrise after dusk) is looked up on up to ``sun_search_days`` neighbouring
days; only an event on the correct side of ``now`` counts. If none of them
has one (polar night/day, oracle gaps), the bound falls back to
``now ∓ sun_fallback_ms``. Bounds outside the ``datetime`` range give Unknown.
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional

from ..core.oracles import SunTimesOracle
from ..core.time import MS_PER_DAY, epoch_ms, from_epoch_ms
from ..core.types import GeoPosition, SolarPhaseState, SolarTag, UNKNOWN_SOLAR
from .specs import ClockParams, DEFAULT_PARAMS

logger = logging.getLogger(__name__)


def _valid(t: Optional[datetime]) -> bool:
    return isinstance(t, datetime)


def previous_sunset(
    now: datetime,
    position: GeoPosition,
    oracle: SunTimesOracle,
    *,
    params: ClockParams = DEFAULT_PARAMS,
) -> datetime:
    now_ms = epoch_ms(now)
    for i in range(1, params.sun_search_days + 1):
        times = oracle.sun_times(from_epoch_ms(now_ms - i * MS_PER_DAY), position.latitude, position.longitude)
        if _valid(times.sunset) and epoch_ms(times.sunset) <= now_ms:
            return times.sunset
    logger.warning("no sunset in the %d days before %s at %s; falling back", params.sun_search_days, now.isoformat(), position)
    return from_epoch_ms(now_ms - params.sun_fallback_ms)


def next_sunrise(
    now: datetime,
    position: GeoPosition,
    oracle: SunTimesOracle,
    *,
    params: ClockParams = DEFAULT_PARAMS,
) -> datetime:
    now_ms = epoch_ms(now)
    for i in range(1, params.sun_search_days + 1):
        times = oracle.sun_times(from_epoch_ms(now_ms + i * MS_PER_DAY), position.latitude, position.longitude)
        if _valid(times.sunrise) and epoch_ms(times.sunrise) > now_ms:
            return times.sunrise
    logger.warning("no sunrise in the %d days after %s at %s; falling back", params.sun_search_days, now.isoformat(), position)
    return from_epoch_ms(now_ms + params.sun_fallback_ms)


def solar_phase(
    now: datetime,
    position: Optional[GeoPosition],
    oracle: SunTimesOracle,
    *,
    params: ClockParams = DEFAULT_PARAMS,
) -> SolarPhaseState:
    if position is None:
        return UNKNOWN_SOLAR

    try:
        return _bounded_phase(now, position, oracle, params)
    except OverflowError:
        # neighbour days or fallbacks fall outside the datetime range
        logger.warning("sun times out of datetime range at %s for %s", now.isoformat(), position)
        return UNKNOWN_SOLAR


def _bounded_phase(now: datetime, position: GeoPosition, oracle: SunTimesOracle, params: ClockParams) -> SolarPhaseState:
    times = oracle.sun_times(now, position.latitude, position.longitude)
    if not (_valid(times.sunrise) and _valid(times.sunset)):
        logger.debug("sun times unavailable at %s for %s", now.isoformat(), position)
        return UNKNOWN_SOLAR

    now_ms = epoch_ms(now)
    rise_ms = epoch_ms(times.sunrise)
    set_ms = epoch_ms(times.sunset)

    is_day = rise_ms <= now_ms < set_ms
    if is_day:
        start_ms, end_ms = rise_ms, set_ms
    elif now_ms < rise_ms:
        start_ms, end_ms = epoch_ms(previous_sunset(now, position, oracle, params=params)), rise_ms
    else:
        start_ms, end_ms = set_ms, epoch_ms(next_sunrise(now, position, oracle, params=params))

    # start <= now < end holds on every branch
    percent = (now_ms - start_ms) * 100 // (end_ms - start_ms)
    return SolarPhaseState(
        tag=SolarTag.DAY if is_day else SolarTag.NIGHT,
        percent=max(0, min(99, percent)),
    )
