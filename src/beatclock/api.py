from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional, Union

from .core.oracles import OracleFactory, OracleRegistry, Oracles
from .core.time import MS_PER_DAY, as_instant, epoch_ms, parse_instant
from .core.types import ClockReading, GeoPosition
from .core.errors import InvalidPositionError
from .engines.beat import beat_of_day
from .engines.equinox import estimate_march_equinox
from .engines.lunation import lunation_since
from .engines.solar_phase import solar_phase
from .engines.specs import ClockParams, DEFAULT_PARAMS

logger = logging.getLogger(__name__)

DEFAULT_ORACLES = "reference"
OracleArg = Union[str, Oracles, None]

_registry: Optional[OracleRegistry] = None

def set_registry(reg: OracleRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> OracleRegistry:
    if _registry is None:
        raise RuntimeError("Oracle registry not initialized")
    return _registry

def list_oracles() -> List[str]:
    return _reg().list()

def get_oracles(name: str = DEFAULT_ORACLES) -> Oracles:
    return _reg().get(name)

def register_oracles(name: str, oracles: Union[Oracles, OracleFactory], *, overwrite: bool = False) -> None:
    _reg().register(name, oracles, overwrite=overwrite)

def _resolve(oracles: OracleArg) -> Oracles:
    if oracles is None:
        return get_oracles(DEFAULT_ORACLES)
    if isinstance(oracles, str):
        return get_oracles(oracles)
    return oracles

# ============================================================
# Inputs
# ============================================================

def position_from(lat: Optional[float], lon: Optional[float]) -> Optional[GeoPosition]:
    """
    Boundary for the location collaborator: anything missing or out of range
    becomes "no position" rather than an error.
    """
    if lat is None or lon is None:
        return None
    try:
        return GeoPosition(float(lat), float(lon))
    except (TypeError, ValueError, InvalidPositionError) as e:
        logger.warning("ignoring position (%r, %r): %s", lat, lon, e)
        return None

# ============================================================
# Clock fields
# ============================================================

def holocene_year(now: datetime, *, params: ClockParams = DEFAULT_PARAMS) -> int:
    return as_instant(now).year + params.holocene_offset

def days_since_equinox(now: datetime, equinox_anchor: datetime) -> int:
    """1 on the anchor day; negative before the anchor."""
    return (epoch_ms(now) - epoch_ms(equinox_anchor)) // MS_PER_DAY + 1

def clock_reading(
    now: datetime,
    position: Optional[GeoPosition] = None,
    *,
    oracles: OracleArg = None,
    params: ClockParams = DEFAULT_PARAMS,
) -> ClockReading:
    now = as_instant(now)
    orc = _resolve(oracles)

    year = holocene_year(now, params=params)
    anchor = estimate_march_equinox(year - params.holocene_offset, params=params)
    return ClockReading(
        instant=now,
        equinox_anchor=anchor,
        holocene_year=year,
        lunation=lunation_since(now, anchor, orc.lunar, params=params),
        days_since_equinox=days_since_equinox(now, anchor),
        beat=beat_of_day(now, params=params),
        solar=solar_phase(now, position, orc.sun, params=params),
    )

def render_clock(
    now: datetime,
    position: Optional[GeoPosition] = None,
    *,
    oracles: OracleArg = None,
    params: ClockParams = DEFAULT_PARAMS,
) -> str:
    """``H<year> L<lunation>.<pp> D<days> @<beat> <S|N|S?><pp|??>``"""
    return str(clock_reading(now, position, oracles=oracles, params=params))

def render_now(
    position: Optional[GeoPosition] = None,
    *,
    oracles: OracleArg = None,
    params: ClockParams = DEFAULT_PARAMS,
) -> str:
    return render_clock(datetime.now(timezone.utc), position, oracles=oracles, params=params)

def convert(
    text: str,
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    *,
    oracles: OracleArg = None,
    params: ClockParams = DEFAULT_PARAMS,
) -> Optional[str]:
    """Clock string for an arbitrary date/time string; None if it cannot be parsed."""
    now = parse_instant(text)
    if now is None:
        logger.error("invalid date input: %r", text)
        return None
    return render_clock(now, position_from(lat, lon), oracles=oracles, params=params)
