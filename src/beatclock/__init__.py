"""beatclock public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    render_clock,
    render_now,
    clock_reading,
    convert,
    position_from,
    holocene_year,
    days_since_equinox,
    list_oracles,
    get_oracles,
    register_oracles,
)
from .core.oracles import Oracles
from .core.types import ClockReading, GeoPosition, LunationState, SolarPhaseState, SolarTag, SunTimes
from .engines.beat import beat_of_day, format_beat
from .engines.equinox import estimate_march_equinox
from .engines.lunation import lunation_since
from .engines.new_moon import next_new_moon
from .engines.solar_phase import solar_phase
from .engines.specs import ClockParams, DEFAULT_PARAMS

__all__ = [
    "render_clock",
    "render_now",
    "clock_reading",
    "convert",
    "position_from",
    "holocene_year",
    "days_since_equinox",
    "list_oracles",
    "get_oracles",
    "register_oracles",
    "Oracles",
    "ClockReading",
    "GeoPosition",
    "LunationState",
    "SolarPhaseState",
    "SolarTag",
    "SunTimes",
    "beat_of_day",
    "format_beat",
    "estimate_march_equinox",
    "lunation_since",
    "next_new_moon",
    "solar_phase",
    "ClockParams",
    "DEFAULT_PARAMS",
]
