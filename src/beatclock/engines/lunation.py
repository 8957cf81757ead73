from __future__ import annotations
from datetime import datetime
from functools import lru_cache

from ..core.oracles import LunarPhaseOracle
from ..core.time import epoch_ms
from ..core.types import LunationState
from .new_moon import next_new_moon
from .specs import ClockParams, DEFAULT_PARAMS


@lru_cache(maxsize=64)
def first_new_moon_after(
    anchor: datetime,
    oracle: LunarPhaseOracle,
    params: ClockParams = DEFAULT_PARAMS,
) -> datetime:
    """First new moon after an equinox anchor; stable for a whole year, so memoised."""
    return next_new_moon(anchor, oracle, params=params)


def _hashable(oracle: LunarPhaseOracle) -> bool:
    try:
        hash(oracle)
    except TypeError:
        return False
    return True


def lunation_since(
    now: datetime,
    equinox_anchor: datetime,
    oracle: LunarPhaseOracle,
    *,
    params: ClockParams = DEFAULT_PARAMS,
) -> LunationState:
    """
    Lunation (1-based) and truncated percent through it, counted in fixed
    synodic months from the first new moon after the anchor.

    Before that first new moon the state is pinned to the start of lunation 1.
    The first new moon is memoised only for hashable oracles.
    """
    if _hashable(oracle):
        first = first_new_moon_after(equinox_anchor, oracle, params)
    else:
        first = next_new_moon(equinox_anchor, oracle, params=params)
    elapsed = epoch_ms(now) - epoch_ms(first)
    if elapsed < 0:
        return LunationState(lunation=1, percent=0)

    cycle = params.synodic_month_ms
    return LunationState(
        lunation=elapsed // cycle + 1,
        percent=(elapsed % cycle) * 100 // cycle,
    )
