"""
beatclock.engines.new_moon
--------------------------
Bounded forward scan for the next new moon.

The scan steps through the lunar-phase oracle at a fixed stride until the
phase enters the band ``[0, threshold) ∪ (1 - threshold, 1)``, then keeps
whichever of (candidate - step, candidate, candidate + step) lies closest to
exact new moon. The result is always in ``(after, after + horizon]``; if the
band is never entered, the horizon edge itself is returned.
"""

from __future__ import annotations
import logging
from datetime import datetime

from ..core.oracles import LunarPhaseOracle
from ..core.time import epoch_ms, from_epoch_ms
from .specs import ClockParams, DEFAULT_PARAMS

logger = logging.getLogger(__name__)


def distance_to_new(phase: float) -> float:
    """Cyclic distance of a phase fraction from new moon (0 or 1)."""
    return min(phase, 1.0 - phase)


def is_near_new(phase: float, threshold: float) -> bool:
    return phase < threshold or phase > 1.0 - threshold


def next_new_moon(
    after: datetime,
    oracle: LunarPhaseOracle,
    *,
    params: ClockParams = DEFAULT_PARAMS,
) -> datetime:
    after_ms = epoch_ms(after)
    step = params.new_moon_step_ms
    horizon_ms = after_ms + params.new_moon_horizon_ms

    t_ms = after_ms + 1
    for _ in range(params.new_moon_max_steps):
        phase = oracle.phase(from_epoch_ms(t_ms))
        if is_near_new(phase, params.new_moon_threshold):
            best_ms, best = t_ms, distance_to_new(phase)
            for j in (-1, 1):
                probe_ms = t_ms + j * step
                if not after_ms < probe_ms <= horizon_ms:
                    continue
                d = distance_to_new(oracle.phase(from_epoch_ms(probe_ms)))
                if d < best:
                    best_ms, best = probe_ms, d
            logger.debug("new moon after %s found at %s (distance %.5f)", after.isoformat(), from_epoch_ms(best_ms).isoformat(), best)
            return from_epoch_ms(best_ms)
        t_ms += step

    logger.warning(
        "no new moon within %d steps after %s; using horizon edge",
        params.new_moon_max_steps, after.isoformat(),
    )
    return from_epoch_ms(horizon_ms)
