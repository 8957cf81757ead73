from __future__ import annotations
from datetime import datetime

from ..core.time import MS_PER_DAY, ms_of_day
from .specs import ClockParams, DEFAULT_PARAMS


def beat_of_day(now: datetime, *, params: ClockParams = DEFAULT_PARAMS) -> float:
    """Fraction of the day in beats (1/1000 day), measured in the UTC+1 frame."""
    total_ms = (ms_of_day(now) + params.beat_offset_ms) % MS_PER_DAY
    return total_ms / params.ms_per_beat


def format_beat(value: float) -> str:
    """'000.00'..'999.99'; values that would round up to 1000 stay at 999.99."""
    return f"{min(value, 999.99):06.2f}"
