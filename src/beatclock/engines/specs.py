"""
beatclock.engines.specs
-----------------------
Pure data parameters for the clock engines.

Every constant the engines depend on lives in ``ClockParams`` so alternate
clocks can be described as data: ``DEFAULT_PARAMS.tweak(anchor_hour=0)``.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from ..core.time import MS_PER_DAY, MS_PER_HOUR


# ============================================================
# CALENDAR CONSTANTS
# ============================================================

HOLOCENE_OFFSET = 9700

# Fixed synodic month; not recomputed astronomically.
SYNODIC_MONTH_DAYS = 29.53059

# Beat frame is UTC+1.
BEAT_OFFSET_MS = MS_PER_HOUR
BEATS_PER_DAY = 1000

# Day-zero boundary for day and lunation counting (UTC hour).
ANCHOR_HOUR = 23


@dataclass(frozen=True)
class ClockParams:
    holocene_offset: int = HOLOCENE_OFFSET
    synodic_month_days: float = SYNODIC_MONTH_DAYS
    anchor_hour: int = ANCHOR_HOUR

    beat_offset_ms: int = BEAT_OFFSET_MS
    beats_per_day: int = BEATS_PER_DAY

    # New-moon search: 1h steps over 60 days
    new_moon_step_ms: int = MS_PER_HOUR
    new_moon_max_steps: int = 1440
    new_moon_threshold: float = 0.01

    # Sunrise/sunset bounding search
    sun_search_days: int = 3
    sun_fallback_ms: int = MS_PER_DAY

    def __post_init__(self) -> None:
        if not 0 <= self.anchor_hour <= 23:
            raise ValueError("anchor_hour must be in 0..23")
        if self.synodic_month_days <= 0 or self.beats_per_day <= 0:
            raise ValueError("synodic_month_days and beats_per_day must be positive")
        if self.new_moon_step_ms <= 0 or self.new_moon_max_steps <= 0:
            raise ValueError("new-moon search step and horizon must be positive")
        if not 0.0 < self.new_moon_threshold < 0.5:
            raise ValueError("new_moon_threshold must be in (0, 0.5)")
        if self.sun_search_days < 0 or self.sun_fallback_ms <= 0:
            raise ValueError("sun search bounds must be non-negative")

    @property
    def synodic_month_ms(self) -> int:
        return round(self.synodic_month_days * MS_PER_DAY)

    @property
    def ms_per_beat(self) -> float:
        return MS_PER_DAY / self.beats_per_day

    @property
    def new_moon_horizon_ms(self) -> int:
        return self.new_moon_step_ms * self.new_moon_max_steps

    def tweak(self, **kwargs) -> "ClockParams":
        return replace(self, **kwargs)


DEFAULT_PARAMS = ClockParams()

