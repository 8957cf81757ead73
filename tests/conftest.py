# tests/conftest.py

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import pytest

from beatclock.core.oracles import Oracles
from beatclock.core.time import epoch_ms
from beatclock.core.types import SunTimes
from beatclock.engines.lunation import first_new_moon_after

# Real 2025 new moon, used as the zero of the linear fake.
NEW_MOON_2025_03_29 = datetime(2025, 3, 29, 10, 58, tzinfo=timezone.utc)


@dataclass(frozen=True)
class LinearPhase:
    """Phase advancing uniformly from a known new moon."""
    new_moon: datetime = NEW_MOON_2025_03_29
    period_days: float = 29.530588

    def phase(self, t: datetime) -> float:
        period_ms = self.period_days * 86_400_000
        return ((epoch_ms(t) - epoch_ms(self.new_moon)) / period_ms) % 1.0


@dataclass(frozen=True)
class ConstantPhase:
    value: float = 0.5

    def phase(self, t: datetime) -> float:
        return self.value


class CountingPhase:
    """Wraps another lunar oracle and counts queries."""
    def __init__(self, inner):
        self.inner = inner
        self.calls = 0

    def phase(self, t: datetime) -> float:
        self.calls += 1
        return self.inner.phase(t)


@dataclass(frozen=True)
class FixedSunTimes:
    """Sunrise/sunset at fixed UTC hours on the UTC date of the query."""
    rise_hour: int = 6
    set_hour: int = 18
    only_day: Optional[int] = None  # if set, days of month other than this have no events

    def sun_times(self, t: datetime, lat: float, lon: float) -> SunTimes:
        if self.only_day is not None and t.day != self.only_day:
            return SunTimes()
        return SunTimes(
            sunrise=t.replace(hour=self.rise_hour, minute=0, second=0, microsecond=0),
            sunset=t.replace(hour=self.set_hour, minute=0, second=0, microsecond=0),
        )


@dataclass(frozen=True)
class NoSunTimes:
    def sun_times(self, t: datetime, lat: float, lon: float) -> SunTimes:
        return SunTimes()


@pytest.fixture(autouse=True)
def _clear_new_moon_cache():
    first_new_moon_after.cache_clear()
    yield
    first_new_moon_after.cache_clear()


@pytest.fixture
def linear_phase():
    return LinearPhase()


@pytest.fixture
def fixed_sun():
    return FixedSunTimes()


@pytest.fixture
def fake_oracles():
    return Oracles(lunar=LinearPhase(), sun=FixedSunTimes())


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)
