from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidPositionError
from ..engines.beat import format_beat

@dataclass(frozen=True)
class GeoPosition:
    latitude: float   # degrees, positive north
    longitude: float  # degrees, positive east

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidPositionError(f"latitude {self.latitude} outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidPositionError(f"longitude {self.longitude} outside [-180, 180]")

@dataclass(frozen=True)
class SunTimes:
    """Sunrise/sunset pair for one local solar day; either may be absent."""
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None

@dataclass(frozen=True)
class LunationState:
    lunation: int  # 1-based
    percent: int   # 0..99

    def __str__(self) -> str:
        return f"{self.lunation}.{self.percent:02d}"

class SolarTag(str, Enum):
    DAY = "S"
    NIGHT = "N"
    UNKNOWN = "S?"

@dataclass(frozen=True)
class SolarPhaseState:
    tag: SolarTag
    percent: Optional[int] = None  # None for UNKNOWN

    def __str__(self) -> str:
        if self.tag is SolarTag.UNKNOWN or self.percent is None:
            return "S??"
        return f"{self.tag.value}{self.percent:02d}"

UNKNOWN_SOLAR = SolarPhaseState(SolarTag.UNKNOWN)

@dataclass(frozen=True)
class ClockReading:
    """Structured beat-clock record; str() gives the display string."""
    instant: datetime
    equinox_anchor: datetime
    holocene_year: int
    lunation: LunationState
    days_since_equinox: int
    beat: float
    solar: SolarPhaseState

    @property
    def lunation_percent(self) -> int:
        return self.lunation.percent

    @property
    def solar_tag(self) -> SolarTag:
        return self.solar.tag

    @property
    def solar_percent(self) -> Optional[int]:
        return self.solar.percent

    def __str__(self) -> str:
        return (
            f"H{self.holocene_year} L{self.lunation} D{self.days_since_equinox} "
            f"@{format_beat(self.beat)} {self.solar}"
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "instant": self.instant.isoformat(),
            "equinox_anchor": self.equinox_anchor.isoformat(),
            "holoceneYear": self.holocene_year,
            "lunation": self.lunation.lunation,
            "lunationPercent": self.lunation.percent,
            "daysSinceEquinox": self.days_since_equinox,
            "beat": self.beat,
            "solarTag": self.solar.tag.name.lower(),
            "solarPercent": self.solar.percent,
            "text": str(self),
        }
