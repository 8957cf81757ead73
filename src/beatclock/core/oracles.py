from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Protocol, Union

from .types import SunTimes

class LunarPhaseOracle(Protocol):
    """Hashable oracles get their first-new-moon lookups cached."""
    def phase(self, t: datetime) -> float:
        """Cyclic fraction of the synodic month in [0, 1); 0 and 1 are new moon."""
        ...

class SunTimesOracle(Protocol):
    def sun_times(self, t: datetime, lat: float, lon: float) -> SunTimes:
        """Sunrise/sunset bounding the local solar day that contains t."""
        ...

@dataclass(frozen=True)
class Oracles:
    """The two astronomical capabilities the clock engines are injected with."""
    lunar: LunarPhaseOracle
    sun: SunTimesOracle

OracleFactory = Callable[[], Oracles]

@dataclass
class OracleRegistry:
    """Named oracle sets. Factories are resolved lazily on first use."""
    _entries: Dict[str, Union[Oracles, OracleFactory]] = field(default_factory=dict)

    def get(self, name: str) -> Oracles:
        if name not in self._entries:
            raise KeyError(f"Unknown oracle set '{name}'. Available: {sorted(self._entries)}")
        entry = self._entries[name]
        if not isinstance(entry, Oracles):
            entry = entry()
            self._entries[name] = entry
        return entry

    def list(self) -> List[str]:
        return sorted(self._entries.keys())

    def register(self, name: str, oracles: Union[Oracles, OracleFactory], *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._entries):
            raise KeyError(f"Oracle set '{name}' already exists. Use overwrite=True to replace.")
        self._entries[name] = oracles
