# tests/test_ephemeris.py

import sys

import pytest

from beatclock.bootstrap import build_registry
from beatclock.core.errors import BeatClockError, OracleUnavailableError
from beatclock.ephemeris import require_ephemeris


def test_missing_skyfield_is_reported(monkeypatch):
    monkeypatch.setitem(sys.modules, "skyfield", None)
    with pytest.raises(OracleUnavailableError, match="beatclock\\[ephemeris\\]"):
        require_ephemeris()


def test_skyfield_entry_fails_lazily(monkeypatch):
    monkeypatch.setitem(sys.modules, "skyfield", None)
    reg = build_registry()
    assert reg.get("reference") is not None
    with pytest.raises(BeatClockError):
        reg.get("skyfield")
