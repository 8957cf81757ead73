# tests/test_equinox.py

import pytest
from datetime import timedelta

from beatclock.engines import equinox as eq
from beatclock.engines.specs import DEFAULT_PARAMS

from conftest import utc


def test_jde_at_epoch_year():
    assert eq.march_equinox_jde(2000) == pytest.approx(2451623.80984, abs=1e-9)


def test_raw_equinox_2025():
    # Mean equinox 2025-03-20 ~08:52 UTC (true equinox 09:01)
    raw = eq.march_equinox_instant(2025)
    assert (raw.year, raw.month, raw.day, raw.hour) == (2025, 3, 20, 8)
    assert abs(raw - utc(2025, 3, 20, 8, 52)) < timedelta(minutes=2)


def test_anchor_2025_is_previous_day_2300():
    assert eq.estimate_march_equinox(2025) == utc(2025, 3, 19, 23, 0, 0)


@pytest.mark.parametrize("year", list(range(1900, 2101)) + [1, 1000, 3000, 9000])
def test_anchor_is_always_2300_utc(year):
    a = eq.estimate_march_equinox(year)
    assert (a.hour, a.minute, a.second, a.microsecond) == (23, 0, 0, 0)
    raw = eq.march_equinox_instant(year)
    assert a <= raw
    assert raw - a < timedelta(days=1)


def test_snap_keeps_same_day_at_or_after_2300():
    assert eq.snap_to_anchor(utc(2030, 3, 20, 23, 30)) == utc(2030, 3, 20, 23, 0)
    assert eq.snap_to_anchor(utc(2030, 3, 20, 23, 0)) == utc(2030, 3, 20, 23, 0)


def test_snap_moves_to_previous_day_before_2300():
    assert eq.snap_to_anchor(utc(2030, 3, 20, 22, 59)) == utc(2030, 3, 19, 23, 0)
    assert eq.snap_to_anchor(utc(2030, 3, 1, 0, 5)) == utc(2030, 2, 28, 23, 0)


def test_anchor_hour_is_configurable():
    p = DEFAULT_PARAMS.tweak(anchor_hour=0)
    a = eq.estimate_march_equinox(2025, params=p)
    assert a == utc(2025, 3, 20, 0, 0)
