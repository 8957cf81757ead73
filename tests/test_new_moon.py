# tests/test_new_moon.py

import logging
import pytest
from datetime import timedelta

from beatclock.engines.new_moon import distance_to_new, is_near_new, next_new_moon
from beatclock.engines.specs import DEFAULT_PARAMS

from conftest import NEW_MOON_2025_03_29, ConstantPhase, CountingPhase, LinearPhase, utc

HORIZON = timedelta(hours=1440)


def test_distance_is_cyclic():
    assert distance_to_new(0.0) == 0.0
    assert distance_to_new(0.995) == pytest.approx(0.005)
    assert distance_to_new(0.5) == 0.5


def test_band_edges():
    assert is_near_new(0.0099, 0.01)
    assert is_near_new(0.9901, 0.01)
    assert not is_near_new(0.01, 0.01)
    assert not is_near_new(0.5, 0.01)


def test_hourly_scan_from_2025_anchor(linear_phase):
    # Band opens ~7.09h before 10:58; first hourly probe inside it is 04:00:00.001,
    # and the +1h neighbour is closer.
    found = next_new_moon(utc(2025, 3, 19, 23, 0), linear_phase)
    assert found == utc(2025, 3, 29, 5, 0, 0, 1000)
    assert found < NEW_MOON_2025_03_29


def test_result_strictly_after_start_even_inside_band(linear_phase):
    after = NEW_MOON_2025_03_29
    found = next_new_moon(after, linear_phase)
    assert found > after
    assert found - after <= timedelta(hours=1)


@pytest.mark.parametrize("offset_days", [0, 3.3, 10, 17.25, 29, 45])
def test_result_within_horizon(linear_phase, offset_days):
    after = utc(2025, 1, 1) + timedelta(days=offset_days)
    found = next_new_moon(after, linear_phase)
    assert after < found <= after + HORIZON
    assert distance_to_new(linear_phase.phase(found)) < 0.01


def test_no_candidate_returns_horizon_edge(caplog):
    after = utc(2025, 3, 19, 23, 0)
    with caplog.at_level(logging.WARNING, logger="beatclock.engines.new_moon"):
        found = next_new_moon(after, ConstantPhase(0.5))
    assert found == after + HORIZON
    assert "horizon edge" in caplog.text


def test_search_is_bounded():
    oracle = CountingPhase(ConstantPhase(0.25))
    next_new_moon(utc(2025, 1, 1), oracle)
    assert oracle.calls == DEFAULT_PARAMS.new_moon_max_steps


def test_refinement_costs_two_extra_queries():
    oracle = CountingPhase(LinearPhase())
    found = next_new_moon(utc(2025, 3, 28, 12, 0), oracle)
    hours_scanned = (found - utc(2025, 3, 28, 12, 0)) // timedelta(hours=1)
    assert oracle.calls <= hours_scanned + 3


def test_coarser_step_still_lands_in_band(linear_phase):
    p = DEFAULT_PARAMS.tweak(new_moon_step_ms=2 * 3_600_000, new_moon_max_steps=720)
    found = next_new_moon(utc(2025, 3, 19, 23, 0), linear_phase, params=p)
    assert distance_to_new(linear_phase.phase(found)) < 0.01
