# tests/test_solar_phase.py

import logging
import pytest
from dataclasses import dataclass
from datetime import timedelta

from beatclock.core.types import GeoPosition, SolarPhaseState, SolarTag, SunTimes, UNKNOWN_SOLAR
from beatclock.engines.solar_phase import next_sunrise, previous_sunset, solar_phase

from conftest import FixedSunTimes, NoSunTimes, utc

LONDON = GeoPosition(51.5, -0.12)


def test_no_position_is_unknown(fixed_sun):
    st = solar_phase(utc(2025, 3, 21, 12), None, fixed_sun)
    assert st == UNKNOWN_SOLAR
    assert str(st) == "S??"


def test_oracle_without_events_is_unknown():
    st = solar_phase(utc(2025, 3, 21, 12), LONDON, NoSunTimes())
    assert st.tag is SolarTag.UNKNOWN
    assert st.percent is None


@pytest.mark.parametrize(
    "hour, expected",
    [
        (12, "S50"),
        (6, "S00"),
        (9, "S25"),
        (18, "N00"),
        (0, "N50"),
        (3, "N75"),
        (21, "N25"),
    ],
)
def test_fixed_day_and_night(fixed_sun, hour, expected):
    assert str(solar_phase(utc(2025, 3, 21, hour), LONDON, fixed_sun)) == expected


def test_last_millisecond_before_sunset_is_day():
    t = utc(2025, 3, 21, 18) - timedelta(milliseconds=1)
    assert solar_phase(t, LONDON, FixedSunTimes()) == SolarPhaseState(SolarTag.DAY, 99)


def test_neighbour_lookups(fixed_sun):
    now = utc(2025, 3, 21, 20)
    assert next_sunrise(now, LONDON, fixed_sun) == utc(2025, 3, 22, 6)
    assert previous_sunset(utc(2025, 3, 21, 2), LONDON, fixed_sun) == utc(2025, 3, 20, 18)


def test_missing_next_sunrise_falls_back_one_day(caplog):
    # Only the 21st has events: night span becomes 18:00 .. now + 24h
    oracle = FixedSunTimes(only_day=21)
    with caplog.at_level(logging.WARNING, logger="beatclock.engines.solar_phase"):
        st = solar_phase(utc(2025, 3, 21, 20), LONDON, oracle)
    assert st == SolarPhaseState(SolarTag.NIGHT, 7)
    assert "no sunrise" in caplog.text


def test_missing_previous_sunset_falls_back_one_day(caplog):
    oracle = FixedSunTimes(only_day=21)
    with caplog.at_level(logging.WARNING, logger="beatclock.engines.solar_phase"):
        st = solar_phase(utc(2025, 3, 21, 3), LONDON, oracle)
    # span now - 24h .. 06:00 = 27h, elapsed 24h
    assert st == SolarPhaseState(SolarTag.NIGHT, 88)
    assert "no sunset" in caplog.text


def test_percent_stays_in_range_over_two_days(fixed_sun):
    t = utc(2025, 3, 21)
    end = t + timedelta(days=2)
    while t < end:
        st = solar_phase(t, LONDON, fixed_sun)
        assert st.tag in (SolarTag.DAY, SolarTag.NIGHT)
        assert 0 <= st.percent <= 99
        t += timedelta(minutes=17)


@dataclass(frozen=True)
class OneSidedSunTimes:
    """Only sunrise or only sunset is known for the day."""
    has_rise: bool

    def sun_times(self, t, lat, lon):
        full = FixedSunTimes().sun_times(t, lat, lon)
        if self.has_rise:
            return SunTimes(sunrise=full.sunrise)
        return SunTimes(sunset=full.sunset)


@pytest.mark.parametrize("has_rise", [True, False])
@pytest.mark.parametrize("hour", [3, 12, 21])
def test_half_known_day_is_unknown(has_rise, hour):
    st = solar_phase(utc(2025, 3, 21, hour), LONDON, OneSidedSunTimes(has_rise))
    assert st == UNKNOWN_SOLAR
    assert str(st) == "S??"
