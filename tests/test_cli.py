# tests/test_cli.py

import json
import sys

from beatclock.cli import main


def test_convert_prints_clock(capsys):
    assert main(["convert", "2025-03-21"]) == 0
    assert capsys.readouterr().out.strip() == "H11725 L1.00 D2 @041.67 S??"


def test_convert_with_position(capsys):
    assert main(["convert", "2025-06-21T12:00:00Z", "--lat", "51.5", "--lon", "0.0"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("H11725 ")
    assert " S" in out and not out.endswith("S??")


def test_convert_invalid_date_exit_code(capsys):
    assert main(["convert", "2025-02-30"]) == 1
    assert "invalid date" in capsys.readouterr().err


def test_convert_json(capsys):
    assert main(["convert", "2025-03-21", "--json"]) == 0
    rec = json.loads(capsys.readouterr().out)
    assert rec["holoceneYear"] == 11725
    assert rec["daysSinceEquinox"] == 2
    assert rec["solarTag"] == "unknown"
    assert rec["solarPercent"] is None
    assert rec["text"] == "H11725 L1.00 D2 @041.67 S??"


def test_equinox_range(capsys):
    assert main(["equinox", "2025", "--to-year", "2026"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert "anchor=2025-03-19 23:00 UTC" in lines[0]
    assert lines[1].startswith("2026")


def test_new_moon_after(capsys):
    assert main(["new-moon", "--after", "2025-03-19T23:00:00Z", "--count", "2"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("2025-03-29")
    assert lines[1].startswith("2025-04-27")


def test_now_runs(capsys):
    assert main(["now"]) == 0
    assert capsys.readouterr().out.startswith("H")


def test_unknown_oracle_set_exit_code(capsys):
    assert main(["now", "--oracles", "nope"]) == 2
    assert "Unknown oracle set 'nope'" in capsys.readouterr().err


def test_new_moon_unknown_oracle_set_exit_code(capsys):
    assert main(["new-moon", "--after", "2025-03-19", "--oracles", "nope"]) == 2
    assert "nope" in capsys.readouterr().err


def test_unavailable_skyfield_exit_code(monkeypatch, capsys):
    monkeypatch.setitem(sys.modules, "skyfield", None)
    assert main(["convert", "2025-03-21", "--oracles", "skyfield"]) == 2
    err = capsys.readouterr().err
    assert "beatclock[ephemeris]" in err
