"""Tests for the peak-coach CLI."""

import json

import pytest

from peak_coach import cli


DAY = {
    "date": "2026-10-19",
    "snapshot": {
        "timestamp": "2026-10-19T07:00:00+00:00",
        "hrv": {"sdnn": 62.0, "timestamp": "2026-10-19T07:00:00+00:00"},
        "restingHeartRate": 52,
        "sleep": {
            "durationMinutes": 480,
            "stages": [
                {"type": "deep", "durationMinutes": 100},
                {"type": "rem", "durationMinutes": 100},
                {"type": "light", "durationMinutes": 280},
            ],
            "startTime": "2026-10-18T23:00:00+00:00",
            "endTime": "2026-10-19T07:00:00+00:00",
        },
        "steps": 9500,
    },
    "history": [
        {"date": f"2026-10-{d:02d}", "hrv": 60.0, "restingHr": 60.0, "sleepHours": 7.5, "steps": 10000}
        for d in range(12, 19)
    ],
    "logs": [
        {"kind": "water", "amountMl": 250},
        {"kind": "caffeine", "amountMg": 95, "source": "drip coffee"},
    ],
}


@pytest.fixture(autouse=True)
def offline_settings(monkeypatch, settings):
    monkeypatch.setattr(cli, "get_settings", lambda: settings)


@pytest.fixture
def day_file(tmp_path):
    path = tmp_path / "day.json"
    path.write_text(json.dumps(DAY), encoding="utf-8")
    return path


class TestCommands:
    """Tests for each subcommand."""

    def test_score(self, day_file, capsys):
        assert cli.main(["score", "-i", str(day_file)]) == 0
        out = capsys.readouterr().out
        assert "10/10 PEAK" in out
        assert "Components" in out

    def test_briefing(self, day_file, capsys):
        assert cli.main(["briefing", "--input", str(day_file)]) == 0
        out = capsys.readouterr().out
        assert "Score: 10/10" in out
        assert "rule_based" in out
        assert "1. Hydrate first" in out

    def test_checkin(self, day_file, capsys):
        assert cli.main(["checkin", "-i", str(day_file), "--hour", "21"]) == 0
        assert "Evening wind-down." in capsys.readouterr().out

    def test_ask(self, day_file, capsys):
        assert cli.main(["ask", "-i", str(day_file), "any more coffee?"]) == 0
        assert "95mg" in capsys.readouterr().out


class TestErrors:
    """Tests for CLI failure handling."""

    def test_no_command(self, capsys):
        assert cli.main([]) == 1

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main(["score", "-i", str(tmp_path / "missing.json")]) == 1
        assert "Cannot read" in capsys.readouterr().out

    def test_invalid_day(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"snapshot": {"steps": -5}}), encoding="utf-8")

        assert cli.main(["score", "-i", str(path)]) == 1
        assert "Invalid day file" in capsys.readouterr().out

    def test_invalid_hour(self, day_file, capsys):
        assert cli.main(["checkin", "-i", str(day_file), "--hour", "30"]) == 1
        assert "hour_of_day" in capsys.readouterr().out

    def test_duplicate_history_dates(self, tmp_path, capsys):
        day = dict(DAY, history=[
            {"date": "2026-10-18", "hrv": 60.0},
            {"date": "2026-10-18", "hrv": 55.0},
        ])
        path = tmp_path / "dup.json"
        path.write_text(json.dumps(day), encoding="utf-8")

        assert cli.main(["score", "-i", str(path)]) == 1
        assert "Error" in capsys.readouterr().out
