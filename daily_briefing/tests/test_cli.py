"""Tests for the daily-briefing command line."""

import json

import pytest

from daily_briefing.cli import main

ROSTER = (
    "Date;Name;Area;Entry;Exit\n"
    "2026-03-14;Ana;Sala;09:00;18:00\n"
    "2026-03-14;Bruno;Sala;10:00;17:00\n"
    "2026-03-14;Carla;Bar;08:00;16:00\n"
    "2026-03-13;Carla;Bar;12:00;20:00\n"
)


@pytest.fixture
def roster_path(tmp_path, monkeypatch):
    for name in ("BRIEFING_ROSTER_URL", "BRIEFING_ROSTER_FILE", "BRIEFING_RULES_FILE",
                 "BRIEFING_RULES_PROFILE", "BRIEFING_HTTP_TIMEOUT", "BRIEFING_MANAGERS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "roster.csv"
    path.write_text(ROSTER, encoding="utf-8")
    return path


class TestCli:
    def test_dates(self, roster_path, capsys):
        assert main(["--roster", str(roster_path), "dates"]) == 0
        assert capsys.readouterr().out.splitlines() == ["2026-03-13", "2026-03-14"]

    def test_tasks_json(self, roster_path, capsys):
        assert main(["--roster", str(roster_path), "tasks", "2026-03-14"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["bar"]["Preparação Bar"] == "Carla"
        assert data["sala"]["17:30 Fecho da sala"] == "Bruno"

    def test_briefing(self, roster_path, capsys):
        assert main(["--roster", str(roster_path), "briefing", "2026-03-14"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("BRIEFING 2026-03-14")
        assert "Porta: Bruno" in out
        assert "Fecho de caixa: Carla" in out

    def test_briefing_unknown_date(self, roster_path, capsys):
        assert main(["--roster", str(roster_path), "briefing", "2031-01-01"]) == 0
        assert "Porta: ________" in capsys.readouterr().out

    def test_no_roster_configured(self, roster_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["dates"])
        assert exc.value.code == 2
        assert "No roster configured" in capsys.readouterr().err

    def test_missing_roster_file(self, roster_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--roster", str(roster_path.with_name("gone.csv")), "dates"])
        assert exc.value.code == 2
        assert "Roster file not found" in capsys.readouterr().err
