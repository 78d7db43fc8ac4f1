from briefing_core.briefing import (
    SECTION_BAR,
    SECTION_CASH,
    SECTION_DOOR,
    SECTION_HACCP_BAR,
    SECTION_ORDER,
    SECTION_RUNNER,
    SECTION_SELLERS,
    build_briefing,
)
from briefing_core.policy import RuleConfig
from briefing_core.renderer import render_briefing
from briefing_core.staff import AttendanceRecord

PLACEHOLDER = "____"
CONFIG = RuleConfig(door_name="Marta", runner_name="Tiago", cash_priority=("joana",), table_count=12, placeholder=PLACEHOLDER)


def _rec(name, entry, exit, area):
    return AttendanceRecord(date="2026-03-14", name=name, area=area, entry=entry, exit=exit)


SALA = [
    _rec("Marta", "09:00", "17:00", "Sala"),
    _rec("Tiago", "10:00", "18:00", "Sala"),
    _rec("Rita", "11:00", "19:00", "Sala"),
    _rec("Sofia", "09:30", "16:00", "Sala"),
]
BAR = [
    _rec("Carla", "08:00", "16:00", "Bar"),
    _rec("joana", "08:30", "17:00", "Bar"),
    _rec("Eva", "09:00", "18:00", "Bar"),
]


class TestBuildBriefing:
    def test_section_order(self):
        doc = build_briefing("2026-03-14", SALA, BAR, CONFIG)
        assert tuple(s.key for s in doc.sections) == SECTION_ORDER

    def test_door_line(self):
        doc = build_briefing("2026-03-14", SALA, BAR, CONFIG)
        assert doc.section(SECTION_DOOR).lines[0].value == "Marta"

    def test_bar_section(self):
        lines = build_briefing("2026-03-14", SALA, BAR, CONFIG).section(SECTION_BAR).lines
        assert [(ln.label, ln.value) for ln in lines] == [
            ("Equipa", "Carla"),
            ("Equipa", "joana"),
            ("Equipa", "Eva"),
            ("Preparação Bar", "Carla"),
            ("Reposições Bar", "Carla"),
        ]
        assert lines[0].detail == "08:00-16:00"

    def test_sellers_and_runner(self):
        doc = build_briefing("2026-03-14", SALA, BAR, CONFIG)
        sellers = doc.section(SECTION_SELLERS).lines
        assert [(ln.label, ln.value, ln.detail) for ln in sellers] == [
            ("A", "Sofia", "mesas 1-6"),
            ("B", "Rita", "mesas 7-12"),
        ]
        assert doc.section(SECTION_RUNNER).lines[0].value == "Tiago"

    def test_cash_closing_priority(self):
        doc = build_briefing("2026-03-14", SALA, BAR, CONFIG)
        assert doc.section(SECTION_CASH).lines[0].value == "Joana"

    def test_empty_bar_uses_unresolved_lines(self):
        doc = build_briefing("2026-03-14", SALA, [], CONFIG)
        assert [ln.value for ln in doc.section(SECTION_BAR).lines] == [None]
        assert [ln.value for ln in doc.section(SECTION_HACCP_BAR).lines] == [None]
        assert doc.section(SECTION_CASH).lines[0].value is None

    def test_to_dict(self):
        data = build_briefing("2026-03-14", SALA, BAR, CONFIG).to_dict()
        assert data["date"] == "2026-03-14"
        assert data["sections"][0] == {
            "key": "door",
            "header": None,
            "lines": [{"label": "Porta", "value": "Marta", "detail": None}],
        }


class TestRenderBriefing:
    def test_full_day(self):
        text = render_briefing(build_briefing("2026-03-14", SALA, BAR, CONFIG), PLACEHOLDER)
        lines = text.splitlines()
        assert lines[0] == "BRIEFING 2026-03-14"
        assert "Porta: Marta" in lines
        assert "Equipa: Carla (08:00-16:00)" in lines
        assert "Reposições Bar: Carla" in lines
        assert "A: Sofia (mesas 1-6)" in lines
        assert "Runner: Tiago" in lines
        assert "--- HACCP BAR ---" in lines
        assert "Fecho Bar: Eva" in lines
        assert "--- HACCP SALA ---" in lines
        assert "Fecho da sala: Rita" in lines
        assert "Fecho de caixa: Joana" in lines
        assert PLACEHOLDER not in text

    def test_section_headers_in_order(self):
        text = render_briefing(build_briefing("2026-03-14", SALA, BAR, CONFIG))
        headers = [ln for ln in text.splitlines() if ln.startswith("--- ")]
        assert headers == ["--- BAR ---", "--- VENDEDORES ---", "--- HACCP BAR ---", "--- HACCP SALA ---"]

    def test_empty_bar_renders_placeholder(self):
        text = render_briefing(build_briefing("2026-03-14", SALA, [], CONFIG), PLACEHOLDER)
        lines = text.splitlines()
        assert "Equipa: ____" in lines
        assert "HACCP BAR: ____" in lines
        assert "Fecho de caixa: ____" in lines
        assert "Porta: Marta" in lines

    def test_empty_day(self):
        text = render_briefing(build_briefing("2026-03-14", [], [], CONFIG), PLACEHOLDER)
        lines = text.splitlines()
        assert "Porta: ____" in lines
        assert "Vendedores: ____" in lines
        assert "Runner: ____" in lines
        assert "HACCP SALA: ____" in lines

    def test_sala_without_sellers_says_everyone_runs(self):
        sala = [_rec("Bruno", "10:00", "17:00", "Sala")]
        lines = render_briefing(build_briefing("2026-03-14", sala, BAR, RuleConfig()), PLACEHOLDER).splitlines()
        assert "Porta: Bruno" in lines
        assert "Vendedores: ____" in lines
        assert "Runner: Todos" in lines
