"""Structured daily briefing: ordered sections of labelled lines.

The rule engine fills a BriefingDocument; ``renderer`` turns it into text.
A line whose value is None is an unresolved duty and renders as the
configured placeholder.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .policy import RuleConfig
from .roles import Rank, identify_roles
from .rules import (
    NO_TABLES,
    TASK_BAR_PREP,
    TASK_BAR_RESTOCK,
    TASK_CASH_CLOSING,
    TASK_DOOR,
    bar_restocking,
    cash_closing,
    door_duty,
    haccp_bar,
    haccp_sala,
    sellers_and_runner,
)
from .staff import AttendanceRecord
from .time_utils import shift_span

SECTION_DOOR = "door"
SECTION_BAR = "bar"
SECTION_SELLERS = "sellers"
SECTION_RUNNER = "runner"
SECTION_HACCP_BAR = "haccp_bar"
SECTION_HACCP_SALA = "haccp_sala"
SECTION_CASH = "cash"

SECTION_ORDER = (
    SECTION_DOOR,
    SECTION_BAR,
    SECTION_SELLERS,
    SECTION_RUNNER,
    SECTION_HACCP_BAR,
    SECTION_HACCP_SALA,
    SECTION_CASH,
)


@dataclass(frozen=True)
class BriefingLine:
    label: str
    value: str | None
    detail: str | None = None


@dataclass
class BriefingSection:
    key: str
    header: str | None
    lines: list[BriefingLine] = field(default_factory=list)


@dataclass
class BriefingDocument:
    date: str
    sections: list[BriefingSection] = field(default_factory=list)

    def section(self, key: str) -> BriefingSection:
        for s in self.sections:
            if s.key == key:
                return s
        raise KeyError(key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "sections": [
                {
                    "key": s.key,
                    "header": s.header,
                    "lines": [
                        {"label": ln.label, "value": ln.value, "detail": ln.detail}
                        for ln in s.lines
                    ],
                }
                for s in self.sections
            ],
        }


def _tables_detail(tables: tuple[int, int] | None) -> str:
    if tables is None:
        return NO_TABLES
    first, last = tables
    if first == last:
        return f"mesa {first}"
    return f"mesas {first}-{last}"


def _bar_section(bar: Sequence[AttendanceRecord]) -> BriefingSection:
    section = BriefingSection(SECTION_BAR, "BAR")
    if not bar:
        section.lines.append(BriefingLine("Equipa", None))
        return section
    for rec in bar:
        section.lines.append(BriefingLine("Equipa", rec.name, shift_span(rec.entry, rec.exit)))
    section.lines.append(BriefingLine(TASK_BAR_PREP, identify_roles(bar).name(Rank.OPENER)))
    section.lines.append(BriefingLine(TASK_BAR_RESTOCK, bar_restocking(bar)))
    return section


def _seller_sections(sala: Sequence[AttendanceRecord], config: RuleConfig) -> tuple[BriefingSection, BriefingSection]:
    sellers = BriefingSection(SECTION_SELLERS, "VENDEDORES")
    runner = BriefingSection(SECTION_RUNNER, None)
    if not sala:
        sellers.lines.append(BriefingLine("Vendedores", None))
        runner.lines.append(BriefingLine("Runner", None))
        return sellers, runner

    plan = sellers_and_runner(sala, config)
    if not plan.sellers:
        sellers.lines.append(BriefingLine("Vendedores", None))
    for slot in plan.sellers:
        sellers.lines.append(BriefingLine(slot.label, slot.name, _tables_detail(slot.tables)))
    runner.lines.append(BriefingLine("Runner", plan.runner_line))
    return sellers, runner


def _chain_section(key: str, header: str, chain: list[tuple[str, str | None]]) -> BriefingSection:
    section = BriefingSection(key, header)
    if not chain:
        section.lines.append(BriefingLine(header, None))
        return section
    section.lines.extend(BriefingLine(task, name) for task, name in chain)
    return section


def build_briefing(
    date: str,
    sala: Sequence[AttendanceRecord],
    bar: Sequence[AttendanceRecord],
    config: RuleConfig,
) -> BriefingDocument:
    """Resolve every duty for one day into a BriefingDocument."""
    doc = BriefingDocument(date=date)
    doc.sections.append(
        BriefingSection(SECTION_DOOR, None, [BriefingLine(TASK_DOOR, door_duty(sala, config))])
    )
    doc.sections.append(_bar_section(bar))
    doc.sections.extend(_seller_sections(sala, config))
    doc.sections.append(_chain_section(SECTION_HACCP_BAR, "HACCP BAR", haccp_bar(bar)))
    doc.sections.append(_chain_section(SECTION_HACCP_SALA, "HACCP SALA", haccp_sala(sala)))
    doc.sections.append(
        BriefingSection(SECTION_CASH, None, [BriefingLine(TASK_CASH_CLOSING, cash_closing(bar, config))])
    )
    return doc
