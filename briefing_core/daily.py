"""One-day entry points: dates on the roster, task maps and the briefing."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from .briefing import BriefingDocument, build_briefing
from .policy import RuleConfig
from .renderer import render_briefing
from .rules import generate_bar_tasks, generate_sala_tasks
from .staff import AreaPartition, AttendanceRecord, is_working, partition_by_area

_DAY_FIRST = re.compile(r"^(\d{1,2})[/.-](\d{1,2})[/.-](\d{4})$")


def parse_roster_date(value: str | None) -> date | None:
    """ISO ``YYYY-MM-DD`` or day-first ``DD/MM/YYYY`` (``-`` and ``.`` too)."""
    text = (value or "").strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    m = _DAY_FIRST.match(text)
    if not m:
        return None
    day, month, year = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _date_sort_key(value: str) -> tuple[int, date, str]:
    parsed = parse_roster_date(value)
    if parsed is None:
        return (1, date.min, value)
    return (0, parsed, value)


def available_dates(records: Iterable[AttendanceRecord]) -> list[str]:
    """Distinct non-empty dates, oldest first; unparseable dates go last."""
    seen = {r.date.strip() for r in records if r.date and r.date.strip()}
    return sorted(seen, key=_date_sort_key)


def working_for_date(
    records: Sequence[AttendanceRecord],
    selected_date: str,
    config: RuleConfig,
) -> AreaPartition:
    wanted = (selected_date or "").strip()
    working = [r for r in records if (r.date or "").strip() == wanted and is_working(r, config)]
    return partition_by_area(working)


def daily_tasks(
    records: Sequence[AttendanceRecord],
    selected_date: str,
    config: RuleConfig,
) -> dict[str, Any]:
    """Per-area task maps for *selected_date*, plus the staff left out of both areas."""
    part = working_for_date(records, selected_date, config)
    return {
        "date": selected_date,
        "sala": generate_sala_tasks(part.sala),
        "bar": generate_bar_tasks(part.bar),
        "ambiguous": [r.name for r in part.ambiguous],
        "unassigned": [r.name for r in part.unassigned],
    }


def daily_briefing_document(
    records: Sequence[AttendanceRecord],
    selected_date: str,
    config: RuleConfig,
) -> BriefingDocument:
    part = working_for_date(records, selected_date, config)
    return build_briefing(selected_date, part.sala, part.bar, config)


def daily_briefing(
    records: Sequence[AttendanceRecord],
    selected_date: str,
    config: RuleConfig,
) -> str:
    doc = daily_briefing_document(records, selected_date, config)
    return render_briefing(doc, placeholder=config.placeholder)
