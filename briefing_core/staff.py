"""Attendance records and the working/area classification of a day's staff."""

from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass, field

from .policy import RuleConfig

logger = logging.getLogger(__name__)

SALA = "sala"
BAR = "bar"


@dataclass(frozen=True)
class AttendanceRecord:
    date: str
    name: str
    area: str
    entry: str | None = None
    exit: str | None = None


@dataclass
class AreaPartition:
    sala: list[AttendanceRecord] = field(default_factory=list)
    bar: list[AttendanceRecord] = field(default_factory=list)
    ambiguous: list[AttendanceRecord] = field(default_factory=list)
    unassigned: list[AttendanceRecord] = field(default_factory=list)


def canonical_name(value: str | None) -> str:
    s = unicodedata.normalize("NFKD", (value or ""))
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = s.lower().strip()
    s = re.sub(r"[^a-z0-9]+", " ", s)
    s = re.sub(r"\s+", " ", s)
    return s.strip()


def display_name(value: str | None) -> str:
    """Trimmed name with its first letter upper-cased; the rest is kept as typed."""
    s = (value or "").strip()
    return s[:1].upper() + s[1:]


def is_manager(record: AttendanceRecord, config: RuleConfig) -> bool:
    managers = {canonical_name(m) for m in config.managers}
    return canonical_name(record.name) in managers


def is_working(record: AttendanceRecord, config: RuleConfig) -> bool:
    """True iff both times are present, the entry is not an off-duty marker
    and the person is not a manager."""
    entry = (record.entry or "").strip()
    exit_ = (record.exit or "").strip()
    if not entry or not exit_:
        return False
    pattern = config.off_pattern
    if pattern is not None and pattern.search(entry):
        return False
    return not is_manager(record, config)


def partition_by_area(records: Iterable[AttendanceRecord]) -> AreaPartition:
    """Split records into sala/bar by case-insensitive substring of ``area``.

    A record matching both tokens is flagged and kept out of both groups.
    """
    result = AreaPartition()
    for rec in records:
        area = (rec.area or "").lower()
        in_sala = SALA in area
        in_bar = BAR in area
        if in_sala and in_bar:
            logger.warning(
                "Ambiguous area %r for %s on %s; excluded from sala and bar tasks",
                rec.area, rec.name, rec.date,
            )
            result.ambiguous.append(rec)
        elif in_sala:
            result.sala.append(rec)
        elif in_bar:
            result.bar.append(rec)
        else:
            result.unassigned.append(rec)
    return result


def find_by_name(group: Iterable[AttendanceRecord], name: str | None) -> AttendanceRecord | None:
    """First record in *group* whose canonical name matches *name*."""
    key = canonical_name(name)
    if not key:
        return None
    for rec in group:
        if canonical_name(rec.name) == key:
            return rec
    return None
