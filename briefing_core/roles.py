"""Timing ranks within an area group: opener and exit order."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .staff import AttendanceRecord
from .time_utils import parse_hhmm_to_minutes


class Rank(str, Enum):
    OPENER = "opener"
    FIRST_EXIT = "first_exit"
    SECOND_EXIT = "second_exit"
    LAST_EXIT = "last_exit"


@dataclass(frozen=True)
class RoleSet:
    opener: AttendanceRecord | None = None
    first_exit: AttendanceRecord | None = None
    second_exit: AttendanceRecord | None = None
    last_exit: AttendanceRecord | None = None

    def get(self, rank: Rank) -> AttendanceRecord | None:
        return getattr(self, rank.value)

    def name(self, rank: Rank) -> str | None:
        rec = self.get(rank)
        return rec.name if rec is not None else None


def entry_ranking(group: Sequence[AttendanceRecord]) -> list[AttendanceRecord]:
    """Records with a parseable entry, earliest first (stable)."""
    valid = [r for r in group if parse_hhmm_to_minutes(r.entry) is not None]
    return sorted(valid, key=lambda r: parse_hhmm_to_minutes(r.entry))


def exit_ranking(group: Sequence[AttendanceRecord]) -> list[AttendanceRecord]:
    """Records with parseable entry and exit, earliest exit first (stable).

    Equal exits keep input order, so the last element is the last occurrence
    among the latest leavers.
    """
    valid = [
        r for r in group
        if parse_hhmm_to_minutes(r.entry) is not None and parse_hhmm_to_minutes(r.exit) is not None
    ]
    return sorted(valid, key=lambda r: parse_hhmm_to_minutes(r.exit))


def identify_roles(group: Sequence[AttendanceRecord]) -> RoleSet:
    """Compute opener / first, second and last exit. Empty group -> all None."""
    by_entry = entry_ranking(group)
    by_exit = exit_ranking(group)
    return RoleSet(
        opener=by_entry[0] if by_entry else None,
        first_exit=by_exit[0] if by_exit else None,
        second_exit=by_exit[1] if len(by_exit) > 1 else None,
        last_exit=by_exit[-1] if by_exit else None,
    )
