"""Business rules that pick who performs each named duty.

Every rule is a total function of one area group (plus the injected
RuleConfig): an empty group resolves to ``None``, never to an exception.
"""

from __future__ import annotations

import string
from collections.abc import Sequence
from dataclasses import dataclass, field

from .policy import RuleConfig
from .roles import Rank, RoleSet, identify_roles
from .staff import AttendanceRecord, display_name, find_by_name
from .time_utils import parse_hhmm_to_minutes

RUNNER_EVERYONE = "Todos"
NO_TABLES = "sem mesas"

# ---------------------------------------------------------------------------
# Task names
# ---------------------------------------------------------------------------

TASK_DOOR = "Porta"
TASK_CASH_CLOSING = "Fecho de caixa"

TASK_BAR_PREP = "Preparação Bar"
TASK_BAR_RESTOCK = "Reposições Bar"
TASK_BAR_MACHINES = "Limpeza máquinas / leites"
TASK_BAR_CLOSE = "Fecho Bar"
TASK_BAR_FRIDGES = "Limpeza frigoríficos"
TASK_BAR_DISHES = "Lavagem loiça bar"
TASK_BAR_COUNTERS = "Limpeza bancadas"
TASK_BAR_TEMPERATURES = "Registo de temperaturas"

TASK_SALA_UPSTAIRS = "Fecho da sala de cima"
TASK_SALA_PAPER = "Repor papel (casa de banho)"
TASK_SALA_BATHROOM = "Limpeza casa de banho (clientes e staff)"
TASK_SALA_SIDEBOARD = "Limpeza aparador / cadeiras bebé"
TASK_SALA_GLASS = "Limpeza vidros e espelhos"
TASK_SALA_CLOSE = "Fecho da sala"

# ---------------------------------------------------------------------------
# HACCP / closing chains, keyed by group size (3 means "3 or more")
# ---------------------------------------------------------------------------

HACCP_BAR_CHAINS: dict[int, list[tuple[str, Rank]]] = {
    0: [],
    1: [
        (TASK_BAR_MACHINES, Rank.LAST_EXIT),
        (TASK_BAR_CLOSE, Rank.LAST_EXIT),
    ],
    2: [
        (TASK_BAR_FRIDGES, Rank.FIRST_EXIT),
        (TASK_BAR_DISHES, Rank.FIRST_EXIT),
        (TASK_BAR_MACHINES, Rank.LAST_EXIT),
        (TASK_BAR_CLOSE, Rank.LAST_EXIT),
    ],
    3: [
        (TASK_BAR_FRIDGES, Rank.FIRST_EXIT),
        (TASK_BAR_DISHES, Rank.FIRST_EXIT),
        (TASK_BAR_COUNTERS, Rank.SECOND_EXIT),
        (TASK_BAR_TEMPERATURES, Rank.SECOND_EXIT),
        (TASK_BAR_MACHINES, Rank.LAST_EXIT),
        (TASK_BAR_CLOSE, Rank.LAST_EXIT),
    ],
}

# The bathroom row follows bathroom_cleaning(): opener on two-person days,
# first exit otherwise.
HACCP_SALA_CHAINS: dict[int, list[tuple[str, Rank]]] = {
    0: [],
    1: [
        (TASK_SALA_BATHROOM, Rank.FIRST_EXIT),
        (TASK_SALA_CLOSE, Rank.LAST_EXIT),
    ],
    2: [
        (TASK_SALA_PAPER, Rank.FIRST_EXIT),
        (TASK_SALA_BATHROOM, Rank.OPENER),
        (TASK_SALA_GLASS, Rank.LAST_EXIT),
        (TASK_SALA_CLOSE, Rank.LAST_EXIT),
    ],
    3: [
        (TASK_SALA_UPSTAIRS, Rank.FIRST_EXIT),
        (TASK_SALA_PAPER, Rank.FIRST_EXIT),
        (TASK_SALA_BATHROOM, Rank.FIRST_EXIT),
        (TASK_SALA_SIDEBOARD, Rank.SECOND_EXIT),
        (TASK_SALA_GLASS, Rank.LAST_EXIT),
        (TASK_SALA_CLOSE, Rank.LAST_EXIT),
    ],
}


@dataclass(frozen=True)
class SellerSlot:
    label: str
    name: str
    tables: tuple[int, int] | None


@dataclass
class SellerPlan:
    sellers: list[SellerSlot] = field(default_factory=list)
    runner: str | None = None

    @property
    def runner_line(self) -> str:
        return self.runner if self.runner is not None else RUNNER_EVERYONE


# ---------------------------------------------------------------------------
# Single-duty rules
# ---------------------------------------------------------------------------


def _door_record(sala: Sequence[AttendanceRecord], config: RuleConfig) -> AttendanceRecord | None:
    fixed = find_by_name(sala, config.door_name)
    if fixed is not None:
        return fixed
    return identify_roles(sala).opener


def door_duty(sala: Sequence[AttendanceRecord], config: RuleConfig) -> str | None:
    """Configured door person when on sala today, else the earliest sala arrival."""
    rec = _door_record(sala, config)
    return rec.name if rec is not None else None


def bathroom_cleaning(sala: Sequence[AttendanceRecord]) -> str | None:
    roles = identify_roles(sala)
    if len(sala) == 2:
        return roles.name(Rank.OPENER)
    return roles.name(Rank.FIRST_EXIT)


def bar_restocking(bar: Sequence[AttendanceRecord]) -> str | None:
    roles = identify_roles(bar)
    if len(bar) >= 3:
        return roles.name(Rank.FIRST_EXIT)
    return roles.name(Rank.OPENER)


def cash_closing(bar: Sequence[AttendanceRecord], config: RuleConfig) -> str | None:
    """First priority name on the bar today, else the last bar person to leave."""
    for name in config.cash_priority:
        rec = find_by_name(bar, name)
        if rec is not None:
            return display_name(rec.name)
    last = identify_roles(bar).last_exit
    return display_name(last.name) if last is not None else None


# ---------------------------------------------------------------------------
# Sellers and runner
# ---------------------------------------------------------------------------


def seller_label(index: int) -> str:
    """0 -> A, 25 -> Z, 26 -> AA, ..."""
    letters = string.ascii_uppercase
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, len(letters))
        label = letters[rem] + label
    return label


def table_sections(seller_count: int, table_count: int) -> list[tuple[int, int] | None]:
    """Split tables 1..table_count into contiguous ranges, one per seller.

    Sizes differ by at most one and earlier sellers take the larger share.
    Sellers beyond the number of tables get None.
    """
    if seller_count <= 0:
        return []
    base, extra = divmod(max(table_count, 0), seller_count)
    sections: list[tuple[int, int] | None] = []
    start = 1
    for i in range(seller_count):
        size = base + (1 if i < extra else 0)
        if size == 0:
            sections.append(None)
            continue
        sections.append((start, start + size - 1))
        start += size
    return sections


def _by_entry_then_input(group: Sequence[AttendanceRecord]) -> list[AttendanceRecord]:
    def key(rec: AttendanceRecord) -> tuple[int, int]:
        minutes = parse_hhmm_to_minutes(rec.entry)
        return (1, 0) if minutes is None else (0, minutes)

    return sorted(group, key=key)


def sellers_and_runner(sala: Sequence[AttendanceRecord], config: RuleConfig) -> SellerPlan:
    door = _door_record(sala, config)
    pool = list(sala)
    if door is not None:
        pool.remove(door)

    runner = None
    candidate = find_by_name(pool, config.runner_name)
    if candidate is not None and len(pool) >= 3:
        pool.remove(candidate)
        runner = candidate.name

    ranked = _by_entry_then_input(pool)
    sections = table_sections(len(ranked), config.table_count)
    sellers = [
        SellerSlot(label=seller_label(i), name=rec.name, tables=sections[i])
        for i, rec in enumerate(ranked)
    ]
    return SellerPlan(sellers=sellers, runner=runner)


# ---------------------------------------------------------------------------
# HACCP chains
# ---------------------------------------------------------------------------


def _chain_for(group: Sequence[AttendanceRecord], chains: dict[int, list[tuple[str, Rank]]]) -> list[tuple[str, str | None]]:
    chain = chains[min(len(group), 3)]
    roles: RoleSet = identify_roles(group)
    return [(task, roles.name(rank)) for task, rank in chain]


def haccp_bar(bar: Sequence[AttendanceRecord]) -> list[tuple[str, str | None]]:
    return _chain_for(bar, HACCP_BAR_CHAINS)


def haccp_sala(sala: Sequence[AttendanceRecord]) -> list[tuple[str, str | None]]:
    return _chain_for(sala, HACCP_SALA_CHAINS)


# ---------------------------------------------------------------------------
# Per-area task maps
# ---------------------------------------------------------------------------


def generate_sala_tasks(sala: Sequence[AttendanceRecord]) -> dict[str, str | None]:
    if not sala:
        return {}
    roles = identify_roles(sala)
    opener = roles.name(Rank.OPENER)
    last = roles.name(Rank.LAST_EXIT)
    return {
        "16:30 Fecho da sala de cima": opener,
        "16:30 Limpeza e reposição aparador / cadeira bebés": opener,
        "16:30 Repor papel (casa de banho)": opener,
        "17:30 Limpeza casa de banho (clientes e staff)": bathroom_cleaning(sala),
        "17:30 Limpeza vidros e espelhos": last,
        "17:30 Fecho da sala": last,
    }


def generate_bar_tasks(bar: Sequence[AttendanceRecord]) -> dict[str, str | None]:
    if not bar:
        return {}
    roles = identify_roles(bar)
    last = roles.name(Rank.LAST_EXIT)
    return {
        TASK_BAR_PREP: roles.name(Rank.OPENER),
        TASK_BAR_RESTOCK: bar_restocking(bar),
        TASK_BAR_MACHINES: last,
        TASK_BAR_CLOSE: last,
    }
