"""Site policy injected into the classifier and rule engine.

Every named individual the rules care about lives here instead of in the
rules themselves, so one engine can serve several venues.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_OFF_MARKERS = ("off", "folga")
DEFAULT_PLACEHOLDER = "________"
DEFAULT_TABLE_COUNT = 20


@dataclass(frozen=True)
class RuleConfig:
    managers: frozenset[str] = field(default_factory=frozenset)
    off_markers: tuple[str, ...] = DEFAULT_OFF_MARKERS
    door_name: str | None = None
    runner_name: str | None = None
    cash_priority: tuple[str, ...] = ()
    table_count: int = DEFAULT_TABLE_COUNT
    placeholder: str = DEFAULT_PLACEHOLDER

    @property
    def off_pattern(self) -> re.Pattern[str] | None:
        markers = [m for m in self.off_markers if m]
        if not markers:
            return None
        return re.compile("|".join(re.escape(m) for m in markers), re.IGNORECASE)


def _names(values: Iterable[Any] | str | None) -> list[str]:
    if values is None:
        return []
    if isinstance(values, str):
        values = values.split(",")
    return [str(v).strip() for v in values if v is not None and str(v).strip()]


def rule_config_from_dict(raw: Mapping[str, Any] | None) -> RuleConfig:
    """Build a RuleConfig from a profile dict (JSON shape, all keys optional)."""
    raw = raw or {}
    table_count = raw.get("table_count", DEFAULT_TABLE_COUNT)
    try:
        table_count = int(table_count)
    except (TypeError, ValueError):
        raise ValueError(f"table_count must be an integer, got {table_count!r}") from None
    if table_count < 0:
        raise ValueError(f"table_count must not be negative, got {table_count}")

    off_markers = raw.get("off_markers")
    return RuleConfig(
        managers=frozenset(_names(raw.get("managers"))),
        off_markers=tuple(_names(off_markers)) if off_markers is not None else DEFAULT_OFF_MARKERS,
        door_name=(str(raw["door_name"]).strip() or None) if raw.get("door_name") else None,
        runner_name=(str(raw["runner_name"]).strip() or None) if raw.get("runner_name") else None,
        cash_priority=tuple(_names(raw.get("cash_priority"))),
        table_count=table_count,
        placeholder=str(raw.get("placeholder") or DEFAULT_PLACEHOLDER),
    )
