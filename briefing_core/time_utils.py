"""Time-of-day helpers shared by the ranking rules.

All timing comparisons in the engine go through ``parse_hhmm_to_minutes``;
raw ``HH:MM`` strings are never compared lexically.
"""

from __future__ import annotations

MINUTES_PER_DAY = 24 * 60


def parse_hhmm_to_minutes(value: str | None) -> int | None:
    """Parse HH:MM (or spreadsheet-style HH:MM:SS) into minutes after midnight.

    Seconds are validated and then dropped.
    """
    if not value or ":" not in str(value):
        return None
    parts = str(value).strip().split(":")
    if len(parts) > 3:
        return None
    try:
        h = int(parts[0])
        m = int(parts[1])
        s = int(parts[2]) if len(parts) == 3 else 0
    except (TypeError, ValueError):
        return None
    if h < 0 or h > 23 or m < 0 or m > 59 or s < 0 or s > 59:
        return None
    return h * 60 + m


def format_minutes(value: int) -> str:
    """Format minutes after midnight as zero-padded HH:MM."""
    value = value % MINUTES_PER_DAY
    return f"{value // 60:02d}:{value % 60:02d}"


def shift_span(entry: str | None, exit_: str | None) -> str:
    """Human label for a shift, e.g. ``09:00-17:30``; raw text when unparseable."""
    start = parse_hhmm_to_minutes(entry)
    end = parse_hhmm_to_minutes(exit_)
    left = format_minutes(start) if start is not None else (entry or "?").strip()
    right = format_minutes(end) if end is not None else (exit_ or "?").strip()
    return f"{left}-{right}"
