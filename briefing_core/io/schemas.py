"""Column constants and cell coercion for roster I/O."""

from __future__ import annotations

from datetime import date, datetime, time

# ---------------------------------------------------------------------------
# Roster columns (header names are matched lower-cased)
# ---------------------------------------------------------------------------

ROSTER_COLS = [
    "date",
    "name",
    "area",
    "entry",
    "exit",
]

# Columns whose absence leaves None rather than "" in every record.
OPTIONAL_TIME_COLS = ("entry", "exit")

# ---------------------------------------------------------------------------
# Delimited text
# ---------------------------------------------------------------------------

FIELD_SEPARATORS = (",", ";")
QUOTE = '"'


def normalize_header(value: str | None) -> str:
    """Header cell -> lookup key. None -> empty string."""
    return str(value or "").strip().lower()


# ---------------------------------------------------------------------------
# Spreadsheet cell coercion
# ---------------------------------------------------------------------------


def cell_to_text(value: object) -> str:
    """Coerce a spreadsheet cell to the text a CSV export would contain.

    Times become ``HH:MM``, dates ISO ``YYYY-MM-DD``, whole floats lose their
    ``.0``. Empty/None -> empty string.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
