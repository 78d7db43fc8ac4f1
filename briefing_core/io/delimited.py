"""Tokenizer for spreadsheet CSV exports.

Exports come from different locales, so a single file may use commas or
semicolons as field separators; ``csv`` cannot split on both at once, hence
the small state machine below.
"""

from __future__ import annotations

import logging

from briefing_core.errors import RosterParseError

from .schemas import FIELD_SEPARATORS, QUOTE

logger = logging.getLogger(__name__)


def parse_delimited(text: str, *, strict: bool = False) -> list[list[str]]:
    """Split raw export text into rows of trimmed fields.

    Rules:
      - ``,`` and ``;`` both separate fields outside quotes.
      - ``"`` toggles quoting; ``""`` inside quotes is a literal quote.
      - ``\\n`` outside quotes ends a row (a CRLF ``\\r`` is trimmed away).
      - A last row without a trailing newline is kept.
      - Rows whose fields are all empty are dropped.

    With *strict*, an unterminated quoted field raises RosterParseError;
    otherwise the open quote runs to the end of the input.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    in_quotes = False
    quote_opened_at = 0

    i = 0
    n = len(text or "")
    while i < n:
        c = text[i]
        if c == QUOTE and in_quotes and i + 1 < n and text[i + 1] == QUOTE:
            cell.append(QUOTE)
            i += 2
            continue
        if c == QUOTE:
            in_quotes = not in_quotes
            if in_quotes:
                quote_opened_at = i
        elif c in FIELD_SEPARATORS and not in_quotes:
            row.append("".join(cell).strip())
            cell = []
        elif c == "\n" and not in_quotes:
            row.append("".join(cell).strip())
            rows.append(row)
            row = []
            cell = []
        else:
            cell.append(c)
        i += 1

    if in_quotes:
        if strict:
            raise RosterParseError(f"Unterminated quoted field starting at offset {quote_opened_at}")
        logger.warning("Unterminated quoted field at offset %d; reading to end of input", quote_opened_at)

    if cell or row:
        row.append("".join(cell).strip())
        rows.append(row)

    return [r for r in rows if any(r)]


def _needs_quotes(value: str) -> bool:
    return any(ch in value for ch in (*FIELD_SEPARATORS, QUOTE, "\n", "\r"))


def format_row(fields: list[str], *, separator: str = ",") -> str:
    """Serialize one row so that ``parse_delimited`` reads it back unchanged."""
    if separator not in FIELD_SEPARATORS:
        raise ValueError(f"Unsupported separator {separator!r}. Choose from {FIELD_SEPARATORS}")
    out = []
    for value in fields:
        text = "" if value is None else str(value)
        if _needs_quotes(text):
            text = QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
        out.append(text)
    return separator.join(out)


def format_rows(rows: list[list[str]], *, separator: str = ",") -> str:
    """Serialize rows, one per line, with a trailing newline."""
    return "".join(format_row(r, separator=separator) + "\n" for r in rows)
