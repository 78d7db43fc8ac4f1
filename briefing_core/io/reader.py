"""Read a roster export into AttendanceRecords."""

from __future__ import annotations

import logging
from pathlib import Path

from briefing_core.errors import MissingFieldError
from briefing_core.staff import AttendanceRecord

from .delimited import parse_delimited
from .schemas import OPTIONAL_TIME_COLS, ROSTER_COLS, normalize_header

logger = logging.getLogger(__name__)

XLSX_SUFFIXES = (".xlsx", ".xlsm")


def rows_to_records(rows: list[list[str]], *, strict: bool = False) -> list[AttendanceRecord]:
    """Map rows (first row = header) to records by header name.

    A missing column leaves that field empty in every record ("" for text,
    None for entry/exit). With *strict* it raises MissingFieldError instead.
    """
    if not rows:
        return []
    header = [normalize_header(h) for h in rows[0]]
    idx = {col: (header.index(col) if col in header else None) for col in ROSTER_COLS}

    missing = [col for col, pos in idx.items() if pos is None]
    if missing:
        if strict:
            raise MissingFieldError(missing, header)
        logger.warning("Roster header lacks %s; those fields stay empty", missing)

    def cell(row: list[str], col: str) -> str | None:
        pos = idx[col]
        if pos is None or pos >= len(row):
            return None if col in OPTIONAL_TIME_COLS else ""
        return row[pos]

    return [
        AttendanceRecord(
            date=cell(r, "date"),
            name=cell(r, "name"),
            area=cell(r, "area"),
            entry=cell(r, "entry"),
            exit=cell(r, "exit"),
        )
        for r in rows[1:]
    ]


def load_roster_text(text: str, *, strict: bool = False) -> list[AttendanceRecord]:
    """Raw export text -> records."""
    return rows_to_records(parse_delimited(text, strict=strict), strict=strict)


def load_roster_file(path: Path, *, strict: bool = False) -> list[AttendanceRecord]:
    """Read a ``.csv``/``.txt`` export or an ``.xlsx`` workbook.

    Raises FileNotFoundError if the file is missing.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Roster file not found: {p}")
    if p.suffix.lower() in XLSX_SUFFIXES:
        from .xlsx import read_xlsx_rows

        return rows_to_records(read_xlsx_rows(p), strict=strict)
    text = p.read_text(encoding="utf-8-sig")
    return load_roster_text(text, strict=strict)
