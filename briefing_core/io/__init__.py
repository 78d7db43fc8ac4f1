"""Roster input layer.

Public API:
    parse_delimited(text)       -- comma/semicolon export text -> rows
    format_row(fields)          -- one row -> export text
    rows_to_records(rows)       -- header + rows -> AttendanceRecords
    load_roster_text(text)      -- export text -> AttendanceRecords
    load_roster_file(path)      -- .csv/.txt/.xlsx file -> AttendanceRecords
"""

from .delimited import format_row, format_rows, parse_delimited
from .reader import load_roster_file, load_roster_text, rows_to_records

__all__ = [
    "format_row",
    "format_rows",
    "load_roster_file",
    "load_roster_text",
    "parse_delimited",
    "rows_to_records",
]
