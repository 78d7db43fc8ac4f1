"""Read roster workbooks saved straight from the spreadsheet."""

from __future__ import annotations

from pathlib import Path

from .schemas import cell_to_text


def read_xlsx_rows(path: Path, sheet: str | None = None) -> list[list[str]]:
    """Rows of the first (or named) worksheet as trimmed text cells.

    Entirely empty rows are dropped, as in the CSV path.
    """
    from openpyxl import load_workbook

    wb = load_workbook(Path(path), read_only=True, data_only=True)
    try:
        ws = wb[sheet] if sheet else wb.worksheets[0]
        rows: list[list[str]] = []
        for values in ws.iter_rows(values_only=True):
            row = [cell_to_text(v) for v in values]
            if any(row):
                rows.append(row)
        return rows
    finally:
        wb.close()
