"""Exceptions raised for roster input that cannot be used as-is.

Only the strict code paths raise these; the default paths log a warning and
degrade to empty values instead.
"""

from __future__ import annotations


class RosterError(ValueError):
    """Base class for roster input problems."""


class RosterParseError(RosterError):
    """Delimited text is malformed (e.g. an unterminated quoted field)."""


class MissingFieldError(RosterError):
    """A required column is absent from the roster header."""

    def __init__(self, missing: list[str], header: list[str]):
        self.missing = list(missing)
        self.header = list(header)
        super().__init__(
            f"Roster header is missing column(s) {self.missing}. "
            f"Found: {self.header or 'no header'}"
        )
