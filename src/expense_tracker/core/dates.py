#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting. Expense dates are stored
as ISO strings regardless of the host locale.
"""

from dataclasses import dataclass
from datetime import date, datetime

# Unambiguous formats accepted when reading stored dates.
# Slash dates are handled separately since M/D and D/M look alike.
STORED_DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y")


def _parse_slash_date(text: str) -> date:
    """
    Parse a locale date like 8/15/2024 or 15/08/2024.

    Only dates that read the same either way, or where one field can't be a
    month, are accepted.

    Raises:
        ValueError: If the date is malformed or ambiguous
    """
    first, second, year = text.split("/")
    if not (first.isdigit() and second.isdigit() and year.isdigit() and len(year) == 4):
        raise ValueError(f"Unrecognized date: {text!r}")

    leading, trailing = int(first), int(second)
    if leading > 12 and trailing <= 12:
        return date(int(year), trailing, leading)
    if trailing > 12 or leading == trailing:
        return date(int(year), leading, trailing)
    raise ValueError(f"Ambiguous day and month: {text!r}")


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object
        """
        return cls(date=datetime.strptime(date_str, date_format).date())

    @classmethod
    def parse_stored(cls, date_str: str) -> "FinancialDate":
        """
        Parse a date read from the store file.

        Accepts ISO dates, ISO timestamps, D.M.YYYY and slash dates whose
        day and month can't be confused (8/15/2024, 15/08/2024, 3/3/2024).

        Raises:
            ValueError: If no known format matches, or a slash date is ambiguous
        """
        text = date_str.strip()
        for date_format in STORED_DATE_FORMATS:
            try:
                return cls.from_string(text, date_format)
            except ValueError:
                continue
        if text.count("/") == 2:
            return cls(date=_parse_slash_date(text))
        try:
            return cls(date=datetime.fromisoformat(text).date())
        except ValueError:
            raise ValueError(f"Unrecognized date: {date_str!r}") from None

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        """Calendar month, 1-12."""
        return self.date.month

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def __repr__(self) -> str:
        """Repr format."""
        return f"FinancialDate(date={self.date!r})"
