#!/usr/bin/env python3
"""
Month Filter for Expense Summaries

Decides which records a month-filtered summary counts. The rule is a named
choice rather than an inline condition so each behaviour can be selected and
tested on its own.
"""

from enum import Enum

from ..core.dates import FinancialDate

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class MonthFilterRule(Enum):
    """Which records a month filter keeps."""

    # Excluded only when both the month and the year differ from the filter
    # and the current year. Matches files summarized by earlier releases.
    LEGACY = "legacy"
    # Same calendar month, any year.
    MONTH = "month"
    # Same calendar month of the current year.
    MONTH_OF_CURRENT_YEAR = "month_of_current_year"

    @classmethod
    def from_name(cls, name: str) -> "MonthFilterRule":
        """
        Look up a rule by its value, case-insensitively, accepting dashes.

        Raises:
            ValueError: If the name is not a known rule
        """
        normalized = name.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(rule.value for rule in cls)
            raise ValueError(f"Unknown month filter rule {name!r} (choose from: {choices})") from None


def month_name(month: int) -> str:
    """English name of a 1-based calendar month."""
    return MONTH_NAMES[month - 1]


def include_in_summary(
    expense_date: FinancialDate | None,
    month: int | None,
    today: FinancialDate,
    rule: MonthFilterRule = MonthFilterRule.MONTH_OF_CURRENT_YEAR,
) -> bool:
    """
    Decide whether a record counts toward a summary.

    Args:
        expense_date: The record's date, or None if it could not be parsed;
            undated records never match a month filter
        month: 1-based month filter, or None for no filter
        today: Reference date supplying the current year
        rule: Filter semantics to apply

    Returns:
        True if the record should be added to the total
    """
    if month is None:
        return True

    if expense_date is None:
        return False

    month_differs = expense_date.month != month
    year_differs = expense_date.year != today.year

    if rule == MonthFilterRule.LEGACY:
        return not (month_differs and year_differs)
    if rule == MonthFilterRule.MONTH:
        return not month_differs
    return not (month_differs or year_differs)
