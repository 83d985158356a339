#!/usr/bin/env python3
"""
Expense Data Models

The Expense record, the summary result and the input coercion shared by the
service and the CLI.
"""

import math
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from ..core.currency import FractionalCentError, is_whole_cents, safe_currency_to_cents
from ..core.dates import FinancialDate
from ..core.money import Money
from .errors import ExpenseTypeError, ExpenseValidationError
from .filters import month_name

STORED_FIELDS = ("id", "date", "amount", "description")


@dataclass
class Expense:
    """
    One tracked monetary entry.

    `id` and `date` are fixed at creation; `amount` and `description` change
    through update. Keys in the stored record that the tracker doesn't know
    about are kept in `extra` and written back untouched, as are stored
    values that couldn't be interpreted (an unparseable date, a non-numeric
    amount).
    """

    id: str
    date: FinancialDate | None
    amount: Money
    description: str
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def create(cls, amount: Money, description: str, today: FinancialDate | None = None) -> "Expense":
        """Create a new record with a fresh id, dated today."""
        return cls(
            id=str(uuid.uuid4()),
            date=today or FinancialDate.today(),
            amount=amount,
            description=description,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Expense":
        """
        Build a record from its stored JSON object.

        Missing or non-numeric amounts count as zero. Amounts with digits
        below one cent are counted to the nearest cent but written back
        exactly as stored.
        """
        extra = {key: value for key, value in data.items() if key not in STORED_FIELDS}

        raw_date = data.get("date")
        expense_date = None
        if isinstance(raw_date, str):
            try:
                expense_date = FinancialDate.parse_stored(raw_date)
            except ValueError:
                expense_date = None
        if expense_date is None and raw_date is not None:
            extra["date"] = raw_date

        raw_amount = data.get("amount")
        if raw_amount is not None and not (_is_number(raw_amount) and is_whole_cents(raw_amount)):
            extra["amount"] = raw_amount

        raw_description = data.get("description")
        if raw_description is not None and not isinstance(raw_description, str):
            extra["description"] = raw_description

        raw_id = data.get("id")
        return cls(
            id="" if raw_id is None else str(raw_id),
            date=expense_date,
            amount=Money.from_cents(safe_currency_to_cents(raw_amount)),
            description=raw_description if isinstance(raw_description, str) else "",
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stored JSON object, fields in id/date/amount/description order."""
        data: dict[str, Any] = {"id": self.id}

        if self.date is not None:
            data["date"] = self.date.to_iso_string()
        elif "date" in self.extra:
            data["date"] = self.extra["date"]

        data["amount"] = self.extra.get("amount", self.amount.to_number())
        data["description"] = self.extra.get("description", self.description)

        for key, value in self.extra.items():
            if key not in STORED_FIELDS:
                data[key] = value

        return data

    def set_amount(self, amount: Money) -> None:
        self.amount = amount
        self.extra.pop("amount", None)

    def set_description(self, description: str) -> None:
        self.description = description
        self.extra.pop("description", None)


@dataclass(frozen=True)
class ExpenseSummary:
    """Result of summarizing the collection."""

    total: Money
    month: int | None = None
    count: int = 0

    def message(self) -> str:
        """Operator-facing total line."""
        if self.month is not None:
            return f"Total expenses in {month_name(self.month)}: {self.total.format_plain()}"
        return f"Total expenses: {self.total.format_plain()}"


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, (int, Decimal))


def coerce_amount(value: Any) -> Money:
    """
    Turn user input into Money.

    Accepts Money, ints, finite floats, Decimals and numeric strings like
    "12.50" or "$12.50". Booleans are rejected, as are amounts with digits
    below one cent, which couldn't be stored as given.

    Raises:
        ExpenseTypeError: If the value is not numeric
        ExpenseValidationError: If the value has fractions of a cent
    """
    if isinstance(value, Money):
        return value
    if isinstance(value, bool):
        raise ExpenseTypeError("amount must be a number")
    if isinstance(value, (int, float, Decimal)):
        convert = Money.from_number
    elif isinstance(value, str):
        convert = Money.from_dollars
    else:
        raise ExpenseTypeError("amount must be a number")

    try:
        return convert(value)
    except FractionalCentError as e:
        raise ExpenseValidationError(f"amount can't have fractions of a cent, got {value!r}") from e
    except ValueError as e:
        raise ExpenseTypeError(f"amount must be a number, got {value!r}") from e


def validate_description(value: Any) -> str:
    """
    Raises:
        ExpenseTypeError: If the description is not a string
    """
    if not isinstance(value, str):
        raise ExpenseTypeError("description must be a string")
    return value


def validate_id(value: Any) -> str:
    """
    Ids are matched exactly as given; a blank id is treated as missing.

    Raises:
        ExpenseValidationError: If no id was given
    """
    if not value or not isinstance(value, str) or not value.strip():
        raise ExpenseValidationError("Please provide an id")
    return value


def validate_month(value: Any) -> int | None:
    """
    Raises:
        ExpenseValidationError: If the month is not 1-12
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 12:
        raise ExpenseValidationError(f"month must be between 1 and 12, got {value!r}")
    return value
