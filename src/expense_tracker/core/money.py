#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    cents_to_number,
    format_number,
    number_to_cents,
    parse_dollars_to_cents,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Examples:
        >>> lunch = Money.from_dollars("12.50")
        >>> lunch.format_plain()
        '12.5'
        >>> lunch.to_number()
        12.5

        >>> total = lunch + Money.from_number(100)
        >>> total.to_cents()
        11250
    """

    cents: int

    @classmethod
    def zero(cls) -> "Money":
        """Money with no value."""
        return cls(cents=0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int) -> "Money":
        """
        Parse from dollar string like '$123.45' or integer dollars.

        Args:
            dollars: String like "$12.34" or integer like 12

        Returns:
            Money object

        Raises:
            ValueError: If the string is not a number
            FractionalCentError: If the string has digits below one cent
        """
        if isinstance(dollars, int):
            return cls(cents=dollars * 100)
        return cls(cents=parse_dollars_to_cents(dollars))

    @classmethod
    def from_number(cls, number: int | float | Decimal) -> "Money":
        """
        Create Money from a number in currency units, as stored in JSON.

        Args:
            number: Amount like 100 or 12.5

        Returns:
            Money object

        Raises:
            FractionalCentError: If the number isn't a whole number of cents
        """
        return cls(cents=number_to_cents(number))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_number(self) -> int | float:
        """Get value as a JSON number in currency units."""
        return cents_to_number(self.cents)

    def format_plain(self) -> str:
        """Format without currency symbol or padding, e.g. '100' or '12.5'."""
        return format_number(self.cents)

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __hash__(self) -> int:
        return hash(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
