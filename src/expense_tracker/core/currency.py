#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All expense arithmetic uses integer cents to avoid floating-point errors.

Currency Systems:
- Internal calculations use cents: 100 cents = $1.00
- The store file holds plain numbers in currency units: 12.5 = $12.50
- User input may be a dollar string: "$12.34"
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any


class FractionalCentError(ValueError):
    """Amount has digits below one cent."""


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse dollar string to cents using integer arithmetic only.

    Args:
        dollars_str: String representation of dollar amount

    Returns:
        Amount in cents

    Raises:
        ValueError: If the string is not a number
        FractionalCentError: If the string has non-zero digits below one cent

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$12.34") -> 1234
        parse_dollars_to_cents("1,234.56") -> 123456
        parse_dollars_to_cents("12") -> 1200
        parse_dollars_to_cents("12.5") -> 1250
        parse_dollars_to_cents("12.340") -> 1234
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    if not clean:
        raise ValueError("Empty amount")

    is_negative = clean.startswith("-")
    if is_negative:
        clean = clean[1:]

    if "." in clean:
        whole, _, fraction = clean.partition(".")
        if not (whole or fraction) or (whole and not whole.isdigit()) or (fraction and not fraction.isdigit()):
            raise ValueError(f"Invalid amount: {dollars_str!r}")
        if fraction[2:].strip("0"):
            raise FractionalCentError(f"Amount has fractions of a cent: {dollars_str!r}")
        dollars = int(whole) if whole else 0
        cents = int(fraction[:2].ljust(2, "0"))
        total = dollars * 100 + cents
    else:
        if not clean.isdigit():
            raise ValueError(f"Invalid amount: {dollars_str!r}")
        total = int(clean) * 100

    return -total if is_negative else total


def _to_decimal(value: int | float | Decimal | str) -> Decimal:
    """Exact decimal form of a number, via the shortest repr for floats."""
    if isinstance(value, bool):
        raise ValueError("Booleans are not amounts")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Amount must be finite: {value}")
    try:
        decimal_amount = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    if not decimal_amount.is_finite():
        raise ValueError(f"Amount must be finite: {value}")
    return decimal_amount


def number_to_cents(value: int | float | Decimal) -> int:
    """
    Convert a number in currency units to cents exactly.

    Floats go through their shortest repr so 0.1 becomes 10 cents, not 9.

    Raises:
        ValueError: If the value is not finite
        FractionalCentError: If the value isn't a whole number of cents
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value * 100
    cents = _to_decimal(value).scaleb(2)
    if cents != cents.to_integral_value():
        raise FractionalCentError(f"Amount has fractions of a cent: {value}")
    return int(cents)


def is_whole_cents(value: int | float | Decimal) -> bool:
    """True if number_to_cents converts the value without loss."""
    try:
        number_to_cents(value)
    except ValueError:
        return False
    return True


def round_to_cents(value: int | float | Decimal | str) -> int:
    """
    Convert a number in currency units to cents, rounding half away from zero.

    Example:
        round_to_cents(1.005) -> 101
    """
    cents = _to_decimal(value).scaleb(2)
    return int(cents.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def cents_to_number(cents: int) -> int | float:
    """
    Convert cents to a JSON number in currency units.

    Whole amounts stay integers so stored files read "amount": 100.

    Example:
        cents_to_number(10000) -> 100
        cents_to_number(1250) -> 12.5
    """
    if cents % 100 == 0:
        return cents // 100
    return float(Decimal(cents).scaleb(-2))


def safe_currency_to_cents(value: Any) -> int:
    """
    Convert a stored amount to cents, treating anything unusable as zero.

    Amounts below one cent are rounded to the nearest cent.

    Examples:
        safe_currency_to_cents(45.99) -> 4599
        safe_currency_to_cents('$45.99') -> 4599
        safe_currency_to_cents(1.005) -> 101
        safe_currency_to_cents(None) -> 0
        safe_currency_to_cents('FREE') -> 0
    """
    if isinstance(value, str):
        value = value.replace("$", "").replace(",", "").strip()
    elif isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return 0
    try:
        return round_to_cents(value)
    except (ValueError, OverflowError, InvalidOperation):
        return 0


def format_number(cents: int) -> str:
    """Format cents as a plain number, e.g. "100" or "12.5"."""
    number = cents_to_number(cents)
    if isinstance(number, int):
        return str(number)
    return f"{Decimal(cents).scaleb(-2).normalize():f}"
