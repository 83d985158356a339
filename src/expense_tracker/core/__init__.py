"""
Core Utilities Package

Shared primitives used by the expense store.

This package provides:
- Currency handling with integer arithmetic for precision
- Immutable Money and FinancialDate value types
- Pretty-printed, atomically replaced JSON files
- Configuration management (expense_tracker.core.config)
"""

from .currency import (
    FractionalCentError,
    cents_to_number,
    is_whole_cents,
    number_to_cents,
    parse_dollars_to_cents,
    safe_currency_to_cents,
)
from .dates import FinancialDate
from .json_utils import read_json, write_json
from .money import Money

__all__ = [
    "FinancialDate",
    "Money",
    # Currency utilities
    "FractionalCentError",
    "cents_to_number",
    "is_whole_cents",
    "number_to_cents",
    "parse_dollars_to_cents",
    "safe_currency_to_cents",
    # JSON
    "read_json",
    "write_json",
]
