"""
Expenses Package

Expense records, the store file that keeps them and the record operations.

This package provides:
- Expense and ExpenseSummary models
- ExpenseFileStore for the JSON store file
- ExpenseService with add, update, delete, list and summarize
- Month filter rules for summaries
"""

from .datastore import ExpenseFileStore
from .errors import (
    ExpenseError,
    ExpenseStoreError,
    ExpenseStoreNotFoundError,
    ExpenseTypeError,
    ExpenseValidationError,
)
from .filters import MonthFilterRule, include_in_summary
from .models import Expense, ExpenseSummary
from .service import ExpenseService

__all__ = [
    "Expense",
    "ExpenseError",
    "ExpenseFileStore",
    "ExpenseService",
    "ExpenseStoreError",
    "ExpenseStoreNotFoundError",
    "ExpenseSummary",
    "ExpenseTypeError",
    "ExpenseValidationError",
    "MonthFilterRule",
    "include_in_summary",
]
