"""
Expense Tracker - Command-Line Expense Records

Records, updates, lists, deletes and summarizes expenses kept in a single
local JSON file.

Packages:
- core: Currency handling, dates, JSON I/O, configuration
- expenses: Expense records, the store file and the record operations
- cli: Command-line interface (expense-tracker)

Example Usage:
    from expense_tracker.expenses import ExpenseFileStore, ExpenseService

    service = ExpenseService(ExpenseFileStore("expenses.json"))
    service.add(12.5, "Lunch")
    print(service.summarize().message())
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Developers"

from .core.money import Money
from .core.dates import FinancialDate
from .expenses.models import Expense, ExpenseSummary

__all__ = [
    "Expense",
    "ExpenseSummary",
    "FinancialDate",
    "Money",
]
