#!/usr/bin/env python3
"""
Expense Service

The five record-management operations. Each one validates its input before
touching the store, then performs a single read (and, for mutations, a single
full rewrite) of the store file.
"""

import logging
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money
from .datastore import ExpenseFileStore
from .errors import ExpenseError, ExpenseValidationError
from .filters import MonthFilterRule, include_in_summary
from .models import (
    Expense,
    ExpenseSummary,
    coerce_amount,
    validate_description,
    validate_id,
    validate_month,
)

logger = logging.getLogger(__name__)


class ExpenseService:
    """
    Record management over one expense store.

    Failures are logged and re-raised as ExpenseError subclasses; callers
    decide how to report them.
    """

    def __init__(
        self,
        store: ExpenseFileStore,
        month_filter_rule: MonthFilterRule = MonthFilterRule.MONTH_OF_CURRENT_YEAR,
    ):
        self.store = store
        self.month_filter_rule = month_filter_rule

    def add(self, amount: Any, description: Any, today: FinancialDate | None = None) -> Expense:
        """
        Record a new expense.

        A missing store file is treated as an empty collection.

        Args:
            amount: Expense amount (number, numeric string or Money)
            description: Free-text description
            today: Creation date (default: system clock)

        Returns:
            The new record

        Raises:
            ExpenseTypeError: If amount isn't numeric or description isn't a string
            ExpenseValidationError: If amount has fractions of a cent
            ExpenseStoreError: If the store exists but can't be read, or can't be written
        """
        money = coerce_amount(amount)
        text = validate_description(description)

        expense = Expense.create(money, text, today=today)

        try:
            expenses = self.store.load_or_empty()
            expenses.append(expense)
            self.store.save(expenses)
        except ExpenseError as e:
            logger.error(f"Error adding expense: {e}")
            raise

        logger.info(f"Expense added successfully (ID: {expense.id})")
        return expense

    def update(self, expense_id: Any, amount: Any = None, description: Any = None) -> int:
        """
        Change the amount and/or description of every record with this id.

        None means "leave unchanged"; zero amounts and empty descriptions
        are applied. An unknown id rewrites the collection unchanged.

        Returns:
            Number of records updated

        Raises:
            ExpenseValidationError: If no id, or neither field, was given
            ExpenseStoreNotFoundError: If the store file doesn't exist
            ExpenseStoreError: If the store can't be read or written
        """
        expense_id = validate_id(expense_id)
        if amount is None and description is None:
            raise ExpenseValidationError("Please provide either amount or description")

        new_amount: Money | None = coerce_amount(amount) if amount is not None else None
        new_description = validate_description(description) if description is not None else None

        try:
            expenses = self.store.load()
            updated = 0
            for expense in expenses:
                if expense.id != expense_id:
                    continue
                if new_amount is not None:
                    expense.set_amount(new_amount)
                if new_description is not None:
                    expense.set_description(new_description)
                updated += 1
            self.store.save(expenses)
        except ExpenseError as e:
            logger.error(f"Error reading or writing to the file: {e}")
            raise

        if updated:
            logger.info(f"Expense updated successfully (ID: {expense_id})")
        else:
            logger.warning(f"No expense found with ID {expense_id}; nothing changed")
        return updated

    def delete(self, expense_id: Any) -> int:
        """
        Remove every record with this id.

        Returns:
            Number of records removed (0 leaves the collection unchanged)

        Raises:
            ExpenseValidationError: If no id was given
            ExpenseStoreNotFoundError: If the store file doesn't exist
            ExpenseStoreError: If the store can't be read or written
        """
        expense_id = validate_id(expense_id)

        try:
            expenses = self.store.load()
            remaining = [expense for expense in expenses if expense.id != expense_id]
            self.store.save(remaining)
        except ExpenseError as e:
            logger.error(f"Error deleting expense: {e}")
            raise

        removed = len(expenses) - len(remaining)
        if removed:
            logger.info(f"Expense deleted successfully (ID: {expense_id})")
        else:
            logger.warning(f"No expense found with ID {expense_id}; nothing deleted")
        return removed

    def list(self) -> list[Expense]:
        """
        All records in insertion order; empty if the store doesn't exist yet.

        Raises:
            ExpenseStoreError: If the store exists but can't be read
        """
        try:
            return self.store.load_or_empty()
        except ExpenseError as e:
            logger.error(f"Error listing expenses: {e}")
            raise

    def summarize(
        self,
        month: int | None = None,
        today: FinancialDate | None = None,
        rule: MonthFilterRule | None = None,
    ) -> ExpenseSummary:
        """
        Total the amounts, optionally limited to one month.

        Args:
            month: 1-based month filter
            today: Reference date for "current year" (default: system clock)
            rule: Month filter semantics (default: the service's rule)

        Raises:
            ExpenseValidationError: If month is not 1-12
            ExpenseStoreNotFoundError: If the store file doesn't exist
            ExpenseStoreError: If the store can't be read
        """
        month = validate_month(month)
        today = today or FinancialDate.today()
        rule = rule or self.month_filter_rule

        try:
            expenses = self.store.load()
        except ExpenseError as e:
            logger.error(f"Error summarizing expenses: {e}")
            raise

        total = Money.zero()
        count = 0
        for expense in expenses:
            if include_in_summary(expense.date, month, today, rule):
                total += expense.amount
                count += 1

        logger.debug(f"Summarized {count} of {len(expenses)} expenses (month={month}, rule={rule.value})")
        return ExpenseSummary(total=total, month=month, count=count)
