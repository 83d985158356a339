#!/usr/bin/env python3
"""
Expense DataStore

The store file: a JSON array holding the whole expense collection. Every
load reads the file in full and every save rewrites it in full.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from ..core.datastore_mixin import DataStoreMixin
from ..core.json_utils import read_json, write_json
from .errors import ExpenseStoreError, ExpenseStoreNotFoundError
from .models import Expense

logger = logging.getLogger(__name__)


class ExpenseFileStore(DataStoreMixin):
    """
    DataStore for the expense collection.

    The path is supplied by the caller; nothing here knows where the file
    lives by default.
    """

    def __init__(self, expenses_file: Path | str):
        """
        Initialize expense store.

        Args:
            expenses_file: Path to the JSON store file
        """
        self.expenses_file = Path(expenses_file)

    def exists(self) -> bool:
        """Check if the store file exists."""
        return self.expenses_file.exists()

    def load(self) -> list[Expense]:
        """
        Load the full collection.

        Returns:
            Records in file order

        Raises:
            ExpenseStoreNotFoundError: If the store file doesn't exist
            ExpenseStoreError: If the file can't be read or isn't a JSON array of objects
        """
        try:
            data = read_json(self.expenses_file)
        except FileNotFoundError as e:
            raise ExpenseStoreNotFoundError(f"Expense store not found: {self.expenses_file}") from e
        except json.JSONDecodeError as e:
            raise ExpenseStoreError(f"Expense store is not valid JSON: {self.expenses_file}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ExpenseStoreError(f"Failed to read expense store {self.expenses_file}: {e}") from e

        if not isinstance(data, list):
            raise ExpenseStoreError(f"Expense store must contain a JSON array: {self.expenses_file}")

        expenses = []
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                raise ExpenseStoreError(f"Record {index} in {self.expenses_file} is not an object")
            expenses.append(Expense.from_dict(entry))

        logger.debug(f"Loaded {len(expenses)} expenses from {self.expenses_file}")
        return expenses

    def load_or_empty(self) -> list[Expense]:
        """Load the collection, treating a missing file as empty."""
        try:
            return self.load()
        except ExpenseStoreNotFoundError:
            logger.debug(f"No expense store at {self.expenses_file}, starting empty")
            return []

    def save(self, expenses: list[Expense]) -> None:
        """
        Overwrite the store file with the full collection.

        Raises:
            ExpenseStoreError: If the file can't be written; the previous
                content is left in place
        """
        try:
            write_json(self.expenses_file, [expense.to_dict() for expense in expenses])
        except (OSError, TypeError, ValueError) as e:
            raise ExpenseStoreError(f"Failed to write expense store {self.expenses_file}: {e}") from e

        logger.debug(f"Saved {len(expenses)} expenses to {self.expenses_file}")

    def last_modified(self) -> datetime | None:
        """Get timestamp of the store file."""
        return self._file_mtime(self.expenses_file)

    def item_count(self) -> int | None:
        """Get count of records in the store file."""
        if not self.exists():
            return None

        try:
            data = read_json(self.expenses_file)
        except (OSError, ValueError):
            return 0
        return len(data) if isinstance(data, list) else 0

    def size_bytes(self) -> int | None:
        """Get size of the store file."""
        return self._file_size(self.expenses_file)

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No expense store found"
        return f"Expense store: {count} expenses"
