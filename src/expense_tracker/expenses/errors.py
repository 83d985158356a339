"""Exceptions raised by the expense store."""


class ExpenseError(Exception):
    """Base class for all expense tracker failures."""


class ExpenseValidationError(ExpenseError, ValueError):
    """Input failed validation; nothing was read or written."""


class ExpenseTypeError(ExpenseValidationError, TypeError):
    """Input had the wrong type, e.g. a non-numeric amount."""


class ExpenseStoreError(ExpenseError, OSError):
    """The store file could not be read, parsed or written."""


class ExpenseStoreNotFoundError(ExpenseStoreError, FileNotFoundError):
    """The store file does not exist."""
