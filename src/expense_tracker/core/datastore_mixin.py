#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for file-backed DataStore implementations.

Provides shared implementation of the metadata methods so each store only
has to answer the questions specific to its own files.
"""

from abc import abstractmethod
from datetime import datetime
from pathlib import Path


class DataStoreMixin:
    """
    Mixin providing common DataStore functionality.

    Subclasses must implement:
    - exists() -> bool
    - last_modified() -> datetime | None
    - item_count() -> int | None
    - size_bytes() -> int | None
    - summary_text() -> str
    """

    @staticmethod
    def _file_mtime(path: Path) -> datetime | None:
        """Modification time of a file, or None if it doesn't exist."""
        if not path.exists():
            return None
        return datetime.fromtimestamp(path.stat().st_mtime)

    @staticmethod
    def _file_size(path: Path) -> int | None:
        """Size of a file in bytes, or None if it doesn't exist."""
        if not path.exists():
            return None
        return path.stat().st_size

    @abstractmethod
    def exists(self) -> bool:
        """Check if data exists in storage."""
        ...

    @abstractmethod
    def last_modified(self) -> datetime | None:
        """Get timestamp of most recent data modification."""
        ...

    @abstractmethod
    def item_count(self) -> int | None:
        """Get count of items/records in stored data."""
        ...

    @abstractmethod
    def size_bytes(self) -> int | None:
        """Get total storage size in bytes."""
        ...

    @abstractmethod
    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days
