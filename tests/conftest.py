"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from expense_tracker.core import config as config_module
from expense_tracker.core.json_utils import write_json


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def expenses_file(temp_dir) -> Path:
    """Path for a store file that doesn't exist yet."""
    return temp_dir / "expenses.json"


@pytest.fixture
def sample_expenses() -> list[dict[str, Any]]:
    """Stored records as they appear in the JSON file."""
    today = date.today().isoformat()
    return [
        {"id": "1", "date": today, "amount": 100, "description": "Test Expense"},
        {"id": "2", "date": today, "amount": 12.5, "description": "Lunch"},
        {"id": "3", "date": "2020-03-14", "amount": 7, "description": "Coffee beans"},
    ]


@pytest.fixture
def populated_file(expenses_file, sample_expenses) -> Path:
    """Store file holding sample_expenses."""
    write_json(expenses_file, sample_expenses)
    return expenses_file


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, temp_dir):
    """Point configuration at a throwaway test environment."""
    monkeypatch.setenv("EXPENSES_ENV", "test")
    monkeypatch.setenv("EXPENSES_DATA_DIR", str(temp_dir))
    monkeypatch.delenv("EXPENSES_FILE", raising=False)
    monkeypatch.delenv("EXPENSES_MONTH_FILTER", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    # Force each test to build its own configuration
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "e2e: End-to-end tests running the installed command")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "expenses: Tests for expense record management")
