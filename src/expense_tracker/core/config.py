#!/usr/bin/env python3
"""
Configuration Management for the Expense Tracker

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from ..expenses.filters import MonthFilterRule

# Load environment variables from .env file
load_dotenv()

DEFAULT_EXPENSES_FILENAME = "expenses.json"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for the expense tracker.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    data_dir: Path
    expenses_file: Path

    month_filter_rule: MonthFilterRule = MonthFilterRule.MONTH_OF_CURRENT_YEAR

    # Application settings
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("EXPENSES_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_expenses"
            data_dir = Path(os.getenv("EXPENSES_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("EXPENSES_DATA_DIR", ".")).expanduser().resolve()

        expenses_file_env = os.getenv("EXPENSES_FILE")
        if expenses_file_env:
            expenses_file = Path(expenses_file_env).expanduser()
            if not expenses_file.is_absolute():
                expenses_file = data_dir / expenses_file
        else:
            expenses_file = data_dir / DEFAULT_EXPENSES_FILENAME

        rule_name = os.getenv("EXPENSES_MONTH_FILTER", MonthFilterRule.MONTH_OF_CURRENT_YEAR.value)

        return cls(
            environment=env,
            data_dir=data_dir,
            expenses_file=expenses_file,
            month_filter_rule=MonthFilterRule.from_name(rule_name),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.expenses_file.exists() and not self.expenses_file.is_file():
            errors.append(f"expenses_file is not a file: {self.expenses_file}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.WARNING)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
