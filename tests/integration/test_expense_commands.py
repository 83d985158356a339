#!/usr/bin/env python3
"""
Integration tests for the record management commands.

Runs add/update/delete/list/summary in-process with CliRunner against a
store file in a temporary directory.
"""

import pytest
from click.testing import CliRunner

from expense_tracker.cli.main import main
from expense_tracker.core.json_utils import read_json, write_json


@pytest.mark.integration
@pytest.mark.expenses
class TestExpenseCommands:
    """Test expense subcommands end to end, in-process."""

    def setup_method(self):
        self.runner = CliRunner()

    def invoke(self, store, *args):
        return self.runner.invoke(main, ["--file", str(store), *args])

    # add

    def test_add_creates_store(self, expenses_file):
        result = self.invoke(expenses_file, "add", "--amount", "100", "--description", "Test Expense")

        assert result.exit_code == 0
        stored = read_json(expenses_file)
        assert len(stored) == 1
        assert stored[0]["amount"] == 100
        assert f"Expense added successfully (ID: {stored[0]['id']})" in result.output

    def test_add_with_group_level_flags(self, expenses_file):
        result = self.invoke(expenses_file, "-a", "12.5", "-d", "Lunch", "add")

        assert result.exit_code == 0
        assert read_json(expenses_file)[0]["amount"] == 12.5

    def test_subcommand_flag_wins_over_group_flag(self, expenses_file):
        result = self.invoke(expenses_file, "-a", "1", "add", "-a", "2", "-d", "x")

        assert result.exit_code == 0
        assert read_json(expenses_file)[0]["amount"] == 2

    def test_add_requires_amount_and_description(self, expenses_file):
        result = self.invoke(expenses_file, "add", "--amount", "100")

        assert result.exit_code == 2
        assert "add requires --amount and --description" in result.output
        assert not expenses_file.exists()

    def test_add_rejects_non_numeric_amount(self, expenses_file):
        result = self.invoke(expenses_file, "add", "--amount", "lots", "--description", "x")

        assert result.exit_code == 2
        assert "amount must be a number" in result.output
        assert not expenses_file.exists()

    def test_add_rejects_fractional_cent_amount(self, expenses_file):
        result = self.invoke(expenses_file, "add", "--amount", "12.345", "--description", "Fuel")

        assert result.exit_code == 2
        assert "fractions of a cent" in result.output
        assert not expenses_file.exists()

    def test_add_to_corrupt_store_fails(self, expenses_file):
        expenses_file.write_text("not json", encoding="utf-8")

        result = self.invoke(expenses_file, "add", "-a", "1", "-d", "x")

        assert result.exit_code == 1
        assert "not valid JSON" in result.output
        assert expenses_file.read_text(encoding="utf-8") == "not json"

    def test_expenses_file_from_environment(self, monkeypatch, temp_dir):
        target = temp_dir / "env-store.json"
        monkeypatch.setenv("EXPENSES_FILE", str(target))

        result = self.runner.invoke(main, ["add", "-a", "3", "-d", "From env"])

        assert result.exit_code == 0
        assert read_json(target)[0]["description"] == "From env"

    # update

    def test_update_record(self, populated_file):
        result = self.invoke(populated_file, "update", "--id", "1", "--amount", "200", "--description", "Updated Expense")

        assert result.exit_code == 0
        assert "Expense updated successfully (ID: 1)" in result.output
        record = read_json(populated_file)[0]
        assert record == {**record, "id": "1", "amount": 200, "description": "Updated Expense"}

    def test_update_to_zero(self, populated_file):
        result = self.invoke(populated_file, "update", "-i", "2", "-a", "0")

        assert result.exit_code == 0
        assert read_json(populated_file)[1]["amount"] == 0

    def test_update_unknown_id(self, populated_file, sample_expenses):
        result = self.invoke(populated_file, "update", "-i", "missing", "-a", "5")

        assert result.exit_code == 0
        assert "No expense found with ID missing" in result.output
        assert read_json(populated_file) == sample_expenses

    def test_update_requires_id(self, populated_file):
        result = self.invoke(populated_file, "update", "-a", "5")

        assert result.exit_code == 2
        assert "Please provide an id" in result.output

    def test_update_requires_a_field(self, populated_file):
        result = self.invoke(populated_file, "update", "-i", "1")

        assert result.exit_code == 2
        assert "Please provide either amount or description" in result.output

    def test_update_missing_store(self, expenses_file):
        result = self.invoke(expenses_file, "update", "-i", "1", "-a", "5")

        assert result.exit_code == 1
        assert "Expense store not found" in result.output
        assert not expenses_file.exists()

    # delete

    def test_delete_record(self, populated_file):
        result = self.invoke(populated_file, "delete", "--id", "1")

        assert result.exit_code == 0
        assert "Expense deleted successfully" in result.output
        assert [e["id"] for e in read_json(populated_file)] == ["2", "3"]

    def test_delete_with_group_level_id(self, populated_file):
        result = self.invoke(populated_file, "-i", "3", "delete")

        assert result.exit_code == 0
        assert [e["id"] for e in read_json(populated_file)] == ["1", "2"]

    def test_delete_unknown_id(self, populated_file, sample_expenses):
        result = self.invoke(populated_file, "delete", "--id", "missing")

        assert result.exit_code == 0
        assert "No expense found with ID missing" in result.output
        assert read_json(populated_file) == sample_expenses

    def test_delete_requires_id(self, populated_file):
        result = self.invoke(populated_file, "delete")

        assert result.exit_code == 2
        assert "Please provide an id" in result.output

    # list

    def test_list_renders_table(self, populated_file):
        result = self.invoke(populated_file, "list")

        assert result.exit_code == 0
        header = result.output.splitlines()[0].split()
        assert header == ["id", "date", "amount", "description"]
        assert "Test Expense" in result.output
        assert "Coffee beans" in result.output
        assert "2020-03-14" in result.output
        assert "12.5" in result.output

    def test_list_absent_store_prints_nothing(self, expenses_file):
        result = self.invoke(expenses_file, "list")

        assert result.exit_code == 0
        assert result.output == ""

    def test_list_corrupt_store_fails(self, expenses_file):
        expenses_file.write_text("{", encoding="utf-8")

        result = self.invoke(expenses_file, "list")

        assert result.exit_code == 1

    # summary

    def test_summary_total(self, populated_file):
        result = self.invoke(populated_file, "summary")

        assert result.exit_code == 0
        assert result.output.strip() == "Total expenses: 119.5"

    def test_summary_single_record(self, expenses_file):
        from datetime import date

        write_json(
            expenses_file,
            [{"id": "1", "amount": 100, "description": "Test Expense", "date": date.today().isoformat()}],
        )

        result = self.invoke(expenses_file, "summary")

        assert result.output.strip() == "Total expenses: 100"

    def test_summary_month_with_rule(self, expenses_file):
        write_json(
            expenses_file,
            [
                {"id": "1", "date": "2020-03-14", "amount": 7, "description": "a"},
                {"id": "2", "date": "2021-04-01", "amount": 3, "description": "b"},
            ],
        )

        result = self.invoke(expenses_file, "summary", "--month", "3", "--rule", "month")

        assert result.exit_code == 0
        assert result.output.strip() == "Total expenses in March: 7"

    def test_summary_month_default_rule_is_current_year(self, expenses_file):
        write_json(expenses_file, [{"id": "1", "date": "2020-03-14", "amount": 7, "description": "a"}])

        result = self.invoke(expenses_file, "-m", "3", "summary")

        assert result.exit_code == 0
        assert result.output.strip() == "Total expenses in March: 0"

    def test_summary_month_out_of_range(self, populated_file):
        result = self.invoke(populated_file, "summary", "--month", "13")

        assert result.exit_code == 2

    def test_summary_absent_store(self, expenses_file):
        result = self.invoke(expenses_file, "summary")

        assert result.exit_code == 0
        assert "No expense record found" in result.output
