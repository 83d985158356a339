#!/usr/bin/env python3
"""
Expense CLI - Record Management Commands

add, update, delete, list and summary. Each command reads its flags from
its own options first and falls back to the flags given on the group.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click
import pandas as pd

from ..expenses.errors import ExpenseError, ExpenseStoreNotFoundError, ExpenseValidationError
from ..expenses.filters import MonthFilterRule
from ..expenses.models import Expense
from ..expenses.service import ExpenseService

TABLE_COLUMNS = ["id", "date", "amount", "description"]

amount_option = click.option("-a", "--amount", help="Amount of expense")
description_option = click.option("-d", "--description", help="Description of expense")
id_option = click.option("-i", "--id", "expense_id", help="Id of expense")
month_option = click.option("-m", "--month", type=click.IntRange(1, 12), help="Month of expense (1-12)")


def _option(ctx: click.Context, name: str, value: Any) -> Any:
    """Subcommand flag if given, otherwise the group-level flag."""
    if value is not None:
        return value
    return ctx.obj["options"].get(name)


def _service(ctx: click.Context) -> ExpenseService:
    return ctx.obj["service"]


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn expense failures into click errors with a non-zero exit status."""
    try:
        yield
    except ExpenseValidationError as e:
        raise click.UsageError(str(e)) from e
    except ExpenseError as e:
        raise click.ClickException(str(e)) from e


def render_table(expenses: list[Expense]) -> str:
    """Render records as a fixed-width table."""
    rows = [
        {
            "id": expense.id,
            "date": expense.date.to_iso_string() if expense.date else str(expense.extra.get("date", "")),
            "amount": expense.amount.format_plain(),
            "description": expense.description,
        }
        for expense in expenses
    ]
    frame = pd.DataFrame(rows, columns=TABLE_COLUMNS)
    return frame.to_string(index=False)


@click.command()
@amount_option
@description_option
@click.pass_context
def add(ctx: click.Context, amount: str | None, description: str | None) -> None:
    """
    Add a new expense.

    Example:
      expense-tracker add --amount 12.50 --description "Lunch"
    """
    amount = _option(ctx, "amount", amount)
    description = _option(ctx, "description", description)

    if amount is None or description is None:
        raise click.UsageError("add requires --amount and --description")

    with _reported_errors():
        expense = _service(ctx).add(amount, description)

    click.echo(f"Expense added successfully (ID: {expense.id})")


@click.command()
@id_option
@amount_option
@description_option
@click.pass_context
def update(ctx: click.Context, expense_id: str | None, amount: str | None, description: str | None) -> None:
    """
    Update an existing expense.

    Only the fields given are changed.

    Example:
      expense-tracker update --id <id> --amount 20
    """
    expense_id = _option(ctx, "expense_id", expense_id)
    amount = _option(ctx, "amount", amount)
    description = _option(ctx, "description", description)

    with _reported_errors():
        updated = _service(ctx).update(expense_id, amount=amount, description=description)

    if updated:
        click.echo(f"Expense updated successfully (ID: {expense_id})")
    else:
        click.echo(f"No expense found with ID {expense_id}", err=True)


@click.command()
@id_option
@click.pass_context
def delete(ctx: click.Context, expense_id: str | None) -> None:
    """Delete an existing expense."""
    expense_id = _option(ctx, "expense_id", expense_id)

    with _reported_errors():
        removed = _service(ctx).delete(expense_id)

    if removed:
        click.echo("Expense deleted successfully")
    else:
        click.echo(f"No expense found with ID {expense_id}", err=True)


@click.command("list")
@click.pass_context
def list_expenses(ctx: click.Context) -> None:
    """List all expenses."""
    with _reported_errors():
        expenses = _service(ctx).list()

    if expenses:
        click.echo(render_table(expenses))


@click.command()
@month_option
@click.option(
    "--rule",
    type=click.Choice([rule.value for rule in MonthFilterRule]),
    help="How --month selects expenses (default: $EXPENSES_MONTH_FILTER)",
)
@click.pass_context
def summary(ctx: click.Context, month: int | None, rule: str | None) -> None:
    """
    Get summary of expenses.

    Examples:
      expense-tracker summary
      expense-tracker summary --month 8
    """
    month = _option(ctx, "month", month)
    filter_rule = MonthFilterRule(rule) if rule else None

    with _reported_errors():
        try:
            result = _service(ctx).summarize(month=month, rule=filter_rule)
        except ExpenseStoreNotFoundError:
            click.echo("No expense record found", err=True)
            return

    click.echo(result.message())
