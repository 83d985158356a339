#!/usr/bin/env python3
"""
Main CLI Entry Point for the Expense Tracker

Provides the expense-tracker command group. The record flags
(-a/--amount, -d/--description, -i/--id, -m/--month) are defined here once
and read by each subcommand; subcommands accept the same flags themselves.
"""

import logging
import os
from pathlib import Path

import click

from .. import __version__
from ..core.config import get_config, reload_config
from ..core.json_utils import format_json
from ..expenses.datastore import ExpenseFileStore
from ..expenses.service import ExpenseService


@click.group()
@click.version_option(__version__, prog_name="expense-tracker")
@click.option("-a", "--amount", help="Amount of expense")
@click.option("-d", "--description", help="Description of expense")
@click.option("-i", "--id", "expense_id", help="Id of expense")
@click.option("-m", "--month", type=click.IntRange(1, 12), help="Month of expense (1-12)")
@click.option(
    "--file",
    "expenses_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Expense store file (default: $EXPENSES_FILE or ./expenses.json)",
)
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    amount: str | None,
    description: str | None,
    expense_id: str | None,
    month: int | None,
    expenses_file: Path | None,
    config_env: str | None,
    verbose: bool,
    debug: bool,
) -> None:
    """
    Expense Tracker - record, update, list, delete and summarize expenses.

    Expenses are kept in a single JSON file.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["EXPENSES_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config() if config_env or debug else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("expense_tracker").setLevel(logging.DEBUG)

    store_path = expenses_file or config.expenses_file
    store = ExpenseFileStore(store_path)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["store"] = store
    ctx.obj["service"] = ExpenseService(store, month_filter_rule=config.month_filter_rule)
    ctx.obj["options"] = {
        "amount": amount,
        "description": description,
        "expense_id": expense_id,
        "month": month,
    }

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Expense store: {store_path}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from expense_tracker import __author__

    click.echo(f"Expense Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print configuration as JSON")
@click.pass_context
def config(ctx: click.Context, as_json: bool) -> None:
    """Show current configuration and store status."""
    config_obj = ctx.obj["config"]
    store: ExpenseFileStore = ctx.obj["store"]

    if as_json:
        data = config_obj.to_dict()
        data["expenses_file"] = str(store.expenses_file)
        click.echo(format_json(data))
        return

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Expense Store: {store.expenses_file}")
    click.echo(f"  Month Filter Rule: {config_obj.month_filter_rule.value}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")
    click.echo()
    click.echo(f"  {store.summary_text()}")
    if store.exists():
        click.echo(f"  Last Modified: {store.last_modified():%Y-%m-%d %H:%M:%S} ({store.age_days()} days ago)")
        click.echo(f"  Size: {store.size_bytes()} bytes")


from .expenses import add, delete, list_expenses, summary, update  # noqa: E402

for command in (add, update, delete, list_expenses, summary):
    main.add_command(command)


if __name__ == "__main__":
    main()
