"""Mini README: Typer command line interface for the expense ledger.

Structure:
    * cli - Typer application exposing ``add``, ``list``, ``summary`` and
      ``delete``.
    * LedgerCommandGroup - command group reporting unknown commands with the
      ledger's own error code.
    * LenientOptionCommand - command that treats a dangling option as absent
      and ignores unrecognised tokens.
    * main - console script entry point.

Every command validates its options first, then opens the ledger through
``open_ledger`` so the file is rewritten however the command finishes.
Errors in the invocation are written to stderr as ``ERROR <code>: <message>``
and exit with status 1.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Iterator, List, NoReturn, Optional

import click
import typer
from pydantic import ValidationError
from typer.core import TyperCommand, TyperGroup

from ..configuration import get_settings
from ..ledger import Expense, LedgerStore, open_ledger
from ..logging_utils import configure_root_logger, get_logger
from .errors import CommandError, ErrorCode
from .requests import parse_add_request, parse_delete_request, parse_summary_request

LOGGER = get_logger(__name__)


class LedgerCommandGroup(TyperGroup):
    """Command group mapping unknown commands onto ``ErrorCode.UNKNOWN_COMMAND``."""

    def resolve_command(self, ctx: click.Context, args: List[str]):
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            _fail(ErrorCode.UNKNOWN_COMMAND)
        return super().resolve_command(ctx, args)


class LenientOptionCommand(TyperCommand):
    """Command whose options forgive incomplete invocations.

    An option such as ``--amount`` left without a value at the end of the line
    counts as not given, so validation reports the ledger's error code rather
    than a usage error. Unrecognised tokens are ignored.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        value_options = {
            name
            for param in self.params
            if isinstance(param, click.Option) and not param.is_flag
            for name in param.opts
        }
        if args and args[-1] in value_options:
            LOGGER.debug("Ignoring option %s given without a value", args[-1])
            args = args[:-1]
        return super().parse_args(ctx, args)


_LENIENT_ARGS = {"ignore_unknown_options": True, "allow_extra_args": True}


cli = typer.Typer(
    cls=LedgerCommandGroup,
    help="Track personal expenses in a flat text ledger.",
    add_completion=False,
)


def _fail(code: ErrorCode) -> NoReturn:
    typer.echo(code.render(), err=True)
    raise typer.Exit(code=1)


@contextmanager
def _ledger_session(ctx: typer.Context) -> Iterator[LedgerStore]:
    """Open the configured ledger, reporting unreadable files as errors."""

    ledger_path: Path = ctx.obj["ledger_path"]
    stack = ExitStack()
    try:
        store = stack.enter_context(open_ledger(ledger_path))
    except OSError as error:
        LOGGER.error("Could not read ledger %s: %s", ledger_path, error)
        _fail(ErrorCode.UNREADABLE_LEDGER)
    with stack:
        yield store


@cli.callback(invoke_without_command=True)
def ledger_options(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", help="Ledger file to use instead of the configured one."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Track personal expenses in a flat text ledger."""

    if ctx.invoked_subcommand is None:
        _fail(ErrorCode.INSUFFICIENT_ARGUMENTS)
    try:
        settings = get_settings()
    except (ValidationError, OSError) as error:
        configure_root_logger(logging.DEBUG if verbose else logging.WARNING)
        LOGGER.error("Invalid ledger configuration: %s", error)
        _fail(ErrorCode.INVALID_CONFIGURATION)
    configure_root_logger(logging.DEBUG if verbose else settings.numeric_log_level)
    ctx.obj = {"ledger_path": file or settings.ledger_path}


@cli.command("add", cls=LenientOptionCommand, context_settings=_LENIENT_ARGS)
def add_expense(
    ctx: typer.Context,
    description: Optional[str] = typer.Option(None, "--description", help="What the money was spent on."),
    amount: Optional[str] = typer.Option(None, "--amount", help="Positive amount spent."),
) -> None:
    """Record a new expense dated today."""

    try:
        request = parse_add_request(description, amount)
    except CommandError as error:
        _fail(error.code)

    with _ledger_session(ctx) as store:
        expense_id = store.add(request.description, request.amount)
    typer.echo(f"# Expense added successfully (ID: {expense_id})")


@cli.command("list")
def list_expenses(ctx: typer.Context) -> None:
    """Show every expense in the order it was recorded."""

    with _ledger_session(ctx) as store:
        expenses = store.list_expenses()

    if not expenses:
        typer.echo("# No expenses to display.")
        return
    for line in format_table(expenses):
        typer.echo(line)


@cli.command("summary", cls=LenientOptionCommand, context_settings=_LENIENT_ARGS)
def summarise_expenses(
    ctx: typer.Context,
    month: Optional[str] = typer.Option(None, "--month", help="Month number (1-12) to total."),
) -> None:
    """Print the total of all expenses, optionally for one month."""

    request = parse_summary_request(month)
    with _ledger_session(ctx) as store:
        total = store.sum_by_month(request.month)

    if request.month is None:
        typer.echo(f"# Total expenses: ${total:.2f}")
    else:
        typer.echo(f"# Total expenses for month {request.month}: ${total:.2f}")


@cli.command("delete", cls=LenientOptionCommand, context_settings=_LENIENT_ARGS)
def delete_expense(
    ctx: typer.Context,
    expense_id: Optional[str] = typer.Option(None, "--id", help="Identifier of the expense to remove."),
) -> None:
    """Remove an expense by identifier."""

    try:
        request = parse_delete_request(expense_id)
    except CommandError as error:
        _fail(error.code)

    with _ledger_session(ctx) as store:
        deleted = store.delete_by_id(request.expense_id)

    if deleted:
        typer.echo("# Expense deleted successfully")
    else:
        typer.echo(f"# ERROR: Expense with ID {request.expense_id} not found.")


def format_table(expenses: List[Expense]) -> List[str]:
    """Render expenses as right-aligned columns with two decimal amounts."""

    lines = [f"# {'ID':>6}{'Date':>12}{'Description':>18}{'Amount':>14}"]
    for expense in expenses:
        lines.append(
            f"# {expense.expense_id:>6}{expense.date:>12}"
            f"{expense.description:>18}${expense.amount:>12.2f}"
        )
    return lines


def main() -> None:
    """Console script entry point."""

    cli()
