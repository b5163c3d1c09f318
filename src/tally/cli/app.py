from __future__ import annotations

"""
Tally CLI Wrapper (Typer + Rich)

Local-only personal expense ledger.

All paths are resolved from a single workspace root:
  --data-dir / TALLY_DATA env var / current working directory
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from tally.logging_setup import configure_logging
from tally.workspace import Workspace

APP_HELP = "Tally expense ledger (local-only)"
HELP_ENTRY_ID = "Entry ID (or a unique prefix of at least 8 characters)"
DATE_FORMATS = ["%Y-%m-%d"]

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar="TALLY_DATA",
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Tally CLI: all paths resolved from a single workspace root."""
    configure_logging(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = Workspace.resolve(data_dir)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


def _day(value: Optional[datetime]):
    return value.date() if value is not None else None


@app.command()
def init(ctx: typer.Context):
    """Initialize a workspace with a data directory and starter category palette.

    Safe to run on an existing workspace; skips anything that already exists.
    """
    from tally.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def add(
    ctx: typer.Context,
    amount: str = typer.Option(..., "--amount", "-a", help="Positive amount, e.g. 12.50"),
    category: str = typer.Option(..., "--category", "-c", help="Category from the palette (e.g. Food)"),
    date: Optional[datetime] = typer.Option(
        None, "--date", "-d", formats=DATE_FORMATS, help="Date YYYY-MM-DD (default: today)"
    ),
    note: str = typer.Option("", "--note", "-n", help="Optional note"),
):
    """Add an expense.

    Examples:
      tally add --amount 200 --category Food --note Lunch
      tally add -a 1200 -c Bills -d 2024-01-05
    """
    from tally.cli.command import add as cmd_add

    code = cmd_add.run(
        workspace=_ws(ctx),
        amount=amount,
        category=category,
        entry_date=_day(date),
        note=note,
    )
    raise typer.Exit(code=code)


@app.command()
def edit(
    ctx: typer.Context,
    entry_id: str = typer.Argument(..., help=HELP_ENTRY_ID),
    amount: Optional[str] = typer.Option(None, "--amount", "-a", help="New amount"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="New category"),
    date: Optional[datetime] = typer.Option(
        None, "--date", "-d", formats=DATE_FORMATS, help="New date YYYY-MM-DD"
    ),
    note: Optional[str] = typer.Option(None, "--note", "-n", help="New note"),
):
    """Edit an expense. Options left out keep their current value.

    Examples:
      tally edit 3f2a9c1e --amount 50 --category Travel
    """
    from tally.cli.command import edit as cmd_edit

    code = cmd_edit.run(
        workspace=_ws(ctx),
        entry_id=entry_id,
        amount=amount,
        category=category,
        entry_date=_day(date),
        note=note,
    )
    raise typer.Exit(code=code)


@app.command()
def remove(
    ctx: typer.Context,
    entry_id: str = typer.Argument(..., help=HELP_ENTRY_ID),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """Delete an expense. Deleting an unknown id changes nothing."""
    from tally.cli.command import remove as cmd_remove

    code = cmd_remove.run(workspace=_ws(ctx), entry_id=entry_id, assume_yes=yes)
    raise typer.Exit(code=code)


@app.command("list")
def list_entries(
    ctx: typer.Context,
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only this category"),
    date_from: Optional[datetime] = typer.Option(
        None, "--from", formats=DATE_FORMATS, help="Earliest date, inclusive"
    ),
    date_to: Optional[datetime] = typer.Option(
        None, "--to", formats=DATE_FORMATS, help="Latest date, inclusive"
    ),
):
    """List expenses, newest first.

    Examples:
      tally list
      tally list --category Food --from 2024-01-01 --to 2024-01-31
    """
    from tally.cli.command import list_entries as cmd_list

    code = cmd_list.run(
        workspace=_ws(ctx),
        category=category,
        date_from=_day(date_from),
        date_to=_day(date_to),
    )
    raise typer.Exit(code=code)


@app.command()
def summary(ctx: typer.Context):
    """Show totals, the category breakdown and the six-month trend."""
    from tally.cli.command import summary as cmd_summary

    code = cmd_summary.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def currency(
    ctx: typer.Context,
    code: Optional[str] = typer.Argument(None, help="Currency code to display (e.g. INR, USD, EUR)"),
):
    """Show or set the display currency. Amounts are never converted."""
    from tally.cli.command import currency as cmd_currency

    code_ = cmd_currency.run(workspace=_ws(ctx), code=code)
    raise typer.Exit(code=code_)


@app.command()
def demo(ctx: typer.Context):
    """Seed sample expenses into an empty ledger."""
    from tally.cli.command import demo as cmd_demo

    code = cmd_demo.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
