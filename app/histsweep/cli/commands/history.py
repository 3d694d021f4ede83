"""History command for viewing past sweeps.

This module provides the `histsweep history` command for viewing
the live sweeps recorded to the history file.
"""

import json
from datetime import datetime
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from histsweep.core.state import StateManager
from histsweep.models.history import SweepRecord
from histsweep.utils.formatting import console, print_info

app = typer.Typer(
    name="history",
    help="View history of live sweeps.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def history(
    ctx: typer.Context,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum number of entries to show.",
        ),
    ] = 20,
    since: Annotated[
        str | None,
        typer.Option(
            "--since",
            help="Show entries since date (YYYY-MM-DD).",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show history of live sweeps.

    Examples:
        histsweep history              # Show last 20 sweeps
        histsweep history -n 50        # Show last 50 sweeps
        histsweep history --since 2026-01-01
        histsweep history --json       # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    records = StateManager().get_history(limit=limit)

    if since:
        try:
            since_date = datetime.fromisoformat(since).strftime("%Y-%m-%d")
        except ValueError:
            typer.echo(f"Invalid date format: {since}. Use YYYY-MM-DD.", err=True)
            raise typer.Exit(code=1) from None
        records = [r for r in records if r.timestamp[:10] >= since_date]

    if not records:
        print_info("No history entries found.")
        return

    if json_output:
        console.print_json(json.dumps([r.to_dict() for r in records]))
    else:
        _print_table(records)


def _print_table(records: list[SweepRecord]) -> None:
    """Print sweep records as a Rich table."""
    table = Table(
        title="Sweep History",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("ID", style="dim")
    table.add_column("Timestamp")
    table.add_column("Profile")
    table.add_column("Removed", justify="right")
    table.add_column("Failed", justify="right")
    table.add_column("Roots", style="muted")

    for record in records:
        roots = ", ".join(record.roots[:2])
        if len(record.roots) > 2:
            roots += f" (+{len(record.roots) - 2} more)"

        table.add_row(
            record.id[:8],
            _format_timestamp(record.timestamp),
            record.profile,
            f"[success]{len(record.removed)}[/]",
            f"[error]{len(record.failed)}[/]" if record.failed else "0",
            escape(roots),
        )

    console.print(table)


def _format_timestamp(iso_timestamp: str) -> str:
    """Format an ISO 8601 timestamp as YYYY-MM-DD HH:MM."""
    dt = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))
    return dt.strftime("%Y-%m-%d %H:%M")
