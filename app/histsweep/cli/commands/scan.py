"""Scan command.

Lists the history files a sweep would remove, without touching them.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from histsweep.cli.types import (
    HomesOption,
    ProfileOption,
    RootsOption,
    get_profile,
    get_target_roots,
    load_settings,
)
from histsweep.sweeper.engine import HistorySweeper
from histsweep.sweeper.models import Match
from histsweep.sweeper.patterns import get_patterns
from histsweep.utils.formatting import console, format_size, print_success

app = typer.Typer(
    name="scan",
    help="List history files without removing them.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options for scan."""

    TABLE = "table"
    JSON = "json"


@app.callback(invoke_without_command=True)
def scan(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    profile: ProfileOption = None,
    homes: HomesOption = None,
    roots: RootsOption = None,
) -> None:
    """Scan home directories and /root for history files."""
    if ctx.invoked_subcommand is not None:
        return

    config = load_settings()
    sweeper = HistorySweeper(
        roots=get_target_roots(roots, homes, config),
        patterns=get_patterns(get_profile(profile, config)),
    )
    matches = list(sweeper.scan())

    if output_format == OutputFormat.JSON:
        _print_json(matches)
        return

    if not matches:
        print_success("No history files found.")
        return

    _print_table(matches)
    total_size = format_size(sum(m.size_bytes or 0 for m in matches))
    console.print(f"\n[dim]Found {len(matches)} history file(s) ({total_size} total)[/dim]")


# === Private helper functions ===


def _print_table(matches: list[Match]) -> None:
    """Display matches as a Rich table."""
    table = Table(
        title="History Files",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="path")
    table.add_column("Type", width=8)
    table.add_column("Size", justify="right", width=10)
    table.add_column("Pattern", style="dim")

    for m in matches:
        table.add_row(
            escape(m.path),
            m.path_type.value,
            format_size(m.size_bytes),
            escape(m.pattern.pattern),
        )

    console.print(table)


def _print_json(matches: list[Match]) -> None:
    """Display matches as JSON."""
    data = [
        {
            "path": m.path,
            "root": m.root,
            "pattern": m.pattern.pattern,
            "kind": m.pattern.kind.value,
            "path_type": m.path_type.value,
            "size_bytes": m.size_bytes,
        }
        for m in matches
    ]
    console.print_json(json.dumps(data))
