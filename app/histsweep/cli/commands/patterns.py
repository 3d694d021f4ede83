"""Patterns command.

Shows the built-in history file patterns of a profile.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from histsweep.sweeper.models import PatternKind
from histsweep.sweeper.patterns import Profile, get_patterns
from histsweep.utils.formatting import console

app = typer.Typer(
    name="patterns",
    help="Show the built-in history file patterns.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def patterns(
    ctx: typer.Context,
    profile: Annotated[
        Profile,
        typer.Option(
            "--profile",
            "-p",
            help="Pattern profile to show.",
            case_sensitive=False,
        ),
    ] = Profile.MINIMAL,
) -> None:
    """List the exact paths and globs resolved inside every root."""
    if ctx.invoked_subcommand is not None:
        return

    table = Table(
        title=f"Patterns ({profile.value})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Kind", width=6)
    table.add_column("Pattern", style="path", no_wrap=True)
    table.add_column("Description", style="muted")

    for pattern in get_patterns(profile):
        kind = "[info]glob[/]" if pattern.kind == PatternKind.GLOB else "exact"
        table.add_row(kind, escape(pattern.pattern), pattern.description or "-")

    console.print(table)
