"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from histsweep import __version__
from histsweep.cli.commands import config, history, patterns, scan, sweep
from histsweep.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="histsweep",
    help="Find and remove shell and editor history files for local accounts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"histsweep version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print failures and the summary.",
        ),
    ] = False,
) -> None:
    """histsweep - find and remove shell and editor history files.

    Resolves a built-in list of history file patterns inside every
    home directory and /root, then reports or deletes each match.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(sweep.app, name="sweep")
app.add_typer(scan.app, name="scan")
app.add_typer(patterns.app, name="patterns")
app.add_typer(history.app, name="history")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
