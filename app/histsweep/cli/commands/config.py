"""Configuration commands.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import tomli_w
import typer
from rich.markup import escape

from histsweep.cli.types import load_settings
from histsweep.core.config import SweepConfig, SweepConfigError, config_to_dict, save_config
from histsweep.core.paths import get_config_path
from histsweep.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the histsweep configuration file.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration as TOML."""
    config = load_settings()
    path = get_config_path()

    source = str(path) if path.exists() else f"{path} (not found, using defaults)"
    console.print(f"[dim]# {escape(source)}[/dim]", soft_wrap=True)
    console.print(escape(tomli_w.dumps(config_to_dict(config))), soft_wrap=True, highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {escape(str(path))} (use --force to overwrite)")
        return

    try:
        saved = save_config(SweepConfig())
    except SweepConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {escape(str(saved))}")
