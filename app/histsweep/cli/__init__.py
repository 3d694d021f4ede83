"""CLI package for histsweep.

This package contains the Typer application and all subcommands.
"""

from histsweep.cli.main import app

__all__ = ["app"]
