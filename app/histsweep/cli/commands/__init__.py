"""CLI commands for histsweep.

This package contains all subcommand implementations.
"""

from histsweep.cli.commands import config, history, patterns, scan, sweep

__all__ = ["config", "history", "patterns", "scan", "sweep"]
