"""Shared types and utilities for CLI commands.

This module provides the option annotations and helpers used by the
commands that resolve target roots (sweep, scan), so that both build
their sweeper the same way.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from histsweep.core.config import SweepConfig, SweepConfigError, load_config_or_default
from histsweep.sweeper.patterns import Profile
from histsweep.sweeper.roots import HomeSource, PreconditionError, discover_roots, require_privileges
from histsweep.utils.formatting import print_error

ProfileOption = Annotated[
    Profile | None,
    typer.Option(
        "--profile",
        "-p",
        help="Pattern profile (default from config: minimal).",
        case_sensitive=False,
    ),
]

HomesOption = Annotated[
    HomeSource | None,
    typer.Option(
        "--homes",
        help="Home directory discovery: account database or /home listing.",
        case_sensitive=False,
    ),
]

RootsOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--root",
        "-r",
        help="Sweep only this directory (repeatable). Skips discovery and the root check.",
    ),
]


def is_quiet(ctx: typer.Context) -> bool:
    """Read the global --quiet flag from the context."""
    return bool(ctx.obj and ctx.obj.get("quiet"))


def load_settings() -> SweepConfig:
    """Load the config file or defaults, exiting on invalid configuration."""
    try:
        return load_config_or_default()
    except SweepConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def get_profile(profile: Profile | None, config: SweepConfig) -> Profile:
    """Pick the CLI profile, else the configured one."""
    return profile if profile is not None else Profile(config.profile)


def get_target_roots(
    roots: list[Path] | None,
    homes: HomeSource | None,
    config: SweepConfig,
) -> tuple[Path, ...]:
    """Determine the target roots of a run.

    Explicit roots are used as given. Otherwise roots are discovered
    system-wide, which requires root privileges.

    Args:
        roots: Explicit roots from --root.
        homes: Discovery policy from --homes.
        config: Loaded configuration.

    Returns:
        Tuple of target roots.

    Raises:
        typer.Exit: With code 1 if the privilege precondition fails.
    """
    if roots:
        return tuple(root.expanduser().absolute() for root in roots)

    try:
        require_privileges(config.admin_root)
    except PreconditionError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    source = homes if homes is not None else HomeSource(config.homes)
    return discover_roots(source, home_base=config.home_base, admin_root=config.admin_root)
