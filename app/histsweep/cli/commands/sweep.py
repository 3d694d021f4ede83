"""Sweep command.

Removes shell and editor history files from every target root, or
reports them with --dry-run.
"""

from typing import Annotated

import typer
from rich.markup import escape

from histsweep.cli.types import (
    HomesOption,
    ProfileOption,
    RootsOption,
    get_profile,
    get_target_roots,
    is_quiet,
    load_settings,
)
from histsweep.sweeper.engine import HistorySweeper
from histsweep.sweeper.history import record_sweep
from histsweep.sweeper.models import RootSweep, SweepActionResult
from histsweep.sweeper.operator import SweepOperator
from histsweep.sweeper.patterns import get_patterns
from histsweep.utils.formatting import console, print_info, print_success, print_warning

app = typer.Typer(
    name="sweep",
    help="Remove shell and editor history files.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def sweep(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    profile: ProfileOption = None,
    homes: HomesOption = None,
    roots: RootsOption = None,
) -> None:
    """Remove history files from all home directories and /root.

    Without --root, home directories are discovered system-wide and
    histsweep must run as root. Missing roots are skipped. Files that
    cannot be deleted are reported and the sweep continues.

    Examples:
        sudo histsweep sweep --dry-run
        sudo histsweep sweep --profile extended
        histsweep sweep --root ~ --dry-run
    """
    if ctx.invoked_subcommand is not None:
        return

    config = load_settings()
    selected = get_profile(profile, config)
    targets = get_target_roots(roots, homes, config)
    quiet = is_quiet(ctx)

    sweeper = HistorySweeper(
        roots=targets,
        patterns=get_patterns(selected),
        operator=SweepOperator(dry_run=dry_run),
    )

    if not quiet:
        mode = "dry-run" if dry_run else "live"
        print_info(f"Sweeping {len(targets)} root(s) (profile={selected.value}, mode={mode})")

    root_sweeps: list[RootSweep] = []
    for root_sweep in sweeper.sweep():
        root_sweeps.append(root_sweep)
        _print_root_sweep(root_sweep, quiet)

    _print_summary(root_sweeps, dry_run)

    if not dry_run and config.record_history:
        try:
            if record_sweep(root_sweeps, profile=selected.value) is not None:
                print_info("Sweep recorded to history.")
        except (OSError, RuntimeError) as e:
            print_warning(f"Could not record to history: {escape(str(e))}")


# === Private helper functions ===


def _print_root_sweep(root_sweep: RootSweep, quiet: bool) -> None:
    """Print the root line and one line per match."""
    if not quiet:
        console.print(
            f"Processing root: {escape(root_sweep.root)}",
            soft_wrap=True,
            highlight=False,
        )

    for result in root_sweep.results:
        if quiet and result.success:
            continue
        console.print(_format_result(result), soft_wrap=True, highlight=False)


def _format_result(result: SweepActionResult) -> str:
    """Format a single match outcome as one line of markup."""
    path = escape(result.path)
    if result.dry_run:
        return f"  [info]would remove:[/] {path}"
    if result.vanished:
        return f"  [muted]already gone:[/] {path}"
    if result.success:
        return f"  [removed]removed:[/] {path}"
    return f"  [error]failed:[/] {path} ({escape(result.error or 'Unknown error')})"


def _print_summary(root_sweeps: list[RootSweep], dry_run: bool) -> None:
    """Print the totals of the run."""
    results = [r for sweep in root_sweeps for r in sweep.results]
    removed = sum(1 for r in results if r.removed)
    failed = sum(1 for r in results if not r.success)

    if dry_run:
        if results:
            print_info(
                f"Dry-run: {len(results)} file(s) would be removed. "
                "Rerun without --dry-run to delete."
            )
        else:
            print_success("No history files found.")
        return

    if failed:
        print_warning(f"{removed} removed, {failed} failed")
    elif results:
        print_success(f"Removed {removed} file(s).")
    else:
        print_success("No history files found.")
