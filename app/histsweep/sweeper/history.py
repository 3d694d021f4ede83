"""Sweep history recording.

Records live sweeps to the history file, giving an audit trail of
deleted history files.
"""

from collections.abc import Sequence

from histsweep.core.state import StateManager
from histsweep.models.history import SweepRecord, create_sweep_record
from histsweep.sweeper.models import RootSweep


def record_sweep(
    root_sweeps: Sequence[RootSweep],
    profile: str,
    command: str = "histsweep sweep",
    state: StateManager | None = None,
) -> SweepRecord | None:
    """Record a live sweep to history.

    Sweeps that neither removed nor failed on any file are not recorded.

    Args:
        root_sweeps: Per-root outcomes of the sweep.
        profile: Pattern profile used.
        command: Command that triggered the sweep.
        state: StateManager to write to. Defaults to the XDG state directory.

    Returns:
        The recorded SweepRecord, or None if nothing was recorded.

    Raises:
        RuntimeError: If the state directory cannot be created.
        OSError: If the history file cannot be written.
    """
    removed = [path for sweep in root_sweeps for path in sweep.removed]
    failed = [path for sweep in root_sweeps for path in sweep.failed]
    if not removed and not failed:
        return None

    record = create_sweep_record(
        profile=profile,
        roots=[sweep.root for sweep in root_sweeps],
        removed=removed,
        failed=failed,
        metadata={"command": command},
    )
    (state or StateManager()).record(record)
    return record
