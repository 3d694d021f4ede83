"""State management for sweep history.

This module provides the StateManager class for persisting and querying
sweep records in a JSONL file format.
"""

import json
import logging
from pathlib import Path

from histsweep.core.paths import ensure_state_dir, get_history_path
from histsweep.models.history import SweepRecord

logger = logging.getLogger(__name__)


class StateManager:
    """Manages sweep history in a JSONL file.

    Storage location: ~/.local/state/histsweep/history.jsonl

    Each line is a complete JSON object representing a SweepRecord,
    which keeps writes append-only.
    """

    HISTORY_FILENAME = "history.jsonl"

    def __init__(self, state_dir: Path | None = None) -> None:
        """Initialize StateManager.

        Args:
            state_dir: Optional override for state directory.
                      Default: ~/.local/state/histsweep
        """
        self._state_dir = state_dir

    @property
    def history_path(self) -> Path:
        """Path to the history file within the state directory."""
        if self._state_dir is None:
            return get_history_path()
        return self._state_dir / self.HISTORY_FILENAME

    def record(self, record: SweepRecord) -> None:
        """Append a sweep record to the history file.

        Creates the file and parent directories if they don't exist.

        Args:
            record: The sweep record to append.

        Raises:
            RuntimeError: If the state directory cannot be created.
            OSError: If the file cannot be written.
        """
        if self._state_dir is None:
            ensure_state_dir()
        else:
            self._state_dir.mkdir(parents=True, exist_ok=True)

        with self.history_path.open(mode="a", encoding="utf-8") as f:
            f.write(record.to_json_line() + "\n")
            f.flush()

    def get_history(self, limit: int | None = None) -> list[SweepRecord]:
        """Read sweep records, newest first.

        Corrupt lines are skipped with a warning.

        Args:
            limit: Maximum number of records to return. If None, returns all.

        Returns:
            List of SweepRecord, newest first. Empty if the file doesn't exist.
        """
        if not self.history_path.exists():
            return []

        records: list[SweepRecord] = []

        with self.history_path.open(encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue

                try:
                    records.append(SweepRecord.from_json_line(line))
                except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                    logger.warning("Skipping corrupt history line %d: %s", line_num, str(e))
                    continue

        records.reverse()

        if limit is not None:
            return records[:limit]

        return records
