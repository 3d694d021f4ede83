"""Sweep history record model.

This module defines the data structure written to the history file
after every live sweep, giving administrators an audit trail of what
was removed and what could not be.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class SweepRecord:
    """Record of a single live sweep.

    Attributes:
        id: Unique identifier (12-character hex string from UUID).
        timestamp: When the sweep finished (ISO 8601 format with timezone).
        profile: Pattern profile used for the sweep.
        roots: Target roots that were processed.
        removed: Paths that were deleted.
        failed: Paths whose deletion failed.
        metadata: Additional context (command, etc.).
    """

    id: str
    timestamp: str
    profile: str
    roots: tuple[str, ...]
    removed: tuple[str, ...] = ()
    failed: tuple[str, ...] = ()
    metadata: dict[str, Any] = field(default_factory=lambda: {})

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.id:
            msg = "Sweep record ID cannot be empty"
            raise ValueError(msg)
        if not self.timestamp:
            msg = "Timestamp cannot be empty"
            raise ValueError(msg)
        if not self.removed and not self.failed:
            msg = "Sweep record must reference at least one path"
            raise ValueError(msg)

    @property
    def success(self) -> bool:
        """Whether every deletion in the sweep succeeded."""
        return not self.failed

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "profile": self.profile,
            "roots": list(self.roots),
            "removed": list(self.removed),
            "failed": list(self.failed),
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SweepRecord:
        """Deserialize from dictionary.

        Args:
            data: Dictionary containing record data.

        Returns:
            SweepRecord instance.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If the data is invalid.
        """
        return cls(
            id=data["id"],
            timestamp=data["timestamp"],
            profile=data["profile"],
            roots=tuple(data["roots"]),
            removed=tuple(data.get("removed", ())),
            failed=tuple(data.get("failed", ())),
            metadata=data.get("metadata", {}),
        )

    def to_json_line(self) -> str:
        """Serialize to a single JSON line (no trailing newline)."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json_line(cls, line: str) -> SweepRecord:
        """Deserialize from JSON line.

        Raises:
            json.JSONDecodeError: If line is not valid JSON.
            KeyError: If required fields are missing.
            ValueError: If data is invalid.
        """
        data = json.loads(line.strip())
        return cls.from_dict(data)


def create_sweep_record(
    profile: str,
    roots: list[str],
    removed: list[str],
    failed: list[str],
    metadata: dict[str, Any] | None = None,
) -> SweepRecord:
    """Factory function to create a new SweepRecord.

    Automatically generates a unique ID and current timestamp.

    Raises:
        ValueError: If both removed and failed are empty.
    """
    if not removed and not failed:
        msg = "Cannot create sweep record with no paths"
        raise ValueError(msg)

    return SweepRecord(
        id=uuid.uuid4().hex[:12],
        timestamp=datetime.now(UTC).isoformat(),
        profile=profile,
        roots=tuple(roots),
        removed=tuple(removed),
        failed=tuple(failed),
        metadata=metadata or {},
    )
