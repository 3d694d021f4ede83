"""Sweeper domain models.

This module defines the core data structures of a sweep: the static
file patterns, the matches they resolve to inside a target root, and
the per-match outcome of removing (or simulating removal of) a match.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath


class PatternKind(str, Enum):
    """How a file pattern is resolved against a target root.

    Attributes:
        EXACT: A fixed relative path; matches at most one entry.
        GLOB: A glob expression; matches zero or more entries, dotfiles included.
    """

    EXACT = "exact"
    GLOB = "glob"


class MatchType(str, Enum):
    """Type of a matched filesystem entry.

    Directories are never matches, so they have no member here.

    Attributes:
        FILE: Regular file.
        SYMLINK: Symbolic link (live or dangling); removal unlinks the link itself.
        OTHER: FIFO, socket, or device node.
    """

    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class FilePattern:
    """A built-in rule describing history files to remove.

    Attributes:
        pattern: Path relative to a target root (glob syntax for GLOB patterns).
        kind: Whether the pattern is an exact path or a glob.
        description: Human-readable description of what the file is.
    """

    pattern: str
    kind: PatternKind
    description: str | None = None

    def __post_init__(self) -> None:
        """Reject patterns that could escape the target root."""
        if not self.pattern:
            msg = "Pattern cannot be empty"
            raise ValueError(msg)
        if self.pattern.startswith("/"):
            msg = f"Pattern must be relative, got {self.pattern!r}"
            raise ValueError(msg)
        if ".." in PurePosixPath(self.pattern).parts:
            msg = f"Pattern must not contain '..', got {self.pattern!r}"
            raise ValueError(msg)

    @classmethod
    def exact(cls, pattern: str, description: str | None = None) -> "FilePattern":
        """Create an exact-path pattern."""
        return cls(pattern=pattern, kind=PatternKind.EXACT, description=description)

    @classmethod
    def glob(cls, pattern: str, description: str | None = None) -> "FilePattern":
        """Create a glob pattern."""
        return cls(pattern=pattern, kind=PatternKind.GLOB, description=description)


@dataclass(frozen=True, slots=True)
class Match:
    """A concrete file produced by resolving a pattern against a target root.

    Attributes:
        path: Absolute path of the matched entry.
        root: Target root the pattern was resolved against.
        pattern: The pattern that produced this match.
        path_type: Type of the matched entry.
        size_bytes: Size from lstat, None if unavailable.
    """

    path: str
    root: str
    pattern: FilePattern
    path_type: MatchType
    size_bytes: int | None = None

    def __post_init__(self) -> None:
        """Validate match data after initialization."""
        if not self.path:
            msg = "Match path cannot be empty"
            raise ValueError(msg)
        if not self.root:
            msg = "Match root cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class SweepActionResult:
    """Result of removing a single match.

    Attributes:
        match: The match that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
        vanished: The file was already gone when removal ran.
    """

    match: Match
    success: bool
    error: str | None = None
    dry_run: bool = False
    vanished: bool = False

    @property
    def path(self) -> str:
        """Path of the matched file."""
        return self.match.path

    @property
    def removed(self) -> bool:
        """Whether this result deleted a file."""
        return self.success and not self.dry_run and not self.vanished


@dataclass(frozen=True, slots=True)
class RootSweep:
    """Outcome of sweeping one target root.

    Attributes:
        root: The target root that was processed.
        results: Results in match order.
    """

    root: str
    results: tuple[SweepActionResult, ...] = ()

    @property
    def removed(self) -> list[str]:
        """Paths deleted from this root."""
        return [r.path for r in self.results if r.removed]

    @property
    def failed(self) -> list[str]:
        """Paths whose deletion failed."""
        return [r.path for r in self.results if not r.success]
