"""Sweep deletion operator.

Removes matched history files one at a time with dry-run support.
Per-file failures are returned as results, never raised.
"""

import logging
import os
from pathlib import Path

from histsweep.sweeper.models import Match, SweepActionResult

logger = logging.getLogger(__name__)


class OutsideRootError(OSError):
    """Raised when a match's parent directory no longer lies inside its root."""


class SweepOperator:
    """Handles deletion of matched history files.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the SweepOperator.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether deletions are simulated."""
        return self._dry_run

    def remove(self, match: Match) -> SweepActionResult:
        """Remove a single matched file.

        Symlinks are unlinked themselves; their targets are untouched.
        A file that is already gone counts as success. The parent
        directory is re-checked against the root at deletion time, so a
        directory replaced by a symlink after resolution is refused.

        Args:
            match: The match to remove.

        Returns:
            SweepActionResult describing the outcome.
        """
        if self._dry_run:
            logger.info("Dry-run: would delete %s", match.path)
            return SweepActionResult(match=match, success=True, dry_run=True)

        try:
            _unlink_within_root(Path(match.path), Path(match.root))
        except FileNotFoundError:
            logger.debug("Already gone: %s", match.path)
            return SweepActionResult(match=match, success=True, vanished=True)
        except OutsideRootError as e:
            logger.warning("Refusing to delete %s: %s", match.path, e)
            return SweepActionResult(match=match, success=False, error=str(e))
        except OSError as e:
            logger.debug("Failed to delete %s: %s", match.path, e)
            return SweepActionResult(match=match, success=False, error=str(e))

        logger.debug("Deleted %s", match.path)
        return SweepActionResult(match=match, success=True)


def _unlink_within_root(path: Path, root: Path) -> None:
    """Unlink path through directory descriptors anchored at root.

    Every directory below the resolved root is opened with O_NOFOLLOW,
    so a component swapped for a symlink fails with ELOOP or ENOTDIR
    instead of redirecting the unlink.

    Raises:
        OutsideRootError: If the parent directory resolves outside root.
        OSError: If a component cannot be opened or the unlink fails.
    """
    resolved_root = root.resolve()
    parent = path.parent.resolve()
    if not parent.is_relative_to(resolved_root):
        msg = f"parent directory resolves outside {root}"
        raise OutsideRootError(msg)

    flags = os.O_RDONLY | os.O_DIRECTORY
    fd = os.open(resolved_root, flags)
    try:
        for part in parent.relative_to(resolved_root).parts:
            child = os.open(part, flags | os.O_NOFOLLOW, dir_fd=fd)
            os.close(fd)
            fd = child
        os.unlink(path.name, dir_fd=fd)
    finally:
        os.close(fd)
