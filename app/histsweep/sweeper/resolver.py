"""Resolve file patterns against a target root.

Exact and glob patterns share one code path: the pattern kind only
decides how candidate paths are produced. Every candidate is then
checked for containment and classified before it becomes a Match.
"""

import logging
import stat
from collections.abc import Iterable, Iterator
from pathlib import Path

from histsweep.sweeper.models import FilePattern, Match, MatchType, PatternKind

logger = logging.getLogger(__name__)


def resolve_pattern(
    root: Path,
    pattern: FilePattern,
    *,
    resolved_root: Path | None = None,
) -> Iterator[Match]:
    """Yield the matches of one pattern inside one root.

    Glob expansion includes dotfiles. Patterns that match nothing
    yield nothing. Directories are never yielded.

    Args:
        root: Target root directory.
        pattern: Pattern to resolve.
        resolved_root: ``root.resolve()``, passed in to avoid recomputing it
            for every pattern.

    Yields:
        Match for each file the pattern resolves to.
    """
    if resolved_root is None:
        resolved_root = root.resolve()

    candidates: Iterable[Path]
    if pattern.kind == PatternKind.EXACT:
        candidates = (root / pattern.pattern,)
    else:
        candidates = sorted(root.glob(pattern.pattern))

    for candidate in candidates:
        match = _match_candidate(root, resolved_root, candidate, pattern)
        if match is not None:
            yield match


def _match_candidate(
    root: Path,
    resolved_root: Path,
    candidate: Path,
    pattern: FilePattern,
) -> Match | None:
    """Turn a candidate path into a Match, or None if it does not qualify.

    The containment check runs before the candidate is stat'ed so that a
    symlinked parent pointing elsewhere is never read through.

    Args:
        root: Target root directory.
        resolved_root: Target root with symlinks resolved.
        candidate: Path produced by the pattern.
        pattern: Pattern that produced the candidate.

    Returns:
        Match, or None when the candidate is missing, a directory,
        unreadable, or outside the root.
    """
    if not candidate.parent.resolve().is_relative_to(resolved_root):
        logger.warning("Skipping %s: parent directory resolves outside %s", candidate, root)
        return None

    try:
        st = candidate.lstat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as e:
        logger.warning("Cannot stat %s: %s", candidate, e)
        return None

    if stat.S_ISDIR(st.st_mode):
        logger.debug("Skipping directory %s (pattern %s)", candidate, pattern.pattern)
        return None

    return Match(
        path=str(candidate),
        root=str(root),
        pattern=pattern,
        path_type=_get_match_type(st.st_mode),
        size_bytes=st.st_size,
    )


def _get_match_type(mode: int) -> MatchType:
    """Classify an lstat mode."""
    if stat.S_ISLNK(mode):
        return MatchType.SYMLINK
    if stat.S_ISREG(mode):
        return MatchType.FILE
    return MatchType.OTHER
