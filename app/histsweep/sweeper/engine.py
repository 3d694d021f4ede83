"""History sweeper.

Walks the target roots one at a time, resolves every pattern inside
each root, and hands each match to the operator. Execution is strictly
sequential; results are yielded per root so callers can stream output.
"""

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from histsweep.sweeper.models import FilePattern, Match, RootSweep
from histsweep.sweeper.operator import SweepOperator
from histsweep.sweeper.resolver import resolve_pattern

logger = logging.getLogger(__name__)


class HistorySweeper:
    """Finds and removes history files inside a set of target roots.

    Args:
        roots: Target root directories, processed in order.
        patterns: Patterns resolved inside every root.
        operator: Operator performing (or simulating) deletions.
            Defaults to a dry-run operator.
    """

    def __init__(
        self,
        roots: Sequence[Path],
        patterns: Sequence[FilePattern],
        operator: SweepOperator | None = None,
    ) -> None:
        self._roots = tuple(roots)
        self._patterns = tuple(patterns)
        self._operator = operator if operator is not None else SweepOperator(dry_run=True)

    @property
    def roots(self) -> tuple[Path, ...]:
        """Target roots in processing order."""
        return self._roots

    @property
    def dry_run(self) -> bool:
        """Whether the sweep only reports."""
        return self._operator.dry_run

    def existing_roots(self) -> Iterator[Path]:
        """Yield the roots that exist and are directories.

        Missing roots are skipped silently. Roots that cannot be
        inspected are skipped with a warning.
        """
        for root in self._roots:
            try:
                is_dir = root.is_dir()
            except OSError as e:
                logger.warning("Cannot access root %s: %s", root, e)
                continue
            if is_dir:
                yield root
            else:
                logger.debug("Skipping missing root: %s", root)

    def matches(self, root: Path) -> list[Match]:
        """Resolve every pattern inside one root.

        Overlapping patterns produce each path once, in first-seen order.

        Args:
            root: Target root directory.

        Returns:
            List of matches inside the root.
        """
        resolved_root = root.resolve()
        seen: set[str] = set()
        found: list[Match] = []

        for pattern in self._patterns:
            for match in resolve_pattern(root, pattern, resolved_root=resolved_root):
                if match.path in seen:
                    continue
                seen.add(match.path)
                found.append(match)

        return found

    def scan(self) -> Iterator[Match]:
        """Yield every match in every existing root without removing anything."""
        for root in self.existing_roots():
            yield from self.matches(root)

    def sweep(self) -> Iterator[RootSweep]:
        """Sweep all existing roots.

        Each root is fully resolved and processed before the next one
        starts. A failure on one file never stops the sweep.

        Yields:
            RootSweep for each processed root.
        """
        for root in self.existing_roots():
            results = tuple(self._operator.remove(match) for match in self.matches(root))
            logger.debug("Processed %s: %d match(es)", root, len(results))
            yield RootSweep(root=str(root), results=results)
