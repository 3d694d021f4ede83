"""History file discovery and removal.

This module provides the pattern catalog, target root discovery,
pattern resolution, and the sweeper that removes matched files.
"""

from histsweep.sweeper.engine import HistorySweeper
from histsweep.sweeper.models import (
    FilePattern,
    Match,
    MatchType,
    PatternKind,
    RootSweep,
    SweepActionResult,
)
from histsweep.sweeper.operator import SweepOperator
from histsweep.sweeper.patterns import Profile, get_patterns
from histsweep.sweeper.resolver import resolve_pattern
from histsweep.sweeper.roots import (
    ADMIN_ROOT,
    HOME_BASE,
    HomeSource,
    PreconditionError,
    discover_roots,
    require_privileges,
)

__all__ = [
    "ADMIN_ROOT",
    "HOME_BASE",
    "FilePattern",
    "HistorySweeper",
    "HomeSource",
    "Match",
    "MatchType",
    "PatternKind",
    "PreconditionError",
    "Profile",
    "RootSweep",
    "SweepActionResult",
    "SweepOperator",
    "discover_roots",
    "get_patterns",
    "require_privileges",
    "resolve_pattern",
]
