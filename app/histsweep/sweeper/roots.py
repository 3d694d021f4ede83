"""Target root discovery and privilege checks.

Builds the list of directories a sweep runs against: every user home
directory (from the account database or a /home listing) plus the
administrative root.
"""

import logging
import os
import pwd
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

ADMIN_ROOT = Path("/root")
HOME_BASE = Path("/home")


class HomeSource(str, Enum):
    """Where user home directories are discovered from.

    Attributes:
        PASSWD: Home directory field of every account in the account database.
        GLOB: Every directory directly under the home base (/home/*).
    """

    PASSWD = "passwd"
    GLOB = "glob"


class PreconditionError(Exception):
    """Raised when the sweeper cannot run at all (e.g. missing privileges)."""


def passwd_homes() -> list[Path]:
    """Collect home directories from the account database.

    Returns:
        Home directory of every account, in database order.
    """
    return [Path(entry.pw_dir) for entry in pwd.getpwall() if entry.pw_dir]


def glob_homes(home_base: Path = HOME_BASE) -> list[Path]:
    """Collect directories directly under the home base.

    Args:
        home_base: Parent directory of user homes.

    Returns:
        Sorted subdirectories, or an empty list if the base is missing.
    """
    try:
        return sorted(p for p in home_base.iterdir() if p.is_dir())
    except FileNotFoundError:
        return []
    except PermissionError:
        logger.warning("Permission denied listing home base: %s", home_base)
        return []


def normalize_roots(candidates: Iterable[Path], admin_root: Path = ADMIN_ROOT) -> tuple[Path, ...]:
    """De-duplicate and sort candidate roots and append the admin root.

    Relative paths and the filesystem root are dropped.

    Args:
        candidates: Candidate home directories.
        admin_root: Administrative root, appended when not already present.

    Returns:
        Tuple of target roots.
    """
    roots: set[Path] = set()
    for candidate in candidates:
        if not candidate.is_absolute():
            logger.debug("Ignoring relative home directory: %s", candidate)
            continue
        if candidate == Path(candidate.anchor):
            logger.debug("Ignoring filesystem root as home directory: %s", candidate)
            continue
        roots.add(candidate)

    ordered = sorted(roots)
    if admin_root not in roots:
        ordered.append(admin_root)
    return tuple(ordered)


def discover_roots(
    source: HomeSource | str = HomeSource.PASSWD,
    *,
    home_base: Path = HOME_BASE,
    admin_root: Path = ADMIN_ROOT,
) -> tuple[Path, ...]:
    """Discover the target roots of a system-wide sweep.

    Args:
        source: Home directory discovery policy.
        home_base: Parent of user homes, used by the glob policy.
        admin_root: Administrative root, always included.

    Returns:
        Tuple of target roots.
    """
    if HomeSource(source) == HomeSource.PASSWD:
        candidates = passwd_homes()
    else:
        candidates = glob_homes(home_base)

    roots = normalize_roots(candidates, admin_root)
    logger.debug("Discovered %d target root(s) via %s", len(roots), HomeSource(source).value)
    return roots


def require_privileges(admin_root: Path = ADMIN_ROOT) -> None:
    """Check that a system-wide sweep can run.

    Args:
        admin_root: Administrative root that must be readable.

    Raises:
        PreconditionError: If not running as root or the admin root is unreadable.
    """
    if os.geteuid() != 0:
        msg = "histsweep must be run as root (sudo) to sweep all accounts"
        raise PreconditionError(msg)
    if admin_root.exists() and not os.access(admin_root, os.R_OK | os.X_OK):
        msg = f"Cannot access administrative root: {admin_root}"
        raise PreconditionError(msg)
