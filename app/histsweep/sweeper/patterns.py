"""Built-in catalog of history file patterns.

Patterns are grouped into two profiles. ``minimal`` covers shell and
editor history; ``extended`` adds interpreter, package-manager and
database client histories. Configuration dotfiles (.profile,
.bash_logout, .gemrc, ...) are never part of a profile.
"""

from enum import Enum

from histsweep.sweeper.models import FilePattern


class Profile(str, Enum):
    """Named pattern sets."""

    MINIMAL = "minimal"
    EXTENDED = "extended"


SHELL_HISTORY_PATTERNS: tuple[FilePattern, ...] = (
    FilePattern.exact(".bash_history", "bash history"),
    FilePattern.exact(".zsh_history", "zsh history"),
    FilePattern.glob(".zsh_history.*", "zsh history backups and lock files"),
    FilePattern.exact(".ksh_history", "ksh history"),
    FilePattern.exact(".sh_history", "POSIX sh history"),
    FilePattern.exact(".fish_history", "fish history (legacy location)"),
    FilePattern.exact(".local/share/fish/fish_history", "fish history"),
)

EDITOR_HISTORY_PATTERNS: tuple[FilePattern, ...] = (
    FilePattern.exact(".viminfo", "vim command and search history"),
    FilePattern.exact(".vim/viminfo", "vim history (alternate location)"),
    FilePattern.exact(".viminfo.gz", "compressed viminfo"),
    FilePattern.glob(".viminfo-*", "viminfo temporary copies"),
    FilePattern.exact(".nano_history", "nano search history"),
    FilePattern.exact(".lesshst", "less search history"),
    FilePattern.exact(".python_history", "python REPL history"),
)

# Overlapping globs are intentional; resolution de-duplicates per root.
SWAP_FILE_PATTERNS: tuple[FilePattern, ...] = (
    FilePattern.glob("*.swp", "vim swap file"),
    FilePattern.glob(".*.swp", "vim swap file (hidden)"),
    FilePattern.glob("*.swo", "vim swap file"),
    FilePattern.glob(".*.swo", "vim swap file (hidden)"),
    FilePattern.glob(".vimswap*", "vim swap directory leftovers"),
)

CLIENT_HISTORY_PATTERNS: tuple[FilePattern, ...] = (
    FilePattern.exact(".ipython/profile_default/history.sqlite", "IPython history"),
    FilePattern.exact(".pip/pip.log", "pip log"),
    FilePattern.exact(".wget-hsts", "wget HSTS host list"),
    FilePattern.exact(".mysql_history", "mysql client history"),
    FilePattern.exact(".pg_history", "postgres client history"),
    FilePattern.exact(".psql_history", "psql history"),
    FilePattern.exact(".mongo_history", "mongo shell history"),
    FilePattern.exact(".dbshell", "mongo shell history (legacy)"),
    FilePattern.exact(".sqlite_history", "sqlite3 history"),
    FilePattern.exact(".rediscli_history", "redis-cli history"),
    FilePattern.exact(".node_repl_history", "node REPL history"),
    FilePattern.exact(".irb_history", "irb history"),
    FilePattern.exact(".ruby_history", "ruby REPL history"),
)

PROFILE_PATTERNS: dict[Profile, tuple[FilePattern, ...]] = {
    Profile.MINIMAL: (
        *SHELL_HISTORY_PATTERNS,
        *EDITOR_HISTORY_PATTERNS,
        *SWAP_FILE_PATTERNS,
    ),
    Profile.EXTENDED: (
        *SHELL_HISTORY_PATTERNS,
        *EDITOR_HISTORY_PATTERNS,
        *SWAP_FILE_PATTERNS,
        *CLIENT_HISTORY_PATTERNS,
    ),
}


def get_patterns(profile: Profile | str = Profile.MINIMAL) -> tuple[FilePattern, ...]:
    """Return the patterns of a profile.

    Args:
        profile: Profile or its string value.

    Returns:
        Patterns in resolution order.

    Raises:
        ValueError: If the profile name is unknown.
    """
    return PROFILE_PATTERNS[Profile(profile)]
