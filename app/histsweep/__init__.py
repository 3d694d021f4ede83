"""histsweep - find and remove shell and editor history files.

Resolves a built-in catalog of history file patterns against every
local home directory and the administrative root, then reports or
deletes each match.
"""

__version__ = "0.3.0"
