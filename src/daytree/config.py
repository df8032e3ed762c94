"""Configuration constants for daytree."""

import os
from pathlib import Path

# Document used when no file registry is configured. First file found is used.
DEFAULT_FILES: list[Path] = [
    Path("~/org/journal.org").expanduser(),
    Path("~/journal.org").expanduser(),
    Path("~/.local/share/daytree/journal.org").expanduser(),
]

# Short name -> document path, as "name=path" entries joined with os.pathsep.
# Empty means single-file mode.
FILE_REGISTRY: str = os.environ.get("DAYTREE_FILES", "")

# First day of the week for week views: 0 = Monday ... 6 = Sunday.
WEEK_START: int = int(os.environ.get("DAYTREE_WEEK_START", "0")) % 7

# Keywords that may precede a date in a heading label.
TODO_KEYWORDS: tuple[str, ...] = ("TODO", "NEXT", "WAITING", "DONE", "CANCELLED")


def resolve_default_file() -> Path:
    """Return the default document path.

    ``$DAYTREE_FILE`` wins; otherwise the first existing file in DEFAULT_FILES,
    or the first candidate if none exists yet.
    """
    override = os.environ.get("DAYTREE_FILE")
    if override:
        return Path(override).expanduser()
    for candidate in DEFAULT_FILES:
        if candidate.is_file():
            return candidate
    return DEFAULT_FILES[0]
