"""Resolve which registered document is the active target."""

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from loguru import logger


@dataclass(frozen=True)
class RegisteredFile:
    """A document registered under a short display name."""

    name: str
    path: Path


def _normalize(path: str | Path) -> str:
    # Purely lexical: no symlink resolution, no filesystem access.
    return os.path.normcase(os.path.normpath(os.path.abspath(os.path.expanduser(path))))


def resolve_active_file(
    registry: Sequence[RegisteredFile | tuple[str, str | Path]],
    active_session_file: str | Path | None,
    override: str | Path | None = None,
    *,
    default_path: str | Path | None = None,
) -> Path:
    """Pick the document the date tree operations act on.

    Order: an explicit override; the default path when nothing is registered; the
    registered file the session is visiting; otherwise the first registered file.

    Raises:
        ValueError: If the registry is empty and there is no default path.
    """
    if override is not None:
        return Path(override)

    entries = [
        entry if isinstance(entry, RegisteredFile) else RegisteredFile(entry[0], Path(entry[1]))
        for entry in registry
    ]
    if not entries:
        if default_path is None:
            msg = "No documents registered and no default document configured"
            raise ValueError(msg)
        return Path(default_path)

    if active_session_file is not None:
        active = _normalize(active_session_file)
        for entry in entries:
            if _normalize(entry.path) == active:
                return entry.path

    return entries[0].path


def parse_registry(text: str) -> list[RegisteredFile]:
    """Parse ``name=path`` entries separated by ``os.pathsep``.

    Entries without a name use the file stem. Blank entries are ignored.
    """
    registry: list[RegisteredFile] = []
    for raw in text.split(os.pathsep):
        entry = raw.strip()
        if not entry:
            continue
        name, sep, path = entry.partition("=")
        if not sep:
            name, path = Path(entry).stem, entry
        if not path.strip():
            logger.warning("Skipping registry entry without a path: {!r}", entry)
            continue
        registry.append(RegisteredFile(name.strip(), Path(path.strip()).expanduser()))
    return registry
