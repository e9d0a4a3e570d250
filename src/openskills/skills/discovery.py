"""Recursive discovery of skill directories inside an install source."""

from __future__ import annotations

import logging
from pathlib import Path

from openskills.constants.discovery import SKILL_MARKDOWN_FILENAME

logger = logging.getLogger(__name__)


def is_skill_dir(path: Path) -> bool:
    """Return True when *path* directly contains a SKILL.md file."""
    return (path / SKILL_MARKDOWN_FILENAME).is_file()


def discover_skill_dirs(root: Path) -> list[Path]:
    """Find skill directories below *root*, depth first in lexical order.

    A directory that contains SKILL.md is a boundary: it is returned and
    its subdirectories are not searched.  Symlinks are never followed.
    """
    found: list[Path] = []
    _walk(root, found)
    return found


def _walk(directory: Path, found: list[Path]) -> None:
    for child in _child_dirs(directory):
        if is_skill_dir(child):
            found.append(child)
        else:
            _walk(child, found)


def _child_dirs(directory: Path) -> list[Path]:
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return []
    return sorted(
        (entry for entry in entries if not entry.is_symlink() and entry.is_dir()),
        key=lambda entry: entry.name,
    )
