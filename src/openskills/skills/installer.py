"""Copy skill directories into a skills root."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from openskills.constants.discovery import SKILL_MARKDOWN_FILENAME
from openskills.constants.marketplace import ANTHROPIC_MARKETPLACE_SKILLS
from openskills.exceptions import InvalidSkillError, NoSkillsFoundError, PathEscapeError
from openskills.io import copy_skill_tree, directory_size
from openskills.model import InstallOutcome, SkillCandidate
from openskills.parsers import extract_field, has_valid_frontmatter, read_skill_file
from openskills.skills.discovery import discover_skill_dirs

logger = logging.getLogger(__name__)

OverwriteDecision: TypeAlias = Callable[[str], bool]


def always_overwrite(_name: str) -> bool:
    """Conflict policy used with ``--yes``."""
    return True


def safe_destination(destination_root: Path, name: str) -> Path:
    """Return ``destination_root / name`` after checking it stays inside the root."""
    resolved_root = destination_root.resolve()
    destination = (destination_root / name).resolve()
    if not str(destination).startswith(str(resolved_root) + os.sep):
        raise PathEscapeError(destination, resolved_root)
    return destination_root / name


def validate_skill_dir(skill_dir: Path) -> str:
    """Return the SKILL.md text of *skill_dir*, raising when it is not installable."""
    skill_file = skill_dir / SKILL_MARKDOWN_FILENAME
    if not skill_file.is_file():
        raise InvalidSkillError(skill_file, reason="file not found")
    text = read_skill_file(skill_file)
    if not has_valid_frontmatter(text):
        raise InvalidSkillError(skill_file)
    return text


def install_skill(
    skill_dir: Path,
    destination_root: Path,
    *,
    confirm_overwrite: OverwriteDecision,
    name: str | None = None,
) -> InstallOutcome:
    """Install one skill directory under *destination_root*.

    ``confirm_overwrite`` is consulted only when the destination exists; a
    negative answer yields a ``skipped`` outcome.  So does a destination that
    is, contains or lies inside *skill_dir*; nothing is copied or deleted then.
    """
    validate_skill_dir(skill_dir)
    skill_name = name or skill_dir.name
    destination = safe_destination(destination_root, skill_name)

    if _overlaps(skill_dir, destination):
        logger.warning("Skipping %s: source and destination overlap (%s)", skill_name, destination)
        return InstallOutcome(name=skill_name, destination=destination, status="skipped")

    overwritten = destination.exists()
    if overwritten and not confirm_overwrite(skill_name):
        logger.debug("Keeping existing %s", destination)
        return InstallOutcome(name=skill_name, destination=destination, status="skipped")

    logger.debug("Copying %s -> %s", skill_dir, destination)
    copy_skill_tree(skill_dir, destination)
    return InstallOutcome(
        name=skill_name,
        destination=destination,
        status="installed",
        overwritten=overwritten,
    )


def _overlaps(source: Path, destination: Path) -> bool:
    """Return True when copying *source* to *destination* would touch *source* itself."""
    resolved_source = source.resolve()
    resolved_destination = destination.resolve()
    return resolved_destination.is_relative_to(resolved_source) or resolved_source.is_relative_to(
        resolved_destination
    )


def collect_candidates(source_root: Path) -> list[SkillCandidate]:
    """Discover installable skills below *source_root*.

    Raises ``NoSkillsFoundError`` when no SKILL.md exists at all; directories
    whose SKILL.md lacks frontmatter are dropped, so the result may be empty.
    """
    skill_dirs = discover_skill_dirs(source_root)
    if not skill_dirs:
        raise NoSkillsFoundError(f"No SKILL.md files found in {source_root}")

    candidates: list[SkillCandidate] = []
    for skill_dir in skill_dirs:
        try:
            text = validate_skill_dir(skill_dir)
        except InvalidSkillError as exc:
            logger.warning("Skipping %s: %s", skill_dir, exc)
            continue
        candidates.append(
            SkillCandidate(
                name=skill_dir.name,
                description=extract_field(text, "description"),
                skill_dir=skill_dir,
                size_bytes=directory_size(skill_dir),
            )
        )
    return candidates


def is_marketplace_skill(name: str) -> bool:
    """Return True when *name* is reserved by Anthropic's marketplace."""
    return name in ANTHROPIC_MARKETPLACE_SKILLS
