"""Look up installed skills across the project and global skill roots."""

from __future__ import annotations

import logging
from pathlib import Path

from openskills.constants.discovery import (
    CLAUDE_SKILLS_FOLDER,
    SKILL_MARKDOWN_FILENAME,
    UNIVERSAL_SKILLS_FOLDER,
)
from openskills.exceptions import InvalidSkillError, SkillNotFoundError
from openskills.model import Skill, SkillRoot
from openskills.parsers import extract_field, has_valid_frontmatter, read_skill_file

logger = logging.getLogger(__name__)


def skill_roots(cwd: Path, home: Path) -> tuple[SkillRoot, ...]:
    """Return the four skill roots in lookup precedence order."""
    return (
        SkillRoot(
            path=cwd / UNIVERSAL_SKILLS_FOLDER,
            location="project",
            universal=True,
            label=f"{UNIVERSAL_SKILLS_FOLDER}/ (project universal)",
        ),
        SkillRoot(
            path=home / UNIVERSAL_SKILLS_FOLDER,
            location="global",
            universal=True,
            label=f"~/{UNIVERSAL_SKILLS_FOLDER}/ (global universal)",
        ),
        SkillRoot(
            path=cwd / CLAUDE_SKILLS_FOLDER,
            location="project",
            universal=False,
            label=f"{CLAUDE_SKILLS_FOLDER}/ (project)",
        ),
        SkillRoot(
            path=home / CLAUDE_SKILLS_FOLDER,
            location="global",
            universal=False,
            label=f"~/{CLAUDE_SKILLS_FOLDER}/ (global)",
        ),
    )


def list_all_skills(cwd: Path, home: Path) -> list[Skill]:
    """Return every installed skill, root by root in precedence order.

    The same name may appear under several roots.  Skills whose SKILL.md
    lacks valid frontmatter are left out.
    """
    skills: list[Skill] = []
    for root in skill_roots(cwd, home):
        skills.extend(_skills_in_root(root))
    return skills


def unique_skills(skills: list[Skill]) -> list[Skill]:
    """Keep the first skill per name, preserving order."""
    seen: set[str] = set()
    unique: list[Skill] = []
    for skill in skills:
        if skill.name in seen:
            continue
        seen.add(skill.name)
        unique.append(skill)
    return unique


def find_skill(name: str, cwd: Path, home: Path) -> Skill:
    """Return the highest-precedence installed skill called *name*."""
    for skill in list_all_skills(cwd, home):
        if skill.name == name:
            return skill
    raise SkillNotFoundError(name)


def sort_for_display(skills: list[Skill]) -> list[Skill]:
    """Order project skills before global ones, then alphabetically."""
    return sorted(skills, key=lambda skill: (skill.location != "project", skill.name))


def _skills_in_root(root: SkillRoot) -> list[Skill]:
    if not root.path.is_dir():
        return []

    try:
        entries = sorted(root.path.iterdir(), key=lambda item: item.name)
    except OSError as exc:
        logger.debug("Skipping unreadable skills root %s: %s", root.path, exc)
        return []

    skills: list[Skill] = []
    for entry in entries:
        if not entry.is_dir():
            continue
        skill_file = entry / SKILL_MARKDOWN_FILENAME
        if not skill_file.is_file():
            continue
        try:
            text = read_skill_file(skill_file)
        except InvalidSkillError as exc:
            logger.debug("Ignoring unreadable skill %s: %s", entry, exc)
            continue
        if not has_valid_frontmatter(text):
            logger.debug("Ignoring %s: SKILL.md has no frontmatter", entry)
            continue
        skills.append(
            Skill(
                name=entry.name,
                description=extract_field(text, "description"),
                path=skill_file,
                base_dir=entry,
                source=root.path,
                location=root.location,
            )
        )
    return skills
