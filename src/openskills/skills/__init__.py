"""Skill discovery, installation and lookup."""

from __future__ import annotations

from .discovery import discover_skill_dirs, is_skill_dir
from .installer import (
    always_overwrite,
    collect_candidates,
    install_skill,
    is_marketplace_skill,
    safe_destination,
    validate_skill_dir,
)
from .registry import find_skill, list_all_skills, skill_roots, sort_for_display, unique_skills

__all__ = [
    "always_overwrite",
    "collect_candidates",
    "discover_skill_dirs",
    "find_skill",
    "install_skill",
    "is_marketplace_skill",
    "is_skill_dir",
    "list_all_skills",
    "safe_destination",
    "skill_roots",
    "sort_for_display",
    "unique_skills",
    "validate_skill_dir",
]
