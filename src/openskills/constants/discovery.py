"""Constants for skill directories and discovery."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"

UNIVERSAL_SKILLS_FOLDER: str = ".agent/skills"
CLAUDE_SKILLS_FOLDER: str = ".claude/skills"

CLONE_TEMP_PREFIX: str = ".openskills-"
CLONE_CHECKOUT_DIRNAME: str = "repo"
