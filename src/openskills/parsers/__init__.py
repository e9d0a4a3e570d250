"""Parsers for SKILL.md files."""

from __future__ import annotations

from .frontmatter import extract_field, has_valid_frontmatter, read_skill_file

__all__ = ["extract_field", "has_valid_frontmatter", "read_skill_file"]
