"""Generated skills section inside AGENTS.md-style markdown files."""

from __future__ import annotations

from .render import render_skills_fragment
from .section import (
    find_section,
    has_section,
    parse_listed_names,
    remove_section,
    replace_section,
    wrap_section,
)

__all__ = [
    "find_section",
    "has_section",
    "parse_listed_names",
    "remove_section",
    "render_skills_fragment",
    "replace_section",
    "wrap_section",
]
