"""Render the skills listing placed inside the generated section."""

from __future__ import annotations

import html

from openskills.constants.agents_md import FRAGMENT_HEADING, FRAGMENT_USAGE
from openskills.model import Skill


def render_skills_fragment(skills: list[Skill]) -> str:
    """Return the markdown/XML listing for *skills*, without section markers."""
    entries = "\n\n".join(_render_skill(skill) for skill in skills)
    parts = [
        FRAGMENT_HEADING,
        FRAGMENT_USAGE,
        f"<available_skills>\n\n{entries}\n\n</available_skills>" if entries else "<available_skills>\n</available_skills>",
    ]
    return "\n\n".join(parts)


def _render_skill(skill: Skill) -> str:
    return "\n".join(
        (
            "<skill>",
            f"<name>{_escape(skill.name)}</name>",
            f"<description>{_escape(skill.description)}</description>",
            f"<location>{skill.location}</location>",
            "</skill>",
        )
    )


def _escape(value: str) -> str:
    return html.escape(value, quote=False)
