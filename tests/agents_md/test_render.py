"""Tests for the rendered skills listing."""

from __future__ import annotations

from pathlib import Path

from openskills.agents_md import parse_listed_names, render_skills_fragment, wrap_section
from openskills.model import Skill


def _skill(name: str, description: str, location: str = "project") -> Skill:
    base = Path("/skills") / name
    return Skill(
        name=name,
        description=description,
        path=base / "SKILL.md",
        base_dir=base,
        source=Path("/skills"),
        location=location,
    )


def test_fragment_lists_each_skill() -> None:
    fragment = render_skills_fragment([_skill("pdf", "PDF tools"), _skill("xlsx", "Sheets", "global")])

    assert fragment.startswith("## Available Skills")
    assert "<usage>" in fragment
    assert "<name>pdf</name>" in fragment
    assert "<description>Sheets</description>" in fragment
    assert "<location>global</location>" in fragment
    assert fragment.index("<name>pdf</name>") < fragment.index("<name>xlsx</name>")


def test_fragment_escapes_markup() -> None:
    fragment = render_skills_fragment([_skill("a&b", "Use <tags> & more")])

    assert "<name>a&amp;b</name>" in fragment
    assert "<description>Use &lt;tags&gt; &amp; more</description>" in fragment


def test_rendered_names_round_trip_through_section() -> None:
    skills = [_skill("pdf", "x"), _skill("a&b", "y")]

    document = wrap_section(render_skills_fragment(skills))

    assert parse_listed_names(document) == {"pdf", "a&b"}


def test_empty_listing() -> None:
    fragment = render_skills_fragment([])

    assert "<available_skills>\n</available_skills>" in fragment
    assert "<name>" not in fragment
