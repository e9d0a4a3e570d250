"""Tests for recursive skill discovery."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

from openskills.skills import discover_skill_dirs

SkillFactory: TypeAlias = Callable[..., Path]


def test_discovers_nested_skills_in_lexical_order(tmp_path: Path, make_skill: SkillFactory) -> None:
    make_skill(tmp_path / "skills", "zeta")
    make_skill(tmp_path / "skills", "alpha")
    make_skill(tmp_path / "other" / "deep", "beta")

    found = discover_skill_dirs(tmp_path)

    assert [path.relative_to(tmp_path).as_posix() for path in found] == [
        "other/deep/beta",
        "skills/alpha",
        "skills/zeta",
    ]


def test_does_not_descend_into_skill_boundary(tmp_path: Path, make_skill: SkillFactory) -> None:
    outer = make_skill(tmp_path, "outer")
    make_skill(outer / "examples", "inner")

    assert discover_skill_dirs(tmp_path) == [outer]


def test_root_itself_is_not_a_candidate(tmp_path: Path, make_skill: SkillFactory) -> None:
    (tmp_path / "SKILL.md").write_text("---\ndescription: root\n---\n", encoding="utf-8")

    assert discover_skill_dirs(tmp_path) == []


def test_ignores_files_and_empty_directories(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("hello", encoding="utf-8")
    (tmp_path / "empty").mkdir()

    assert discover_skill_dirs(tmp_path) == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinked_directories_are_not_followed(tmp_path: Path, make_skill: SkillFactory) -> None:
    outside = tmp_path / "outside"
    make_skill(outside, "linked")
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / "link").symlink_to(outside, target_is_directory=True)
    (repo / "loop").symlink_to(repo, target_is_directory=True)

    assert discover_skill_dirs(repo) == []
