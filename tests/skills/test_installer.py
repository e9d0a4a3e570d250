"""Tests for copying skills into a skills root."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

from openskills.exceptions import InvalidSkillError, NoSkillsFoundError, PathEscapeError
from openskills.skills import (
    always_overwrite,
    collect_candidates,
    install_skill,
    is_marketplace_skill,
    safe_destination,
)

SkillFactory: TypeAlias = Callable[..., Path]


def _never(_name: str) -> bool:
    return False


def test_install_into_empty_root_copies_skill(tmp_path: Path, make_skill: SkillFactory) -> None:
    source = make_skill(tmp_path / "src", "pdf", "PDF tools")
    (source / "scripts").mkdir()
    (source / "scripts" / "run.py").write_text("print('hi')\n", encoding="utf-8")
    root = tmp_path / "dest"

    outcome = install_skill(source, root, confirm_overwrite=always_overwrite)

    assert outcome.installed
    assert outcome.overwritten is False
    assert [child.name for child in root.iterdir()] == ["pdf"]
    assert (root / "pdf" / "SKILL.md").read_bytes() == (source / "SKILL.md").read_bytes()
    assert (root / "pdf" / "scripts" / "run.py").exists()


def test_install_requires_frontmatter(tmp_path: Path, make_skill: SkillFactory) -> None:
    source = make_skill(tmp_path, "bad", content="# no frontmatter\n")

    with pytest.raises(InvalidSkillError):
        install_skill(source, tmp_path / "dest", confirm_overwrite=always_overwrite)


def test_install_requires_skill_file(tmp_path: Path) -> None:
    source = tmp_path / "empty"
    source.mkdir()

    with pytest.raises(InvalidSkillError):
        install_skill(source, tmp_path / "dest", confirm_overwrite=always_overwrite)


def test_declined_overwrite_is_skipped(tmp_path: Path, make_skill: SkillFactory) -> None:
    root = tmp_path / "dest"
    existing = make_skill(root, "pdf", "old")
    source = make_skill(tmp_path / "src", "pdf", "new")

    outcome = install_skill(source, root, confirm_overwrite=_never)

    assert outcome.status == "skipped"
    assert "old" in (existing / "SKILL.md").read_text(encoding="utf-8")


def test_confirmed_overwrite_replaces_contents(tmp_path: Path, make_skill: SkillFactory) -> None:
    root = tmp_path / "dest"
    existing = make_skill(root, "pdf", "old")
    (existing / "stale.txt").write_text("stale", encoding="utf-8")
    source = make_skill(tmp_path / "src", "pdf", "new")
    asked: list[str] = []

    def _yes(name: str) -> bool:
        asked.append(name)
        return True

    outcome = install_skill(source, root, confirm_overwrite=_yes)

    assert asked == ["pdf"]
    assert outcome.installed and outcome.overwritten
    assert "new" in (root / "pdf" / "SKILL.md").read_text(encoding="utf-8")
    assert not (root / "pdf" / "stale.txt").exists()


def test_copy_dereferences_symlinks(tmp_path: Path, make_skill: SkillFactory) -> None:
    target = tmp_path / "shared.txt"
    target.write_text("shared", encoding="utf-8")
    source = make_skill(tmp_path / "src", "pdf")
    (source / "link.txt").symlink_to(target)

    install_skill(source, tmp_path / "dest", confirm_overwrite=always_overwrite)

    copied = tmp_path / "dest" / "pdf" / "link.txt"
    assert not copied.is_symlink()
    assert copied.read_text(encoding="utf-8") == "shared"


@pytest.mark.parametrize("name", ["../../etc", "..", "../sibling", "/etc"])
def test_safe_destination_rejects_escapes(tmp_path: Path, name: str) -> None:
    with pytest.raises(PathEscapeError):
        safe_destination(tmp_path / "dest", name)


def test_safe_destination_rejects_root_itself(tmp_path: Path) -> None:
    with pytest.raises(PathEscapeError):
        safe_destination(tmp_path / "dest", ".")


def test_safe_destination_accepts_child(tmp_path: Path) -> None:
    assert safe_destination(tmp_path / "dest", "pdf") == tmp_path / "dest" / "pdf"


def test_install_with_escaping_name_fails(tmp_path: Path, make_skill: SkillFactory) -> None:
    source = make_skill(tmp_path / "src", "pdf")

    with pytest.raises(PathEscapeError):
        install_skill(source, tmp_path / "dest", confirm_overwrite=always_overwrite, name="../../etc")

    assert not (tmp_path / "etc").exists()


def test_collect_candidates_skips_invalid(tmp_path: Path, make_skill: SkillFactory) -> None:
    make_skill(tmp_path / "skills", "good", "Good skill")
    make_skill(tmp_path / "skills", "broken", content="no frontmatter\n")

    candidates = collect_candidates(tmp_path)

    assert [candidate.name for candidate in candidates] == ["good"]
    assert candidates[0].description == "Good skill"
    assert candidates[0].size_bytes > 0


def test_collect_candidates_without_any_skill(tmp_path: Path) -> None:
    with pytest.raises(NoSkillsFoundError):
        collect_candidates(tmp_path)


def test_marketplace_names() -> None:
    assert is_marketplace_skill("pdf")
    assert not is_marketplace_skill("my-own-skill")


def test_install_onto_itself_is_skipped(tmp_path: Path, make_skill: SkillFactory) -> None:
    root = tmp_path / "dest"
    skill_dir = make_skill(root, "pdf", "in place")
    asked: list[str] = []

    def _yes(name: str) -> bool:
        asked.append(name)
        return True

    outcome = install_skill(skill_dir, root, confirm_overwrite=_yes)

    assert outcome.status == "skipped"
    assert asked == []
    assert "in place" in (skill_dir / "SKILL.md").read_text(encoding="utf-8")


def test_install_into_own_subdirectory_is_skipped(tmp_path: Path, make_skill: SkillFactory) -> None:
    skill_dir = make_skill(tmp_path, "pdf")

    outcome = install_skill(skill_dir, skill_dir / "nested", confirm_overwrite=always_overwrite)

    assert outcome.status == "skipped"
    assert not (skill_dir / "nested").exists()
    assert (skill_dir / "SKILL.md").exists()
