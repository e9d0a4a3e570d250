"""Shared pytest fixtures for skill trees and scripted prompts."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeAlias

import pytest

from openskills.cli.prompts import Choice
from openskills.exceptions import UserCancelledError

SkillFactory: TypeAlias = Callable[..., Path]


def skill_markdown(name: str, description: str = "Test skill") -> str:
    """Return a minimal SKILL.md body."""
    return f"---\nname: {name}\ndescription: {description}\n---\n\n# {name}\n\nInstructions.\n"


@pytest.fixture
def make_skill() -> SkillFactory:
    """Create a skill directory ``parent/name`` with a SKILL.md."""

    def _make(parent: Path, name: str, description: str = "Test skill", *, content: str | None = None) -> Path:
        skill_dir = parent / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        text = content if content is not None else skill_markdown(name, description)
        (skill_dir / "SKILL.md").write_text(text, encoding="utf-8")
        return skill_dir

    return _make


class ScriptedPrompter:
    """Prompter that replays canned answers and records what was asked."""

    def __init__(
        self,
        *,
        confirms: Sequence[bool] = (),
        selections: Sequence[Sequence[str] | None] = (),
        cancel: bool = False,
    ) -> None:
        self._confirms = list(confirms)
        self._selections = list(selections)
        self._cancel = cancel
        self.confirm_messages: list[str] = []
        self.checkbox_calls: list[list[Choice]] = []

    def confirm(self, message: str, *, default: bool = False) -> bool:
        self.confirm_messages.append(message)
        if self._cancel:
            raise UserCancelledError("scripted cancel")
        return self._confirms.pop(0) if self._confirms else default

    def checkbox(self, message: str, choices: Sequence[Choice], *, instructions: str = "") -> list[str]:
        self.checkbox_calls.append(list(choices))
        if self._cancel:
            raise UserCancelledError("scripted cancel")
        selection = self._selections.pop(0) if self._selections else None
        if selection is None:
            return [choice.value for choice in choices if choice.checked]
        return list(selection)


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """Return ``(project, home)`` directories with cwd and HOME pointed at them."""
    project = tmp_path / "project"
    home = tmp_path / "home"
    project.mkdir()
    home.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("LANG", "en_US.UTF-8")
    return project, home
