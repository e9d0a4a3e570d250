"""Exceptions raised while installing, locating and syncing skills."""

from __future__ import annotations

from pathlib import Path

from openskills.exceptions.base import OpenSkillsError


class InvalidSkillError(OpenSkillsError, ValueError):
    """Raised when a skill directory lacks a readable SKILL.md with frontmatter."""

    def __init__(self, path: Path, reason: str = "missing YAML frontmatter") -> None:
        self.path = path
        super().__init__(f"Invalid SKILL.md at {path} ({reason})")


class NoSkillsFoundError(OpenSkillsError):
    """Raised when a source directory holds no installable skills."""


class PathEscapeError(OpenSkillsError):
    """Raised when an install destination resolves outside its skills root."""

    def __init__(self, destination: Path, root: Path) -> None:
        self.destination = destination
        self.root = root
        super().__init__(f"Installation path {destination} is outside {root}")


class SkillNotFoundError(OpenSkillsError, LookupError):
    """Raised when no installed skill matches a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Skill '{name}' not found")


class OutputFormatError(OpenSkillsError, ValueError):
    """Raised when the sync target is not a markdown file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Output file must be a markdown file (.md): {path}")


class UserCancelledError(OpenSkillsError):
    """Raised when the operator aborts an interactive prompt."""
