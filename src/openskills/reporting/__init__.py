"""Terminal output helpers."""

from __future__ import annotations

from .stdout import Painter, SkillListReporter

__all__ = ["Painter", "SkillListReporter"]
