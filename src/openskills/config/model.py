"""Config data model for OpenSkills."""

from __future__ import annotations

from dataclasses import dataclass

from openskills.constants.config import LANGUAGE_AUTO


@dataclass(frozen=True)
class OpenSkillsConfig:
    """Resolved settings from ``openskills.yaml``."""

    language: str = LANGUAGE_AUTO
    universal: bool = False
    sync_output: str | None = None
    color: bool = True
