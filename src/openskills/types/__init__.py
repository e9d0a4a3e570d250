"""Shared type aliases for OpenSkills."""

from .common import InstallStatus, Language, SkillLocation

__all__ = [
    "InstallStatus",
    "Language",
    "SkillLocation",
]
