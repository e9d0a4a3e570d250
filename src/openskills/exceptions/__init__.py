"""Shared exception hierarchy for OpenSkills."""

from __future__ import annotations

from .base import OpenSkillsError
from .config import ConfigError
from .skills import (
    InvalidSkillError,
    NoSkillsFoundError,
    OutputFormatError,
    PathEscapeError,
    SkillNotFoundError,
    UserCancelledError,
)
from .sources import CloneError, InvalidSourceFormatError

__all__ = [
    "CloneError",
    "ConfigError",
    "InvalidSkillError",
    "InvalidSourceFormatError",
    "NoSkillsFoundError",
    "OpenSkillsError",
    "OutputFormatError",
    "PathEscapeError",
    "SkillNotFoundError",
    "UserCancelledError",
]
