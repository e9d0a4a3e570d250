"""Root exception type for OpenSkills."""

from __future__ import annotations


class OpenSkillsError(Exception):
    """Base class for all errors raised by OpenSkills."""
