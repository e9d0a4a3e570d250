"""Configuration-related exceptions."""

from __future__ import annotations

from openskills.exceptions.base import OpenSkillsError


class ConfigError(OpenSkillsError, ValueError):
    """Raised when ``openskills.yaml`` is invalid."""
