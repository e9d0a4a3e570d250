"""Configuration loading for OpenSkills."""

from __future__ import annotations

from openskills.config.loader import load_config
from openskills.config.model import OpenSkillsConfig

__all__ = ["OpenSkillsConfig", "load_config"]
