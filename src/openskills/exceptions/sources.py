"""Exceptions raised while resolving and fetching install sources."""

from __future__ import annotations

from openskills.exceptions.base import OpenSkillsError


class InvalidSourceFormatError(OpenSkillsError, ValueError):
    """Raised when an install source is neither a path, a git URL nor ``owner/repo``."""


class CloneError(OpenSkillsError):
    """Raised when ``git clone`` fails."""

    def __init__(self, url: str, stderr: str = "") -> None:
        self.url = url
        self.stderr = stderr
        detail = f": {stderr}" if stderr else ""
        super().__init__(f"Failed to clone {url}{detail}")
