"""Branding constants for help text and terminal output."""

from __future__ import annotations

ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ openskills",
    "     // skills for every coding agent",
)
CLI_DESCRIPTION: str = "\n".join(
    (*ASCII_LOGO_LINES, "", "Install, list, read, remove and sync SKILL.md bundles")
)
