"""Skill names published by Anthropic's Claude Code marketplace."""

from __future__ import annotations

# Installing one of these globally can be clobbered when marketplace plugins are re-enabled.
ANTHROPIC_MARKETPLACE_SKILLS: frozenset[str] = frozenset(
    {
        "algorithmic-art",
        "artifacts-builder",
        "brand-guidelines",
        "canvas-design",
        "docx",
        "frontend-design",
        "internal-comms",
        "mcp-builder",
        "pdf",
        "pptx",
        "skill-creator",
        "slack-gif-creator",
        "template-skill",
        "theme-factory",
        "webapp-testing",
        "xlsx",
    }
)
