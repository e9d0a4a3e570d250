"""Constants for the generated AGENTS.md skills section."""

from __future__ import annotations

import re
from re import Pattern

SECTION_OPEN: str = '<skills_system priority="1">'
SECTION_CLOSE: str = "</skills_system>"
SECTION_OPEN_PATTERN: Pattern[str] = re.compile(r"<skills_system(?:\s[^>]*)?>")

LEGACY_SECTION_OPEN: str = "<!-- SKILLS_TABLE_START -->"
LEGACY_SECTION_CLOSE: str = "<!-- SKILLS_TABLE_END -->"

LISTED_NAME_PATTERN: Pattern[str] = re.compile(r"<name>(.*?)</name>", re.DOTALL)

DEFAULT_OUTPUT_FILENAME: str = "AGENTS.md"
CURSOR_DIRNAME: str = ".cursor"
CURSOR_RULES_OUTPUT: tuple[str, ...] = (".cursor", "rules", "AGENTS.md")
MARKDOWN_SUFFIX: str = ".md"

SYNC_TEMP_PREFIX: str = ".tmp-"
SYNC_TEMP_SUFFIX: str = ".md"

FRAGMENT_HEADING: str = "## Available Skills"
FRAGMENT_USAGE: str = """<usage>
When users ask you to perform tasks, check if any of the available skills below can help complete the task more effectively. Skills provide specialized capabilities and domain knowledge.

How to use skills:
- Invoke: `openskills read <skill-name>` (run in your shell)
- The skill content will load with detailed instructions on how to complete the task
- Base directory provided in output for resolving bundled resources (references/, scripts/, assets/)

Usage notes:
- Only use skills listed in <available_skills> below
- Do not invoke a skill that is already loaded in your context
- Each skill invocation is stateless
</usage>"""
