"""Locate, replace and remove the generated skills section in markdown text.

Two marker styles are recognized.  The current one is the
``<skills_system ...>`` / ``</skills_system>`` pair; older releases wrote
``<!-- SKILLS_TABLE_START -->`` / ``<!-- SKILLS_TABLE_END -->``.  Both are
read, only the current style is written.  Text outside the matched region
is never modified.
"""

from __future__ import annotations

import html

from openskills.constants.agents_md import (
    LEGACY_SECTION_CLOSE,
    LEGACY_SECTION_OPEN,
    LISTED_NAME_PATTERN,
    SECTION_CLOSE,
    SECTION_OPEN,
    SECTION_OPEN_PATTERN,
)
from openskills.model import SectionMatch


def find_section(document: str) -> SectionMatch | None:
    """Return the generated section with the earliest opening marker.

    A legacy section wins a tie with a current one.
    """
    candidates = [
        match for match in (_find_legacy_section(document), _find_current_section(document)) if match is not None
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda match: (match.start, not match.legacy))


def has_section(document: str) -> bool:
    """Return True when *document* contains a generated section in either style."""
    return find_section(document) is not None


def wrap_section(fragment: str) -> str:
    """Surround *fragment* with the current section markers."""
    body = fragment.strip("\n")
    return f"{SECTION_OPEN}\n\n{body}\n\n{SECTION_CLOSE}"


def replace_section(document: str, fragment: str) -> str:
    """Replace the generated section with *fragment*, appending one if absent."""
    wrapped = wrap_section(fragment)
    match = find_section(document)
    if match is not None:
        return document[: match.start] + wrapped + document[match.end :]

    base = document.rstrip("\n")
    if not base:
        return f"{wrapped}\n"
    return f"{base}\n\n{wrapped}\n"


def remove_section(document: str) -> str:
    """Delete the generated section together with its blank-line padding."""
    match = find_section(document)
    if match is None:
        return document

    before = document[: match.start]
    after = document[match.end :]
    if before.endswith("\n\n"):
        before = before[:-1]
    if after.startswith("\n"):
        after = after[1:]
    return before + after


def parse_listed_names(document: str) -> set[str]:
    """Return the skill names listed inside the generated section."""
    match = find_section(document)
    if match is None:
        return set()
    names = (html.unescape(raw).strip() for raw in LISTED_NAME_PATTERN.findall(match.body(document)))
    return {name for name in names if name}


def _find_current_section(document: str) -> SectionMatch | None:
    opening = SECTION_OPEN_PATTERN.search(document)
    if opening is None:
        return None
    close = document.find(SECTION_CLOSE, opening.end())
    if close == -1:
        return None
    return SectionMatch(start=opening.start(), end=close + len(SECTION_CLOSE), legacy=False)


def _find_legacy_section(document: str) -> SectionMatch | None:
    start = document.find(LEGACY_SECTION_OPEN)
    if start == -1:
        return None
    close = document.find(LEGACY_SECTION_CLOSE, start + len(LEGACY_SECTION_OPEN))
    if close == -1:
        return None
    return SectionMatch(start=start, end=close + len(LEGACY_SECTION_CLOSE), legacy=True)
