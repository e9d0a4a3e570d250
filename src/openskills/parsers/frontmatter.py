"""Frontmatter checks and scalar field extraction for SKILL.md files.

Single-line ``key: value`` scalars are read line by line; a block scalar
value falls back to PyYAML.  Nested mappings are not returned.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from openskills.constants.parsing import (
    BLOCK_SCALAR_PATTERN,
    BYTE_ORDER_MARK,
    FIELD_LINE_PATTERN,
    FRONTMATTER_DELIMITER,
    QUOTE_CHARS,
)
from openskills.exceptions import InvalidSkillError

logger = logging.getLogger(__name__)


def has_valid_frontmatter(text: str) -> bool:
    """Return True when *text* opens with a delimited frontmatter block."""
    return _frontmatter_lines(text) is not None


def extract_field(text: str, field_name: str) -> str:
    """Return the value of ``field_name`` from the frontmatter, or ``""``.

    The first matching line wins.  Surrounding whitespace and one pair of
    matching quote characters are stripped.  Block scalars (``>`` or ``|``)
    are read by parsing the whole block as YAML.
    """
    lines = _frontmatter_lines(text)
    if lines is None:
        return ""

    for line in lines:
        match = FIELD_LINE_PATTERN.match(line)
        if not match or match.group(1) != field_name:
            continue
        value = match.group(2).strip()
        if BLOCK_SCALAR_PATTERN.match(value):
            return _block_scalar(lines, field_name)
        return _strip_quotes(value)
    return ""


def read_skill_file(path: Path) -> str:
    """Read a SKILL.md as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidSkillError(path, reason=str(exc)) from exc


def _frontmatter_lines(text: str) -> list[str] | None:
    """Return the lines strictly between the delimiters, or None when absent."""
    lines = text.lstrip(BYTE_ORDER_MARK).splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None
    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            return lines[1:index]
    return None


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def _block_scalar(lines: list[str], field_name: str) -> str:
    try:
        payload = yaml.safe_load("\n".join(lines))
    except yaml.YAMLError as exc:
        logger.debug("Cannot parse frontmatter block for %s: %s", field_name, exc)
        return ""
    if not isinstance(payload, dict):
        return ""
    value = payload.get(field_name)
    return value.strip() if isinstance(value, str) else ""
