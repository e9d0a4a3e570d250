"""Constants for frontmatter parsing."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
BYTE_ORDER_MARK: str = "\ufeff"
QUOTE_CHARS: tuple[str, ...] = ('"', "'")

FIELD_LINE_PATTERN: Pattern[str] = re.compile(r"^\s*([A-Za-z0-9_-]+)\s*:(.*)$")

# Values that open a YAML block scalar (``description: >`` or ``|-``).
BLOCK_SCALAR_PATTERN: Pattern[str] = re.compile(r"^[|>][+-]?\d*$")
