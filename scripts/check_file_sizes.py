#!/usr/bin/env python3
"""Fail the build when an openskills module grows past its size cap.

Lines of code exclude blank lines and comment-only lines.  ``__init__.py``
re-export modules and the message tables are exempt.

    src/openskills/**/*.py  warn above 300, fail above 500
    tests/**/*.py           warn above 400, fail above 700
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

REPO_ROOT: Path = Path(__file__).resolve().parent.parent
EXEMPT_NAMES: frozenset[str] = frozenset({"__init__.py", "messages.py"})


@dataclass(frozen=True)
class SizeCap:
    """Soft and hard line caps for one directory tree."""

    label: str
    directory: Path
    soft: int
    hard: int


CAPS: tuple[SizeCap, ...] = (
    SizeCap("src", REPO_ROOT / "src" / "openskills", soft=300, hard=500),
    SizeCap("test", REPO_ROOT / "tests", soft=400, hard=700),
)


def _count_loc(path: Path) -> int:
    lines = (line.strip() for line in path.read_text(encoding="utf-8").splitlines())
    return sum(1 for line in lines if line and not line.startswith("#"))


def _violations(cap: SizeCap) -> tuple[list[str], list[str]]:
    """Return ``(warnings, errors)`` for every module under ``cap.directory``."""
    warnings: list[str] = []
    errors: list[str] = []
    for module in sorted(cap.directory.rglob("*.py")):
        if module.name in EXEMPT_NAMES:
            continue
        loc = _count_loc(module)
        where = module.relative_to(REPO_ROOT)
        if loc > cap.hard:
            errors.append(f"{cap.label} {where}: {loc} LOC (hard cap {cap.hard})")
        elif loc > cap.soft:
            warnings.append(f"{cap.label} {where}: {loc} LOC (soft cap {cap.soft})")
    return warnings, errors


def main() -> int:
    warnings: list[str] = []
    errors: list[str] = []
    for cap in CAPS:
        if cap.directory.is_dir():
            found_warnings, found_errors = _violations(cap)
            warnings.extend(found_warnings)
            errors.extend(found_errors)

    for message in warnings:
        print(f"WARNING: {message}")
    for message in errors:
        print(f"ERROR:   {message}")

    if errors:
        print(f"\n{len(errors)} module(s) over the hard cap.")
        return 1
    print("Module sizes OK." if not warnings else f"\n{len(warnings)} module(s) over the soft cap.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
