"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

SkillLocation: TypeAlias = Literal["project", "global"]
InstallStatus: TypeAlias = Literal["installed", "skipped"]
Language: TypeAlias = Literal["en", "zh"]
