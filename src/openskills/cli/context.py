"""Per-invocation state shared by the command handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from openskills.cli.prompts import Prompter
from openskills.config import OpenSkillsConfig
from openskills.i18n import Translator
from openskills.reporting import Painter


@dataclass
class CommandContext:
    """Working directory, home directory and presentation settings for one command."""

    cwd: Path
    home: Path
    translator: Translator
    painter: Painter
    prompter: Prompter
    config: OpenSkillsConfig = field(default_factory=OpenSkillsConfig)

    def t(self, key: str, **params: object) -> str:
        """Shortcut for ``translator.t``."""
        return self.translator.t(key, **params)
