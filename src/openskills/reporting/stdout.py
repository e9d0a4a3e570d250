"""Plain-text and ANSI-coloured stdout rendering."""

from __future__ import annotations

from openskills.constants.reporting import (
    ANSI_BLUE,
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    NAME_COLUMN_WIDTH,
)
from openskills.i18n import Translator
from openskills.model import Skill
from openskills.types import SkillLocation


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class Painter:
    """Applies ANSI styles when colour output is enabled."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self.enabled else text

    def bold(self, text: str) -> str:
        return self._paint(text, ANSI_BOLD)

    def dim(self, text: str) -> str:
        return self._paint(text, ANSI_DIM)

    def red(self, text: str) -> str:
        return self._paint(text, ANSI_RED)

    def green(self, text: str) -> str:
        return self._paint(text, ANSI_GREEN)

    def yellow(self, text: str) -> str:
        return self._paint(text, ANSI_YELLOW)

    def blue(self, text: str) -> str:
        return self._paint(text, ANSI_BLUE)

    def cyan(self, text: str) -> str:
        return self._paint(text, ANSI_CYAN)

    def location(self, location: SkillLocation, translator: Translator) -> str:
        """Render the ``(project)`` / ``(global)`` label."""
        if location == "project":
            return self.blue(translator.t("location.project"))
        return self.dim(translator.t("location.global"))

    def skill_row(self, name: str, location: SkillLocation, translator: Translator) -> str:
        """Render a padded skill name followed by its location label."""
        return f"{self.bold(name.ljust(NAME_COLUMN_WIDTH))} {self.location(location, translator)}"


class SkillListReporter:
    """Formats the ``list`` command output."""

    def __init__(self, skills: list[Skill], *, translator: Translator, painter: Painter) -> None:
        self._skills = skills
        self._t = translator
        self._painter = painter

    def render(self) -> str:
        """Render the full listing as a single string."""
        lines = [self._painter.bold(self._t.t("list.available_skills")), ""]
        if not self._skills:
            lines.extend(self._render_empty())
            return "\n".join(lines)

        for skill in self._skills:
            lines.append(f"  {self._painter.skill_row(skill.name, skill.location, self._t)}")
            lines.append(f"    {self._painter.dim(skill.description)}")
            lines.append("")

        project_count = sum(1 for skill in self._skills if skill.location == "project")
        global_count = len(self._skills) - project_count
        lines.append(
            self._painter.dim(
                self._t.t(
                    "list.summary",
                    project_count=project_count,
                    global_count=global_count,
                    total=len(self._skills),
                )
            )
        )
        return "\n".join(lines)

    def _render_empty(self) -> list[str]:
        p = self._painter
        return [
            self._t.t("list.no_skills"),
            "",
            self._t.t("list.install_skills"),
            f"  {p.cyan('openskills install anthropics/skills')}         "
            f"{p.dim('# ' + self._t.t('list.project_default'))}",
            f"  {p.cyan('openskills install owner/skill --global')}     "
            f"{p.dim('# ' + self._t.t('list.global_advanced'))}",
        ]
