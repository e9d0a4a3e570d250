"""Handler for ``openskills sync``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from openskills.agents_md import has_section, parse_listed_names, remove_section, render_skills_fragment, replace_section
from openskills.cli.context import CommandContext
from openskills.cli.prompts import Choice
from openskills.constants.agents_md import (
    CURSOR_DIRNAME,
    CURSOR_RULES_OUTPUT,
    DEFAULT_OUTPUT_FILENAME,
    MARKDOWN_SUFFIX,
    SYNC_TEMP_PREFIX,
    SYNC_TEMP_SUFFIX,
)
from openskills.constants.config import EXIT_FAILURE, EXIT_OK
from openskills.constants.reporting import SUCCESS_MARK, SYNC_DESCRIPTION_PREVIEW
from openskills.exceptions import OutputFormatError
from openskills.io import write_text_atomic
from openskills.model import Skill
from openskills.skills import list_all_skills, sort_for_display, unique_skills


def default_output_path(cwd: Path) -> Path:
    """Prefer ``.cursor/rules/AGENTS.md`` when the project uses Cursor."""
    if (cwd / CURSOR_DIRNAME).is_dir():
        return cwd.joinpath(*CURSOR_RULES_OUTPUT)
    return cwd / DEFAULT_OUTPUT_FILENAME


def resolve_output_path(requested: str | None, cwd: Path) -> Path:
    """Resolve the sync target, rejecting anything that is not a ``.md`` file."""
    if requested is None:
        return default_output_path(cwd)
    if not requested.endswith(MARKDOWN_SUFFIX):
        raise OutputFormatError(Path(requested))
    path = Path(requested).expanduser()
    return path if path.is_absolute() else cwd / path


def handle_sync(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Write the installed-skills section into a markdown file."""
    p = ctx.painter
    try:
        output_path = resolve_output_path(args.output or ctx.config.sync_output, ctx.cwd)
    except OutputFormatError as exc:
        print(p.red(f"{ctx.t('error')}: {ctx.t('sync.error_markdown', path=exc.path)}"), file=sys.stderr)
        return EXIT_FAILURE

    display_path = _display_path(output_path, ctx.cwd)
    if not output_path.exists():
        _write(output_path, f"# {output_path.stem}\n\n")
        print(p.dim(ctx.t("sync.created", path=display_path)))

    skills = sort_for_display(unique_skills(list_all_skills(ctx.cwd, ctx.home)))
    if not skills:
        print(ctx.t("sync.no_skills_installed"))
        print(f"  {p.cyan('openskills install anthropics/skills')}")
        return EXIT_OK

    content = output_path.read_text(encoding="utf-8")
    if not args.yes:
        selected = _select_skills(ctx, skills, content, output_path.name)
        if not selected:
            _write(output_path, remove_section(content))
            print(p.green(f"{SUCCESS_MARK} {ctx.t('sync.removed_all', path=display_path)}"))
            return EXIT_OK
        skills = selected

    _write(output_path, replace_section(content, render_skills_fragment(skills)))

    if has_section(content):
        print(p.green(f"{SUCCESS_MARK} {ctx.t('sync.synced', count=len(skills), path=display_path)}"))
    else:
        print(p.green(f"{SUCCESS_MARK} {ctx.t('sync.added', path=display_path, count=len(skills))}"))
    return EXIT_OK


def _select_skills(ctx: CommandContext, skills: list[Skill], content: str, filename: str) -> list[Skill]:
    """Ask which skills to list; pre-check those already in the file."""
    listed = parse_listed_names(content)
    choices = [
        Choice(
            value=skill.name,
            label=ctx.painter.skill_row(skill.name, skill.location, ctx.translator),
            description=skill.description[:SYNC_DESCRIPTION_PREVIEW],
            # With nothing listed yet, default to the project's own skills.
            checked=skill.name in listed or (not listed and skill.location == "project"),
        )
        for skill in skills
    ]
    selected = set(
        ctx.prompter.checkbox(
            ctx.t("sync.select_skills", file=filename),
            choices,
            instructions=ctx.t("sync.instructions"),
        )
    )
    return [skill for skill in skills if skill.name in selected]


def _write(path: Path, content: str) -> None:
    write_text_atomic(path=path, content=content, temp_prefix=SYNC_TEMP_PREFIX, temp_suffix=SYNC_TEMP_SUFFIX)


def _display_path(path: Path, cwd: Path) -> str:
    try:
        return path.relative_to(cwd).as_posix()
    except ValueError:
        return str(path)
