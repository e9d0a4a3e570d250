"""Handlers for the ``list``, ``read``, ``remove`` and ``manage`` subcommands."""

from __future__ import annotations

import argparse
import sys

from openskills.cli.context import CommandContext
from openskills.cli.prompts import Choice
from openskills.constants.config import EXIT_FAILURE, EXIT_OK
from openskills.constants.reporting import SUCCESS_MARK
from openskills.exceptions import SkillNotFoundError
from openskills.io import remove_tree
from openskills.reporting import SkillListReporter
from openskills.skills import find_skill, list_all_skills, skill_roots, sort_for_display


def handle_list(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Print installed skills, project first, alphabetical within each group."""
    skills = sort_for_display(list_all_skills(ctx.cwd, ctx.home))
    print(SkillListReporter(skills, translator=ctx.translator, painter=ctx.painter).render())
    return EXIT_OK


def handle_read(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Print a skill's SKILL.md framed the way agents expect."""
    try:
        skill = find_skill(args.name, ctx.cwd, ctx.home)
    except SkillNotFoundError:
        print(ctx.t("read.error_not_found", name=args.name), file=sys.stderr)
        print(f"\n{ctx.t('read.searched')}", file=sys.stderr)
        for root in skill_roots(ctx.cwd, ctx.home):
            print(f"  {root.label}", file=sys.stderr)
        print(f"\n{ctx.t('read.install_skills')}", file=sys.stderr)
        return EXIT_FAILURE

    content = skill.path.read_text(encoding="utf-8")
    print(f"{ctx.t('read.reading')} {skill.name}")
    print(f"{ctx.t('read.base_directory')} {skill.base_dir}")
    print("")
    print(content)
    print("")
    print(f"{ctx.t('read.skill_read')} {skill.name}")
    return EXIT_OK


def handle_remove(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Delete the highest-precedence skill with the given name."""
    p = ctx.painter
    try:
        skill = find_skill(args.name, ctx.cwd, ctx.home)
    except SkillNotFoundError:
        print(p.red(ctx.t("remove.not_found", name=args.name)), file=sys.stderr)
        return EXIT_FAILURE

    try:
        remove_tree(skill.base_dir)
    except OSError as exc:
        print(p.red(f"{ctx.t('error')}: {skill.base_dir}: {exc}"), file=sys.stderr)
        return EXIT_FAILURE
    print(p.green(f"{SUCCESS_MARK} {ctx.t('remove.removed')} {skill.name}"))
    print(f"   {ctx.t('remove.from', location=skill.location, source=skill.source)}")
    return EXIT_OK


def handle_manage(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Interactively pick installed skills to delete."""
    p = ctx.painter
    skills = sort_for_display(list_all_skills(ctx.cwd, ctx.home))
    if not skills:
        print(ctx.t("manage.no_skills"))
        return EXIT_OK

    by_dir = {str(skill.base_dir): skill for skill in skills}
    choices = [
        Choice(value=str(skill.base_dir), label=p.skill_row(skill.name, skill.location, ctx.translator))
        for skill in skills
    ]
    selected = ctx.prompter.checkbox(
        ctx.t("manage.select_remove"),
        choices,
        instructions=ctx.t("manage.instructions"),
    )
    if not selected:
        print(p.yellow(ctx.t("manage.no_selected")))
        return EXIT_OK

    removed = 0
    for key in selected:
        skill = by_dir[key]
        try:
            remove_tree(skill.base_dir)
        except OSError as exc:
            print(p.red(f"{ctx.t('error')}: {skill.base_dir}: {exc}"), file=sys.stderr)
            continue
        removed += 1
        print(p.green(f"{SUCCESS_MARK} {ctx.t('manage.removed')} {skill.name} {p.location(skill.location, ctx.translator)}"))

    print(p.green(f"\n{SUCCESS_MARK} {ctx.t('manage.removed_count', count=removed)}"))
    return EXIT_OK
