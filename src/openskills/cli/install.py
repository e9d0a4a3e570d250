"""Handler for ``openskills install``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from openskills.cli.context import CommandContext
from openskills.cli.prompts import Choice
from openskills.constants.config import EXIT_FAILURE, EXIT_OK
from openskills.constants.discovery import CLAUDE_SKILLS_FOLDER, UNIVERSAL_SKILLS_FOLDER
from openskills.constants.reporting import (
    INSTALL_DESCRIPTION_PREVIEW,
    NAME_COLUMN_WIDTH,
    SUCCESS_MARK,
    WARNING_MARK,
)
from openskills.constants.sources import CLONE_NOT_FOUND_MARKERS, HOSTED_GIT_URL_PREFIX
from openskills.exceptions import (
    CloneError,
    InvalidSkillError,
    InvalidSourceFormatError,
    NoSkillsFoundError,
    PathEscapeError,
)
from openskills.io import format_size
from openskills.model import GitSource, InstallOutcome, LocalSource
from openskills.skills import (
    collect_candidates,
    install_skill,
    is_marketplace_skill,
    is_skill_dir,
    safe_destination,
)
from openskills.sources import classify_source, cloned_repository


def handle_install(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Install skills from a local path, a git URL or ``owner/repo[/path]``."""
    p = ctx.painter
    universal = args.universal or ctx.config.universal
    folder = UNIVERSAL_SKILLS_FOLDER if universal else CLAUDE_SKILLS_FOLDER
    is_project = not args.global_
    target_dir = (ctx.cwd if is_project else ctx.home) / folder

    location = (
        p.blue(ctx.t("location.target_project", folder=folder))
        if is_project
        else p.dim(ctx.t("location.target_global", folder=folder))
    )
    print(f"{ctx.t('install.installing_from')} {p.cyan(args.source)}")
    print(f"{ctx.t('install.location')} {location}\n")

    try:
        source = classify_source(args.source, cwd=ctx.cwd, home=ctx.home)
    except InvalidSourceFormatError:
        print(p.red(f"{ctx.t('error')}: {ctx.t('install.invalid_source_format')}"), file=sys.stderr)
        print(p.dim(ctx.t("install.expected_formats")), file=sys.stderr)
        return EXIT_FAILURE

    session = InstallSession(ctx, target_dir=target_dir, is_project=is_project, auto_confirm=args.yes)
    if isinstance(source, LocalSource):
        code = session.install_local(source.path)
    elif isinstance(source, GitSource):
        if source.normalized:
            _print_normalized_url(ctx, source)
        code = session.install_git(source.repo_url, original=args.source)
    else:
        code = session.install_git(source.clone_url, original=args.source, subpath=source.subpath)

    if code == EXIT_OK:
        _print_post_install_hints(ctx, is_project)
    return code


class InstallSession:
    """Installs into one target directory under a single conflict policy."""

    def __init__(self, ctx: CommandContext, *, target_dir: Path, is_project: bool, auto_confirm: bool) -> None:
        self._ctx = ctx
        self._p = ctx.painter
        self.target_dir = target_dir
        self.is_project = is_project
        self.auto_confirm = auto_confirm

    def install_local(self, path: Path) -> int:
        """Install a single skill directory or every skill found below *path*."""
        if not path.exists():
            return self._fail(self._ctx.t("install.path_not_found", path=path))
        if not path.is_dir():
            return self._fail(self._ctx.t("install.not_a_directory", path=path))
        if is_skill_dir(path):
            return self.install_single(path)
        return self.install_from_repo(path)

    def install_git(self, repo_url: str, *, original: str, subpath: str = "") -> int:
        """Clone *repo_url* and install from the checkout."""
        print(self._ctx.t("install.cloning_repo"))
        try:
            with cloned_repository(repo_url) as checkout:
                print(self._p.green(self._ctx.t("install.repo_cloned")))
                if not subpath:
                    return self.install_from_repo(checkout)
                try:
                    skill_dir = safe_destination(checkout, subpath)
                except PathEscapeError:
                    return self._fail(self._ctx.t("install.path_escape", path=subpath))
                if not is_skill_dir(skill_dir):
                    return self._fail(self._ctx.t("install.skill_md_not_found", path=subpath))
                return self.install_single(skill_dir)
        except CloneError as exc:
            self._report_clone_failure(exc, original)
            return EXIT_FAILURE

    def install_single(self, skill_dir: Path) -> int:
        """Install exactly one skill; any failure is fatal."""
        try:
            outcome = install_skill(skill_dir, self.target_dir, confirm_overwrite=self._confirm_overwrite)
        except InvalidSkillError as exc:
            return self._fail(self._ctx.t("install.invalid_skill_md", path=exc.path))
        except PathEscapeError as exc:
            return self._fail(self._ctx.t("install.path_escape", path=exc.destination))
        self._report(outcome, show_location=True)
        return EXIT_OK

    def install_from_repo(self, root: Path) -> int:
        """Offer every valid skill below *root* and install the selection."""
        ctx, p = self._ctx, self._p
        try:
            candidates = collect_candidates(root)
        except NoSkillsFoundError:
            return self._fail(ctx.t("install.no_skills_found"))
        if not candidates:
            return self._fail(ctx.t("install.no_valid_skills"))

        print(p.dim(f"{ctx.t('install.found_skills', count=len(candidates))}\n"))

        chosen = candidates
        if not self.auto_confirm and len(candidates) > 1:
            choices = [
                Choice(
                    value=str(candidate.skill_dir),
                    label=f"{p.bold(candidate.name.ljust(NAME_COLUMN_WIDTH))} {p.dim(format_size(candidate.size_bytes))}",
                    description=candidate.description[:INSTALL_DESCRIPTION_PREVIEW],
                    checked=True,
                )
                for candidate in candidates
            ]
            selected = set(
                ctx.prompter.checkbox(
                    ctx.t("install.select_skills"),
                    choices,
                    instructions=ctx.t("install.instructions"),
                )
            )
            if not selected:
                print(p.yellow(ctx.t("install.no_skills_selected")))
                return EXIT_OK
            chosen = [candidate for candidate in candidates if str(candidate.skill_dir) in selected]

        installed = 0
        for candidate in chosen:
            try:
                outcome = install_skill(
                    candidate.skill_dir,
                    self.target_dir,
                    confirm_overwrite=self._confirm_overwrite,
                )
            except PathEscapeError as exc:
                print(p.red(f"{ctx.t('error')}: {ctx.t('install.path_escape', path=exc.destination)}"), file=sys.stderr)
                continue
            except InvalidSkillError as exc:
                print(p.red(f"{ctx.t('error')}: {ctx.t('install.invalid_skill_md', path=exc.path)}"), file=sys.stderr)
                continue
            self._report(outcome, show_location=False)
            if outcome.installed:
                installed += 1

        print(p.green(f"\n{SUCCESS_MARK} {ctx.t('install.installation_complete', count=installed)}"))
        return EXIT_OK

    def _confirm_overwrite(self, name: str) -> bool:
        if self.auto_confirm:
            print(self._p.dim(f"{self._ctx.t('install.overwriting')} {name}"))
            return True
        return self._ctx.prompter.confirm(self._p.yellow(self._ctx.t("install.skill_exists", name=name)), default=False)

    def _report(self, outcome: InstallOutcome, *, show_location: bool) -> None:
        ctx, p = self._ctx, self._p
        if not outcome.installed:
            print(p.yellow(f"{ctx.t('install.skipped')} {outcome.name}"))
            return
        if not self.is_project and is_marketplace_skill(outcome.name):
            print(p.yellow(f"\n{WARNING_MARK} {ctx.t('install.marketplace_warning', name=outcome.name)}"), file=sys.stderr)
            for key in ("install.marketplace_conflict", "install.marketplace_overwrite", "install.recommend_project"):
                print(p.dim(f"   {ctx.t(key)}"), file=sys.stderr)
        print(p.green(f"{SUCCESS_MARK} {ctx.t('install.installed')} {outcome.name}"))
        if show_location:
            print(f"   {ctx.t('install.location')} {outcome.destination}")

    def _report_clone_failure(self, exc: CloneError, original: str) -> None:
        ctx, p = self._ctx, self._p
        print(p.red(ctx.t("install.failed_clone")), file=sys.stderr)
        if exc.stderr:
            print(p.dim(exc.stderr), file=sys.stderr)
        if any(marker in exc.stderr for marker in CLONE_NOT_FOUND_MARKERS):
            print(p.yellow(f"\n{ctx.t('install.repo_not_found')}"), file=sys.stderr)
            print(p.dim(f"  {ctx.t('install.check_url')}: {p.cyan(exc.url)}"), file=sys.stderr)
            if original != exc.url:
                print(p.dim(f"  {ctx.t('install.original_source')}: {p.cyan(original)}"), file=sys.stderr)
            shorthand = exc.url.removeprefix(HOSTED_GIT_URL_PREFIX)
            print(p.dim(f"  {ctx.t('install.try_shorthand')}: {p.cyan(f'openskills install {shorthand}')}"), file=sys.stderr)
            return
        print(p.yellow(f"\n{ctx.t('install.tip_private_repo')}"), file=sys.stderr)

    def _fail(self, message: str) -> int:
        print(self._p.red(f"{self._ctx.t('error')}: {message}"), file=sys.stderr)
        return EXIT_FAILURE


def _print_normalized_url(ctx: CommandContext, source: GitSource) -> None:
    p = ctx.painter
    print(p.yellow(f"\n{WARNING_MARK} {ctx.t('install.url_normalized')}"))
    print(p.dim(f"  {ctx.t('install.original_url')}: {source.url}"))
    print(p.dim(f"  {ctx.t('install.using_url')}: {source.repo_url}"))
    if source.suggested and source.suggested != source.repo_url:
        print(p.dim(f"  {ctx.t('install.suggestion')}: {p.cyan(f'openskills install {source.suggested}')}"))
    print()


def _print_post_install_hints(ctx: CommandContext, is_project: bool) -> None:
    p = ctx.painter
    print(f"\n{p.dim(ctx.t('install.hint_read'))} {p.cyan('openskills read <skill-name>')}")
    if is_project:
        print(f"{p.dim(ctx.t('install.hint_sync'))} {p.cyan('openskills sync')}")
