"""CLI entrypoint for OpenSkills."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from openskills import __version__
from openskills.cli.context import CommandContext
from openskills.cli.handlers import handle_list, handle_manage, handle_read, handle_remove
from openskills.cli.install import handle_install
from openskills.cli.prompts import ConsolePrompter, Prompter
from openskills.cli.sync import handle_sync
from openskills.config import OpenSkillsConfig, load_config
from openskills.constants.branding import CLI_DESCRIPTION
from openskills.constants.config import (
    EXIT_CANCELLED,
    EXIT_CONFIG_ERROR,
    EXIT_FAILURE,
    LANGUAGE_AUTO,
    VALID_LANGUAGE_SETTINGS,
)
from openskills.exceptions import ConfigError, OpenSkillsError, UserCancelledError
from openskills.i18n import Translator, resolve_language
from openskills.reporting import Painter

Handler: TypeAlias = Callable[[argparse.Namespace, CommandContext], int]

HANDLERS: dict[str, Handler] = {
    "install": handle_install,
    "list": handle_list,
    "read": handle_read,
    "remove": handle_remove,
    "manage": handle_manage,
    "sync": handle_sync,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="openskills",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit openskills.yaml path")
    parser.add_argument(
        "--lang",
        choices=sorted(VALID_LANGUAGE_SETTINGS),
        default=None,
        help="Interface language (default: from config, then the system locale)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    install = subparsers.add_parser("install", help="Install skills from a path, git URL or owner/repo")
    install.add_argument("source", help="Local path, git URL, owner/repo or owner/repo/skill-path")
    install.add_argument(
        "-g",
        "--global",
        dest="global_",
        action="store_true",
        help="Install into the home directory instead of the project",
    )
    install.add_argument(
        "-u",
        "--universal",
        action="store_true",
        help="Install into .agent/skills instead of .claude/skills",
    )
    install.add_argument("-y", "--yes", action="store_true", help="Skip prompts and overwrite existing skills")

    subparsers.add_parser("list", help="List installed skills")

    read = subparsers.add_parser("read", help="Print a skill's SKILL.md for an agent")
    read.add_argument("name", help="Skill name")

    remove = subparsers.add_parser("remove", help="Remove an installed skill")
    remove.add_argument("name", help="Skill name")

    subparsers.add_parser("manage", help="Interactively remove installed skills")

    sync = subparsers.add_parser("sync", help="Write installed skills into AGENTS.md")
    sync.add_argument("-o", "--output", default=None, help="Markdown file to update (default: AGENTS.md)")
    sync.add_argument("-y", "--yes", action="store_true", help="Include every skill without prompting")

    return parser


def main(argv: list[str] | None = None, *, prompter: Prompter | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    cwd = Path.cwd()
    try:
        config = load_config(cwd, args.config)
    except ConfigError as exc:
        translator = Translator(resolve_language(args.lang or LANGUAGE_AUTO))
        print(translator.t("config_error", detail=exc), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    ctx = _build_context(args, config, cwd=cwd, prompter=prompter)
    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args, ctx)
    except UserCancelledError:
        print(ctx.painter.yellow(f"\n{ctx.t('cancelled')}"))
        return EXIT_CANCELLED
    except OpenSkillsError as exc:
        print(ctx.painter.red(f"{ctx.t('error')}: {exc}"), file=sys.stderr)
        return EXIT_FAILURE


def _build_context(
    args: argparse.Namespace,
    config: OpenSkillsConfig,
    *,
    cwd: Path,
    prompter: Prompter | None,
) -> CommandContext:
    """Resolve language, colour and prompts once for the whole invocation."""
    translator = Translator(resolve_language(args.lang or config.language))
    use_color = not args.no_color and config.color and sys.stdout.isatty()
    return CommandContext(
        cwd=cwd,
        home=Path.home(),
        translator=translator,
        painter=Painter(use_color),
        prompter=prompter if prompter is not None else ConsolePrompter(translator),
        config=config,
    )


if __name__ == "__main__":
    raise SystemExit(main())
