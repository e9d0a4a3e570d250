"""Interactive prompts behind a small, replaceable interface."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from openskills.exceptions import UserCancelledError
from openskills.i18n import Translator

_SELECTION_SPLIT = re.compile(r"[\s,]+")
_ALL_ANSWERS = frozenset({"a", "all"})
_NONE_ANSWERS = frozenset({"none", "-"})
_YES_ANSWERS = frozenset({"y", "yes"})
_NO_ANSWERS = frozenset({"n", "no"})


@dataclass(frozen=True)
class Choice:
    """One checkbox entry."""

    value: str
    label: str
    description: str = ""
    checked: bool = False


class Prompter(Protocol):
    """Blocking prompt operations used by the command handlers.

    Implementations raise ``UserCancelledError`` when the operator aborts.
    """

    def confirm(self, message: str, *, default: bool = False) -> bool: ...

    def checkbox(self, message: str, choices: Sequence[Choice], *, instructions: str = "") -> list[str]: ...


class ConsolePrompter:
    """Line-based prompts on top of injectable ``read``/``write`` callables."""

    def __init__(
        self,
        translator: Translator,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._t = translator
        self._read = read
        self._write = write

    def confirm(self, message: str, *, default: bool = False) -> bool:
        suffix = self._t.t("prompt.yes_no_default_yes" if default else "prompt.yes_no_default_no")
        while True:
            answer = self._ask(f"{message} {suffix} ").strip().lower()
            if not answer:
                return default
            if answer in _YES_ANSWERS:
                return True
            if answer in _NO_ANSWERS:
                return False
            self._write(self._t.t("prompt.invalid_choice", value=answer))

    def checkbox(self, message: str, choices: Sequence[Choice], *, instructions: str = "") -> list[str]:
        self._write(message)
        if instructions:
            self._write(instructions)
        for index, choice in enumerate(choices, start=1):
            mark = "x" if choice.checked else " "
            line = f"  {index:>2}. [{mark}] {choice.label}"
            if choice.description:
                line = f"{line}  {choice.description}"
            self._write(line)

        while True:
            answer = self._ask("> ").strip()
            selection = _parse_selection(answer, choices)
            if selection is not None:
                return selection
            self._write(self._t.t("prompt.invalid_choice", value=answer))

    def _ask(self, prompt: str) -> str:
        try:
            return self._read(prompt)
        except (EOFError, KeyboardInterrupt) as exc:
            raise UserCancelledError("prompt aborted") from exc


def _parse_selection(answer: str, choices: Sequence[Choice]) -> list[str] | None:
    """Map a typed answer to selected values, or None when it cannot be parsed."""
    lowered = answer.lower()
    if not lowered:
        return [choice.value for choice in choices if choice.checked]
    if lowered in _ALL_ANSWERS:
        return [choice.value for choice in choices]
    if lowered in _NONE_ANSWERS:
        return []

    picked: set[int] = set()
    for token in _SELECTION_SPLIT.split(lowered):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= len(choices):
            return None
        picked.add(int(token) - 1)
    return [choice.value for index, choice in enumerate(choices) if index in picked]
