"""Tests for the console prompt implementation."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from openskills.cli.prompts import Choice, ConsolePrompter
from openskills.exceptions import UserCancelledError
from openskills.i18n import Translator

CHOICES = [
    Choice(value="one", label="One", checked=True),
    Choice(value="two", label="Two", description="second"),
    Choice(value="three", label="Three", checked=True),
]


def _prompter(answers: list[str], output: list[str]) -> ConsolePrompter:
    replies: Iterator[str] = iter(answers)

    def _read(_prompt: str) -> str:
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    return ConsolePrompter(Translator("en"), read=_read, write=output.append)


@pytest.mark.parametrize(
    ("answer", "default", "expected"),
    [("y", False, True), ("YES", False, True), ("n", True, False), ("", True, True), ("", False, False)],
)
def test_confirm_answers(answer: str, default: bool, expected: bool) -> None:
    assert _prompter([answer], []).confirm("Overwrite?", default=default) is expected


def test_confirm_reprompts_on_invalid_input() -> None:
    output: list[str] = []

    assert _prompter(["maybe", "y"], output).confirm("Overwrite?") is True
    assert output == ["Invalid selection: maybe"]


def test_confirm_eof_cancels() -> None:
    with pytest.raises(UserCancelledError):
        _prompter([], []).confirm("Overwrite?")


def test_keyboard_interrupt_cancels() -> None:
    def _interrupt(_prompt: str) -> str:
        raise KeyboardInterrupt

    prompter = ConsolePrompter(Translator("en"), read=_interrupt, write=lambda _line: None)

    with pytest.raises(UserCancelledError):
        prompter.checkbox("Pick", CHOICES)


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("", ["one", "three"]),
        ("a", ["one", "two", "three"]),
        ("none", []),
        ("2", ["two"]),
        ("3, 1", ["one", "three"]),
        ("1 2 2", ["one", "two"]),
    ],
    ids=["keep-checked", "all", "none", "single", "comma", "spaces"],
)
def test_checkbox_selection(answer: str, expected: list[str]) -> None:
    assert _prompter([answer], []).checkbox("Pick", CHOICES) == expected


def test_checkbox_renders_choices_and_reprompts() -> None:
    output: list[str] = []

    result = _prompter(["9", "x", "2"], output).checkbox("Pick", CHOICES, instructions="help")

    assert result == ["two"]
    assert output[:5] == [
        "Pick",
        "help",
        "   1. [x] One",
        "   2. [ ] Two  second",
        "   3. [x] Three",
    ]
    assert output[5:] == ["Invalid selection: 9", "Invalid selection: x"]
