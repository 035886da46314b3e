# tests/test_prompts.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt

from todo_cras.cli.prompts import RichPrompter
from todo_cras.store.models import parse_deadline_input, parse_probability


def _feed(monkeypatch: pytest.MonkeyPatch, cls: type, answers: list) -> list[dict]:
    """Replace cls.ask with a scripted version; returns the recorded kwargs."""
    it: Iterator = iter(answers)
    calls: list[dict] = []

    def fake_ask(*args, **kwargs):
        calls.append(kwargs)
        return next(it)

    monkeypatch.setattr(cls, "ask", fake_ask)
    return calls


def test_choose_lists_numbered_options(monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    calls = _feed(monkeypatch, IntPrompt, [2])

    assert RichPrompter(console).choose("Edit:", ["Category", "[Task]"]) == 2

    out = console.file.getvalue()
    assert "1: Category" in out
    assert "2: [Task]" in out
    assert calls[0]["choices"] == ["1", "2"]


def test_choose_needs_options(console: Console) -> None:
    with pytest.raises(ValueError):
        RichPrompter(console).choose("Empty", [])


def test_typed_retries_until_valid(monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed(monkeypatch, Prompt, ["7", "x", "0.25"])

    assert RichPrompter(console).typed("Probability: ", parse_probability) == 0.25
    assert console.file.getvalue().count("robability") >= 2


def test_typed_empty_deadline_means_none(monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed(monkeypatch, Prompt, [""])
    assert RichPrompter(console).typed("Deadline: ", parse_deadline_input) is None


def test_text_and_confirm(monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed(monkeypatch, Prompt, ["Home"])
    _feed(monkeypatch, Confirm, [False])

    prompter = RichPrompter(console)
    assert prompter.text("Name: ") == "Home"
    assert prompter.confirm("Continue editing?") is False
