# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from todo_cras.config import Settings


def test_defaults() -> None:
    s = Settings.from_env({})

    assert s.todo_file == Path.home() / "todo.txt"
    assert s.log_level == "WARNING"
    assert s.log_dir is None
    assert s.alt_screen is True
    assert s.backlog_marker is True


def test_todo_file_variable(tmp_path: Path) -> None:
    s = Settings.from_env({"TODO_FILE": str(tmp_path / "mine.txt")})
    assert s.todo_file == tmp_path / "mine.txt"


def test_legacy_variable_wins_over_prefixed(tmp_path: Path) -> None:
    s = Settings.from_env({"TODO_FILE": str(tmp_path / "a.txt"), "TODO_CRAS_FILE": str(tmp_path / "b.txt")})
    assert s.todo_file == tmp_path / "a.txt"


def test_prefixed_variable_and_blank_legacy(tmp_path: Path) -> None:
    s = Settings.from_env({"TODO_FILE": "  ", "TODO_CRAS_FILE": str(tmp_path / "b.txt")})
    assert s.todo_file == tmp_path / "b.txt"


def test_tilde_is_expanded() -> None:
    s = Settings.from_env({"TODO_FILE": "~/lists/todo.txt"})
    assert s.todo_file == Path.home() / "lists" / "todo.txt"


def test_switches_and_logging(tmp_path: Path) -> None:
    s = Settings.from_env(
        {
            "TODO_CRAS_LOG_LEVEL": "debug",
            "TODO_CRAS_LOG_DIR": str(tmp_path / "logs"),
            "TODO_CRAS_ALT_SCREEN": "off",
            "TODO_CRAS_BACKLOG_MARKER": "0",
        }
    )

    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path / "logs"
    assert s.alt_screen is False
    assert s.backlog_marker is False
