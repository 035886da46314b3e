# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from todo_cras.logging_setup import _ConsoleNoiseFilter, level_from_name, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_noise_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("todo_cras.store.codec", logging.DEBUG))
    assert not f.filter(_record("rich", logging.WARNING))
    assert f.filter(_record("rich", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("nonsense") == logging.WARNING


def test_file_handler_only_with_log_dir(tmp_path: Path) -> None:
    root = logging.getLogger()
    try:
        setup_logging(console_level=logging.ERROR)
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)

        setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)
        logging.getLogger("todo_cras.test").debug("hello file")
        for h in root.handlers:
            h.flush()

        assert "hello file" in (tmp_path / "logs" / "todo_cras.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            if isinstance(h, logging.FileHandler):
                root.removeHandler(h)
                h.close()
