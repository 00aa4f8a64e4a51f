"""
Shared fixtures for the lazylog test suite.
"""

import logging
from pathlib import Path

import pytest

from lazylog.config import reset_settings
from lazylog.utils.logging import context_filter


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings."""
    for name in (
        "LOG_LEVEL",
        "LOG_FILE",
        "DEV_MODE",
        "STRUCTURED_LOGS",
        "PLACEHOLDER",
        "JSON_INDENT",
        "ENCODING",
        "CHUNK_SIZE",
    ):
        monkeypatch.delenv(f"LAZYLOG_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Directory for temporary log files."""
    return tmp_path


@pytest.fixture
def write_log(temp_dir):
    """Write a log file from text and return its path."""

    def _write(content: str, name: str = "app.log") -> Path:
        path = temp_dir / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def simple_json() -> str:
    return '{"name":"John Doe", "email":"john@example.com"}'


@pytest.fixture
def complex_json() -> str:
    return (
        '{"name":"John Doe", "email":"john@example.com", "info": '
        '[{"date": "Today", "group": {"name": "sports", "id": 1}}]}'
    )


@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    context_filter.clear_context()
