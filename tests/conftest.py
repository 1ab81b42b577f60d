"""Fixtures shared by the todolist test suite.

Todo files live under pytest's ``tmp_path``; service tests run against
``MemoryStorage``.  The autouse fixtures keep ``TODO_*`` environment
variables and the ``todolist`` logger configuration from leaking between
tests.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from todolist.model.todo import Todo
from todolist.storage.backends import MemoryStorage


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "todolist"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string."""
    return "0.1.0"


@pytest.fixture()
def todo_file(tmp_path: Path) -> Path:
    """Return a path for a todo file that does not exist yet."""
    return tmp_path / "todos.json"


@pytest.fixture()
def sample_todos() -> list[Todo]:
    return [
        Todo("Buy milk"),
        Todo("Write report", completed=True),
        Todo("Call mum"),
    ]


@pytest.fixture()
def memory_storage(sample_todos: list[Todo]) -> MemoryStorage:
    return MemoryStorage(sample_todos)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user environment settings out of CLI tests."""
    for name in ("TODO_FILE", "TODO_DELETE_POLICY", "TODO_CONFIG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo ``--verbose`` logging set up by CLI tests."""
    package_logger = logging.getLogger("todolist")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
