"""Persistence backends for the todo list.

A backend stores the whole collection at once: ``load`` returns every
todo and ``save`` replaces every todo.  There are no partial writes.

``JsonFileStorage`` is the production backend.  ``MemoryStorage`` keeps
the list in process and is meant for tests and embedding.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from todolist.errors import StorageIOError
from todolist.model.serializer import TodoSerializer
from todolist.model.todo import Todo

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path("todos.json")


class StorageBackend(ABC):
    """Interface every todo storage must implement."""

    @abstractmethod
    def load(self) -> list[Todo]:
        """Return the stored todos in order."""

    @abstractmethod
    def save(self, todos: list[Todo]) -> None:
        """Replace the stored todos with ``todos``."""


class JsonFileStorage(StorageBackend):
    """Stores the todo list as a pretty-printed UTF-8 JSON file.

    The file is created on first access.  An empty file reads as an
    empty list.

    Parameters
    ----------
    path:
        Location of the JSON file.  Relative paths resolve against the
        current working directory at the time of each call.
    """

    def __init__(self, path: Path | str = DEFAULT_PATH) -> None:
        self._path = Path(path)
        self._serializer = TodoSerializer(source=str(self._path))

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Todo]:
        """Read and decode the todo file.

        Raises
        ------
        StorageIOError
            If the file cannot be created or read.
        ParseError
            If the file holds anything other than a valid todo array.
        """
        try:
            self._path.touch(exist_ok=True)
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOError(self._path, str(exc)) from exc

        if not content.strip():
            logger.debug("Todo file %s is empty", self._path)
            return []

        todos = self._serializer.from_json(content)
        logger.debug("Loaded %d todo(s) from %s", len(todos), self._path)
        return todos

    def save(self, todos: list[Todo]) -> None:
        """Overwrite the todo file with ``todos``.

        Raises
        ------
        StorageIOError
            If the file cannot be written.
        """
        text = self._serializer.to_json(todos)
        try:
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(self._path, str(exc)) from exc
        logger.debug("Saved %d todo(s) to %s", len(todos), self._path)

    def __repr__(self) -> str:
        return f"JsonFileStorage({str(self._path)!r})"


class MemoryStorage(StorageBackend):
    """Keeps the todo list in memory.

    ``load`` and ``save`` copy the list so callers never share state
    with the backend, mirroring what a file round-trip would do.
    """

    def __init__(self, todos: Iterable[Todo] = ()) -> None:
        self._todos: list[Todo] = list(todos)
        self.save_count = 0

    def load(self) -> list[Todo]:
        return list(self._todos)

    def save(self, todos: list[Todo]) -> None:
        self._todos = list(todos)
        self.save_count += 1

    def __repr__(self) -> str:
        return f"MemoryStorage({len(self._todos)} todo(s))"
