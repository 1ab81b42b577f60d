"""Error types raised by the todolist library.

Every error derives from ``TodoError`` so that the CLI can catch the
whole family at its boundary.  Most classes also subclass the closest
builtin exception, which keeps ``except ValueError`` style handling in
callers working as expected.

Positions in messages are 1-based because messages are shown to users.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todolist.model.todo import Todo


class TodoError(Exception):
    """Base class for all todolist errors."""


class ParseError(TodoError, ValueError):
    """Raised when stored todo content cannot be decoded."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Malformed todo list{where}: {message}")


class StorageIOError(TodoError, OSError):
    """Raised when the todo file cannot be read or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot access {self.path}: {reason}")


class DuplicateError(TodoError, ValueError):
    """Raised when an identical todo is already on the list."""

    def __init__(self, todo: "Todo") -> None:
        self.todo = todo
        super().__init__(f"Todo already exists on the todo list: {todo.title}")


class EmptyListError(TodoError):
    """Raised when an operation needs at least one todo."""

    def __init__(self) -> None:
        super().__init__("The todo list is empty")


class TodoIndexError(TodoError, IndexError):
    """Raised when a 0-based index does not address a todo."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            f"Invalid todo at position {index + 1} "
            f"(the list has {length} todo(s))"
        )


class PreconditionError(TodoError):
    """Raised when a pending todo is deleted without confirmation."""

    def __init__(self, todo: "Todo") -> None:
        self.todo = todo
        super().__init__(f"Todo is not yet completed: {todo.title}")


class InvalidInputError(TodoError, ValueError):
    """Raised for rejected user input, including a declined confirmation."""


class ConfigError(TodoError, ValueError):
    """Raised when configuration cannot be loaded."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        prefix = f"{self.path}: " if self.path is not None else ""
        super().__init__(f"{prefix}{message}")


__all__ = [
    "TodoError",
    "ParseError",
    "StorageIOError",
    "DuplicateError",
    "EmptyListError",
    "TodoIndexError",
    "PreconditionError",
    "InvalidInputError",
    "ConfigError",
]
