"""todolist — a command-line todo list manager backed by a local JSON file.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import todolist

    service = todolist.open_service("todos.json")
    service.create("Buy milk")
    service.complete(0)
    for position, todo in enumerate(service.list(), start=1):
        print(todo.display(position))
    service.delete(0)

    todolist.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path

__version__: str = "0.1.0"

from todolist.errors import (  # noqa: E402
    ConfigError,
    DuplicateError,
    EmptyListError,
    InvalidInputError,
    ParseError,
    PreconditionError,
    StorageIOError,
    TodoError,
    TodoIndexError,
)
from todolist.model import Todo, TodoSerializer  # noqa: E402
from todolist.operations import Confirm, DeletePolicy, TodoService  # noqa: E402
from todolist.storage import JsonFileStorage, MemoryStorage, StorageBackend  # noqa: E402


def open_service(
    path: Path | str = "todos.json",
    delete_policy: DeletePolicy = DeletePolicy.REQUIRE_COMPLETED,
    confirm: Confirm | None = None,
) -> TodoService:
    """Return a ``TodoService`` over the JSON file at ``path``.

    Parameters
    ----------
    path:
        Todo file location, created on first access.
    delete_policy:
        How deletion of pending todos is handled.
    confirm:
        Confirmation callback used under ``DeletePolicy.CONFIRM``.
    """
    return TodoService(JsonFileStorage(path), delete_policy=delete_policy, confirm=confirm)


__all__ = [
    "__version__",
    "open_service",
    "Todo",
    "TodoSerializer",
    "TodoService",
    "DeletePolicy",
    "Confirm",
    "StorageBackend",
    "JsonFileStorage",
    "MemoryStorage",
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
