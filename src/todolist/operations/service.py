"""Todo list operations.

``TodoService`` applies create, complete/uncomplete, delete and list to
the collection held by a ``StorageBackend``.  Each mutating call loads
the full list, validates the request against it, applies the change and
saves the full list back.  Errors are raised as ``TodoError`` subclasses
and nothing is written when validation fails.

Indices are 0-based here; the CLI converts from the 1-based numbers
users see.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from todolist.errors import (
    DuplicateError,
    EmptyListError,
    InvalidInputError,
    PreconditionError,
    TodoIndexError,
)
from todolist.model.todo import Todo
from todolist.storage.backends import StorageBackend

logger = logging.getLogger(__name__)

Confirm = Callable[[Todo], bool]


class DeletePolicy(Enum):
    """What ``TodoService.delete`` does with a todo that is not completed.

    REQUIRE_COMPLETED
        Refuse with ``PreconditionError``.
    CONFIRM
        Ask the confirmation callback; delete on yes, raise
        ``InvalidInputError`` on no.
    """

    REQUIRE_COMPLETED = "require-completed"
    CONFIRM = "confirm"


class TodoService:
    """Validating operations over a todo storage backend.

    Parameters
    ----------
    storage:
        Backend holding the todo list.
    delete_policy:
        How deletion of pending todos is handled.
    confirm:
        Callback asked before deleting a pending todo under
        ``DeletePolicy.CONFIRM``.  Without one, such deletes fail with
        ``PreconditionError`` as if the policy were REQUIRE_COMPLETED.
    """

    def __init__(
        self,
        storage: StorageBackend,
        delete_policy: DeletePolicy = DeletePolicy.REQUIRE_COMPLETED,
        confirm: Confirm | None = None,
    ) -> None:
        self._storage = storage
        self._delete_policy = delete_policy
        self._confirm = confirm

    @property
    def storage(self) -> StorageBackend:
        return self._storage

    @property
    def delete_policy(self) -> DeletePolicy:
        return self._delete_policy

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> list[Todo]:
        """Return all todos in display order."""
        return self._storage.load()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, title: str) -> Todo:
        """Append a new pending todo and return it.

        Raises
        ------
        InvalidInputError
            If ``title`` is empty or only whitespace.
        DuplicateError
            If a pending todo with the same title already exists.
        """
        if not title.strip():
            raise InvalidInputError("Todo title must not be empty")

        todo = Todo(title=title)
        todos = self._storage.load()
        if todo in todos:
            raise DuplicateError(todo)

        todos.append(todo)
        self._storage.save(todos)
        logger.debug("Created todo %r at position %d", title, len(todos))
        return todo

    def set_state(self, index: int, completed: bool) -> Todo:
        """Set the completion flag of the todo at ``index``.

        Raises
        ------
        EmptyListError
            If there are no todos.
        TodoIndexError
            If ``index`` is out of range.
        """
        todos = self._storage.load()
        if not todos:
            raise EmptyListError()
        self._check_index(index, todos)

        updated = todos[index].with_state(completed)
        todos[index] = updated
        self._storage.save(todos)
        logger.debug("Set todo %d completed=%s", index + 1, completed)
        return updated

    def complete(self, index: int) -> Todo:
        """Mark the todo at ``index`` as completed."""
        return self.set_state(index, True)

    def uncomplete(self, index: int) -> Todo:
        """Mark the todo at ``index`` as pending again."""
        return self.set_state(index, False)

    def delete(self, index: int) -> Todo:
        """Remove the todo at ``index`` and return it.

        Raises
        ------
        TodoIndexError
            If ``index`` is out of range.
        PreconditionError
            If the todo is pending and the policy does not allow an
            override.
        InvalidInputError
            If the todo is pending and the user declined the deletion.
        """
        todos = self._storage.load()
        self._check_index(index, todos)

        todo = todos[index]
        if not todo.completed:
            self._authorize_pending_delete(todo)

        del todos[index]
        self._storage.save(todos)
        logger.debug("Deleted todo %r from position %d", todo.title, index + 1)
        return todo

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _authorize_pending_delete(self, todo: Todo) -> None:
        if self._delete_policy is DeletePolicy.REQUIRE_COMPLETED or self._confirm is None:
            raise PreconditionError(todo)
        if not self._confirm(todo):
            logger.debug("Deletion of pending todo %r declined", todo.title)
            raise InvalidInputError(f"Deletion of {todo.title!r} was not confirmed")

    @staticmethod
    def _check_index(index: int, todos: list[Todo]) -> None:
        if not 0 <= index < len(todos):
            raise TodoIndexError(index, len(todos))
