"""Unit tests for todolist.operations.service — TodoService and
DeletePolicy.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from todolist.errors import (
    DuplicateError,
    EmptyListError,
    InvalidInputError,
    PreconditionError,
    TodoIndexError,
)
from todolist.model.todo import Todo
from todolist.operations.service import DeletePolicy, TodoService
from todolist.storage.backends import JsonFileStorage, MemoryStorage


def _service(
    todos: list[Todo] | None = None,
    policy: DeletePolicy = DeletePolicy.REQUIRE_COMPLETED,
    confirm=None,
) -> tuple[TodoService, MemoryStorage]:
    storage = MemoryStorage(todos or [])
    return TodoService(storage, delete_policy=policy, confirm=confirm), storage


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_fresh_storage_is_empty(self) -> None:
        service, _ = _service()
        assert service.list() == []

    def test_returns_todos_in_order(self, sample_todos: list[Todo]) -> None:
        service, _ = _service(sample_todos)
        assert service.list() == sample_todos

    def test_fresh_file_is_empty(self, todo_file: Path) -> None:
        assert TodoService(JsonFileStorage(todo_file)).list() == []


# ===========================================================================
# create
# ===========================================================================


class TestCreate:
    def test_on_empty_list(self) -> None:
        service, storage = _service()
        created = service.create("Buy milk")
        assert created == Todo("Buy milk", completed=False)
        assert storage.load() == [Todo("Buy milk")]

    def test_appends_at_end(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos)
        service.create("New one")
        assert storage.load()[-1] == Todo("New one")
        assert len(storage.load()) == 4

    def test_duplicate_pending_title_fails(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos)
        with pytest.raises(DuplicateError) as exc_info:
            service.create("Buy milk")
        assert exc_info.value.todo == Todo("Buy milk")
        assert storage.save_count == 0

    def test_same_title_as_completed_todo_is_allowed(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos)
        service.create("Write report")
        assert storage.load()[-1] == Todo("Write report", completed=False)

    @pytest.mark.parametrize("title", ["", "   ", "\t"])
    def test_blank_title_fails(self, title: str) -> None:
        service, storage = _service()
        with pytest.raises(InvalidInputError):
            service.create(title)
        assert storage.save_count == 0

    def test_persists_to_file(self, todo_file: Path) -> None:
        TodoService(JsonFileStorage(todo_file)).create("a")
        assert JsonFileStorage(todo_file).load() == [Todo("a")]


# ===========================================================================
# set_state / complete / uncomplete
# ===========================================================================


class TestSetState:
    def test_complete(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos)
        updated = service.set_state(0, True)
        assert updated == Todo("Buy milk", completed=True)
        assert storage.load()[0].completed is True

    def test_complete_then_uncomplete_restores(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos)
        service.complete(2)
        service.uncomplete(2)
        assert storage.load() == sample_todos

    def test_other_todos_untouched(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos)
        service.complete(0)
        assert storage.load()[1:] == sample_todos[1:]

    def test_empty_list_fails(self) -> None:
        service, _ = _service()
        with pytest.raises(EmptyListError):
            service.set_state(0, True)

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_out_of_range_fails(self, sample_todos: list[Todo], index: int) -> None:
        service, storage = _service(sample_todos)
        with pytest.raises(TodoIndexError) as exc_info:
            service.set_state(index, True)
        assert exc_info.value.index == index
        assert exc_info.value.length == 3
        assert storage.save_count == 0

    def test_index_error_is_builtin_index_error(self, sample_todos: list[Todo]) -> None:
        service, _ = _service(sample_todos)
        with pytest.raises(IndexError):
            service.complete(5)


# ===========================================================================
# delete
# ===========================================================================


class TestDeleteRequireCompleted:
    def test_deletes_completed_todo(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos)
        removed = service.delete(1)
        assert removed == Todo("Write report", completed=True)
        assert storage.load() == [Todo("Buy milk"), Todo("Call mum")]

    def test_pending_todo_fails(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos)
        with pytest.raises(PreconditionError) as exc_info:
            service.delete(0)
        assert exc_info.value.todo == Todo("Buy milk")
        assert storage.load() == sample_todos

    def test_confirm_callback_is_ignored(self, sample_todos: list[Todo]) -> None:
        service, _ = _service(sample_todos, confirm=lambda todo: True)
        with pytest.raises(PreconditionError):
            service.delete(0)

    @pytest.mark.parametrize("index", [3, -1])
    def test_out_of_range_leaves_list_unchanged(self, sample_todos: list[Todo], index: int) -> None:
        service, storage = _service(sample_todos)
        with pytest.raises(TodoIndexError):
            service.delete(index)
        assert storage.load() == sample_todos
        assert storage.save_count == 0

    def test_empty_list_is_index_error(self) -> None:
        service, _ = _service()
        with pytest.raises(TodoIndexError):
            service.delete(0)


class TestDeleteConfirm:
    def test_confirmed_pending_todo_is_deleted(self, sample_todos: list[Todo]) -> None:
        asked: list[Todo] = []

        def confirm(todo: Todo) -> bool:
            asked.append(todo)
            return True

        service, storage = _service(sample_todos, DeletePolicy.CONFIRM, confirm)
        assert service.delete(0) == Todo("Buy milk")
        assert asked == [Todo("Buy milk")]
        assert len(storage.load()) == 2

    def test_declined_raises_invalid_input(self, sample_todos: list[Todo]) -> None:
        service, storage = _service(sample_todos, DeletePolicy.CONFIRM, lambda todo: False)
        with pytest.raises(InvalidInputError):
            service.delete(2)
        assert storage.load() == sample_todos

    def test_completed_todo_is_not_confirmed(self, sample_todos: list[Todo]) -> None:
        def confirm(todo: Todo) -> bool:
            raise AssertionError("should not be asked")

        service, _ = _service(sample_todos, DeletePolicy.CONFIRM, confirm)
        assert service.delete(1).completed is True

    def test_without_callback_behaves_like_require_completed(self, sample_todos: list[Todo]) -> None:
        service, _ = _service(sample_todos, DeletePolicy.CONFIRM)
        with pytest.raises(PreconditionError):
            service.delete(0)


class TestDeletePolicy:
    def test_values(self) -> None:
        assert DeletePolicy("require-completed") is DeletePolicy.REQUIRE_COMPLETED
        assert DeletePolicy("confirm") is DeletePolicy.CONFIRM

    def test_service_defaults(self) -> None:
        service = TodoService(MemoryStorage())
        assert service.delete_policy is DeletePolicy.REQUIRE_COMPLETED
        assert isinstance(service.storage, MemoryStorage)
