"""Todo list operations: the validating layer between CLI and storage."""
from __future__ import annotations

from todolist.operations.service import Confirm, DeletePolicy, TodoService

__all__ = [
    "Confirm",
    "DeletePolicy",
    "TodoService",
]
