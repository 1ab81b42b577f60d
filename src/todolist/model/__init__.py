"""Todo data model.

Exports the ``Todo`` entity and the serializer used for persistence and
for the machine-readable ``list`` output formats.
"""
from __future__ import annotations

from todolist.model.serializer import TodoSerializer
from todolist.model.todo import Todo

__all__ = [
    "Todo",
    "TodoSerializer",
]
