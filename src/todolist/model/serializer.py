"""Conversion between ``Todo`` lists and their JSON/YAML text forms.

The on-disk format is a JSON array of objects with exactly the keys
``title`` (string) and ``completed`` (boolean)::

    [
      {
        "title": "Buy milk",
        "completed": false
      }
    ]

Unknown keys on an entry are ignored when reading.

Usage
-----
::

    from todolist.model.serializer import TodoSerializer

    serializer = TodoSerializer()
    text = serializer.to_json(todos)
    assert serializer.from_json(text) == todos
"""
from __future__ import annotations

import json
from collections.abc import Sequence

import yaml

from todolist.errors import ParseError
from todolist.model.todo import Todo


class TodoSerializer:
    """Converts between ``Todo`` objects and plain Python structures.

    Parameters
    ----------
    source:
        Optional label (usually a file path) included in ``ParseError``
        messages.
    """

    def __init__(self, source: str | None = None) -> None:
        self._source = source

    # ------------------------------------------------------------------
    # Serialization (Todo -> dict)
    # ------------------------------------------------------------------

    def to_dict(self, todo: Todo) -> dict[str, object]:
        """Serialize a ``Todo`` to a JSON-compatible dict."""
        return {"title": todo.title, "completed": todo.completed}

    def to_list(self, todos: Sequence[Todo]) -> list[dict[str, object]]:
        """Serialize a sequence of todos, preserving order."""
        return [self.to_dict(todo) for todo in todos]

    def to_json(self, todos: Sequence[Todo], indent: int = 2) -> str:
        """Serialize todos to pretty-printed JSON text."""
        return json.dumps(self.to_list(todos), indent=indent, ensure_ascii=False)

    def to_yaml(self, todos: Sequence[Todo]) -> str:
        """Serialize todos to YAML text."""
        return yaml.dump(
            self.to_list(todos),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    # ------------------------------------------------------------------
    # Deserialization (dict -> Todo)
    # ------------------------------------------------------------------

    def from_dict(self, data: object, position: int = 1) -> Todo:
        """Build a ``Todo`` from one decoded entry.

        ``position`` is the 1-based entry number used in error messages.
        """
        if not isinstance(data, dict):
            raise self._error(f"entry {position} is not an object")
        title = data.get("title")
        completed = data.get("completed")
        if not isinstance(title, str):
            raise self._error(f"entry {position} has no string 'title'")
        if not isinstance(completed, bool):
            raise self._error(f"entry {position} has no boolean 'completed'")
        return Todo(title=title, completed=completed)

    def from_list(self, data: object) -> list[Todo]:
        """Build todos from a decoded document, which must be an array."""
        if not isinstance(data, list):
            raise self._error(
                f"expected an array of todos, got {type(data).__name__}"
            )
        return [self.from_dict(item, position) for position, item in enumerate(data, 1)]

    def from_json(self, text: str) -> list[Todo]:
        """Deserialize todos from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise self._error(str(exc)) from exc
        return self.from_list(data)

    def from_yaml(self, text: str) -> list[Todo]:
        """Deserialize todos from YAML text."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise self._error(str(exc)) from exc
        return self.from_list(data)

    def _error(self, message: str) -> ParseError:
        return ParseError(message, source=self._source)
