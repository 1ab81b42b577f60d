"""The ``Todo`` entity.

A todo is a title plus a completion flag.  Instances are frozen so that
two todos compare equal exactly when both fields match, which is what
the duplicate check on insert relies on.
"""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Todo:
    """A single entry on the todo list.

    Parameters
    ----------
    title:
        Free-form text describing the task.
    completed:
        ``True`` once the task has been marked as done.
    """

    title: str
    completed: bool = False

    def with_state(self, completed: bool) -> "Todo":
        """Return a copy of this todo with ``completed`` set."""
        return replace(self, completed=completed)

    def display(self, position: int) -> str:
        """Render the todo as a numbered list line.

        ``position`` is the 1-based number shown to the user.
        """
        symbol = "[X]" if self.completed else "[]"
        return f"{position}. {symbol} {self.title}"
