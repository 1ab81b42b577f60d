#!/usr/bin/env python3
"""Example: Quickstart

Demonstrates the todolist library API against a temporary todo file:
creating todos, completing them, handling errors and deleting.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install todolist-cli
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import todolist


def main() -> None:
    with tempfile.TemporaryDirectory() as workdir:
        path = Path(workdir) / "todos.json"
        service = todolist.open_service(path)

        # Step 1: Create a few todos
        for title in ("Buy milk", "Write report", "Call mum"):
            service.create(title)

        # Step 2: Complete one of them (indices are 0-based in the API)
        service.complete(1)
        for position, todo in enumerate(service.list(), start=1):
            print(todo.display(position))

        # Step 3: Errors are raised as TodoError subclasses
        try:
            service.create("Buy milk")
        except todolist.DuplicateError as exc:
            print(f"Refused: {exc}")
        try:
            service.delete(0)
        except todolist.PreconditionError as exc:
            print(f"Refused: {exc}")

        # Step 4: Delete the completed todo and show the stored JSON
        removed = service.delete(1)
        print(f"Deleted: {removed.title}")
        print(path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
