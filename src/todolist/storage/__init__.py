"""Todo storage backends."""
from __future__ import annotations

from todolist.storage.backends import (
    DEFAULT_PATH,
    JsonFileStorage,
    MemoryStorage,
    StorageBackend,
)

__all__ = [
    "DEFAULT_PATH",
    "StorageBackend",
    "JsonFileStorage",
    "MemoryStorage",
]
