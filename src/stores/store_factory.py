"""Factories for FileStore implementations.

`live` builds the on-disk store for a root directory; `get_file_store`
selects a backend by name for the server and tools.
"""

from __future__ import annotations

from typing import Literal, Optional

from core.errors import ValidationError
from core.interfaces import FileStore
from stores.memory_store import MemoryFileStore
from stores.rooted_store import RootedFileStore

StoreBackend = Literal["rooted", "memory"]


def live(root: str) -> FileStore:
    """Return a FileStore rooted at `root`. The directory need not exist yet."""
    return RootedFileStore(root)


def get_file_store(
    backend: Optional[StoreBackend] = None,
    *,
    root: str = ".",
) -> FileStore:
    """
    Factory that returns the FileStore implementation for a backend name.

    - "rooted" (default): files under `root` on disk.
    - "memory": an empty in-memory store; `root` is ignored.
    """
    name = (backend or "rooted").strip().lower()

    if name == "rooted":
        return live(root)
    if name == "memory":
        return MemoryFileStore()

    raise ValidationError(f"Unknown store backend: {backend}")
