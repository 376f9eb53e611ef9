"""Core protocol and interface definitions.

Defines the FileStore protocol implemented by the rooted (on-disk) and
in-memory stores, and consumed by the MCP tools.
"""

from __future__ import annotations

from typing import List, Protocol


class FileStore(Protocol):
    """Contract for any file store (rooted directory, in-memory, etc.).

    Paths and glob expressions are relative to the store's root. `read` and
    `write` are coroutines; `list` is synchronous.
    """

    async def read(self, path: str) -> str:
        """Return the full text of `path`. Raises ReadError."""
        ...

    async def write(self, path: str, content: str) -> None:
        """Replace `path` with `content`, creating parents. Raises WriteError."""
        ...

    def list(self, expression: str) -> List[str]:
        """Return regular files matching `expression`. Raises ListError."""
        ...
