"""MCP tool that reads text files from the configured store.

Registers the 'read_file' tool which returns file contents with a
max size and validates inputs before delegating to a FileStore.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from config import MAX_FILE_CHARS, STORE_BACKEND, STORE_ROOT
from core.errors import ValidationError
from core.interfaces import FileStore
from stores.store_factory import get_file_store


def register(mcp: FastMCP, *, store: Optional[FileStore] = None) -> None:
    @mcp.tool(name="read_file")
    async def read_file(path: str = "", max_chars: int = MAX_FILE_CHARS) -> str:
        """Read a text file from the store and return its UTF-8 contents.

        Parameters:
          - path: file path relative to the store root (required).
          - max_chars: maximum characters to return (default from config).

        Returns:
          The file contents. If the content exceeds max_chars it will be
          truncated and the suffix "\n\n...[TRUNCATED]..." appended.

        Raises:
          ValidationError for a missing path; ReadError when the file cannot
          be opened, read or decoded.
        """
        if not path or not path.strip():
            raise ValidationError("Missing file path")

        src = store or get_file_store(STORE_BACKEND, root=STORE_ROOT)
        data = await src.read(path)

        if len(data) > max_chars:
            # Truncate long files to avoid returning huge payloads
            return data[:max_chars] + "\n\n...[TRUNCATED]..."
        return data
