"""MCP tool that writes text files into the configured store.

Registers the 'write_file' tool which replaces a file's contents,
creating missing parent directories along the way.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from config import STORE_BACKEND, STORE_ROOT
from core.errors import ValidationError
from core.interfaces import FileStore
from stores.store_factory import get_file_store


def register(mcp: FastMCP, *, store: Optional[FileStore] = None) -> None:
    @mcp.tool(name="write_file")
    async def write_file(path: str = "", content: str = "") -> str:
        """Write text to a file in the store, replacing existing content.

        Params:
          - path: file path relative to the store root (required).
          - content: full text to write.

        Returns:
          A short confirmation with the path and number of characters written.

        Raises:
          ValidationError for a missing path; WriteError when directories or
          the file cannot be created.
        """
        if not path or not path.strip():
            raise ValidationError("Missing file path")

        src = store or get_file_store(STORE_BACKEND, root=STORE_ROOT)
        await src.write(path, content)

        return f"Wrote {len(content)} characters to {path}"
