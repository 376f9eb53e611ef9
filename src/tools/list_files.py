"""MCP tool that lists files from the configured store.

Registers the 'list_files' tool which adapts FileStore implementations
(rooted/memory) to the MCP tool interface.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from config import STORE_BACKEND, STORE_ROOT
from core.interfaces import FileStore
from stores.store_factory import get_file_store


def register(mcp: FastMCP, *, store: Optional[FileStore] = None) -> None:
    @mcp.tool(name="list_files")
    async def list_files(glob: str = "**/*") -> List[str]:
        """List regular files in the store matching a glob pattern.

        Params:
          - glob: pattern relative to the store root (default: "**/*").
            Supports '*', '**', '?' and '[...]' classes.

        Returns:
          List of file paths relative to the store root.

        Raises:
          ListError when the pattern is malformed or a directory cannot be read.
        """
        src = store or get_file_store(STORE_BACKEND, root=STORE_ROOT)

        # list() is synchronous; run it off the event loop
        return await asyncio.to_thread(src.list, glob)
