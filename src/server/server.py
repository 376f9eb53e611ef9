"""Server bootstrap for the filez MCP service.

Creates the FastMCP instance, builds the configured FileStore, injects
it into the tools and starts the MCP server (stdio transport).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from config import LOG_LEVEL, STORE_BACKEND, STORE_ROOT
from stores.store_factory import get_file_store

from tools.list_files import register as register_list_files
from tools.read_file import register as register_read_file
from tools.write_file import register as register_write_file

mcp = FastMCP("filez-mcp")


def register_tools() -> None:
    store = get_file_store(STORE_BACKEND, root=STORE_ROOT)

    register_list_files(mcp, store=store)
    register_read_file(mcp, store=store)
    register_write_file(mcp, store=store)


register_tools()


def main() -> None:
    # stdout is the protocol channel
    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
