"""Earth Class Mail MCP server entry point.

Connects an MCP host (e.g. Claude Desktop) to the Earth Class Mail API over
stdio.

Setup:
  1. pip install earthclassmail-mcp
  2. Generate an API key: Earth Class Mail → Settings → Integrations
  3. Set EARTHCLASSMAIL_API_KEY in the host's server config
  4. Run ``earthclassmail-mcp`` (or ``python -m earthclassmail_mcp``)
"""

import logging
import sys
from typing import Any, Dict, List

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from earthclassmail_mcp import __version__
from earthclassmail_mcp.catalog import TOOLS
from earthclassmail_mcp.client import EarthClassMailClient
from earthclassmail_mcp.config import API_KEY_HELP, ConfigError, Settings, load_settings
from earthclassmail_mcp.dispatcher import ToolDispatcher

SERVER_NAME = "earthclassmail-mcp"

logger = logging.getLogger(__name__)


def build_server(settings: Settings) -> Server:
    """Wire the client and dispatcher into a low-level MCP server."""
    client = EarthClassMailClient(settings.api_key, base_url=settings.base_url)
    dispatcher = ToolDispatcher(client)
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return TOOLS

    # The dispatcher parses arguments itself and returns a finished
    # CallToolResult, isError included.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        return await dispatcher.dispatch(name, arguments)

    return server


async def _run(server: Server) -> None:
    initialization_options = server.create_initialization_options()
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, initialization_options)


def main() -> None:
    # stdout carries the MCP stream; logs go to stderr.
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(API_KEY_HELP, file=sys.stderr)
        sys.exit(1)

    logger.info("Starting %s %s", SERVER_NAME, __version__)
    anyio.run(_run, build_server(settings))


if __name__ == "__main__":
    main()
