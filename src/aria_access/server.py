"""MCP server (stdio transport) exposing the ARIA tools.

The tool list is generated from the declarative tool table, and every call
is answered with exactly one text block. Tool failures are reported inside
that text, so the calling agent always gets a completed response.

Usage:
    aria-access            # console script
    python -m aria_access

Configuration via environment variables (see config.py). Logs go to
stderr; stdout carries the protocol.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from aria_access.aria_client import AriaClient, close_client
from aria_access.config import LOG_LEVEL
from aria_access.tools import ALL_TOOLS, call_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "aria-access"


def tool_definitions() -> list[Tool]:
    """MCP descriptions of every tool, in catalogue order."""
    return [
        Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema())
        for tool in ALL_TOOLS
    ]


def create_mcp_server(
    server_name: str = SERVER_NAME,
    client: AriaClient | None = None,
) -> Server:
    """Create a configured MCP server instance.

    Args:
        server_name: Name reported to MCP clients.
        client: Session to run tools against. Defaults to the shared
            session from get_client().
    """
    server = Server(server_name)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return tool_definitions()

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        text = await call_tool(name, arguments, client=client)
        return [TextContent(type="text", text=text)]

    return server


async def serve() -> None:
    """Run the MCP server on stdio until the client disconnects."""
    server = create_mcp_server()
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("ARIA Access MCP server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await close_client()


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        print("\nServer stopped by user", file=sys.stderr)
        sys.exit(0)
    except Exception as e:  # noqa: BLE001
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
