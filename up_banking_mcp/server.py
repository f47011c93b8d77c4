"""
Up Banking MCP Server (stdio)

MCP delivery layer - lists TOOL_SCHEMAS and routes tool calls to MCPHandlers.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import asyncio
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from . import __version__
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .config import get_api_config, get_host, get_log_level, get_port
from .container import Container
from .core.errors import ConfigError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "up-banking-server"


def build_server(handlers: MCPHandlers) -> Server:
    """Create the MCP server and register the tools capability"""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available MCP tools"""
        return [Tool(**schema) for schema in TOOL_SCHEMAS.values()]

    # Arguments are coerced by the handlers, so skip the SDK's strict schema check
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Handle tool calls"""
        return await handlers.call_tool(name, arguments)

    return server


async def run_stdio(handlers: MCPHandlers) -> None:
    """Serve over stdin/stdout until the client disconnects"""
    server = build_server(handlers)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Up Banking MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> int:
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="up-banking-mcp: Up Banking accounts, transactions and categories as MCP tools."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "sse"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to for SSE transport (default: $HOST or 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to for SSE transport (default: $PORT or 5002)"
    )
    args = parser.parse_args()

    try:
        setup_logging(get_log_level())
    except ConfigError as e:
        setup_logging()
        logger.error(f"Fatal error: {e}")
        return 1

    try:
        container = Container(get_api_config())
    except ConfigError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    handlers = MCPHandlers(container)

    if args.transport == "sse":
        from .server_http import serve
        try:
            host = args.host or get_host()
            port = args.port if args.port is not None else get_port()
        except ConfigError as e:
            logger.error(f"Fatal error: {e}")
            return 1
        serve(handlers, host=host, port=port)
        return 0

    try:
        asyncio.run(run_stdio(handlers))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
