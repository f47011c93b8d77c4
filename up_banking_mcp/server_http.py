#!/usr/bin/env python3
"""
MCP HTTP/SSE Server

Same tools as the stdio server, served over SSE for clients that connect
over the network.

Run with: up-banking-mcp-http (or: up-banking-mcp --transport sse)

Configuration:
- UP_API_TOKEN: Up personal access token (required)
- HOST: Bind address (default: 127.0.0.1)
- PORT: Server port (default: 5002)
"""
import logging
import signal
import sys

import uvicorn
from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .adapters.mcp import MCPHandlers
from .config import get_api_config, get_host, get_log_level, get_port
from .container import Container
from .core.errors import ConfigError
from .logging_config import setup_logging
from .server import build_server

logger = logging.getLogger(__name__)


def create_app(handlers: MCPHandlers) -> Starlette:
    """Build the Starlette app: /ping health check, /sse stream, /messages/ posts"""
    mcp_server = build_server(handlers)

    # SSE transport for multi-client support
    sse_transport = SseServerTransport("/messages/")

    async def handle_ping(request: Request) -> Response:
        """Health check endpoint"""
        return JSONResponse({"status": "ok"})

    async def handle_sse(request: Request) -> Response:
        """SSE endpoint for MCP communication"""
        client_addr = request.client.host if request.client else "unknown"
        logger.info(f"SSE connect from {client_addr}")
        async with sse_transport.connect_sse(
            request.scope, request.receive, request._send
        ) as streams:
            logger.info(f"SSE session started for {client_addr}")
            await mcp_server.run(
                streams[0], streams[1], mcp_server.create_initialization_options()
            )
            logger.info(f"SSE disconnect from {client_addr}")
        return Response()

    routes = [
        Route("/ping", handle_ping),
        Route("/sse", handle_sse),
        Mount("/messages/", app=sse_transport.handle_post_message),
    ]

    return Starlette(routes=routes)


# Graceful shutdown on SIGTERM
def handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


def serve(handlers: MCPHandlers, host: str, port: int) -> None:
    """Run the SSE app under uvicorn until interrupted"""
    signal.signal(signal.SIGTERM, handle_sigterm)
    logger.info(f"Starting MCP HTTP server on http://{host}:{port}")
    uvicorn.run(create_app(handlers), host=host, port=port)


def main() -> int:
    try:
        setup_logging(get_log_level())
    except ConfigError as e:
        setup_logging()
        logger.error(f"Fatal error: {e}")
        return 1
    try:
        container = Container(get_api_config())
        host, port = get_host(), get_port()
    except ConfigError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    serve(MCPHandlers(container), host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
