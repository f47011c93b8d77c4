"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- up_api.py: httpx-based Up Banking API client
- mcp/: MCP tool schemas and handlers
"""
from .up_api import UpApiClient

__all__ = [
    "UpApiClient",
]
