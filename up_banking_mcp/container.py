"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import Optional

import httpx

from .adapters import UpApiClient
from .core import ConnectionCheckService, UpApiConfig


class Container:
    """Dependency injection container for the application"""

    def __init__(self, config: UpApiConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config

        # Adapters (infrastructure)
        self.client = UpApiClient(config, transport=transport)

        # Services (use cases)
        self.check_connection = ConnectionCheckService(api=self.client)
