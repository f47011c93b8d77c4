"""
Up API Adapter

Implements BankingApi port over the Up REST API using httpx.
"""
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .. import __version__
from ..core.domain import (
    AccountFilters,
    CategoryFilters,
    QueryParams,
    TransactionFilters,
    UpApiConfig,
    build_endpoint,
)
from ..core.errors import UpApiError
from ..core.ports import BankingApi

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Escape an identifier so it stays a single path segment"""
    return quote(value, safe="")


class UpApiClient(BankingApi):
    """Up Banking API client (one GET per call, no shared state)"""

    def __init__(self, config: UpApiConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"up-banking-mcp/{__version__}",
        }

    async def _get(self, path: str, params: Optional[QueryParams] = None) -> dict[str, Any]:
        """GET base_url + path, return decoded JSON or raise UpApiError"""
        endpoint = build_endpoint(path, params or [])
        url = f"{self.config.base_url}{endpoint}"
        logger.debug(f"GET {url}")

        async with httpx.AsyncClient(
            headers=self.headers,
            timeout=self.config.timeout,
            transport=self._transport,
        ) as client:
            response = await client.get(url)

        if not response.is_success:
            logger.warning(f"GET {endpoint} -> {response.status_code}")
            raise UpApiError(response.status_code, response.reason_phrase, response.text)

        return response.json()

    async def ping(self) -> dict[str, Any]:
        return await self._get("/util/ping")

    async def list_accounts(self, filters: Optional[AccountFilters] = None) -> dict[str, Any]:
        filters = filters or AccountFilters()
        return await self._get("/accounts", filters.to_params())

    async def get_account(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/accounts/{_segment(account_id)}")

    async def list_transactions(self, filters: Optional[TransactionFilters] = None) -> dict[str, Any]:
        filters = filters or TransactionFilters()
        if filters.account_id:
            path = f"/accounts/{_segment(filters.account_id)}/transactions"
        else:
            path = "/transactions"
        return await self._get(path, filters.to_params())

    async def get_transaction(self, transaction_id: str) -> dict[str, Any]:
        return await self._get(f"/transactions/{_segment(transaction_id)}")

    async def list_categories(self, filters: Optional[CategoryFilters] = None) -> dict[str, Any]:
        filters = filters or CategoryFilters()
        return await self._get("/categories", filters.to_params())

    async def get_category(self, category_id: str) -> dict[str, Any]:
        return await self._get(f"/categories/{_segment(category_id)}")
