"""
Ports - Interfaces for external dependencies

These define HOW the core talks to the bank,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

from .domain import AccountFilters, CategoryFilters, TransactionFilters

JsonDocument = dict[str, Any]


class BankingApi(ABC):
    """Port for the read-only banking data API"""

    @abstractmethod
    async def ping(self) -> JsonDocument:
        """Check the token is accepted, return {"meta": {...}}"""
        pass

    @abstractmethod
    async def list_accounts(self, filters: Optional[AccountFilters] = None) -> JsonDocument:
        """List accounts, optionally filtered by type/ownership"""
        pass

    @abstractmethod
    async def get_account(self, account_id: str) -> JsonDocument:
        """Get a single account"""
        pass

    @abstractmethod
    async def list_transactions(self, filters: Optional[TransactionFilters] = None) -> JsonDocument:
        """List transactions, newest first, across all accounts or one"""
        pass

    @abstractmethod
    async def get_transaction(self, transaction_id: str) -> JsonDocument:
        """Get a single transaction"""
        pass

    @abstractmethod
    async def list_categories(self, filters: Optional[CategoryFilters] = None) -> JsonDocument:
        """List categories, optionally only children of a parent"""
        pass

    @abstractmethod
    async def get_category(self, category_id: str) -> JsonDocument:
        """Get a single category"""
        pass
