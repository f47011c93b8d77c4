"""
Core - Domain logic and ports

This package contains:
- domain.py: Config and filter models
- errors.py: Exception hierarchy
- ports.py: Port interface (abstraction over the banking API)
- services.py: Application services (use cases)
"""
from .domain import (
    ACCOUNT_TYPES,
    OWNERSHIP_TYPES,
    TRANSACTION_STATUSES,
    AccountFilters,
    CategoryFilters,
    ConnectionReport,
    TransactionFilters,
    UpApiConfig,
)
from .errors import ConfigError, ToolError, UpApiError, UpBankingError
from .ports import BankingApi
from .services import ConnectionCheckService

__all__ = [
    # Domain models
    "ACCOUNT_TYPES",
    "OWNERSHIP_TYPES",
    "TRANSACTION_STATUSES",
    "AccountFilters",
    "CategoryFilters",
    "ConnectionReport",
    "TransactionFilters",
    "UpApiConfig",
    # Errors
    "ConfigError",
    "ToolError",
    "UpApiError",
    "UpBankingError",
    # Ports
    "BankingApi",
    # Services
    "ConnectionCheckService",
]
