"""
Domain Models - Pure business entities

No external dependencies. Filters know how to render themselves as the
query parameters the Up API expects; everything else is passthrough JSON.
"""
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

DEFAULT_BASE_URL = "https://api.up.com.au/api/v1"
DEFAULT_TIMEOUT = 30.0

ACCOUNT_TYPES = ("SAVER", "TRANSACTIONAL", "HOME_LOAN")
OWNERSHIP_TYPES = ("INDIVIDUAL", "JOINT")
TRANSACTION_STATUSES = ("HELD", "SETTLED")

QueryParams = list[tuple[str, str]]


def _pairs(*items: tuple[str, Optional[Any]]) -> QueryParams:
    """Drop unset values, keep order"""
    return [(key, str(value)) for key, value in items if value not in (None, "")]


def build_endpoint(path: str, params: QueryParams) -> str:
    """Append a form-encoded query string to path, if there is one"""
    if not params:
        return path
    return f"{path}?{urlencode(params)}"


@dataclass
class UpApiConfig:
    """Connection settings for the Up API"""
    api_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")


@dataclass
class AccountFilters:
    """Filters for listing accounts"""
    account_type: Optional[str] = None  # SAVER, TRANSACTIONAL, HOME_LOAN
    ownership_type: Optional[str] = None  # INDIVIDUAL, JOINT

    def to_params(self) -> QueryParams:
        return _pairs(
            ("filter[accountType]", self.account_type),
            ("filter[ownershipType]", self.ownership_type),
        )


@dataclass
class TransactionFilters:
    """Filters for listing transactions

    account_id picks the endpoint rather than adding a query parameter.
    since/until are RFC 3339 date-times, passed through untouched.
    """
    account_id: Optional[str] = None
    status: Optional[str] = None  # HELD, SETTLED
    since: Optional[str] = None
    until: Optional[str] = None
    category: Optional[str] = None
    tag: Optional[str] = None
    page_size: Optional[int] = None

    def to_params(self) -> QueryParams:
        return _pairs(
            ("filter[status]", self.status),
            ("filter[since]", self.since),
            ("filter[until]", self.until),
            ("filter[category]", self.category),
            ("filter[tag]", self.tag),
            ("page[size]", self.page_size or None),
        )


@dataclass
class CategoryFilters:
    """Filters for listing categories"""
    parent_id: Optional[str] = None

    def to_params(self) -> QueryParams:
        return _pairs(("filter[parent]", self.parent_id))


@dataclass
class ConnectionReport:
    """Outcome of a connection check against the Up API"""
    ping: dict[str, Any]
    accounts: list[dict[str, Any]] = field(default_factory=list)
    recent_transactions: list[dict[str, Any]] = field(default_factory=list)
    categories: list[dict[str, Any]] = field(default_factory=list)
