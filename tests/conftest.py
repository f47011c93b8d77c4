"""
Shared fixtures: a Container whose httpx client talks to a fake Up API.
"""
import httpx
import pytest

from up_banking_mcp.container import Container
from up_banking_mcp.core.domain import UpApiConfig

BASE_URL = "https://api.example.test/api/v1"

ACCOUNT = {
    "type": "accounts",
    "id": "acc-1",
    "attributes": {
        "displayName": "Spending",
        "accountType": "TRANSACTIONAL",
        "ownershipType": "INDIVIDUAL",
        "balance": {"currencyCode": "AUD", "value": "1024.50", "valueInBaseUnits": 102450},
        "createdAt": "2023-01-01T10:00:00+10:00",
    },
}

TRANSACTION = {
    "type": "transactions",
    "id": "txn-1",
    "attributes": {
        "status": "SETTLED",
        "rawText": "COFFEE SHOP SYDNEY",
        "description": "Coffee Shop",
        "message": None,
        "isCategorizable": True,
        "amount": {"currencyCode": "AUD", "value": "-4.50", "valueInBaseUnits": -450},
        "foreignAmount": None,
        "settledAt": "2024-03-02T09:00:00+10:00",
        "createdAt": "2024-03-01T08:30:00+10:00",
        "transactionType": "Purchase",
    },
    "relationships": {
        "account": {"data": {"type": "accounts", "id": "acc-1"}},
        "category": {"data": {"type": "categories", "id": "restaurants-and-cafes"}},
    },
}

CATEGORY = {
    "type": "categories",
    "id": "restaurants-and-cafes",
    "attributes": {"name": "Restaurants & Cafes"},
    "relationships": {
        "parent": {"data": {"type": "categories", "id": "good-life"}},
        "children": {"data": []},
    },
}


class FakeUpApi:
    """Records requests and answers from a path -> (status, body) table"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, object]] = {
            "/api/v1/util/ping": (200, {"meta": {"id": "ping-1", "statusEmoji": "⚡️"}}),
            "/api/v1/accounts": (200, {"data": [ACCOUNT], "links": {"prev": None, "next": None}}),
            "/api/v1/accounts/acc-1": (200, {"data": ACCOUNT}),
            "/api/v1/transactions": (200, {"data": [TRANSACTION], "links": {"prev": None, "next": None}}),
            "/api/v1/accounts/acc-1/transactions": (200, {"data": [TRANSACTION], "links": {"prev": None, "next": None}}),
            "/api/v1/transactions/txn-1": (200, {"data": TRANSACTION}),
            "/api/v1/categories": (200, {"data": [CATEGORY]}),
            "/api/v1/categories/restaurants-and-cafes": (200, {"data": CATEGORY}),
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(
            request.url.path,
            (404, {"errors": [{"status": "404", "title": "Not Found"}]}),
        )
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_api():
    return FakeUpApi()


@pytest.fixture
def config():
    return UpApiConfig(api_token="test-token", base_url=BASE_URL)


@pytest.fixture
def container(fake_api, config):
    return Container(config, transport=httpx.MockTransport(fake_api.handler))
