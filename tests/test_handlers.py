"""
Unit tests for the MCP dispatch table and response envelope
"""
import asyncio
import json

import pytest

from up_banking_mcp.adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from up_banking_mcp.adapters.mcp.handlers import coerce_arguments
from up_banking_mcp.core.errors import ToolError


@pytest.fixture
def handlers(container):
    return MCPHandlers(container)


def call(handlers, name, arguments=None):
    return asyncio.run(handlers.call_tool(name, arguments))


class TestDispatchTable:

    def test_every_schema_has_a_handler(self, handlers):
        assert set(handlers.tools) == set(TOOL_SCHEMAS)

    def test_unknown_tool(self, handlers, fake_api):
        result = call(handlers, "up_transfer_money", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Unknown tool: up_transfer_money"
        assert fake_api.requests == []

    def test_dispatch_raises_for_unknown_tool(self, handlers):
        with pytest.raises(ToolError):
            asyncio.run(handlers.dispatch("nope"))


class TestEnvelope:

    def test_success_is_pretty_json(self, handlers):
        result = call(handlers, "up_ping")

        assert result.isError is False
        assert len(result.content) == 1
        text = result.content[0].text
        assert result.content[0].type == "text"
        assert json.loads(text) == {"meta": {"id": "ping-1", "statusEmoji": "⚡️"}}
        assert text == json.dumps(json.loads(text), indent=2)

    def test_upstream_error_becomes_error_envelope(self, handlers, fake_api):
        fake_api.routes["/api/v1/accounts"] = (500, "upstream exploded")

        result = call(handlers, "up_list_accounts", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Up API error: 500 Internal Server Error\nupstream exploded"

    def test_non_json_body_becomes_error_envelope(self, handlers, fake_api):
        fake_api.routes["/api/v1/util/ping"] = (200, "<html>maintenance</html>")

        result = call(handlers, "up_ping")

        assert result.isError is True
        assert result.content[0].text.startswith("Error: ")

    def test_missing_required_identifier(self, handlers, fake_api):
        result = call(handlers, "up_get_account", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Missing required argument: accountId"
        assert fake_api.requests == []


class TestArgumentMapping:

    def test_list_accounts_filters(self, handlers, fake_api):
        call(handlers, "up_list_accounts", {"accountType": "SAVER", "ownershipType": "INDIVIDUAL"})

        params = fake_api.last.url.params
        assert params["filter[accountType]"] == "SAVER"
        assert params["filter[ownershipType]"] == "INDIVIDUAL"

    def test_list_transactions_all_filters(self, handlers, fake_api):
        result = call(handlers, "up_list_transactions", {
            "accountId": "acc-1",
            "status": "HELD",
            "since": "2024-01-01T00:00:00+10:00",
            "until": "2024-02-01T00:00:00+10:00",
            "category": "restaurants-and-cafes",
            "tag": "holiday",
            "pageSize": 20,
        })

        assert result.isError is False
        request = fake_api.last
        assert request.url.path == "/api/v1/accounts/acc-1/transactions"
        assert dict(request.url.params) == {
            "filter[status]": "HELD",
            "filter[since]": "2024-01-01T00:00:00+10:00",
            "filter[until]": "2024-02-01T00:00:00+10:00",
            "filter[category]": "restaurants-and-cafes",
            "filter[tag]": "holiday",
            "page[size]": "20",
        }

    @pytest.mark.parametrize("page_size", [7, 7.0, "7", " 7 "])
    def test_page_size_coercion(self, handlers, fake_api, page_size):
        result = call(handlers, "up_list_transactions", {"pageSize": page_size})

        assert result.isError is False
        assert fake_api.last.url.params["page[size]"] == "7"

    @pytest.mark.parametrize("page_size", ["lots", 2.5, True])
    def test_bad_page_size(self, handlers, fake_api, page_size):
        result = call(handlers, "up_list_transactions", {"pageSize": page_size})

        assert result.isError is True
        assert "pageSize" in result.content[0].text
        assert fake_api.requests == []

    def test_blank_strings_are_absent(self, handlers, fake_api):
        call(handlers, "up_list_transactions", {"accountId": "  ", "status": ""})

        assert fake_api.last.url.path == "/api/v1/transactions"
        assert fake_api.last.url.query == b""

    def test_boolean_for_string_argument_rejected(self, handlers, fake_api):
        result = call(handlers, "up_list_accounts", {"accountType": True})

        assert result.isError is True
        assert result.content[0].text == "Error: Argument accountType must be a string"
        assert fake_api.requests == []

    def test_unknown_keys_ignored(self, handlers, fake_api):
        result = call(handlers, "up_list_categories", {"parentId": "good-life", "colour": "orange"})

        assert result.isError is False
        assert dict(fake_api.last.url.params) == {"filter[parent]": "good-life"}

    def test_get_tools_hit_their_endpoints(self, handlers, fake_api):
        call(handlers, "up_get_transaction", {"transactionId": "txn-1"})
        assert fake_api.last.url.path == "/api/v1/transactions/txn-1"

        call(handlers, "up_get_category", {"categoryId": "restaurants-and-cafes"})
        assert fake_api.last.url.path == "/api/v1/categories/restaurants-and-cafes"

        call(handlers, "up_get_account", {"accountId": "acc-1"})
        assert fake_api.last.url.path == "/api/v1/accounts/acc-1"

    def test_json_string_arguments(self, handlers, fake_api):
        result = call(handlers, "up_get_account", '{"accountId": "acc-1"}')

        assert result.isError is False
        assert fake_api.last.url.path == "/api/v1/accounts/acc-1"


class TestCoerceArguments:

    def test_none_is_empty(self):
        assert coerce_arguments(None) == {}

    def test_blank_string_is_empty(self):
        assert coerce_arguments("  ") == {}

    def test_invalid_json(self):
        with pytest.raises(ToolError):
            coerce_arguments("{not json")

    def test_non_object(self):
        with pytest.raises(ToolError):
            coerce_arguments(["accountId"])
