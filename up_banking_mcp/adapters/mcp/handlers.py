"""
MCP Tool Handlers

Dispatch table for the Up tools: validates the tool name, coerces the
untyped arguments an agent sends, calls the client and wraps the outcome
in a CallToolResult envelope.
"""
import json
import logging
from typing import Any, Awaitable, Callable, Optional

from mcp.types import CallToolResult, TextContent

from ...container import Container
from ...core.domain import AccountFilters, CategoryFilters, TransactionFilters
from ...core.errors import ToolError

logger = logging.getLogger(__name__)


def coerce_arguments(arguments: Any) -> dict[str, Any]:
    """Turn whatever the client sent into a plain dict of arguments"""
    if arguments is None:
        return {}
    if isinstance(arguments, str):
        if not arguments.strip():
            return {}
        try:
            arguments = json.loads(arguments)
        except json.JSONDecodeError as e:
            raise ToolError(f"Arguments are not valid JSON: {e}") from None
    if not isinstance(arguments, dict):
        raise ToolError(f"Arguments must be an object, got {type(arguments).__name__}")
    return arguments


def _string(arguments: dict[str, Any], key: str) -> Optional[str]:
    """Optional string argument; blank means absent"""
    value = arguments.get(key)
    if value is None:
        return None
    if isinstance(value, (bool, dict, list)):
        raise ToolError(f"Argument {key} must be a string")
    value = str(value).strip()
    return value or None


def _required(arguments: dict[str, Any], key: str) -> str:
    value = _string(arguments, key)
    if value is None:
        raise ToolError(f"Missing required argument: {key}")
    return value


def _page_size(arguments: dict[str, Any]) -> Optional[int]:
    """pageSize as int; accepts ints, integral floats and numeric strings"""
    value = arguments.get("pageSize")
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ToolError("Argument pageSize must be a number")
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        raise ToolError(f"Argument pageSize must be a number, got {value!r}") from None
    if not number.is_integer():
        raise ToolError(f"Argument pageSize must be a whole number, got {value!r}")
    return int(number)


def success_result(result: Any) -> CallToolResult:
    """Envelope for a successful call: pretty-printed JSON"""
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(result, indent=2))],
        isError=False,
    )


def error_result(error: Exception) -> CallToolResult:
    """Envelope for a failed call"""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {error}")],
        isError=True,
    )


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container
        self.tools: dict[str, Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]] = {
            "up_ping": self.ping,
            "up_list_accounts": self.list_accounts,
            "up_get_account": self.get_account,
            "up_list_transactions": self.list_transactions,
            "up_get_transaction": self.get_transaction,
            "up_list_categories": self.list_categories,
            "up_get_category": self.get_category,
        }

    @property
    def api(self):
        return self.container.client

    async def ping(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return await self.api.ping()

    async def list_accounts(self, arguments: dict[str, Any]) -> dict[str, Any]:
        filters = AccountFilters(
            account_type=_string(arguments, "accountType"),
            ownership_type=_string(arguments, "ownershipType"),
        )
        return await self.api.list_accounts(filters)

    async def get_account(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return await self.api.get_account(_required(arguments, "accountId"))

    async def list_transactions(self, arguments: dict[str, Any]) -> dict[str, Any]:
        filters = TransactionFilters(
            account_id=_string(arguments, "accountId"),
            status=_string(arguments, "status"),
            since=_string(arguments, "since"),
            until=_string(arguments, "until"),
            category=_string(arguments, "category"),
            tag=_string(arguments, "tag"),
            page_size=_page_size(arguments),
        )
        return await self.api.list_transactions(filters)

    async def get_transaction(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return await self.api.get_transaction(_required(arguments, "transactionId"))

    async def list_categories(self, arguments: dict[str, Any]) -> dict[str, Any]:
        filters = CategoryFilters(parent_id=_string(arguments, "parentId"))
        return await self.api.list_categories(filters)

    async def get_category(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return await self.api.get_category(_required(arguments, "categoryId"))

    async def dispatch(self, name: str, arguments: Any = None) -> dict[str, Any]:
        """Validate name, coerce arguments, run the tool. Raises on failure."""
        handler = self.tools.get(name)
        if handler is None:
            raise ToolError(f"Unknown tool: {name}")
        return await handler(coerce_arguments(arguments))

    async def call_tool(self, name: str, arguments: Any = None) -> CallToolResult:
        """Run a tool and always answer with an envelope, never an exception"""
        logger.info(f"call_tool: {name} args={arguments}")
        try:
            result = await self.dispatch(name, arguments)
        except Exception as e:
            logger.error(f"call_tool: {name} FAILED: {e}")
            return error_result(e)

        envelope = success_result(result)
        logger.info(f"call_tool: {name} returning {len(envelope.content[0].text)} chars")
        return envelope
