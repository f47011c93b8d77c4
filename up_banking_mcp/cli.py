#!/usr/bin/env python3
"""
CLI for up-banking MCP - try the tools without an MCP client

Usage:
  up-banking-cli list-tools                          # Show MCP tool definitions
  up-banking-cli check                               # Verify token, sample some data
  up-banking-cli ping                                # Test authentication
  up-banking-cli accounts --type SAVER               # List saver accounts
  up-banking-cli account ACCOUNT_ID                  # One account
  up-banking-cli transactions --status HELD          # Pending transactions
  up-banking-cli transactions --account ID --page-size 10
  up-banking-cli transaction TRANSACTION_ID          # One transaction
  up-banking-cli categories --parent good-life       # Child categories
  up-banking-cli category restaurants-and-cafes      # One category
  up-banking-cli --json accounts                     # Raw JSON, as an agent sees it

Needs UP_API_TOKEN in the environment. Calls the handlers directly (no MCP layer).
"""

import argparse
import asyncio
import json
import sys
from typing import Any

from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .config import get_api_config
from .container import Container
from .core.domain import ACCOUNT_TYPES, OWNERSHIP_TYPES, TRANSACTION_STATUSES
from .core.errors import ConfigError, UpApiError
from .formatters import FORMATTERS, format_connection_report


def build_container() -> Container:
    """Container from environment config"""
    return Container(get_api_config())


async def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_schema in TOOL_SCHEMAS.values():
        print(f"Tool: {tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


async def tool_command(name: str, arguments: dict[str, Any], as_json: bool = False) -> int:
    """Run one tool through the handlers and print the result"""
    try:
        container = build_container()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    handlers = MCPHandlers(container)
    envelope = await handlers.call_tool(name, arguments)
    text = envelope.content[0].text

    if envelope.isError:
        print(text, file=sys.stderr)
        return 1

    if as_json:
        print(text)
    else:
        print(FORMATTERS[name](json.loads(text)))
    return 0


async def check_command(sample_size: int) -> int:
    """Verify the token and show a quick summary of the data"""
    try:
        container = build_container()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        report = await container.check_connection.execute(sample_size=sample_size)
    except UpApiError as e:
        print(f"Connection check failed:\n{e}", file=sys.stderr)
        if e.status_code == 401:
            print("\nThis usually means your API token is invalid or expired.", file=sys.stderr)
            print("Generate a new token in the Up app: Data sharing > Personal Access Token", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Connection check failed: {e}", file=sys.stderr)
        return 1

    print(format_connection_report(report))
    return 0


def _arguments(**kwargs: Any) -> dict[str, Any]:
    """Tool arguments with unset options dropped"""
    return {k: v for k, v in kwargs.items() if v is not None}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="up-banking CLI - Test MCP tools without an MCP client"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw JSON tool result instead of formatted text"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    check_parser = subparsers.add_parser("check", help="Verify token and sample data")
    check_parser.add_argument("--sample", type=int, default=5, help="Recent transactions to show (default: 5)")

    subparsers.add_parser("ping", help="Test authentication")

    accounts_parser = subparsers.add_parser("accounts", help="List accounts")
    accounts_parser.add_argument("--type", dest="account_type", choices=ACCOUNT_TYPES, help="Account type filter")
    accounts_parser.add_argument("--ownership", choices=OWNERSHIP_TYPES, help="Ownership type filter")

    account_parser = subparsers.add_parser("account", help="Get one account")
    account_parser.add_argument("account_id", help="Account ID")

    transactions_parser = subparsers.add_parser("transactions", help="List transactions")
    transactions_parser.add_argument("--account", help="Only this account's transactions")
    transactions_parser.add_argument("--status", choices=TRANSACTION_STATUSES, help="HELD or SETTLED")
    transactions_parser.add_argument("--since", help="Start date-time (RFC 3339)")
    transactions_parser.add_argument("--until", help="End date-time (RFC 3339)")
    transactions_parser.add_argument("--category", help="Category ID (e.g., restaurants-and-cafes)")
    transactions_parser.add_argument("--tag", help="Transaction tag")
    transactions_parser.add_argument("--page-size", type=int, help="Records to return (max 100)")

    transaction_parser = subparsers.add_parser("transaction", help="Get one transaction")
    transaction_parser.add_argument("transaction_id", help="Transaction ID")

    categories_parser = subparsers.add_parser("categories", help="List categories")
    categories_parser.add_argument("--parent", help="Only children of this category")

    category_parser = subparsers.add_parser("category", help="Get one category")
    category_parser.add_argument("category_id", help="Category ID")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Run command
    if args.command == "list-tools":
        return asyncio.run(list_tools_command())
    elif args.command == "check":
        return asyncio.run(check_command(args.sample))
    elif args.command == "ping":
        return asyncio.run(tool_command("up_ping", {}, args.json))
    elif args.command == "accounts":
        return asyncio.run(tool_command(
            "up_list_accounts",
            _arguments(accountType=args.account_type, ownershipType=args.ownership),
            args.json
        ))
    elif args.command == "account":
        return asyncio.run(tool_command("up_get_account", {"accountId": args.account_id}, args.json))
    elif args.command == "transactions":
        return asyncio.run(tool_command(
            "up_list_transactions",
            _arguments(
                accountId=args.account,
                status=args.status,
                since=args.since,
                until=args.until,
                category=args.category,
                tag=args.tag,
                pageSize=args.page_size,
            ),
            args.json
        ))
    elif args.command == "transaction":
        return asyncio.run(tool_command("up_get_transaction", {"transactionId": args.transaction_id}, args.json))
    elif args.command == "categories":
        return asyncio.run(tool_command("up_list_categories", _arguments(parentId=args.parent), args.json))
    elif args.command == "category":
        return asyncio.run(tool_command("up_get_category", {"categoryId": args.category_id}, args.json))
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
