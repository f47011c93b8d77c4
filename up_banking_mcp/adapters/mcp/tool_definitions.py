"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by the stdio server, the HTTP/SSE server and the CLI.
"""
from ...core.domain import ACCOUNT_TYPES, OWNERSHIP_TYPES, TRANSACTION_STATUSES

# Tool schemas for MCP, in the order they are listed to clients
TOOL_SCHEMAS = {
    "up_ping": {
        "name": "up_ping",
        "description": "Test the Up API connection and verify authentication is working",
        "inputSchema": {
            "type": "object",
            "properties": {}
        }
    },
    "up_list_accounts": {
        "name": "up_list_accounts",
        "description": "List all accounts for the authenticated user. Returns account balances, types (SAVER, TRANSACTIONAL, HOME_LOAN), and ownership information.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "accountType": {
                    "type": "string",
                    "enum": list(ACCOUNT_TYPES),
                    "description": "Filter by account type"
                },
                "ownershipType": {
                    "type": "string",
                    "enum": list(OWNERSHIP_TYPES),
                    "description": "Filter by ownership type"
                }
            }
        }
    },
    "up_get_account": {
        "name": "up_get_account",
        "description": "Get details for a specific account by ID, including current balance and account information.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "accountId": {
                    "type": "string",
                    "description": "The unique identifier for the account"
                }
            },
            "required": ["accountId"]
        }
    },
    "up_list_transactions": {
        "name": "up_list_transactions",
        "description": "List transactions across all accounts or for a specific account. Supports filtering by status, date range, category, and tags. Returns paginated results ordered newest first.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "accountId": {
                    "type": "string",
                    "description": "Optional: Filter to transactions for a specific account"
                },
                "status": {
                    "type": "string",
                    "enum": list(TRANSACTION_STATUSES),
                    "description": "Filter by transaction status (pending or settled)"
                },
                "since": {
                    "type": "string",
                    "description": "Start date-time in RFC 3339 format (e.g., 2024-01-01T00:00:00+10:00)"
                },
                "until": {
                    "type": "string",
                    "description": "End date-time in RFC 3339 format (e.g., 2024-12-31T23:59:59+10:00)"
                },
                "category": {
                    "type": "string",
                    "description": "Filter by category ID (e.g., 'restaurants-and-cafes', 'good-life')"
                },
                "tag": {
                    "type": "string",
                    "description": "Filter by transaction tag"
                },
                "pageSize": {
                    "type": "number",
                    "description": "Number of records to return (default: 30, max: 100)"
                }
            }
        }
    },
    "up_get_transaction": {
        "name": "up_get_transaction",
        "description": "Get detailed information about a specific transaction by ID, including amount, description, category, and related account.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "transactionId": {
                    "type": "string",
                    "description": "The unique identifier for the transaction"
                }
            },
            "required": ["transactionId"]
        }
    },
    "up_list_categories": {
        "name": "up_list_categories",
        "description": "List all spending categories in Up. Categories have a parent-child relationship. Use this to understand category IDs for filtering transactions.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "parentId": {
                    "type": "string",
                    "description": "Optional: Filter to only show children of a specific parent category"
                }
            }
        }
    },
    "up_get_category": {
        "name": "up_get_category",
        "description": "Get details about a specific category by ID, including its name and parent/child relationships.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "categoryId": {
                    "type": "string",
                    "description": "The unique identifier for the category (e.g., 'restaurants-and-cafes')"
                }
            },
            "required": ["categoryId"]
        }
    }
}
