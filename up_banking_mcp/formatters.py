"""
BBG Lite formatters for Up tool results

Format raw Up API documents as compact terminal text.
Used by the CLI; MCP clients get the JSON itself.
"""

from typing import Any, Optional

from .core.domain import ConnectionReport

RULE = "─" * 78


def format_money(money: Optional[dict[str, Any]]) -> str:
    """MoneyObject -> '-12.50 AUD'"""
    if not money:
        return "N/A"
    return f"{money.get('value', '?')} {money.get('currencyCode', '')}".strip()


def _fit(text: Optional[str], width: int) -> str:
    text = text or ""
    if len(text) > width:
        text = text[:width - 3] + "..."
    return text.ljust(width)


def _related_id(resource: dict[str, Any], name: str) -> Optional[str]:
    data = resource.get("relationships", {}).get(name, {}).get("data")
    if isinstance(data, dict):
        return data.get("id")
    return None


def _next_page_hint(result: dict[str, Any]) -> list[str]:
    if result.get("links", {}).get("next"):
        return ["", "More results available (pagination is not followed - narrow the filters or raise --page-size)"]
    return []


def format_ping(result: dict[str, Any]) -> str:
    """Format up_ping result.

    Example output:
        UP API | PING OK ⚡️
        ID: 3b5d17a4-6778-48dc-ae7d-9f8aace7e2a5
    """
    meta = result.get("meta", {})
    return f"UP API | PING OK {meta.get('statusEmoji', '')}".rstrip() + f"\nID: {meta.get('id', 'N/A')}"


def format_accounts(result: dict[str, Any]) -> str:
    """Format up_list_accounts result.

    Example output:
        ACCOUNTS (2)
        ──────────────────────────────────────────────────────────────────────────────
        NAME                  TYPE           OWNER       BALANCE         ID
        ──────────────────────────────────────────────────────────────────────────────
        Spending              TRANSACTIONAL  INDIVIDUAL  1024.50 AUD     2f5a...
    """
    accounts = result.get("data", [])
    lines = [f"ACCOUNTS ({len(accounts)})", RULE]
    lines.append(f"{'NAME':<20}  {'TYPE':<13}  {'OWNER':<10}  {'BALANCE':<14}  ID")
    lines.append(RULE)
    for account in accounts:
        attrs = account.get("attributes", {})
        lines.append(
            f"{_fit(attrs.get('displayName'), 20)}  "
            f"{_fit(attrs.get('accountType'), 13)}  "
            f"{_fit(attrs.get('ownershipType'), 10)}  "
            f"{_fit(format_money(attrs.get('balance')), 14)}  "
            f"{account.get('id', '')}"
        )
    lines.extend(_next_page_hint(result))
    return "\n".join(lines)


def format_account(result: dict[str, Any]) -> str:
    """Format up_get_account result."""
    account = result.get("data", {})
    attrs = account.get("attributes", {})
    lines = [
        f"{(attrs.get('displayName') or 'ACCOUNT').upper()} | {attrs.get('accountType', 'N/A')}",
        "",
        f"ID:          {account.get('id', 'N/A')}",
        f"BALANCE:     {format_money(attrs.get('balance'))}",
        f"OWNERSHIP:   {attrs.get('ownershipType', 'N/A')}",
        f"OPENED:      {attrs.get('createdAt', 'N/A')}",
        "",
        f'Try: up_list_transactions(accountId="{account.get("id", "")}")',
    ]
    return "\n".join(lines)


def format_transactions(result: dict[str, Any]) -> str:
    """Format up_list_transactions result.

    Example output:
        TRANSACTIONS (2)
        ──────────────────────────────────────────────────────────────────────────────
        DATE        STATUS   AMOUNT        DESCRIPTION                 ID
        ──────────────────────────────────────────────────────────────────────────────
        2024-03-01  SETTLED  -4.50 AUD     Coffee Shop                 9e1c...
    """
    transactions = result.get("data", [])
    lines = [f"TRANSACTIONS ({len(transactions)})", RULE]
    lines.append(f"{'DATE':<10}  {'STATUS':<7}  {'AMOUNT':<12}  {'DESCRIPTION':<26}  ID")
    lines.append(RULE)
    for txn in transactions:
        attrs = txn.get("attributes", {})
        lines.append(
            f"{_fit((attrs.get('createdAt') or '')[:10], 10)}  "
            f"{_fit(attrs.get('status'), 7)}  "
            f"{_fit(format_money(attrs.get('amount')), 12)}  "
            f"{_fit(attrs.get('description'), 26)}  "
            f"{txn.get('id', '')}"
        )
    lines.extend(_next_page_hint(result))
    return "\n".join(lines)


def format_transaction(result: dict[str, Any]) -> str:
    """Format up_get_transaction result."""
    txn = result.get("data", {})
    attrs = txn.get("attributes", {})
    lines = [
        f"{attrs.get('description', 'TRANSACTION')} | {format_money(attrs.get('amount'))} | {attrs.get('status', 'N/A')}",
        "",
        f"ID:          {txn.get('id', 'N/A')}",
        f"CREATED:     {attrs.get('createdAt', 'N/A')}",
        f"SETTLED:     {attrs.get('settledAt') or 'pending'}",
    ]
    if attrs.get("foreignAmount"):
        lines.append(f"FOREIGN:     {format_money(attrs['foreignAmount'])}")
    if attrs.get("message"):
        lines.append(f"MESSAGE:     {attrs['message']}")
    if attrs.get("rawText"):
        lines.append(f"RAW TEXT:    {attrs['rawText']}")
    if attrs.get("transactionType"):
        lines.append(f"TYPE:        {attrs['transactionType']}")
    lines.append(f"ACCOUNT:     {_related_id(txn, 'account') or 'N/A'}")
    lines.append(f"CATEGORY:    {_related_id(txn, 'category') or 'uncategorised'}")
    return "\n".join(lines)


def format_categories(result: dict[str, Any]) -> str:
    """Format up_list_categories result.

    Example output:
        CATEGORIES (2)
        ──────────────────────────────────────────────────────────────────────────────
        ID                          NAME                        PARENT
        ──────────────────────────────────────────────────────────────────────────────
        good-life                   Good Life                   -
        restaurants-and-cafes       Restaurants & Cafes         good-life
    """
    categories = result.get("data", [])
    lines = [f"CATEGORIES ({len(categories)})", RULE]
    lines.append(f"{'ID':<26}  {'NAME':<26}  PARENT")
    lines.append(RULE)
    for category in categories:
        lines.append(
            f"{_fit(category.get('id'), 26)}  "
            f"{_fit(category.get('attributes', {}).get('name'), 26)}  "
            f"{_related_id(category, 'parent') or '-'}"
        )
    return "\n".join(lines)


def format_category(result: dict[str, Any]) -> str:
    """Format up_get_category result."""
    category = result.get("data", {})
    children = category.get("relationships", {}).get("children", {}).get("data", [])
    lines = [
        f"{category.get('attributes', {}).get('name', 'CATEGORY')} ({category.get('id', 'N/A')})",
        "",
        f"PARENT:      {_related_id(category, 'parent') or '-'}",
        f"CHILDREN:    {', '.join(c.get('id', '') for c in children) or '-'}",
        "",
        f'Try: up_list_transactions(category="{category.get("id", "")}")',
    ]
    return "\n".join(lines)


def format_connection_report(report: ConnectionReport) -> str:
    """Format the connection check summary."""
    meta = report.ping.get("meta", {})
    lines = [f"UP API | CONNECTION OK {meta.get('statusEmoji', '')}".rstrip(), RULE]

    lines.append(f"ACCOUNTS:    {len(report.accounts)}")
    for account in report.accounts:
        attrs = account.get("attributes", {})
        lines.append(
            f"  - {attrs.get('displayName')} ({attrs.get('accountType')}): {format_money(attrs.get('balance'))}"
        )

    if report.accounts:
        lines.append(f"RECENT:      {len(report.recent_transactions)}")
        for i, txn in enumerate(report.recent_transactions, 1):
            attrs = txn.get("attributes", {})
            lines.append(
                f"  {i}. {attrs.get('description')}: {format_money(attrs.get('amount'))} ({(attrs.get('createdAt') or '')[:10]})"
            )

    names = [c.get("attributes", {}).get("name", "") for c in report.categories]
    sample = ", ".join(names[:5])
    lines.append(f"CATEGORIES:  {len(report.categories)}" + (f" (e.g. {sample}...)" if sample else ""))
    return "\n".join(lines)


FORMATTERS = {
    "up_ping": format_ping,
    "up_list_accounts": format_accounts,
    "up_get_account": format_account,
    "up_list_transactions": format_transactions,
    "up_get_transaction": format_transaction,
    "up_list_categories": format_categories,
    "up_get_category": format_category,
}
