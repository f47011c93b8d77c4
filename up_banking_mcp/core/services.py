"""
Application Services - Use cases that orchestrate several port calls

Single tool calls go straight to the port; only multi-step flows live here.
"""
from .domain import ConnectionReport, TransactionFilters
from .ports import BankingApi


class ConnectionCheckService:
    """Use case: verify the token and take a quick look at the data"""

    def __init__(self, api: BankingApi):
        self.api = api

    async def execute(self, sample_size: int = 5) -> ConnectionReport:
        """
        Ping, list accounts, sample recent transactions, list categories.

        Transactions are only sampled when at least one account exists.
        Any upstream error propagates (401 means a bad or revoked token).
        """
        ping = await self.api.ping()
        report = ConnectionReport(ping=ping)

        accounts = await self.api.list_accounts()
        report.accounts = accounts.get("data", [])

        if report.accounts:
            transactions = await self.api.list_transactions(
                TransactionFilters(page_size=sample_size)
            )
            report.recent_transactions = transactions.get("data", [])

        categories = await self.api.list_categories()
        report.categories = categories.get("data", [])

        return report
