"""
Errors - exception hierarchy shared by every layer
"""


class UpBankingError(Exception):
    """Base class for all up-banking-mcp errors"""


class ConfigError(UpBankingError):
    """Missing or invalid configuration"""


class ToolError(UpBankingError):
    """Unknown tool name or arguments that cannot be coerced"""


class UpApiError(UpBankingError):
    """Up API answered with a non-2xx status"""

    def __init__(self, status_code: int, reason: str, body: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Up API error: {status_code} {reason}\n{body}")
