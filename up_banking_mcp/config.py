"""
Configuration

Everything comes from environment variables so the server can be launched
straight from an MCP client config block.
"""
import os

from .core.domain import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, UpApiConfig
from .core.errors import ConfigError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5002
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

MISSING_TOKEN_MESSAGE = (
    "UP_API_TOKEN environment variable is required. "
    "Get your token from the Up app: Data sharing > Personal Access Token"
)


def get_api_config() -> UpApiConfig:
    """Build the Up API config from UP_API_TOKEN, UP_API_BASE_URL, UP_API_TIMEOUT"""
    token = os.environ.get("UP_API_TOKEN", "").strip()
    if not token:
        raise ConfigError(MISSING_TOKEN_MESSAGE)

    timeout_str = os.environ.get("UP_API_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(timeout_str)
    except ValueError:
        raise ConfigError(f"Invalid UP_API_TIMEOUT value: {timeout_str}") from None

    return UpApiConfig(
        api_token=token,
        base_url=os.environ.get("UP_API_BASE_URL", DEFAULT_BASE_URL),
        timeout=timeout,
    )


def get_host() -> str:
    """Get HTTP bind host from environment or use default"""
    return os.environ.get("HOST", DEFAULT_HOST)


def get_port() -> int:
    """Get HTTP server port from environment or use default"""
    port_str = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        raise ConfigError(f"Invalid PORT value: {port_str}") from None


def get_log_level() -> str:
    """Get log level name from environment, one of LOG_LEVELS"""
    level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Invalid LOG_LEVEL value: {level}")
    return level
