"""
Logging setup shared by the stdio and HTTP servers.

Logs go to stderr: on the stdio transport stdout carries the protocol.
"""
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

# Libraries that log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Override formatTime to include milliseconds with : separator"""
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime(datefmt)
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure root logging once; calling again only updates the level"""
    root = logging.getLogger()
    root.setLevel(level)

    if not any(getattr(h, "_up_banking", False) for h in root.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(MillisecondFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._up_banking = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger("up_banking_mcp")
