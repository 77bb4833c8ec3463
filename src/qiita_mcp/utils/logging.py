"""Secure logging configuration for qiita-mcp.

Provides logging setup with access token masking.
Log output goes to stderr, since stdout carries the MCP stdio transport.
"""

import logging
import re
import sys


class TokenMaskingFilter(logging.Filter):
    """Logging filter that masks Qiita access tokens.

    Bearer tokens and QIITA_API_TOKEN values are replaced with [MASKED].
    """

    TOKEN_PATTERNS = [
        # Authorization: Bearer VALUE
        re.compile(r"(Bearer\s+)([^\s\"',;}]+)()"),
        # QIITA_API_TOKEN=VALUE or QIITA_API_TOKEN: VALUE
        re.compile(r"(QIITA_API_TOKEN\s*[=:]\s*)([^\s\"',;}]+)()"),
        # {"token": "VALUE"} or token='VALUE'
        re.compile(r"([\"']?token[\"']?\s*[=:]\s*[\"'])([^\"']+)([\"'])"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Mask tokens in the record message and string arguments.

        Args:
            record: Log record to process

        Returns:
            Always True (record is always passed through, just modified)
        """
        if record.msg:
            record.msg = self._mask_tokens(str(record.msg))
        if record.args and isinstance(record.args, tuple):
            record.args = tuple(self._mask_tokens(arg) if isinstance(arg, str) else arg for arg in record.args)
        return True

    def _mask_tokens(self, text: str) -> str:
        result = text
        for pattern in self.TOKEN_PATTERNS:
            result = pattern.sub(lambda m: m.group(1) + "[MASKED]" + m.group(3), result)
        return result


def setup_logging(level: int = logging.INFO, name: str | None = None) -> logging.Logger:
    """Set up logging with token masking.

    Args:
        level: Logging level (default: INFO)
        name: Logger name (default: "qiita_mcp")

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or "qiita_mcp")
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    handler.addFilter(TokenMaskingFilter())

    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the qiita_mcp namespace.

    Args:
        name: Logger name suffix (e.g., "api" for "qiita_mcp.api")

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"qiita_mcp.{name}")
    return logging.getLogger("qiita_mcp")
