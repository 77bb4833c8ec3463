"""Environment configuration for qiita-mcp."""

from __future__ import annotations

import functools
import logging
import os

from qiita_mcp.models import Credential

logger = logging.getLogger(__name__)

# Environment variable names
TOKEN_ENV_VAR = "QIITA_API_TOKEN"
TIMEOUT_ENV_VAR = "QIITA_API_TIMEOUT"
LOG_LEVEL_ENV_VAR = "QIITA_MCP_LOG_LEVEL"

# Default timeout for requests (seconds)
DEFAULT_TIMEOUT = 30.0

DEFAULT_LOG_LEVEL = "INFO"


@functools.cache
def get_credential() -> Credential | None:
    """Read the Qiita API token from QIITA_API_TOKEN.

    The value is read once and reused for the lifetime of the process.

    Returns:
        Credential, or None if the variable is unset or empty
    """
    token = os.environ.get(TOKEN_ENV_VAR, "").strip()
    if not token:
        logger.warning("%s is not set; Qiita API tools will fail", TOKEN_ENV_VAR)
        return None
    return Credential(token=token)


def get_timeout() -> float:
    """Get request timeout from QIITA_API_TIMEOUT.

    Default: 30 seconds. Non-numeric or non-positive values fall back to the default.

    Returns:
        Timeout in seconds
    """
    raw = os.environ.get(TIMEOUT_ENV_VAR)
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %s seconds", TIMEOUT_ENV_VAR, raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning("Invalid %s=%r, using %s seconds", TIMEOUT_ENV_VAR, raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def get_log_level() -> int:
    """Get log level from QIITA_MCP_LOG_LEVEL (default: INFO)."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
