"""Utility modules for qiita-mcp."""

from qiita_mcp.utils.filters import filter_item, filter_items, omit
from qiita_mcp.utils.logging import get_logger, setup_logging

__all__ = ["filter_item", "filter_items", "omit", "setup_logging", "get_logger"]
