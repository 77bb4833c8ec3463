"""API module for qiita-mcp.

Provides HTTP client and item operations for Qiita API v2.
"""

from qiita_mcp.api.client import QiitaAPIClient
from qiita_mcp.api.items import (
    create_item,
    get_item,
    get_markdown_rules,
    list_authenticated_user_items,
    update_item,
)

__all__ = [
    "QiitaAPIClient",
    "create_item",
    "get_item",
    "get_markdown_rules",
    "list_authenticated_user_items",
    "update_item",
]
