"""Item operations for Qiita API.

Provides functions for listing, reading, creating and updating items.
Each function issues exactly one request.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from qiita_mcp.api.client import QiitaAPIClient
from qiita_mcp.config import get_timeout
from qiita_mcp.models import (
    ApiFailure,
    ApiResult,
    ApiSuccess,
    CreateItemInput,
    Credential,
    ErrorCode,
    UpdateItemInput,
)
from qiita_mcp.utils.filters import filter_item, filter_items

# Qiita's own article describing its Markdown syntax
MARKDOWN_RULES_ITEM_ID = "c686397e4a0f4f11683d"

MARKDOWN_RULES_NOT_FOUND = "Markdownコンテンツが見つかりませんでした。"


def _item_path(item_id: str) -> str | None:
    """Build /items/{id} with the ID encoded as a single path segment.

    Returns None for IDs that cannot name an item (empty, "." or "..").
    """
    if item_id in ("", ".", ".."):
        return None
    return f"/items/{quote(item_id, safe='')}"


def _invalid_item_id(item_id: str) -> ApiFailure:
    return ApiFailure(code=ErrorCode.INVALID_INPUT, message=f"Invalid item_id: {item_id!r}")


def _unexpected_shape(expected: str, value: Any) -> ApiFailure:
    return ApiFailure(
        code=ErrorCode.DECODE_ERROR,
        message=f"Qiita API returned {type(value).__name__}, expected {expected}",
    )


async def list_authenticated_user_items(
    credential: Credential | None,
    page: int = 1,
    per_page: int = 20,
) -> ApiResult[list[Any]]:
    """List items of the authenticated user.

    Args:
        credential: Access token
        page: Page number (1-indexed)
        per_page: Number of items per page

    Returns:
        Filtered items without body and rendered_body, or ApiFailure
    """
    async with QiitaAPIClient(credential, timeout=get_timeout()) as client:
        result = await client.get(
            "/authenticated_user/items",
            params={"page": page, "per_page": per_page},
        )

    if isinstance(result, ApiFailure):
        return result
    if not isinstance(result.value, list):
        return _unexpected_shape("a list", result.value)
    return ApiSuccess(filter_items(result.value))


async def get_item(credential: Credential | None, item_id: str) -> ApiResult[dict[str, Any]]:
    """Get a single item.

    Args:
        credential: Access token
        item_id: Item ID

    Returns:
        Filtered item (body kept), or ApiFailure
    """
    path = _item_path(item_id)
    if path is None:
        return _invalid_item_id(item_id)

    async with QiitaAPIClient(credential, timeout=get_timeout()) as client:
        result = await client.get(path)

    if isinstance(result, ApiFailure):
        return result
    if not isinstance(result.value, dict):
        return _unexpected_shape("an object", result.value)
    return ApiSuccess(filter_item(result.value))


async def create_item(credential: Credential | None, item_input: CreateItemInput) -> ApiResult[dict[str, Any]]:
    """Create a new item.

    Optional fields that were not supplied are left out of the request body.

    Args:
        credential: Access token
        item_input: Item content and metadata

    Returns:
        Created item (filtered), or ApiFailure
    """
    async with QiitaAPIClient(credential, timeout=get_timeout()) as client:
        result = await client.post("/items", json=item_input.to_api_request())

    if isinstance(result, ApiFailure):
        return result
    if not isinstance(result.value, dict):
        return _unexpected_shape("an object", result.value)
    return ApiSuccess(filter_item(result.value))


async def update_item(
    credential: Credential | None,
    item_id: str,
    item_input: UpdateItemInput,
) -> ApiResult[dict[str, Any]]:
    """Update an existing item.

    Args:
        credential: Access token
        item_id: ID of the item to update
        item_input: New content and metadata

    Returns:
        Updated item (filtered), or ApiFailure
    """
    path = _item_path(item_id)
    if path is None:
        return _invalid_item_id(item_id)

    async with QiitaAPIClient(credential, timeout=get_timeout()) as client:
        result = await client.patch(path, json=item_input.to_api_request())

    if isinstance(result, ApiFailure):
        return result
    if not isinstance(result.value, dict):
        return _unexpected_shape("an object", result.value)
    return ApiSuccess(filter_item(result.value))


async def get_markdown_rules(credential: Credential | None) -> ApiResult[str]:
    """Get the body of Qiita's Markdown syntax guide.

    Returns:
        Markdown text, MARKDOWN_RULES_NOT_FOUND if the item has no body, or ApiFailure
    """
    async with QiitaAPIClient(credential, timeout=get_timeout()) as client:
        result = await client.get(f"/items/{MARKDOWN_RULES_ITEM_ID}")

    if isinstance(result, ApiFailure):
        return result
    body = result.value.get("body") if isinstance(result.value, dict) else None
    return ApiSuccess(body if isinstance(body, str) and body else MARKDOWN_RULES_NOT_FOUND)
