"""Tool handlers for qiita-mcp.

Each handler validates its parameters, performs one API operation and
formats the outcome as a ToolResponse. Failures are returned, not raised.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import ValidationError

from qiita_mcp.api import items
from qiita_mcp.models import (
    ApiFailure,
    CreateItemInput,
    Credential,
    ErrorCode,
    Tag,
    ToolResponse,
    UpdateItemInput,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20

JST = ZoneInfo("Asia/Tokyo")


def success_response(text: str) -> ToolResponse:
    return ToolResponse(text=text)


def error_response(message: str) -> ToolResponse:
    return ToolResponse(text=f"Error: {message}", is_error=True)


def _failure_response(operation: str, failure: ApiFailure) -> ToolResponse:
    logger.error("%s failed: code=%s, message=%s", operation, failure.code.value, failure.message)
    return error_response(failure.message)


def _invalid_input_response(operation: str, error: ValidationError) -> ToolResponse:
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc']) or 'input'}: {e['msg']}" for e in error.errors()
    )
    return _failure_response(
        operation,
        ApiFailure(code=ErrorCode.INVALID_INPUT, message=f"Invalid input: {details}"),
    )


def _dump_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2)


def _summary(heading: str, item: dict[str, Any]) -> str:
    return f"{heading}\nタイトル: {item.get('title', '')}\nURL: {item.get('url', '')}\n\n{_dump_json(item)}"


async def get_my_articles(
    credential: Credential | None,
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
) -> ToolResponse:
    """List the authenticated user's items as JSON."""
    if page < 1 or per_page < 1:
        return _failure_response(
            "get_my_articles",
            ApiFailure(code=ErrorCode.INVALID_INPUT, message="page and per_page must be 1 or greater"),
        )

    result = await items.list_authenticated_user_items(credential, page=page, per_page=per_page)
    if isinstance(result, ApiFailure):
        return _failure_response("get_my_articles", result)
    return success_response(_dump_json(result.value))


async def get_article(credential: Credential | None, item_id: str) -> ToolResponse:
    """Get one item as JSON."""
    if not item_id:
        return _failure_response(
            "get_article",
            ApiFailure(code=ErrorCode.INVALID_INPUT, message="item_id must not be empty"),
        )

    result = await items.get_item(credential, item_id)
    if isinstance(result, ApiFailure):
        return _failure_response("get_article", result)
    return success_response(_dump_json(result.value))


async def create_article(
    credential: Credential | None,
    title: str,
    body: str,
    tags: list[Tag] | list[dict[str, Any]],
    private: bool = True,
    tweet: bool | None = None,
    organization_url_name: str | None = None,
    slide: bool | None = None,
) -> ToolResponse:
    """Create an item and report its title and URL."""
    try:
        item_input = CreateItemInput(
            title=title,
            body=body,
            tags=tags,
            private=private,
            tweet=tweet,
            organization_url_name=organization_url_name,
            slide=slide,
        )
    except ValidationError as e:
        return _invalid_input_response("create_article", e)

    result = await items.create_item(credential, item_input)
    if isinstance(result, ApiFailure):
        return _failure_response("create_article", result)

    logger.info("Created item %s", result.value.get("id"))
    return success_response(_summary("記事を作成しました。", result.value))


async def update_article(
    credential: Credential | None,
    item_id: str,
    title: str,
    body: str,
    tags: list[Tag] | list[dict[str, Any]] | None = None,
    private: bool | None = None,
    organization_url_name: str | None = None,
    slide: bool | None = None,
) -> ToolResponse:
    """Update an item and report its title and URL."""
    if not item_id:
        return _failure_response(
            "update_article",
            ApiFailure(code=ErrorCode.INVALID_INPUT, message="item_id must not be empty"),
        )
    try:
        item_input = UpdateItemInput(
            title=title,
            body=body,
            tags=tags,
            private=private,
            organization_url_name=organization_url_name,
            slide=slide,
        )
    except ValidationError as e:
        return _invalid_input_response("update_article", e)

    result = await items.update_item(credential, item_id, item_input)
    if isinstance(result, ApiFailure):
        return _failure_response("update_article", result)

    logger.info("Updated item %s", item_id)
    return success_response(_summary("記事を更新しました。", result.value))


async def get_markdown_rules(credential: Credential | None) -> ToolResponse:
    """Get Qiita's Markdown syntax guide."""
    result = await items.get_markdown_rules(credential)
    if isinstance(result, ApiFailure):
        return _failure_response("get_markdown_rules", result)
    return success_response(result.value)


def get_current_datetime(now: datetime | None = None) -> ToolResponse:
    """Format the current date and time in Japan Standard Time."""
    current = (now or datetime.now(JST)).astimezone(JST)
    return success_response(f"現在の日時: {current.strftime('%Y/%m/%d %H:%M:%S')}")
