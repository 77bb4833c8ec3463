"""FastMCP server for Qiita article management.

Provides MCP tools for listing, reading, creating and updating Qiita items.
"""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from qiita_mcp import tools
from qiita_mcp.config import get_credential, get_log_level
from qiita_mcp.models import Tag, ToolResponse
from qiita_mcp.utils.logging import setup_logging

# Also covers "fastmcp run qiita_mcp.server:mcp", which bypasses __main__
setup_logging(get_log_level())

# Create MCP server instance
mcp = FastMCP("qiita-mcp")


def _respond(response: ToolResponse) -> str:
    """Return the response text, or raise ToolError so the result is flagged isError."""
    if response.is_error:
        raise ToolError(response.text)
    return response.text


@mcp.tool()
async def get_my_qiita_articles(
    page: Annotated[int, Field(ge=1, description="ページ番号（1から開始）")] = tools.DEFAULT_PAGE,
    per_page: Annotated[int, Field(ge=1, description="1ページあたりの記事数")] = tools.DEFAULT_PER_PAGE,
) -> str:
    """認証ユーザーのQiita記事一覧を取得します。

    一覧では本文（body）は省略されます。本文が必要な場合は
    get_qiita_articleで個別に取得してください。
    """
    return _respond(await tools.get_my_articles(get_credential(), page=page, per_page=per_page))


@mcp.tool()
async def get_qiita_article(
    item_id: Annotated[str, Field(min_length=1, description="取得する記事のID")],
) -> str:
    """指定したIDのQiita記事を取得します。

    タイトル、本文（Markdown）、タグなどを含むJSONを返します。
    """
    return _respond(await tools.get_article(get_credential(), item_id))


@mcp.tool()
async def create_qiita_article(
    title: Annotated[str, Field(min_length=1, description="記事のタイトル")],
    body: Annotated[str, "記事の本文（Markdown形式）"],
    tags: Annotated[list[Tag], Field(min_length=1, description="記事のタグ（1つ以上）")],
    private: Annotated[bool, "限定共有記事にするかどうか"] = True,
    tweet: Annotated[bool | None, "Twitterに投稿するかどうか"] = None,
    organization_url_name: Annotated[str | None, "記事を紐付けるOrganizationのURL名"] = None,
    slide: Annotated[bool | None, "スライドモードを有効にするかどうか"] = None,
) -> str:
    """Qiitaに新しい記事を投稿します。

    デフォルトでは限定共有記事として作成されます。
    Markdown記法はget_qiita_markdown_rulesで確認できます。
    """
    return _respond(
        await tools.create_article(
            get_credential(),
            title=title,
            body=body,
            tags=tags,
            private=private,
            tweet=tweet,
            organization_url_name=organization_url_name,
            slide=slide,
        )
    )


@mcp.tool()
async def update_qiita_article(
    item_id: Annotated[str, Field(min_length=1, description="更新する記事のID")],
    title: Annotated[str, Field(min_length=1, description="新しいタイトル")],
    body: Annotated[str, "新しい本文（Markdown形式）"],
    tags: Annotated[list[Tag] | None, "新しいタグ（省略時は変更しない）"] = None,
    private: Annotated[bool | None, "限定共有記事にするかどうか"] = None,
    organization_url_name: Annotated[str | None, "記事を紐付けるOrganizationのURL名"] = None,
    slide: Annotated[bool | None, "スライドモードを有効にするかどうか"] = None,
) -> str:
    """既存のQiita記事を更新します。

    編集前にget_qiita_articleで既存内容を取得することを推奨します。
    """
    return _respond(
        await tools.update_article(
            get_credential(),
            item_id=item_id,
            title=title,
            body=body,
            tags=tags,
            private=private,
            organization_url_name=organization_url_name,
            slide=slide,
        )
    )


@mcp.tool()
async def get_qiita_markdown_rules() -> str:
    """QiitaのMarkdown記法ガイドを取得します。

    記事を書く前に参照してください。
    """
    return _respond(await tools.get_markdown_rules(get_credential()))


@mcp.tool()
async def get_current_datetime() -> str:
    """現在の日時（日本時間）を取得します。"""
    return _respond(tools.get_current_datetime())
