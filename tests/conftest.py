"""Pytest configuration and shared fixtures for qiita-mcp tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from qiita_mcp.config import TIMEOUT_ENV_VAR, TOKEN_ENV_VAR, get_credential
from qiita_mcp.models import Credential

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove Qiita environment variables and reset the cached credential."""
    monkeypatch.delenv(TOKEN_ENV_VAR, raising=False)
    monkeypatch.delenv(TIMEOUT_ENV_VAR, raising=False)
    get_credential.cache_clear()
    yield
    get_credential.cache_clear()


@pytest.fixture
def credential() -> Credential:
    """Create a credential for testing."""
    return Credential(token="test-token-123")


# ============================================================================
# HTTP Fixtures
# ============================================================================


def create_mock_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str = "",
    reason_phrase: str = "OK",
) -> MagicMock:
    """Create a mock httpx.Response.

    Args:
        status_code: HTTP status code
        json_data: Value returned by response.json()
        text: Response body text
        reason_phrase: HTTP reason phrase

    Returns:
        A MagicMock shaped like httpx.Response.
    """
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.reason_phrase = reason_phrase
    response.text = text
    response.json.return_value = json_data
    return response


@pytest.fixture
def mock_request() -> Generator[AsyncMock, None, None]:
    """Patch httpx.AsyncClient.request.

    Yields:
        The AsyncMock standing in for every outgoing request.
    """
    with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock:
        yield mock


# ============================================================================
# Test Data Factories
# ============================================================================


def create_user(**overrides: Any) -> dict[str, Any]:
    """Create a Qiita user object as returned by the API."""
    user: dict[str, Any] = {
        "id": "qiita_user",
        "name": "Qiita User",
        "description": "Hello",
        "items_count": 12,
        "permanent_id": 12345,
        "facebook_id": "fb",
        "followees_count": 3,
        "followers_count": 4,
        "github_login_name": "gh",
        "profile_image_url": "https://example.com/me.png",
        "team_only": False,
        "twitter_screen_name": "tw",
        "website_url": "https://example.com",
    }
    user.update(overrides)
    return user


def create_item_response(
    item_id: str = "c686397e4a0f4f11683d",
    title: str = "Test Article",
    body: str = "# Heading\n\nText",
    tags: list[str] | None = None,
    private: bool = True,
    with_user: bool = True,
) -> dict[str, Any]:
    """Create a Qiita item as returned by the API.

    Args:
        item_id: Item ID
        title: Item title
        body: Markdown body
        tags: Tag names
        private: Limited sharing flag
        with_user: Whether to include the nested user object

    Returns:
        A dictionary matching the Qiita API v2 item format.
    """
    item: dict[str, Any] = {
        "id": item_id,
        "title": title,
        "body": body,
        "rendered_body": "<h1>Heading</h1><p>Text</p>",
        "tags": [{"name": tag, "versions": []} for tag in (tags or ["Python"])],
        "private": private,
        "url": f"https://qiita.com/qiita_user/items/{item_id}",
        "created_at": "2024-01-01T00:00:00+09:00",
        "updated_at": "2024-01-02T00:00:00+09:00",
        "likes_count": 0,
    }
    if with_user:
        item["user"] = create_user()
    return item
