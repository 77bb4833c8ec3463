"""Qiita API client using httpx.

Provides authenticated access to Qiita API v2 endpoints.
Failures are returned as ApiFailure values instead of being raised.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Self

import httpx

from qiita_mcp import __version__
from qiita_mcp.config import DEFAULT_TIMEOUT
from qiita_mcp.models import (
    ApiFailure,
    ApiResult,
    ApiSuccess,
    Credential,
    ErrorCode,
    missing_credential,
    remote_api_error,
)

logger = logging.getLogger(__name__)

# API base URL
QIITA_API_BASE = "https://qiita.com/api/v2"


class QiitaAPIClient:
    """HTTP client for Qiita API v2.

    Holds the access token and issues one request per call.
    Use as async context manager for proper resource management.

    Attributes:
        credential: Access token, or None if not configured
        timeout: Request timeout in seconds
    """

    def __init__(self, credential: Credential | None, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize API client.

        Args:
            credential: Access token (requests fail with MISSING_CREDENTIAL if None)
            timeout: Request timeout in seconds
        """
        self.credential = credential
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Self:
        """Enter async context manager."""
        self._client = httpx.AsyncClient(
            base_url=QIITA_API_BASE,
            timeout=httpx.Timeout(self.timeout),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context manager."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _build_headers(self) -> dict[str, str]:
        """Build request headers with Bearer authentication.

        Callers must check that credential is set.
        """
        assert self.credential is not None
        return {
            "Authorization": f"Bearer {self.credential.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"qiita-mcp/{__version__}",
        }

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> ApiResult[Any]:
        """Send one request and classify the outcome.

        Args:
            method: HTTP method
            path: API endpoint path (e.g., "/items")
            params: Query parameters
            json: JSON body

        Returns:
            ApiSuccess with the decoded JSON, or ApiFailure
        """
        if self.credential is None:
            return missing_credential()
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")

        logger.debug("%s %s params=%s", method, path, params)
        try:
            response = await self._client.request(
                method,
                path,
                headers=self._build_headers(),
                params=params,
                json=json,
            )
        except httpx.TimeoutException as e:
            logger.warning("Request timed out: %s %s", method, path)
            return ApiFailure(
                code=ErrorCode.TRANSPORT_ERROR,
                message=f"Request to Qiita API timed out after {self.timeout} seconds: {e}",
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request failed: %s %s: %s", method, path, e)
            return ApiFailure(
                code=ErrorCode.TRANSPORT_ERROR,
                message=f"Failed to connect to Qiita API: {type(e).__name__}: {e}",
            )

        if not response.is_success:
            logger.warning("Qiita API returned %s for %s %s", response.status_code, method, path)
            return remote_api_error(response.status_code, response.reason_phrase, response.text)

        try:
            return ApiSuccess(response.json())
        except ValueError as e:
            return ApiFailure(
                code=ErrorCode.DECODE_ERROR,
                message=f"Qiita API returned invalid JSON: {e}",
            )

    async def get(self, path: str, params: dict[str, Any] | None = None) -> ApiResult[Any]:
        """Make a GET request to the API.

        Args:
            path: API endpoint path
            params: Query parameters

        Returns:
            ApiSuccess with JSON response, or ApiFailure
        """
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json: dict[str, Any]) -> ApiResult[Any]:
        """Make a POST request to the API.

        Args:
            path: API endpoint path
            json: JSON body

        Returns:
            ApiSuccess with JSON response, or ApiFailure
        """
        return await self._request("POST", path, json=json)

    async def patch(self, path: str, json: dict[str, Any]) -> ApiResult[Any]:
        """Make a PATCH request to the API.

        Args:
            path: API endpoint path
            json: JSON body

        Returns:
            ApiSuccess with JSON response, or ApiFailure
        """
        return await self._request("PATCH", path, json=json)
