"""Data models for qiita-mcp.

This module defines the input records sent to the Qiita API, the
credential, and the result/error types returned by API operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Credential(BaseModel):
    """Qiita API access token.

    Attributes:
        token: Personal access token sent as a Bearer token
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1, repr=False)


class Tag(BaseModel):
    """A Qiita tag.

    Attributes:
        name: Tag name
        versions: Optional version strings (e.g. ["3.12"])
    """

    name: str = Field(min_length=1)
    versions: list[str] | None = None


class CreateItemInput(BaseModel):
    """Input data for creating an item.

    Attributes:
        title: Item title
        body: Item body (Markdown)
        tags: At least one tag
        private: Create as a limited-sharing item (default True)
        tweet: Post to Twitter when published
        organization_url_name: Organization to associate the item with
        slide: Enable slide mode
    """

    title: str = Field(min_length=1)
    body: str
    tags: list[Tag] = Field(min_length=1)
    private: bool = True
    tweet: bool | None = None
    organization_url_name: str | None = None
    slide: bool | None = None

    def to_api_request(self) -> dict[str, Any]:
        """Build the JSON body, omitting optional fields that were not supplied."""
        return self.model_dump(exclude_none=True)


class UpdateItemInput(BaseModel):
    """Input data for updating an item.

    Attributes:
        title: New title
        body: New body (Markdown)
        tags: Replacement tags; None or an empty list leaves tags unchanged
        private: Change visibility
        organization_url_name: Organization to associate the item with
        slide: Enable slide mode
    """

    title: str = Field(min_length=1)
    body: str
    tags: list[Tag] | None = None
    private: bool | None = None
    organization_url_name: str | None = None
    slide: bool | None = None

    @field_validator("tags")
    @classmethod
    def _empty_tags_as_unset(cls, value: list[Tag] | None) -> list[Tag] | None:
        # Qiita rejects an empty tag array, so it is treated like an omitted field
        return value or None

    def to_api_request(self) -> dict[str, Any]:
        """Build the JSON body, omitting optional fields that were not supplied."""
        return self.model_dump(exclude_none=True)


class ErrorCode(str, Enum):
    """Error codes for qiita-mcp failures."""

    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_ERROR = "transport_error"
    REMOTE_API_ERROR = "remote_api_error"
    DECODE_ERROR = "decode_error"
    INVALID_INPUT = "invalid_input"


T = TypeVar("T")


@dataclass(frozen=True)
class ApiSuccess(Generic[T]):
    """Successful API operation.

    Attributes:
        value: Parsed payload
    """

    value: T


@dataclass(frozen=True)
class ApiFailure:
    """Failed API operation.

    Attributes:
        code: Error code
        message: Human-readable error message
        status_code: HTTP status code (remote API errors only)
        status_text: HTTP reason phrase (remote API errors only)
        body_text: Response body text (remote API errors only)
    """

    code: ErrorCode
    message: str
    status_code: int | None = None
    status_text: str | None = None
    body_text: str | None = None


ApiResult: TypeAlias = "ApiSuccess[T] | ApiFailure"


MISSING_CREDENTIAL_MESSAGE = (
    "Qiita API token is not provided. Set QIITA_API_TOKEN environment variable before using this tool."
)


def missing_credential() -> ApiFailure:
    """Failure returned when no API token is configured."""
    return ApiFailure(code=ErrorCode.MISSING_CREDENTIAL, message=MISSING_CREDENTIAL_MESSAGE)


def remote_api_error(status_code: int, status_text: str, body_text: str) -> ApiFailure:
    """Failure for a non-2xx response.

    Args:
        status_code: HTTP status code
        status_text: HTTP reason phrase
        body_text: Response body, kept for diagnostics

    Returns:
        ApiFailure with REMOTE_API_ERROR code
    """
    return ApiFailure(
        code=ErrorCode.REMOTE_API_ERROR,
        message=f"Qiita API returned {status_code}: {status_text}\n{body_text}",
        status_code=status_code,
        status_text=status_text,
        body_text=body_text,
    )


@dataclass(frozen=True)
class ToolResponse:
    """Text result of a tool invocation.

    Attributes:
        text: Response text shown to the agent
        is_error: True if the invocation failed
    """

    text: str
    is_error: bool = False
