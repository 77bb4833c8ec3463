"""Response filters for Qiita API payloads.

Removes fields the agent does not need, to keep tool output within
the model's token budget. Unknown fields always pass through.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

# Top-level fields removed from a single item
ITEM_EXCLUDED_FIELDS = frozenset({"rendered_body"})

# Top-level fields removed from each element of an item list
ITEM_LIST_EXCLUDED_FIELDS = frozenset({"rendered_body", "body"})

# Fields removed from the nested "user" object
USER_EXCLUDED_FIELDS = frozenset(
    {
        "facebook_id",
        "followees_count",
        "followers_count",
        "github_login_name",
        "profile_image_url",
        "team_only",
        "twitter_screen_name",
        "website_url",
    }
)


def omit(record: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Return a copy of record without the given fields."""
    excluded = frozenset(fields)
    return {key: value for key, value in record.items() if key not in excluded}


def _filter_record(record: Any, excluded: frozenset[str]) -> Any:
    if not isinstance(record, Mapping):
        return record
    result = omit(record, excluded)
    user = result.get("user")
    if isinstance(user, Mapping):
        result["user"] = omit(user, USER_EXCLUDED_FIELDS)
    return result


def filter_item(record: Any) -> Any:
    """Trim a single item.

    Removes rendered_body and the user profile fields in USER_EXCLUDED_FIELDS.
    The Markdown body is kept.

    Args:
        record: Item as returned by the API

    Returns:
        New filtered item (input is not modified)
    """
    return _filter_record(record, ITEM_EXCLUDED_FIELDS)


def filter_items(records: Sequence[Any]) -> list[Any]:
    """Trim each item of a list response.

    Same as filter_item, and also drops body since list output is
    for overview only.

    Args:
        records: Items as returned by the API

    Returns:
        New list of the same length and order
    """
    return [_filter_record(record, ITEM_LIST_EXCLUDED_FIELDS) for record in records]
