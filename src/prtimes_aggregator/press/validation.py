"""Pure validation functions for search requests.

Shared by the CLI and the HTTP surface. Validation always runs before any
upstream call is made.
"""

from __future__ import annotations

from .types import Failure, Result, SearchParams, Success

KEYWORD_REQUIRED = "keyword query parameter is required"
LIMIT_NOT_POSITIVE = "limit query parameter must be a positive integer"


def validate_keyword(keyword: str | None) -> Result[str]:
    """Validate that a search keyword was given.

    Pure function - no side effects.

    Args:
        keyword: Raw keyword (may be None or blank)

    Returns:
        Result containing the stripped keyword or failure
    """
    if keyword is None or not keyword.strip():
        return Failure(KEYWORD_REQUIRED)
    return Success(keyword.strip())


def validate_limit(limit: str | int | None) -> Result[int]:
    """Validate an optional result limit.

    Pure function - no side effects.

    Args:
        limit: Raw limit. None or "" means unlimited.

    Returns:
        Result containing the limit (0 for unlimited) or failure
    """
    if limit is None or limit == "":
        return Success(0)

    if isinstance(limit, bool):
        return Failure(LIMIT_NOT_POSITIVE, {"limit": limit})

    try:
        value = int(str(limit).strip())
    except ValueError:
        return Failure(LIMIT_NOT_POSITIVE, {"limit": limit})

    if value <= 0:
        return Failure(LIMIT_NOT_POSITIVE, {"limit": limit})

    return Success(value)


def validate_search(keyword: str | None, limit: str | int | None = None) -> Result[SearchParams]:
    """Validate a full search request (keyword first, then limit)."""
    keyword_result = validate_keyword(keyword)
    if keyword_result.is_failure():
        return keyword_result

    limit_result = validate_limit(limit)
    if limit_result.is_failure():
        return limit_result

    return Success(SearchParams(keyword=keyword_result.value, limit=limit_result.value))
