"""Upstream endpoint constants for the PR TIMES API."""

from typing import Final

PRTIMES_BASE_URL: Final[str] = "https://prtimes.jp"
"""Site domain. Release paths in search results are relative to it."""

SEARCH_PATH: Final[str] = "/api/keyword_search.php/search"
"""Keyword search endpoint. Takes keyword, page and limit query parameters."""

LIKE_COUNT_PATH: Final[str] = "/api/press_release.php/press_release/{release_id}/like_count"
"""Like count endpoint, keyed by release identifier ("<company>.<release>")."""
