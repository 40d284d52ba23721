"""Constants package for the PR TIMES aggregator.

PACKAGE STRUCTURE:
-----------------
- endpoints.py : Upstream base URL and endpoint paths
- limits.py    : Page size, concurrency bounds, timeouts

USAGE EXAMPLES:
--------------
    from prtimes_aggregator.constants import SEARCH_PAGE_SIZE, PRTIMES_BASE_URL
"""

from .endpoints import (
    PRTIMES_BASE_URL,
    SEARCH_PATH,
    LIKE_COUNT_PATH,
)
from .limits import (
    SEARCH_PAGE_SIZE,
    REQUEST_TIMEOUT_SECONDS,
    MAX_CONCURRENT_PAGES,
    MAX_CONCURRENT_LOOKUPS,
    DEFAULT_TIMEZONE,
    CANONICAL_DATE_FORMAT,
)

__all__ = [
    # Endpoints
    "PRTIMES_BASE_URL",
    "SEARCH_PATH",
    "LIKE_COUNT_PATH",
    # Limits
    "SEARCH_PAGE_SIZE",
    "REQUEST_TIMEOUT_SECONDS",
    "MAX_CONCURRENT_PAGES",
    "MAX_CONCURRENT_LOOKUPS",
    "DEFAULT_TIMEZONE",
    "CANONICAL_DATE_FORMAT",
]
