"""Limit constants for the PR TIMES aggregator.

MODIFICATION GUIDE:
------------------
- SEARCH_PAGE_SIZE: fixed by the upstream contract, do not make configurable
- MAX_CONCURRENT_*: defaults only, overridable through AggregatorSettings
"""

from typing import Final

# =============================================================================
# UPSTREAM API
# =============================================================================

SEARCH_PAGE_SIZE: Final[int] = 40
"""Listings requested per search page."""

REQUEST_TIMEOUT_SECONDS: Final[float] = 15.0
"""Deadline for a single upstream call."""

# =============================================================================
# CONCURRENCY
# =============================================================================

MAX_CONCURRENT_PAGES: Final[int] = 8
"""Search pages fetched at the same time."""

MAX_CONCURRENT_LOOKUPS: Final[int] = 16
"""Like count lookups in flight at the same time."""

# =============================================================================
# DATES
# =============================================================================

DEFAULT_TIMEZONE: Final[str] = "Asia/Tokyo"
"""Zone used for "now" when resolving relative release times."""

CANONICAL_DATE_FORMAT: Final[str] = "%Y年%m月%d日 %H:%M"
"""Display format every release time is normalized into."""
