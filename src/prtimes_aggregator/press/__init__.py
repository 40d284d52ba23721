"""Press release search, enrichment and ranking."""

from prtimes_aggregator.press.models import (
    AggregationReport,
    PageResult,
    RawListing,
    ResultItem,
)
from prtimes_aggregator.press.types import Result, Success, Failure, SearchParams
from prtimes_aggregator.press.validation import validate_keyword, validate_limit, validate_search
from prtimes_aggregator.press.identifiers import extract_release_id
from prtimes_aggregator.press.client import PRTimesClient
from prtimes_aggregator.press.finalizer import finalize_results
from prtimes_aggregator.press.aggregator import PressReleaseAggregator, fetch_posts
from prtimes_aggregator.press.service import run_search

__all__ = [
    "AggregationReport",
    "PageResult",
    "RawListing",
    "ResultItem",
    "Result",
    "Success",
    "Failure",
    "SearchParams",
    "validate_keyword",
    "validate_limit",
    "validate_search",
    "extract_release_id",
    "PRTimesClient",
    "finalize_results",
    "PressReleaseAggregator",
    "fetch_posts",
    "run_search",
]
