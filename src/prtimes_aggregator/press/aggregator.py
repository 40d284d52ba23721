"""Press release aggregator.

Fetches every page of a keyword search concurrently, enriches each listing
with its like count and returns the releases ranked by popularity.
"""

from __future__ import annotations

import asyncio
import logging
import time

from ..config import AggregatorSettings, get_settings
from ..errors import FirstPageUnavailableError, UpstreamError
from ..utils.date_normalizer import DateNormalizer
from .client import PRTimesClient
from .finalizer import finalize_results
from .identifiers import extract_release_id
from .models import AggregationReport, PageResult, RawListing, ResultItem

logger = logging.getLogger("prtimes")

# Substituted when a like count cannot be looked up
DEFAULT_LIKE_COUNT = 0


class _RunState:
    """Mutable state of one aggregation run, shared by all page tasks."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        self.items: list[ResultItem] = []
        self.lock = asyncio.Lock()
        self.failed_pages: list[str] = []
        self.like_count_failures = 0
        self.missing_release_ids = 0
        self.unparsed_dates = 0


class PressReleaseAggregator:
    """Aggregates PR TIMES search results across all pages.

    Page 1 is fetched first and its ``last_page`` fixes the page count for
    the whole run. Pages 2..last_page are then fetched concurrently, and the
    listings of every page are enriched concurrently. Failures other than
    page 1 never abort the run:

    - a failed page contributes no items
    - a failed or impossible like count lookup yields 0
    - an unrecognized release time yields the current time

    Usage:
        async with PRTimesClient() as client:
            aggregator = PressReleaseAggregator(client)
            report = await aggregator.aggregate("AI", limit=20)
            for item in report.items:
                print(item.like_count, item.title)
    """

    def __init__(
        self,
        client: PRTimesClient,
        settings: AggregatorSettings | None = None,
        normalizer: DateNormalizer | None = None,
    ):
        """Initialize the aggregator.

        Args:
            client: Upstream client used for both endpoints.
            settings: Aggregator settings (defaults to the client's settings).
            normalizer: Date normalizer (defaults to one in the configured zone).
        """
        self.client = client
        self.settings = settings or client.settings
        self.normalizer = normalizer or DateNormalizer(timezone=self.settings.timezone)
        self._page_semaphore = asyncio.Semaphore(self.settings.max_concurrent_pages)
        self._lookup_semaphore = asyncio.Semaphore(self.settings.max_concurrent_lookups)

    async def aggregate(self, keyword: str, limit: int = 0) -> AggregationReport:
        """Fetch, enrich, rank and truncate all results for a keyword.

        Args:
            keyword: Search keyword.
            limit: Maximum items to return. 0 means unlimited.

        Returns:
            AggregationReport with the finalized items and run statistics.

        Raises:
            FirstPageUnavailableError: If page 1 cannot be fetched or decoded.
        """
        start_time = time.time()

        try:
            first_page = await self.client.fetch_page(keyword, 1)
        except UpstreamError as e:
            logger.error(f"FIRST_PAGE_ERROR | keyword={keyword!r} | {e}")
            raise FirstPageUnavailableError(keyword, str(e)) from e

        total_pages = max(first_page.last_page, 0)
        state = _RunState(keyword)

        # Page 1 is reused rather than fetched again; last_page 0 means no results
        tasks = []
        if total_pages >= 1:
            tasks.append(self._collect_page(state, first_page, 1))
        tasks.extend(self._fetch_and_collect(state, page) for page in range(2, total_pages + 1))
        await asyncio.gather(*tasks)

        # Wait barrier passed: no task touches state.items from here on
        items = finalize_results(state.items, limit)
        duration_ms = int((time.time() - start_time) * 1000)

        report = AggregationReport(
            keyword=keyword,
            items=items,
            total_pages=total_pages,
            items_collected=len(state.items),
            failed_pages=state.failed_pages,
            like_count_failures=state.like_count_failures,
            missing_release_ids=state.missing_release_ids,
            unparsed_dates=state.unparsed_dates,
            duration_ms=duration_ms,
        )

        logger.info(
            f"PRTIMES_AGGREGATOR | keyword={keyword!r} | pages:{report.total_pages} | "
            f"collected:{report.items_collected} | returned:{len(items)} | "
            f"failed_pages:{len(state.failed_pages)} | "
            f"like_count_failures:{state.like_count_failures} | "
            f"missing_ids:{state.missing_release_ids} | "
            f"unparsed_dates:{state.unparsed_dates} | {duration_ms}ms"
        )

        return report

    async def _fetch_and_collect(self, state: _RunState, page: int) -> None:
        """Fetch one page and collect its listings; a failed page is skipped."""
        async with self._page_semaphore:
            try:
                result = await self.client.fetch_page(state.keyword, page)
            except UpstreamError as e:
                state.failed_pages.append(f"page {page}: {e}")
                logger.warning(f"PAGE_FETCH_ERROR | keyword={state.keyword!r} | page={page} | {e}")
                return

        logger.debug(f"PAGE_FETCH_OK | page={page} | {len(result.listings)} listings")
        await self._collect_page(state, result, page)

    async def _collect_page(self, state: _RunState, result: PageResult, page: int) -> None:
        """Enrich every listing of a page and append the results."""
        await asyncio.gather(*(
            self._collect_listing(state, listing, page, position)
            for position, listing in enumerate(result.listings)
        ))

    async def _collect_listing(
        self,
        state: _RunState,
        listing: RawListing,
        page: int,
        position: int,
    ) -> None:
        like_count = await self._like_count_or_default(state, listing)

        parsed = self.normalizer.classify(listing.released_at)
        if parsed.is_fallback:
            state.unparsed_dates += 1

        item = ResultItem(
            corporation_name=listing.company_name,
            published_at=parsed.format(),
            thumbnail_url=listing.thumbnail_url,
            post_url=self.settings.post_url(listing.release_url),
            title=listing.title,
            like_count=like_count,
            page=page,
            position=position,
        )

        async with state.lock:
            state.items.append(item)

    async def _like_count_or_default(self, state: _RunState, listing: RawListing) -> int:
        """Look up the like count, substituting DEFAULT_LIKE_COUNT on failure."""
        release_id = extract_release_id(listing.release_url)
        if not release_id:
            state.missing_release_ids += 1
            logger.debug(f"RELEASE_ID_MISSING | url={listing.release_url!r}")
            return DEFAULT_LIKE_COUNT

        async with self._lookup_semaphore:
            try:
                return await self.client.fetch_like_count(release_id)
            except UpstreamError as e:
                state.like_count_failures += 1
                logger.warning(f"LIKE_COUNT_ERROR | id={release_id} | {e}")
                return DEFAULT_LIKE_COUNT


async def fetch_posts(
    keyword: str,
    limit: int = 0,
    settings: AggregatorSettings | None = None,
) -> list[ResultItem]:
    """Convenience function returning the ranked items for a keyword."""
    settings = settings or get_settings()
    async with PRTimesClient(settings=settings) as client:
        report = await PressReleaseAggregator(client, settings=settings).aggregate(keyword, limit)
    return report.items
