"""Async client for the PR TIMES search and like count endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import AggregatorSettings, get_settings
from ..constants import SEARCH_PAGE_SIZE
from ..errors import UpstreamDecodeError, UpstreamRequestError
from .models import LikeCountEnvelope, PageResult, SearchEnvelope

logger = logging.getLogger("prtimes")


class PRTimesClient:
    """Thin wrapper around the two PR TIMES endpoints the aggregator uses.

    Both fetchers raise ``UpstreamError`` subclasses on any failure. They do
    not retry and never substitute defaults; that is the caller's decision.

    Usage:
        async with PRTimesClient() as client:
            page = await client.fetch_page("AI", page=1)
            likes = await client.fetch_like_count("000000123.000045678")
    """

    def __init__(
        self,
        settings: AggregatorSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            settings: Aggregator settings (defaults to environment settings).
            http_client: Pre-built httpx client. The caller keeps ownership
                and is responsible for closing it.
        """
        self.settings = settings or get_settings()
        self.timeout = self.settings.request_timeout_seconds
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.settings.user_agent},
                follow_redirects=True,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client if this instance created it."""
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "PRTimesClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def fetch_page(self, keyword: str, page: int) -> PageResult:
        """Fetch one page of keyword search results.

        Args:
            keyword: Search keyword (percent-encoded on the wire).
            page: 1-based page number.

        Returns:
            PageResult with page metadata and raw listings.

        Raises:
            UpstreamRequestError: Transport failure, timeout or bad status.
            UpstreamDecodeError: Body is not a search envelope.
        """
        params = {"keyword": keyword, "page": page, "limit": SEARCH_PAGE_SIZE}
        payload = await self._get_json(self.settings.search_url, params=params)

        try:
            envelope = SearchEnvelope.model_validate(payload)
        except ValidationError as e:
            raise UpstreamDecodeError(
                f"Unexpected search response for page {page}: {e.error_count()} error(s)",
                url=self.settings.search_url,
            ) from e

        return PageResult.from_envelope(envelope)

    async def fetch_like_count(self, release_id: str) -> int:
        """Fetch the like count of one release.

        Args:
            release_id: Non-empty identifier from ``extract_release_id``.

        Returns:
            Like count reported by the upstream.

        Raises:
            ValueError: If release_id is empty.
            UpstreamRequestError: Transport failure, timeout or bad status.
            UpstreamDecodeError: Body is not a like count envelope.
        """
        if not release_id:
            raise ValueError("release_id must not be empty")

        url = self.settings.like_count_url(release_id)
        payload = await self._get_json(url)

        try:
            envelope = LikeCountEnvelope.model_validate(payload)
        except ValidationError as e:
            raise UpstreamDecodeError(
                f"Unexpected like count response for {release_id}: {e.error_count()} error(s)",
                url=url,
            ) from e

        return envelope.data.like_count

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a URL under the request deadline and decode the JSON body."""
        client = await self._get_client()

        try:
            response = await asyncio.wait_for(
                client.get(url, params=params),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise UpstreamRequestError(
                f"Timed out after {self.timeout}s", url=url
            ) from e
        except httpx.HTTPStatusError as e:
            raise UpstreamRequestError(
                f"HTTP {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamRequestError(f"{type(e).__name__}: {e}", url=url) from e

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamDecodeError(f"Invalid JSON body: {e}", url=url) from e
