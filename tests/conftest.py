"""Shared test fixtures and configuration.

Provides settings, a frozen clock, listing builders and a fake PR TIMES
upstream usable either as an ``httpx.MockTransport`` (to exercise the real
client) or through an ``AsyncMock`` client double.
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from prtimes_aggregator.config import AggregatorSettings
from prtimes_aggregator.errors import UpstreamRequestError
from prtimes_aggregator.press.models import PageResult, RawListing
from prtimes_aggregator.utils.date_normalizer import DateNormalizer

BASE_URL = "https://prtimes.test"
FIXED_NOW = datetime(2024, 12, 10, 15, 30)

_LIKE_PATH = re.compile(r"/press_release/([0-9.]+)/like_count$")


@pytest.fixture
def settings(tmp_path: Path) -> AggregatorSettings:
    """Settings pointing at a fake host with short deadlines."""
    return AggregatorSettings(
        base_url=BASE_URL,
        request_timeout_seconds=1.0,
        max_concurrent_pages=8,
        max_concurrent_lookups=16,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def normalizer() -> DateNormalizer:
    """Date normalizer frozen at FIXED_NOW."""
    return DateNormalizer(clock=lambda: FIXED_NOW)


def release_path(company: int, release: int) -> str:
    return f"/main/html/rd/p/{release:09d}.{company:09d}.html"


def make_entry(page: int, index: int, released_at: str = "2024年12月3日 09時00分") -> dict[str, Any]:
    """Build one upstream release_list entry."""
    return {
        "company_name": f"Company {page}-{index}",
        "title": f"Release {page}-{index}",
        "thumbnail_url": f"https://img.test/{page}/{index}.jpg",
        "release_url": release_path(company=page, release=index + 1),
        "released_at": released_at,
    }


def make_listing(page: int, index: int, released_at: str = "2024年12月3日 09時00分") -> RawListing:
    return RawListing(**make_entry(page, index, released_at))


def make_page(page: int, last_page: int, count: int) -> PageResult:
    return PageResult(
        current_page=page,
        last_page=last_page,
        listings=tuple(make_listing(page, i) for i in range(count)),
    )


def release_id_of(entry: dict[str, Any]) -> str:
    return entry["release_url"].rsplit("/", 1)[-1].removesuffix(".html")


class FakeUpstream:
    """In-memory PR TIMES API.

    Args:
        pages: Entries per page number. ``last_page`` is len(pages).
        likes: Like count per release id (missing ids answer 0).
        failing_pages: Page numbers answering HTTP 500.
        failing_likes: Release ids answering HTTP 500.
    """

    def __init__(
        self,
        pages: dict[int, list[dict[str, Any]]],
        likes: dict[str, int] | None = None,
        failing_pages: set[int] | None = None,
        failing_likes: set[str] | None = None,
    ):
        self.pages = pages
        self.likes = likes or {}
        self.failing_pages = failing_pages or set()
        self.failing_likes = failing_likes or set()
        self.requests: list[httpx.Request] = []

    @property
    def search_pages_requested(self) -> list[int]:
        return [
            int(r.url.params["page"])
            for r in self.requests
            if r.url.path.endswith("/search")
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path.endswith("/search"):
            page = int(request.url.params["page"])
            if page in self.failing_pages:
                return httpx.Response(500, json={"message": "error"})
            return httpx.Response(200, json={
                "data": {
                    "current_page": page,
                    "last_page": len(self.pages),
                    "release_list": self.pages.get(page, []),
                },
                "status": 200,
                "message": "success",
            })

        match = _LIKE_PATH.search(request.url.path)
        if match:
            release_id = match.group(1)
            if release_id in self.failing_likes:
                return httpx.Response(500, json={"message": "error"})
            return httpx.Response(200, json={"data": {"like_count": self.likes.get(release_id, 0)}})

        return httpx.Response(404)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_client(settings: AggregatorSettings) -> MagicMock:
    """Client double with AsyncMock fetchers.

    Configure ``fetch_page.side_effect`` / ``fetch_like_count.side_effect``
    per test.
    """
    client = MagicMock()
    client.settings = settings
    client.fetch_page = AsyncMock()
    client.fetch_like_count = AsyncMock(return_value=0)
    client.close = AsyncMock()
    return client


def failing_page(page: int) -> UpstreamRequestError:
    return UpstreamRequestError(f"HTTP 500 for page {page}", url=f"{BASE_URL}/search", status_code=500)
