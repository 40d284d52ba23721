"""Tests for the search service shared by the CLI and HTTP surfaces."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from prtimes_aggregator.api import routes
from prtimes_aggregator.errors import FirstPageUnavailableError
from prtimes_aggregator.press.client import PRTimesClient
from prtimes_aggregator.press.models import AggregationReport
from prtimes_aggregator.press.service import UPSTREAM_UNAVAILABLE, run_search
from prtimes_aggregator.press.types import SearchParams

from conftest import FakeUpstream, make_entry


class TestRunSearch:
    """Tests for run_search function."""

    @pytest.mark.asyncio
    async def test_first_page_failure_becomes_failure(self, fake_client, settings):
        with patch("prtimes_aggregator.press.service.PressReleaseAggregator") as aggregator_cls:
            aggregator_cls.return_value.aggregate = AsyncMock(
                side_effect=FirstPageUnavailableError("AI", "HTTP 500")
            )
            result = await run_search(SearchParams("AI"), settings=settings, client=fake_client)

        assert result.is_failure()
        assert result.error == UPSTREAM_UNAVAILABLE
        assert result.details["reason"] == "HTTP 500"
        fake_client.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_success_wraps_report(self, fake_client, settings):
        report = AggregationReport(keyword="AI", total_pages=1)
        with patch("prtimes_aggregator.press.service.PressReleaseAggregator") as aggregator_cls:
            aggregator_cls.return_value.aggregate = AsyncMock(return_value=report)
            result = await run_search(SearchParams("AI", 1), settings=settings, client=fake_client)

        assert result.value is report
        aggregator_cls.return_value.aggregate.assert_awaited_once_with("AI", 1)

    @pytest.mark.asyncio
    async def test_limit_applied_with_upstream(self, settings):
        upstream = FakeUpstream(pages={1: [make_entry(1, 0), make_entry(1, 1)]})

        async with PRTimesClient(settings=settings, http_client=upstream.http_client()) as client:
            result = await run_search(SearchParams("AI", 1), settings=settings, client=client)

        assert result.is_success()
        assert len(result.value.items) == 1
        assert result.value.items_collected == 2


class TestSurfaceWiring:
    """The HTTP routes use the shared service, not the CLI package."""

    def test_routes_use_press_service(self):
        assert routes.run_search is run_search
        assert routes.validate_search.__module__ == "prtimes_aggregator.press.validation"
