"""Stateless service for keyword search runs, used by the CLI and HTTP surfaces."""

from __future__ import annotations

from ..config import AggregatorSettings, get_settings
from ..errors import FirstPageUnavailableError
from .aggregator import PressReleaseAggregator
from .client import PRTimesClient
from .models import AggregationReport
from .types import Failure, Result, SearchParams, Success

UPSTREAM_UNAVAILABLE = "Failed to fetch data from PR TIMES API"


async def run_search(
    params: SearchParams,
    settings: AggregatorSettings | None = None,
    client: PRTimesClient | None = None,
) -> Result[AggregationReport]:
    """Run one aggregation for validated search params.

    Args:
        params: Validated keyword and limit
        settings: Optional settings (defaults to environment settings)
        client: Optional upstream client. When omitted a client is created
            and closed for this run.

    Returns:
        Result containing the report, or failure when page 1 is unavailable
    """
    settings = settings or get_settings()
    owns_client = client is None
    client = client or PRTimesClient(settings=settings)

    try:
        aggregator = PressReleaseAggregator(client, settings=settings)
        report = await aggregator.aggregate(params.keyword, params.limit)
    except FirstPageUnavailableError as e:
        return Failure(UPSTREAM_UNAVAILABLE, {"keyword": e.keyword, "reason": e.reason})
    finally:
        if owns_client:
            await client.close()

    return Success(report)
