"""HTTP routes for the aggregated press release endpoint."""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from ..config import AggregatorSettings
from ..press.client import PRTimesClient
from ..press.service import run_search
from ..press.validation import validate_search

router = APIRouter(tags=["prtimes"])
logger = logging.getLogger("prtimes")


def get_app_settings(request: Request) -> AggregatorSettings:
    return request.app.state.settings


async def get_prtimes_client(
    settings: AggregatorSettings = Depends(get_app_settings),
) -> AsyncIterator[PRTimesClient]:
    """One upstream client per request, closed when the response is sent."""
    client = PRTimesClient(settings=settings)
    try:
        yield client
    finally:
        await client.close()


@router.get("/prtimes_posts")
async def prtimes_posts(
    keyword: Optional[str] = None,
    limit: Optional[str] = None,
    client: PRTimesClient = Depends(get_prtimes_client),
):
    """Return every release matching ``keyword``, most liked first.

    Only a page 1 failure is reported as an error. Other upstream failures
    show up as fewer items or zero like counts.
    """
    validated = validate_search(keyword, limit)
    if validated.is_failure():
        raise HTTPException(status_code=400, detail=validated.error)

    result = await run_search(validated.value, settings=client.settings, client=client)
    if result.is_failure():
        logger.error(f"PRTIMES_POSTS_ERROR | {result.error} | {result.details}")
        raise HTTPException(status_code=500, detail=result.error)

    return JSONResponse(content=[item.to_dict() for item in result.value.items])


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
