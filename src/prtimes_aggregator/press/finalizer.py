"""Post-processing of the merged result collection."""

from __future__ import annotations

from typing import Iterable

from .models import ResultItem


def finalize_results(items: Iterable[ResultItem], limit: int = 0) -> list[ResultItem]:
    """Sort items by like count (descending) and apply the limit.

    Equal like counts keep search order (page, then position in page).

    Args:
        items: Finished result items.
        limit: Maximum items to return. 0 means unlimited.

    Returns:
        New list, never longer than ``limit`` when limit > 0.
    """
    ranked = sorted(items, key=lambda item: (-item.like_count, item.page, item.position))

    if limit > 0 and len(ranked) > limit:
        ranked = ranked[:limit]

    return ranked
