"""Release identifier extraction from PR TIMES permalinks."""

from __future__ import annotations

import re

_RELEASE_PATH_PATTERN = re.compile(r"/main/html/rd/p/([0-9]+)\.([0-9]+)\.html")


def extract_release_id(release_url: str) -> str:
    """Extract the "<company>.<release>" identifier from a release path.

    Pure function - no side effects.

    Args:
        release_url: Release permalink, relative or absolute.

    Returns:
        Identifier like "000000123.000045678", or "" when the path does not
        have the release shape. An empty identifier means the like count is
        unknown; it is not an error.
    """
    match = _RELEASE_PATH_PATTERN.search(release_url or "")
    if not match:
        return ""
    return f"{match.group(1)}.{match.group(2)}"
