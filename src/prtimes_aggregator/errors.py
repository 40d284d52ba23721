"""Exceptions raised by the aggregation pipeline."""

from __future__ import annotations


class PressReleaseError(Exception):
    """Base exception for aggregator errors."""

    pass


class UpstreamError(PressReleaseError):
    """A call to a PR TIMES endpoint failed."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class UpstreamRequestError(UpstreamError):
    """Transport failure, timeout or non-2xx response."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, url=url)
        self.status_code = status_code


class UpstreamDecodeError(UpstreamError):
    """Response body is not JSON or does not match the expected envelope."""

    pass


class FirstPageUnavailableError(PressReleaseError):
    """Page 1 could not be fetched, so the page count is unknown."""

    def __init__(self, keyword: str, reason: str):
        super().__init__(f"Failed to fetch page 1 for '{keyword}': {reason}")
        self.keyword = keyword
        self.reason = reason
