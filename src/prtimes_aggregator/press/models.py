"""Data models for press release aggregation.

Upstream envelopes are pydantic models so that a malformed response surfaces
as a decode error. Everything the pipeline passes around internally is a
plain frozen dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Upstream envelopes
# =============================================================================


class ReleaseEntry(BaseModel):
    """One entry of ``data.release_list`` in a search response."""

    company_name: str = ""
    title: str = ""
    thumbnail_url: str = ""
    release_url: str = ""
    released_at: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class SearchData(BaseModel):
    current_page: int = 1
    last_page: int = 0
    release_list: list[ReleaseEntry] = Field(default_factory=list)


class SearchEnvelope(BaseModel):
    """Keyword search response."""

    data: SearchData
    status: int | None = None
    message: str | None = None


class LikeCountData(BaseModel):
    like_count: int = 0


class LikeCountEnvelope(BaseModel):
    """Like count response."""

    data: LikeCountData


# =============================================================================
# Pipeline models
# =============================================================================


@dataclass(frozen=True)
class RawListing:
    """A search hit exactly as the upstream returned it."""

    company_name: str
    title: str
    thumbnail_url: str
    release_url: str  # Relative path, e.g. /main/html/rd/p/000000123.000045678.html
    released_at: str  # Source formatted, e.g. "3時間前" or "2024年12月3日 09時00分"

    @classmethod
    def from_entry(cls, entry: ReleaseEntry) -> "RawListing":
        return cls(
            company_name=entry.company_name,
            title=entry.title,
            thumbnail_url=entry.thumbnail_url,
            release_url=entry.release_url,
            released_at=entry.released_at,
        )


@dataclass(frozen=True)
class PageResult:
    """One fetched search page."""

    current_page: int
    last_page: int
    listings: tuple[RawListing, ...] = ()

    @classmethod
    def from_envelope(cls, envelope: SearchEnvelope) -> "PageResult":
        return cls(
            current_page=envelope.data.current_page,
            last_page=envelope.data.last_page,
            listings=tuple(RawListing.from_entry(e) for e in envelope.data.release_list),
        )


@dataclass(frozen=True)
class ResultItem:
    """A listing enriched with its like count and a normalized date."""

    corporation_name: str
    published_at: str  # YYYY年MM月DD日 HH:MM
    thumbnail_url: str
    post_url: str
    title: str
    like_count: int

    # Origin of the listing, used as the secondary sort key
    page: int = field(default=0, compare=False)
    position: int = field(default=0, compare=False)

    def to_dict(self) -> dict:
        """Convert to the JSON shape served to clients.

        Key names, including ``publishdDatetime``, are part of the existing
        client contract.
        """
        return {
            "corporationName": self.corporation_name,
            "publishdDatetime": self.published_at,
            "thumbnailUrl": self.thumbnail_url,
            "postUrl": self.post_url,
            "title": self.title,
            "likeCount": self.like_count,
        }


@dataclass
class AggregationReport:
    """Result of one aggregation run."""

    keyword: str
    items: list[ResultItem] = field(default_factory=list)
    total_pages: int = 0
    items_collected: int = 0
    failed_pages: list[str] = field(default_factory=list)
    like_count_failures: int = 0
    missing_release_ids: int = 0
    unparsed_dates: int = 0
    duration_ms: int = 0

    @property
    def pages_fetched(self) -> int:
        return self.total_pages - len(self.failed_pages)

    @property
    def is_complete(self) -> bool:
        """True when no page failed and every like count was resolved."""
        return not self.failed_pages and self.like_count_failures == 0 and self.missing_release_ids == 0

    def to_dict(self) -> dict:
        return {
            "keyword": self.keyword,
            "total_pages": self.total_pages,
            "pages_fetched": self.pages_fetched,
            "items_collected": self.items_collected,
            "items_returned": len(self.items),
            "failed_pages": list(self.failed_pages),
            "like_count_failures": self.like_count_failures,
            "missing_release_ids": self.missing_release_ids,
            "unparsed_dates": self.unparsed_dates,
            "duration_ms": self.duration_ms,
        }
