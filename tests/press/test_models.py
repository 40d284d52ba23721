"""Tests for upstream envelopes and pipeline models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from prtimes_aggregator.press.models import (
    AggregationReport,
    PageResult,
    ResultItem,
    SearchEnvelope,
)


class TestSearchEnvelope:
    """Tests for decoding search responses."""

    def test_status_and_message_optional(self):
        envelope = SearchEnvelope.model_validate({"data": {"current_page": 2, "last_page": 5}})

        page = PageResult.from_envelope(envelope)
        assert (page.current_page, page.last_page, page.listings) == (2, 5, ())

    def test_unknown_fields_ignored(self):
        envelope = SearchEnvelope.model_validate({
            "data": {"last_page": 1, "release_list": [{"title": "t", "main_category": "x"}]},
            "status": 200,
            "message": "ok",
            "extra": True,
        })

        assert PageResult.from_envelope(envelope).listings[0].title == "t"

    def test_missing_data_rejected(self):
        with pytest.raises(ValidationError):
            SearchEnvelope.model_validate({"status": 200})


class TestResultItem:
    """Tests for ResultItem serialization."""

    def test_to_dict_omits_origin(self):
        item = ResultItem("Acme", "2024年12月03日 09:00", "thumb", "url", "Title", 4, page=3, position=1)

        assert item.to_dict() == {
            "corporationName": "Acme",
            "publishdDatetime": "2024年12月03日 09:00",
            "thumbnailUrl": "thumb",
            "postUrl": "url",
            "title": "Title",
            "likeCount": 4,
        }

    def test_immutable(self):
        item = ResultItem("Acme", "", "", "", "", 0)
        with pytest.raises(AttributeError):
            item.like_count = 5


class TestAggregationReport:
    """Tests for AggregationReport."""

    def test_counts(self):
        report = AggregationReport(keyword="AI", total_pages=4, failed_pages=["page 3: HTTP 500"])

        assert report.pages_fetched == 3
        assert not report.is_complete
        assert report.to_dict()["pages_fetched"] == 3

    def test_complete(self):
        assert AggregationReport(keyword="AI", total_pages=1).is_complete
