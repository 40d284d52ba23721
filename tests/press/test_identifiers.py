"""Unit tests for release identifier extraction."""

from __future__ import annotations

from prtimes_aggregator.press.identifiers import extract_release_id


class TestExtractReleaseId:
    """Tests for extract_release_id function."""

    def test_relative_release_path(self):
        assert extract_release_id("/main/html/rd/p/123.456.html") == "123.456"

    def test_zero_padded_components_kept_verbatim(self):
        assert extract_release_id("/main/html/rd/p/000000123.000045678.html") == "000000123.000045678"

    def test_absolute_url(self):
        url = "https://prtimes.jp/main/html/rd/p/000000001.000002222.html"
        assert extract_release_id(url) == "000000001.000002222"

    def test_path_without_release_shape_returns_empty(self):
        assert extract_release_id("/main/html/rd/p/123.html") == ""
        assert extract_release_id("/main/html/rd/p/abc.456.html") == ""
        assert extract_release_id("/main/html/rd/p/123.456.htm") == ""
        assert extract_release_id("/topics/keywords/AI") == ""

    def test_empty_and_missing_input(self):
        assert extract_release_id("") == ""
        assert extract_release_id(None) == ""
