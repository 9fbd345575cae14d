"""Tests for utils.urls."""

import pytest

from rank_tracker.utils.urls import extract_domain, extract_host, normalize_url


class TestNormalizeUrl:
    def test_strips_scheme_www_slash_and_case(self):
        assert normalize_url("https://WWW.Example.com/path/") == normalize_url("example.com/path")
        assert normalize_url("https://WWW.Example.com/path/") == "example.com/path"

    def test_http_scheme(self):
        assert normalize_url("http://blog.naver.com/insure/223") == "blog.naver.com/insure/223"

    def test_keeps_query_string(self):
        assert normalize_url("https://example.com/a?b=1") == "example.com/a?b=1"

    @pytest.mark.parametrize(
        "url",
        [
            "https://WWW.Example.com/path/",
            "https://https://www.example.com//",
            "www.www.example.com",
            "HTTP://WWW.EXAMPLE.COM",
            "",
            "/",
            "not a url at all",
        ],
    )
    def test_idempotent(self, url):
        once = normalize_url(url)
        assert normalize_url(once) == once

    def test_non_string_falls_back_to_lowercase_copy(self):
        assert normalize_url(None) == "none"


class TestExtractHost:
    def test_with_scheme(self):
        assert extract_host("https://Blog.Naver.com/x") == "blog.naver.com"

    def test_without_scheme(self):
        assert extract_host("example.com/page") == "example.com"

    def test_domain_strips_www(self):
        assert extract_domain("https://www.example.com/") == "example.com"

    def test_empty(self):
        assert extract_host("") == ""

    def test_malformed(self):
        assert extract_host("http://[broken") == ""
