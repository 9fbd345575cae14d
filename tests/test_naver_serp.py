"""Tests for parsers.naver_serp."""

from rank_tracker.parsers.naver_serp import (
    is_ad_redirect,
    is_naver_internal,
    parse_blocks,
    parse_serp,
)

RESOLVED = {"https://ader.naver.com/v1/abc": "https://example.com/page"}


def fake_resolver(url):
    return RESOLVED.get(url)


class TestHostRules:
    def test_content_host_is_not_internal(self):
        assert not is_naver_internal("blog.naver.com")

    def test_ader_requires_resolution(self):
        assert is_ad_redirect("ader.naver.com")
        assert not is_naver_internal("ader.naver.com")

    def test_search_host_is_internal(self):
        assert is_naver_internal("search.naver.com")

    def test_external_host(self):
        assert not is_naver_internal("example.com")
        assert not is_ad_redirect("ader.example.com")

    def test_look_alike_domains(self):
        assert not is_ad_redirect("ader.evilnaver.com")
        assert not is_naver_internal("mynaver.com")
        assert is_naver_internal("naver.com")


class TestParseBlocks:
    def test_skips_ads_and_empty_blocks(self, nexearch_html):
        blocks = parse_blocks(nexearch_html)
        areas = [b.area_code for b in blocks]
        assert areas == ["ugB_adR", "ugB_b2R", "nws_all", "", "web_gen"]

    def test_link_filtering(self, nexearch_html):
        blocks = parse_blocks(nexearch_html)
        view = blocks[1]
        assert view.heading == "인기글"
        assert [link.url for link in view.links] == [
            "https://blog.naver.com/insure/223",
            "https://cafe.naver.com/insurance/77",
        ]

    def test_heading_is_stripped(self, nexearch_html):
        assert parse_blocks(nexearch_html)[0].heading == "브랜드 콘텐츠"

    def test_title_truncated(self):
        long_title = "가" * 150
        html = (
            '<div id="main_pack"><div class="sc_new" data-meta-area="web_gen">'
            f'<a href="https://example.com/">{long_title}</a></div></div>'
        )
        blocks = parse_blocks(html)
        assert len(blocks[0].links[0].title) == 100

    def test_empty_html(self):
        assert parse_blocks("<html><body></body></html>") == []


class TestParseSerp:
    def test_entries_in_document_order(self, nexearch_html):
        entries = parse_serp(nexearch_html, fake_resolver)
        assert [e.url for e in entries] == [
            "https://example.com/page",
            "https://blog.naver.com/insure/223",
            "https://cafe.naver.com/insurance/77",
            "https://news.example.org/article/1",
            "https://other.com/about",
            "https://www.example.com/",
        ]

    def test_sections(self, nexearch_html):
        entries = parse_serp(nexearch_html, fake_resolver)
        assert [e.section_name for e in entries] == [
            "브랜드콘텐츠",
            "인기글",
            "인기글",
            "뉴스",
            None,
            "웹",
        ]

    def test_unresolved_ad_link_dropped(self, nexearch_html):
        entries = parse_serp(nexearch_html, fake_resolver)
        assert all("ader." not in e.url for e in entries)
        assert "끊긴 광고 링크" not in [e.title for e in entries]

    def test_resolver_called_only_for_ad_links(self, nexearch_html):
        calls = []

        def resolver(url):
            calls.append(url)
            return None

        parse_serp(nexearch_html, resolver)
        assert calls == ["https://ader.naver.com/v1/abc", "https://ader.naver.com/v1/dead"]

    def test_classified_only_drops_unnamed_blocks(self, nexearch_html):
        entries = parse_serp(nexearch_html, fake_resolver, classified_only=True)
        assert "https://other.com/about" not in [e.url for e in entries]
        assert all(e.section_name is not None for e in entries)
        assert len(entries) == 5

    def test_classified_only_skips_resolution_for_unnamed_blocks(self):
        html = (
            '<div id="main_pack">'
            '<div class="sc_new" data-meta-area="">'
            '<a href="https://ader.naver.com/v1/orphan">분류 없는 광고</a></div>'
            '<div class="sc_new" data-meta-area="ugB_adR">'
            '<a href="https://ader.naver.com/v1/abc">보험 비교 가이드</a></div>'
            "</div>"
        )
        calls = []

        def resolver(url):
            calls.append(url)
            return RESOLVED.get(url)

        entries = parse_serp(html, resolver, classified_only=True)
        assert calls == ["https://ader.naver.com/v1/abc"]
        assert [e.url for e in entries] == ["https://example.com/page"]
