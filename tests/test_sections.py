"""Tests for parsers.sections."""

import pytest

from rank_tracker.parsers.sections import BRAND_CONTENT, SECTION_MAP, VIEW, classify_section


class TestClassifySection:
    def test_known_area_code(self):
        assert classify_section("ugB_adR", "") == BRAND_CONTENT
        assert classify_section("ugB_adR", "브랜드 콘텐츠") == "브랜드콘텐츠"
        assert classify_section("nws_all", "뉴스") == "뉴스"
        assert classify_section("web_gen", "웹사이트") == "웹"
        assert classify_section("ugB_ipR", "") == "인플루언서"

    def test_view_sub_area_without_heading(self):
        assert classify_section("ugB_b2R", "") == VIEW

    def test_view_sub_area_prefers_heading(self):
        assert classify_section("ugB_b2R", "인기글") == "인기글"

    def test_brand_heading_fallback(self):
        assert classify_section("unknown", "추천 브랜드 콘텐츠 모음") == BRAND_CONTENT

    def test_heading_verbatim(self):
        assert classify_section("kin_all", "지식iN") == "지식iN"

    def test_unclassifiable(self):
        assert classify_section("", "") is None
        assert classify_section("zzz", "   ") is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SECTION_MAP["new"] = "x"  # type: ignore[index]
        assert "new" not in SECTION_MAP
