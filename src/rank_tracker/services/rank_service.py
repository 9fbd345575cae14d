from __future__ import annotations

import logging
from dataclasses import dataclass

from rank_tracker.parsers.naver_serp import SerpEntry, parse_serp
from rank_tracker.providers.naver import NaverSearchClient, SearchScope
from rank_tracker.utils.urls import extract_domain, normalize_url

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 50


@dataclass(frozen=True)
class SiteRankResult:
    rank: int
    url: str
    title: str


@dataclass(frozen=True)
class UrlTrackingResult:
    is_exposed: bool
    section_exists: bool
    section_rank: int | None
    overall_rank: int | None
    found_in_section: str | None


def find_site_rank(
    entries: list[SerpEntry], site_url: str, max_results: int = DEFAULT_MAX_RESULTS
) -> SiteRankResult | None:
    target_host = normalize_url(extract_domain(site_url))
    for position, entry in enumerate(entries, start=1):
        if position > max_results:
            break
        if normalize_url(extract_domain(entry.url)) == target_host:
            return SiteRankResult(rank=position, url=entry.url, title=entry.title)
    return None


def find_url_exposure(
    entries: list[SerpEntry], target_url: str, section: str | None = None
) -> UrlTrackingResult:
    """Locate target_url on the page with both its global and per-section rank.

    Entries without a section are skipped: they take neither a global nor a
    section position.
    """
    target = normalize_url(target_url)
    section_counters: dict[str, int] = {}
    section_exists = False
    first: tuple[int, str, int] | None = None
    in_section: tuple[int, str, int] | None = None

    overall = 0
    for entry in entries:
        if entry.section_name is None:
            continue
        overall += 1
        section_rank = section_counters.get(entry.section_name, 0) + 1
        section_counters[entry.section_name] = section_rank
        if section is not None and entry.section_name == section:
            section_exists = True

        if normalize_url(entry.url) != target:
            continue
        hit = (overall, entry.section_name, section_rank)
        if first is None:
            first = hit
        if in_section is None and section is not None and entry.section_name == section:
            in_section = hit

    if first is None:
        return UrlTrackingResult(
            is_exposed=False,
            section_exists=section_exists,
            section_rank=None,
            overall_rank=None,
            found_in_section=None,
        )

    _, found_in, section_rank = in_section or first
    return UrlTrackingResult(
        is_exposed=True,
        section_exists=section_exists,
        section_rank=section_rank,
        overall_rank=first[0],
        found_in_section=found_in,
    )


class RankChecker:
    def __init__(
        self,
        client: NaverSearchClient,
        site_scope: SearchScope | str = SearchScope.web,
        url_scope: SearchScope | str = SearchScope.nexearch,
    ) -> None:
        self._client = client
        self.site_scope = SearchScope(site_scope)
        self.url_scope = SearchScope(url_scope)

    def entries(
        self, keyword: str, scope: SearchScope, classified_only: bool = False
    ) -> list[SerpEntry]:
        html = self._client.fetch(keyword, scope)
        entries = parse_serp(html, self._client.resolve_redirect, classified_only)
        logger.info("parsed %d entries: keyword=%s scope=%s", len(entries), keyword, scope.value)
        return entries

    def check_site_rank(self, keyword: str, site_url: str) -> SiteRankResult | None:
        return find_site_rank(self.entries(keyword, self.site_scope), site_url)

    def check_url_tracking(
        self, keyword: str, target_url: str, section: str | None = None
    ) -> UrlTrackingResult:
        entries = self.entries(keyword, self.url_scope, classified_only=True)
        return find_url_exposure(entries, target_url, section or None)
