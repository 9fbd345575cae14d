"""Naver integrated-search HTML parsing.

Result blocks are the ``.sc_new`` children of ``#main_pack``. Each block is
classified into a section and its outbound links become ordered entries;
ad-redirect links are resolved to their destination on the way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from bs4 import BeautifulSoup

from rank_tracker.parsers.sections import classify_section
from rank_tracker.utils.urls import extract_host

logger = logging.getLogger(__name__)

SERP_DOMAIN = "naver.com"
AD_REDIRECT_PREFIX = "ader."
CONTENT_HOSTS = frozenset(
    {
        "blog.naver.com",
        "post.naver.com",
        "cafe.naver.com",
        "in.naver.com",
        "kin.naver.com",
        "tv.naver.com",
    }
)
AD_AREA = "ad_section"
POWERLINK_HEADING = "파워링크"
MIN_LINK_TEXT = 3
MAX_TITLE_LENGTH = 100

Resolver = Callable[[str], str | None]


@dataclass(frozen=True)
class RawLink:
    url: str
    title: str


@dataclass(frozen=True)
class RawBlock:
    area_code: str
    heading: str
    links: tuple[RawLink, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SerpEntry:
    url: str
    title: str
    area_code: str
    section_name: str | None


def is_serp_host(hostname: str) -> bool:
    return hostname == SERP_DOMAIN or hostname.endswith("." + SERP_DOMAIN)


def is_ad_redirect(hostname: str) -> bool:
    return hostname.startswith(AD_REDIRECT_PREFIX) and is_serp_host(hostname)


def is_naver_internal(hostname: str) -> bool:
    return (
        is_serp_host(hostname)
        and not is_ad_redirect(hostname)
        and hostname not in CONTENT_HOSTS
    )


def _is_ad_block(area_code: str, heading: str) -> bool:
    return area_code == AD_AREA or POWERLINK_HEADING in heading


def parse_blocks(html: str) -> list[RawBlock]:
    soup = BeautifulSoup(html, "lxml")
    blocks: list[RawBlock] = []
    for section in soup.select("#main_pack .sc_new"):
        area_code = section.get("data-meta-area") or ""
        h2 = section.find("h2")
        heading = h2.get_text(strip=True) if h2 else ""
        if _is_ad_block(area_code, heading):
            continue

        links: list[RawLink] = []
        seen: set[str] = set()
        for anchor in section.select('a[href^="http"]'):
            href = anchor.get("href") or ""
            host = extract_host(href)
            if not host or is_naver_internal(host):
                continue
            text = anchor.get_text(strip=True)
            if len(text) < MIN_LINK_TEXT:
                continue
            if href in seen:
                continue
            seen.add(href)
            links.append(RawLink(url=href, title=text[:MAX_TITLE_LENGTH]))

        if links:
            blocks.append(RawBlock(area_code=area_code, heading=heading, links=tuple(links)))
    return blocks


def resolve_entries(
    blocks: list[RawBlock], resolver: Resolver, classified_only: bool = False
) -> list[SerpEntry]:
    entries: list[SerpEntry] = []
    for block in blocks:
        section_name = classify_section(block.area_code, block.heading)
        if classified_only and section_name is None:
            continue
        for link in block.links:
            url = link.url
            if is_ad_redirect(extract_host(url)):
                resolved = resolver(url)
                if not resolved:
                    logger.debug("dropping unresolved ad link: %s", url)
                    continue
                url = resolved
            entries.append(
                SerpEntry(
                    url=url,
                    title=link.title,
                    area_code=block.area_code,
                    section_name=section_name,
                )
            )
    return entries


def parse_serp(html: str, resolver: Resolver, classified_only: bool = False) -> list[SerpEntry]:
    """Ordered, classified result entries in document order.

    With classified_only, blocks without a section are dropped before their
    ad links are resolved.
    """
    return resolve_entries(parse_blocks(html), resolver, classified_only)
