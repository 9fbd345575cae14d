from __future__ import annotations

import re
from types import MappingProxyType

BRAND_CONTENT = "브랜드콘텐츠"
VIEW = "VIEW"

SECTION_MAP = MappingProxyType(
    {
        "ugB_adR": BRAND_CONTENT,
        "ugB_bsR": VIEW,
        "ugB_ipR": "인플루언서",
        "web_gen": "웹",
        "sit_5po": "웹",
        "nws_all": "뉴스",
    }
)

# ugB_b<digit>R areas are VIEW sub-areas; their own heading wins when present.
_VIEW_AREA_RE = re.compile(r"^ugB_b\dR$")
_BRAND_HEADING = "브랜드 콘텐츠"


def classify_section(area_code: str, heading: str = "") -> str | None:
    """Map a block's data-meta-area code and heading to a section name.

    Returns None for blocks with neither a known code nor a heading.
    """
    heading = (heading or "").strip()
    section = SECTION_MAP.get(area_code)
    if section:
        return section
    if _VIEW_AREA_RE.match(area_code or ""):
        return heading or VIEW
    if _BRAND_HEADING in heading:
        return BRAND_CONTENT
    return heading or None
