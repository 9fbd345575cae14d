from __future__ import annotations

import re
from urllib.parse import urlparse

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_WWW_RE = re.compile(r"^www\.", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Canonical form for equality checks: no scheme, no www., no trailing slash, lowercase.

    Idempotent for any input string.
    """
    try:
        value = url.lower()
        while True:
            stripped = _SCHEME_RE.sub("", value)
            stripped = _WWW_RE.sub("", stripped)
            stripped = stripped.rstrip("/")
            if stripped == value:
                return value
            value = stripped
    except (AttributeError, TypeError):
        return str(url).lower()


def extract_host(url: str) -> str:
    try:
        parsed = urlparse(url)
        if not parsed.netloc:
            parsed = urlparse(f"//{url}")
    except ValueError:
        return ""
    return (parsed.hostname or "").lower()


def extract_domain(url: str) -> str:
    host = extract_host(url)
    if host.startswith("www."):
        host = host[4:]
    return host
