"""HTTP page fetcher with optional HTML / CORS proxy templating."""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import quote

import httpx

from aeo_auditor.config import settings
from aeo_auditor.scraper.models import RawPage

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (compatible; AEO-Auditor/0.1; +https://schema.org/FAQPage)"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

_HTTP_SCHEME = re.compile(r"^https?://", re.IGNORECASE)

# Characters JavaScript's encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def normalize_url(raw: str) -> str:
    """Accept bare domains like ``example.com`` by prefixing ``https://``."""
    url = (raw or "").strip()
    if not url:
        return ""
    if _HTTP_SCHEME.match(url):
        return url
    return f"https://{url}"


def build_fetch_url(proxy: str, page_url: str) -> str:
    """Return the URL to request for *page_url* through *proxy*.

    Supported proxy forms:

    - ``""``: no proxy, fetch *page_url* directly.
    - ``"http://localhost:8787/fetch?url={url}"``: placeholder replaced by
      the percent-encoded page URL.
    - ``"http://localhost:8787/fetch?url="``: query-style, encoded URL appended.
    - ``"https://r.jina.ai/"``: path-prefix, raw URL appended (``/`` inserted
      when missing).
    """
    trimmed = (proxy or "").strip()
    if not trimmed:
        return page_url
    if "{url}" in trimmed:
        return trimmed.replace("{url}", encode_uri_component(page_url), 1)
    if "?" in trimmed:
        return trimmed + encode_uri_component(page_url)
    return trimmed + page_url if trimmed.endswith("/") else f"{trimmed}/{page_url}"


def fetch_html(
    url: str,
    proxy: str = "",
    timeout: Optional[float] = None,
) -> RawPage:
    """Fetch *url* (optionally through *proxy*) and return a :class:`RawPage`.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.HTTPError: On transport failures and timeouts.
    """
    target = build_fetch_url(proxy, url)
    logger.info("Fetching %s", target)

    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout if timeout is None else timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(target)
        response.raise_for_status()
        html = response.text
        status_code = response.status_code

    logger.info("Fetched %s (HTTP %d, %d chars)", target, status_code, len(html))
    return RawPage(url=url, fetch_url=target, html=html, status_code=status_code)
