"""Single-pass signal scan of a parsed document."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple
from urllib.parse import SplitResult, urljoin, urlsplit

from aeo_auditor.audit.document import HtmlDocument
from aeo_auditor.audit.jsonld import extract_jsonld, jsonld_types
from aeo_auditor.audit.models import ImageStats, PageSignals
from aeo_auditor.audit.text import flesch_reading_ease, tokenize

_AUTHOR = re.compile(r"author|byline", re.IGNORECASE)
_UPDATED = re.compile(r"updated|last\s+updated|modified", re.IGNORECASE)
_PROCEDURAL = re.compile(r"\b(steps|guide|setup|install|configure)\b", re.IGNORECASE)
_REFERENCE_TEXT = re.compile(r"\b(source|reference|learn more)\b", re.IGNORECASE)

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

# Fallback selectors used when the JSON-LD type is absent.
FAQ_SELECTOR = "section#faq, .faq, [itemtype*='FAQPage']"
HOWTO_SELECTOR = "[itemtype*='HowTo']"
ARTICLE_SELECTOR = "[itemtype*='Article']"
BREADCRUMB_SELECTOR = "nav.breadcrumb, [itemtype*='BreadcrumbList']"


def looks_procedural(body_text: str) -> bool:
    """``True`` when the text reads like a guide or a set of steps."""
    return bool(_PROCEDURAL.search(body_text or ""))


def _host(parts: SplitResult) -> str:
    """``host[:port]`` with the scheme's default port omitted.

    Raises:
        ValueError: If the URL carries a malformed port.
    """
    hostname = parts.hostname or ""
    port = parts.port
    if port is None or _DEFAULT_PORTS.get(parts.scheme) == port:
        return hostname
    return f"{hostname}:{port}"


def _base_host(base_url: str) -> Optional[str]:
    """Host of *base_url*, or ``None`` when it is not an absolute URL."""
    try:
        parts = urlsplit((base_url or "").strip())
        if not parts.scheme or not parts.netloc:
            return None
        return _host(parts)
    except ValueError:
        return None


def classify_links(hrefs: List[str], base_url: str) -> Tuple[int, int]:
    """Count ``(internal, external)`` links among *hrefs*.

    Each href is resolved against *base_url*; it is internal when its host
    matches the base host.  Without a usable base URL nothing is counted,
    and hrefs that do not resolve to a valid URL are skipped.
    """
    base = _base_host(base_url)
    if base is None:
        return 0, 0

    internal = external = 0
    for href in hrefs:
        try:
            host = _host(urlsplit(urljoin(base_url.strip(), href.strip())))
        except ValueError:
            continue
        if host == base:
            internal += 1
        else:
            external += 1
    return internal, external


def scan_document(doc: HtmlDocument, base_url: str) -> PageSignals:
    """Extract every raw signal the scoring engine needs from *doc*."""
    title = doc.text(doc.select_one("title"))
    description = doc.attr(doc.select_one('meta[name="description"]'), "content") or None
    h1 = doc.text(doc.select_one("h1")) or None
    h2s = tuple(t for t in (doc.text(h) for h in doc.select("h2, h3")) if t)

    body_text = doc.body_text
    body_markup = doc.body_markup

    anchors = doc.select("a[href]")
    hrefs = [doc.attr(a, "href") or "" for a in anchors]
    internal, external = classify_links(hrefs, base_url)

    imgs = doc.select("img")
    with_alt = sum(1 for img in imgs if (doc.attr(img, "alt") or "").strip())

    types = jsonld_types(extract_jsonld(doc))

    def declared(*names: str) -> bool:
        return any(n in types for n in names)

    return PageSignals(
        title=title,
        description=description,
        lang=doc.html_lang,
        has_viewport=doc.exists('meta[name="viewport"]'),
        has_canonical=doc.exists('link[rel="canonical"]'),
        has_og=doc.exists('meta[property^="og:"]'),
        h1=h1,
        h2s=h2s,
        body_text=body_text,
        word_count=len(tokenize(body_text)),
        reading_ease=flesch_reading_ease(body_text),
        jsonld_types=tuple(types),
        faqs_detected=declared("FAQPage") or doc.exists(FAQ_SELECTOR),
        how_to_detected=declared("HowTo") or doc.exists(HOWTO_SELECTOR),
        article_detected=declared("Article") or doc.exists(ARTICLE_SELECTOR),
        breadcrumb_detected=declared("BreadcrumbList") or doc.exists(BREADCRUMB_SELECTOR),
        author_detected=bool(_AUTHOR.search(body_markup)) or declared("Person", "Organization"),
        updated_detected=bool(_UPDATED.search(body_text)) or doc.exists("time[datetime]"),
        looks_procedural=looks_procedural(body_text),
        images=ImageStats(total=len(imgs), with_alt=with_alt),
        internal_links=internal,
        external_links=external,
        has_about_link=any("about" in href for href in hrefs),
        has_contact_link=any("contact" in href for href in hrefs),
        reference_links=sum(1 for a in anchors if _REFERENCE_TEXT.search(doc.text(a))),
    )
