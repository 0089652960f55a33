"""Heuristic detection of reader-mode / proxy-sanitised HTML.

Stripping proxies drop meta tags, JSON-LD, images and navigation, which
drags several sub-scores down.  The check errs towards flagging thin pages
rather than staying silent on stripped ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from aeo_auditor.audit.document import HtmlDocument
from aeo_auditor.audit.jsonld import JSONLD_SELECTOR

MIN_BODY_LENGTH = 200
LONG_BODY_LENGTH = 800
MIN_REASONS = 4

# (selector, reason) pairs; each missing selector contributes its reason.
_PRESENCE_CHECKS: Tuple[Tuple[str, str], ...] = (
    ("title", "No <title> tag found."),
    ('meta[name="description"]', "No meta description tag found."),
    ('link[rel="canonical"]', "No canonical <link> found."),
    ('meta[property^="og:"]', "No Open Graph meta tags found."),
    (JSONLD_SELECTOR, "No JSON-LD structured data blocks found."),
    ("img", "No <img> tags found (images removed?)."),
    ("nav, header", "No <nav> or <header> elements found (navigation stripped?)."),
)

_EMPTY_HEAD_REASON = "<head> is almost empty, suggesting sanitized HTML."
_LONG_TEXT_REASON = (
    "Long article text but very few SEO tags, typical of reader-mode / cleaned HTML."
)


@dataclass(frozen=True)
class SanitizationResult:
    is_sanitized: bool
    reasons: Tuple[str, ...]


def detect_sanitized_html(doc: HtmlDocument, body_text: str) -> SanitizationResult:
    reasons = [reason for css, reason in _PRESENCE_CHECKS if not doc.exists(css)]
    if doc.head_child_count == 0:
        reasons.append(_EMPTY_HEAD_REASON)

    body_len = len((body_text or "").strip())
    if body_len > LONG_BODY_LENGTH and len(reasons) >= MIN_REASONS:
        reasons.append(_LONG_TEXT_REASON)

    is_sanitized = body_len > MIN_BODY_LENGTH and len(reasons) >= MIN_REASONS
    return SanitizationResult(is_sanitized=is_sanitized, reasons=tuple(reasons))
