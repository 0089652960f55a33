"""Heading classification and heading-to-question rewriting.

Rules are regex heuristics evaluated in a fixed order; the first match wins,
so reordering them changes the output for ambiguous headings.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Tuple

from aeo_auditor.audit.jsonld import unique
from aeo_auditor.audit.models import FaqItem

MAX_SUGGESTED_FAQS = 8

PLACEHOLDER_ANSWER = (
    "Add a concise, 1–3 sentence answer in plain language. Include a key fact or step."
)

_QUESTION_START = re.compile(
    r"^(what|why|how|when|where|who|which|can|do|does|is|are|should|could|will|won't|can't|may)\b",
    re.IGNORECASE,
)

# Navigation / UI / generic marketing headings that never become FAQs.
_MARKETING_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"customer reviews?",
        r"reviews?",
        r"recently viewed",
        r"you may also like",
        r"related products?",
        r"support",
        r"help",
        r"explore",
        r"about us",
        r"contact us",
        r"my account",
        r"login",
        r"sign in",
        r"basket",
        r"cart",
        r"wishlist",
        r"newsletter",
        r"follow us",
        r"social",
        r"shop now",
        r"view all",
        r"special offer",
        r"limited time offer",
        r"see more",
        r"prospera home",
    )
)

_WHITESPACE = re.compile(r"\s+")
_TRAILING_PUNCT = re.compile(r"[.?!]+$")
_GET_PREFIX = re.compile(r"^get\b", re.IGNORECASE)
_OFFER = re.compile(r"offer", re.IGNORECASE)
_FREE = re.compile(r"\bfree\b", re.IGNORECASE)
_PRODUCT_NOUN = re.compile(
    r"\b(product|bundle|kit|plan|subscription|tester|analyser|manifold|set)\b",
    re.IGNORECASE,
)
_COLLECTION = re.compile(r"\bcollection\b", re.IGNORECASE)


def is_question_like(s: str) -> bool:
    t = s.strip()
    return bool(_QUESTION_START.search(t)) or t.endswith("?")


def is_marketing_heading(h: str) -> bool:
    """``True`` for headings too short or too navigational to be an FAQ."""
    t = h.strip()
    if len(t) < 5:
        return True
    return any(p.search(t) for p in _MARKETING_PATTERNS)


def heading_to_question(raw: str) -> str:
    """Rewrite a heading as a natural-language question."""
    t = _WHITESPACE.sub(" ", raw.strip())
    if not t:
        return ""

    if is_question_like(t):
        return t if t.endswith("?") else t + "?"

    base = _TRAILING_PUNCT.sub("", t)

    if _GET_PREFIX.search(base):
        return f"How can I {_GET_PREFIX.sub('', base, count=1).strip()}?"
    if _OFFER.search(base):
        return f"What offer is available for {_OFFER.sub('', base, count=1).strip()}?"
    if _FREE.search(base):
        return f"What free gifts or bonuses are included with {base}?"
    if _PRODUCT_NOUN.search(base):
        return f"What should I know about the {base}?"
    if _COLLECTION.search(base):
        return f"What is included in the {base} collection?"
    return f"What should I know about {base}?"


def faq_candidates(headings: Iterable[str]) -> List[str]:
    """Non-marketing headings, trimmed and de-duplicated in first-seen order."""
    trimmed = (h.strip() for h in headings)
    return unique(h for h in trimmed if h and not is_marketing_heading(h))


def classify_headings(
    headings: Sequence[str],
) -> Tuple[List[str], List[str], List[FaqItem]]:
    """Return ``(candidates, qa_headings, suggested_faqs)`` for *headings*."""
    candidates = faq_candidates(headings)
    qa_headings = [h for h in candidates if is_question_like(h)]
    suggested = [
        FaqItem(question=heading_to_question(h), answer=PLACEHOLDER_ANSWER)
        for h in candidates[:MAX_SUGGESTED_FAQS]
    ]
    return candidates, qa_headings, suggested
