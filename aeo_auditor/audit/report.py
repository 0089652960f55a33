"""Report assembly: runs every audit component over one HTML snapshot."""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Iterable, List, Sequence

from aeo_auditor.audit.document import HtmlDocument
from aeo_auditor.audit.headings import MAX_SUGGESTED_FAQS, classify_headings
from aeo_auditor.audit.models import FaqItem, PageSignals, Report, SubscoreKey
from aeo_auditor.audit.sanitize import detect_sanitized_html
from aeo_auditor.audit.scoring import (
    TARGET_INTERNAL_LINKS,
    TARGET_WORD_COUNT,
    score_signals,
    total_score,
)
from aeo_auditor.audit.signals import scan_document

BODY_PREVIEW_CHARS = 4000

SANITIZED_NOTE = (
    "This HTML appears to be stripped / reader-mode output (likely from a proxy). Meta tags, "
    "JSON-LD, navigation, and images may be missing—scores for Structured Data / Technical "
    "SEO / E-E-A-T / Media may be lower than reality. For accurate AEO scoring, use raw HTML "
    "or a non-stripping proxy."
)

GENERAL_NOTES = (
    "Scores are heuristic. Validate with live SERPs, AI-overviews, and conversation models.",
    "Include explicit answers in the first 1–2 paragraphs (‘answer-first’).",
    "Use plain language, short paragraphs, and bullet lists to improve scannability.",
)


def make_faq_json_ld(qas: Iterable[FaqItem]) -> str:
    """Serialise *qas* (first 8) as a pretty-printed schema.org FAQPage."""
    obj = {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": qa.question,
                "acceptedAnswer": {"@type": "Answer", "text": qa.answer},
            }
            for qa in list(qas)[:MAX_SUGGESTED_FAQS]
        ],
    }
    return json.dumps(obj, indent=2, ensure_ascii=False)


def build_suggestions(
    signals: PageSignals, qa_headings: Sequence[str], media_alt_score: float
) -> List[str]:
    """One action line per failed check, in a fixed priority order."""
    s = signals
    title_len = len(s.title or "")
    desc_len = len(s.description or "")
    checks = (
        (not s.h1, "Add a clear, single H1 that states the page’s primary topic."),
        (
            not s.title or title_len < 15 or title_len > 65,
            "Rewrite the <title> to 15–65 chars with a direct, answer-oriented promise.",
        ),
        (
            not s.description or desc_len < 80 or desc_len > 170,
            "Provide a meta description (80–170 chars) summarizing the answer and value.",
        ),
        (
            s.word_count < TARGET_WORD_COUNT,
            "Increase content depth to 600–1,200 words focused on user questions and intents.",
        ),
        (
            not s.faqs_detected,
            "Add FAQPage JSON-LD with 4–8 concise Q&As that mirror real queries.",
        ),
        (
            not s.how_to_detected and s.looks_procedural,
            "Mark up procedural content with HowTo schema.",
        ),
        (
            not s.breadcrumb_detected,
            "Add BreadcrumbList schema for better context and sitelinks.",
        ),
        (
            not s.author_detected,
            "Expose author/org info (bio, credentials) and Organization/Person schema.",
        ),
        (not s.has_canonical, "Specify a canonical URL to consolidate signals."),
        (not s.has_viewport, 'Add a responsive <meta name="viewport"> for mobile rendering.'),
        (
            not s.has_og,
            "Include basic Open Graph tags (og:title, og:description, og:type, og:url).",
        ),
        (media_alt_score < 90, "Write descriptive alt text for all informative images."),
        (
            s.internal_links < TARGET_INTERNAL_LINKS,
            "Add 8–12 contextual internal links to closely related pages.",
        ),
        (not s.lang, 'Set the <html lang> attribute (e.g., lang="en").'),
        (
            not s.updated_detected,
            "Show a ‘Last updated’ timestamp near the top of the article.",
        ),
        (
            len(qa_headings) == 0,
            "Convert key subheadings into question form (What, How, Why…) to align with "
            "answer engines.",
        ),
    )
    return [text for failed, text in checks if failed]


def analyze_html(html: str, base_url: str = "") -> Report:
    """Audit *html* (fetched from *base_url*) and return a complete :class:`Report`.

    Pure and deterministic: no I/O, no clock, no shared state.  Malformed
    HTML, JSON-LD or hrefs degrade to empty signals instead of raising.
    """
    doc = HtmlDocument.parse(html)
    return analyze_document(doc, base_url)


def analyze_document(doc: HtmlDocument, base_url: str = "") -> Report:
    """Audit an already-parsed document.  See :func:`analyze_html`."""
    base_url = base_url or ""
    signals = scan_document(doc, base_url)
    sanitization = detect_sanitized_html(doc, signals.body_text)
    _, qa_headings, suggested_faqs = classify_headings(signals.h2s)

    subscores, reasons = score_signals(signals, qa_headings)
    suggestions = build_suggestions(
        signals, qa_headings, subscores[SubscoreKey.MEDIA_ALT]
    )

    notes: List[str] = []
    if sanitization.is_sanitized:
        notes.append(SANITIZED_NOTE)
    notes.extend(GENERAL_NOTES)

    return Report(
        url=base_url,
        title=signals.title,
        description=signals.description,
        lang=signals.lang,
        has_viewport=signals.has_viewport,
        has_canonical=signals.has_canonical,
        has_og=signals.has_og,
        h1=signals.h1,
        h2s=signals.h2s,
        word_count=signals.word_count,
        reading_ease=signals.reading_ease,
        jsonld_types=signals.jsonld_types,
        faqs_detected=signals.faqs_detected,
        how_to_detected=signals.how_to_detected,
        article_detected=signals.article_detected,
        breadcrumb_detected=signals.breadcrumb_detected,
        author_detected=signals.author_detected,
        updated_detected=signals.updated_detected,
        qa_headings=tuple(qa_headings),
        images=signals.images,
        internal_links=signals.internal_links,
        external_links=signals.external_links,
        subscores=MappingProxyType(subscores),
        subscore_reasons=MappingProxyType({k: tuple(v) for k, v in reasons.items()}),
        total_score=total_score(subscores),
        suggestions=tuple(suggestions),
        suggested_faqs=tuple(suggested_faqs),
        faq_json_ld=make_faq_json_ld(suggested_faqs),
        notes=tuple(notes),
        body_preview=signals.body_text[:BODY_PREVIEW_CHARS],
        is_sanitized=sanitization.is_sanitized,
        sanitized_reasons=sanitization.reasons,
    )
