"""Category scorers and the weighted total.

Each scorer returns ``(score, reasons)``: points are accumulated from
fixed-weight checks, every failed check appends one human-readable reason,
and the score is clamped to [0, 100].
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Tuple

from aeo_auditor.audit.models import WEIGHTS, PageSignals, SubscoreKey
from aeo_auditor.audit.text import clamp, round_half_up

Scored = Tuple[float, List[str]]

TARGET_WORD_COUNT = 400
TARGET_INTERNAL_LINKS = 8


def score_content_clarity(signals: PageSignals, qa_heading_count: int) -> Scored:
    score = 0.0
    reasons: List[str] = []

    if signals.h1:
        score += 25
    else:
        reasons.append(
            "No H1 found — answer engines lose a clear primary topic signal (worth up to 25 points)."
        )

    if signals.title and 15 <= len(signals.title) <= 65:
        score += 25
    else:
        reasons.append(
            "Title is missing or outside the 15–65 character range, which reduces how well AI "
            "can summarize this page."
        )

    if signals.description and 80 <= len(signals.description) <= 170:
        score += 20
    else:
        reasons.append(
            "Meta description is missing or not in the 80–170 character window, so answer "
            "engines have a weaker summary."
        )

    if signals.word_count >= TARGET_WORD_COUNT:
        score += 20
    else:
        score += min(20.0, signals.word_count / TARGET_WORD_COUNT * 20)
        reasons.append(
            f"Content depth is low ({signals.word_count} words) — long-form pages "
            "(400–1200+ words) are easier for AEO to mine for answers."
        )

    if qa_heading_count > 0:
        score += 10
    else:
        reasons.append(
            "No question-style subheadings detected; converting key H2/H3s into "
            "“What / How / Why…” questions improves AEO."
        )

    return clamp(score), reasons


def score_structured_data(signals: PageSignals) -> Scored:
    score = 0.0
    reasons: List[str] = []

    if signals.faqs_detected:
        score += 35
    else:
        reasons.append(
            "No FAQ schema detected — FAQPage JSON-LD helps answer engines extract direct Q&A."
        )

    # Missing HowTo only costs a reason, and only on guide-like pages.
    if signals.how_to_detected:
        score += 15
    elif signals.looks_procedural:
        reasons.append(
            "Page looks like a guide/steps but has no HowTo schema — mark it up so AI can "
            "understand the steps."
        )

    if signals.article_detected:
        score += 15
    else:
        reasons.append(
            "No Article schema detected — adding it clarifies the main entity, headline, and "
            "author for AEO."
        )

    if signals.breadcrumb_detected:
        score += 15
    else:
        reasons.append(
            "No BreadcrumbList schema — this reduces how well answer engines understand site "
            "hierarchy."
        )

    if signals.author_detected:
        score += 20
    else:
        reasons.append(
            "No clear author/organization schema — answer engines rely on this for E-E-A-T "
            "and citation."
        )

    return clamp(score), reasons


def score_readability(reading_ease: float) -> Scored:
    """Tiered, not additive: the reading-ease band picks the score."""
    reasons: List[str] = []
    if 60 <= reading_ease <= 80:
        score = 85.0
    elif reading_ease > 80:
        score = 95.0
    elif reading_ease >= 45:
        score = 65.0
        reasons.append(
            f"Reading ease score is {round_half_up(reading_ease)} — content is somewhat dense; "
            "shorter sentences and simpler wording will help AEO extract answers."
        )
    else:
        score = 40.0
        reasons.append(
            f"Reading ease score is {round_half_up(reading_ease)} — text is hard to read; "
            "simplify language and break up long paragraphs."
        )
    return clamp(score), reasons


def score_technical_seo(signals: PageSignals) -> Scored:
    score = 0.0
    reasons: List[str] = []

    if signals.lang:
        score += 20
    else:
        reasons.append(
            "Missing <html lang> attribute — AEO systems need this to interpret language correctly."
        )

    if signals.has_viewport:
        score += 25
    else:
        reasons.append(
            "No responsive viewport meta tag — weak mobile friendliness can limit inclusion in "
            "AI answer surfaces."
        )

    if signals.has_canonical:
        score += 25
    else:
        reasons.append(
            "No canonical URL — answer engines may be unsure which version of this page to "
            "treat as primary."
        )

    if signals.has_og:
        score += 15
    else:
        reasons.append(
            "Open Graph tags are missing — many AI experiences use them for title/description "
            "when rendering cards."
        )

    if signals.updated_detected:
        score += 15
    else:
        reasons.append(
            "No clear “last updated” signal — fresher pages are preferred for AI-generated answers."
        )

    return clamp(score), reasons


def score_eat_trust(signals: PageSignals) -> Scored:
    score = 0.0
    reasons: List[str] = []

    if signals.author_detected:
        score += 35
    else:
        reasons.append(
            "No clear author/organization info — answer engines struggle to assess expertise "
            "and experience."
        )

    if signals.has_about_link:
        score += 20
    else:
        reasons.append(
            "No About page link detected — brand identity and mission are important for trust."
        )

    if signals.has_contact_link:
        score += 20
    else:
        reasons.append(
            "No Contact link detected — lack of visible contact routes lowers perceived "
            "trustworthiness."
        )

    if signals.reference_links > 0:
        score += 25
    else:
        reasons.append(
            "No outbound reference/source links labeled as such — citing sources strengthens "
            "E-E-A-T."
        )

    return clamp(score), reasons


def score_media_alt(total: int, with_alt: int) -> Scored:
    """Alt-text coverage; a page without images is not penalised."""
    reasons: List[str] = []
    score = with_alt / total * 100 if total else 100.0
    if total > 0 and with_alt < total:
        reasons.append(
            f"Only {with_alt} of {total} images have alt text — AI cannot fully understand "
            "your visuals."
        )
    return clamp(score), reasons


def score_internal_links(internal_links: int) -> Scored:
    reasons: List[str] = []
    score = min(100.0, internal_links / TARGET_INTERNAL_LINKS * 100)
    if internal_links < TARGET_INTERNAL_LINKS:
        reasons.append(
            f"Only {internal_links} internal links detected — AEO benefits from 8–12 "
            "contextual links to related pages."
        )
    return clamp(score), reasons


def score_signals(
    signals: PageSignals, qa_headings: Sequence[str]
) -> Tuple[Dict[SubscoreKey, float], Dict[SubscoreKey, List[str]]]:
    """Run all seven scorers; returns ``(subscores, reasons)`` keyed by category."""
    results: Dict[SubscoreKey, Scored] = {
        SubscoreKey.CONTENT_CLARITY: score_content_clarity(signals, len(qa_headings)),
        SubscoreKey.STRUCTURED_DATA: score_structured_data(signals),
        SubscoreKey.READABILITY: score_readability(signals.reading_ease),
        SubscoreKey.TECHNICAL_SEO: score_technical_seo(signals),
        SubscoreKey.EAT_TRUST: score_eat_trust(signals),
        SubscoreKey.MEDIA_ALT: score_media_alt(signals.images.total, signals.images.with_alt),
        SubscoreKey.INTERNAL_LINKS: score_internal_links(signals.internal_links),
    }
    subscores = {k: score for k, (score, _) in results.items()}
    reasons = {k: why for k, (_, why) in results.items()}
    return subscores, reasons


def total_score(subscores: Mapping[SubscoreKey, float]) -> int:
    """Weighted sum of *subscores*, rounded to an integer in [0, 100]."""
    total = sum(subscores.get(k, 0.0) * w for k, w in WEIGHTS.items())
    return int(clamp(round_half_up(total)))
