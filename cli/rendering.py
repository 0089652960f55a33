"""Plain-text rendering of audit reports for the CLI."""

from __future__ import annotations

from typing import List

from aeo_auditor.audit.meta import suggest_description, suggest_title
from aeo_auditor.audit.models import Report, SubscoreKey

_LABELS = {
    SubscoreKey.CONTENT_CLARITY: "Content Clarity",
    SubscoreKey.STRUCTURED_DATA: "Structured Data",
    SubscoreKey.READABILITY: "Readability",
    SubscoreKey.TECHNICAL_SEO: "Technical SEO",
    SubscoreKey.EAT_TRUST: "E-E-A-T / Trust",
    SubscoreKey.MEDIA_ALT: "Media Alt Coverage",
    SubscoreKey.INTERNAL_LINKS: "Internal Links",
}

_BAR_WIDTH = 20


def _bar(score: float) -> str:
    filled = int(round(max(0.0, min(100.0, score)) / 100 * _BAR_WIDTH))
    return "█" * filled + "░" * (_BAR_WIDTH - filled)


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def render_report(report: Report, max_sanitized_reasons: int = 4) -> str:
    """Render *report* as a human-readable multi-section summary."""
    lines: List[str] = []

    lines.append(f"AEO Readiness Score: {report.total_score} / 100")
    if report.url:
        lines.append(f"URL: {report.url}")

    if report.is_sanitized:
        lines.append("")
        lines.append("⚠ Heads up: this looks like reader-mode / sanitized HTML")
        for reason in report.sanitized_reasons[:max_sanitized_reasons]:
            lines.append(f"  - {reason}")

    lines.append("")
    for key in SubscoreKey:
        score = report.subscores[key]
        lines.append(f"  {_LABELS[key]:<20} {_bar(score)} {round(score):>3}")
        for reason in report.subscore_reasons[key]:
            lines.append(f"      · {reason}")

    lines.append("")
    lines.append("Signals:")
    rows = [
        ("Title", report.title or "(none)"),
        ("H1", report.h1 or "(none)"),
        ("Word count", report.word_count),
        ("Reading ease", f"{report.reading_ease:.1f}"),
        ("JSON-LD types", ", ".join(report.jsonld_types) or "(none)"),
        ("FAQ detected", _yes_no(report.faqs_detected)),
        ("HowTo detected", _yes_no(report.how_to_detected)),
        ("Article detected", _yes_no(report.article_detected)),
        ("Breadcrumb detected", _yes_no(report.breadcrumb_detected)),
        ("Author/org detected", _yes_no(report.author_detected)),
        ("Updated signal", _yes_no(report.updated_detected)),
        ("Images (with alt)", f"{report.images.total} ({report.images.with_alt})"),
        ("Internal / external", f"{report.internal_links} / {report.external_links}"),
    ]
    for label, value in rows:
        lines.append(f"  {label:<20} {value}")

    if report.suggestions:
        lines.append("")
        lines.append("Suggestions:")
        for i, suggestion in enumerate(report.suggestions, start=1):
            lines.append(f"  {i}. {suggestion}")

    lines.append("")
    lines.append("Meta opportunities:")
    lines.append(f"  Title       : {suggest_title(report)}")
    lines.append(f"  Description : {suggest_description(report)}")

    lines.append("")
    lines.append("Notes:")
    for note in report.notes:
        lines.append(f"  - {note}")

    return "\n".join(lines)
