"""End-to-end tests for report assembly."""

from __future__ import annotations

import dataclasses
import json

import pytest

from aeo_auditor.audit import analyze_html, make_faq_json_ld
from aeo_auditor.audit.models import FaqItem, SubscoreKey, WEIGHTS
from aeo_auditor.audit.report import GENERAL_NOTES, SANITIZED_NOTE
from aeo_auditor.audit.text import round_half_up

_REPORT_KEYS = {
    "url", "title", "description", "lang", "hasViewport", "hasCanonical", "hasOG",
    "h1", "h2s", "wordCount", "readingEase", "jsonldTypes", "faqsDetected",
    "howToDetected", "articleDetected", "breadcrumbDetected", "authorDetected",
    "updatedDetected", "qaHeadings", "images", "internalLinks", "externalLinks",
    "subscores", "subscoreReasons", "totalScore", "suggestions", "suggestedFAQs",
    "faqJsonLD", "notes", "bodyPreview", "isSanitized", "sanitizedReasons",
}


class TestFullPage:
    def test_scores(self, full_html: str) -> None:
        report = analyze_html(full_html, "https://example.com/espresso-guide")
        assert report.subscores[SubscoreKey.CONTENT_CLARITY] == 100
        assert report.subscores[SubscoreKey.STRUCTURED_DATA] == 100
        assert report.subscores[SubscoreKey.READABILITY] == 95
        assert report.subscores[SubscoreKey.TECHNICAL_SEO] == 100
        assert report.subscores[SubscoreKey.EAT_TRUST] == 100
        assert report.subscores[SubscoreKey.MEDIA_ALT] == 100
        assert report.subscores[SubscoreKey.INTERNAL_LINKS] == 100
        assert report.total_score == 99
        assert all(not r for r in report.subscore_reasons.values())
        assert report.suggestions == ()

    def test_notes_and_faqs(self, full_html: str) -> None:
        report = analyze_html(full_html, "https://example.com/espresso-guide")
        assert report.is_sanitized is False
        assert report.notes == GENERAL_NOTES
        assert report.qa_headings == ("What is a portafilter?", "How do I descale my machine?")
        assert [f.question for f in report.suggested_faqs] == [
            "What is a portafilter?",
            "How do I descale my machine?",
        ]


class TestThinPage:
    """Title of 20 chars, no description, 100 words, no JSON-LD, no images, 3 links."""

    def test_category_scores(self, thin_html: str) -> None:
        report = analyze_html(thin_html, "https://shop.example.com/widget")
        assert report.word_count == 100
        # 25 (H1) + 25 (title) + 0 (description) + 20 * 100/400 + 0 (no question heading)
        assert report.subscores[SubscoreKey.CONTENT_CLARITY] == pytest.approx(55)
        assert report.subscores[SubscoreKey.STRUCTURED_DATA] == 0
        assert len(report.subscore_reasons[SubscoreKey.STRUCTURED_DATA]) == 4
        assert report.subscores[SubscoreKey.MEDIA_ALT] == 100
        assert report.subscore_reasons[SubscoreKey.MEDIA_ALT] == ()
        assert report.subscores[SubscoreKey.INTERNAL_LINKS] == 37.5
        assert report.internal_links == 3

    def test_total_is_weighted_sum(self, thin_html: str) -> None:
        report = analyze_html(thin_html, "https://shop.example.com/widget")
        expected = round_half_up(sum(report.subscores[k] * w for k, w in WEIGHTS.items()))
        assert report.total_score == expected

    def test_suggestions_follow_fixed_order(self, thin_html: str) -> None:
        report = analyze_html(thin_html, "https://shop.example.com/widget")
        assert report.suggestions[0].startswith("Provide a meta description")
        assert report.suggestions[1].startswith("Increase content depth")
        assert report.suggestions[-1].startswith("Convert key subheadings")
        assert not any("alt text" in s for s in report.suggestions)
        assert len(report.suggestions) == len(set(report.suggestions))


class TestSanitizedPage:
    def test_sanitized_note_comes_first(self, reader_mode_html: str) -> None:
        report = analyze_html(reader_mode_html, "")
        assert report.is_sanitized is True
        assert len(report.sanitized_reasons) >= 4
        assert report.notes[0] == SANITIZED_NOTE
        assert report.notes[1:] == GENERAL_NOTES


class TestFaqJsonLd:
    def test_shape(self) -> None:
        data = json.loads(make_faq_json_ld([FaqItem("Q?", "A.")]))
        assert data == {
            "@context": "https://schema.org",
            "@type": "FAQPage",
            "mainEntity": [
                {
                    "@type": "Question",
                    "name": "Q?",
                    "acceptedAnswer": {"@type": "Answer", "text": "A."},
                }
            ],
        }

    def test_pretty_printed(self) -> None:
        assert make_faq_json_ld([]).startswith('{\n  "@context": "https://schema.org",')

    def test_capped_at_eight(self) -> None:
        headings = "".join(f"<h2>Espresso topic number {i}</h2>" for i in range(11))
        report = analyze_html(f"<body>{headings}</body>", "")
        assert len(report.suggested_faqs) == 8
        assert len(json.loads(report.faq_json_ld)["mainEntity"]) == 8


class TestContract:
    def test_deterministic(self, full_html: str) -> None:
        a = analyze_html(full_html, "https://example.com/")
        b = analyze_html(full_html, "https://example.com/")
        assert a.to_json() == b.to_json()

    def test_serialises_with_canonical_field_names(self, full_html: str) -> None:
        data = json.loads(analyze_html(full_html, "https://example.com/").to_json())
        assert set(data) == _REPORT_KEYS
        assert set(data["subscores"]) == {k.value for k in SubscoreKey}
        assert set(data["images"]) == {"total", "withAlt"}

    def test_report_is_immutable(self, full_html: str) -> None:
        report = analyze_html(full_html, "https://example.com/")
        with pytest.raises(dataclasses.FrozenInstanceError):
            report.total_score = 0  # type: ignore[misc]
        with pytest.raises(TypeError):
            report.subscores[SubscoreKey.MEDIA_ALT] = 0  # type: ignore[index]

    @pytest.mark.parametrize(
        "html",
        ["", "<<<>>>", "<html><body>", "<p>Just a paragraph.</p>", "\x00garbage\x00"],
    )
    def test_degenerate_input_stays_in_bounds(self, html: str) -> None:
        report = analyze_html(html, "")
        assert all(0 <= v <= 100 for v in report.subscores.values())
        assert 0 <= report.total_score <= 100
        assert -50 <= report.reading_ease <= 120
        assert report.internal_links == 0 and report.external_links == 0

    def test_body_preview_truncated(self) -> None:
        report = analyze_html("<body>" + "x" * 5000 + "</body>", "")
        assert len(report.body_preview) == 4000

    def test_jsonld_types_unique(self) -> None:
        block = '<script type="application/ld+json">{"@type": "Article"}</script>'
        report = analyze_html(block * 3, "")
        assert report.jsonld_types == ("Article",)
