"""Tests for reader-mode / sanitised HTML detection."""

from __future__ import annotations

from aeo_auditor.audit.document import HtmlDocument
from aeo_auditor.audit.sanitize import detect_sanitized_html


def _detect(html: str):
    doc = HtmlDocument.parse(html)
    return detect_sanitized_html(doc, doc.body_text)


class TestDetectSanitizedHtml:
    def test_body_only_page_is_flagged(self, reader_mode_html: str) -> None:
        result = _detect(reader_mode_html)
        assert result.is_sanitized is True
        assert len(result.reasons) >= 4
        assert "No <title> tag found." in result.reasons
        assert "<head> is almost empty, suggesting sanitized HTML." in result.reasons

    def test_all_eight_checks_fail_on_body_only_page(self, reader_mode_html: str) -> None:
        assert len(_detect(reader_mode_html).reasons) == 8

    def test_long_text_adds_composite_reason(self) -> None:
        html = "<body><p>" + " ".join(["Long reader text here."] * 60) + "</p></body>"
        result = _detect(html)
        assert result.is_sanitized is True
        assert result.reasons[-1].startswith("Long article text but very few SEO tags")

    def test_short_thin_page_not_flagged(self) -> None:
        result = _detect("<body><p>Tiny page.</p></body>")
        assert result.is_sanitized is False
        assert len(result.reasons) >= 4

    def test_full_page_has_no_reasons(self, full_html: str) -> None:
        result = _detect(full_html)
        assert result.is_sanitized is False
        assert result.reasons == ()

    def test_optional_head_and_body_tags_omitted(self) -> None:
        html = (
            "<!doctype html><html lang=en><title>Espresso guide for beginners</title>"
            '<meta name="description" content="How to pull a good shot.">'
            '<link rel="canonical" href="https://example.com/espresso">'
            '<meta property="og:title" content="Espresso guide">'
            "<p>" + " ".join(["Grind fine and tamp evenly."] * 17) + "</p>"
        )
        result = _detect(html)
        assert len(result.reasons) == 3
        assert "<head> is almost empty, suggesting sanitized HTML." not in result.reasons
        assert result.is_sanitized is False
