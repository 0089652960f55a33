"""Tests for the parsed-document wrapper."""

from __future__ import annotations

from aeo_auditor.audit.document import HtmlDocument


class TestImpliedElements:
    def test_omitted_head_still_holds_head_tags(self) -> None:
        doc = HtmlDocument.parse(
            "<!doctype html><html lang=en><title>Guide</title>"
            '<meta name="description" content="About widgets."><p>Body text</p>'
        )
        assert doc.head_child_count == 2
        assert doc.html_lang == "en"
        assert doc.body_text == "Body text"

    def test_omitted_body_excludes_head_markup(self) -> None:
        doc = HtmlDocument.parse(
            '<html><head><meta name="author" content="Jane"></head><p>Hello</p></html>'
        )
        assert doc.body_text == "Hello"
        assert "author" not in doc.body_markup

    def test_fragment_without_head_has_empty_head(self) -> None:
        assert HtmlDocument.parse("<body><p>Only body.</p></body>").head_child_count == 0

    def test_empty_input(self) -> None:
        doc = HtmlDocument.parse("")
        assert doc.body_text == ""
        assert doc.body_markup == ""
        assert doc.head_child_count == 0


class TestTextContent:
    def test_body_text_keeps_inline_script(self) -> None:
        doc = HtmlDocument.parse(
            '<body><p>Intro</p><script type="application/ld+json">'
            '{"dateModified": "2024-01-01"}</script></body>'
        )
        assert "dateModified" in doc.body_text
        assert doc.body_text.startswith("Intro")

    def test_comments_are_not_text(self) -> None:
        doc = HtmlDocument.parse("<body><!-- hidden -->Shown</body>")
        assert doc.body_text == "Shown"

    def test_nul_characters_dropped(self) -> None:
        assert HtmlDocument.parse("<body>a\x00b</body>").body_text == "ab"

    def test_attr_joins_multi_valued(self) -> None:
        doc = HtmlDocument.parse('<body><p class="a b">x</p></body>')
        assert doc.attr(doc.select_one("p"), "class") == "a b"
