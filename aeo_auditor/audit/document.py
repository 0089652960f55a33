"""Parsed-document wrapper used by every audit component.

The audit core only talks to :class:`HtmlDocument` (selector queries,
attribute reads, text extraction), so it can be exercised against short
synthetic HTML strings without a browser.  Documents are parsed with
``lxml``, which adds the implied ``<html>``/``<head>``/``<body>`` elements
the way a browser does.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import (
    BeautifulSoup,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

# String nodes that are not part of an element's text content.
_NON_TEXT = (Comment, Declaration, Doctype, ProcessingInstruction)


def text_content(el: Tag) -> str:
    """All text below *el*, ``<script>``/``<style>`` bodies included."""
    return "".join(
        str(s)
        for s in el.descendants
        if isinstance(s, NavigableString) and not isinstance(s, _NON_TEXT)
    )


class HtmlDocument:
    """A forgiving, read-only view over an HTML document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def parse(cls, html: str) -> "HtmlDocument":
        """Parse *html*.  Empty or malformed input yields a near-empty document."""
        # lxml rejects NUL characters.
        return cls(BeautifulSoup((html or "").replace("\x00", ""), "lxml"))

    # ------------------------------------------------------------------
    # Selector queries
    # ------------------------------------------------------------------

    def select(self, css: str) -> List[Tag]:
        return self._soup.select(css)

    def select_one(self, css: str) -> Optional[Tag]:
        return self._soup.select_one(css)

    def exists(self, css: str) -> bool:
        return self._soup.select_one(css) is not None

    def count(self, css: str) -> int:
        return len(self._soup.select(css))

    # ------------------------------------------------------------------
    # Attribute / text reads
    # ------------------------------------------------------------------

    @staticmethod
    def attr(el: Optional[Tag], name: str) -> Optional[str]:
        """Return attribute *name* of *el*, or ``None`` when absent.

        Multi-valued attributes (``class``, ``rel``) are joined with spaces.
        """
        if el is None:
            return None
        value = el.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    @staticmethod
    def text(el: Optional[Tag]) -> str:
        """Trimmed text content of *el* (empty string for ``None``)."""
        if el is None:
            return ""
        return text_content(el).strip()

    @staticmethod
    def raw_text(el: Tag) -> str:
        """Untrimmed text content of *el*, including ``<script>`` bodies."""
        return text_content(el)

    # ------------------------------------------------------------------
    # Document-level accessors
    # ------------------------------------------------------------------

    @property
    def html_lang(self) -> Optional[str]:
        root = self._soup.find("html")
        return self.attr(root, "lang") if isinstance(root, Tag) else None

    @property
    def head_child_count(self) -> int:
        head = self._soup.head
        if head is None:
            return 0
        return len(head.find_all(True, recursive=False))

    @property
    def body_text(self) -> str:
        """Trimmed text content of ``<body>``, inline scripts included."""
        body = self._soup.body
        return text_content(body).strip() if body is not None else ""

    @property
    def body_markup(self) -> str:
        """Inner markup of ``<body>``."""
        body = self._soup.body
        return body.decode_contents() if body is not None else ""
