"""Data models for the audit pipeline."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class SubscoreKey(str, Enum):
    """The seven fixed scoring categories."""

    CONTENT_CLARITY = "ContentClarity"
    STRUCTURED_DATA = "StructuredData"
    READABILITY = "Readability"
    TECHNICAL_SEO = "TechnicalSEO"
    EAT_TRUST = "EATTrust"
    MEDIA_ALT = "MediaAlt"
    INTERNAL_LINKS = "InternalLinks"


# Category weights; they sum to exactly 1.0.
WEIGHTS: Mapping[SubscoreKey, float] = MappingProxyType(
    {
        SubscoreKey.CONTENT_CLARITY: 0.22,
        SubscoreKey.STRUCTURED_DATA: 0.24,
        SubscoreKey.READABILITY: 0.12,
        SubscoreKey.TECHNICAL_SEO: 0.16,
        SubscoreKey.EAT_TRUST: 0.14,
        SubscoreKey.MEDIA_ALT: 0.06,
        SubscoreKey.INTERNAL_LINKS: 0.06,
    }
)


@dataclass(frozen=True)
class FaqItem:
    """A single question/answer pair."""

    question: str
    answer: str

    def to_dict(self) -> dict[str, str]:
        return {"question": self.question, "answer": self.answer}


@dataclass(frozen=True)
class ImageStats:
    total: int = 0
    with_alt: int = 0


@dataclass(frozen=True)
class PageSignals:
    """Raw signals produced by a single scan of the document."""

    title: str = ""
    description: Optional[str] = None
    lang: Optional[str] = None
    has_viewport: bool = False
    has_canonical: bool = False
    has_og: bool = False
    h1: Optional[str] = None
    h2s: Tuple[str, ...] = ()
    body_text: str = ""
    word_count: int = 0
    reading_ease: float = 0.0
    jsonld_types: Tuple[str, ...] = ()
    faqs_detected: bool = False
    how_to_detected: bool = False
    article_detected: bool = False
    breadcrumb_detected: bool = False
    author_detected: bool = False
    updated_detected: bool = False
    looks_procedural: bool = False
    images: ImageStats = field(default_factory=ImageStats)
    internal_links: int = 0
    external_links: int = 0
    has_about_link: bool = False
    has_contact_link: bool = False
    reference_links: int = 0


@dataclass(frozen=True)
class Report:
    """The complete, immutable result of auditing one HTML snapshot.

    Attribute names are snake_case; :meth:`to_dict` produces the canonical
    camelCase document (``hasViewport``, ``faqJsonLD`` …).
    """

    url: str
    title: str
    description: Optional[str]
    lang: Optional[str]
    has_viewport: bool
    has_canonical: bool
    has_og: bool
    h1: Optional[str]
    h2s: Tuple[str, ...]
    word_count: int
    reading_ease: float
    jsonld_types: Tuple[str, ...]
    faqs_detected: bool
    how_to_detected: bool
    article_detected: bool
    breadcrumb_detected: bool
    author_detected: bool
    updated_detected: bool
    qa_headings: Tuple[str, ...]
    images: ImageStats
    internal_links: int
    external_links: int
    subscores: Mapping[SubscoreKey, float]
    subscore_reasons: Mapping[SubscoreKey, Tuple[str, ...]]
    total_score: int
    suggestions: Tuple[str, ...]
    suggested_faqs: Tuple[FaqItem, ...]
    faq_json_ld: str
    notes: Tuple[str, ...]
    body_preview: str
    is_sanitized: bool
    sanitized_reasons: Tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return the report as a plain, JSON-serialisable dict."""
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "lang": self.lang,
            "hasViewport": self.has_viewport,
            "hasCanonical": self.has_canonical,
            "hasOG": self.has_og,
            "h1": self.h1,
            "h2s": list(self.h2s),
            "wordCount": self.word_count,
            "readingEase": self.reading_ease,
            "jsonldTypes": list(self.jsonld_types),
            "faqsDetected": self.faqs_detected,
            "howToDetected": self.how_to_detected,
            "articleDetected": self.article_detected,
            "breadcrumbDetected": self.breadcrumb_detected,
            "authorDetected": self.author_detected,
            "updatedDetected": self.updated_detected,
            "qaHeadings": list(self.qa_headings),
            "images": {"total": self.images.total, "withAlt": self.images.with_alt},
            "internalLinks": self.internal_links,
            "externalLinks": self.external_links,
            "subscores": {k.value: v for k, v in self.subscores.items()},
            "subscoreReasons": {
                k.value: list(v) for k, v in self.subscore_reasons.items()
            },
            "totalScore": self.total_score,
            "suggestions": list(self.suggestions),
            "suggestedFAQs": [qa.to_dict() for qa in self.suggested_faqs],
            "faqJsonLD": self.faq_json_ld,
            "notes": list(self.notes),
            "bodyPreview": self.body_preview,
            "isSanitized": self.is_sanitized,
            "sanitizedReasons": list(self.sanitized_reasons),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
