"""Audit core — signal extraction and AEO scoring over a parsed HTML document."""

from aeo_auditor.audit.document import HtmlDocument
from aeo_auditor.audit.models import FaqItem, PageSignals, Report, SubscoreKey, WEIGHTS
from aeo_auditor.audit.report import analyze_document, analyze_html, make_faq_json_ld

__all__ = [
    "analyze_html",
    "analyze_document",
    "make_faq_json_ld",
    "HtmlDocument",
    "Report",
    "PageSignals",
    "FaqItem",
    "SubscoreKey",
    "WEIGHTS",
]
