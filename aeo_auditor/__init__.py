"""AEO readiness auditor — HTML signal extraction and answer-engine scoring."""

from aeo_auditor.audit import analyze_document, analyze_html
from aeo_auditor.audit.models import FaqItem, Report, SubscoreKey

__all__ = ["analyze_html", "analyze_document", "Report", "FaqItem", "SubscoreKey"]

__version__ = "0.1.0"
