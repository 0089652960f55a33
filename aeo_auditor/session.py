"""Interactive audit session: the Idle → Loading → Ready/Failed state machine.

A session holds at most one report.  Every new analysis clears the previous
report first and leaves ``report`` as ``None`` when it fails, so callers
never see a stale or partial result.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

import httpx

from aeo_auditor.audit import analyze_html
from aeo_auditor.audit.models import FaqItem, Report
from aeo_auditor.config import settings
from aeo_auditor.faq.client import FaqServiceError, generate_faqs
from aeo_auditor.scraper.fetcher import fetch_html, normalize_url

logger = logging.getLogger(__name__)


class AuditState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class AuditMode(str, Enum):
    HTML = "html"    # pasted raw HTML, most accurate
    FETCH = "fetch"  # fetch via URL / proxy, may strip SEO tags


class AuditInputError(ValueError):
    """Neither usable HTML nor a URL was supplied."""


def run_audit(
    url: str = "",
    html: str = "",
    mode: AuditMode = AuditMode.FETCH,
    proxy: Optional[str] = None,
) -> Report:
    """Resolve the input according to *mode* and audit it.

    Raises:
        AuditInputError: If the inputs do not allow an audit.
        httpx.HTTPError: If the page fetch fails.
    """
    base = normalize_url(url)
    has_html = bool((html or "").strip())

    if mode == AuditMode.HTML:
        if not has_html:
            raise AuditInputError("Please paste raw HTML to analyze.")
        return analyze_html(html, base)

    if has_html and not base:
        return analyze_html(html, "")
    if base:
        page = fetch_html(base, settings.html_proxy if proxy is None else proxy)
        return analyze_html(page.html, base)
    raise AuditInputError("Enter a URL or switch to 'Paste raw HTML' mode.")


def describe_error(exc: Exception) -> str:
    """Turn a collaborator failure into a user-visible message."""
    if isinstance(exc, httpx.HTTPStatusError):
        resp = exc.response
        return f"Fetch failed: {resp.status_code} {resp.reason_phrase}"
    return str(exc) or "Unknown error"


class AuditSession:
    """Holds the current report, FAQ results and error state for one user."""

    def __init__(self) -> None:
        self.state = AuditState.IDLE
        self.report: Optional[Report] = None
        self.error: Optional[str] = None
        self.ai_faqs: List[FaqItem] = []
        self.ai_error: Optional[str] = None

    def analyze(
        self,
        url: str = "",
        html: str = "",
        mode: AuditMode = AuditMode.FETCH,
        proxy: Optional[str] = None,
    ) -> Optional[Report]:
        """Run a fresh audit; returns the report, or ``None`` on failure."""
        self.report = None
        self.error = None
        self.ai_faqs = []
        self.ai_error = None
        self.state = AuditState.LOADING
        try:
            report = run_audit(url=url, html=html, mode=mode, proxy=proxy)
        except (AuditInputError, httpx.HTTPError) as exc:
            logger.info("Audit failed: %s", exc)
            self.error = describe_error(exc)
            self.state = AuditState.FAILED
            return None

        self.report = report
        self.state = AuditState.READY
        return report

    def generate_ai_faqs(self, endpoint: Optional[str] = None) -> List[FaqItem]:
        """Request AI FAQs for the current report.

        Failures are stored in ``ai_error``; the report itself is untouched.
        """
        if self.report is None:
            self.ai_error = "Analyze a page before generating FAQs."
            return []
        self.ai_error = None
        try:
            self.ai_faqs = generate_faqs(self.report, endpoint=endpoint)
        except FaqServiceError as exc:
            self.ai_error = str(exc) or "Failed to generate FAQs with AI."
            self.ai_faqs = []
        return self.ai_faqs
