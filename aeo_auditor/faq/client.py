"""Client for the FAQ generation service.

The service accepts ``{url, title, h1, description, headings, bodyPreview}``
and answers ``{"faqs": [{"question": ..., "answer": ...}, ...]}``.  It is
optional: with no endpoint configured only this feature is disabled.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from aeo_auditor.audit.models import FaqItem, Report
from aeo_auditor.config import settings

logger = logging.getLogger(__name__)


class FaqServiceError(RuntimeError):
    """The FAQ service failed or answered with an unexpected payload."""


class FaqServiceNotConfigured(FaqServiceError):
    """No FAQ generation endpoint is configured."""


def build_faq_payload(report: Report) -> dict[str, Any]:
    """Return the request body describing *report*'s page."""
    return {
        "url": report.url,
        "title": report.title,
        "h1": report.h1,
        "description": report.description,
        "headings": list(report.h2s),
        "bodyPreview": report.body_preview,
    }


def parse_faqs(data: Any) -> List[FaqItem]:
    """Validate and clean a service response.

    Raises:
        FaqServiceError: If *data* has no ``faqs`` list.
    """
    if not isinstance(data, dict) or not isinstance(data.get("faqs"), list):
        raise FaqServiceError(
            "FAQ API returned unexpected format (expected { faqs: [{question, answer}] })."
        )
    cleaned: List[FaqItem] = []
    for item in data["faqs"]:
        if not isinstance(item, dict):
            item = {}
        question = str(item.get("question") or "").strip()
        answer = str(item.get("answer") or "").strip()
        if question:
            cleaned.append(FaqItem(question=question, answer=answer))
    return cleaned


def generate_faqs(
    report: Report,
    endpoint: Optional[str] = None,
    timeout: Optional[float] = None,
) -> List[FaqItem]:
    """Ask the FAQ service for question/answer pairs about *report*'s page.

    Args:
        report: A finished audit report.
        endpoint: Service URL; defaults to ``settings.faq_api_url``.
        timeout: Request timeout in seconds; defaults to ``settings.request_timeout``.

    Raises:
        FaqServiceNotConfigured: If no endpoint is configured.
        FaqServiceError: On HTTP errors or a malformed response.
    """
    url = (endpoint if endpoint is not None else settings.faq_api_url).strip()
    if not url:
        raise FaqServiceNotConfigured(
            "AI FAQ endpoint is not configured. Set FAQ_API_URL in your .env file."
        )

    try:
        with httpx.Client(
            timeout=settings.request_timeout if timeout is None else timeout
        ) as client:
            response = client.post(url, json=build_faq_payload(report))
    except httpx.HTTPError as exc:
        logger.warning("FAQ service request failed: %s", exc)
        raise FaqServiceError(f"FAQ API request failed: {exc}") from exc

    if response.is_error:
        logger.warning("FAQ service answered HTTP %d", response.status_code)
        raise FaqServiceError(
            f"FAQ API error: {response.status_code} {response.reason_phrase}"
        )

    try:
        data = response.json()
    except ValueError as exc:
        raise FaqServiceError(f"FAQ API returned invalid JSON: {exc}") from exc
    return parse_faqs(data)
