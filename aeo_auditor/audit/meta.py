"""Copy-ready helpers derived from a finished report."""

from __future__ import annotations

import re
from typing import Iterable

from aeo_auditor.audit.models import FaqItem, Report

_WHITESPACE = re.compile(r"\s+")

MAX_TITLE_CHARS = 65
MAX_DESCRIPTION_CHARS = 170
MIN_DESCRIPTION_CHARS = 80


def suggest_title(report: Report) -> str:
    """Propose a ``<title>`` of at most 65 characters."""
    base = report.h1 or report.title or "Answer guide"
    trimmed = _WHITESPACE.sub(" ", base).strip()
    return (trimmed + " (Guide)")[:MAX_TITLE_CHARS]


def suggest_description(report: Report) -> str:
    """Propose a meta description inside the 80–170 character window."""
    topic = report.h1 or report.title or "this topic"
    base = report.description or (
        f"Get concise answers to common questions about {topic}. "
        "Includes steps, FAQs, and expert tips."
    )
    s = _WHITESPACE.sub(" ", base).strip()
    if len(s) < MIN_DESCRIPTION_CHARS:
        s += " Learn the essentials in minutes."
    return s[:MAX_DESCRIPTION_CHARS]


def faq_markdown(qas: Iterable[FaqItem]) -> str:
    return "\n".join(f"### {qa.question}\n\n{qa.answer}\n" for qa in qas)


def faq_script_tag(json_ld: str) -> str:
    return f'<script type="application/ld+json">\n{json_ld}\n</script>'
