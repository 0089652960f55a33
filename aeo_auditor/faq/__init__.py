"""FAQ generation — HTTP client and LLM-backed prompt building."""

from aeo_auditor.faq.client import (
    FaqServiceError,
    FaqServiceNotConfigured,
    build_faq_payload,
    generate_faqs,
)

__all__ = [
    "generate_faqs",
    "build_faq_payload",
    "FaqServiceError",
    "FaqServiceNotConfigured",
]
