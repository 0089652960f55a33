"""LLM-backed FAQ generation (the server side of the FAQ service).

``generate_faq_list`` turns a page summary (title, headings, body preview)
into 5–8 product/brand/category FAQs using the configured LangChain chat
model.  The model is asked for strict JSON; an unparseable reply yields an
empty list rather than an error.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

from aeo_auditor.config import settings

logger = logging.getLogger(__name__)

MAX_PROMPT_HEADINGS = 20

SYSTEM_PROMPT = "You generate high-quality FAQs for eCommerce pages in strict JSON."


# ---------------------------------------------------------------------------
# LLM helper
# ---------------------------------------------------------------------------

def _get_llm() -> Any:
    """Return a configured LangChain chat model based on ``settings``."""
    if settings.llm_provider == "openai":
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            model=settings.openai_chat_model,
            temperature=0,
            max_tokens=settings.faq_max_tokens,
            model_kwargs={"response_format": {"type": "json_object"}},
        )

    from langchain_ollama import ChatOllama

    return ChatOllama(
        model=settings.ollama_chat_model,
        base_url=settings.ollama_base_url,
        temperature=0,
        format="json",
        num_predict=settings.faq_max_tokens,
    )


# ---------------------------------------------------------------------------
# Prompt building / parsing
# ---------------------------------------------------------------------------

def build_faq_prompt(
    url: Optional[str] = None,
    title: Optional[str] = None,
    h1: Optional[str] = None,
    description: Optional[str] = None,
    headings: Optional[Sequence[str]] = None,
    body_preview: Optional[str] = None,
) -> str:
    """Render the user prompt for one page.  At most 20 headings are listed."""
    page_title = h1 or title or "(no title)"
    heading_list = list(headings or [])[:MAX_PROMPT_HEADINGS]
    numbered = "\n".join(f"{i}. {h}" for i, h in enumerate(heading_list, start=1))

    return f"""
You are an AEO (Answer Engine Optimization) specialist for eCommerce.

Given this page, generate 5–8 highly relevant FAQs that a human would actually ask.
Focus on:
- Product-level questions (features, use, compatibility, materials, sizing, care, safety, etc.)
- Brand-level questions (warranty, returns, shipping, support, trust)
- Category-level or use-case questions (who is it for, how to choose, when to use, etc.)

Avoid:
- Pure UI labels like "Support", "Recently viewed", "You may also like", "Customer Reviews"
- Questions about generic site navigation or account login.

Return JSON ONLY in this shape:

{{
  "faqs": [
    {{ "question": "...", "answer": "..." }}
  ]
}}

Be concise, factual, and avoid marketing fluff. Each answer should be 2–3 sentences.

Page URL: {url or "N/A"}
Page title: {page_title}
Meta description: {description or "N/A"}

Headings on the page:
{numbered}

Body preview (trimmed):
{body_preview or "(no body text provided)"}
"""


def parse_llm_faqs(content: str) -> list[dict[str, str]]:
    """Extract ``[{question, answer}]`` from the model's JSON reply."""
    try:
        parsed = json.loads(content or "{}")
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse JSON from the chat model: %s\ncontent: %s", exc, content)
        parsed = {"faqs": []}

    faqs = parsed.get("faqs") if isinstance(parsed, dict) else None
    if not isinstance(faqs, list):
        return []
    result = []
    for f in faqs:
        if not isinstance(f, dict):
            f = {}
        result.append(
            {
                "question": str(f.get("question") or "").strip(),
                "answer": str(f.get("answer") or "").strip(),
            }
        )
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_faq_list(
    url: Optional[str] = None,
    title: Optional[str] = None,
    h1: Optional[str] = None,
    description: Optional[str] = None,
    headings: Optional[Sequence[str]] = None,
    body_preview: Optional[str] = None,
) -> list[dict[str, str]]:
    """Ask the chat model for FAQs about one page.

    Raises:
        Exception: Whatever the underlying LangChain model raises on failure.
    """
    from langchain_core.messages import HumanMessage, SystemMessage

    prompt = build_faq_prompt(url, title, h1, description, headings, body_preview)
    llm = _get_llm()
    response = llm.invoke([SystemMessage(content=SYSTEM_PROMPT), HumanMessage(content=prompt)])
    content = response.content if hasattr(response, "content") else str(response)
    return parse_llm_faqs(content)
