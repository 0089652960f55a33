"""FAQ generation endpoint.

Routes
------
POST /api/generate-faqs
    Body: {"url", "title", "h1", "description", "headings", "bodyPreview"}
    → {"faqs": [{"question": "...", "answer": "..."}]}
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from aeo_auditor.faq import generator

logger = logging.getLogger(__name__)

router = APIRouter()


class FaqRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    title: Optional[str] = None
    h1: Optional[str] = None
    description: Optional[str] = None
    headings: Any = None
    body_preview: Optional[str] = Field(default=None, alias="bodyPreview")


class FaqEntry(BaseModel):
    question: str
    answer: str


class FaqResponse(BaseModel):
    faqs: list[FaqEntry]


@router.post("/generate-faqs", response_model=FaqResponse)
def generate_faqs_endpoint(body: FaqRequest) -> Any:
    """Generate 5–8 FAQs for the described page with the configured chat model."""
    headings = [str(h) for h in body.headings] if isinstance(body.headings, list) else []
    try:
        faqs = generator.generate_faq_list(
            url=body.url,
            title=body.title,
            h1=body.h1,
            description=body.description,
            headings=headings,
            body_preview=body.body_preview,
        )
    except Exception as exc:  # noqa: BLE001
        logger.error("FAQ API error: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate FAQs", "details": str(exc)},
        )
    return {"faqs": faqs}
