"""FastAPI application factory.

Routers
-------
    /                      — health check
    /audit                 — run an AEO audit over pasted HTML or a fetched URL
    /api/generate-faqs     — LLM-backed FAQ generation service
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from aeo_auditor import __version__
from aeo_auditor.api.routers import audit as audit_router
from aeo_auditor.api.routers import faqs as faqs_router
from aeo_auditor.config import settings


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="AEO Auditor API",
        description=(
            "Scores a page's readiness for Answer Engine Optimization and "
            "generates FAQ structured data."
        ),
        version=__version__,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    def health() -> str:
        return "AEO FAQ API is running"

    app.include_router(audit_router.router, prefix="/audit", tags=["audit"])
    app.include_router(faqs_router.router, prefix="/api", tags=["faqs"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn aeo_auditor.api.app:app --reload
app = create_app()
