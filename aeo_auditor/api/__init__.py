"""HTTP API package — FastAPI app exposing the audit and FAQ endpoints."""

from aeo_auditor.api.app import app, create_app

__all__ = ["app", "create_app"]
