"""Audit endpoint.

Routes
------
POST /audit    Body: {"html": "...", "url": "...", "proxy": "..."}  → Report JSON
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from aeo_auditor.session import AuditInputError, AuditMode, describe_error, run_audit

router = APIRouter()


class AuditRequest(BaseModel):
    html: str = ""
    url: str = ""
    proxy: Optional[str] = None


@router.post("")
def audit_endpoint(body: AuditRequest) -> dict[str, Any]:
    """Audit pasted HTML (when given) or fetch ``url`` through ``proxy``.

    Returns the report in its canonical camelCase JSON shape.
    """
    mode = AuditMode.HTML if body.html.strip() else AuditMode.FETCH
    try:
        report = run_audit(url=body.url, html=body.html, mode=mode, proxy=body.proxy)
    except AuditInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except httpx.HTTPError as exc:
        raise HTTPException(status_code=502, detail=describe_error(exc)) from exc
    return report.to_dict()
