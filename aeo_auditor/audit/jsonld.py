"""JSON-LD extraction: ``<script type="application/ld+json">`` blocks and their ``@type`` values."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Optional

from aeo_auditor.audit.document import HtmlDocument

logger = logging.getLogger(__name__)

JSONLD_SELECTOR = 'script[type="application/ld+json"]'


def _safe_json_loads(txt: str) -> Optional[Any]:
    try:
        return json.loads(txt)
    except (json.JSONDecodeError, ValueError):
        return None


def unique(items: Iterable[str]) -> List[str]:
    """De-duplicate *items*, keeping first-seen order."""
    return list(dict.fromkeys(items))


def extract_jsonld(doc: HtmlDocument) -> List[Any]:
    """Return every parsed JSON-LD object found in *doc*.

    Each block is parsed as-is, then once more with newlines replaced by
    spaces.  Blocks that still fail (or parse to a falsy value) are skipped.
    Top-level arrays are flattened into the result.
    """
    blocks: List[Any] = []
    for i, script in enumerate(doc.select(JSONLD_SELECTOR)):
        txt = doc.raw_text(script)
        parsed = _safe_json_loads(txt)
        if parsed is None:
            parsed = _safe_json_loads(txt.replace("\n", " "))
        if not parsed:
            logger.debug("Skipping unparseable JSON-LD block #%d", i)
            continue
        if isinstance(parsed, list):
            blocks.extend(parsed)
        else:
            blocks.append(parsed)
    return blocks


def jsonld_types(blocks: Iterable[Any]) -> List[str]:
    """Collect the distinct ``@type`` values declared by *blocks*."""
    types: List[str] = []
    for block in blocks:
        if not isinstance(block, dict):
            continue
        t = block.get("@type")
        if not t:
            continue
        values = t if isinstance(t, list) else [t]
        # String type names only.
        types.extend(v for v in values if isinstance(v, str) and v)
    return unique(types)
