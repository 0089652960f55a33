"""Data models for the page fetcher."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single page fetch.

    ``url`` is the page being audited; ``fetch_url`` is what was actually
    requested (differs when a proxy is in use).
    """

    url: str
    fetch_url: str
    html: str
    status_code: int
