"""Scraper package — page fetch through an optional HTML proxy."""

from aeo_auditor.scraper.fetcher import build_fetch_url, fetch_html, normalize_url
from aeo_auditor.scraper.models import RawPage

__all__ = ["fetch_html", "build_fetch_url", "normalize_url", "RawPage"]
