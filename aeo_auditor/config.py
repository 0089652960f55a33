"""Centralised settings for the AEO auditor.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The scoring core in :mod:`aeo_auditor.audit` never reads these settings; only
the collaborators (page fetcher, FAQ client/server, CLI) do.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Page fetcher
    # ------------------------------------------------------------------
    html_proxy: str = field(
        default_factory=lambda: os.environ.get("HTML_PROXY", "https://r.jina.ai/")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # FAQ generation service (client side)
    # ------------------------------------------------------------------
    faq_api_url: str = field(
        default_factory=lambda: os.environ.get("FAQ_API_URL", "")
    )

    # ------------------------------------------------------------------
    # FAQ generation service (server side / chat model)
    # ------------------------------------------------------------------
    llm_provider: str = field(
        default_factory=lambda: os.environ.get("LLM_PROVIDER", "openai")
    )
    openai_chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-4.1-mini")
    )
    ollama_base_url: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_BASE_URL", "http://localhost:11434")
    )
    ollama_chat_model: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_CHAT_MODEL", "ministral-3:8b")
    )
    faq_max_tokens: int = field(
        default_factory=lambda: int(os.environ.get("FAQ_MAX_TOKENS", "800"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    @property
    def faq_enabled(self) -> bool:
        """``True`` when an FAQ generation endpoint is configured."""
        return bool(self.faq_api_url.strip())


# Module-level singleton — import this everywhere:
#   from aeo_auditor.config import settings
settings = Settings()
