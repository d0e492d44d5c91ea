"""Centralised settings for the site optimiser.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional(name: str) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("OPTIMISER_OUTPUT_DIR", "output"))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    # ------------------------------------------------------------------
    # Crawler
    # ------------------------------------------------------------------
    crawl_max_depth: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_MAX_DEPTH", "2"))
    )
    blog_max_depth: int = field(
        default_factory=lambda: int(os.environ.get("BLOG_MAX_DEPTH", "1"))
    )
    crawl_workers: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_WORKERS", "1"))
    )
    # 0 means no ceiling
    crawl_max_pages: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_MAX_PAGES", "0"))
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    static_min_length: int = field(
        default_factory=lambda: int(os.environ.get("STATIC_MIN_LENGTH", "1500"))
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT",
            "Mozilla/5.0 (compatible; SiteOptimiser/1.0)",
        )
    )
    browser_path: str | None = field(default_factory=lambda: _optional("BROWSER_PATH"))

    # ------------------------------------------------------------------
    # Rewriting model
    # ------------------------------------------------------------------
    llm_provider: str = field(
        default_factory=lambda: os.environ.get("LLM_PROVIDER", "openai")
    )
    openai_chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-4o")
    )
    ollama_chat_model: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_CHAT_MODEL", "ministral-3:8b")
    )
    llm_max_tokens: int = field(
        default_factory=lambda: int(os.environ.get("LLM_MAX_TOKENS", "1500"))
    )

    # ------------------------------------------------------------------
    # Structural analysis
    # ------------------------------------------------------------------
    header_footer_window: int = field(
        default_factory=lambda: int(os.environ.get("HEADER_FOOTER_WINDOW", "250"))
    )
    header_footer_threshold: float = field(
        default_factory=lambda: float(os.environ.get("HEADER_FOOTER_THRESHOLD", "0.8"))
    )


# Module-level singleton, import this everywhere:
#   from optimiser.config import settings
settings = Settings()
