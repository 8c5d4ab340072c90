"""Centralised settings for shot-search.

Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).  The
markup literals the extractor matches against are deliberately not settings;
they live in :mod:`shot_search.scraper.patterns`.
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
    # Parsing
    # ------------------------------------------------------------------
    html_parser: str = field(
        default_factory=lambda: os.environ.get("SHOT_SEARCH_HTML_PARSER", "html.parser")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("SHOT_SEARCH_LOG_LEVEL", "WARNING").upper()
    )


# Module-level singleton, import this everywhere:
#   from shot_search.config import settings
settings = Settings()
