"""Centralised settings for medalwiki.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Document source
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get("MEDALWIKI_BASE_URL", "https://en.wikipedia.org")
    )
    home_path: str = field(
        default_factory=lambda: os.environ.get(
            "MEDALWIKI_HOME_PATH", "/wiki/Summer_Olympic_Games"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("MEDALWIKI_REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "MEDALWIKI_USER_AGENT",
            "Mozilla/5.0 (compatible; medalwiki/0.1; +https://github.com/medalwiki)",
        )
    )

    @property
    def home_url(self) -> str:
        """Absolute URL of the page every query starts from."""
        return self.base_url.rstrip("/") + "/" + self.home_path.lstrip("/")

    # ------------------------------------------------------------------
    # Page graph walking
    # ------------------------------------------------------------------
    max_concurrent_fetches: int = field(
        default_factory=lambda: int(os.environ.get("MEDALWIKI_MAX_CONCURRENT_FETCHES", "4"))
    )
    cache_documents: bool = field(
        default_factory=lambda: _env_flag("MEDALWIKI_CACHE_DOCUMENTS", "true")
    )

    # ------------------------------------------------------------------
    # Generated artifacts
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("MEDALWIKI_OUTPUT_DIR", "flags"))
    )
    flag_size: int = field(
        default_factory=lambda: int(os.environ.get("MEDALWIKI_FLAG_SIZE", "50"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("MEDALWIKI_LOG_LEVEL", "WARNING")
    )

    def ensure_output_dir(self) -> Path:
        """Create the output directory if it does not exist and return it."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir


# Module-level singleton — import this everywhere:
#   from medalwiki.config import settings
settings = Settings()
