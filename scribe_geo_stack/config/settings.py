# -*- coding: utf-8 -*-
"""
Central Configuration
=====================
Loads environment variables from .env and exposes them as frozen dataclasses
for every step of the GEO content stack.
"""

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Resolve project root and load .env
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env", override=False)

# ---------------------------------------------------------------------------
# Configuration dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SuggestConfig:
    # Google Suggest (no key needed)
    endpoint: str = "https://suggestqueries.google.com/complete/search"
    client: str = "firefox"
    timeout: float = 15.0
    user_agent: str = "scribe_geo_stack/1.0"
    request_delay: float = 0.5  # polite delay between suggest calls
    seed_queries: tuple = (
        "medical scribe",
        "AI clinical documentation",
        "HIPAA compliant scribe",
        "medical transcription software",
    )
    trending_prefix: str = "medical scribe"
    trending_terms: tuple = ("vs", "cost", "review", "alternative", "best")
    # Offline question list for --source seed
    seed_questions: tuple = (
        "What is a medical scribe?",
        "What are the benefits of an AI medical scribe?",
        "How much does a medical scribe cost?",
        "How accurate are AI medical scribes?",
        "Is an AI medical scribe HIPAA compliant?",
        "Does an AI scribe integrate with Epic?",
        "How do I set up an AI medical scribe?",
        "AI medical scribe vs human scribe",
    )


@dataclass(frozen=True)
class SiteConfig:
    base_url: str = "https://your-username.github.io/geo-demo"
    index_path: str = "index.html"
    product_name: str = "Freed AI"
    launch_date: date = date(2024, 1, 1)


@dataclass(frozen=True)
class AutomationConfig:
    max_questions_per_run: int = 10
    interval_hours: float = 24.0


@dataclass(frozen=True)
class SlackConfig:
    webhook_url: str = ""


@dataclass(frozen=True)
class PathsConfig:
    output_pages: str = "output/pages"
    output_landing: str = "output/landing"
    auto_generated_dir: str = "auto-generated"


# ---------------------------------------------------------------------------
# Lazy-loaded global settings
# ---------------------------------------------------------------------------
class _Settings:
    """Lazy singleton — reads env vars on first access."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._loaded = False
        return cls._instance

    def _load(self):
        if self._loaded:
            return
        e = os.environ.get

        self.suggest = SuggestConfig(
            endpoint=e("SUGGEST_ENDPOINT", SuggestConfig.endpoint),
            timeout=float(e("SUGGEST_TIMEOUT", "15")),
            request_delay=float(e("SUGGEST_DELAY", "0.5")),
        )
        self.site = SiteConfig(
            base_url=(e("SITE_BASE_URL") or SiteConfig.base_url).rstrip("/"),
            index_path=e("SITE_INDEX_PATH", "index.html"),
        )
        self.automation = AutomationConfig(
            max_questions_per_run=int(e("MAX_QUESTIONS_PER_RUN", "10")),
            interval_hours=float(e("AUTOMATION_INTERVAL_HOURS", "24")),
        )
        self.slack = SlackConfig(
            webhook_url=e("SLACK_WEBHOOK_URL", ""),
        )
        self.paths = PathsConfig(
            output_pages=e("OUTPUT_PAGES_DIR", "output/pages"),
            output_landing=e("OUTPUT_LANDING_DIR", "output/landing"),
        )

        self._loaded = True

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        self._load()
        return self.__dict__[name]


def get_settings() -> _Settings:
    """Return the process-wide settings object."""
    return settings


settings = _Settings()
