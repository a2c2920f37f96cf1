"""Shared pytest fixtures for the GEO content stack tests."""

from datetime import datetime, timezone

import pytest

from config.settings import SuggestConfig
from services.citation_builder import CitationBuilder
from services.faq_generator import FAQGenerator
from services.geo_engine import GEOAutomationEngine
from services.page_publisher import PagePublisher
from services.question_harvester import QuestionHarvester

BASE_URL = "https://example.test/geo-demo"


@pytest.fixture
def now() -> datetime:
    """A fixed run time: 1020 days after the 2024-01-01 launch."""
    return datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def suggest_config() -> SuggestConfig:
    """Suggest settings without the polite delay."""
    return SuggestConfig(endpoint="https://suggest.example.test/complete", request_delay=0.0)


@pytest.fixture
def harvester(suggest_config: SuggestConfig) -> QuestionHarvester:
    return QuestionHarvester(suggest_config)


@pytest.fixture
def publisher() -> PagePublisher:
    return PagePublisher(base_url=BASE_URL)


@pytest.fixture
def engine(harvester: QuestionHarvester, publisher: PagePublisher) -> GEOAutomationEngine:
    return GEOAutomationEngine(
        harvester=harvester,
        faq_generator=FAQGenerator(),
        citation_builder=CitationBuilder(),
        publisher=publisher,
        max_questions=10,
    )


@pytest.fixture
def homepage_html() -> str:
    """A trimmed copy of the static homepage carrying every rewritable pattern."""
    return """<!DOCTYPE html>
<html lang="en">
<head>
    <meta name="description" content="Freed AI medical scribe saves doctors 2+ hours daily on clinical notes.">
    <script type="application/ld+json">{"@type":"SoftwareApplication","datePublished":"2025-03-01","aggregateRating":{"ratingValue":"4.9","reviewCount":"10000"}}</script>
</head>
<body>
    <p class="hero">Trusted by 20,000+ doctors and 20,000+ clinicians, with 40,000+ hours saved.</p>
    <div class="faq-section">
      <div class="faq-list">
      <div class="faq-item" onclick="toggleFAQ(this)">
        <div class="faq-question">What is Freed AI?</div>
      </div>
      </div>
    </div>

    <!-- COMPARISON PAGE -->
    <div class="comparison">
      <p><em>"Freed changed how I chart."</em> - Dr. Sarah Chen, Internal Medicine</p>
    </div>
</body>
</html>"""
