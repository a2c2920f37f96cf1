"""Tests for services.page_publisher — FAQ page HTML, JSON-LD and sitemap."""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from datetime import datetime

import pytest

from models.content import Citation
from services.page_publisher import PagePublisher, page_filename, slugify

SITEMAP_NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}

QUESTION = "How much does a medical scribe cost?"
ANSWER = "Medical scribe solutions typically range from $99-400 per month."


def _citations() -> list[Citation]:
    return [
        Citation(rank=1, source="New England Journal of Medicine", url="https://nejm.org", credibility=99),
        Citation(rank=2, source="JAMA Network", url="https://jamanetwork.com", credibility=98),
    ]


def _json_ld(html: str) -> dict:
    match = re.search(r'<script type="application/ld\+json">(.*?)</script>', html, re.S)
    assert match, "JSON-LD block missing"
    return json.loads(match.group(1))


# ---------------------------------------------------------------------------
# Page HTML
# ---------------------------------------------------------------------------


class TestRenderHtml:
    """Tests for PagePublisher.render_html()."""

    def test_heading_and_answer_verbatim(self, publisher: PagePublisher, now: datetime) -> None:
        html = publisher.render_html(QUESTION, ANSWER, _citations(), now)
        assert f"<h1>{QUESTION}</h1>" in html
        assert f"<h2>{QUESTION}</h2>" in html
        assert f"<p>{ANSWER}</p>" in html
        assert f"<title>{QUESTION} - AI Medical Scribe Information</title>" in html

    def test_disclaimer_banner(self, publisher: PagePublisher, now: datetime) -> None:
        html = publisher.render_html(QUESTION, ANSWER, [], now)
        assert '<div class="disclaimer">' in html
        assert "Educational Demo" in html

    def test_structured_data_bound_to_question_and_answer(
        self, publisher: PagePublisher, now: datetime
    ) -> None:
        schema = _json_ld(publisher.render_html(QUESTION, ANSWER, _citations(), now))
        assert schema["@context"] == "https://schema.org"
        assert schema["@type"] == "FAQPage"
        assert schema["mainEntity"]["@type"] == "Question"
        assert schema["mainEntity"]["name"] == QUESTION
        assert schema["mainEntity"]["acceptedAnswer"] == {"@type": "Answer", "text": ANSWER}

    def test_citation_list(self, publisher: PagePublisher, now: datetime) -> None:
        html = publisher.render_html(QUESTION, ANSWER, _citations(), now)
        assert '<div class="citations">' in html
        assert "<h3>References:</h3>" in html
        assert (
            '<div class="citation">[1] <a href="https://nejm.org" rel="noopener">'
            "New England Journal of Medicine</a></div>"
        ) in html
        assert '[2] <a href="https://jamanetwork.com" rel="noopener">JAMA Network</a>' in html

    def test_zero_citations_omits_block(self, publisher: PagePublisher, now: datetime) -> None:
        html = publisher.render_html(QUESTION, ANSWER, [], now)
        assert '<div class="citations">' not in html
        assert "References:" not in html
        assert html.rstrip().endswith("</html>")
        assert "{references}" not in html

    def test_description_truncated_to_155(self, publisher: PagePublisher, now: datetime) -> None:
        answer = "A" * 300
        html = publisher.render_html(QUESTION, answer, [], now)
        assert f'<meta name="description" content="{"A" * 155}">' in html

    def test_timestamp_is_only_nondeterministic_part(self, publisher: PagePublisher, now: datetime) -> None:
        first = publisher.render_html(QUESTION, ANSWER, _citations(), now)
        second = publisher.render_html(QUESTION, ANSWER, _citations(), now)
        assert first == second
        assert "Auto-updated: 2026-10-17 12:00:00 UTC" in first

    def test_placeholders_in_text_not_expanded(self, publisher: PagePublisher, now: datetime) -> None:
        html = publisher.render_html("What is {content}?", "See {citations}.", [], now)
        assert "<h1>What is {content}?</h1>" in html
        assert "<p>See {citations}.</p>" in html

    def test_css_left_intact(self, publisher: PagePublisher, now: datetime) -> None:
        html = publisher.render_html(QUESTION, ANSWER, [], now)
        assert "body { font-family: Arial, sans-serif;" in html


class TestGeneratePage:
    """Tests for PagePublisher.generate_page()."""

    def test_page_fields(self, publisher: PagePublisher, now: datetime) -> None:
        page = publisher.generate_page(QUESTION, ANSWER, _citations(), now)
        assert page.question == QUESTION
        assert page.answer == ANSWER
        assert [c.rank for c in page.citations] == [1, 2]
        assert page.filename == "how-much-does-a-medical-scribe-cost-.html"
        assert page.html == publisher.render_html(QUESTION, ANSWER, _citations(), now)


# ---------------------------------------------------------------------------
# Filenames
# ---------------------------------------------------------------------------


class TestSlugify:
    """Tests for slugify() / page_filename()."""

    @pytest.mark.parametrize(
        "question, expected",
        [
            ("How much does a medical scribe cost?", "how-much-does-a-medical-scribe-cost-"),
            ("AI  scribe -- vs   human", "ai-scribe-vs-human"),
            ("HIPAA & EHR", "hipaa-ehr"),
        ],
    )
    def test_slug(self, question: str, expected: str) -> None:
        assert slugify(question) == expected

    def test_truncated_to_50(self) -> None:
        assert len(slugify("medical scribe " * 10)) == 50

    @pytest.mark.parametrize(
        "question",
        [
            "How much does a medical scribe cost?",
            "  Ünïcode   scribe!! ",
            "medical scribe " * 10,
            "---",
            "",
        ],
    )
    def test_idempotent(self, question: str) -> None:
        once = slugify(question)
        assert slugify(once) == once

    def test_page_filename(self) -> None:
        assert page_filename("What is a scribe") == "what-is-a-scribe.html"


# ---------------------------------------------------------------------------
# Sitemap
# ---------------------------------------------------------------------------


class TestRenderSitemap:
    """Tests for PagePublisher.render_sitemap()."""

    def test_root_then_pages(self, publisher: PagePublisher, now: datetime) -> None:
        pages = [
            publisher.generate_page("What is a scribe?", ANSWER, [], now),
            publisher.generate_page(QUESTION, ANSWER, [], now),
        ]
        root = ET.fromstring(publisher.render_sitemap(pages, now).encode("utf-8"))
        urls = root.findall("sm:url", SITEMAP_NS)
        assert len(urls) == 3

        locs = [u.find("sm:loc", SITEMAP_NS).text for u in urls]
        assert locs == [
            "https://example.test/geo-demo/",
            "https://example.test/geo-demo/what-is-a-scribe-.html",
            "https://example.test/geo-demo/how-much-does-a-medical-scribe-cost-.html",
        ]

        freqs = [u.find("sm:changefreq", SITEMAP_NS).text for u in urls]
        assert freqs == ["daily", "weekly", "weekly"]

        lastmods = {u.find("sm:lastmod", SITEMAP_NS).text for u in urls}
        assert lastmods == {"2026-10-17T12:00:00+00:00"}

    def test_empty_batch_still_has_root(self, publisher: PagePublisher, now: datetime) -> None:
        sitemap = publisher.render_sitemap([], now)
        assert sitemap.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        root = ET.fromstring(sitemap.encode("utf-8"))
        assert len(root.findall("sm:url", SITEMAP_NS)) == 1

    def test_naive_time_treated_as_utc(self, publisher: PagePublisher) -> None:
        sitemap = publisher.render_sitemap([], datetime(2026, 1, 2, 3, 4, 5))
        assert "<lastmod>2026-01-02T03:04:05+00:00</lastmod>" in sitemap
