# -*- coding: utf-8 -*-
"""
Page Publisher
==============
Stamps a question, its answer and citations into a standalone FAQ page
with FAQPage JSON-LD, and builds the sitemap for a batch of pages.
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Sequence

from config.settings import settings
from models.content import Citation, GeneratedPage

logger = logging.getLogger("geo.publisher")

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{title} - AI Medical Scribe Information</title>
    <meta name="description" content="{description}">
    <meta name="robots" content="noindex, nofollow">
    <script type="application/ld+json">{schema}</script>
    <style>
        body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
        .disclaimer { background: #fff3cd; padding: 10px; margin-bottom: 20px; border-radius: 5px; }
        .faq-item { margin-bottom: 30px; padding: 20px; background: #f8f9fa; border-radius: 8px; }
        .citations { margin-top: 30px; padding: 20px; background: #e3f2fd; border-radius: 8px; }
        h1 { color: #333; }
        h2 { color: #0066cc; }
        .citation { margin: 10px 0; }
        .update-time { color: #666; font-size: 14px; }
    </style>
</head>
<body>
    <div class="disclaimer">
        ⚠️ Educational Demo - Auto-generated content about medical scribing technology
    </div>
    <h1>{title}</h1>
    <p class="update-time">Auto-updated: {timestamp}</p>
    {content}
{references}</body>
</html>"""

REFERENCES_TEMPLATE = """    <div class="citations">
        <h3>References:</h3>
        {citations}
    </div>
"""

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
DESCRIPTION_LENGTH = 155
MAX_SLUG_LENGTH = 50

# Only bare {name} placeholders; CSS braces are left alone
_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _fill(template: str, values: Dict[str, str]) -> str:
    # Single pass, so substituted text is never expanded again
    return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), template)


def _utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def slugify(question: str) -> str:
    """Lower-case, non-alphanumerics to '-', collapse runs, cap at 50 chars."""
    slug = re.sub(r"[^a-z0-9]", "-", question.lower())
    slug = re.sub(r"-+", "-", slug)
    return slug[:MAX_SLUG_LENGTH]


def page_filename(question: str) -> str:
    return slugify(question) + ".html"


def build_faq_schema(question: str, answer: str) -> dict:
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": {
            "@type": "Question",
            "name": question,
            "acceptedAnswer": {
                "@type": "Answer",
                "text": answer,
            },
        },
    }


class PagePublisher:
    """Renders FAQ pages and sitemaps."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or settings.site.base_url).rstrip("/")

    # ================================================================
    # Pages
    # ================================================================

    def render_html(
        self,
        question: str,
        answer: str,
        citations: Sequence[Citation],
        now: datetime,
    ) -> str:
        """Return the full HTML document for one question/answer pair."""
        references = ""
        if citations:
            citation_html = "".join(
                f'<div class="citation">[{c.rank}] '
                f'<a href="{c.url}" rel="noopener">{c.source}</a></div>'
                for c in citations
            )
            references = REFERENCES_TEMPLATE.replace("{citations}", citation_html)

        return _fill(
            PAGE_TEMPLATE,
            {
                "title": question,
                "description": answer[:DESCRIPTION_LENGTH],
                "schema": json.dumps(build_faq_schema(question, answer), ensure_ascii=False),
                "timestamp": _utc(now).strftime("%Y-%m-%d %H:%M:%S UTC"),
                "content": (
                    f'<div class="faq-item"><h2>{question}</h2><p>{answer}</p></div>'
                ),
                "references": references,
            },
        )

    def generate_page(
        self,
        question: str,
        answer: str,
        citations: Sequence[Citation],
        now: Optional[datetime] = None,
    ) -> GeneratedPage:
        """Render a page and wrap it with its derived filename."""
        now = now or datetime.now(timezone.utc)
        html = self.render_html(question, answer, citations, now)
        filename = page_filename(question)
        logger.debug("Rendered %s (%d citations)", filename, len(citations))
        return GeneratedPage(
            question=question,
            answer=answer,
            citations=tuple(citations),
            html=html,
            filename=filename,
        )

    # ================================================================
    # Sitemap
    # ================================================================

    def render_sitemap(self, pages: Iterable[GeneratedPage], now: datetime) -> str:
        """Root entry (daily) followed by one weekly entry per page."""
        lastmod = _utc(now).isoformat(timespec="seconds")
        urls = "".join(
            f"""
    <url>
        <loc>{self.base_url}/{page.filename}</loc>
        <lastmod>{lastmod}</lastmod>
        <changefreq>weekly</changefreq>
    </url>"""
            for page in pages
        )
        return f"""<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="{SITEMAP_NS}">
    <url>
        <loc>{self.base_url}/</loc>
        <lastmod>{lastmod}</lastmod>
        <changefreq>daily</changefreq>
    </url>{urls}
</urlset>"""
