# -*- coding: utf-8 -*-
"""
GEO Automation Engine
=====================
One batch run: harvest questions → match answer → attach citations →
render page, then build the sitemap. A run either fully succeeds or
returns None; nothing partial is handed back.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from config.settings import settings
from models.content import AutomationResult, GeneratedPage, RunStats
from services.citation_builder import CitationBuilder
from services.faq_generator import FAQGenerator
from services.page_publisher import PagePublisher
from services.question_harvester import QuestionHarvester

logger = logging.getLogger("geo.engine")


class GEOAutomationEngine:
    """Batch driver wiring harvester, generator, citation builder and publisher."""

    def __init__(
        self,
        harvester: Optional[QuestionHarvester] = None,
        faq_generator: Optional[FAQGenerator] = None,
        citation_builder: Optional[CitationBuilder] = None,
        publisher: Optional[PagePublisher] = None,
        max_questions: Optional[int] = None,
    ):
        self.harvester = harvester or QuestionHarvester()
        self.faq_generator = faq_generator or FAQGenerator()
        self.citation_builder = citation_builder or CitationBuilder()
        self.publisher = publisher or PagePublisher()
        self.max_questions = (
            max_questions
            if max_questions is not None
            else settings.automation.max_questions_per_run
        )
        self.stats = RunStats()

    def run_full_automation(
        self,
        questions: Optional[Sequence[str]] = None,
        now: Optional[datetime] = None,
    ) -> Optional[AutomationResult]:
        """
        Execute one full pass.

        Args:
            questions: Question list; harvested from Google Suggest when None.
            now: Run time used for page timestamps and sitemap lastmod.

        Returns:
            AutomationResult, or None if anything in the batch failed.
        """
        logger.info("=== Starting full GEO automation ===")
        now = now or datetime.now(timezone.utc)

        try:
            if questions is None:
                questions = self.harvester.harvest_questions()
            batch = [q for q in questions if q and q.strip()][: self.max_questions]
            logger.info(
                "Found %d questions, processing %d", len(questions), len(batch)
            )

            pages: List[GeneratedPage] = []
            for question in batch:
                answer = self.faq_generator.generate_faq(question)
                citations = self.citation_builder.generate_citations(question)
                page = self.publisher.generate_page(question, answer, citations, now)
                pages.append(page)

                self.stats.questions_processed += 1
                self.stats.pages_generated += 1
                self.stats.citations_added += len(citations)

            sitemap = self.publisher.render_sitemap(pages, now)
            self.stats.last_run = now

            logger.info(
                "Automation complete: %d processed, %d pages, %d citations",
                self.stats.questions_processed,
                self.stats.pages_generated,
                self.stats.citations_added,
            )
            return AutomationResult(
                pages=pages,
                sitemap=sitemap,
                stats=self.stats.model_copy(),
            )

        except Exception:
            logger.exception("Automation run failed — discarding batch")
            return None
