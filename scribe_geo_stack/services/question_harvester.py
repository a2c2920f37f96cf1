# -*- coding: utf-8 -*-
"""
Question Harvester
==================
Collects real search questions from the Google Suggest endpoint for a set
of seed terms plus "<prefix> <trending term>" combinations.
A failed lookup counts as zero suggestions for that query.
"""

import logging
import time
from typing import Iterable, List, Optional

import requests

from config.settings import SuggestConfig, settings

logger = logging.getLogger("geo.harvester")


class QuestionHarvester:
    """Google Suggest client with a static seed fallback."""

    def __init__(self, cfg: Optional[SuggestConfig] = None):
        self._cfg = cfg or settings.suggest

    # ================================================================
    # Google Suggest
    # ================================================================

    def get_suggestions(self, query: str) -> List[str]:
        """Return suggestion strings for one query; [] on any fetch failure."""
        try:
            resp = requests.get(
                self._cfg.endpoint,
                params={"client": self._cfg.client, "q": query},
                headers={"User-Agent": self._cfg.user_agent},
                timeout=self._cfg.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.exceptions.RequestException, ValueError) as exc:
            logger.warning("Suggest lookup failed for '%s': %s", query, exc)
            return []

        # Response shape: [query, [suggestion, ...], ...]
        if not isinstance(data, list) or len(data) < 2 or not isinstance(data[1], list):
            logger.warning("Unexpected suggest payload for '%s'", query)
            return []
        return [s for s in data[1] if isinstance(s, str)]

    def harvest_queries(self) -> List[str]:
        """Seed terms first, then the trending combinations."""
        trending = [
            f"{self._cfg.trending_prefix} {term}" for term in self._cfg.trending_terms
        ]
        return list(self._cfg.seed_queries) + trending

    def harvest_questions(self) -> List[str]:
        """Harvest and de-duplicate questions, keeping first-seen order."""
        logger.info("Harvesting questions from Google Suggest...")
        queries = self.harvest_queries()
        collected: List[str] = []

        for i, query in enumerate(queries):
            suggestions = self.get_suggestions(query)
            logger.info("Suggest: %d for '%s'", len(suggestions), query)
            collected.extend(suggestions)
            if self._cfg.request_delay and i < len(queries) - 1:
                time.sleep(self._cfg.request_delay)  # polite delay

        questions = self._deduplicate(collected)
        logger.info("Harvested %d unique questions", len(questions))
        return questions

    # ================================================================
    # Static seed list
    # ================================================================

    def seed_questions(self) -> List[str]:
        return self._deduplicate(self._cfg.seed_questions)

    @staticmethod
    def _deduplicate(questions: Iterable[str]) -> List[str]:
        seen = set()
        result = []
        for q in questions:
            q = q.strip()
            if not q or q in seen:
                continue
            seen.add(q)
            result.append(q)
        return result
