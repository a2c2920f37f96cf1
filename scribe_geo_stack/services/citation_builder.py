# -*- coding: utf-8 -*-
"""
Citation Builder
================
Picks up to three catalog sources whose topics overlap the question,
ranked by credibility.
"""

import logging
from typing import Iterable, List, Optional

from config.content.citations import CITATION_SOURCES
from models.content import Citation, CitationSource

logger = logging.getLogger("geo.citations")

MAX_CITATIONS = 3


def load_catalog(records: Iterable[dict] = CITATION_SOURCES) -> tuple:
    """Build the immutable citation catalog from raw records."""
    return tuple(CitationSource(**record) for record in records)


class CitationBuilder:
    """Ranks catalog entries by topic overlap, then credibility."""

    def __init__(self, catalog: Optional[Iterable[CitationSource]] = None):
        self.catalog = tuple(catalog) if catalog is not None else load_catalog()

    @staticmethod
    def _overlaps(source: CitationSource, topic: str) -> bool:
        # Symmetric substring test: catalog topic in input, or input in topic
        return any(t.lower() in topic or topic in t.lower() for t in source.topics)

    def generate_citations(self, topic: str) -> List[Citation]:
        """Return ranked citations for a topic (or raw question); may be empty."""
        needle = (topic or "").lower()
        if not needle.strip():
            return []

        relevant = [s for s in self.catalog if self._overlaps(s, needle)]
        relevant.sort(key=lambda s: s.credibility, reverse=True)

        citations = [
            Citation(
                rank=index,
                source=source.name,
                url=source.url,
                credibility=source.credibility,
            )
            for index, source in enumerate(relevant[:MAX_CITATIONS], start=1)
        ]
        logger.debug("%d citation(s) for '%s'", len(citations), topic)
        return citations
