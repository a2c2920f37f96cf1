"""Tests for services.citation_builder — topic overlap and credibility ranking."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from models.content import CitationSource
from services.citation_builder import MAX_CITATIONS, CitationBuilder, load_catalog


@pytest.fixture
def builder() -> CitationBuilder:
    return CitationBuilder()


class TestGenerateCitations:
    """Tests for CitationBuilder.generate_citations()."""

    def test_question_containing_topic(self, builder: CitationBuilder) -> None:
        citations = builder.generate_citations("Best AI clinical documentation tools")
        assert [c.source for c in citations] == ["JAMA Network"]
        assert citations[0].rank == 1
        assert citations[0].url == "https://jamanetwork.com"
        assert citations[0].credibility == 98

    def test_topic_containing_input(self, builder: CitationBuilder) -> None:
        """'medical' is a substring of three catalog topics."""
        citations = builder.generate_citations("Medical")
        assert [c.source for c in citations] == [
            "New England Journal of Medicine",
            "JAMA Network",
            "American Medical Association",
        ]

    def test_never_more_than_three_sorted_by_credibility(self, builder: CitationBuilder) -> None:
        """'health' overlaps all five sources."""
        citations = builder.generate_citations("health")
        assert len(citations) == MAX_CITATIONS
        scores = [c.credibility for c in citations]
        assert scores == sorted(scores, reverse=True)
        assert scores == [99, 98, 97]
        assert [c.rank for c in citations] == [1, 2, 3]

    def test_case_insensitive(self, builder: CitationBuilder) -> None:
        citations = builder.generate_citations("ehr INTEGRATION with epic")
        assert [c.source for c in citations] == ["HIMSS"]

    def test_no_overlap_returns_empty(self, builder: CitationBuilder) -> None:
        assert builder.generate_citations("How much does a medical scribe cost?") == []

    @pytest.mark.parametrize("topic", ["", "   "])
    def test_blank_topic_returns_empty(self, builder: CitationBuilder, topic: str) -> None:
        assert builder.generate_citations(topic) == []

    def test_results_come_from_catalog(self, builder: CitationBuilder) -> None:
        names = {s.name for s in builder.catalog}
        for topic in ["health", "medical", "digital health", "physician burnout"]:
            for c in builder.generate_citations(topic):
                assert c.source in names

    def test_ties_keep_catalog_order(self) -> None:
        catalog = [
            CitationSource(name="A", domain="a.org", credibility=90, topics=("scribe",)),
            CitationSource(name="B", domain="b.org", credibility=90, topics=("scribe",)),
        ]
        citations = CitationBuilder(catalog).generate_citations("ai scribe")
        assert [c.source for c in citations] == ["A", "B"]


class TestCatalog:
    """Catalog construction and validation."""

    def test_default_catalog_loaded(self) -> None:
        catalog = load_catalog()
        assert len(catalog) == 5
        assert all(0 <= s.credibility <= 100 for s in catalog)

    def test_credibility_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            load_catalog([{"name": "X", "domain": "x.org", "credibility": 101, "topics": ()}])

    def test_sources_are_frozen(self) -> None:
        source = load_catalog()[0]
        with pytest.raises(ValidationError):
            source.credibility = 10
