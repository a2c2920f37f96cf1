# -*- coding: utf-8 -*-
"""
Pydantic Models
===============
Data models for every entity in the GEO content pipeline.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CitationSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    domain: str
    credibility: int = Field(ge=0, le=100)
    topics: Tuple[str, ...] = ()

    @property
    def url(self) -> str:
        return f"https://{self.domain}"


class Citation(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: int = Field(ge=1)
    source: str
    url: str
    credibility: int


class GeneratedPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
    citations: Tuple[Citation, ...] = ()
    html: str
    filename: str


class RunStats(BaseModel):
    questions_processed: int = 0
    pages_generated: int = 0
    citations_added: int = 0
    last_run: Optional[datetime] = None


class AutomationResult(BaseModel):
    pages: List[GeneratedPage] = Field(default_factory=list)
    sitemap: str
    stats: RunStats


class SiteStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    doctors: int
    hours_saved: int
    accuracy: int
    setup_time: int
