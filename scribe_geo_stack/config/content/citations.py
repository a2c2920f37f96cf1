# -*- coding: utf-8 -*-
"""
Citation Catalog
================
Pre-researched reputable sources the citation builder links to.
"""

CITATION_SOURCES = (
    {
        "domain": "jamanetwork.com",
        "name": "JAMA Network",
        "credibility": 98,
        "topics": ("AI healthcare", "clinical documentation", "medical technology"),
    },
    {
        "domain": "nejm.org",
        "name": "New England Journal of Medicine",
        "credibility": 99,
        "topics": ("medical innovation", "healthcare efficiency", "clinical practice"),
    },
    {
        "domain": "healthaffairs.org",
        "name": "Health Affairs",
        "credibility": 95,
        "topics": ("healthcare policy", "physician burnout", "health technology"),
    },
    {
        "domain": "himss.org",
        "name": "HIMSS",
        "credibility": 94,
        "topics": ("health IT", "EHR integration", "digital health"),
    },
    {
        "domain": "ama-assn.org",
        "name": "American Medical Association",
        "credibility": 97,
        "topics": ("physician wellness", "medical practice", "healthcare technology"),
    },
)
