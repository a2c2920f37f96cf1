# -*- coding: utf-8 -*-
"""
FAQ Generator
=============
Maps a harvested question to one of the canned answer templates by
keyword rules. No NLU: substring tests in a fixed priority order.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from config.content.answers import ANSWER_TEMPLATES, DEFAULT_ANSWER, MATCH_RULES

logger = logging.getLogger("geo.faq")


class FAQGenerator:
    """Keyword-rule answer matcher over a read-only template store."""

    def __init__(
        self,
        templates: Optional[Mapping[str, str]] = None,
        rules: Optional[Sequence[Tuple[Sequence[str], str]]] = None,
        default_answer: str = DEFAULT_ANSWER,
    ):
        self.templates = MappingProxyType(dict(templates or ANSWER_TEMPLATES))
        self.rules = tuple(
            (tuple(s.lower() for s in substrings), key)
            for substrings, key in (rules or MATCH_RULES)
        )
        self.default_answer = default_answer

        unknown = [key for _, key in self.rules if key not in self.templates]
        if unknown:
            raise ValueError(f"Match rules reference unknown templates: {unknown}")

    def match_template_key(self, question: str) -> Optional[str]:
        """Return the first template key whose rule matches, else None."""
        lower_q = (question or "").lower()
        for substrings, key in self.rules:
            if any(s in lower_q for s in substrings):
                return key
        return None

    def generate_faq(self, question: str) -> str:
        """Return the answer text for a question. Always returns text."""
        key = self.match_template_key(question)
        if key is None:
            logger.debug("No template matched '%s' — using default", question)
            return self.default_answer
        logger.debug("Matched '%s' → %s", question, key)
        return self.templates[key]
