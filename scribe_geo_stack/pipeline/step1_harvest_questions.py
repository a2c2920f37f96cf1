#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Step 1: Harvest Questions
=========================
Collects candidate FAQ questions from Google Suggest (or the static seed
list) and prints them as JSON. Useful to preview what step 2 will publish.

Usage:
    python -m pipeline.step1_harvest_questions [--source suggest|seed]
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from services.question_harvester import QuestionHarvester

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("pipeline.harvest_questions")


def main(source: str = "suggest") -> dict:
    """
    Harvest questions from the given source.

    Args:
        source: 'suggest' (Google Suggest) or 'seed' (static list)

    Returns:
        dict with the question list and counts
    """
    logger.info("=== Step 1: Harvest Questions (source: %s) ===", source)
    harvester = QuestionHarvester()

    if source == "seed":
        questions = harvester.seed_questions()
    else:
        questions = harvester.harvest_questions()

    result = {
        "source": source,
        "count": len(questions),
        "questions": questions,
        "timestamp": datetime.now().isoformat(),
    }
    logger.info("Harvest complete: %d questions", len(questions))
    print(json.dumps(result, ensure_ascii=False))
    return result


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Harvest FAQ questions")
    parser.add_argument(
        "--source",
        choices=["suggest", "seed"],
        default="suggest",
        help="Question source",
    )
    args = parser.parse_args()
    main(source=args.source)
