#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Step 2: Generate FAQ Pages
==========================
Runs one full GEO automation pass and writes the generated FAQ pages plus
sitemap.xml to the output directory. Nothing is written if the run fails.

Usage:
    python -m pipeline.step2_generate_pages [--source suggest|seed]
                                            [--output-dir output/pages]
                                            [--schedule | --interval-hours 24]
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import get_settings
from models.content import AutomationResult
from services.geo_engine import GEOAutomationEngine
from services.slack_service import SlackService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("pipeline.generate_pages")


def save_result(result: AutomationResult, output_dir: Path) -> list:
    """Write every page and the sitemap; return the written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for page in result.pages:
        path = output_dir / page.filename
        path.write_text(page.html, encoding="utf-8")
        written.append(path)
    sitemap_path = output_dir / "sitemap.xml"
    sitemap_path.write_text(result.sitemap, encoding="utf-8")
    written.append(sitemap_path)
    logger.info("Saved %d files to %s", len(written), output_dir)
    return written


def main(
    source: str = "suggest",
    output_dir: Optional[str] = None,
    engine: Optional[GEOAutomationEngine] = None,
) -> Optional[dict]:
    """
    Generate and save one batch of FAQ pages.

    Args:
        source: 'suggest' harvests Google Suggest, 'seed' uses the static list
        output_dir: Where pages and sitemap.xml are written
        engine: Reuse an engine so run stats accumulate across scheduled runs

    Returns:
        dict summary, or None if the run failed
    """
    settings = get_settings()
    engine = engine or GEOAutomationEngine()
    slack = SlackService(settings.slack.webhook_url)
    out = Path(output_dir or settings.paths.output_pages)

    logger.info("=== Step 2: Generate FAQ Pages (source: %s) ===", source)

    questions = engine.harvester.seed_questions() if source == "seed" else None
    result = engine.run_full_automation(questions=questions)
    if result is None:
        slack.send_error("generate_pages", "Automation run failed; no pages written")
        return None

    written = save_result(result, out)
    slack.send_run_summary(result.stats, len(result.pages))

    summary = {
        "pages": [p.filename for p in result.pages],
        "files_written": len(written),
        "output_dir": str(out),
        "stats": result.stats.model_dump(mode="json"),
    }
    print(json.dumps(summary, ensure_ascii=False))
    return summary


def run_scheduled(source: str, output_dir: Optional[str], interval_hours: float) -> None:
    """Run immediately, then every ``interval_hours``."""
    engine = GEOAutomationEngine()
    while True:
        main(source=source, output_dir=output_dir, engine=engine)
        logger.info("Next run in %.1f hours", interval_hours)
        time.sleep(interval_hours * 60 * 60)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate GEO FAQ pages")
    parser.add_argument(
        "--source",
        choices=["suggest", "seed"],
        default="suggest",
        help="Question source",
    )
    parser.add_argument("--output-dir", default=None, help="Output directory")
    parser.add_argument(
        "--schedule",
        action="store_true",
        help="Keep running, once every AUTOMATION_INTERVAL_HOURS",
    )
    parser.add_argument(
        "--interval-hours",
        type=float,
        default=None,
        help="Keep running, once every N hours",
    )
    args = parser.parse_args()

    if args.schedule or args.interval_hours:
        hours = args.interval_hours or get_settings().automation.interval_hours
        run_scheduled(args.source, args.output_dir, hours)
    elif main(source=args.source, output_dir=args.output_dir) is None:
        sys.exit(1)
