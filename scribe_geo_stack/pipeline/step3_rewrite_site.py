#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Step 3: Rewrite Site
====================
Refreshes the static homepage in place (stats, trending FAQ, testimonial,
schema dates, meta description), then regenerates the competitor
comparison pages and the auto-generated specialty pages.

Usage:
    python -m pipeline.step3_rewrite_site [--index index.html]
                                          [--output-dir output/landing]
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.content.site_content import COMPETITORS, SPECIALTIES
from config.settings import get_settings
from services.landing_pages import (
    comparison_filename,
    render_comparison_page,
    render_specialty_page,
)
from services.site_rewriter import rewrite_site
from services.slack_service import SlackService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("pipeline.rewrite_site")


def write_landing_pages(output_dir: Path, now: datetime, product: str) -> list:
    """Write comparison pages and auto-generated specialty pages."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    for competitor in COMPETITORS:
        path = output_dir / comparison_filename(competitor["name"])
        path.write_text(render_comparison_page(competitor, now, product), encoding="utf-8")
        logger.info("Created comparison page: %s", path.name)
        written.append(path)

    specialty_dir = output_dir / get_settings().paths.auto_generated_dir
    specialty_dir.mkdir(parents=True, exist_ok=True)
    for specialty in SPECIALTIES:
        path = specialty_dir / f"{specialty}.html"
        path.write_text(render_specialty_page(specialty, now, product), encoding="utf-8")
        written.append(path)
    logger.info("Created %d specialty pages in %s", len(SPECIALTIES), specialty_dir)

    return written


def main(
    index_path: Optional[str] = None,
    output_dir: Optional[str] = None,
    now: Optional[datetime] = None,
) -> dict:
    """
    Rewrite the homepage and regenerate landing pages.

    Args:
        index_path: Homepage HTML file rewritten in place
        output_dir: Where comparison and specialty pages go
        now: Clock override

    Returns:
        dict summary
    """
    settings = get_settings()
    now = now or datetime.now(timezone.utc)
    index = Path(index_path or settings.site.index_path)
    out = Path(output_dir or settings.paths.output_landing)

    logger.info("=== Step 3: Rewrite Site (%s) ===", index)

    try:
        original = index.read_text(encoding="utf-8")
        updated = rewrite_site(original, now, settings.site.launch_date)
        index.write_text(updated, encoding="utf-8")
        written = write_landing_pages(out, now, settings.site.product_name)
    except Exception as e:
        logger.error("Site rewrite failed: %s", e)
        SlackService(settings.slack.webhook_url).send_error("rewrite_site", str(e))
        raise

    result = {
        "index": str(index),
        "changed": updated != original,
        "landing_pages": len(written),
        "timestamp": now.isoformat(),
    }
    print(json.dumps(result, ensure_ascii=False))
    return result


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Refresh the static homepage")
    parser.add_argument("--index", default=None, help="Homepage HTML file")
    parser.add_argument("--output-dir", default=None, help="Landing page directory")
    args = parser.parse_args()
    main(index_path=args.index, output_dir=args.output_dir)
