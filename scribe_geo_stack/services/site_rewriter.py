# -*- coding: utf-8 -*-
"""
Site Rewriter
=============
Keeps the static homepage looking fresh. Each step is a pure function
``html -> html`` that targets one known pattern and is a no-op when the
pattern is missing. ``rewrite_site`` composes them in a fixed order.
"""

import logging
import re
from datetime import date, datetime, timezone
from typing import Optional, Sequence

from config.content.site_content import (
    BASE_ACCURACY,
    BASE_DOCTORS,
    BASE_HOURS_SAVED,
    BASE_REVIEW_COUNT,
    BASE_SETUP_MINUTES,
    DOCTORS_PER_DAY,
    FAQ_SECTION_END,
    HOURS_SAVED_PER_DAY,
    META_DESCRIPTION_PREFIX,
    REVIEW_PERCENT_OF_DOCTORS,
    TESTIMONIALS,
    TRENDING_TOPICS,
)
from models.content import SiteStats

logger = logging.getLogger("geo.site")

LAUNCH_DATE = date(2024, 1, 1)
SECONDS_PER_WEEK = 7 * 24 * 60 * 60

_SCHEMA_DATE = re.compile(r'"(datePublished|dateModified)":"\d{4}-\d{2}-\d{2}"')
_REVIEW_COUNT = re.compile(r'"reviewCount":"\d+"')
_META_DESCRIPTION = re.compile(
    re.escape(META_DESCRIPTION_PREFIX) + r"(?: \(Updated [^)]*\))?"
)


# ================================================================
# Stats
# ================================================================


def days_since_launch(now: datetime, launch: date = LAUNCH_DATE) -> int:
    return max((now.date() - launch).days, 0)


def compute_site_stats(now: datetime, launch: date = LAUNCH_DATE) -> SiteStats:
    """Scale the launch baselines by whole days elapsed since launch."""
    days = days_since_launch(now, launch)
    return SiteStats(
        doctors=BASE_DOCTORS + days * DOCTORS_PER_DAY,
        hours_saved=BASE_HOURS_SAVED + days * HOURS_SAVED_PER_DAY,
        accuracy=BASE_ACCURACY,
        setup_time=BASE_SETUP_MINUTES,
    )


def update_dynamic_stats(html: str, stats: SiteStats) -> str:
    html = html.replace("20,000+ doctors", f"{stats.doctors:,}+ doctors")
    html = html.replace("20,000+ clinicians", f"{stats.doctors:,}+ clinicians")
    html = html.replace("40,000+ hours", f"{stats.hours_saved:,}+ hours")
    return html


# ================================================================
# Trending FAQ
# ================================================================


def current_trending_topic(now: datetime, topics: Sequence[dict] = TRENDING_TOPICS) -> str:
    """Latest topic whose month is not after the current month."""
    eligible = [t for t in topics if t["month"] <= now.month]
    return (eligible[-1] if eligible else topics[0])["topic"]


def build_trending_faq(topic: str, product: str = "Freed AI") -> str:
    return f"""
      <div class="faq-item" onclick="toggleFAQ(this)">
        <div class="faq-question">How does {product} help with {topic}?</div>
        <div class="faq-answer">
          <p><strong>{product} streamlines {topic}.</strong> Our automated documentation saves crucial time during busy transition periods, allowing you to focus on patient care while maintaining compliance and accuracy.</p>
        </div>
      </div>"""


def add_trending_question(html: str, now: datetime) -> str:
    topic = current_trending_topic(now)
    if topic in html or FAQ_SECTION_END not in html:
        return html
    logger.info("Added trending FAQ: %s", topic)
    return html.replace(
        FAQ_SECTION_END, build_trending_faq(topic) + "\n" + FAQ_SECTION_END, 1
    )


# ================================================================
# Testimonials
# ================================================================


def current_testimonial(now: datetime, testimonials: Sequence[dict] = TESTIMONIALS) -> dict:
    week_num = int(_as_utc(now).timestamp() // SECONDS_PER_WEEK)
    return testimonials[week_num % len(testimonials)]


def _testimonial_pattern(testimonials: Sequence[dict]) -> "re.Pattern":
    specialties = "|".join(re.escape(t["specialty"]) for t in testimonials)
    return re.compile(r'<em>".*?"</em> - Dr\. \w+ \w+, (?:' + specialties + ")")


def rotate_testimonials(html: str, now: datetime) -> str:
    testimonial = current_testimonial(now)
    replacement = (
        f'<em>"{testimonial["quote"]}"</em> - '
        f'{testimonial["name"]}, {testimonial["specialty"]}'
    )
    return _testimonial_pattern(TESTIMONIALS).sub(lambda _m: replacement, html)


# ================================================================
# Schema markup + meta
# ================================================================


def review_count(stats: SiteStats) -> int:
    return BASE_REVIEW_COUNT + stats.doctors * REVIEW_PERCENT_OF_DOCTORS // 100


def update_schema_markup(html: str, now: datetime, stats: SiteStats) -> str:
    today = now.date().isoformat()
    html = _SCHEMA_DATE.sub(lambda m: f'"{m.group(1)}":"{today}"', html)
    return _REVIEW_COUNT.sub(f'"reviewCount":"{review_count(stats)}"', html)


def update_meta_descriptions(html: str, now: datetime) -> str:
    stamp = f"{META_DESCRIPTION_PREFIX} (Updated {now.strftime('%B %Y')})"
    return _META_DESCRIPTION.sub(lambda _m: stamp, html)


# ================================================================
# Pipeline
# ================================================================


def _as_utc(now: datetime) -> datetime:
    return now.replace(tzinfo=timezone.utc) if now.tzinfo is None else now


def rewrite_site(
    html: str, now: Optional[datetime] = None, launch: date = LAUNCH_DATE
) -> str:
    """Apply every rewrite step in order and return the new document."""
    now = now or datetime.now(timezone.utc)
    stats = compute_site_stats(now, launch)

    html = update_dynamic_stats(html, stats)
    html = add_trending_question(html, now)
    html = rotate_testimonials(html, now)
    html = update_schema_markup(html, now, stats)
    html = update_meta_descriptions(html, now)

    logger.info(
        "Site rewritten: %d doctors, %d hours saved, reviewCount %d",
        stats.doctors,
        stats.hours_saved,
        review_count(stats),
    )
    return html
