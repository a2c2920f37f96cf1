# -*- coding: utf-8 -*-
"""
Homepage Content
================
Rotating testimonials, quarterly trending topics, competitor list and
specialties used by the site rewriter and the landing page generator.
"""

# Launch baselines and daily growth for the homepage statistics
BASE_DOCTORS = 20000
DOCTORS_PER_DAY = 15
BASE_HOURS_SAVED = 40000
HOURS_SAVED_PER_DAY = 80
BASE_ACCURACY = 95
BASE_SETUP_MINUTES = 5
BASE_REVIEW_COUNT = 10000
REVIEW_PERCENT_OF_DOCTORS = 30

TESTIMONIALS = (
    {
        "name": "Dr. Sarah Chen",
        "specialty": "Internal Medicine",
        "quote": (
            "I was spending $3,500/month on a human scribe who was only available "
            "during clinic hours. Freed costs $99/month, works for all my visits "
            "including hospital rounds, and the notes are actually more detailed. "
            "It's a no-brainer."
        ),
    },
    {
        "name": "Dr. James Williams",
        "specialty": "Emergency Medicine",
        "quote": (
            "In the ER, every second counts. Freed captures everything while I focus "
            "on critical care. Notes are ready before the patient is discharged. "
            "This has revolutionized our workflow."
        ),
    },
    {
        "name": "Dr. Maria Garcia",
        "specialty": "Pediatrics",
        "quote": (
            "Parents appreciate that I'm looking at their child, not a computer. "
            "Freed captures developmental milestones, vaccine discussions, "
            "everything. My documentation has never been better."
        ),
    },
    {
        "name": "Dr. Robert Kim",
        "specialty": "Psychiatry",
        "quote": (
            "Mental health visits require deep listening. Freed lets me maintain eye "
            "contact and build rapport while ensuring comprehensive documentation. "
            "The mental status exam formatting is perfect."
        ),
    },
)

# month is 1-based; the latest entry not after the current month applies
TRENDING_TOPICS = (
    {"month": 1, "topic": "New Year EHR migrations"},
    {"month": 4, "topic": "Q2 budget planning"},
    {"month": 7, "topic": "Mid-year workflow optimization"},
    {"month": 10, "topic": "Year-end documentation prep"},
)

# Trending FAQs are inserted right before this marker
FAQ_SECTION_END = "</div>\n    </div>\n\n    <!-- COMPARISON PAGE -->"

META_DESCRIPTION_PREFIX = 'content="Freed AI medical scribe saves doctors 2+ hours daily'

COMPETITORS = (
    {"name": "Nuance DAX Express", "price": "$250", "launch": "2024"},
    {"name": "Amazon HealthScribe", "price": "$199", "launch": "2024"},
    {"name": "Google Med-PaLM Scribe", "price": "TBD", "launch": "2025"},
)

SPECIALTIES = ("cardiology", "psychiatry", "pediatrics", "emergency-medicine")
