# -*- coding: utf-8 -*-
"""
FAQ Answer Templates
====================
Canned answers for the FAQ generator and the keyword rules that select them.
Rules are checked in order; the first rule with a matching substring wins.
"""

ANSWER_TEMPLATES = {
    "definition": (
        "A medical scribe is an AI-powered tool that automatically transcribes and "
        "structures doctor-patient conversations into clinical notes, saving "
        "healthcare providers significant documentation time."
    ),
    "benefits": (
        "Key benefits include: saving 2-3 hours daily on documentation, reducing "
        "physician burnout, improving patient interaction quality, ensuring "
        "comprehensive and consistent notes, and maintaining HIPAA compliance."
    ),
    "cost": (
        "Medical scribe solutions typically range from $99-400 per month. Pricing "
        "depends on features like real-time transcription, EHR integration, and "
        "specialty-specific customization."
    ),
    "accuracy": (
        "Modern AI medical scribes achieve 95-98% accuracy with medical terminology. "
        "They use specialized healthcare language models and continuously improve "
        "through machine learning."
    ),
    "privacy": (
        "Reputable medical scribe solutions are fully HIPAA compliant, using "
        "encryption, secure data handling, BAAs, and often include features like "
        "automatic PHI redaction."
    ),
    "integration": (
        "Most AI scribes integrate with major EHRs including Epic, Cerner, "
        "AthenaHealth, and others through APIs or secure copy-paste workflows."
    ),
    "setup": (
        "Setup typically takes 5-30 minutes. Cloud-based solutions require no "
        "installation, just account creation and EHR connection configuration."
    ),
}

# (substrings, template key) in priority order
MATCH_RULES = (
    (("what is", "definition"), "definition"),
    (("benefit", "advantage", "why use"), "benefits"),
    (("cost", "price", "how much"), "cost"),
    (("accura", "reliable"), "accuracy"),
    (("hipaa", "secure", "privacy"), "privacy"),
    (("integrat", "ehr", "epic"), "integration"),
    (("setup", "install", "how to start"), "setup"),
)

DEFAULT_ANSWER = (
    "AI medical scribes use advanced natural language processing to convert "
    "clinical conversations into structured documentation, helping healthcare "
    "providers focus on patient care rather than paperwork."
)
