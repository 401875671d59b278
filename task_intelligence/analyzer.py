"""Rule-based analysis of free-form task text."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from task_intelligence.config import DEFAULT_SETTINGS, EngineSettings
from task_intelligence.dates import resolve_due_date
from task_intelligence.schema import Category, Priority, TaskAnalysis
from task_intelligence.taxonomy import (
    CATEGORY_TIERS,
    DURATION_TIERS,
    MEETING_PHRASES,
    PRIORITY_TIERS,
    contains_any,
    first_match,
)

logger = logging.getLogger(__name__)


def extract_priority(text: str, settings: EngineSettings = DEFAULT_SETTINGS) -> Priority:
    """Priority from keyword tiers, falling back to length and meeting cues."""

    priority = first_match(text, PRIORITY_TIERS)
    if priority is not None:
        return priority
    if len(text) > settings.long_text_chars or contains_any(text, MEETING_PHRASES):
        return Priority.MEDIUM
    return Priority.LOW


def estimate_duration(text: str, settings: EngineSettings = DEFAULT_SETTINGS) -> int:
    """Estimated minutes from effort keywords, falling back to text length."""

    minutes = first_match(text, DURATION_TIERS)
    if minutes is not None:
        return minutes
    if len(text) < settings.short_text_chars:
        return settings.short_text_minutes
    if len(text) < settings.long_text_chars:
        return settings.default_text_minutes
    return settings.long_text_minutes


def suggest_category(text: str) -> Category:
    return first_match(text, CATEGORY_TIERS, default=Category.GENERAL)


def analyze(text: str, now: datetime, settings: Optional[EngineSettings] = None) -> TaskAnalysis:
    """Analyze task text into priority, due date, duration and category.

    Never raises: text without any recognised cue yields the defaults.
    """

    settings = settings or DEFAULT_SETTINGS
    lowered = (text or "").lower()

    analysis = TaskAnalysis(
        priority=extract_priority(lowered, settings),
        due_date=resolve_due_date(lowered, now),
        estimated_duration_minutes=estimate_duration(lowered, settings),
        suggested_category=suggest_category(lowered),
    )
    logger.debug("Analyzed %r -> %s", text, analysis)
    return analysis
