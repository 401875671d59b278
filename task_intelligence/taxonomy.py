"""Keyword taxonomy tables and the substring matching primitive.

Every table is an ordered tuple of ``(value, phrases)`` tiers. Tiers are
scanned in definition order and the first tier with a phrase contained in the
lower-cased text wins, so overlapping phrases across tiers are resolved by
position alone.

Matching is plain substring containment, not word-boundary matching: short
phrases such as ``"new"`` or ``"عمل"`` also fire inside longer words.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, TypeVar

from task_intelligence.schema import Category, Priority, VoiceCommandType

T = TypeVar("T")

Tier = tuple[T, tuple[str, ...]]


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    """Return True when any phrase is a substring of ``text``."""

    return any(phrase in text for phrase in phrases)


def first_match(text: str, tiers: Sequence[Tier], default: Optional[T] = None) -> Optional[T]:
    """Return the value of the first tier with a phrase contained in ``text``."""

    for value, phrases in tiers:
        if contains_any(text, phrases):
            return value
    return default


PRIORITY_TIERS: tuple[Tier, ...] = (
    (Priority.HIGH, ("عاجل", "مهم", "ضروري", "فوري", "urgent", "important", "critical")),
    (Priority.MEDIUM, ("متوسط", "عادي", "medium", "normal")),
    (Priority.LOW, ("بسيط", "سهل", "low", "simple", "easy")),
)

MEETING_PHRASES: tuple[str, ...] = ("اجتماع", "meeting")

# Day-after-tomorrow sits ahead of tomorrow: "day after tomorrow" contains
# "tomorrow" and "بعد غدا" contains "غدا".
DAY_AFTER_TOMORROW_PHRASES: tuple[str, ...] = ("بعد غد", "day after tomorrow")
TOMORROW_PHRASES: tuple[str, ...] = ("غداً", "غدا", "tomorrow")
NEXT_WEEK_PHRASES: tuple[str, ...] = ("الأسبوع القادم", "next week")
NEXT_MONTH_PHRASES: tuple[str, ...] = ("الشهر القادم", "next month")

RELATIVE_DATE_TIERS: tuple[Tier, ...] = (
    ("day_after_tomorrow", DAY_AFTER_TOMORROW_PHRASES),
    ("tomorrow", TOMORROW_PHRASES),
    ("next_week", NEXT_WEEK_PHRASES),
    ("next_month", NEXT_MONTH_PHRASES),
)

DURATION_TIERS: tuple[Tier, ...] = (
    (15, ("سريع", "بسيط", "quick", "simple", "call", "مكالمة")),
    (60, ("اجتماع", "meeting", "مراجعة", "review", "تقرير", "report")),
    (240, ("مشروع", "project", "تطوير", "development", "دراسة", "study")),
)

CATEGORY_TIERS: tuple[Tier, ...] = (
    (Category.WORK, ("عمل", "مكتب", "اجتماع", "work", "office", "meeting")),
    (Category.PERSONAL, ("شخصي", "منزل", "عائلة", "personal", "home", "family")),
    (Category.STUDY, ("دراسة", "تعلم", "كتاب", "study", "learn", "book")),
    (Category.HEALTH, ("رياضة", "طبيب", "صحة", "sport", "doctor", "health")),
)

ADD_PHRASES: tuple[str, ...] = ("أضف", "اضف", "add", "create", "new")
TASK_WORDS: tuple[str, ...] = ("مهمة", "task")
SEARCH_PHRASES: tuple[str, ...] = ("ابحث", "بحث", "search", "find")
SEARCH_CONNECTORS: tuple[str, ...] = ("عن", "about")
SHOW_PHRASES: tuple[str, ...] = ("اعرض", "عرض", "show", "display")
COMPLETE_PHRASES: tuple[str, ...] = ("اكمل", "انهي", "complete", "finish", "done")
DELETE_PHRASES: tuple[str, ...] = ("احذف", "امسح", "delete", "remove")

COMMAND_TIERS: tuple[Tier, ...] = (
    (VoiceCommandType.ADD_TASK, ADD_PHRASES),
    (VoiceCommandType.SEARCH, SEARCH_PHRASES),
    (VoiceCommandType.SHOW_TASKS, SHOW_PHRASES),
    (VoiceCommandType.COMPLETE_TASK, COMPLETE_PHRASES),
    (VoiceCommandType.DELETE_TASK, DELETE_PHRASES),
)

# Phrases removed from the original text to recover a command payload.
PAYLOAD_STRIP_PHRASES: dict[VoiceCommandType, tuple[str, ...]] = {
    VoiceCommandType.ADD_TASK: ADD_PHRASES + TASK_WORDS,
    VoiceCommandType.SEARCH: SEARCH_PHRASES + SEARCH_CONNECTORS,
}
