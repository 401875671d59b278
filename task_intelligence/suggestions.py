"""Time-of-day driven task title suggestions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from task_intelligence.config import DEFAULT_SETTINGS, EngineSettings
from task_intelligence.schema import TimeOfDay

MAX_SUGGESTIONS = 3

TITLES_BY_PERIOD: dict[TimeOfDay, tuple[str, ...]] = {
    TimeOfDay.MORNING: ("مراجعة الإيميلات", "تحضير خطة اليوم", "ممارسة الرياضة"),
    TimeOfDay.AFTERNOON: ("اجتماع فريق العمل", "مراجعة التقارير", "متابعة المشاريع"),
    TimeOfDay.EVENING: ("تحضير قائمة الغد", "قراءة كتاب", "وقت مع العائلة"),
}

# datetime.weekday(): Monday is 0, Friday is 4.
TITLES_BY_WEEKDAY: dict[int, str] = {
    0: "تخطيط الأسبوع",
    4: "مراجعة إنجازات الأسبوع",
}


def time_of_day(hour: int, settings: EngineSettings = DEFAULT_SETTINGS) -> TimeOfDay:
    """Bucket an hour into morning, afternoon or evening."""

    if settings.morning_start_hour <= hour < settings.afternoon_start_hour:
        return TimeOfDay.MORNING
    if settings.afternoon_start_hour <= hour < settings.evening_start_hour:
        return TimeOfDay.AFTERNOON
    return TimeOfDay.EVENING


def candidate_titles(now: datetime, settings: Optional[EngineSettings] = None) -> list[str]:
    """All candidates for ``now`` before truncation: period titles, then the weekday title."""

    candidates = list(TITLES_BY_PERIOD[time_of_day(now.hour, settings or DEFAULT_SETTINGS)])
    weekday_title = TITLES_BY_WEEKDAY.get(now.weekday())
    if weekday_title is not None and weekday_title not in candidates:
        candidates.append(weekday_title)
    return candidates


def suggest_titles(now: datetime, settings: Optional[EngineSettings] = None) -> list[str]:
    """Up to three suggested task titles for ``now``."""

    return candidate_titles(now, settings)[:MAX_SUGGESTIONS]
