"""Productivity score and preferred work period from completion history."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Iterable, Optional, Union

import numpy as np

from task_intelligence.config import DEFAULT_SETTINGS, EngineSettings
from task_intelligence.schema import CompletedTask, ProductivityAnalysis, TimeOfDay
from task_intelligence.suggestions import time_of_day

logger = logging.getLogger(__name__)

GET_STARTED_SUGGESTION = "ابدأ بإضافة بعض المهام!"

EXCELLENT_SUGGESTIONS = (
    "أداء ممتاز! استمر على هذا المنوال",
    "جرب تحدي نفسك بمهام أكثر تعقيداً",
    "شارك خبرتك مع الآخرين",
)
GOOD_SUGGESTIONS = (
    "أداء جيد! يمكنك تحسينه أكثر",
    "حاول تقسيم المهام الكبيرة لأجزاء صغيرة",
    "خصص وقتاً محدداً لكل مهمة",
)
FAIR_SUGGESTIONS = (
    "تحتاج لتحسين التركيز",
    "ابدأ بالمهام السهلة لبناء الزخم",
    "استخدم تقنية البومودورو",
)
STARTER_SUGGESTIONS = (
    "ابدأ بخطوات صغيرة",
    "ضع أهدافاً واقعية",
    "احتفل بالإنجازات الصغيرة",
)

Completion = Union[datetime, CompletedTask]


def _completion_time(item: Completion) -> datetime:
    if isinstance(item, CompletedTask):
        return item.completed_at
    return item


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def productivity_score(
    completed: list[datetime], now: datetime, settings: EngineSettings = DEFAULT_SETTINGS
) -> int:
    """Score 0-100 from the share of completions that happened today."""

    if not completed:
        return 0
    today = now.date()
    completed_today = sum(1 for moment in completed if moment.date() == today)
    expected = max(len(completed) * settings.daily_target_ratio, 1)
    return _round_half_up(float(np.clip(completed_today / expected * 100, 0, 100)))


def best_hour(completed: list[datetime]) -> Optional[int]:
    """Most frequent completion hour; ties go to the earliest hour."""

    if not completed:
        return None
    counts = np.bincount([moment.hour for moment in completed], minlength=24)
    return int(np.argmax(counts))


def improvement_suggestions(score: int, settings: EngineSettings = DEFAULT_SETTINGS) -> list[str]:
    if score >= settings.excellent_score:
        return list(EXCELLENT_SUGGESTIONS)
    if score >= settings.good_score:
        return list(GOOD_SUGGESTIONS)
    if score >= settings.fair_score:
        return list(FAIR_SUGGESTIONS)
    return list(STARTER_SUGGESTIONS)


def analyze_productivity(
    completed_tasks: Iterable[Completion],
    now: datetime,
    settings: Optional[EngineSettings] = None,
) -> ProductivityAnalysis:
    """Compute score, best time of day and advice from completion timestamps."""

    settings = settings or DEFAULT_SETTINGS
    completed = [_completion_time(item) for item in completed_tasks]

    if not completed:
        return ProductivityAnalysis(
            score=0,
            best_time_of_day=TimeOfDay.MORNING,
            suggestions=(GET_STARTED_SUGGESTION,),
        )

    score = productivity_score(completed, now, settings)
    hour = best_hour(completed)
    period = time_of_day(hour, settings)
    logger.debug("Productivity over %d completions: score=%d best_hour=%d", len(completed), score, hour)

    return ProductivityAnalysis(
        score=score,
        best_time_of_day=period,
        suggestions=tuple(improvement_suggestions(score, settings)),
    )
