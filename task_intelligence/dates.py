"""Relative and numeric due-date resolution."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Optional

from task_intelligence.taxonomy import RELATIVE_DATE_TIERS, first_match

logger = logging.getLogger(__name__)

_NUMERIC_DATE = re.compile(r"(\d{1,2})[/\-](\d{1,2})", re.ASCII)


def add_months(moment: datetime, months: int) -> datetime:
    """Shift by whole months keeping the day-of-month.

    Days that do not exist in the target month overflow into the next one,
    so 31 January plus one month is 3 March (2 March in a leap year).
    """

    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    first_of_month = moment.replace(year=year, month=month, day=1)
    return first_of_month + timedelta(days=moment.day - 1)


def numeric_date(text: str, now: datetime) -> Optional[datetime]:
    """Resolve the first ``D/M`` or ``D-M`` fragment to midnight in the current year.

    A day past the end of its month overflows like ``add_months`` does, so
    ``31/4`` is 1 May. Days outside 1-31 or months outside 1-12 yield None.
    Dates already in the past are not moved to the next year.
    """

    match = _NUMERIC_DATE.search(text)
    if match is None:
        return None

    day, month = int(match.group(1)), int(match.group(2))
    if not (1 <= month <= 12 and 1 <= day <= 31):
        logger.debug("Rejected numeric date fragment %r", match.group(0))
        return None

    first_of_month = now.replace(month=month, day=1, hour=0, minute=0, second=0, microsecond=0)
    return first_of_month + timedelta(days=day - 1)


def resolve_due_date(text: str, now: datetime) -> Optional[datetime]:
    """Resolve a due date from lower-cased text relative to ``now``."""

    phrase = first_match(text, RELATIVE_DATE_TIERS)
    if phrase == "day_after_tomorrow":
        return now + timedelta(days=2)
    if phrase == "tomorrow":
        return now + timedelta(days=1)
    if phrase == "next_week":
        return now + timedelta(days=7)
    if phrase == "next_month":
        return add_months(now, 1)
    return numeric_date(text, now)
