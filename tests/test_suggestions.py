from datetime import datetime, timedelta

from task_intelligence.schema import TimeOfDay
from task_intelligence.suggestions import (
    TITLES_BY_PERIOD,
    TITLES_BY_WEEKDAY,
    candidate_titles,
    suggest_titles,
    time_of_day,
)

MONDAY = datetime(2025, 1, 6)
WEDNESDAY = datetime(2025, 1, 8)
FRIDAY = datetime(2025, 1, 10)


def test_hour_buckets():
    assert time_of_day(6) == TimeOfDay.MORNING
    assert time_of_day(11) == TimeOfDay.MORNING
    assert time_of_day(12) == TimeOfDay.AFTERNOON
    assert time_of_day(16) == TimeOfDay.AFTERNOON
    assert time_of_day(17) == TimeOfDay.EVENING
    assert time_of_day(23) == TimeOfDay.EVENING
    assert time_of_day(5) == TimeOfDay.EVENING


def test_suggestions_follow_time_of_day():
    assert suggest_titles(WEDNESDAY.replace(hour=9)) == list(TITLES_BY_PERIOD[TimeOfDay.MORNING])
    assert suggest_titles(WEDNESDAY.replace(hour=13)) == list(TITLES_BY_PERIOD[TimeOfDay.AFTERNOON])
    assert suggest_titles(WEDNESDAY.replace(hour=21)) == list(TITLES_BY_PERIOD[TimeOfDay.EVENING])


def test_weekday_title_is_appended_after_period_titles():
    monday = candidate_titles(MONDAY.replace(hour=9))
    assert monday[-1] == TITLES_BY_WEEKDAY[0]
    assert len(monday) == 4

    friday = candidate_titles(FRIDAY.replace(hour=20))
    assert friday[-1] == TITLES_BY_WEEKDAY[4]

    assert candidate_titles(WEDNESDAY.replace(hour=9)) == list(TITLES_BY_PERIOD[TimeOfDay.MORNING])


def test_weekday_title_is_truncated_when_no_space_remains():
    assert TITLES_BY_WEEKDAY[0] not in suggest_titles(MONDAY.replace(hour=9))


def test_suggestions_are_bounded_and_unique():
    start = datetime(2025, 1, 6)
    for offset in range(7 * 24):
        titles = suggest_titles(start + timedelta(hours=offset))
        assert 1 <= len(titles) <= 3
        assert len(set(titles)) == len(titles)
