from datetime import datetime, timedelta

from task_intelligence.analyzer import analyze, estimate_duration, extract_priority, suggest_category
from task_intelligence.config import EngineSettings
from task_intelligence.schema import Category, Priority, TaskAnalysis

NOW = datetime(2025, 6, 10, 14, 30)


def test_empty_text_yields_defaults():
    result = analyze("", NOW)
    assert result == TaskAnalysis(
        priority=Priority.LOW,
        due_date=None,
        estimated_duration_minutes=15,
        suggested_category=Category.GENERAL,
    )


def test_urgent_tier_wins_over_other_tiers():
    assert analyze("URGENT: call mom", NOW).priority == Priority.HIGH
    assert analyze("an easy but Important errand", NOW).priority == Priority.HIGH
    assert analyze("مهمة بسيطة لكن عاجل", NOW).priority == Priority.HIGH


def test_medium_and_low_tiers():
    assert extract_priority("easy and normal") == Priority.MEDIUM
    assert extract_priority("easy chores") == Priority.LOW
    assert extract_priority("عمل عادي") == Priority.MEDIUM


def test_priority_falls_back_to_meeting_and_length():
    assert extract_priority("team meeting") == Priority.MEDIUM
    assert extract_priority("اجتماع الفريق") == Priority.MEDIUM
    long_text = "pick up the dry cleaning and then drop by the bakery on the way"
    assert len(long_text) > 50
    assert extract_priority(long_text) == Priority.MEDIUM
    assert extract_priority("buy milk") == Priority.LOW


def test_priority_uses_configured_length_threshold():
    settings = EngineSettings(long_text_chars=10)
    assert extract_priority("buy some milk", settings) == Priority.MEDIUM


def test_duration_tiers_in_order():
    assert estimate_duration("quick call") == 15
    assert estimate_duration("simple project") == 15
    assert estimate_duration("weekly review") == 60
    assert estimate_duration("مراجعة التقرير") == 60
    assert estimate_duration("project plan") == 240
    assert estimate_duration("تطوير التطبيق") == 240


def test_duration_falls_back_to_length():
    assert estimate_duration("buy milk") == 15
    assert estimate_duration("buy milk and eggs from the corner shop") == 30
    assert estimate_duration("pick up the dry cleaning and then drop by the bakery on the way") == 60


def test_category_tiers_in_order():
    assert suggest_category("office party") == Category.WORK
    assert suggest_category("meeting about the family trip") == Category.WORK
    assert suggest_category("family dinner") == Category.PERSONAL
    assert suggest_category("learn spanish") == Category.STUDY
    assert suggest_category("doctor appointment") == Category.HEALTH
    assert suggest_category("زيارة الطبيب") == Category.HEALTH
    assert suggest_category("buy milk") == Category.GENERAL


def test_matching_is_substring_based():
    # "homework" contains "work", so it lands in the work tier.
    assert suggest_category("finish homework") == Category.WORK


def test_analyze_is_case_insensitive_and_pure():
    text = "Weekly REVIEW meeting tomorrow at the Office"
    first = analyze(text, NOW)
    second = analyze(text, NOW)
    assert first == second
    assert first.priority == Priority.MEDIUM
    assert first.due_date == NOW + timedelta(days=1)
    assert first.estimated_duration_minutes == 60
    assert first.suggested_category == Category.WORK


def test_analyze_arabic_sentence():
    result = analyze("اجتماع مهم غداً", NOW)
    assert result.priority == Priority.HIGH
    assert result.due_date == NOW + timedelta(days=1)
    assert result.estimated_duration_minutes == 60
    assert result.suggested_category == Category.WORK


def test_analyze_never_raises_on_malformed_dates():
    assert analyze("pay rent 32/13", NOW).due_date is None
    assert analyze("----//", NOW).due_date is None
