"""Streamlit demo UI for task-intelligence."""

from __future__ import annotations

import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

from task_intelligence.adapters import csv_adapter, json_adapter
from task_intelligence.clock import FixedClock
from task_intelligence.commands import confirmation_phrase
from task_intelligence.engine import TaskIntelligence


def _parse_completions_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return _parse_completions_from_path(temp_path)


def run_engine(text: str, completions: list, now: datetime) -> dict[str, Any]:
    """Run all engine steps and return a UI-friendly result payload."""

    engine = TaskIntelligence(clock=FixedClock(now))
    analysis = engine.analyze_text(text)
    command = engine.classify_command(text)
    productivity = engine.analyze_productivity(completions)

    return {
        "analysis": {
            "priority": analysis.priority.name,
            "due_date": analysis.due_date.isoformat() if analysis.due_date else "—",
            "estimated_duration_minutes": analysis.estimated_duration_minutes,
            "suggested_category": analysis.suggested_category.label,
        },
        "command": {"type": command.type.name, **dict(command.payload)},
        "confirmation": confirmation_phrase(command.type),
        "suggestions": engine.smart_suggestions(),
        "productivity": {
            "score": productivity.score,
            "best_time_of_day": productivity.best_time_of_day.label,
        },
        "advice": list(productivity.suggestions),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Task Intelligence Demo", layout="wide")
    st.title("Task Intelligence — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        text = st.text_input("Task text or voice transcript", value="أضف مهمة اجتماع مهم غداً")
        day = st.date_input("Today", value=datetime.now().date())
        hour = st.slider("Now hour", min_value=0, max_value=23, value=datetime.now().hour)
        uploaded = st.file_uploader("Upload completed-task export", type=["csv", "json"])
        use_demo = st.checkbox("Load demo completions", value=True)
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            completions = csv_adapter.parse("examples/sample_completions.csv")
        elif uploaded is not None:
            completions = _parse_uploaded(uploaded)
        else:
            completions = []

        now = datetime(day.year, day.month, day.day, int(hour))
        result = run_engine(text, completions, now)

        st.subheader("A) Task Analysis")
        st.table([result["analysis"]])

        st.subheader("B) Voice Command")
        st.table([result["command"]])
        st.write(f"Spoken confirmation: {result['confirmation']}")

        st.subheader("C) Suggested Titles")
        st.write(result["suggestions"])

        st.subheader("D) Productivity")
        p1, p2 = st.columns(2)
        p1.metric("Score", result["productivity"]["score"])
        p2.metric("Best time", result["productivity"]["best_time_of_day"])
        for line in result["advice"]:
            st.write(f"- {line}")

    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
