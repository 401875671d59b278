"""Demo script for task-intelligence."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_intelligence.adapters.csv_adapter import parse
from task_intelligence.clock import FixedClock
from task_intelligence.engine import TaskIntelligence

UTTERANCES = [
    "أضف مهمة اجتماع مهم غداً",
    "add task: review the quarterly report next week",
    "search about doctor",
    "show my tasks",
    "finish the project proposal",
]


def main() -> None:
    engine = TaskIntelligence(clock=FixedClock(datetime(2025, 1, 6, 9, 30)))
    for text in UTTERANCES:
        command = engine.classify_command(text)
        print(f"{text!r}: {command.type.name} {dict(command.payload)}")
        print("  analysis:", engine.analyze_text(text))
    print("Suggestions:", engine.smart_suggestions())
    completions = parse(str(Path(__file__).with_name("sample_completions.csv")))
    print("Productivity:", engine.analyze_productivity(completions))


if __name__ == "__main__":
    main()
