"""Run the task intelligence engine from the command line and print JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_intelligence.adapters import csv_adapter, json_adapter
from task_intelligence.analyzer import analyze
from task_intelligence.commands import classify, confirmation_phrase
from task_intelligence.config import DEFAULT_SETTINGS, load_settings
from task_intelligence.productivity import analyze_productivity
from task_intelligence.suggestions import suggest_titles


def _load_completions(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def _iso_timestamp(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an ISO timestamp, got {value!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze task text, voice commands and productivity")
    parser.add_argument("--now", type=_iso_timestamp, help="ISO timestamp used as the current time (default: wall clock)")
    parser.add_argument("--config", help="Path to a JSON settings file")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    sub = parser.add_subparsers(dest="command", required=True)
    analyze_cmd = sub.add_parser("analyze", help="Extract priority, due date, duration and category")
    analyze_cmd.add_argument("text")
    classify_cmd = sub.add_parser("classify", help="Classify a voice command")
    classify_cmd.add_argument("text")
    sub.add_parser("suggest", help="Suggest task titles for the current time")
    productivity_cmd = sub.add_parser("productivity", help="Score a completed-task export")
    productivity_cmd.add_argument("--data", required=True, help="Path to CSV/JSON completed-task export")
    return parser


def run(args: argparse.Namespace) -> dict:
    now = args.now or datetime.now()
    settings = load_settings(args.config) if args.config else DEFAULT_SETTINGS

    if args.command == "analyze":
        analysis = analyze(args.text, now, settings)
        return {
            "priority": analysis.priority.name,
            "due_date": analysis.due_date.isoformat() if analysis.due_date else None,
            "estimated_duration_minutes": analysis.estimated_duration_minutes,
            "suggested_category": analysis.suggested_category.label,
        }
    if args.command == "classify":
        command = classify(args.text)
        return {
            "type": command.type.name,
            "payload": dict(command.payload),
            "confirmation": confirmation_phrase(command.type),
        }
    if args.command == "suggest":
        return {"suggestions": suggest_titles(now, settings)}

    completions = _load_completions(Path(args.data))
    result = analyze_productivity(completions, now, settings)
    return {
        "n_completions": len(completions),
        "score": result.score,
        "best_time_of_day": result.best_time_of_day.label,
        "suggestions": list(result.suggestions),
    }


def main() -> None:
    args = _build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(json.dumps(run(args), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
