"""CSV adapter for completed-task exports."""

from __future__ import annotations

import csv
from datetime import datetime

from task_intelligence.schema import CompletedTask

_REQUIRED_FIELDS = ("task_id", "completed_at")


def _parse_row(row: dict, row_number: int) -> CompletedTask:
    missing = [field for field in _REQUIRED_FIELDS if not (row.get(field) or "").strip()]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        completed_at = datetime.fromisoformat(row["completed_at"].strip())
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed completed_at") from exc

    title_raw = row.get("title")
    title = title_raw.strip() if title_raw else None

    return CompletedTask(
        task_id=row["task_id"].strip(),
        completed_at=completed_at,
        title=title or None,
    )


def parse(file_path: str) -> list[CompletedTask]:
    """Parse CSV file into a list of completed tasks."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        return [_parse_row(row, row_number) for row_number, row in enumerate(reader, start=2)]
