"""JSON adapter for completed-task exports."""

from __future__ import annotations

import json
from datetime import datetime

from task_intelligence.schema import CompletedTask

_REQUIRED_FIELDS = ("task_id", "completed_at")
# Exports written by the mobile app use camelCase keys.
_ALIASES = {"taskId": "task_id", "id": "task_id", "completedAt": "completed_at"}


def _normalize_keys(item: dict) -> dict:
    normalized = dict(item)
    for alias, name in _ALIASES.items():
        if alias in item and name not in normalized:
            normalized[name] = item[alias]
    return normalized


def _parse_item(item: dict, index: int) -> CompletedTask:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    item = _normalize_keys(item)
    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        completed_at = datetime.fromisoformat(str(item["completed_at"]))
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed completed_at") from exc

    title_raw = item.get("title")
    title = str(title_raw).strip() if title_raw else None

    return CompletedTask(
        task_id=str(item["task_id"]).strip(),
        completed_at=completed_at,
        title=title or None,
    )


def parse(file_path: str) -> list[CompletedTask]:
    """Parse JSON file into completed tasks."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
