import json
from datetime import datetime

import pytest

from task_intelligence.adapters.csv_adapter import parse as parse_csv
from task_intelligence.adapters.json_adapter import parse as parse_json


def test_csv_parse_success(tmp_path):
    path = tmp_path / "completed.csv"
    path.write_text(
        "task_id,completed_at,title\n"
        "a,2025-01-01T09:00:00,مراجعة التقارير\n"
        "b,2025-01-01T10:00:00,\n",
        encoding="utf-8",
    )
    tasks = parse_csv(str(path))
    assert len(tasks) == 2
    assert tasks[0].title == "مراجعة التقارير"
    assert tasks[1].completed_at == datetime(2025, 1, 1, 10)
    assert tasks[1].title is None


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "completed.csv"
    path.write_text("task_id,completed_at\na,bad\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_csv_parse_missing_field(tmp_path):
    path = tmp_path / "completed.csv"
    path.write_text("task_id,completed_at\n,2025-01-01T09:00:00\n", encoding="utf-8")
    with pytest.raises(ValueError, match="task_id"):
        parse_csv(str(path))


def test_csv_parse_empty_file(tmp_path):
    path = tmp_path / "completed.csv"
    path.write_text("", encoding="utf-8")
    assert parse_csv(str(path)) == []


def test_json_parse_success(tmp_path):
    path = tmp_path / "completed.json"
    payload = [
        {"task_id": "a", "completed_at": "2025-01-01T09:00:00"},
        {"id": "b", "completedAt": "2025-01-01T10:00:00", "title": "call the doctor"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    tasks = parse_json(str(path))
    assert len(tasks) == 2
    assert tasks[1].task_id == "b"
    assert tasks[1].completed_at.hour == 10


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "completed.json"
    path.write_text(json.dumps([{"task_id": "a", "completed_at": "bad"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_parse_requires_list(tmp_path):
    path = tmp_path / "completed.json"
    path.write_text(json.dumps({"task_id": "a"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))
