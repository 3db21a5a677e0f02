from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.employee_scheduling.employee_scheduling.container import build_container

EMPLOYEES = [
    {"employeeId": "E001", "name": "Ava Thompson", "phone": "5551-0101"},
    {"employeeId": "E002", "name": "Ben Carter", "phone": "5551-0102"},
    {"employeeId": "E003", "name": "Chloe Nguyen", "phone": "5551-0103"},
]

SHIFTS = [
    {"shiftId": "S001", "date": "2026-06-01", "startTime": "08:00", "endTime": "12:00"},
    {"shiftId": "S002", "date": "2026-06-01", "startTime": "13:00", "endTime": "17:00"},
    {"shiftId": "S003", "date": "2026-06-01", "startTime": "22:00", "endTime": "02:00"},
    {"shiftId": "S004", "date": "2026-06-02", "startTime": "09:00", "endTime": "17:00"},
    {"shiftId": "S005", "date": "2026-06-02", "startTime": "18:00", "endTime": "22:00"},
]

ASSIGNMENTS = [
    {"employeeId": "E001", "shiftId": "S001"},
    {"employeeId": "E002", "shiftId": "S004"},
]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    d = tmp_path / "data"
    d.mkdir()
    (d / "employees.json").write_text(json.dumps(EMPLOYEES, indent=4), encoding="utf-8")
    (d / "shifts.json").write_text(json.dumps(SHIFTS, indent=4), encoding="utf-8")
    (d / "assignments.json").write_text(json.dumps(ASSIGNMENTS, indent=4), encoding="utf-8")
    return d


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"maxDailyHours": 8}), encoding="utf-8")
    return path


@pytest.fixture
def container(data_dir: Path, settings_file: Path):
    return build_container(storage="json", data_dir=data_dir, settings_file=settings_file)
