"""Shared fixtures for the report tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from time_reports.models import ActivityRecord, EmployeeRecord


@pytest.fixture
def sample_employees() -> list[EmployeeRecord]:
    return [
        EmployeeRecord("Tania", 99.9),
        EmployeeRecord("Rajesh", 150.75),
        EmployeeRecord("Eisha", 75.25),
        EmployeeRecord("Pritam", 100.01),
        EmployeeRecord("Suraj", 125.5),
        EmployeeRecord("Amit", 88.0),
    ]


@pytest.fixture
def sample_activities() -> list[ActivityRecord]:
    return [
        ActivityRecord("Development", 450),
        ActivityRecord("Meetings", 120),
        ActivityRecord("Documentation", 90),
        ActivityRecord("Code Review", 60),
    ]


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON payload to a temporary file and return its path."""

    def _write(payload, name: str = "input.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
