"""Data providers and validation for report input records.

A provider is any zero-argument callable returning a sequence of raw
mappings. The pipelines accept a provider instead of fetching data
themselves, so tests and the CLI can swap in their own sources.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import MalformedDataError
from .models import ActivityRecord, EmployeeRecord
from .normalization import normalize_label

logger = logging.getLogger(__name__)

RawRecords = Sequence[Mapping[str, Any]]
DataProvider = Callable[[], RawRecords]

SAMPLE_EMPLOYEES_JSON = """[
    { "name": "Rajesh", "totalTimeWorked": 150.75 },
    { "name": "Suraj", "totalTimeWorked": 125.5 },
    { "name": "Pritam", "totalTimeWorked": 100.01 },
    { "name": "Tania", "totalTimeWorked": 99.9 },
    { "name": "Amit", "totalTimeWorked": 88.0 },
    { "name": "Eisha", "totalTimeWorked": 75.25 }
]"""

SAMPLE_ACTIVITIES_JSON = """[
    { "Activity": "Development", "Minutes": 450 },
    { "Activity": "Meetings", "Minutes": 120 },
    { "Activity": "Documentation", "Minutes": 90 },
    { "Activity": "Code Review", "Minutes": 60 }
]"""


class EmployeePayload(BaseModel):
    name: str = Field(min_length=1)
    hours_worked: float = Field(alias="totalTimeWorked", ge=0, allow_inf_nan=False, strict=True)

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, value: Any) -> Any:
        return (normalize_label(value) or "") if isinstance(value, str) else value


class ActivityPayload(BaseModel):
    activity: str = Field(alias="Activity", min_length=1)
    minutes: int = Field(alias="Minutes", ge=0, strict=True)

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    @field_validator("activity", mode="before")
    @classmethod
    def _normalize_activity(cls, value: Any) -> Any:
        return (normalize_label(value) or "") if isinstance(value, str) else value


def json_provider(text: str, *, source: str = "<inline>") -> DataProvider:
    """Build a provider that decodes a JSON array of records."""

    def provide() -> RawRecords:
        logger.debug("Reading records from %s", source)
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDataError(f"Error deserializing JSON from {source}: {exc}") from exc
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise MalformedDataError(
                f"Expected a JSON array of records from {source}, got {type(payload).__name__}."
            )
        return payload

    return provide


def file_provider(path: Path) -> DataProvider:
    """Build a provider that reads a UTF-8 JSON file when called."""
    path = Path(path)

    def provide() -> RawRecords:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise MalformedDataError(f"Could not read input file {path}: {exc}") from exc
        return json_provider(text, source=str(path))()

    return provide


def sample_employee_provider() -> DataProvider:
    return json_provider(SAMPLE_EMPLOYEES_JSON, source="sample employee timesheet")


def sample_activity_provider() -> DataProvider:
    return json_provider(SAMPLE_ACTIVITIES_JSON, source="sample activity log")


def parse_employees(raw: RawRecords) -> list[EmployeeRecord]:
    """Validate raw mappings and convert them into employee records."""
    return [
        EmployeeRecord(name=payload.name, hours_worked=payload.hours_worked)
        for payload in _validate_all(EmployeePayload, raw, "employee")
    ]


def parse_activities(raw: RawRecords) -> list[ActivityRecord]:
    """Validate raw mappings and convert them into activity records."""
    return [
        ActivityRecord(activity=payload.activity, minutes=payload.minutes)
        for payload in _validate_all(ActivityPayload, raw, "activity")
    ]


def _validate_all(model: type[BaseModel], raw: RawRecords, kind: str) -> list[Any]:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise MalformedDataError(f"Expected a list of {kind} records.")
    validated = []
    for index, item in enumerate(raw):
        try:
            validated.append(model.model_validate(item))
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'record'}: {error['msg']}"
                for error in exc.errors()
            )
            raise MalformedDataError(f"Invalid {kind} record at index {index}: {details}") from exc
    return validated
