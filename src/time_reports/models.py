"""Domain models for time-worked reports and activity charts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmployeeRecord:
    """Total hours an employee worked over the reporting period."""

    name: str
    hours_worked: float


@dataclass(frozen=True, slots=True)
class ActivityRecord:
    """Minutes spent on a single kind of work activity."""

    activity: str
    minutes: int


@dataclass(frozen=True, slots=True)
class ChartSlice:
    """One pie slice derived from an :class:`ActivityRecord`."""

    activity: str
    minutes: int
    percentage_of_total: float
    sweep_angle_degrees: float

    @property
    def label(self) -> str:
        return f"{self.percentage_of_total:.1f}%"

    @property
    def legend_text(self) -> str:
        return f"{self.activity} ({self.minutes} min)"
