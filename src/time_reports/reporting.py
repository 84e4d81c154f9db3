"""Simple reporting utilities for CLI output."""

from __future__ import annotations

from typing import Sequence

from .employee_report import is_low_hours
from .models import ChartSlice, EmployeeRecord


class SummaryPrinter:
    """Render human-readable summaries in the console."""

    def print_employee_summary(self, records: Sequence[EmployeeRecord]) -> None:
        if not records:
            print("No employee records to summarize.")
            return

        print("Employees by total time worked")
        print("-" * 40)
        for rank, record in enumerate(records, start=1):
            marker = "  low" if is_low_hours(record) else ""
            print(f"  {rank:>2}. {record.name[:24]:<24} {record.hours_worked:>8.2f}{marker}")

    def print_activity_summary(self, slices: Sequence[ChartSlice]) -> None:
        if not slices:
            print("No activity recorded.")
            return

        total = sum(item.minutes for item in slices)
        print(f"Total Minutes Worked: {total}")
        print("-" * 40)
        for item in slices:
            print(
                f"  {item.activity[:24]:<24} {format_minutes(item.minutes)} "
                f"{item.percentage_of_total:>6.2f}%"
            )


def format_minutes(minutes: int) -> str:
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"
