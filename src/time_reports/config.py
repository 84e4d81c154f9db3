"""Configuration models for report generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


EMPLOYEE_REPORT_FILENAME = "EmployeeReport.html"
PIE_CHART_FILENAME = "work_time_pie_chart.png"


@dataclass(slots=True)
class ReportSettings:
    """Where generated artifacts are written."""

    output_dir: Path = field(default_factory=Path.cwd)
    employee_report_filename: str = EMPLOYEE_REPORT_FILENAME
    pie_chart_filename: str = PIE_CHART_FILENAME

    @property
    def employee_report_path(self) -> Path:
        return Path(self.output_dir) / self.employee_report_filename

    @property
    def pie_chart_path(self) -> Path:
        return Path(self.output_dir) / self.pie_chart_filename


@dataclass(slots=True)
class ChartSettings:
    """Canvas geometry and typography for the pie chart."""

    width: int = 800
    height: int = 600
    chart_size: int = 400
    padding: int = 50
    title: str = "Employee Activity Time Distribution"
    title_font_size: int = 16
    label_font_size: int = 12
    legend_font_size: int = 10

    @property
    def chart_box(self) -> tuple[int, int, int, int]:
        """Bounding box of the pie as ``(left, top, right, bottom)``."""
        left = (self.width - self.chart_size) // 2
        top = self.padding
        return (left, top, left + self.chart_size, top + self.chart_size)

    @classmethod
    def from_canvas(cls, width: int, height: int) -> "ChartSettings":
        defaults = cls()
        # Keep the default proportions: the pie takes half the width and
        # leaves the padding free above and below it.
        chart_size = min(width // 2, height - 2 * defaults.padding)
        return cls(width=width, height=height, chart_size=max(chart_size, 1))
