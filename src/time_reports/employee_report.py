"""Employee time-worked report: ranking and HTML rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

import jinja2

from .errors import EmptyDataError
from .models import EmployeeRecord
from .sources import DataProvider, parse_employees
from .writer import write_text_atomic

logger = logging.getLogger(__name__)

LOW_HOURS_THRESHOLD = 100
LOW_HOURS_CLASS = "low-hours transition duration-200 ease-in-out"
DEFAULT_ROW_CLASS = "hover:bg-green-50 transition duration-200 ease-in-out"

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    keep_trailing_newline=True,
)


@dataclass(slots=True)
class EmployeeReportResult:
    output_path: Path
    records: list[EmployeeRecord]


def sort_descending_by_hours(records: Iterable[EmployeeRecord]) -> list[EmployeeRecord]:
    """Rank employees by hours worked, highest first.

    ``sorted`` is stable, so employees with equal hours keep their input order.
    """
    return sorted(records, key=lambda record: record.hours_worked, reverse=True)


def is_low_hours(record: EmployeeRecord) -> bool:
    return record.hours_worked < LOW_HOURS_THRESHOLD


def render_html_report(records: Sequence[EmployeeRecord]) -> str:
    """Render an already-ranked list of employees as a standalone HTML page.

    Rows appear in the order given. Names are escaped by the template
    environment, and hours are shown with two decimals.
    """
    rows = [
        {
            "name": record.name,
            "hours": f"{record.hours_worked:.2f}",
            "css_class": LOW_HOURS_CLASS if is_low_hours(record) else DEFAULT_ROW_CLASS,
        }
        for record in records
    ]
    template = _jinja_env.get_template("employee_report.html.j2")
    return template.render(rows=rows, threshold_label=LOW_HOURS_THRESHOLD)


def generate_employee_report(provider: DataProvider, output_path: Path) -> EmployeeReportResult:
    """Fetch, rank, render and write the employee report."""
    records = parse_employees(provider() or [])
    if not records:
        raise EmptyDataError("Could not fetch employee data or the dataset was empty.")
    logger.info("Loaded %d employee records.", len(records))

    ranked = sort_descending_by_hours(records)
    html = render_html_report(ranked)
    path = write_text_atomic(output_path, html)
    logger.info("Employee report written to %s", path)
    return EmployeeReportResult(output_path=path, records=ranked)
