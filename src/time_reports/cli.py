"""Command-line interface for the time reports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer

from .config import ChartSettings, ReportSettings
from .errors import ReportError
from .paths import get_log_path
from .sources import (
    DataProvider,
    file_provider,
    sample_activity_provider,
    sample_employee_provider,
)

app = typer.Typer(help="Generate employee time reports and activity charts.")

T = TypeVar("T")


@app.callback(no_args_is_help=True)
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    log_file: bool = typer.Option(
        False, "--log-file/--no-log-file", help="Also write logs to the application log file."
    ),
) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(get_log_path(), encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
    )


@app.command("employee-report")
def employee_report(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        path_type=Path,
        help="JSON file of employee records. Defaults to the built-in sample timesheet.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        path_type=Path,
        help="Where to write the HTML report.",
    ),
) -> None:
    """Rank employees by hours worked and write an HTML report."""
    from .employee_report import generate_employee_report

    provider = _provider(input_path, sample_employee_provider)
    output_path = output or ReportSettings().employee_report_path
    result = _run(lambda: generate_employee_report(provider, output_path))
    typer.echo(f"SUCCESS: Employee report generated and saved to {result.output_path}")
    typer.echo("Please open the HTML file in your web browser to view the report.")


@app.command("pie-chart")
def pie_chart(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        path_type=Path,
        help="JSON file of activity records. Defaults to the built-in sample activity log.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        path_type=Path,
        help="Where to write the PNG chart.",
    ),
    width: int = typer.Option(800, "--width", min=200, max=4000, help="Canvas width in pixels."),
    height: int = typer.Option(600, "--height", min=200, max=4000, help="Canvas height in pixels."),
) -> None:
    """Draw a pie chart of time spent per activity."""
    from .pie_chart import generate_pie_chart

    provider = _provider(input_path, sample_activity_provider)
    output_path = output or ReportSettings().pie_chart_path
    settings = ChartSettings.from_canvas(width, height)
    result = _run(lambda: generate_pie_chart(provider, output_path, settings))
    typer.echo(f"Total Minutes Worked: {result.total_minutes}")
    typer.echo(f"Successfully generated pie chart: {result.output_path}")


@app.command()
def summary(
    employees: Optional[Path] = typer.Option(
        None, "--employees", path_type=Path, help="JSON file of employee records."
    ),
    activities: Optional[Path] = typer.Option(
        None, "--activities", path_type=Path, help="JSON file of activity records."
    ),
) -> None:
    """Print ranked employees and the activity breakdown without writing files."""
    from .employee_report import sort_descending_by_hours
    from .pie_chart import compute_slices
    from .reporting import SummaryPrinter
    from .sources import parse_activities, parse_employees

    employee_provider = _provider(employees, sample_employee_provider)
    activity_provider = _provider(activities, sample_activity_provider)
    printer = SummaryPrinter()

    ranked = _run(lambda: sort_descending_by_hours(parse_employees(employee_provider())))
    printer.print_employee_summary(ranked)
    typer.echo()
    slices = _run(lambda: compute_slices(parse_activities(activity_provider())))
    printer.print_activity_summary(slices)


def _provider(path: Optional[Path], default: Callable[[], DataProvider]) -> DataProvider:
    return file_provider(path) if path else default()


def _run(step: Callable[[], T]) -> T:
    try:
        return step()
    except ReportError as exc:
        logging.getLogger(__name__).debug("Report aborted", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
