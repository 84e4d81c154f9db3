"""Location of the optional log file written by ``time-reports --log-file``."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

LOG_FILENAME = "time_reports.log"


def get_log_path() -> Path:
    """Return the per-user log file path, creating its directory if needed."""
    log_dir = Path(PlatformDirs(appname="time-reports", appauthor=False).user_log_path)
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILENAME
