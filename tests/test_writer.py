"""Tests for atomic artifact writes."""

import os
import stat

import pytest

from time_reports.writer import atomic_output, write_bytes_atomic, write_text_atomic


def test_write_text_creates_parents(tmp_path):
    path = tmp_path / "nested" / "report.html"
    write_text_atomic(path, "<p>héllo</p>\n")
    assert path.read_bytes() == "<p>héllo</p>\n".encode("utf-8")
    assert [p.name for p in path.parent.iterdir()] == ["report.html"]


def test_write_bytes_replaces_existing(tmp_path):
    path = tmp_path / "chart.png"
    path.write_bytes(b"old")
    write_bytes_atomic(path, b"new")
    assert path.read_bytes() == b"new"


def test_failure_leaves_no_artifact(tmp_path):
    path = tmp_path / "chart.png"
    with pytest.raises(RuntimeError):
        with atomic_output(path) as handle:
            handle.write(b"partial")
            raise RuntimeError("render failed")
    assert list(tmp_path.iterdir()) == []


def test_failure_keeps_previous_artifact(tmp_path):
    path = tmp_path / "report.html"
    path.write_text("previous", encoding="utf-8")
    with pytest.raises(ValueError):
        with atomic_output(path, mode="w") as handle:
            handle.write("partial")
            raise ValueError("boom")
    assert path.read_text(encoding="utf-8") == "previous"


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_written_file_follows_umask(tmp_path):
    previous = os.umask(0o022)
    try:
        path = write_text_atomic(tmp_path / "report.html", "<p></p>")
    finally:
        os.umask(previous)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644
