"""Unit tests for utilities in geobricks.utils.gdal_helpers.

This module tests the low-level GDAL command execution helper, the
`run_command` function and CommandError handling. Tests cover:
    - Successful command execution returning stdout lines
    - Failure handling and error message propagation (nonzero exit code)
    - Missing executables, timeouts and empty commands

Monkeypatching is used to avoid actual subprocess execution, ensuring tests
are isolated, fast, and reliable.

See Also:
    - geobricks/utils/gdal_helpers.py for implementation details.
"""

from __future__ import annotations

import pathlib
import subprocess
from typing import Any

import pytest

from geobricks.utils import gdal_helpers


def test_run_command_success(monkeypatch: pytest.MonkeyPatch) -> None:
    """Command with zero return code returns its stdout lines."""
    calls: list[dict[str, Any]] = []

    def fake_run(
        *args: Any,
        **kwargs: Any,
    ) -> subprocess.CompletedProcess[str]:
        """Mock subprocess.run to return a successful CompletedProcess."""
        calls.append({"args": args, **kwargs})
        return subprocess.CompletedProcess(
            args=[],
            returncode=0,
            stdout="Driver: GTiff/GeoTIFF\nSize is 10, 10\n",
            stderr="",
        )

    monkeypatch.setattr(gdal_helpers.subprocess, "run", fake_run)
    lines = gdal_helpers.run_command(
        ["gdalinfo", pathlib.Path("a.tif")],
        workdir=pathlib.Path("/tmp"),
        timeout=5,
    )

    assert lines == ["Driver: GTiff/GeoTIFF", "Size is 10, 10"]
    assert calls[0]["args"] == (["gdalinfo", "a.tif"],)
    assert calls[0]["cwd"] == pathlib.Path("/tmp")
    assert calls[0]["timeout"] == 5


def test_run_command_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    """Command errors raise CommandError with message and return code."""

    def fake_run(
        *args: Any,
        **kwargs: Any,
    ) -> subprocess.CompletedProcess[str]:
        return subprocess.CompletedProcess(
            args=[],
            returncode=4,
            stdout="",
            stderr="ERROR 4: missing.tif: No such file or directory\n",
        )

    monkeypatch.setattr(gdal_helpers.subprocess, "run", fake_run)
    with pytest.raises(gdal_helpers.CommandError) as exc_info:
        gdal_helpers.run_command(["gdalinfo", "missing.tif"])
    assert str(exc_info.value) == "ERROR 4: missing.tif: No such file or directory"
    assert exc_info.value.returncode == 4


def test_run_command_failure_without_stderr(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """An empty stderr falls back to a generic message."""

    def fake_run(
        *args: Any,
        **kwargs: Any,
    ) -> subprocess.CompletedProcess[str]:
        return subprocess.CompletedProcess(
            args=[], returncode=1, stdout="", stderr=""
        )

    monkeypatch.setattr(gdal_helpers.subprocess, "run", fake_run)
    with pytest.raises(gdal_helpers.CommandError, match="Unknown command failure"):
        gdal_helpers.run_command(["false"])


def test_run_command_missing_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing executable is reported as a CommandError."""

    def fake_run(*args: Any, **kwargs: Any) -> None:
        raise FileNotFoundError("gdalinfo")

    monkeypatch.setattr(gdal_helpers.subprocess, "run", fake_run)
    with pytest.raises(gdal_helpers.CommandError, match="not found") as exc_info:
        gdal_helpers.run_command(["gdalinfo", "a.tif"])
    assert exc_info.value.returncode is None


def test_run_command_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """A timeout is reported as a CommandError."""

    def fake_run(*args: Any, **kwargs: Any) -> None:
        raise subprocess.TimeoutExpired(cmd="gdalwarp", timeout=1)

    monkeypatch.setattr(gdal_helpers.subprocess, "run", fake_run)
    with pytest.raises(gdal_helpers.CommandError, match="timed out"):
        gdal_helpers.run_command(["gdalwarp", "a.tif", "b.tif"], timeout=1)


def test_run_command_empty() -> None:
    """An empty command is rejected before running anything."""
    with pytest.raises(gdal_helpers.CommandError, match="Empty command"):
        gdal_helpers.run_command([])
