"""Safe execution wrapper for GDAL command-line utilities.

This module runs GDAL tools (gdalinfo, gdalwarp, gdal_translate, etc.) as
subprocesses and returns what they print on standard output. Non-zero exit
codes, missing executables and timeouts all surface as CommandError with
the command's stderr output or a description of what went wrong.

Example:
    Describe a raster:
        >>> from geobricks.utils.gdal_helpers import run_command, CommandError

        >>> try:
        ...     lines = run_command(["gdalinfo", "-stats", "dem.tif"])
        ... except CommandError as e:
        ...     print(f"Command failed: {e}")

    Execute gdalwarp in a working directory with a timeout:
        >>> run_command(
        ...     ["gdalwarp", "-t_srs", "EPSG:3857", "in.tif", "out.tif"],
        ...     workdir=pathlib.Path("/data/layers"),
        ...     timeout=300,
        ... )
        []
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from geobricks.utils.logging import get_logger

if TYPE_CHECKING:
    import pathlib
    from collections.abc import Iterable

LOG = get_logger()


class CommandError(RuntimeError):
    """Exception raised when a GDAL subprocess command fails.

    The message holds the failed command's stderr output. ``returncode`` is
    the process exit status, or None when the process could not be started
    or was killed after the timeout.

    Example:
        Handle command failures:
            >>> try:
            ...     run_command(["gdalinfo", "missing.tif"])
            ... except CommandError as e:
            ...     print(e.returncode, e)
            1 ERROR 4: missing.tif: No such file or directory
    """

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


def run_command(
    command: Iterable[str | pathlib.Path],
    workdir: pathlib.Path | None = None,
    timeout: float | None = None,
) -> list[str]:
    """Execute a command and return its standard output lines.

    Args:
        command: Iterable arguments to execute (e.g., ["gdalinfo", ...]).
        workdir: Optional working directory for the command execution.
        timeout: Optional number of seconds after which the command is
            killed.

    Returns:
        The lines the command printed on stdout, without line endings.

    Raises:
        CommandError: if the command exits with a non-zero status code,
            cannot be found, or runs past ``timeout``.
    """
    argv = [str(arg) for arg in command]
    if not argv:
        raise CommandError("Empty command")
    LOG.info("Running command: %s", " ".join(argv))
    try:
        result = subprocess.run(
            argv,
            cwd=workdir,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        LOG.error("Executable not found: %s", argv[0])
        raise CommandError(f"Executable not found: {argv[0]}") from exc
    except subprocess.TimeoutExpired as exc:
        LOG.error("Command timed out after %s seconds: %s", timeout, argv[0])
        raise CommandError(
            f"Command timed out after {timeout} seconds: {argv[0]}"
        ) from exc

    if result.returncode != 0:
        message = result.stderr.strip() or "Unknown command failure"
        LOG.error("Command exited with %s: %s", result.returncode, message)
        raise CommandError(message, result.returncode)

    return result.stdout.splitlines()
