"""Run rendered GDAL commands on the local machine.

This module connects the command builders to the subprocess wrapper: it
renders an options value into argv, resolves the executable against the
configured GDAL binary directory and runs it inside the layers working
directory.

Example:
    Describe a raster with the configured GDAL installation:
        >>> from geobricks.commands import options
        >>> from geobricks.core.config import get_settings
        >>> from geobricks.services import connector

        >>> lines = connector.invoke(
        ...     options.Info(input="dem.tif", stats=True),
        ...     settings=get_settings(),
        ... )
        >>> lines[0]
        'Driver: GTiff/GeoTIFF'
"""

from __future__ import annotations

import pathlib
from typing import TYPE_CHECKING

from geobricks.commands import render
from geobricks.utils import gdal_helpers

if TYPE_CHECKING:
    from geobricks.commands import options
    from geobricks.core import config


def resolve_argv(argv: list[str], gdal_bin_dir: pathlib.Path | None) -> list[str]:
    """Prefix a bare executable name with the GDAL binary directory.

    Executables given with a directory component, or any executable when
    no binary directory is configured, are left untouched.

    Example:
        >>> resolve_argv(["gdalinfo", "a.tif"], pathlib.Path("/opt/gdal/bin"))
        ['/opt/gdal/bin/gdalinfo', 'a.tif']
    """
    if not argv:
        raise gdal_helpers.CommandError("Empty command")
    executable = pathlib.Path(argv[0])
    if gdal_bin_dir is None or executable.is_absolute() or len(executable.parts) > 1:
        return argv
    return [str(gdal_bin_dir / executable), *argv[1:]]


def invoke(
    opts: options.CommandOptions,
    settings: config.Settings,
) -> list[str]:
    """Render ``opts`` and run it, returning the command's stdout lines.

    Args:
        opts: The command to run. A raw ``script`` is split and run as is.
        settings: Provides the GDAL binary directory, the working
            directory and the timeout.

    Returns:
        Standard output lines of the command.

    Raises:
        CommandBuildError: If the command cannot be rendered.
        CommandError: If the command is empty, fails or times out.
    """
    argv = resolve_argv(render.build_args(opts), settings.gdal_bin_dir)
    return gdal_helpers.run_command(
        argv,
        workdir=settings.layers_dir,
        timeout=settings.command_timeout_seconds,
    )
