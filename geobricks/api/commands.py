"""GDAL command rendering and execution API endpoints.

This module exposes the command builders over HTTP. Clients list the
supported command kinds, post a JSON object of options to render the
matching command line, or post the same object to the ``/run`` endpoint
to execute it on the server and read back its standard output.

Option objects use the field names of the options dataclasses in
:mod:`geobricks.commands.options`; structured values (extents,
resolutions, ground control points...) are nested objects.

Example:
    Render a hillshade command:
        >>> response = client.post(
        ...     "/api/commands/dem-hillshade",
        ...     json={"input": "dem.tif", "output": "shade.tif", "z_factor": 2},
        ... )
        >>> response.json()["command"]
        'gdaldem hillshade -z 2 dem.tif shade.tif '

    Run gdalinfo on a layer of the working directory:
        >>> response = client.post(
        ...     "/api/commands/info/run",
        ...     json={"input": "dem.tif", "stats": True},
        ... )
        >>> response.json()["lines"][0]
        'Driver: GTiff/GeoTIFF'
"""

from __future__ import annotations

import dataclasses
from typing import Any, TypedDict

import fastapi
import pydantic

from geobricks.commands import errors, options, render
from geobricks.core import config
from geobricks.services import connector
from geobricks.utils import gdal_helpers

router = fastapi.APIRouter(prefix="/api/commands", tags=["commands"])


class CommandKind(TypedDict):
    kind: str
    program: str


class RenderResponse(TypedDict):
    kind: str
    command: str
    args: list[str]


class RunResponse(TypedDict):
    kind: str
    command: str
    lines: list[str]


def _parse_options(kind: str, payload: dict[str, Any]) -> options.CommandOptions:
    """Validate a JSON payload into the options dataclass of ``kind``.

    Args:
        kind: Command kind from the request path.
        payload: Decoded JSON request body.

    Returns:
        The frozen options value.

    Raises:
        HTTPException: 404 for an unknown kind, 422 for unknown fields or
            values of the wrong type.
    """
    options_cls = options.COMMANDS.get(kind)
    if options_cls is None:
        raise fastapi.HTTPException(
            status_code=404,
            detail=f"Unknown command kind: {kind}",
        )

    names = {field.name for field in dataclasses.fields(options_cls)}
    unknown = sorted(set(payload) - names)
    if unknown:
        raise fastapi.HTTPException(
            status_code=422,
            detail=f"Unknown options for {kind}: {', '.join(unknown)}",
        )

    try:
        return pydantic.TypeAdapter(options_cls).validate_python(payload)
    except pydantic.ValidationError as exc:
        raise fastapi.HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc
    except ValueError as exc:
        raise fastapi.HTTPException(status_code=422, detail=str(exc)) from exc


def _render(opts: options.CommandOptions) -> tuple[str, list[str]]:
    try:
        return render.build(opts), render.build_args(opts)
    except errors.CommandBuildError as exc:
        raise fastapi.HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("")
async def list_commands() -> list[CommandKind]:
    """List every command kind with the executable it invokes.

    Example:
        >>> client.get("/api/commands").json()[0]
        {'kind': 'info', 'program': 'gdalinfo'}
    """
    return [
        CommandKind(kind=kind, program=options_cls.PROGRAM)
        for kind, options_cls in options.COMMANDS.items()
    ]


@router.post("/{kind}")
async def render_command(
    kind: str,
    payload: dict[str, Any] = fastapi.Body(default_factory=dict),  # noqa: B008
) -> RenderResponse:
    """Render a command line without running it.

    Args:
        kind: Command kind (``info``, ``warp``, ``dem-slope``...).
        payload: Options of the command, keyed by field name.

    Returns:
        The command string and its argv split.

    Raises:
        HTTPException: 404 for an unknown kind, 422 for a malformed body,
            400 when a required option is missing, a value is invalid or a
            raw script cannot be split.
    """
    opts = _parse_options(kind, payload)
    command, args = _render(opts)
    return RenderResponse(kind=kind, command=command, args=args)


@router.post("/{kind}/run")
def run_gdal_command(
    kind: str,
    payload: dict[str, Any] = fastapi.Body(default_factory=dict),  # noqa: B008
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> RunResponse:
    """Render a command and run it in the layers working directory.

    Raw ``script`` overrides are rejected here; only commands assembled
    from typed options are executed.

    Args:
        kind: Command kind (``info``, ``warp``, ``dem-slope``...).
        payload: Options of the command, keyed by field name.
        settings: Application settings (injected via FastAPI Depends).

    Returns:
        The command string and the lines it printed on stdout.

    Raises:
        HTTPException: 404/422/400 as for rendering, 400 for a raw script,
            502 when the command fails.
    """
    opts = _parse_options(kind, payload)
    if opts.script:
        raise fastapi.HTTPException(
            status_code=400,
            detail="Raw scripts cannot be run",
        )

    command, _ = _render(opts)
    try:
        lines = connector.invoke(opts, settings)
    except gdal_helpers.CommandError as exc:
        raise fastapi.HTTPException(status_code=502, detail=str(exc)) from exc

    return RunResponse(kind=kind, command=command, lines=lines)
