"""Structured option values shared by the GDAL command options.

Some GDAL switches take more than one positional value (``-te``, ``-tr``,
``-outsize``, ``-scale``, ``-srcwin``, ``-gcp``...). Each of them is modelled
here as a small frozen dataclass with one serialization, ``tokens()``,
returning the values in the order the utilities expect. ``str()`` joins the
tokens with single spaces.

Values are passed through with ``str()``; no numeric formatting happens, so
callers decide the final textual precision.

Example:
    Serialize a georeferenced extent:
        >>> from geobricks.commands import values
        >>> str(values.Extents(-180, -90, 180, 90))
        '-180 -90 180 90'

    A scale range with an auto-detected input range:
        >>> values.ScaleRange.output_only(0, 1).tokens()
        ('0', '1')
"""

from __future__ import annotations

import dataclasses

Scalar = str | int | float


class _Tokens:
    def tokens(self) -> tuple[str, ...]:
        return tuple(
            str(getattr(self, field.name))
            for field in dataclasses.fields(self)  # type: ignore[arg-type]
            if getattr(self, field.name) is not None
        )

    def __str__(self) -> str:
        return " ".join(self.tokens())


@dataclasses.dataclass(frozen=True)
class Extents(_Tokens):
    """Georeferenced extents (``-te``), in the target SRS."""

    x_min: Scalar
    y_min: Scalar
    x_max: Scalar
    y_max: Scalar


@dataclasses.dataclass(frozen=True)
class Resolution(_Tokens):
    """Output resolution (``-tr``) in georeferenced units."""

    x_res: Scalar
    y_res: Scalar


@dataclasses.dataclass(frozen=True)
class FileSize(_Tokens):
    """Output size in pixels and lines (``-ts``, ``-outsize``).

    ``gdal_translate`` also accepts percentages such as ``"50%"``.
    """

    width: Scalar
    height: Scalar


@dataclasses.dataclass(frozen=True)
class PixelSize(_Tokens):
    """Pixel size (``-ps``). A single value sets both axes.

    Example:
        >>> str(PixelSize(30))
        '30 30'
    """

    x: Scalar
    y: Scalar | None = None

    def __post_init__(self) -> None:
        if self.y is None:
            object.__setattr__(self, "y", self.x)


@dataclasses.dataclass(frozen=True)
class ScaleRange(_Tokens):
    """Pixel value rescaling for ``gdal_translate -scale``.

    The four-value form rescales ``in_min..in_max`` to ``out_min..out_max``.
    Built through :meth:`output_only`, the input bounds stay unset and only
    the output bounds are emitted, letting GDAL compute the input range from
    the source data.

    Attributes:
        in_min: Source range minimum, or None when auto-detected.
        in_max: Source range maximum, or None when auto-detected.
        out_min: Destination range minimum (default 0).
        out_max: Destination range maximum (default 255).
    """

    in_min: Scalar | None
    in_max: Scalar | None
    out_min: Scalar = "0"
    out_max: Scalar = "255"

    def __post_init__(self) -> None:
        if (self.in_min is None) != (self.in_max is None):
            raise ValueError("in_min and in_max must be set together")

    @classmethod
    def output_only(cls, out_min: Scalar, out_max: Scalar) -> ScaleRange:
        """Create a range that only carries the output bounds."""
        return cls(None, None, out_min, out_max)


@dataclasses.dataclass(frozen=True)
class SubWindowPixels(_Tokens):
    """Source sub-window in pixel/line offsets (``-srcwin``)."""

    x_off: Scalar
    y_off: Scalar
    x_size: Scalar
    y_size: Scalar


@dataclasses.dataclass(frozen=True)
class SubWindowCorners(_Tokens):
    """Source sub-window in georeferenced corners (``-projwin``)."""

    ul_x: Scalar
    ul_y: Scalar
    lr_x: Scalar
    lr_y: Scalar


@dataclasses.dataclass(frozen=True)
class OutputBounds(_Tokens):
    """Assigned output bounds (``-a_ullr``, ``gdal_merge.py -ul_lr``)."""

    ul_x: Scalar
    ul_y: Scalar
    lr_x: Scalar
    lr_y: Scalar


@dataclasses.dataclass(frozen=True)
class GroundControlPoint(_Tokens):
    """A ground control point, emitted as ``-gcp pixel line easting northing [elevation]``."""

    pixel: Scalar
    line: Scalar
    easting: Scalar
    northing: Scalar
    elevation: Scalar | None = None
