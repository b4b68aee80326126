"""Unit tests for the structured option values in geobricks.commands.values.

Each value type has one textual form, the space-joined ``str()`` of its
components in the order GDAL expects them. Tests cover:
    - Token order for every value type
    - Defaults (pixel size, scale range output bounds)
    - Optional components left out of the tokens
    - Scale ranges with only one input bound
    - Immutability
"""

from __future__ import annotations

import dataclasses

import pytest

from geobricks.commands import values


def test_extents_tokens() -> None:
    """Extents serialize as xmin ymin xmax ymax."""
    extents = values.Extents(-180, -90, 180, 90)
    assert extents.tokens() == ("-180", "-90", "180", "90")
    assert str(extents) == "-180 -90 180 90"


def test_resolution_and_file_size() -> None:
    """Two-component values keep their order."""
    assert str(values.Resolution(30, "30.5")) == "30 30.5"
    assert str(values.FileSize("50%", "25%")) == "50% 25%"


def test_pixel_size_single_value_sets_both_axes() -> None:
    """A single pixel size applies to both axes."""
    assert str(values.PixelSize(10)) == "10 10"
    assert str(values.PixelSize(10, 20)) == "10 20"


def test_scale_range_defaults_output_bounds() -> None:
    """Without output bounds the range maps to 0..255."""
    assert values.ScaleRange(0, 4000).tokens() == ("0", "4000", "0", "255")


def test_scale_range_output_only() -> None:
    """An output-only range leaves the input bounds out."""
    scale = values.ScaleRange.output_only(0, 1)
    assert scale.in_min is None
    assert str(scale) == "0 1"


@pytest.mark.parametrize(("in_min", "in_max"), [(0, None), (None, 4000)])
def test_scale_range_rejects_half_input_range(
    in_min: int | None, in_max: int | None
) -> None:
    """Input bounds are either both set or both left out."""
    with pytest.raises(ValueError, match="in_min and in_max"):
        values.ScaleRange(in_min, in_max)


def test_sub_windows_and_bounds() -> None:
    """Pixel windows, corner windows and bounds keep their order."""
    assert str(values.SubWindowPixels(0, 0, 512, 256)) == "0 0 512 256"
    assert str(values.SubWindowCorners(10, 50, 20, 40)) == "10 50 20 40"
    assert str(values.OutputBounds(1, 2, 3, 4)) == "1 2 3 4"


def test_ground_control_point_optional_elevation() -> None:
    """Elevation is emitted only when set."""
    assert str(values.GroundControlPoint(0, 0, 500000, 4500000)) == (
        "0 0 500000 4500000"
    )
    assert str(values.GroundControlPoint(1, 2, 3, 4, 5)) == "1 2 3 4 5"


def test_values_are_frozen() -> None:
    """Structured values cannot be modified after creation."""
    extents = values.Extents(0, 0, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        extents.x_min = 5  # type: ignore[misc]
