"""Rendering tests for gdaldem modes and gdal_contour.

Every gdaldem mode emits its mode name first, then its own switches and
positionals, then the switches shared by all modes. gdal_contour emits
fixed levels as separate values after a single ``-fl``.
"""

from __future__ import annotations

import pytest

from geobricks.commands import errors, options, render


@pytest.mark.parametrize(
    ("options_cls", "mode"),
    [
        (options.Slope, "slope"),
        (options.Aspect, "aspect"),
        (options.Hillshade, "hillshade"),
        (options.TPI, "TPI"),
    ],
)
def test_dem_minimal(options_cls: type[options.DemOptions], mode: str) -> None:
    """The mode name precedes input and output."""
    opts = options_cls(input="dem.tif", output="out.tif")
    assert render.build(opts) == f"gdaldem {mode} dem.tif out.tif "


@pytest.mark.parametrize(
    "options_cls",
    [options.Slope, options.Aspect, options.Hillshade, options.TPI],
)
def test_dem_requires_output(options_cls: type[options.DemOptions]) -> None:
    """Every mode needs an output raster."""
    with pytest.raises(errors.MissingRequiredField) as exc_info:
        render.build(options_cls(input="dem.tif"))
    assert exc_info.value.field == "output"


def test_slope_with_shared_tail() -> None:
    """Mode switches come before the positionals, shared ones after."""
    opts = options.Slope(
        input="dem.tif",
        output="slope.tif",
        percentage=True,
        scale=111120,
        algorithm="ZevenbergenThorne",
        compute_edges=True,
        band=1,
        output_format="GTiff",
        creation_options={"COMPRESS": "LZW"},
        quiet=True,
        config={"GDAL_CACHEMAX": "256"},
    )
    assert render.build(opts) == (
        "gdaldem slope -p -s 111120 dem.tif slope.tif -alg ZevenbergenThorne "
        '-compute_edges -b 1 -of GTiff -co "COMPRESS=LZW" -q '
        "--config GDAL_CACHEMAX 256 "
    )


def test_aspect_switches() -> None:
    """Aspect flags."""
    opts = options.Aspect(
        input="dem.tif",
        output="aspect.tif",
        trigonometric=True,
        zero_for_flat=True,
    )
    assert render.build(opts) == (
        "gdaldem aspect -trigonometric -zero_for_flat dem.tif aspect.tif "
    )


def test_hillshade_switches() -> None:
    """Hillshade illumination parameters."""
    opts = options.Hillshade(
        input="dem.tif",
        output="shade.tif",
        z_factor=2,
        scale=1,
        azimuth=315,
        altitude=45,
    )
    assert render.build(opts) == (
        "gdaldem hillshade -z 2 -s 1 -az 315 -alt 45 dem.tif shade.tif "
    )


def test_color_relief_flags_precede_positionals() -> None:
    """Colour flags precede the input, colour file and output."""
    opts = options.ColorRelief(
        input="dem.tif",
        output="relief.tif",
        color_file="ramp.txt",
        alpha=True,
        exact_color_entry=True,
        quiet=True,
    )
    assert render.build(opts) == (
        "gdaldem color-relief -alpha -exact_color_entry "
        "dem.tif ramp.txt relief.tif -q "
    )


def test_color_relief_requires_color_file() -> None:
    """Colour relief cannot be rendered without a colour file."""
    opts = options.ColorRelief(input="dem.tif", output="relief.tif")
    with pytest.raises(errors.MissingRequiredField) as exc_info:
        render.build(opts)
    assert exc_info.value.field == "color_file"


def test_dem_help_is_the_shared_help_invocation() -> None:
    """DEM commands share the gdalinfo help invocation."""
    assert render.build(options.Hillshade(help=True)) == "gdalinfo --help"
    assert render.build_args(options.Hillshade(help=True)) == ["gdalinfo", "--help"]


def test_contour_minimal() -> None:
    """Input and output only."""
    opts = options.Contour(input="dem.tif", output="contours.shp")
    assert render.build(opts) == "gdal_contour dem.tif contours.shp "


def test_contour_all_switches() -> None:
    """Fixed levels follow a single -fl, in the given order."""
    opts = options.Contour(
        input="dem.tif",
        output="contours.gpkg",
        band=1,
        attribute="elev",
        use_z=True,
        ignore_nodata=True,
        src_nodata=-9999,
        output_format="GPKG",
        interval=10,
        offset=5,
        fixed_levels=[300, 100, 200],
        layer_name="contour",
    )
    assert render.build(opts) == (
        "gdal_contour -b 1 -a elev -3d -inodata -snodata -9999 -f GPKG "
        "-i 10 -off 5 -fl 300 100 200 -nln contour dem.tif contours.gpkg "
    )


def test_contour_requires_input() -> None:
    """Contour needs a DEM."""
    with pytest.raises(errors.MissingRequiredField) as exc_info:
        render.build(options.Contour(output="contours.shp"))
    assert exc_info.value.field == "input"
