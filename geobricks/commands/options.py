"""Immutable option sets, one per GDAL utility.

Each dataclass below describes every switch a single GDAL utility accepts.
Instances are frozen: lists are turned into tuples and mappings into
read-only copies on construction, so an options value never shares mutable
state with the caller or with another options value. Rendering into a
command line lives in :mod:`geobricks.commands.render`; incremental
construction lives in :mod:`geobricks.commands.builder`.

Every option set carries three shared fields:

- ``script``: a raw command that, when non-empty, is returned verbatim by
  ``render.build`` and bypasses every other field.
- ``help``: when true (and no ``script``), rendering returns
  ``"gdalinfo --help"``.
- ``config``: ``--config KEY VALUE`` settings applied by GDAL to the whole
  invocation.

Required fields are only checked when the command is rendered, so options
may be populated in any order.

Example:
    Describe a reprojection and render it:
        >>> from geobricks.commands import options, render
        >>> warp = options.Warp(
        ...     inputs=["in.tif"],
        ...     output="out.tif",
        ...     target_srs="EPSG:3857",
        ...     resampling="bilinear",
        ... )
        >>> render.build(warp)
        'gdalwarp -t_srs EPSG:3857 -r bilinear in.tif out.tif '
"""

from __future__ import annotations

import collections.abc
import dataclasses
import types
from typing import ClassVar

from geobricks.commands import catalog, values

Text = str | None
Number = str | int | float | None
StrMap = collections.abc.Mapping[str, str]


def _empty_map() -> StrMap:
    return {}


@dataclasses.dataclass(frozen=True)
class CommandOptions:
    """Fields shared by every GDAL utility.

    Attributes:
        script: Raw command returned verbatim when non-empty.
        help: Render ``gdalinfo --help`` instead of the command.
        config: ``--config`` key/value pairs, emitted in insertion order.
    """

    KIND: ClassVar[str] = ""
    PROGRAM: ClassVar[str] = ""
    INPUT_FIELD: ClassVar[str | None] = "input"
    OUTPUT_FIELD: ClassVar[str | None] = "output"

    script: Text = None
    help: bool = False
    config: StrMap = dataclasses.field(default_factory=_empty_map)

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, list):
                object.__setattr__(self, field.name, tuple(value))
            elif isinstance(value, collections.abc.Mapping):
                object.__setattr__(
                    self, field.name, types.MappingProxyType(dict(value))
                )


@dataclasses.dataclass(frozen=True)
class Info(CommandOptions):
    """``gdalinfo``: report information about a raster dataset."""

    KIND: ClassVar[str] = "info"
    PROGRAM: ClassVar[str] = "gdalinfo"
    OUTPUT_FIELD: ClassVar[str | None] = None

    input: Text = None
    checksum: bool = False
    no_gcp: bool = False
    histogram: bool = False
    no_metadata: bool = False
    no_color_table: bool = False
    min_max: bool = False
    stats: bool = False
    metadata_domain: Text = None


@dataclasses.dataclass(frozen=True)
class Translate(CommandOptions):
    """``gdal_translate``: convert raster data between formats.

    ``src_window`` and ``proj_window`` are both accepted even though GDAL
    refuses them together; the utility reports the conflict.

    ``metadata`` is only emitted while it holds a single entry. A mapping
    with two or more entries produces no ``-mo`` switch at all.
    """

    KIND: ClassVar[str] = "translate"
    PROGRAM: ClassVar[str] = "gdal_translate"

    input: Text = None
    output: Text = None
    output_type: catalog.DataType | str | None = None
    strict: bool = False
    output_format: catalog.Format | str | None = None
    bands: tuple[str | int, ...] = ()
    mask: Text = None
    expand: catalog.Expand | str | None = None
    output_size: values.FileSize | None = None
    scale: values.ScaleRange | None = None
    unscale: bool = False
    src_window: values.SubWindowPixels | None = None
    proj_window: values.SubWindowCorners | None = None
    output_srs: Text = None
    output_bounds: values.OutputBounds | None = None
    nodata: Number = None
    metadata: StrMap = dataclasses.field(default_factory=_empty_map)
    creation_options: StrMap = dataclasses.field(default_factory=_empty_map)
    gcps: tuple[values.GroundControlPoint, ...] = ()
    quiet: bool = False
    subdatasets: bool = False
    stats: bool = False


@dataclasses.dataclass(frozen=True)
class Warp(CommandOptions):
    """``gdalwarp``: mosaic, reproject and warp rasters.

    ``order`` must be 1, 2 or 3. ``resolution`` (``-tr``) and
    ``size`` (``-ts``) exclude each other in GDAL but are not checked here.
    """

    KIND: ClassVar[str] = "warp"
    PROGRAM: ClassVar[str] = "gdalwarp"
    INPUT_FIELD: ClassVar[str | None] = "inputs"

    inputs: tuple[str, ...] = ()
    output: Text = None
    source_srs: Text = None
    target_srs: Text = None
    transformer_options: StrMap = dataclasses.field(default_factory=_empty_map)
    order: int | None = None
    tps: bool = False
    rpc: bool = False
    geoloc: bool = False
    error_threshold: Number = None
    refine_gcps: Number = None
    refine_gcps_minimum: int | None = None
    extents: values.Extents | None = None
    resolution: values.Resolution | None = None
    target_aligned_pixels: bool = False
    size: values.FileSize | None = None
    warp_options: StrMap = dataclasses.field(default_factory=_empty_map)
    output_type: catalog.DataType | str | None = None
    working_type: catalog.DataType | str | None = None
    resampling: catalog.Resampling | str | None = None
    src_nodata: tuple[str | int | float, ...] = ()
    dst_nodata: tuple[str | int | float, ...] = ()
    dst_alpha: bool = False
    warp_memory: Number = None
    multithread: bool = False
    quiet: bool = False
    output_format: catalog.Format | str | None = None
    creation_options: StrMap = dataclasses.field(default_factory=_empty_map)
    cutline: Text = None
    cutline_layer: Text = None
    cutline_where: Text = None
    cutline_sql: Text = None
    cutline_blend: Number = None
    crop_to_cutline: bool = False
    overwrite: bool = False


@dataclasses.dataclass(frozen=True)
class Transform(CommandOptions):
    """``gdaltransform``: transform coordinates between reference systems.

    Input and output are optional since ``gdaltransform`` reads coordinates
    from standard input when no georeferenced file is named.
    """

    KIND: ClassVar[str] = "transform"
    PROGRAM: ClassVar[str] = "gdaltransform"

    input: Text = None
    output: Text = None
    inverse: bool = False
    source_srs: Text = None
    target_srs: Text = None
    transformer_options: StrMap = dataclasses.field(default_factory=_empty_map)
    order: int | None = None
    tps: bool = False
    rpc: bool = False
    geoloc: bool = False
    gcps: tuple[values.GroundControlPoint, ...] = ()


@dataclasses.dataclass(frozen=True)
class Rasterize(CommandOptions):
    """``gdal_rasterize``: burn vector geometries into raster bands."""

    KIND: ClassVar[str] = "rasterize"
    PROGRAM: ClassVar[str] = "gdal_rasterize"

    input: Text = None
    output: Text = None
    bands: tuple[int | str, ...] = ()
    invert: bool = False
    all_touched: bool = False
    burn_values: tuple[str | int | float, ...] = ()
    attribute: Text = None
    use_z: bool = False
    layers: tuple[str, ...] = ()
    where: Text = None
    sql: Text = None
    output_format: catalog.Format | str | None = None
    output_srs: Text = None
    creation_options: StrMap = dataclasses.field(default_factory=_empty_map)
    nodata: Number = None
    init_values: tuple[str | int | float, ...] = ()
    extents: values.Extents | None = None
    resolution: values.Resolution | None = None
    target_aligned_pixels: bool = False
    size: values.FileSize | None = None
    output_type: catalog.DataType | str | None = None
    quiet: bool = False


@dataclasses.dataclass(frozen=True)
class DemOptions(CommandOptions):
    """Switches shared by every ``gdaldem`` mode."""

    PROGRAM: ClassVar[str] = "gdaldem"
    MODE: ClassVar[str] = ""

    input: Text = None
    output: Text = None
    algorithm: Text = None
    compute_edges: bool = False
    band: int | None = None
    output_format: catalog.Format | str | None = None
    creation_options: StrMap = dataclasses.field(default_factory=_empty_map)
    quiet: bool = False


@dataclasses.dataclass(frozen=True)
class Slope(DemOptions):
    """``gdaldem slope``."""

    KIND: ClassVar[str] = "dem-slope"
    MODE: ClassVar[str] = "slope"

    percentage: bool = False
    scale: Number = None


@dataclasses.dataclass(frozen=True)
class Aspect(DemOptions):
    """``gdaldem aspect``."""

    KIND: ClassVar[str] = "dem-aspect"
    MODE: ClassVar[str] = "aspect"

    trigonometric: bool = False
    zero_for_flat: bool = False


@dataclasses.dataclass(frozen=True)
class Hillshade(DemOptions):
    """``gdaldem hillshade``."""

    KIND: ClassVar[str] = "dem-hillshade"
    MODE: ClassVar[str] = "hillshade"

    z_factor: Number = None
    scale: Number = None
    azimuth: Number = None
    altitude: Number = None


@dataclasses.dataclass(frozen=True)
class ColorRelief(DemOptions):
    """``gdaldem color-relief``; ``color_file`` is required."""

    KIND: ClassVar[str] = "dem-color-relief"
    MODE: ClassVar[str] = "color-relief"

    color_file: Text = None
    alpha: bool = False
    exact_color_entry: bool = False
    nearest_color_entry: bool = False


@dataclasses.dataclass(frozen=True)
class TPI(DemOptions):
    """``gdaldem TPI`` (Topographic Position Index)."""

    KIND: ClassVar[str] = "dem-tpi"
    MODE: ClassVar[str] = "TPI"


@dataclasses.dataclass(frozen=True)
class Contour(CommandOptions):
    """``gdal_contour``: build vector contour lines from a raster DEM."""

    KIND: ClassVar[str] = "contour"
    PROGRAM: ClassVar[str] = "gdal_contour"

    input: Text = None
    output: Text = None
    band: int | None = None
    attribute: Text = None
    use_z: bool = False
    ignore_nodata: bool = False
    src_nodata: Number = None
    output_format: Text = None
    interval: Number = None
    offset: Number = None
    fixed_levels: tuple[str | int | float, ...] = ()
    layer_name: Text = None


@dataclasses.dataclass(frozen=True)
class BuildVrt(CommandOptions):
    """``gdalbuildvrt``: build a VRT mosaic from a list of datasets."""

    KIND: ClassVar[str] = "buildvrt"
    PROGRAM: ClassVar[str] = "gdalbuildvrt"
    INPUT_FIELD: ClassVar[str | None] = "inputs"

    output: Text = None
    inputs: tuple[str, ...] = ()
    tile_index: Text = None
    resolution: catalog.VrtResolution | str | None = None
    target_resolution: values.Resolution | None = None
    target_aligned_pixels: bool = False
    separate: bool = False
    allow_projection_difference: bool = False
    quiet: bool = False
    extents: values.Extents | None = None
    add_alpha: bool = False
    hide_nodata: bool = False
    src_nodata: tuple[str | int | float, ...] = ()
    vrt_nodata: tuple[str | int | float, ...] = ()
    input_file_list: Text = None
    overwrite: bool = False


@dataclasses.dataclass(frozen=True)
class Merge(CommandOptions):
    """``gdal_merge.py``: mosaic a set of images.

    ``output`` is optional: ``gdal_merge.py`` falls back to ``out.tif``.
    """

    KIND: ClassVar[str] = "merge"
    PROGRAM: ClassVar[str] = "gdal_merge.py"
    INPUT_FIELD: ClassVar[str | None] = "inputs"

    inputs: tuple[str, ...] = ()
    output: Text = None
    output_format: catalog.Format | str | None = None
    creation_options: StrMap = dataclasses.field(default_factory=_empty_map)
    pixel_size: values.PixelSize | None = None
    target_aligned_pixels: bool = False
    extents: values.OutputBounds | None = None
    verbose: bool = False
    separate: bool = False
    pseudo_color_table: bool = False
    nodata: Number = None
    output_nodata: Number = None
    init_values: tuple[str | int | float, ...] = ()
    create_only: bool = False


@dataclasses.dataclass(frozen=True)
class Retile(CommandOptions):
    """``gdal_retile.py``: retile a set of tiles and build pyramid levels."""

    KIND: ClassVar[str] = "retile"
    PROGRAM: ClassVar[str] = "gdal_retile.py"
    INPUT_FIELD: ClassVar[str | None] = "inputs"
    OUTPUT_FIELD: ClassVar[str | None] = "target_dir"

    inputs: tuple[str, ...] = ()
    target_dir: Text = None
    verbose: bool = False
    creation_options: StrMap = dataclasses.field(default_factory=_empty_map)
    output_format: catalog.Format | str | None = None
    pixel_size: values.PixelSize | None = None
    output_type: catalog.DataType | str | None = None
    tile_index: Text = None
    tile_index_field: Text = None
    csv: Text = None
    csv_delimiter: Text = None
    source_srs: Text = None
    pyramid_only: bool = False
    resampling: catalog.Resampling | str | None = None
    levels: int | None = None
    use_dir_for_each_row: bool = False


@dataclasses.dataclass(frozen=True)
class AddOverviews(CommandOptions):
    """``gdaladdo``: build or rebuild overview images.

    ``resampling`` is required. ``--config`` settings precede the dataset
    name, and the levels follow it in the order given.
    """

    KIND: ClassVar[str] = "addoverviews"
    PROGRAM: ClassVar[str] = "gdaladdo"
    OUTPUT_FIELD: ClassVar[str | None] = None

    input: Text = None
    resampling: catalog.Resampling | str | None = None
    read_only: bool = False
    clean: bool = False
    levels: tuple[int, ...] = ()


@dataclasses.dataclass(frozen=True)
class Tiles(CommandOptions):
    """``gdal2tiles.py``: generate a TMS/XYZ tile directory."""

    KIND: ClassVar[str] = "gdal2tiles"
    PROGRAM: ClassVar[str] = "gdal2tiles.py"
    OUTPUT_FIELD: ClassVar[str | None] = "output_dir"

    input: Text = None
    output_dir: Text = None
    title: Text = None
    url: Text = None
    no_kml: bool = False
    google_key: Text = None
    force_kml: bool = False
    verbose: bool = False
    profile: catalog.TileProfile | str | None = None
    resampling: catalog.Resampling | str | None = None
    source_srs: Text = None
    zoom: Text = None
    resume: bool = False
    nodata: Number = None
    web_viewer: catalog.WebViewer | str | None = None
    copyright: Text = None


@dataclasses.dataclass(frozen=True)
class FormatInfo(CommandOptions):
    """``gdalinfo --format NAME``: describe a single driver."""

    KIND: ClassVar[str] = "format"
    PROGRAM: ClassVar[str] = "gdalinfo"
    INPUT_FIELD: ClassVar[str | None] = None
    OUTPUT_FIELD: ClassVar[str | None] = None

    format: catalog.Format | str | None = None


@dataclasses.dataclass(frozen=True)
class FormatList(CommandOptions):
    """``gdalinfo --formats``: list every raster driver of the GDAL build."""

    KIND: ClassVar[str] = "formats"
    PROGRAM: ClassVar[str] = "gdalinfo"
    INPUT_FIELD: ClassVar[str | None] = None
    OUTPUT_FIELD: ClassVar[str | None] = None


COMMANDS: dict[str, type[CommandOptions]] = {
    kind.KIND: kind
    for kind in (
        Info,
        Translate,
        Warp,
        Transform,
        Rasterize,
        Slope,
        Aspect,
        Hillshade,
        ColorRelief,
        TPI,
        Contour,
        BuildVrt,
        Merge,
        Retile,
        AddOverviews,
        Tiles,
        FormatInfo,
        FormatList,
    )
}
