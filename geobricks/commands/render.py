"""Render option sets into GDAL command lines.

One serializer function per options type is registered in a table keyed by
that type. :func:`build` applies the rules shared by every utility (raw
script override first, then the help invocation, then normal assembly) and
dispatches to the registered serializer for the rest.

Rendered commands follow a fixed layout: every token is followed by a single
space, and map-valued options are emitted as ``-flag "KEY=VALUE"`` with
literal double quotes around the pair. The argv form returned by
:func:`build_args` holds the same tokens without those quotes.

Example:
    Render a translation with one creation option:
        >>> from geobricks.commands import options, render
        >>> render.build(
        ...     options.Translate(
        ...         input="a.dem",
        ...         output="b.tif",
        ...         creation_options={"TILED": "YES"},
        ...     )
        ... )
        'gdal_translate -co "TILED=YES" a.dem b.tif '

    Split the command into argv for :mod:`subprocess`:
        >>> render.build_args(options.Info(input="a.tif", stats=True))
        ['gdalinfo', 'a.tif', '-stats']
"""

from __future__ import annotations

import collections.abc
import shlex
from typing import Any

from geobricks.commands import errors, options
from geobricks.utils.logging import get_logger

LOG = get_logger()

HELP_COMMAND = "gdalinfo --help"


class _Args:
    """Token accumulator bound to one options value."""

    def __init__(self, opts: options.CommandOptions) -> None:
        self.opts = opts
        self.tokens: list[str] = []
        self._quoted: set[int] = set()

    def _append_quoted(self, value: str) -> None:
        self._quoted.add(len(self.tokens))
        self.tokens.append(value)

    def line(self) -> str:
        return "".join(
            f"\"{token}\" " if index in self._quoted else f"{token} "
            for index, token in enumerate(self.tokens)
        )

    def required(self, field: str) -> Any:
        value = getattr(self.opts, field)
        if value is None or value == "" or value == ():
            raise errors.MissingRequiredField(field)
        return value

    def positional(self, *items: Any) -> None:
        for item in items:
            if item is None or item == "":
                continue
            if isinstance(item, tuple):
                self.tokens.extend(str(value) for value in item)
            else:
                self.tokens.append(str(item))

    def flag(self, name: str, enabled: bool) -> None:
        if enabled:
            self.tokens.append(name)

    def option(self, name: str, value: Any) -> None:
        if value is None or value == "":
            return
        self.tokens.append(name)
        if hasattr(value, "tokens"):
            self.tokens.extend(value.tokens())
        else:
            self.tokens.append(str(value))

    def repeat(self, name: str, items: collections.abc.Iterable[Any]) -> None:
        for item in items:
            self.option(name, item)

    def series(self, name: str, items: collections.abc.Sequence[Any]) -> None:
        if items:
            self.tokens.append(name)
            self.tokens.extend(str(item) for item in items)

    def group(self, name: str, items: collections.abc.Sequence[Any]) -> None:
        if not items:
            return
        self.tokens.append(name)
        if len(items) == 1:
            self.tokens.append(str(items[0]))
        else:
            self._append_quoted(" ".join(str(item) for item in items))

    def pairs(self, name: str, mapping: collections.abc.Mapping[str, Any]) -> None:
        for key, value in mapping.items():
            self.tokens.append(name)
            self._append_quoted(f"{key}={value}")

    def config(self) -> None:
        for key, value in self.opts.config.items():
            self.tokens.extend(("--config", str(key), str(value)))


Serializer = collections.abc.Callable[[_Args, Any], None]

_SERIALIZERS: dict[type[options.CommandOptions], Serializer] = {}


def serializer(
    kind: type[options.CommandOptions],
) -> collections.abc.Callable[[Serializer], Serializer]:
    """Register the decorated function as the serializer of ``kind``."""

    def register(func: Serializer) -> Serializer:
        _SERIALIZERS[kind] = func
        return func

    return register


def _check_order(order: Any) -> None:
    if order is None:
        return
    value = int(order) if isinstance(order, str) and order.isdigit() else order
    if type(value) is not int or value not in (1, 2, 3):
        raise errors.InvalidOptionValue(
            "order", order, "polynomial order must be 1, 2 or 3"
        )


def program(opts: options.CommandOptions) -> str:
    """Return the executable invoked by ``opts``.

    Example:
        >>> program(options.Merge())
        'gdal_merge.py'
    """
    return opts.PROGRAM


def _assemble(opts: options.CommandOptions) -> _Args:
    try:
        func = _SERIALIZERS[type(opts)]
    except KeyError as exc:
        raise TypeError(f"No serializer registered for {type(opts).__name__}") from exc
    args = _Args(opts)
    args.positional(opts.PROGRAM)
    func(args, opts)
    return args


def build_tokens(opts: options.CommandOptions) -> list[str]:
    """Assemble the command tokens, ignoring ``script`` and ``help``.

    Tokens are the raw arguments: ``KEY=VALUE`` pairs and multi-value
    groups carry no quotes, and values holding spaces or quotes stay whole.

    Raises:
        errors.MissingRequiredField: When a required option is unset.
        errors.InvalidOptionValue: When an option is out of range.
        TypeError: When no serializer is registered for ``opts``.
    """
    return _assemble(opts).tokens


def build(opts: options.CommandOptions) -> str:
    """Render ``opts`` into a command string.

    A non-empty ``script`` is returned verbatim, whatever the state of the
    other fields. Otherwise ``help`` yields ``"gdalinfo --help"``, the help
    invocation shared by every command. Otherwise the tokens are assembled
    in the utility's order, each followed by one space.

    Args:
        opts: The option set to render.

    Returns:
        The command line.

    Raises:
        errors.MissingRequiredField: When a required option is unset.
        errors.InvalidOptionValue: When an option is out of range.

    Example:
        >>> build(options.Info(input="a.tif"))
        'gdalinfo a.tif '
        >>> build(options.Warp(help=True))
        'gdalinfo --help'
        >>> build(options.Info(script="gdalinfo --version", help=True))
        'gdalinfo --version'
    """
    if opts.script:
        return opts.script
    if opts.help:
        return HELP_COMMAND
    command = _assemble(opts).line()
    LOG.debug("Rendered %s command: %s", opts.KIND, command)
    return command


def build_args(opts: options.CommandOptions) -> list[str]:
    """Render ``opts`` as an argv list for :mod:`subprocess`.

    Assembled commands use the raw tokens, so paths with spaces or quotes
    reach the program unchanged. Only a raw ``script`` is split with
    :func:`shlex.split`.

    Raises:
        errors.InvalidOptionValue: When a raw script cannot be split.

    Example:
        >>> build_args(options.FormatInfo(format="GTiff"))
        ['gdalinfo', '--format', 'GTiff']
        >>> build_args(options.Info(input="my dem.tif"))
        ['gdalinfo', 'my dem.tif']
    """
    if opts.script:
        try:
            return shlex.split(opts.script)
        except ValueError as exc:
            raise errors.InvalidOptionValue("script", opts.script, str(exc)) from exc
    if opts.help:
        return HELP_COMMAND.split()
    return build_tokens(opts)


@serializer(options.Info)
def _info(args: _Args, opts: options.Info) -> None:
    args.positional(args.required("input"))
    args.flag("-checksum", opts.checksum)
    args.flag("-nogcp", opts.no_gcp)
    args.flag("-hist", opts.histogram)
    args.flag("-nomd", opts.no_metadata)
    args.flag("-noct", opts.no_color_table)
    args.flag("-mm", opts.min_max)
    args.flag("-stats", opts.stats)
    args.option("-mdd", opts.metadata_domain)
    args.config()


@serializer(options.Translate)
def _translate(args: _Args, opts: options.Translate) -> None:
    source = args.required("input")
    target = args.required("output")
    args.option("-ot", opts.output_type)
    args.flag("-strict", opts.strict)
    args.option("-of", opts.output_format)
    args.repeat("-b", opts.bands)
    args.option("-mask", opts.mask)
    args.option("-expand", opts.expand)
    args.option("-outsize", opts.output_size)
    args.option("-scale", opts.scale)
    args.flag("-unscale", opts.unscale)
    args.option("-srcwin", opts.src_window)
    args.option("-projwin", opts.proj_window)
    args.option("-a_srs", opts.output_srs)
    args.option("-a_ullr", opts.output_bounds)
    args.option("-a_nodata", opts.nodata)
    if len(opts.metadata) < 2:
        args.pairs("-mo", opts.metadata)
    args.pairs("-co", opts.creation_options)
    args.repeat("-gcp", opts.gcps)
    args.flag("-q", opts.quiet)
    args.flag("-sds", opts.subdatasets)
    args.flag("-stats", opts.stats)
    args.positional(source, target)
    args.config()


@serializer(options.Warp)
def _warp(args: _Args, opts: options.Warp) -> None:
    sources = args.required("inputs")
    target = args.required("output")
    _check_order(opts.order)
    args.option("-s_srs", opts.source_srs)
    args.option("-t_srs", opts.target_srs)
    args.pairs("-to", opts.transformer_options)
    args.option("-order", opts.order)
    args.flag("-tps", opts.tps)
    args.flag("-rpc", opts.rpc)
    args.flag("-geoloc", opts.geoloc)
    args.option("-et", opts.error_threshold)
    if opts.refine_gcps is not None:
        args.option("-refine_gcps", opts.refine_gcps)
        args.positional(opts.refine_gcps_minimum)
    args.option("-te", opts.extents)
    args.option("-tr", opts.resolution)
    args.flag("-tap", opts.target_aligned_pixels)
    args.option("-ts", opts.size)
    args.pairs("-wo", opts.warp_options)
    args.option("-ot", opts.output_type)
    args.option("-wt", opts.working_type)
    args.option("-r", opts.resampling)
    args.group("-srcnodata", opts.src_nodata)
    args.group("-dstnodata", opts.dst_nodata)
    args.flag("-dstalpha", opts.dst_alpha)
    args.option("-wm", opts.warp_memory)
    args.flag("-multi", opts.multithread)
    args.flag("-q", opts.quiet)
    args.option("-of", opts.output_format)
    args.pairs("-co", opts.creation_options)
    args.option("-cutline", opts.cutline)
    args.option("-cl", opts.cutline_layer)
    args.option("-cwhere", opts.cutline_where)
    args.option("-csql", opts.cutline_sql)
    args.option("-cblend", opts.cutline_blend)
    args.flag("-crop_to_cutline", opts.crop_to_cutline)
    args.flag("-overwrite", opts.overwrite)
    args.positional(sources, target)
    args.config()


@serializer(options.Transform)
def _transform(args: _Args, opts: options.Transform) -> None:
    _check_order(opts.order)
    args.flag("-i", opts.inverse)
    args.option("-s_srs", opts.source_srs)
    args.option("-t_srs", opts.target_srs)
    args.pairs("-to", opts.transformer_options)
    args.option("-order", opts.order)
    args.flag("-tps", opts.tps)
    args.flag("-rpc", opts.rpc)
    args.flag("-geoloc", opts.geoloc)
    args.repeat("-gcp", opts.gcps)
    args.positional(opts.input, opts.output)
    args.config()


@serializer(options.Rasterize)
def _rasterize(args: _Args, opts: options.Rasterize) -> None:
    source = args.required("input")
    target = args.required("output")
    args.repeat("-b", opts.bands)
    args.flag("-i", opts.invert)
    args.flag("-at", opts.all_touched)
    args.repeat("-burn", opts.burn_values)
    args.option("-a", opts.attribute)
    args.flag("-3d", opts.use_z)
    args.repeat("-l", opts.layers)
    args.option("-where", opts.where)
    args.option("-sql", opts.sql)
    args.option("-of", opts.output_format)
    args.option("-a_srs", opts.output_srs)
    args.pairs("-co", opts.creation_options)
    args.option("-a_nodata", opts.nodata)
    args.repeat("-init", opts.init_values)
    args.option("-te", opts.extents)
    args.option("-tr", opts.resolution)
    args.flag("-tap", opts.target_aligned_pixels)
    args.option("-ts", opts.size)
    args.option("-ot", opts.output_type)
    args.flag("-q", opts.quiet)
    args.positional(source, target)
    args.config()


def _dem_tail(args: _Args, opts: options.DemOptions) -> None:
    args.option("-alg", opts.algorithm)
    args.flag("-compute_edges", opts.compute_edges)
    args.option("-b", opts.band)
    args.option("-of", opts.output_format)
    args.pairs("-co", opts.creation_options)
    args.flag("-q", opts.quiet)
    args.config()


@serializer(options.Slope)
def _slope(args: _Args, opts: options.Slope) -> None:
    source = args.required("input")
    target = args.required("output")
    args.positional(opts.MODE)
    args.flag("-p", opts.percentage)
    args.option("-s", opts.scale)
    args.positional(source, target)
    _dem_tail(args, opts)


@serializer(options.Aspect)
def _aspect(args: _Args, opts: options.Aspect) -> None:
    source = args.required("input")
    target = args.required("output")
    args.positional(opts.MODE)
    args.flag("-trigonometric", opts.trigonometric)
    args.flag("-zero_for_flat", opts.zero_for_flat)
    args.positional(source, target)
    _dem_tail(args, opts)


@serializer(options.Hillshade)
def _hillshade(args: _Args, opts: options.Hillshade) -> None:
    source = args.required("input")
    target = args.required("output")
    args.positional(opts.MODE)
    args.option("-z", opts.z_factor)
    args.option("-s", opts.scale)
    args.option("-az", opts.azimuth)
    args.option("-alt", opts.altitude)
    args.positional(source, target)
    _dem_tail(args, opts)


@serializer(options.ColorRelief)
def _color_relief(args: _Args, opts: options.ColorRelief) -> None:
    source = args.required("input")
    target = args.required("output")
    palette = args.required("color_file")
    args.positional(opts.MODE)
    args.flag("-alpha", opts.alpha)
    args.flag("-exact_color_entry", opts.exact_color_entry)
    args.flag("-nearest_color_entry", opts.nearest_color_entry)
    args.positional(source, palette, target)
    _dem_tail(args, opts)


@serializer(options.TPI)
def _tpi(args: _Args, opts: options.TPI) -> None:
    source = args.required("input")
    target = args.required("output")
    args.positional(opts.MODE, source, target)
    _dem_tail(args, opts)


@serializer(options.Contour)
def _contour(args: _Args, opts: options.Contour) -> None:
    source = args.required("input")
    target = args.required("output")
    args.option("-b", opts.band)
    args.option("-a", opts.attribute)
    args.flag("-3d", opts.use_z)
    args.flag("-inodata", opts.ignore_nodata)
    args.option("-snodata", opts.src_nodata)
    args.option("-f", opts.output_format)
    args.option("-i", opts.interval)
    args.option("-off", opts.offset)
    args.series("-fl", opts.fixed_levels)
    args.option("-nln", opts.layer_name)
    args.positional(source, target)
    args.config()


@serializer(options.BuildVrt)
def _buildvrt(args: _Args, opts: options.BuildVrt) -> None:
    target = args.required("output")
    sources = args.required("inputs")
    args.option("-tileindex", opts.tile_index)
    args.option("-resolution", opts.resolution)
    args.option("-tr", opts.target_resolution)
    args.flag("-tap", opts.target_aligned_pixels)
    args.flag("-separate", opts.separate)
    args.flag("-allow_projection_difference", opts.allow_projection_difference)
    args.flag("-q", opts.quiet)
    args.option("-te", opts.extents)
    args.flag("-addalpha", opts.add_alpha)
    args.flag("-hidenodata", opts.hide_nodata)
    args.group("-srcnodata", opts.src_nodata)
    args.group("-vrtnodata", opts.vrt_nodata)
    args.option("-input_file_list", opts.input_file_list)
    args.flag("-overwrite", opts.overwrite)
    args.positional(target, sources)
    args.config()


@serializer(options.Merge)
def _merge(args: _Args, opts: options.Merge) -> None:
    sources = args.required("inputs")
    args.option("-o", opts.output)
    args.option("-of", opts.output_format)
    args.pairs("-co", opts.creation_options)
    args.option("-ps", opts.pixel_size)
    args.flag("-tap", opts.target_aligned_pixels)
    args.option("-ul_lr", opts.extents)
    args.flag("-v", opts.verbose)
    args.flag("-separate", opts.separate)
    args.flag("-pct", opts.pseudo_color_table)
    args.option("-n", opts.nodata)
    args.option("-a_nodata", opts.output_nodata)
    args.group("-init", opts.init_values)
    args.flag("-createonly", opts.create_only)
    args.positional(sources)
    args.config()


@serializer(options.Retile)
def _retile(args: _Args, opts: options.Retile) -> None:
    sources = args.required("inputs")
    target = args.required("target_dir")
    args.flag("-v", opts.verbose)
    args.pairs("-co", opts.creation_options)
    args.option("-of", opts.output_format)
    args.option("-ps", opts.pixel_size)
    args.option("-ot", opts.output_type)
    args.option("-tileIndex", opts.tile_index)
    args.option("-tileIndexField", opts.tile_index_field)
    args.option("-csv", opts.csv)
    args.option("-csvDelim", opts.csv_delimiter)
    args.option("-s_srs", opts.source_srs)
    args.flag("-pyramidOnly", opts.pyramid_only)
    args.option("-r", opts.resampling)
    args.option("-levels", opts.levels)
    args.flag("-useDirForEachRow", opts.use_dir_for_each_row)
    args.option("-targetDir", target)
    args.positional(sources)
    args.config()


@serializer(options.AddOverviews)
def _addoverviews(args: _Args, opts: options.AddOverviews) -> None:
    source = args.required("input")
    method = args.required("resampling")
    args.option("-r", method)
    args.flag("-clean", opts.clean)
    args.flag("-ro", opts.read_only)
    args.config()
    args.positional(source, opts.levels)


@serializer(options.Tiles)
def _gdal2tiles(args: _Args, opts: options.Tiles) -> None:
    source = args.required("input")
    args.option("-t", opts.title)
    args.option("-u", opts.url)
    args.flag("-n", opts.no_kml)
    args.option("-g", opts.google_key)
    args.flag("-k", opts.force_kml)
    args.flag("-v", opts.verbose)
    args.option("-p", opts.profile)
    args.option("-r", opts.resampling)
    args.option("-s", opts.source_srs)
    args.option("-z", opts.zoom)
    args.flag("-e", opts.resume)
    args.option("-a", opts.nodata)
    args.option("-w", opts.web_viewer)
    args.option("-c", opts.copyright)
    args.positional(source, opts.output_dir)
    args.config()


@serializer(options.FormatInfo)
def _format(args: _Args, opts: options.FormatInfo) -> None:
    args.option("--format", args.required("format"))
    args.config()


@serializer(options.FormatList)
def _formats(args: _Args, opts: options.FormatList) -> None:
    args.positional("--formats")
    args.config()
