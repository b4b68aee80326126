"""Option sets and rendering for the GDAL command-line utilities.

One frozen dataclass per utility lives in ``options``; ``render`` turns an
options value into a command string and ``builder`` offers a fluent way to
assemble one. Structured option values live in ``values`` and enumerated
choices in ``catalog``.

Example:
    >>> from geobricks.commands import options, render
    >>> render.build(options.FormatInfo(format="GTiff"))
    'gdalinfo --format GTiff '
"""
