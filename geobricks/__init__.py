"""GeoBricks: typed builders for GDAL command lines.

This package turns structured, immutable option sets into the exact
argument strings the GDAL command-line utilities expect, and optionally
runs them.

- commands: option sets, value types, catalogues and the renderer
- services: connector running rendered commands on the local machine
- api: FastAPI endpoints listing, rendering and running commands
- core: pydantic-settings configuration

See module sub-docstrings for details on usage.
"""
