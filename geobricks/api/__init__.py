"""API router subpackage for the GeoBricks service.

This package exposes the GDAL command builders over REST. Each module
exposes its own APIRouter for composition in the application's main
FastAPI instance.

Submodules:
    - commands: Endpoints for listing command kinds, rendering command
      lines from JSON options and running them.
"""
