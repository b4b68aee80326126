"""Tests for the FastAPI main application factory and health checks.

This module validates that:
    - The FastAPI app is correctly instantiated via main.create_app,
    - OpenAPI metadata (title, version) matches the project contract,
    - The health and command routes are registered,
    - The /health endpoint returns the expected response,
    - The package logger is configured from settings.

See Also:
    - geobricks/main.py for the application factory.
"""

from __future__ import annotations

import logging
from typing import cast

from fastapi import testclient

from geobricks import main
from geobricks.utils import logging as logging_utils


def test_create_app() -> None:
    """Test that create_app returns a configured FastAPI instance."""
    app = main.create_app()
    assert app is not None
    assert app.title == "GeoBricks"
    assert app.version == "0.1.0"


def test_health_endpoint() -> None:
    """Test the health check endpoint returns ok status."""
    app = main.create_app()
    client = testclient.TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_app_includes_routers() -> None:
    """Test that the command routes are included in the app."""
    app = main.create_app()
    routes: list[str] = [
        cast(str, getattr(route, "path", ""))
        for route in app.routes  # type: ignore[attr-defined]
        if hasattr(route, "path")
    ]
    assert "/health" in routes
    assert "/api/commands" in routes
    assert "/api/commands/{kind}" in routes
    assert "/api/commands/{kind}/run" in routes


def test_create_app_configures_logging() -> None:
    """Repeated factories keep a single handler on the package logger."""
    main.create_app()
    main.create_app()
    logger = logging.getLogger(logging_utils.LOGGER_NAME)
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
