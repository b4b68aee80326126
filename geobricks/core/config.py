"""Application settings and configuration management.

This module provides Pydantic-based settings management that loads
configuration from environment variables (prefixed with ``GEOBRICKS_``) or a
.env file. Settings cover where the GDAL executables live, the working
directory commands run in, the command timeout, logging and CORS origins.

Example:
    Settings can be accessed via the cached get_settings() function:
        >>> from geobricks.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.gdal_bin_dir)

    Environment variables can override defaults:
        >>> GEOBRICKS_GDAL_BIN_DIR=/usr/local/gdal/bin
        >>> GEOBRICKS_LAYERS_DIR=/srv/geobricks/layers
        >>> GEOBRICKS_COMMAND_TIMEOUT_SECONDS=600
"""

import functools
import pathlib

import pydantic_settings


class Settings(pydantic_settings.BaseSettings):
    """Runtime configuration pulled from environment variables or defaults.

    Attributes:
        gdal_bin_dir: Directory holding the GDAL executables. None resolves
            them through PATH.
        layers_dir: Working directory GDAL commands run in, so relative
            dataset paths resolve against it.
        command_timeout_seconds: Seconds a command may run before it is
            killed (None waits forever).
        log_level: Level of the ``geobricks`` logger.
        allow_origins: List of allowed CORS origins (["*"] allows all).

    Example:
        Create settings with custom values:
            >>> settings = Settings(
            ...     gdal_bin_dir=pathlib.Path("/opt/gdal/bin"),
            ...     layers_dir=pathlib.Path("/data/layers"),
            ...     command_timeout_seconds=120,
            ... )
            >>> settings.ensure_directories()
    """

    gdal_bin_dir: pathlib.Path | None = None
    layers_dir: pathlib.Path = pathlib.Path("/tmp/geobricks/layers")
    command_timeout_seconds: float | None = None
    log_level: str = "INFO"
    allow_origins: list[str] = ["*"]

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix="GEOBRICKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    def ensure_directories(self) -> None:
        """Create the layers working directory if it does not exist."""
        self.layers_dir.mkdir(parents=True, exist_ok=True)


@functools.lru_cache
def get_settings() -> Settings:
    """Get cached settings instance with directories initialized.

    Settings are loaded from environment variables or .env file and cached
    for the lifetime of the application. Subsequent calls return the same
    cached instance.

    Returns:
        Settings instance with the working directory ensured to exist.
    """
    settings = Settings()
    settings.ensure_directories()
    return settings
