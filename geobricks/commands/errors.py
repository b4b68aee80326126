"""Errors raised while rendering a GDAL command.

Rendering either returns the complete command string or raises one of the
exceptions below before any output is produced. Messages always name the
offending option so callers can surface them to the user unchanged.

Example:
    Handle a missing required option:
        >>> from geobricks.commands import errors, options, render
        >>> try:
        ...     render.build(options.Translate(input="a.dem"))
        ... except errors.MissingRequiredField as e:
        ...     print(e.field)
        output
"""

from __future__ import annotations


class CommandBuildError(ValueError):
    """Base class for all command rendering failures."""


class MissingRequiredField(CommandBuildError):
    """A required input, output or algorithm was not set at build time.

    Attributes:
        field: Name of the missing option.
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"Required option '{field}' has not been set.")
        self.field = field


class InvalidOptionValue(CommandBuildError):
    """An option value lies outside the domain the utility accepts.

    Attributes:
        field: Name of the offending option.
        value: The rejected value.
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for option '{field}': {reason}.")
        self.field = field
        self.value = value
