"""Fluent construction of GDAL option sets.

:class:`CommandBuilder` collects options one call at a time and freezes them
into the immutable options dataclass of its command kind when
:meth:`CommandBuilder.freeze` or :meth:`CommandBuilder.build` is called.
Every setter returns the builder so calls chain.

Example:
    Build a warp through the fluent interface:
        >>> from geobricks.commands.builder import CommandBuilder
        >>> (
        ...     CommandBuilder("warp")
        ...     .add_input("a.tif")
        ...     .add_input("b.tif")
        ...     .set_output("mosaic.tif")
        ...     .set(target_srs="EPSG:4326")
        ...     .put("creation_options", "COMPRESS", "LZW")
        ...     .build()
        ... )
        'gdalwarp -t_srs EPSG:4326 -co "COMPRESS=LZW" a.tif b.tif mosaic.tif '
"""

from __future__ import annotations

import collections.abc
import dataclasses
from typing import Any

from geobricks.commands import options, render


class CommandBuilder:
    """Mutable, per-invocation collector for one command's options.

    Args:
        kind: A command kind name from ``options.COMMANDS`` (``"warp"``,
            ``"dem-hillshade"``...) or an options dataclass.
        **fields: Initial option values, as accepted by :meth:`set`.

    Raises:
        ValueError: If ``kind`` names no known command.
        TypeError: If a field does not exist on the options dataclass.
    """

    def __init__(
        self, kind: str | type[options.CommandOptions], **fields: Any
    ) -> None:
        if isinstance(kind, str):
            try:
                kind = options.COMMANDS[kind]
            except KeyError:
                raise ValueError(f"Unknown command kind: {kind}") from None
        self.kind = kind
        self._names = {field.name for field in dataclasses.fields(kind)}
        self._values: dict[str, Any] = {}
        self.set(**fields)

    def _check(self, name: str | None, role: str = "option") -> str:
        if name is None or name not in self._names:
            raise TypeError(f"{self.kind.__name__} has no {role} {name!r}")
        return name

    def set(self, **fields: Any) -> CommandBuilder:
        """Assign option values by field name.

        Lists and mappings are copied, so later changes made by the caller
        do not leak into the builder.
        """
        for name, value in fields.items():
            self._check(name)
            if isinstance(value, list | tuple):
                value = list(value)
            elif isinstance(value, collections.abc.Mapping):
                value = dict(value)
            self._values[name] = value
        return self

    def set_raw_script(self, script: str | None) -> CommandBuilder:
        """Use ``script`` verbatim as the command, bypassing assembly."""
        return self.set(script=script)

    def set_help(self, flag: bool = True) -> CommandBuilder:
        """Render ``gdalinfo --help`` instead of the command."""
        return self.set(help=flag)

    def set_input(self, path: str) -> CommandBuilder:
        """Set the input dataset, replacing any input set before."""
        name = self._check(self.kind.INPUT_FIELD, "input")
        if name == "inputs":
            self._values[name] = [path]
        else:
            self._values[name] = path
        return self

    def add_input(self, path: str) -> CommandBuilder:
        """Append an input dataset; single-input commands replace it instead."""
        name = self._check(self.kind.INPUT_FIELD, "input")
        if name != "inputs":
            return self.set_input(path)
        return self.append(name, path)

    def set_inputs(self, paths: collections.abc.Iterable[str]) -> CommandBuilder:
        """Replace every input dataset with ``paths``, keeping their order."""
        name = self._check(self.kind.INPUT_FIELD, "input")
        paths = list(paths)
        if name != "inputs":
            if len(paths) != 1:
                raise TypeError(f"{self.kind.__name__} accepts a single input")
            return self.set_input(paths[0])
        self._values[name] = paths
        return self

    def set_output(self, path: str) -> CommandBuilder:
        """Set the output dataset or directory."""
        name = self._check(self.kind.OUTPUT_FIELD, "output")
        self._values[name] = path
        return self

    def append(self, field: str, *items: Any) -> CommandBuilder:
        """Append ``items`` to a repeatable option, after the existing ones."""
        self._check(field)
        self._values[field] = [*self._values.get(field, ()), *items]
        return self

    def put(self, field: str, key: str, value: Any) -> CommandBuilder:
        """Add or replace one ``key`` of a map-valued option."""
        self._check(field)
        mapping = dict(self._values.get(field, {}))
        mapping[key] = value
        self._values[field] = mapping
        return self

    def set_config(
        self,
        key: str | collections.abc.Mapping[str, str],
        value: str | None = None,
    ) -> CommandBuilder:
        """Add one ``--config`` entry, or replace all of them with a mapping.

        Example:
            >>> CommandBuilder("info", input="a.tif").set_config(
            ...     "GDAL_CACHEMAX", "512"
            ... ).build()
            'gdalinfo a.tif --config GDAL_CACHEMAX 512 '
        """
        if isinstance(key, collections.abc.Mapping):
            return self.set(config=key)
        return self.put("config", key, value)

    def freeze(self) -> options.CommandOptions:
        """Return an immutable snapshot of the collected options."""
        return self.kind(**self._values)

    def build(self) -> str:
        """Render the collected options, see :func:`render.build`."""
        return render.build(self.freeze())

    def build_args(self) -> list[str]:
        """Render the collected options as an argv list."""
        return render.build_args(self.freeze())
