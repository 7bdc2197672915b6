# src/layerconf/loaders/env.py

"""Environment variable loader with optional ``.env`` support."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values

if TYPE_CHECKING:
    from collections.abc import Mapping

    from layerconf.structure import Structure


class EnvLoader:
    """Read ``PREFIX + KEY.upper()`` for every declared key.

    Values are returned as strings; turning ``"8080"`` into ``8080`` is the
    declared type's job. When *dotenv_path* points at an existing file its
    values are read without touching ``os.environ``, and the real
    environment takes precedence over them.

    Args:
        prefix: Variable name prefix, e.g. ``"APP_"``.
        environ: Mapping to read instead of ``os.environ``.
        dotenv_path: Optional ``.env`` file consulted before the environment.
    """

    def __init__(
        self,
        prefix: str = "",
        *,
        environ: Mapping[str, str] | None = None,
        dotenv_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.prefix = prefix
        self.environ = environ
        self.dotenv_path = Path(dotenv_path) if dotenv_path is not None else None
        self.name = f"env:{prefix}*" if prefix else "env"

    def variable_name(self, key: str) -> str:
        return f"{self.prefix}{key.upper()}"

    def _sources(self) -> dict[str, str | None]:
        values: dict[str, str | None] = {}
        if self.dotenv_path is not None and self.dotenv_path.is_file():
            values.update(dotenv_values(self.dotenv_path))
        values.update(os.environ if self.environ is None else self.environ)
        return values

    def load(self, structure: Structure) -> Mapping[str, Any]:
        values = self._sources()
        out: dict[str, Any] = {}
        for key in structure.members():
            value = values.get(self.variable_name(key))
            # dotenv yields None for bare "KEY" lines without a value
            if value is not None:
                out[key] = value
        return out

    def __repr__(self) -> str:
        return f"EnvLoader(prefix={self.prefix!r})"
