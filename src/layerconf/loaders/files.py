# src/layerconf/loaders/files.py

"""File loaders for JSON, TOML and YAML documents.

Each loader returns the parsed top level. A missing file yields ``{}``
unless ``required=True``; malformed content raises so that the pipeline
reports it as a fatal :class:`~layerconf.errors.LoaderLoadError`.
"""

from __future__ import annotations

import json
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING, Any

import yaml

from layerconf.errors import LoaderLoadError

if TYPE_CHECKING:
    from collections.abc import Sequence
    import os

    from layerconf.structure import Structure


class _FileLoader:
    format_name = "file"

    def __init__(
        self, path: str | os.PathLike[str], *, required: bool = False
    ) -> None:
        self.path = Path(path)
        self.required = required
        self.name = f"{self.format_name}:{self.path}"

    def _parse(self, text: str) -> Any:
        raise NotImplementedError

    def load(self, structure: Structure) -> Any:
        del structure
        if not self.path.exists():
            if self.required:
                raise LoaderLoadError(
                    f"Configuration file not found: {self.path}",
                    loader=self,
                    hint="Create the file or construct the loader with required=False.",
                )
            return {}
        data = self._parse(self.path.read_text(encoding="utf-8"))
        # An empty document is an empty configuration
        return {} if data is None else data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class JsonFileLoader(_FileLoader):
    format_name = "json"

    def _parse(self, text: str) -> Any:
        if not text.strip():
            return None
        return json.loads(text)


class TomlFileLoader(_FileLoader):
    """TOML loader, optionally reading a nested table such as ``[tool.myapp]``."""

    format_name = "toml"

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        table: Sequence[str] = (),
        required: bool = False,
    ) -> None:
        super().__init__(path, required=required)
        self.table = tuple(table)
        if self.table:
            self.name = f"{self.name}[{'.'.join(self.table)}]"

    def _parse(self, text: str) -> Any:
        data: Any = tomllib.loads(text)
        for segment in self.table:
            if not isinstance(data, dict):
                break
            data = data.get(segment, {})
        return data


class YamlFileLoader(_FileLoader):
    format_name = "yaml"

    def _parse(self, text: str) -> Any:
        return yaml.safe_load(text)
