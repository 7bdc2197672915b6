# src/layerconf/loaders/mapping.py

"""In-memory mapping loader."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from layerconf.structure import Structure


class MappingLoader:
    """Serve a fixed mapping, e.g. programmatic overrides or a defaults layer."""

    def __init__(self, data: Mapping[str, Any], *, name: str | None = None) -> None:
        self.data = data
        self.name = name or "mapping"

    def load(self, structure: Structure) -> Any:
        del structure
        if isinstance(self.data, Mapping):
            return dict(self.data)
        return self.data

    def __repr__(self) -> str:
        return f"MappingLoader(name={self.name!r})"
