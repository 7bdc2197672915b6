# src/layerconf/loaders/base.py

"""Loader contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from layerconf.structure import Structure


@runtime_checkable
class Loader(Protocol):
    """A source of raw key/value pairs.

    ``load`` must return a mapping. It may consult ``structure.members()`` to
    pick relevant keys but does not have to filter; the pipeline ignores
    undeclared keys.
    """

    def load(self, structure: Structure) -> Mapping[str, Any]: ...


def loader_name(loader: object) -> str:
    """Display name used in errors, logs and provenance."""
    name = getattr(loader, "name", None)
    if isinstance(name, str) and name:
        return name
    return repr(loader)
