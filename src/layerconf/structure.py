# src/layerconf/structure.py

"""Declared configuration schema: an ordered key → type mapping."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .errors import TypeMismatchError
from .utils import normalize_key


class Structure:
    """Ordered mapping from key name to type capability.

    Keys are stored in their string form and keep insertion order.
    Redefining a key replaces its type but keeps its original position.

    Example:
        structure = Structure()
        structure.define("host", String(required=True))
        structure.define("port", Integer(ge=1, le=65535))
    """

    def __init__(self, members: Mapping[Any, Any] | None = None) -> None:
        self._members: dict[str, Any] = {}
        for key, type_ in (members or {}).items():
            self.define(key, type_)

    def define(self, key: object, type_: Any) -> None:
        """Register *type_* under the string form of *key*."""
        self._members[normalize_key(key)] = type_

    def members(self) -> Mapping[str, Any]:
        """Read-only view of the declared members, in declaration order."""
        return MappingProxyType(self._members)

    def get(self, key: object, default: Any = None) -> Any:
        return self._members.get(normalize_key(key), default)

    def value(self, raw: Any) -> dict[str, Any]:
        """Restrict *raw* to the declared keys, without converting values.

        Raises:
            TypeMismatchError: If *raw* is not a mapping.
        """
        if not isinstance(raw, Mapping):
            raise TypeMismatchError(
                f"Expected a mapping for structure value, got {type(raw).__name__}",
                value=raw,
            )
        normalized = {normalize_key(k): v for k, v in raw.items()}
        return {key: normalized[key] for key in self._members if key in normalized}

    def __contains__(self, key: object) -> bool:
        return normalize_key(key) in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self):
        return iter(self._members)

    def __repr__(self) -> str:
        return f"Structure({list(self._members)!r})"
