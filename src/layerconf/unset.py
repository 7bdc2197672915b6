# src/layerconf/unset.py

"""The UNSET sentinel.

``UNSET`` marks a key that no loader supplied. It is distinct from every real
configuration value, including ``None``, ``""`` and ``False``.
"""

from __future__ import annotations

from typing import Any, Final, Self


class _UnsetType:
    """Singleton type of :data:`UNSET`."""

    _instance: _UnsetType | None = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    # Identity must survive copies and pickling.
    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Final = _UnsetType()


def is_unset(value: object) -> bool:
    """Return True if *value* is the UNSET sentinel."""
    return value is UNSET
