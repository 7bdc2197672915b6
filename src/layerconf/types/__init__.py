"""Type capabilities: the ``Any`` built-in plus a small catalog.

The pipeline only ever calls ``convert``, ``default``, ``merge`` and
``validate``; anything implementing a subset of those can be declared.
"""

from .base import Any, BoundType, TypeCapability, bind, type_name
from .containers import Choice, List, Nested
from .scalars import Boolean, Float, Integer, Scalar, String

__all__ = [
    "Any",
    "Boolean",
    "BoundType",
    "Choice",
    "Float",
    "Integer",
    "List",
    "Nested",
    "Scalar",
    "String",
    "TypeCapability",
    "bind",
    "type_name",
]
