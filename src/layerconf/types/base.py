# src/layerconf/types/base.py

"""Type capability contract and the ``Any`` built-in.

Every value type offers four operations: ``convert``, ``default``,
``merge`` and ``validate``. A declared type may implement any subset;
:func:`bind` fills the gaps from :class:`Any`. The pipeline never looks at a
type's concrete kind.
"""

from __future__ import annotations

from dataclasses import dataclass
import inspect
from typing import TYPE_CHECKING, Protocol, runtime_checkable
import typing as t

from layerconf.unset import UNSET

if TYPE_CHECKING:
    from collections.abc import Callable

    from layerconf.recorder import ErrorRecorder


@runtime_checkable
class TypeCapability(Protocol):
    """Full four-operation contract (concrete types may implement a subset)."""

    def convert(self, raw: t.Any) -> t.Any: ...

    def default(self) -> t.Any: ...

    def merge(self, old: t.Any, new: t.Any) -> t.Any: ...

    def validate(self, errors: ErrorRecorder, value: t.Any) -> None: ...


class Any:
    """Degenerate type: identity conversion, UNSET default, last wins, always valid."""

    def convert(self, raw: t.Any) -> t.Any:
        return raw

    def default(self) -> t.Any:
        return UNSET

    def merge(self, old: t.Any, new: t.Any) -> t.Any:
        return new

    def validate(self, errors: ErrorRecorder, value: t.Any) -> None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


_ANY = Any()

_OPERATIONS = ("convert", "default", "merge", "validate")


@dataclass(frozen=True)
class BoundType:
    """A declared type with every operation resolved (own or ``Any`` fallback)."""

    source: t.Any
    convert: Callable[[t.Any], t.Any]
    default: Callable[[], t.Any]
    merge: Callable[[t.Any, t.Any], t.Any]
    validate: Callable[[ErrorRecorder, t.Any], None]


def bind(declared: t.Any) -> BoundType:
    """Resolve the four operations of *declared*.

    Classes are instantiated with no arguments first, so both ``String`` and
    ``String(required=True)`` may be declared.
    """
    target = declared() if inspect.isclass(declared) else declared
    ops = {}
    for name in _OPERATIONS:
        op = getattr(target, name, None)
        ops[name] = op if callable(op) else getattr(_ANY, name)
    return BoundType(source=target, **ops)


def type_name(declared: t.Any) -> str:
    """Human-readable name of a declared type, for docs and audits."""
    if inspect.isclass(declared):
        return declared.__name__
    describe = getattr(declared, "describe", None)
    if callable(describe):
        return str(describe())
    return type(declared).__name__
