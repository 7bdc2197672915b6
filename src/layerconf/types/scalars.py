# src/layerconf/types/scalars.py

"""Scalar types backed by pydantic.

Conversion runs pydantic in lax mode so that strings from environment
variables or CLI flags become the canonical value (``"8080"`` → ``8080``).
Validation runs in strict mode and records pydantic's own message. A value
that cannot be converted is passed through unchanged so that ``validate``
reports it instead of the pipeline raising mid-load.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Annotated
import typing as t

from pydantic import Field, TypeAdapter, ValidationError

from layerconf.unset import UNSET

from .base import Any

if TYPE_CHECKING:
    from layerconf.recorder import ErrorRecorder


def first_error_message(exc: ValidationError) -> str:
    """Return pydantic's first error message, without the generic prefix."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    msg = str(errors[0].get("msg", exc))
    # Remove "Value error, " prefix if present (Pydantic standard wrapper)
    if msg.startswith("Value error, "):
        msg = msg[13:]
    return msg


class Scalar(Any):
    """Base for single-valued types.

    A later loader that does not supply the key keeps the earlier value;
    defaults belong in a first loader layer rather than on the type.

    Args:
        required: Record an error when no loader supplied the key.
    """

    python_type: t.ClassVar[type] = object

    def __init__(self, *, required: bool = False) -> None:
        self.required = required

    def constraints(self) -> dict[str, t.Any]:
        """Keyword arguments for :func:`pydantic.Field`; empty by default."""
        return {}

    @cached_property
    def coercer(self) -> TypeAdapter[t.Any]:
        """Unconstrained adapter; bounds are checked by validate, not convert."""
        return TypeAdapter(self.python_type)

    @cached_property
    def adapter(self) -> TypeAdapter[t.Any]:
        constraints = {k: v for k, v in self.constraints().items() if v is not None}
        if constraints:
            return TypeAdapter(Annotated[self.python_type, Field(**constraints)])
        return TypeAdapter(self.python_type)

    def convert(self, raw: t.Any) -> t.Any:
        if raw is UNSET:
            return raw
        try:
            return self.coercer.validate_python(raw)
        except ValidationError:
            return raw

    def merge(self, old: t.Any, new: t.Any) -> t.Any:
        return old if new is UNSET else new

    def validate(self, errors: ErrorRecorder, value: t.Any) -> None:
        if value is UNSET:
            if self.required:
                errors.add("is required")
            return
        try:
            self.adapter.validate_python(value, strict=True)
        except ValidationError as e:
            errors.add(first_error_message(e))

    def describe(self) -> str:
        name = type(self).__name__
        return f"{name} (required)" if self.required else name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(required={self.required!r})"


class String(Scalar):
    python_type = str

    def __init__(
        self,
        *,
        required: bool = False,
        min_length: int | None = None,
        max_length: int | None = None,
        pattern: str | None = None,
    ) -> None:
        super().__init__(required=required)
        self.min_length = min_length
        self.max_length = max_length
        self.pattern = pattern

    def constraints(self) -> dict[str, t.Any]:
        return {
            "min_length": self.min_length,
            "max_length": self.max_length,
            "pattern": self.pattern,
        }


class _Number(Scalar):
    def __init__(
        self,
        *,
        required: bool = False,
        ge: float | None = None,
        le: float | None = None,
    ) -> None:
        super().__init__(required=required)
        self.ge = ge
        self.le = le

    def constraints(self) -> dict[str, t.Any]:
        return {"ge": self.ge, "le": self.le}


class Integer(_Number):
    python_type = int


class Float(_Number):
    python_type = float


class Boolean(Scalar):
    """Boolean; accepts ``1/0``, ``true/false``, ``yes/no``, ``on/off`` on conversion."""

    python_type = bool
