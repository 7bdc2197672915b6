# src/layerconf/types/containers.py

"""Composite types: lists, enumerated choices and nested structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import cached_property
from typing import TYPE_CHECKING, Literal
import typing as t

from pydantic import TypeAdapter, ValidationError

from layerconf.errors import LayerconfError, TypeMismatchError
from layerconf.unset import UNSET

from .base import Any, bind, type_name
from .scalars import first_error_message

if TYPE_CHECKING:
    from layerconf.recorder import ErrorRecorder
    from layerconf.structure import Structure

ListMerge = Literal["replace", "extend"]


class List(Any):
    """Homogeneous list.

    Strings are split on commas during conversion so that environment
    variables such as ``APP_HOSTS=a,b`` load naturally.

    Args:
        item_type: Type applied to each element.
        merge: ``"replace"`` (later loader wins) or ``"extend"`` (concatenate
            the lists supplied by successive loaders).
    """

    def __init__(
        self,
        item_type: t.Any = Any,
        *,
        merge: ListMerge = "replace",
        required: bool = False,
    ) -> None:
        if merge not in ("replace", "extend"):
            raise LayerconfError(
                f"Unknown list merge policy: {merge!r}",
                hint="Use 'replace' or 'extend'.",
            )
        self.item_type = item_type
        self.merge_policy = merge
        self.required = required

    @cached_property
    def _item(self):
        return bind(self.item_type)

    def convert(self, raw: t.Any) -> t.Any:
        if isinstance(raw, str):
            raw = [part.strip() for part in raw.split(",") if part.strip()]
        if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
            return [self._item.convert(item) for item in raw]
        return raw

    def merge(self, old: t.Any, new: t.Any) -> t.Any:
        if new is UNSET:
            return old
        if self.merge_policy == "replace":
            return new
        if old is UNSET or not isinstance(old, list) or not isinstance(new, list):
            return new
        return [*old, *new]

    def validate(self, errors: ErrorRecorder, value: t.Any) -> None:
        if value is UNSET:
            if self.required:
                errors.add("is required")
            return
        if not isinstance(value, list):
            errors.add(f"Input should be a valid list, got {type(value).__name__}")
            return
        for index, item in enumerate(value):
            with errors.focus(str(index)):
                self._item.validate(errors, item)

    def describe(self) -> str:
        return f"List[{type_name(self.item_type)}]"


class Choice(Any):
    """Value restricted to a fixed set of options."""

    def __init__(self, *options: t.Any, required: bool = False) -> None:
        if not options:
            raise LayerconfError("Choice needs at least one option")
        self.options = options
        self.required = required

    @cached_property
    def adapter(self) -> TypeAdapter[t.Any]:
        return TypeAdapter(Literal[self.options])

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
        return "Choice[" + ", ".join(repr(o) for o in self.options) + "]"


class Nested(Any):
    """A sub-structure used as a single value.

    Each member goes through its own type's convert/merge/validate, so
    precedence stays a per-key policy at every depth.
    """

    def __init__(self, structure: Structure, *, required: bool = False) -> None:
        self.structure = structure
        self.required = required

    def _members(self):
        return {key: bind(declared) for key, declared in self.structure.members().items()}

    def convert(self, raw: t.Any) -> t.Any:
        try:
            filtered = self.structure.value(raw)
        except TypeMismatchError:
            return raw
        members = self._members()
        return {
            key: (
                members[key].convert(filtered[key])
                if key in filtered
                else members[key].default()
            )
            for key in members
        }

    def merge(self, old: t.Any, new: t.Any) -> t.Any:
        if new is UNSET:
            return old
        if not isinstance(old, Mapping) or not isinstance(new, Mapping):
            return new
        merged = dict(old)
        for key, bound in self._members().items():
            if key in new:
                merged[key] = bound.merge(old[key], new[key]) if key in old else new[key]
        return merged

    def validate(self, errors: ErrorRecorder, value: t.Any) -> None:
        if value is UNSET:
            if self.required:
                errors.add("is required")
            return
        if not isinstance(value, Mapping):
            errors.add(f"Input should be a mapping, got {type(value).__name__}")
            return
        for key, bound in self._members().items():
            with errors.focus(key):
                bound.validate(errors, value.get(key, UNSET))

    def describe(self) -> str:
        return "Nested[" + ", ".join(self.structure.members()) + "]"
