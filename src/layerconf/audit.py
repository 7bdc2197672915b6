# src/layerconf/audit.py

"""Redacted views and provenance lines for loaded settings.

Secrets are never printed: keys that look sensitive are masked in every
helper here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .types.base import type_name
from .unset import UNSET
from .utils import is_sensitive_field_key

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .config import KeyOrigin
    from .structure import Structure

REDACTED = "***redacted***"


def to_redacted_dict(settings: Mapping[str, Any]) -> dict[str, Any]:
    """Plain dict safe for structured logging; ``UNSET`` becomes ``None``."""

    def _clean(key: str, value: Any) -> Any:
        if value is UNSET:
            return None
        if is_sensitive_field_key(key):
            return REDACTED
        if isinstance(value, dict):
            return {k: _clean(f"{key}.{k}", v) for k, v in value.items()}
        return value

    return {key: _clean(key, value) for key, value in settings.items()}


def audit_lines(
    settings: Mapping[str, Any], origins: Mapping[str, KeyOrigin]
) -> list[str]:
    """One line per key naming the loaders that supplied it (or ``default``)."""
    lines: list[str] = []
    for key in settings:
        where = origins.get(key)
        label = ", ".join(where.loaders) if where and where.loaders else "default"
        redaction = " [REDACTED]" if is_sensitive_field_key(key) else ""
        lines.append(f"{key}: {label}{redaction}")
    return lines


def audit_text(
    settings: Mapping[str, Any], origins: Mapping[str, KeyOrigin]
) -> str:
    """Format audit as a single string suitable for printing/logging."""
    return "\n".join(audit_lines(settings, origins))


def describe(structure: Structure) -> list[str]:
    """Documentation lines: ``key: TypeName`` in declaration order."""
    return [f"{key}: {type_name(declared)}" for key, declared in structure.members().items()]
