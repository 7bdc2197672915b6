# src/layerconf/errors.py

"""Exception hierarchy for layerconf."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class LayerconfError(Exception):
    """Base exception for all layerconf errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class TypeMismatchError(LayerconfError, TypeError):
    """A value of the wrong shape was given, e.g. a non-mapping to a structure."""

    def __init__(
        self, message: str, *, value: Any = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.value = value


class LoaderLoadError(LayerconfError):
    """A loader failed or returned something other than a mapping.

    Fatal to the whole ``load()`` call; no partial result is produced.
    """

    def __init__(
        self, message: str, *, loader: Any = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.loader = loader


class InvalidConfigurationError(LayerconfError):
    """Validation failed for one or more keys.

    Carries the full settings mapping and every recorded error at once so
    callers can report all problems in a single pass.
    """

    def __init__(
        self,
        config: Mapping[str, Any],
        errors: Mapping[str, Sequence[str]],
        message: str = "Configuration didn't validate.",
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.config = config
        self.errors = {key: list(msgs) for key, msgs in errors.items()}

    def __str__(self) -> str:
        lines = [super().__str__()]
        for key, messages in self.errors.items():
            lines.extend(f"  {key}: {msg}" for msg in messages)
        return "\n".join(lines)
