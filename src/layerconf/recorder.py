# src/layerconf/recorder.py

"""Error recorder used during a single validation pass."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from .errors import LayerconfError

if TYPE_CHECKING:
    from collections.abc import Generator


class ErrorRecorder:
    """Collects per-key validation messages.

    A key appears in :attr:`errors` only once a message has been recorded for
    it, and keys keep the order in which they were first recorded.

    Types receive the recorder without being told their key. The pipeline
    wraps each call in :meth:`focus`, and the type reports through
    :meth:`add`. Nested focus joins segments with ``"."``.
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}
        self._path: list[str] = []

    def record(self, key: str, message: str) -> None:
        """Append *message* to the sequence for *key*."""
        self._errors.setdefault(key, []).append(message)

    def add(self, message: str) -> None:
        """Record *message* under the currently focused key."""
        if not self._path:
            raise LayerconfError(
                "No key is focused on this recorder",
                hint="Use record(key, message) or wrap the call in focus(key).",
            )
        self.record(self.current_key, message)

    @property
    def current_key(self) -> str | None:
        """Dotted path of the focused key, or None outside any focus."""
        return ".".join(self._path) if self._path else None

    @contextmanager
    def focus(self, key: str) -> Generator[ErrorRecorder]:
        """Scope :meth:`add` calls to *key*, relative to any enclosing focus."""
        self._path.append(str(key))
        try:
            yield self
        finally:
            self._path.pop()

    def is_empty(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> dict[str, list[str]]:
        """Copy of the key → messages mapping."""
        return {key: list(msgs) for key, msgs in self._errors.items()}

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ErrorRecorder({self._errors!r})"
