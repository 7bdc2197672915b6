"""Test doubles shared across the suite."""

from __future__ import annotations

from typing import Any

from layerconf.recorder import ErrorRecorder


class SmallestNumber:
    """Type that keeps the smaller of two values and implements nothing else."""

    def merge(self, old: Any, new: Any) -> Any:
        return min(old, new)


class AlwaysInvalid:
    """Type whose validation always fails with a fixed message."""

    def __init__(self, message: str = "is invalid") -> None:
        self.message = message

    def validate(self, errors: ErrorRecorder, value: Any) -> None:
        errors.add(self.message)


class RecordingLoader:
    """Loader returning a fixed value and counting its calls."""

    def __init__(self, data: Any, *, name: str = "recording") -> None:
        self.data = data
        self.name = name
        self.calls = 0
        self.structures: list[Any] = []

    def load(self, structure: Any) -> Any:
        self.calls += 1
        self.structures.append(structure)
        return self.data


class ExplodingLoader:
    """Loader that raises from ``load``."""

    name = "exploding"

    def __init__(self, exc: BaseException | None = None) -> None:
        self.exc = exc or RuntimeError("disk on fire")

    def load(self, structure: Any) -> Any:
        raise self.exc
