# src/layerconf/config.py

"""Load pipeline: a structure plus an ordered list of loaders.

``Config.load()`` folds the loaders in registration order. For every declared
key it converts the loader's raw value (or takes the type's default) and
merges it into what earlier loaders produced. The merge is a per-key policy
owned by the type, so precedence is decided key by key rather than globally.
The accumulated settings are then validated in one pass that surfaces every
invalid key at once.

Example:
    structure = Structure()
    structure.define("host", String(required=True))
    structure.define("port", Integer(ge=1))

    config = Config(structure)
    config.add_loader(TomlFileLoader("app.toml"))
    config.add_loader(EnvLoader("APP_"))

    settings = config.load()
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import suppress
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Literal, overload
import warnings

from .errors import InvalidConfigurationError, LayerconfError, LoaderLoadError
from .loaders.base import loader_name
from .recorder import ErrorRecorder
from .types.base import bind
from .unset import UNSET
from .utils import normalize_key, should_emit_debug

if TYPE_CHECKING:
    from collections.abc import Callable

    from .loaders.base import Loader
    from .structure import Structure
    from .types.base import BoundType

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyOrigin:
    """Which loaders supplied a key, in the order they ran.

    An empty ``loaders`` tuple means the value came from the type's default.
    """

    loaders: tuple[str, ...] = ()

    @property
    def defaulted(self) -> bool:
        return not self.loaders


OriginMap = dict[str, KeyOrigin]


class Config:
    """A root structure together with its ordered loaders.

    Loader order defines precedence: a key supplied by several loaders is
    resolved by its type's ``merge``, which by default lets the later loader
    win.

    Args:
        structure: Root structure; may be assigned later via ``config.structure``.
        result_class: Optional wrapper, called as ``result_class(config, settings)``
            on the loaded settings before they are returned.
    """

    def __init__(
        self,
        structure: Structure | None = None,
        *,
        result_class: Callable[[Config, dict[str, Any]], Any] | None = None,
    ) -> None:
        self.structure = structure
        self.result_class = result_class
        self._loaders: list[Loader] = []

    @property
    def loaders(self) -> tuple[Loader, ...]:
        return tuple(self._loaders)

    def add_loader(self, loader: Loader) -> None:
        """Append *loader*; later loaders take precedence."""
        self._loaders.append(loader)

    @overload
    def load(
        self, validate: bool = ..., *, explain: Literal[False] = ...
    ) -> Any: ...

    @overload
    def load(
        self, validate: bool = ..., *, explain: Literal[True]
    ) -> tuple[Any, OriginMap]: ...

    def load(self, validate: bool = True, *, explain: bool = False) -> Any:
        """Run every loader and return the merged settings.

        With no loaders the result is empty, even for a populated structure:
        defaults are only filled in while a loader is being applied.

        Args:
            validate: Run the validation pass before returning.
            explain: Also return an :data:`OriginMap` of which loaders supplied
                each key.

        Returns:
            The settings mapping (wrapped by ``result_class`` when set), or a
            ``(settings, origins)`` tuple when *explain* is True.

        Raises:
            LoaderLoadError: A loader raised or returned a non-mapping.
            InvalidConfigurationError: Validation recorded at least one error.
        """
        members = self._bound_members()
        settings: dict[str, Any] = {}
        supplied: dict[str, list[str]] = {}

        for loader in self._loaders:
            name = loader_name(loader)
            raw = self._run_loader(loader, name)

            count = 0
            for key, bound in members.items():
                if key in raw:
                    value = bound.convert(raw[key])
                    supplied.setdefault(key, []).append(name)
                    count += 1
                else:
                    value = bound.default()

                if key in settings:
                    settings[key] = bound.merge(settings[key], value)
                else:
                    settings[key] = value
                supplied.setdefault(key, [])

            log.debug("Loader %s supplied %d of %d keys", name, count, len(members))
            if log.isEnabledFor(logging.DEBUG):
                ignored = sorted(k for k in raw if k not in members)
                if ignored:
                    log.debug("Loader %s: ignoring undeclared keys %s", name, ignored)

        origins = {key: KeyOrigin(tuple(names)) for key, names in supplied.items()}

        if validate:
            self._validate(settings, members)

        if not explain and should_emit_debug():
            from .audit import audit_lines

            with suppress(Exception):
                warnings.warn(
                    "Config audit (redacted)\n"
                    + "\n".join(audit_lines(settings, origins)),
                    stacklevel=2,
                )

        result = (
            self.result_class(self, settings) if self.result_class else settings
        )
        return (result, origins) if explain else result

    def validate(self, settings: Mapping[str, Any]) -> None:
        """Check *settings* against the structure.

        Keys missing from *settings* are validated as ``UNSET``.

        Raises:
            InvalidConfigurationError: Carrying *settings* and every recorded
                error if any key failed.
        """
        self._validate(settings, self._bound_members())

    # --- Internal helpers ---

    def _bound_members(self) -> dict[str, BoundType]:
        if self.structure is None:
            raise LayerconfError(
                "Config has no structure",
                hint="Pass a Structure to Config(...) or assign config.structure.",
            )
        return {key: bind(declared) for key, declared in self.structure.members().items()}

    def _run_loader(self, loader: Loader, name: str) -> dict[str, Any]:
        log.debug("Running loader %s", name)
        try:
            raw = loader.load(self.structure)
        except LoaderLoadError:
            raise
        except Exception as e:
            raise LoaderLoadError(
                f"Loader '{name}' failed: {e}", loader=loader
            ) from e
        if not isinstance(raw, Mapping):
            raise LoaderLoadError(
                f"Loader '{name}' did not return a mapping for `load` "
                f"(got {type(raw).__name__})",
                loader=loader,
            )
        return {normalize_key(k): v for k, v in raw.items()}

    def _validate(
        self, settings: Mapping[str, Any], members: Mapping[str, BoundType]
    ) -> None:
        errors = ErrorRecorder()
        for key, bound in members.items():
            with errors.focus(key):
                bound.validate(errors, settings.get(key, UNSET))

        if not errors.is_empty():
            log.warning(
                "Configuration invalid: %d key(s) failed validation (%s)",
                len(errors),
                ", ".join(errors.errors),
            )
            raise InvalidConfigurationError(dict(settings), errors.errors)
