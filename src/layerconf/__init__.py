"""layerconf: schema-driven configuration aggregation.

Declare the expected keys and their types in a :class:`Structure`, register
an ordered list of loaders on a :class:`Config`, and call ``load()`` for the
merged, validated settings.

Public API:
    - Structure: Declared key → type schema
    - Config: Load/validate pipeline
    - UNSET: Sentinel for keys no loader supplied
    - types / loaders: Built-in type capabilities and sources
"""

from __future__ import annotations

import logging

from layerconf.audit import audit_lines, audit_text, describe, to_redacted_dict
from layerconf.config import Config, KeyOrigin, OriginMap
from layerconf.errors import (
    InvalidConfigurationError,
    LayerconfError,
    LoaderLoadError,
    TypeMismatchError,
)
from layerconf.loaders import (
    EnvLoader,
    JsonFileLoader,
    Loader,
    MappingLoader,
    TomlFileLoader,
    YamlFileLoader,
)
from layerconf.recorder import ErrorRecorder
from layerconf.structure import Structure
from layerconf.unset import UNSET, is_unset

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("layerconf")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("layerconf").addHandler(logging.NullHandler())

__all__ = [
    "UNSET",
    "Config",
    "EnvLoader",
    "ErrorRecorder",
    "InvalidConfigurationError",
    "JsonFileLoader",
    "KeyOrigin",
    "LayerconfError",
    "Loader",
    "LoaderLoadError",
    "MappingLoader",
    "OriginMap",
    "Structure",
    "TomlFileLoader",
    "TypeMismatchError",
    "YamlFileLoader",
    "audit_lines",
    "audit_text",
    "describe",
    "is_unset",
    "to_redacted_dict",
]
