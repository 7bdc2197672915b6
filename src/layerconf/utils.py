# src/layerconf/utils.py

"""Shared helpers with no intra-package imports.

Holds the library's own environment toggles, key normalisation and the
sensitive-key heuristic used for redaction.
"""

from __future__ import annotations

import os

# --- Constants ---

DEBUG_CONFIG_VAR = "LAYERCONF_DEBUG_CONFIG"

_TRUTHY = {"1", "true", "yes", "on"}


def normalize_key(key: object) -> str:
    """Return the string form used to store and look up structure keys."""
    if isinstance(key, str):
        return key
    # Enum members normalise to their value, like symbols to their name.
    value = getattr(key, "value", None)
    if isinstance(value, str):
        return value
    return str(key)


def should_emit_debug() -> bool:
    """Return True when the debug audit is enabled via environment.

    Stateless so it is safe to call from any thread; the warnings machinery
    handles de-duplication per call site.
    """
    return os.environ.get(DEBUG_CONFIG_VAR, "").strip().lower() in _TRUTHY


# --- Sensitive Key Utilities ---

SENSITIVE_KEYS = {
    "api_key",
    "apikey",
    "token",
    "secret",
    "password",
    "passwd",
    "access_key",
    "client_secret",
}


def is_sensitive_field_key(name: str) -> bool:
    """Return True if a key name is considered sensitive for logging."""
    lower = name.lower()
    return any(token in lower for token in SENSITIVE_KEYS)
