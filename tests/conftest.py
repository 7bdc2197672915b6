"""Pytest configuration and fixtures.

Provides environment isolation and shared builders for structures and
configs. Fixtures marked autouse apply to every test.
"""

from __future__ import annotations

import logging
import os

from hypothesis import HealthCheck, settings
import pytest

from layerconf import Config, MappingLoader, Structure

# Autouse env isolation below only deletes variables, so sharing it across
# hypothesis examples is safe.
settings.register_profile(
    "layerconf",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("layerconf")


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_layerconf_env(monkeypatch):
    """Clear LAYERCONF_* and APP_* variables so tests never see host settings."""
    for key in list(os.environ):
        if key.startswith(("LAYERCONF_", "APP_")):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(scope="session", autouse=True)
def verbose_layerconf_logging():
    """Exercise the DEBUG logging paths of the pipeline."""
    logging.getLogger("layerconf").setLevel(logging.DEBUG)


# =============================================================================
# Builders
# =============================================================================


@pytest.fixture
def structure() -> Structure:
    return Structure()


@pytest.fixture
def config(structure: Structure) -> Config:
    return Config(structure)


@pytest.fixture
def make_config(structure: Structure):
    """Build a Config over *structure* with one MappingLoader per mapping."""

    def _make(*layers, **kwargs) -> Config:
        cfg = Config(structure, **kwargs)
        for index, layer in enumerate(layers):
            cfg.add_loader(MappingLoader(layer, name=f"layer{index}"))
        return cfg

    return _make
