"""MappingLoader and EnvLoader."""

from __future__ import annotations

from pathlib import Path

import pytest

from layerconf import (
    Config,
    EnvLoader,
    Loader,
    LoaderLoadError,
    MappingLoader,
    Structure,
)
from layerconf.loaders import loader_name
from layerconf.types import Any

pytestmark = pytest.mark.unit


@pytest.fixture
def server() -> Structure:
    return Structure({"host": Any, "port": Any})


class TestMappingLoader:
    def test_returns_a_copy(self, server: Structure) -> None:
        data = {"host": "h"}
        loader = MappingLoader(data)

        loaded = loader.load(server)
        loaded["host"] = "changed"

        assert data == {"host": "h"}

    def test_satisfies_loader_protocol(self) -> None:
        assert isinstance(MappingLoader({}), Loader)

    def test_name(self) -> None:
        assert loader_name(MappingLoader({}, name="defaults")) == "defaults"
        assert loader_name(MappingLoader({})) == "mapping"

    def test_non_mapping_data_is_returned_as_is(self, server: Structure) -> None:
        pairs = [("host", "h")]

        assert MappingLoader(pairs).load(server) is pairs


def test_non_mapping_data_fails_the_load(server: Structure) -> None:
    config = Config(server)
    config.add_loader(MappingLoader([("host", "h")]))

    with pytest.raises(LoaderLoadError, match="did not return a mapping"):
        config.load()


def test_loader_name_falls_back_to_repr() -> None:
    class Bare:
        def __repr__(self) -> str:
            return "<bare>"

    assert loader_name(Bare()) == "<bare>"


class TestEnvLoader:
    def test_reads_prefixed_upper_case_names(self, server: Structure) -> None:
        loader = EnvLoader("APP_", environ={"APP_HOST": "h", "APP_PORT": "80"})

        assert loader.load(server) == {"host": "h", "port": "80"}

    def test_only_declared_keys_are_read(self, server: Structure) -> None:
        loader = EnvLoader("APP_", environ={"APP_HOST": "h", "APP_OTHER": "x"})

        assert loader.load(server) == {"host": "h"}

    def test_reads_os_environ_by_default(
        self, server: Structure, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APP_PORT", "9000")

        assert EnvLoader("APP_").load(server) == {"port": "9000"}

    def test_no_prefix(self, server: Structure) -> None:
        assert EnvLoader(environ={"HOST": "h"}).load(server) == {"host": "h"}

    def test_dotenv_values_are_used_and_environment_wins(
        self, server: Structure, tmp_path: Path
    ) -> None:
        dotenv = tmp_path / ".env"
        dotenv.write_text("APP_HOST=from-file\nAPP_PORT=1\n", encoding="utf-8")
        loader = EnvLoader("APP_", environ={"APP_PORT": "2"}, dotenv_path=dotenv)

        assert loader.load(server) == {"host": "from-file", "port": "2"}

    def test_dotenv_does_not_modify_os_environ(
        self, server: Structure, tmp_path: Path
    ) -> None:
        import os

        dotenv = tmp_path / ".env"
        dotenv.write_text("APP_HOST=from-file\n", encoding="utf-8")

        EnvLoader("APP_", dotenv_path=dotenv).load(server)

        assert "APP_HOST" not in os.environ

    def test_missing_dotenv_is_ignored(self, server: Structure, tmp_path: Path) -> None:
        loader = EnvLoader("APP_", environ={}, dotenv_path=tmp_path / "absent.env")

        assert loader.load(server) == {}

    def test_valueless_dotenv_entries_are_skipped(
        self, server: Structure, tmp_path: Path
    ) -> None:
        dotenv = tmp_path / ".env"
        dotenv.write_text("APP_HOST\n", encoding="utf-8")

        assert EnvLoader("APP_", environ={}, dotenv_path=dotenv).load(server) == {}

    def test_name(self) -> None:
        assert EnvLoader("APP_").name == "env:APP_*"
        assert EnvLoader().name == "env"
