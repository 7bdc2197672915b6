"""JSON, TOML and YAML file loaders."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from layerconf import (
    JsonFileLoader,
    LoaderLoadError,
    Structure,
    TomlFileLoader,
    YamlFileLoader,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def empty() -> Structure:
    return Structure()


def test_json(tmp_path: Path, empty: Structure) -> None:
    path = tmp_path / "app.json"
    path.write_text(json.dumps({"host": "h", "port": 80}), encoding="utf-8")

    assert JsonFileLoader(path).load(empty) == {"host": "h", "port": 80}


def test_yaml(tmp_path: Path, empty: Structure) -> None:
    path = tmp_path / "app.yaml"
    path.write_text("host: h\nports:\n  - 80\n  - 443\n", encoding="utf-8")

    assert YamlFileLoader(path).load(empty) == {"host": "h", "ports": [80, 443]}


def test_toml_top_level(tmp_path: Path, empty: Structure) -> None:
    path = tmp_path / "app.toml"
    path.write_text('host = "h"\nport = 80\n', encoding="utf-8")

    assert TomlFileLoader(path).load(empty) == {"host": "h", "port": 80}


def test_toml_nested_table(tmp_path: Path, empty: Structure) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.myapp]\nhost = "h"\n', encoding="utf-8"
    )
    loader = TomlFileLoader(path, table=("tool", "myapp"))

    assert loader.load(empty) == {"host": "h"}
    assert loader.name.endswith("[tool.myapp]")


def test_toml_missing_table_is_empty(tmp_path: Path, empty: Structure) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert TomlFileLoader(path, table=("tool", "myapp")).load(empty) == {}


@pytest.mark.parametrize("loader_cls", [JsonFileLoader, TomlFileLoader, YamlFileLoader])
def test_missing_optional_file_is_empty(
    tmp_path: Path, empty: Structure, loader_cls
) -> None:
    assert loader_cls(tmp_path / "absent").load(empty) == {}


@pytest.mark.parametrize("loader_cls", [JsonFileLoader, TomlFileLoader, YamlFileLoader])
def test_missing_required_file_raises(
    tmp_path: Path, empty: Structure, loader_cls
) -> None:
    loader = loader_cls(tmp_path / "absent", required=True)

    with pytest.raises(LoaderLoadError) as exc:
        loader.load(empty)

    assert exc.value.loader is loader
    assert exc.value.hint


@pytest.mark.parametrize("loader_cls", [JsonFileLoader, YamlFileLoader])
def test_empty_document_is_empty(tmp_path: Path, empty: Structure, loader_cls) -> None:
    path = tmp_path / "blank"
    path.write_text("\n", encoding="utf-8")

    assert loader_cls(path).load(empty) == {}


def test_malformed_json_raises(tmp_path: Path, empty: Structure) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        JsonFileLoader(path).load(empty)


def test_non_mapping_top_level_is_returned_as_is(
    tmp_path: Path, empty: Structure
) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    assert YamlFileLoader(path).load(empty) == ["a", "b"]
