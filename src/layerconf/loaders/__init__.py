"""Loader contract and built-in loaders."""

from .base import Loader, loader_name
from .env import EnvLoader
from .files import JsonFileLoader, TomlFileLoader, YamlFileLoader
from .mapping import MappingLoader

__all__ = [
    "EnvLoader",
    "JsonFileLoader",
    "Loader",
    "MappingLoader",
    "TomlFileLoader",
    "YamlFileLoader",
    "loader_name",
]
