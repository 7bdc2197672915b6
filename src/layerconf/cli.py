# src/layerconf/cli.py

"""Minimal ``layerconf`` command line.

Example:
    layerconf show --key host:string --key port:integer \\
        --toml app.toml --env APP_
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import TYPE_CHECKING

from .audit import audit_text, to_redacted_dict
from .config import Config
from .errors import InvalidConfigurationError, LoaderLoadError
from .loaders import EnvLoader, JsonFileLoader, TomlFileLoader, YamlFileLoader
from .structure import Structure
from .types import Any, Boolean, Float, Integer, List, String

if TYPE_CHECKING:
    from collections.abc import Sequence

TYPE_NAMES = {
    "any": Any,
    "string": String,
    "integer": Integer,
    "float": Float,
    "boolean": Boolean,
    "list": List,
}

_LOADER_FLAGS = {
    "json": JsonFileLoader,
    "toml": TomlFileLoader,
    "yaml": YamlFileLoader,
    "env": EnvLoader,
}


class _AppendLoader(argparse.Action):
    """Collect loader flags in command-line order, which is precedence order."""

    def __call__(self, parser, namespace, values, option_string=None):  # noqa: D102
        sources = list(getattr(namespace, "sources", None) or [])
        sources.append((self.dest, values))
        namespace.sources = sources


def parse_key(spec: str) -> tuple[str, object]:
    """Parse ``NAME[:TYPE]`` into a key and a type instance."""
    name, _, kind = spec.partition(":")
    if not name:
        raise argparse.ArgumentTypeError(f"empty key name in {spec!r}")
    kind = (kind or "any").lower()
    if kind not in TYPE_NAMES:
        raise argparse.ArgumentTypeError(
            f"unknown type {kind!r} (choose from {', '.join(TYPE_NAMES)})"
        )
    return name, TYPE_NAMES[kind]()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("layerconf")
    sub = parser.add_subparsers(dest="cmd", required=True)
    show = sub.add_parser("show", help="load and print the merged configuration")
    show.add_argument(
        "--key",
        dest="keys",
        action="append",
        type=parse_key,
        default=[],
        metavar="NAME[:TYPE]",
        help="declare a key (repeatable)",
    )
    for flag in ("json", "toml", "yaml"):
        show.add_argument(f"--{flag}", dest=flag, action=_AppendLoader, metavar="PATH")
    show.add_argument("--env", dest="env", action=_AppendLoader, metavar="PREFIX")
    show.add_argument("--no-validate", action="store_true")
    show.add_argument("--audit", action="store_true", help="print provenance instead")
    return parser


def build_config(args: argparse.Namespace) -> Config:
    structure = Structure()
    for name, type_ in args.keys:
        structure.define(name, type_)
    config = Config(structure)
    for kind, value in getattr(args, "sources", None) or []:
        config.add_loader(_LOADER_FLAGS[kind](value))
    return config


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = build_config(args)

    try:
        settings, origins = config.load(not args.no_validate, explain=True)
    except InvalidConfigurationError as e:
        sys.stderr.write("Configuration didn't validate:\n")
        for key, messages in e.errors.items():
            for msg in messages:
                sys.stderr.write(f"  {key}: {msg}\n")
        return 1
    except LoaderLoadError as e:
        sys.stderr.write(f"{e}\n")
        if e.hint:
            sys.stderr.write(f"hint: {e.hint}\n")
        return 2

    if args.audit:
        sys.stdout.write(audit_text(settings, origins) + "\n")
    else:
        rendered = json.dumps(to_redacted_dict(settings), indent=2, default=str)
        sys.stdout.write(rendered + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
