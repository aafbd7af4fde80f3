"""Convert a Jenkins-generated flat config into nested JSON on stdout.

For example, this flat config::

    [
        {"key": "accounts_test_region", "value": "us-east-1"},
        {"key": "accounts_test_key", "value": "KEY"},
        {"key": "port", "value": "8080"}
    ]

is printed as::

    {
      "accounts": {
        "test": {
          "region": "us-east-1",
          "key": "KEY"
        }
      },
      "port": "8080"
    }
"""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import TYPE_CHECKING

from .entries import load_flat_config
from .errors import ConfigError, MissingArgumentError
from .key_mapping import KeyMapper, build_nested


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["SEP", "build_parser", "main", "run"]

# separator character
SEP = "_"


def build_parser(prog: str | None = "reconfig") -> ArgumentParser:
    """Argument parser for the ``reconfig`` command."""
    parser = ArgumentParser(prog=prog, description="Print a flat Jenkins config as nested JSON.")
    _ = parser.add_argument("config", nargs="?", help="Jenkins-generated JSON config file")
    return parser


def run(config: str | None) -> int:
    """Print the nested form of ``config`` and return the exit status."""
    try:
        entries = load_flat_config(config)
    except MissingArgumentError as exc:
        print(exc)
        return 1
    except ConfigError:
        print(f"Cannot process config file {config}, aborting!")
        return 1

    nested = build_nested(entries, KeyMapper(SEP))
    print(json.dumps(nested, indent=2, ensure_ascii=False))
    return 0


def main(args: Sequence[str] | None = None) -> int:
    """Entry point for the ``reconfig`` console script."""
    namespace = build_parser().parse_args(args)
    return run(namespace.config)


if __name__ == "__main__":
    raise SystemExit(main())
