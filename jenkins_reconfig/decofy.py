"""Rewrite a Jenkins-generated flat config in place for Deco to consume."""

from __future__ import annotations

from argparse import ArgumentParser
from typing import TYPE_CHECKING

from .deco import wrap_for_deco, write_deco_config
from .entries import load_flat_config
from .errors import ConfigError, MissingArgumentError


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["build_parser", "main", "run"]


def build_parser(prog: str | None = "decofy") -> ArgumentParser:
    """Argument parser for the ``decofy`` command."""
    parser = ArgumentParser(prog=prog, description="Rewrite a flat Jenkins config file in Deco format.")
    _ = parser.add_argument("config", nargs="?", help="Jenkins-generated JSON config file, overwritten")
    return parser


def run(config: str | None) -> int:
    """Rewrite ``config`` in Deco format and return the exit status."""
    try:
        entries = load_flat_config(config)
    except MissingArgumentError as exc:
        print(exc)
        return 1
    except ConfigError:
        print(f"Cannot process config file {config}, aborting!")
        return 1

    print(f"Rewriting {config} in Deco format ...")
    write_deco_config(config, wrap_for_deco(entries))
    return 0


def main(args: Sequence[str] | None = None) -> int:
    """Entry point for the ``decofy`` console script."""
    namespace = build_parser().parse_args(args)
    return run(namespace.config)


if __name__ == "__main__":
    raise SystemExit(main())
