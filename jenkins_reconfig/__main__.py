"""Interface for ``python -m jenkins_reconfig``."""

from __future__ import annotations

from argparse import ArgumentParser
from typing import TYPE_CHECKING

from . import decofy, reconfig
from ._version import version


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="jenkins_reconfig")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    subparsers = parser.add_subparsers(dest="command", required=True)
    _ = subparsers.add_parser("reconfig", help="print a flat config as nested JSON").add_argument(
        "config", nargs="?", help="Jenkins-generated JSON config file"
    )
    _ = subparsers.add_parser("decofy", help="rewrite a flat config file in Deco format").add_argument(
        "config", nargs="?", help="Jenkins-generated JSON config file, overwritten"
    )
    namespace = parser.parse_args(args)
    if namespace.command == "reconfig":
        return reconfig.run(namespace.config)
    return decofy.run(namespace.config)


if __name__ == "__main__":
    raise SystemExit(main())
