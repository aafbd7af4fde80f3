"""Exceptions raised while reading and transforming Jenkins configs."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from os import PathLike


class ConfigError(ValueError):
    """Base error for a config file that cannot be processed."""

    def __init__(self, msg: str, path: str | PathLike[str] | None = None) -> None:
        super().__init__(msg)
        self.path = path


class MissingArgumentError(ConfigError):
    """No config file path was given."""


class UnreadableConfigError(ConfigError):
    """The config file could not be read or is not valid JSON."""


class UnexpectedShapeError(ConfigError):
    """The decoded document is not a flat array of key/value records."""
