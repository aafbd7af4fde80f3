"""Flat Jenkins config records and loading of the input document."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from .errors import MissingArgumentError, UnexpectedShapeError, UnreadableConfigError


if TYPE_CHECKING:
    from os import PathLike


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConfigEntry:
    """One ``{"key": ..., "value": ...}`` record from the flat array."""

    key: str
    value: Any


FlatConfig: TypeAlias = list[ConfigEntry]


def parse_flat_config(document: Any, path: str | PathLike[str] | None = None) -> FlatConfig:
    """Validate a decoded JSON document and return its entries in input order.

    Parameters
    ----------
    document
        Value produced by ``json.load``. Must be a list of objects that each
        carry a string ``key`` and a ``value``.
    path
        Source file, only used to annotate raised errors.
    """
    if not isinstance(document, list):
        msg = f"expected a JSON array at top level, got {type(document).__name__}"
        raise UnexpectedShapeError(msg, path)

    entries: FlatConfig = []
    for index, item in enumerate(document):
        if not isinstance(item, dict):
            msg = f"entry {index} is not an object"
            raise UnexpectedShapeError(msg, path)
        if "key" not in item or "value" not in item:
            msg = f"entry {index} must have 'key' and 'value' members"
            raise UnexpectedShapeError(msg, path)
        key = item["key"]
        if not isinstance(key, str):
            msg = f"entry {index} has a non-string key: {key!r}"
            raise UnexpectedShapeError(msg, path)
        entries.append(ConfigEntry(key=key, value=item["value"]))
    return entries


def load_flat_config(path: str | PathLike[str] | None) -> FlatConfig:
    """Read and validate a Jenkins-generated flat config file.

    A ``None`` path raises ``MissingArgumentError`` before any file access.
    """
    if path is None:
        msg = "No config file specified!"
        raise MissingArgumentError(msg)

    try:
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("failed to read config file %s", path, exc_info=True)
        msg = f"cannot read config file {path}: {exc}"
        raise UnreadableConfigError(msg, path) from exc

    entries = parse_flat_config(document, path)
    logger.debug("loaded %d entries from %s", len(entries), path)
    return entries
