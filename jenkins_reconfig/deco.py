"""Deco filter wrapping of flat Jenkins configs."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TypeAlias


if TYPE_CHECKING:
    from collections.abc import Iterable
    from os import PathLike

    from .entries import ConfigEntry


logger = logging.getLogger(__name__)

# application config file that Deco substitutes parameters into
APPCONF = "config/config.json"
FILTERS_KEY = "filters"

DecoConfig: TypeAlias = dict[str, dict[str, dict[str, Any]]]


def wrap_for_deco(entries: Iterable[ConfigEntry]) -> DecoConfig:
    """Flatten entries into one mapping under ``filters -> APPCONF``.

    Keys are used verbatim; a repeated key keeps its last value.
    """
    values = {entry.key: entry.value for entry in entries}
    return {FILTERS_KEY: {APPCONF: values}}


def write_deco_config(path: str | PathLike[str], deco: DecoConfig) -> None:
    """Overwrite ``path`` with the indented JSON form of ``deco``."""
    with open(path, "w", encoding="utf-8") as handle:
        _ = handle.write(json.dumps(deco, indent=2, ensure_ascii=False) + "\n")
    logger.debug("wrote %d filter values to %s", len(deco[FILTERS_KEY][APPCONF]), path)
