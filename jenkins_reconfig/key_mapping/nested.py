"""Nested config construction from separator-delimited key paths."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeAlias

from .mapper import KeyMapper


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from jenkins_reconfig.entries import ConfigEntry


logger = logging.getLogger(__name__)

NestedConfig: TypeAlias = dict[str, Any]


class _Branch(dict[str, Any]):
    """Mapping created while descending a key path.

    Only these are descended into; any other value, including a
    dict-valued entry, is a leaf.
    """


def assign_path(tree: NestedConfig, path: Sequence[str], value: Any) -> None:
    """Set ``value`` at ``path`` inside ``tree``, creating mappings on the way.

    Conflicts resolve as last write wins: a leaf that sits where a mapping is
    needed is replaced by an empty mapping, and a subtree that sits where the
    leaf goes is replaced by the leaf.
    """
    if not path:
        msg = "path must contain at least one segment"
        raise ValueError(msg)

    node = tree
    for segment in path[:-1]:
        child = node.get(segment)
        if not isinstance(child, _Branch):
            if segment in node:
                logger.debug("replacing leaf %r with a mapping", segment)
            child = _Branch()
            node[segment] = child
        node = child
    node[path[-1]] = value


def build_nested(entries: Iterable[ConfigEntry], mapper: KeyMapper | None = None) -> NestedConfig:
    """Build a nested config from flat entries, processed in input order."""
    mapper = mapper or KeyMapper()
    tree: NestedConfig = {}
    for entry in entries:
        assign_path(tree, mapper.split(entry.key), entry.value)
    return tree
