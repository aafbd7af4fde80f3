"""Key mapping utilities for separator-delimited Jenkins keys."""

from __future__ import annotations


DEFAULT_SEP = "_"


class KeyMapper:
    """Split flat Jenkins keys into nested config paths."""

    def __init__(self, sep: str = DEFAULT_SEP) -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def split(self, key: str) -> tuple[str, ...]:
        """Convert a flat key into path segments; empty segments are kept."""
        return tuple(key.split(self.sep))
