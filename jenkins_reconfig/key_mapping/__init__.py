"""Key mapping and nested construction utilities."""

from .mapper import KeyMapper
from .nested import NestedConfig, assign_path, build_nested


__all__ = ["KeyMapper", "NestedConfig", "assign_path", "build_nested"]
