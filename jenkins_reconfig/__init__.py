"""jenkins-reconfig - reshape flat Jenkins key/value configs into nested JSON"""

from ._version import version as __version__
from .deco import APPCONF, wrap_for_deco, write_deco_config
from .entries import ConfigEntry, load_flat_config, parse_flat_config
from .errors import ConfigError, MissingArgumentError, UnexpectedShapeError, UnreadableConfigError
from .key_mapping import KeyMapper, build_nested


__all__ = [
    "APPCONF",
    "ConfigEntry",
    "ConfigError",
    "KeyMapper",
    "MissingArgumentError",
    "UnexpectedShapeError",
    "UnreadableConfigError",
    "__version__",
    "build_nested",
    "load_flat_config",
    "parse_flat_config",
    "wrap_for_deco",
    "write_deco_config",
]
