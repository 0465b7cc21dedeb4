"""
pompot.config - Configuration loading and defaults
"""

from pompot.config.defaults import CONFIG_FILE_NAME, DEFAULT_CONFIG
from pompot.config.loader import (
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    load_config,
    merge_configs,
)

__all__ = [
    "load_config",
    "find_config_file",
    "merge_configs",
    "CONFIG_FILE_NAME",
    "DEFAULT_CONFIG",
]
