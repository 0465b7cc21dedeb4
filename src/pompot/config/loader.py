"""
pompot.config.loader - Configuration file discovery and loading.

Configuration comes from three layers, later ones winning:
1. DEFAULT_CONFIG
2. The .pompot.toml file (explicit path or found in the start directory)
3. POMPOT_<SECTION>_<KEY> environment variables
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError as TOMLParseError

from pompot.config.defaults import CONFIG_FILE_NAME, DEFAULT_CONFIG

ENV_PREFIX = "POMPOT_"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """
    Find .pompot.toml in the start directory or one of its parents.

    Args:
        start_dir: Directory to start from (defaults to cwd)

    Returns:
        Path to the config file, or None if not found
    """
    current = (start_dir or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Recursively merge override into a copy of base.

    Nested tables are merged key by key; any other value replaces the
    base value.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(raw: str) -> Any:
    """
    Convert an environment value to a typed value.

    JSON arrays/objects, booleans, and integers are recognized; anything
    else (including malformed JSON) is returned as the original string.
    """
    stripped = raw.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return raw
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(stripped)
    except ValueError:
        return raw


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply POMPOT_<SECTION>_<KEY> environment variables to config.

    Section and key are matched case-insensitively against the known
    sections; the key part keeps underscores (POMPOT_SCAN_EXCLUDE_DIRS
    sets scan.exclude_dirs).
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        remainder = name[len(ENV_PREFIX):].lower()
        section, _, key = remainder.partition("_")
        if not section or not key:
            continue
        table = config.setdefault(section, {})
        if not isinstance(table, dict):
            continue
        table[key] = _try_parse_env_value(raw)
    return config


def parse_config_text(text: str) -> dict[str, Any]:
    """Parse TOML text into plain Python containers."""
    document = tomlkit.parse(text)
    return document.unwrap()


def load_config(config_path: Path | None = None, start_dir: Path | None = None) -> dict[str, Any]:
    """
    Load configuration with defaults, file values, and env overrides.

    Args:
        config_path: Explicit config file (must exist when given)
        start_dir: Directory to search when no explicit path is given

    Returns:
        Merged configuration dictionary

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValueError: If the config file is not valid TOML
    """
    if config_path is not None and not Path(config_path).is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = Path(config_path) if config_path is not None else find_config_file(start_dir)
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is not None:
        try:
            file_config = parse_config_text(path.read_text(encoding="utf-8"))
        except TOMLParseError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e
        config = merge_configs(config, file_config)

    return _apply_env_overrides(config)
