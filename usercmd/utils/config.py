import copy
import logging
import os
from pathlib import Path
from typing import Any

import tomli

from ..storage import DEFAULT_PERMISSIONS


def get_cache_dir() -> Path:
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        base = Path(xdg)
    else:
        base = Path.home() / ".cache"
    return base / "usercmd"


def get_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        base = Path(xdg)
    else:
        base = Path.home() / ".config"
    return base / "usercmd"


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def get_log_dir() -> Path:
    return get_cache_dir() / "log"


DEFAULT_CONFIG: dict[str, Any] = {
    "storage": {
        "file_name": "",
        "permissions": f"{DEFAULT_PERMISSIONS:o}",
    },
    "logging": {
        "level": "warning",
    },
}


def load_config() -> dict[str, Any]:
    config_path = get_config_path()
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path.exists():
        with open(config_path, "rb") as f:
            user_config = tomli.load(f)
            _merge_config(config, user_config)

    return config


def _merge_config(base: dict, override: dict) -> None:
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_config(base[key], value)
        else:
            base[key] = value


def get_default_file_name(config: dict) -> str:
    return str(config.get("storage", {}).get("file_name") or "")


def get_file_permissions(config: dict) -> int:
    """File mode for newly created record files, written in octal ("644")."""
    value = config.get("storage", {}).get("permissions", DEFAULT_PERMISSIONS)
    if isinstance(value, int):
        return value
    try:
        return int(str(value), 8)
    except ValueError:
        raise ValueError(f"Invalid storage.permissions in {get_config_path()}: {value!r}")


def get_log_level(config: dict) -> int:
    name = str(config.get("logging", {}).get("level", "warning")).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid logging.level in {get_config_path()}: {name.lower()!r}")
    return level
