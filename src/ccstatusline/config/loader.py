"""Configuration file loading and saving."""

import os
import sys

from pathlib import Path
from typing import Optional

import yaml

from pydantic import ValidationError

from ..utils.debug import debug_log
from .defaults import get_default_config
from .schema import StatusLineConfig

# Problems that make a config file unusable
CONFIG_LOAD_ERRORS = (yaml.YAMLError, ValidationError, OSError, TypeError)

# Module-level cache for config, keyed by path and mtime
_cached_config: Optional[StatusLineConfig] = None
_cached_key: Optional[tuple[Path, float]] = None


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "ccstatusline"


def get_config_path() -> Path:
    """Get the full configuration file path."""
    return get_config_dir() / "config.yaml"


def load_config_file(config_path: Path) -> StatusLineConfig:
    """Parse and validate a config file, raising on any problem."""
    with open(config_path, encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if config_data is None:
        config_data = {}

    return StatusLineConfig(**config_data)


def load_config() -> StatusLineConfig:
    """Load configuration from YAML file with mtime-based caching.

    If the config file doesn't exist, creates it with defaults so item ids
    stay stable between runs. An unreadable or invalid file yields the
    defaults, with a warning on stderr.
    """
    global _cached_config, _cached_key

    config_path = get_config_path()

    if not config_path.exists():
        config = get_default_config()
        try:
            save_config(config)
        except OSError as e:
            debug_log(f"Could not write default config to {config_path}: {e}")
        return config

    try:
        current_mtime = config_path.stat().st_mtime
    except OSError:
        return get_default_config()

    cache_key = (config_path, current_mtime)
    if _cached_config is not None and _cached_key == cache_key:
        return _cached_config

    try:
        config = load_config_file(config_path)
    except CONFIG_LOAD_ERRORS as e:
        debug_log(f"Config load failed for {config_path}: {e}")
        print(
            f"Warning: Failed to load config from {config_path}: {e}",
            file=sys.stderr,
        )
        print("Using default configuration.", file=sys.stderr)
        return get_default_config()

    _cached_config = config
    _cached_key = cache_key
    return config


def clear_config_cache() -> None:
    """Forget the cached config so the next load reads the file."""
    global _cached_config, _cached_key
    _cached_config = None
    _cached_key = None


def save_config(config: StatusLineConfig) -> None:
    """Save configuration to YAML file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(mode="python")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

    clear_config_cache()
