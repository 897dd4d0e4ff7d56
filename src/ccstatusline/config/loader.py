"""Configuration file loading and saving."""

import os
import sys

from pathlib import Path
from typing import Optional

import yaml

from pydantic import ValidationError

from .defaults import get_default_config
from .schema import StatusLineConfig

# Module-level cache for config
_cached_config: Optional[StatusLineConfig] = None
_cached_path: Optional[Path] = None
_cached_mtime: float = 0.0


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "ccstatusline"


def get_config_path() -> Path:
    """Get the full configuration file path."""
    return get_config_dir() / "config.yaml"


def _remember(config: StatusLineConfig, config_path: Path) -> None:
    global _cached_config, _cached_path, _cached_mtime

    _cached_config = config
    _cached_path = config_path
    try:
        _cached_mtime = config_path.stat().st_mtime
    except OSError:
        _cached_mtime = 0.0


def load_config_file(config_path: Optional[Path] = None) -> StatusLineConfig:
    """Read and validate a configuration file.

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML
        ValidationError: If the content does not match the schema
    """
    config_path = config_path or get_config_path()

    with open(config_path, encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if config_data is None:
        config_data = {}

    return StatusLineConfig(**config_data)


def load_config(config_path: Optional[Path] = None) -> StatusLineConfig:
    """
    Load configuration from YAML file with mtime-based caching.

    If config file doesn't exist, creates it with defaults.
    If config is invalid, falls back to defaults and logs error.
    """
    config_path = config_path or get_config_path()

    if _cached_config is not None and _cached_path == config_path:
        try:
            if config_path.stat().st_mtime == _cached_mtime:
                return _cached_config
        except OSError:
            pass

    if not config_path.exists():
        config = get_default_config()
        try:
            save_config(config, config_path)
        except OSError as e:
            print(
                f"Warning: Failed to write default config to {config_path}: {e}",
                file=sys.stderr,
            )
        _remember(config, config_path)
        return config

    try:
        config = load_config_file(config_path)
    except (yaml.YAMLError, ValidationError, TypeError, OSError) as e:
        print(
            f"Warning: Failed to load config from {config_path}: {e}",
            file=sys.stderr,
        )
        print("Using default configuration.", file=sys.stderr)
        return get_default_config()

    _remember(config, config_path)
    return config


def save_config(config: StatusLineConfig, config_path: Optional[Path] = None) -> None:
    """Save configuration to YAML file."""
    config_path = config_path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(mode="python")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(
            config_dict,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def clear_config_cache() -> None:
    """Forget the cached configuration."""
    global _cached_config, _cached_path, _cached_mtime

    _cached_config = None
    _cached_path = None
    _cached_mtime = 0.0
