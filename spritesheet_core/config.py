"""
Configuration loader for SpriteSheet Combine.
"""

import copy
import json
from pathlib import Path
from typing import Optional

from .errors import ConfigError

# Used for any key missing from the config file
DEFAULTS = {
    "output": {
        "path": "sprite.png",
        "log_dir": None,
    },
    "images": {
        # None: relative image paths resolve against the layout file
        "base_dir": None,
    },
    "logging": {
        "level": "INFO",
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into a copy of base, recursing into nested dicts."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Optional[Path] = None) -> dict:
    """
    Read a JSON config file merged over the defaults.

    Missing file means defaults only.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    if path is not None and Path(path).exists():
        try:
            with open(path, encoding='utf-8') as f:
                user_config = json.load(f)
        except OSError as e:
            raise ConfigError(f"cannot read config: {e}", Path(path)) from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON: {e}", Path(path)) from e
        if not isinstance(user_config, dict):
            raise ConfigError("config must be a JSON object", Path(path))
        return _deep_merge(copy.deepcopy(DEFAULTS), user_config)
    return copy.deepcopy(DEFAULTS)
