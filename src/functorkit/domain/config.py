from __future__ import annotations

"""
Configuration Domain Management.

Dict-based settings for the command line tool. Values come from built-in
defaults, optionally overlaid by a JSON file given explicitly or through
the FUNCTORKIT_CONFIG environment variable.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_ENV_VAR = "FUNCTORKIT_CONFIG"
CURRENT_CONFIG_VERSION = "1.0.0"

OUTPUT_FORMATS = ("text", "json")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Diagnostics
        "log_level": "INFO",
        "log_file": None,

        # Law checking
        "law_samples": 25,
        "max_depth": 6,
        "seed": None,

        # Presentation
        "output_format": "text",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def resolve_config_path(path: Optional[str] = None) -> Optional[str]:
    """
    Pick the config file location: explicit path first, then the env var.

    Returns:
        Optional[str]: Absolute path, or None when neither is set.
    """
    raw = path or os.environ.get(CONFIG_ENV_VAR)
    if not raw or not raw.strip():
        return None
    return os.path.abspath(os.path.expanduser(raw.strip()))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from disk, merged over the defaults.

    Missing, unreadable or malformed files are reported and ignored.

    Args:
        path: Optional explicit path to a JSON config file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_path = resolve_config_path(path)

    if config_path is None:
        return config

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: str) -> None:
    """
    Persist configuration as JSON.

    Args:
        config: The configuration dictionary to save.
        path: Destination file.
    """
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
