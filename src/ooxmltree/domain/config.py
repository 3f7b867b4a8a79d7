from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences as JSON in the user data
directory. Stored values are merged over the defaults so that keys added
in newer versions are always present.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from ooxmltree.domain.constants import ACCEPTED_PACKAGE_SUFFIXES, CURRENT_CONFIG_VERSION
from ooxmltree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Export
        "compression": "deflated",
        "compress_level": None,

        # Input acceptance
        "accepted_suffixes": list(ACCEPTED_PACKAGE_SUFFIXES),

        # Diagnostics
        "log_level": "INFO",
        "save_error_log": False,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    A missing or unreadable file yields the defaults.

    Args:
        path: Override for the configuration file location.

    Returns:
        Dict[str, Any]: The loaded configuration.
    """
    config_path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Override for the configuration file location.
    """
    config_path = path or get_config_path()
    state = dict(config)
    state["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
