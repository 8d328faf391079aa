from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of CLI defaults using JSON in the user data
directory. Supports default fallback when the file is missing or corrupted.
"""

import json
import logging
import os
from typing import Any, Dict

from treeforge.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_PARENT_DIR
from treeforge.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# Execution mode is chosen per invocation and never written to disk
SESSION_ONLY_KEYS = ("apply", "force")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "parent_dir": DEFAULT_PARENT_DIR,
        "root_name": "",

        # Execution
        "apply": False,
        "force": False,

        # Output
        "verbose": False,
        "json_output": False,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default structure of config.json.

    Only the persistable subset of the runtime configuration is stored; the
    keys in SESSION_ONLY_KEYS are left out so a saved file can never switch
    a later run out of dry-run mode.

    Returns:
        Dict[str, Any]: The full JSON document.
    """
    defaults = {
        key: value
        for key, value in get_default_config().items()
        if key not in SESSION_ONLY_KEYS
    }
    return {
        "version": CURRENT_CONFIG_VERSION,
        "defaults": defaults,
    }


def get_config_file() -> str:
    """Resolve the absolute path of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict) or not isinstance(data.get("defaults", {}), dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    # Merge with defaults; keys unknown to this version are dropped
    known = default_state["defaults"]
    for key, value in data.get("defaults", {}).items():
        if key in known:
            known[key] = value
        else:
            logger.debug(f"Ignoring unknown config key '{key}'.")

    default_state["version"] = CURRENT_CONFIG_VERSION
    return default_state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the persisted CLI defaults merged over the built-in ones.
    """
    config = get_default_config()
    config.update(load_app_state()["defaults"])
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the provided configuration as the new CLI defaults.

    Keys listed in SESSION_ONLY_KEYS are not written.
    """
    state = load_app_state()
    for key in state["defaults"]:
        if key in config:
            state["defaults"][key] = config[key]
    save_app_state(state)
