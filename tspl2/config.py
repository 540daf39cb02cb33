"""
Configuration loading for tspl2.

Values come from built-in defaults overlaid with a JSON object read from
``tspl2.json`` in the current directory (or an explicit path). A missing or
broken file never fails: it is logged and the defaults are used.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_CONFIG_FILE", "load_config"]

DEFAULT_CONFIG_FILE = "tspl2.json"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "device_path": "/dev/usb/lp0",
    "resolution": None,  # None: ask the device
    "encoding": "utf-8",
    "log_level": "INFO",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from JSON, falling back to defaults.

    Keys:
        - device_path: str - printer character device
        - resolution: Optional[int] - dots per inch, None to query the device
        - encoding: str - text encoding for command lines
        - log_level: str - logging level name

    Args:
        config_path: Optional path to the JSON file. When None,
            ``tspl2.json`` in the current directory is used.

    Returns:
        Dictionary holding every default key, with user values overriding
        the defaults.

    Example:
        >>> config = load_config()
        >>> config["device_path"]
        '/dev/usb/lp0'
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info(f"Config file {config_path} not found, using defaults")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"config file must contain a JSON object, got {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info(f"Configuration loaded from {config_path}")
        logger.debug(f"Configuration: {config}")

    except json.JSONDecodeError as e:
        logger.warning(
            f"Could not parse {config_path}: invalid JSON at line {e.lineno}, "
            f"column {e.colno}. Using defaults."
        )
    except OSError as e:
        logger.warning(f"Could not read {config_path}: {e}. Using defaults.")
    except ValueError as e:
        logger.warning(f"Invalid configuration format: {e}. Using defaults.")

    return config
