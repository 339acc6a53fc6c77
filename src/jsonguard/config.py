"""
Options loader for jsonguard.

Options come from a YAML file and environment variables, in this order of
precedence:

1. ``JSONGUARD_MAX_DEPTH`` / ``JSONGUARD_BIGINT_MODE`` environment variables
2. The config file (``config_path``, ``JSONGUARD_CONFIG`` or ``./jsonguard.yaml``)
3. Built-in defaults
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import InvalidOptionError
from .models import ValidationOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "JSONGUARD_CONFIG"
DEFAULT_CONFIG_NAME = "jsonguard.yaml"

ENV_OVERRIDES = {
    "JSONGUARD_MAX_DEPTH": "max_depth",
    "JSONGUARD_BIGINT_MODE": "bigint_mode",
}


def find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """Locate the config file, or return None when there is none."""
    if config_path is not None:
        return Path(config_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidate = Path.cwd() / DEFAULT_CONFIG_NAME
    if candidate.exists():
        return candidate
    return None


def load_options(config_path: Optional[Path] = None) -> ValidationOptions:
    """
    Load validation options from a config file and the environment.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        ValidationOptions

    Raises:
        FileNotFoundError: If an explicitly named config file doesn't exist
        InvalidOptionError: If the config file or an environment value is invalid
    """
    values: Dict[str, Any] = {}

    path = find_config_file(config_path)
    if path is None:
        logger.debug("No jsonguard config file found, using defaults")
    else:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found at {path}")
        logger.debug(f"Loading options from: {path}")
        try:
            with open(path, "r") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidOptionError(f"Failed to parse YAML config file {path}: {e}")

        if raw_config:
            if not isinstance(raw_config, dict):
                raise InvalidOptionError(f"Config file {path} must contain a mapping")
            values.update(raw_config)

    for env_var, option in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_var)
        if env_value:
            logger.debug(f"Option {option} overridden by {env_var}")
            values[option] = env_value

    return ValidationOptions.coerce(values)
