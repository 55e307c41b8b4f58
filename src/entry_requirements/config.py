"""
Runtime configuration for the entry-requirements tools.

Settings are read from config/entry_requirements.yaml (current directory
first, then the repository root). A missing file means defaults; CLI flags
override whatever the file says.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config/entry_requirements.yaml"

DEFAULT_INPUT_PATH = "data/entry-requirements.json"
DEFAULT_WORKERS = 1
DEFAULT_INDENT = 2
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SKIP_COUNTRIES = ["ITA"]


class ConfigError(Exception):
    """Raised when the configuration file holds invalid values."""
    pass


@dataclass
class Settings:
    input_path: str = DEFAULT_INPUT_PATH
    output_path: Optional[str] = None
    workers: int = DEFAULT_WORKERS
    indent: int = DEFAULT_INDENT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    skip_countries: List[str] = field(default_factory=lambda: list(DEFAULT_SKIP_COUNTRIES))


def load_config_file(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load raw configuration from YAML.

    Returns:
        Config dict or empty dict if no file is found
    """
    if path is not None:
        config_paths = [path]
    else:
        config_paths = [
            CONFIG_FILENAME,
            os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), CONFIG_FILENAME),
        ]

    for candidate in config_paths:
        if os.path.exists(candidate):
            try:
                with open(candidate, "r") as f:
                    return yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {candidate}: {e}")
                return {}

    return {}


def _positive_int(raw: Dict[str, Any], key: str, default: int, minimum: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigError(f"'{key}' must be an integer >= {minimum}, got {value!r}")
    return value


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Build Settings from the YAML file, falling back to defaults.

    Raises:
        ConfigError: If a value has the wrong type
    """
    raw = load_config_file(path)
    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping")

    skip = raw.get("skip_countries", DEFAULT_SKIP_COUNTRIES)
    if not isinstance(skip, list) or not all(isinstance(s, str) for s in skip):
        raise ConfigError("'skip_countries' must be a list of country codes")

    log_level = str(raw.get("log_level", DEFAULT_LOG_LEVEL)).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown log_level: {log_level}")

    output_path = raw.get("output_path")
    return Settings(
        input_path=str(raw.get("input_path", DEFAULT_INPUT_PATH)),
        output_path=str(output_path) if output_path else None,
        workers=_positive_int(raw, "workers", DEFAULT_WORKERS, 1),
        indent=_positive_int(raw, "indent", DEFAULT_INDENT, 0),
        log_level=log_level,
        log_file=str(raw["log_file"]) if raw.get("log_file") else None,
        skip_countries=[s.upper() for s in skip],
    )
