"""
Analysis options for stylestats.

Options map metric names to flags or settings. They are merged from the
defaults, an optional JSON config file and command line overrides, and
frozen for the duration of an analysis.
"""

import json
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .utils.constants import DEFAULT_OPTIONS, NUMBER_ONLY_OPTIONS
from .utils.log import get_logger


logger = get_logger("options")


class ConfigError(ValueError):
    """Raised when a config file cannot be used."""


def load_config(path: str) -> Dict[str, Any]:
    """
    Load options from a JSON config file.

    Args:
        path: Path to the JSON file

    Returns:
        Dictionary of options

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    logger.debug(f"Loaded {len(config)} options from {path}")
    return config


def build_options(
    *overrides: Optional[Mapping[str, Any]],
    defaults: Optional[Mapping[str, Any]] = None
) -> Mapping[str, Any]:
    """
    Merge option sets into a read-only mapping.

    Later overrides win over earlier ones, all of them over the defaults.

    Args:
        overrides: Option mappings to apply in order (None is skipped)
        defaults: Base options (default: DEFAULT_OPTIONS)

    Returns:
        Read-only options mapping
    """
    merged = dict(DEFAULT_OPTIONS if defaults is None else defaults)
    for override in overrides:
        if override:
            merged.update(override)
    return MappingProxyType(merged)


def number_only(options: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return options with every non-numeric metric switched off."""
    return build_options(NUMBER_ONLY_OPTIONS, defaults=options)
