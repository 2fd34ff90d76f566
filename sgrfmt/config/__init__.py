"""
Configuration for sgrfmt.

The active settings are built from the environment the first time they are
needed. A loaded file (or any Settings value) can replace them with
use_settings(); settings objects are immutable and are only ever swapped.
"""

import logging
from typing import Optional

from sgrfmt.config.parser import (
    find_config_file,
    load_config,
    load_resolved_config,
    load_settings,
    settings_from_env,
    validate_config,
)
from sgrfmt.config.types import FeatureConfig, Settings

logger = logging.getLogger(__name__)

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the active settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = settings_from_env()
        logger.debug(f"Settings initialized from environment: {_settings}")
    return _settings


def use_settings(settings: Settings) -> Settings:
    """Install ``settings`` as the active settings and return them."""
    global _settings
    _settings = settings
    return settings


def reset_settings() -> None:
    """Forget the active settings; the environment is read again on next use."""
    global _settings
    _settings = None


__all__ = [
    "FeatureConfig",
    "Settings",
    "find_config_file",
    "get_settings",
    "load_config",
    "load_resolved_config",
    "load_settings",
    "reset_settings",
    "settings_from_env",
    "use_settings",
    "validate_config",
]
