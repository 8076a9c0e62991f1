"""Configuration system for focusstudy.

Configuration models, default settings and profiles for the study.

Examples
--------
>>> from focusstudy.config import StudyConfig, get_default_config, get_profile
>>> config = get_default_config()
>>> config.profile
'default'
>>> get_profile("dev").study.total_sessions
2
"""

from __future__ import annotations

from focusstudy.config.config import StudyConfig
from focusstudy.config.defaults import DEFAULT_CONFIG, get_default_config
from focusstudy.config.env import load_from_env
from focusstudy.config.loader import load_config, load_yaml_file, merge_configs
from focusstudy.config.logging import LoggingConfig, configure_logging
from focusstudy.config.paths import PathsConfig
from focusstudy.config.profiles import (
    DEV_CONFIG,
    PROD_CONFIG,
    PROFILES,
    TEST_CONFIG,
    get_profile,
    list_profiles,
)
from focusstudy.config.serialization import save_yaml, to_yaml
from focusstudy.config.study import StudyDesignConfig
from focusstudy.config.validation import validate_config

__all__ = [
    # Main config
    "StudyConfig",
    # Config sections
    "StudyDesignConfig",
    "PathsConfig",
    "LoggingConfig",
    "configure_logging",
    # Defaults
    "DEFAULT_CONFIG",
    "get_default_config",
    # Profiles
    "DEV_CONFIG",
    "PROD_CONFIG",
    "TEST_CONFIG",
    "PROFILES",
    "get_profile",
    "list_profiles",
    # Loading
    "load_config",
    "load_yaml_file",
    "merge_configs",
    # Environment
    "load_from_env",
    # Validation
    "validate_config",
    # Serialization
    "to_yaml",
    "save_yaml",
]
