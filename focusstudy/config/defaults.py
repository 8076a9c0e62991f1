"""Default configuration for the focusstudy package."""

from __future__ import annotations

from focusstudy.config.config import StudyConfig
from focusstudy.config.logging import LoggingConfig
from focusstudy.config.paths import PathsConfig
from focusstudy.config.study import StudyDesignConfig

DEFAULT_CONFIG = StudyConfig(
    profile="default",
    study=StudyDesignConfig(),
    paths=PathsConfig(),
    logging=LoggingConfig(),
)
"""Default configuration instance.

Uses the default values of each config model. It is the base configuration
when no config file is provided.
"""


def get_default_config() -> StudyConfig:
    """Get a copy of the default configuration.

    Returns
    -------
    StudyConfig
        A deep copy of the default configuration.

    Examples
    --------
    >>> config = get_default_config()
    >>> config.study.total_sessions
    8
    """
    return DEFAULT_CONFIG.model_copy(deep=True)
