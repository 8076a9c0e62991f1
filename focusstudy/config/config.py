"""Main configuration model for the focusstudy package."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from focusstudy.config.logging import LoggingConfig
from focusstudy.config.paths import PathsConfig
from focusstudy.config.study import StudyDesignConfig


class StudyConfig(BaseModel):
    """Main configuration for the focusstudy package.

    Parameters
    ----------
    profile : str
        Configuration profile name.
    study : StudyDesignConfig
        Study design (session count, counterbalancing algorithm).
    paths : PathsConfig
        Paths configuration.
    logging : LoggingConfig
        Logging configuration.

    Examples
    --------
    >>> config = StudyConfig()
    >>> config.profile
    'default'
    >>> config.study.total_sessions
    8
    >>> config.paths.data_dir
    PosixPath('data')
    """

    profile: str = Field(default="default", description="Configuration profile name")
    study: StudyDesignConfig = Field(
        default_factory=StudyDesignConfig, description="Study design configuration"
    )
    paths: PathsConfig = Field(
        default_factory=PathsConfig, description="Paths configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns
        -------
        dict[str, Any]
            Configuration as a dictionary.
        """
        return self.model_dump()

    def to_yaml(self) -> str:
        """Convert configuration to YAML string.

        Returns
        -------
        str
            Configuration as YAML string, non-default values only.

        Examples
        --------
        >>> config = StudyConfig(profile="dev")
        >>> 'profile: dev' in config.to_yaml()
        True
        """
        from focusstudy.config.serialization import to_yaml  # noqa: PLC0415

        return to_yaml(self, include_defaults=False)
