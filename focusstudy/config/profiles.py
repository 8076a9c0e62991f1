"""Configuration profiles for the focusstudy package.

Pre-configured profiles for development, production and testing.
"""

from __future__ import annotations

from pathlib import Path
from tempfile import gettempdir

from focusstudy.config.config import StudyConfig
from focusstudy.config.logging import LoggingConfig
from focusstudy.config.paths import PathsConfig
from focusstudy.config.study import StudyDesignConfig

# development profile: short two-session plan, verbose logging
DEV_CONFIG = StudyConfig(
    profile="dev",
    study=StudyDesignConfig(
        total_sessions=2,  # one session per condition for quick walkthroughs
        min_per_condition=1,
        algorithm="pair_shuffle",
    ),
    paths=PathsConfig(
        data_dir=Path("data"),
        output_dir=Path("output"),
    ),
    logging=LoggingConfig(
        level="DEBUG",
        console=True,
    ),
)
"""Development configuration profile.

Optimized for:
- Walking through the full participant flow quickly (2 sessions)
- Verbose logging (DEBUG level)

Examples
--------
>>> DEV_CONFIG.study.total_sessions
2
>>> DEV_CONFIG.logging.level
'DEBUG'
"""

# production profile: full eight-session plan, unseeded randomization
PROD_CONFIG = StudyConfig(
    profile="prod",
    study=StudyDesignConfig(
        total_sessions=8,
        min_per_condition=2,
        algorithm="pair_shuffle",
        random_seed=None,  # never seed production randomization
    ),
    paths=PathsConfig(
        data_dir=Path("/var/focusstudy/data").absolute(),
        output_dir=Path("/var/focusstudy/output").absolute(),
    ),
    logging=LoggingConfig(
        level="WARNING",
        console=False,
        file=Path("/var/log/focusstudy/app.log"),
    ),
)
"""Production configuration profile.

Optimized for:
- The full eight-session design
- Unseeded sequence generation
- Minimal logging (WARNING level) to file

Examples
--------
>>> PROD_CONFIG.study.random_seed is None
True
>>> PROD_CONFIG.logging.level
'WARNING'
"""

# test profile: fixed seed, temp directories, quiet logging
TEST_CONFIG = StudyConfig(
    profile="test",
    study=StudyDesignConfig(
        total_sessions=8,
        min_per_condition=2,
        algorithm="pair_shuffle",
        random_seed=42,  # reproducible tests
    ),
    paths=PathsConfig(
        data_dir=Path(gettempdir()) / "focusstudy_test" / "data",
        output_dir=Path(gettempdir()) / "focusstudy_test" / "output",
    ),
    logging=LoggingConfig(
        level="CRITICAL",
        console=False,
    ),
)
"""Test configuration profile.

Optimized for:
- Reproducibility (fixed random seed)
- Temporary directories for isolation
- Minimal logging (CRITICAL level)

Examples
--------
>>> TEST_CONFIG.study.random_seed
42
"""

# profile registry
PROFILES: dict[str, StudyConfig] = {
    "default": StudyConfig(),
    "dev": DEV_CONFIG,
    "prod": PROD_CONFIG,
    "test": TEST_CONFIG,
}
"""Registry of all available configuration profiles."""


def get_profile(name: str) -> StudyConfig:
    """Get configuration profile by name.

    Parameters
    ----------
    name : str
        Profile name. Must be one of: 'default', 'dev', 'prod', 'test'.

    Returns
    -------
    StudyConfig
        A deep copy of the profile configuration.

    Raises
    ------
    ValueError
        If profile name is not found in the registry.

    Examples
    --------
    >>> get_profile("dev").profile
    'dev'
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        msg = f"Profile {name!r} not found. Available profiles: {available}"
        raise ValueError(msg)

    return PROFILES[name].model_copy(deep=True)


def list_profiles() -> list[str]:
    """Return list of available profile names, sorted alphabetically.

    Returns
    -------
    list[str]
        Profile names.
    """
    return sorted(PROFILES.keys())
