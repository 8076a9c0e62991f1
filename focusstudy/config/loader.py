"""Configuration loading from YAML files.

Loads configurations from YAML files, merges them over a profile and
applies environment and keyword overrides.
"""

from pathlib import Path
from typing import Any

import yaml

from focusstudy.config.config import StudyConfig
from focusstudy.config.env import load_from_env
from focusstudy.config.profiles import get_profile


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two configuration dictionaries.

    Parameters
    ----------
    base : dict[str, Any]
        Base configuration dictionary.
    override : dict[str, Any]
        Override configuration dictionary; its values take precedence.

    Returns
    -------
    dict[str, Any]
        Merged configuration dictionary.

    Examples
    --------
    >>> merge_configs({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
    {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)  # type: ignore[arg-type]
        else:
            result[key] = value
    return result


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Load YAML file and return as dictionary.

    Parameters
    ----------
    path : Path | str
        Path to YAML file.

    Returns
    -------
    dict[str, Any]
        Parsed YAML content; empty for an empty file.

    Raises
    ------
    FileNotFoundError
        If file doesn't exist.
    yaml.YAMLError
        If YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            content = yaml.safe_load(f)
            return content if content is not None else {}
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e


def load_config(
    config_path: Path | str | None = None,
    profile: str = "default",
    use_env: bool = True,
    **overrides: Any,
) -> StudyConfig:
    """Load configuration from YAML file with optional overrides.

    Precedence (lowest to highest):
    1. Profile defaults
    2. YAML file values
    3. ``FOCUSSTUDY_`` environment variables (if ``use_env``)
    4. Keyword overrides

    Parameters
    ----------
    config_path : Path | str | None
        Path to YAML config file. If None, uses profile defaults.
    profile : str
        Profile to use as base (default, dev, prod, test).
    use_env : bool
        Whether to apply environment variable overrides.
    **overrides : Any
        Direct overrides using ``__`` for nesting, e.g.
        ``study__total_sessions=2``.

    Returns
    -------
    StudyConfig
        Loaded and merged configuration.

    Raises
    ------
    FileNotFoundError
        If config_path is specified but doesn't exist.
    yaml.YAMLError
        If YAML file is malformed.
    ValidationError
        If configuration is invalid.

    Examples
    --------
    >>> config = load_config(profile="dev", use_env=False)
    >>> config.profile
    'dev'
    >>> load_config(use_env=False, study__total_sessions=2,
    ...             study__min_per_condition=1).study.total_sessions
    2
    """
    base_config: dict[str, Any] = get_profile(profile).model_dump()

    if config_path is not None:
        base_config = merge_configs(base_config, load_yaml_file(config_path))

    if use_env:
        base_config = merge_configs(base_config, load_from_env())

    # convert overrides with __ syntax to nested dicts
    if overrides:
        override_dict: dict[str, Any] = {}
        for key, value in overrides.items():
            parts = key.split("__")
            current = override_dict
            for part in parts[:-1]:
                if part not in current:
                    current[part] = {}
                current = current[part]
            current[parts[-1]] = value
        base_config = merge_configs(base_config, override_dict)

    return StudyConfig(**base_config)
