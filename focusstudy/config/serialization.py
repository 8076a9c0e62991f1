"""Configuration serialization to YAML format."""

from pathlib import Path
from typing import Any

import yaml

from focusstudy.config.config import StudyConfig
from focusstudy.config.defaults import get_default_config


def config_to_dict(
    config: StudyConfig, include_defaults: bool = False
) -> dict[str, Any]:
    """Convert StudyConfig to dictionary for YAML serialization.

    Parameters
    ----------
    config : StudyConfig
        Configuration to convert.
    include_defaults : bool
        Whether to include values equal to the defaults. ``profile`` is
        always kept.

    Returns
    -------
    dict[str, Any]
        JSON-compatible dictionary (paths as strings).
    """
    config_dict: dict[str, Any] = config.model_dump(mode="json")

    if not include_defaults:
        default_dict: dict[str, Any] = get_default_config().model_dump(mode="json")
        profile = config_dict["profile"]
        config_dict = _remove_defaults(config_dict, default_dict)
        config_dict["profile"] = profile

    return config_dict


def _remove_defaults(
    config_dict: dict[str, Any], default_dict: dict[str, Any]
) -> dict[str, Any]:
    """Remove values that match defaults from config dictionary."""
    result: dict[str, Any] = {}
    for key, value in config_dict.items():
        if key not in default_dict:
            result[key] = value
        elif isinstance(value, dict) and isinstance(default_dict[key], dict):
            nested_result = _remove_defaults(value, default_dict[key])  # type: ignore[arg-type]
            if nested_result:
                result[key] = nested_result
        elif value != default_dict[key]:
            result[key] = value
    return result


def to_yaml(config: StudyConfig, include_defaults: bool = False) -> str:
    """Serialize configuration to YAML string.

    Parameters
    ----------
    config : StudyConfig
        Configuration to serialize.
    include_defaults : bool
        If True, include all fields even if they have default values.

    Returns
    -------
    str
        YAML representation of configuration.

    Examples
    --------
    >>> from focusstudy.config import get_default_config
    >>> 'profile: default' in to_yaml(get_default_config())
    True
    """
    return yaml.dump(
        config_to_dict(config, include_defaults=include_defaults),
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
        indent=2,
    )


def save_yaml(
    config: StudyConfig,
    path: Path | str,
    include_defaults: bool = False,
    create_dirs: bool = True,
) -> None:
    """Save configuration to YAML file.

    Parameters
    ----------
    config : StudyConfig
        Configuration to save.
    path : Path | str
        Path where YAML file should be saved.
    include_defaults : bool
        If True, include all fields even if they have default values.
    create_dirs : bool
        If True, create parent directories if they don't exist.

    Raises
    ------
    FileNotFoundError
        If create_dirs is False and parent directory doesn't exist.
    OSError
        If file cannot be written.
    """
    path = Path(path)

    if create_dirs:
        path.parent.mkdir(parents=True, exist_ok=True)
    elif not path.parent.exists():
        raise FileNotFoundError(
            f"Parent directory does not exist: {path.parent}. "
            f"Set create_dirs=True to create it automatically."
        )

    yaml_str = to_yaml(config, include_defaults=include_defaults)

    try:
        with open(path, "w") as f:
            f.write(yaml_str)
    except OSError as e:
        raise OSError(f"Failed to write YAML file {path}: {e}") from e
