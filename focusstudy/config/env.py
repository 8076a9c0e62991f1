"""Environment variable support for configuration.

Variables named ``FOCUSSTUDY_<SECTION>__<FIELD>`` override configuration
values, e.g. ``FOCUSSTUDY_STUDY__TOTAL_SESSIONS=2``.
"""

import os
from pathlib import Path
from typing import Any

ENV_PREFIX = "FOCUSSTUDY_"

# free-text fields; their values are never type-parsed
TEXT_FIELDS: frozenset[tuple[str, ...]] = frozenset(
    {("profile",), ("study", "cohort"), ("logging", "format")}
)


def parse_env_value(value: str) -> Any:
    """Parse environment variable value to appropriate Python type.

    Handles: bool, int, float, Path, string. Numbers are tried before
    booleans so that ``"1"`` and ``"0"`` stay integers.

    Parameters
    ----------
    value : str
        Raw environment variable value.

    Returns
    -------
    Any
        Parsed value.

    Examples
    --------
    >>> parse_env_value("true")
    True
    >>> parse_env_value("8")
    8
    >>> parse_env_value("/var/log/app.log")
    PosixPath('/var/log/app.log')
    """
    # try int first
    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False
    if value.lower() in ("none", "null"):
        return None

    if value.startswith(("/", "./", "~/", "../")):
        return Path(value).expanduser()

    return value


def env_to_nested_dict(env_vars: dict[str, str], prefix: str) -> dict[str, Any]:
    """Convert flat environment variables to nested dictionary.

    Values are parsed with ``parse_env_value`` except for the free-text
    fields in ``TEXT_FIELDS``, which keep the raw string.

    Parameters
    ----------
    env_vars : dict[str, str]
        Environment variables to convert.
    prefix : str
        Prefix to strip from variable names.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary.

    Examples
    --------
    >>> env_to_nested_dict({"FOCUSSTUDY_LOGGING__LEVEL": "DEBUG"}, "FOCUSSTUDY_")
    {'logging': {'level': 'DEBUG'}}
    >>> env_to_nested_dict({"FOCUSSTUDY_STUDY__COHORT": "2024"}, "FOCUSSTUDY_")
    {'study': {'cohort': '2024'}}
    """
    result: dict[str, Any] = {}

    for key, value in env_vars.items():
        if not key.startswith(prefix):
            continue

        # split on double underscore for nesting
        parts = [part.lower() for part in key[len(prefix) :].split("__")]

        current = result
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]

        if tuple(parts) in TEXT_FIELDS:
            current[parts[-1]] = value
        else:
            current[parts[-1]] = parse_env_value(value)

    return result


def load_from_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load configuration values from environment variables.

    Parameters
    ----------
    prefix : str
        Environment variable prefix to filter on.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary from environment.
    """
    env_vars = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
    return env_to_nested_dict(env_vars, prefix)
