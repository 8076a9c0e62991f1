"""CLI utility functions for focusstudy package.

Configuration loading, output formatting, error reporting and argument
parsing shared by the command groups.
"""

from __future__ import annotations

import json
import sys
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, Literal

import click
import yaml
from rich.console import Console
from rich.table import Table

from focusstudy.participants.models import sequence_from_json

if TYPE_CHECKING:
    from focusstudy.config import StudyConfig
    from focusstudy.randomization.conditions import ConditionSequence

type JsonValue = (
    str | int | float | bool | None | list[JsonValue] | dict[str, JsonValue]
)

console = Console()
err_console = Console(stderr=True)


def load_config_for_cli(
    config_file: str | None,
    profile: str,
    verbose: bool,
    quiet: bool = False,
) -> StudyConfig:
    """Load configuration with CLI options and configure logging.

    Parameters
    ----------
    config_file : str | None
        Path to configuration file (None to use profile defaults).
    profile : str
        Configuration profile name (default, dev, prod, test).
    verbose : bool
        Log at DEBUG level.
    quiet : bool
        Log errors only.

    Returns
    -------
    StudyConfig
        Loaded configuration object.
    """
    from focusstudy.config import configure_logging, load_config

    config_path = Path(config_file) if config_file else None

    try:
        config = load_config(config_path=config_path, profile=profile)
    except FileNotFoundError:
        print_error(f"Configuration file not found: {config_file}", exit_code=1)
        raise
    except Exception as e:
        print_error(f"Failed to load configuration: {e}", exit_code=1)
        raise

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    elif quiet:
        logging_config = logging_config.model_copy(update={"level": "ERROR"})
    configure_logging(logging_config)

    if verbose:
        err_console.print(
            f"[green]✓[/green] Loaded configuration from profile: {profile}"
        )
        if config_file:
            err_console.print(
                f"[green]✓[/green] Applied overrides from: {config_file}"
            )

    return config


def config_from_context(ctx: click.Context) -> StudyConfig:
    """Load configuration using the options stored on the root command."""
    obj = ctx.obj or {}
    config_file = obj.get("config_file")
    return load_config_for_cli(
        config_file=str(config_file) if config_file else None,
        profile=obj.get("profile", "default"),
        verbose=obj.get("verbose", False),
        quiet=obj.get("quiet", False),
    )


def parse_sequence_argument(value: str) -> ConditionSequence:
    """Parse a condition sequence given on the command line.

    Accepts a JSON array (``'["COUNTDOWN", "HOURGLASS"]'``) or a
    comma-separated list (``COUNTDOWN,HOURGLASS``). Labels are
    case-insensitive in the comma-separated form.

    Raises
    ------
    click.BadParameter
        If the value is not a sequence of known conditions.
    """
    text = value.strip()
    try:
        if text.startswith("["):
            return sequence_from_json(text)
        labels = [part.strip().upper() for part in text.split(",") if part.strip()]
        return sequence_from_json(json.dumps(labels))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="SEQUENCE") from e


def format_output(
    data: dict[str, JsonValue] | list[JsonValue],
    format_type: Literal["yaml", "json", "table"],
) -> str:
    """Format data for CLI output.

    Parameters
    ----------
    data : dict[str, JsonValue] | list[JsonValue]
        Data to format.
    format_type : {"yaml", "json", "table"}
        Output format type.

    Returns
    -------
    str
        Formatted output string.

    Raises
    ------
    ValueError
        If format_type is invalid or data cannot be formatted.
    """
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "table":
        if not isinstance(data, dict):
            raise ValueError("Table format requires dict data")
        return _dict_to_table(data)
    else:
        raise ValueError(f"Invalid format type: {format_type}")


def _dict_to_table(data: dict[str, JsonValue], title: str | None = None) -> str:
    """Convert dictionary to rich table string."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Key", style="yellow", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in data.items():
        if isinstance(value, dict):
            value_str = _format_nested_dict(value)
        elif isinstance(value, list):
            value_str = "\n".join(str(item) for item in value)
        else:
            value_str = str(value)

        table.add_row(key, value_str)

    string_io = StringIO()
    temp_console = Console(file=string_io, force_terminal=False, width=120)
    temp_console.print(table)
    return string_io.getvalue()


def _format_nested_dict(data: dict[str, JsonValue], indent: int = 0) -> str:
    """Format nested dictionary for display."""
    lines: list[str] = []
    for key, value in data.items():
        prefix = "  " * indent
        if isinstance(value, dict):
            lines.append(f"{prefix}{key}:")
            lines.append(_format_nested_dict(value, indent + 1))
        else:
            lines.append(f"{prefix}{key}: {value}")
    return "\n".join(lines)


def get_nested_value(data: dict[str, JsonValue], key_path: str) -> JsonValue:
    """Get nested dictionary value using dot notation.

    Parameters
    ----------
    data : dict[str, JsonValue]
        Dictionary to search.
    key_path : str
        Dot-separated key path (e.g., "study.total_sessions").

    Returns
    -------
    JsonValue
        Value at key path.

    Raises
    ------
    KeyError
        If key path doesn't exist.

    Examples
    --------
    >>> get_nested_value({"a": {"b": {"c": 42}}}, "a.b.c")
    42
    """
    current: JsonValue = data
    for key in key_path.split("."):
        if not isinstance(current, dict):
            raise KeyError(
                f"Cannot access key '{key}' in non-dict value at path '{key_path}'"
            )
        if key not in current:
            raise KeyError(f"Key '{key}' not found in path '{key_path}'")
        current = current[key]
    return current


def print_error(message: str, exit_code: int = 1) -> None:
    """Print error message and exit.

    Parameters
    ----------
    message : str
        Error message to display.
    exit_code : int
        Exit code (default: 1). Pass 0 to not exit.
    """
    err_console.print(f"[red]✗ Error:[/red] {message}", soft_wrap=True)
    if exit_code != 0:
        sys.exit(exit_code)


def print_success(message: str) -> None:
    """Print success message."""
    err_console.print(f"[green]✓ {message}[/green]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print warning message."""
    err_console.print(f"[yellow]⚠ Warning:[/yellow] {message}", soft_wrap=True)


def print_info(message: str) -> None:
    """Print info message."""
    err_console.print(f"[blue]ℹ Info:[/blue] {message}", soft_wrap=True)
