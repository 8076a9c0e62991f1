"""Configuration commands for focusstudy CLI.

This module provides commands for viewing, validating, and listing
configuration profiles.
"""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from focusstudy.cli.utils import (
    format_output,
    get_nested_value,
    load_config_for_cli,
    print_error,
    print_info,
    print_success,
)


@click.group()
def config() -> None:
    r"""Manage configuration commands.

    Provides commands for viewing and validating configuration.

    \b
    Examples:
        $ focusstudy config show
        $ focusstudy config show --format json
        $ focusstudy config show --key study.total_sessions
        $ focusstudy config validate --config-file study.yaml
        $ focusstudy config profiles
    """


@config.command()
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["yaml", "json", "table"], case_sensitive=False),
    default="yaml",
    help="Output format (default: yaml)",
)
@click.option(
    "--key",
    "-k",
    type=str,
    default=None,
    help="Show specific config value (e.g., study.total_sessions)",
)
@click.pass_context
def show(ctx: click.Context, format_type: str, key: str | None) -> None:
    r"""Display current configuration.

    Shows the merged configuration from profile, file, and environment variables.

    \b
    Examples:
        $ focusstudy config show
        $ focusstudy config show --format json
        $ focusstudy config show --key study.algorithm
    """
    config_file = ctx.obj.get("config_file")
    profile = ctx.obj.get("profile", "default")
    verbose = ctx.obj.get("verbose", False)

    try:
        cfg = load_config_for_cli(
            config_file=str(config_file) if config_file else None,
            profile=profile,
            verbose=verbose,
            quiet=ctx.obj.get("quiet", False),
        )

        config_dict = cfg.model_dump(mode="json")

        if key:
            try:
                value = get_nested_value(config_dict, key)
                click.echo(value)
            except KeyError as e:
                print_error(f"Configuration key not found: {e}")
            return

        try:
            output = format_output(config_dict, format_type)  # type: ignore[arg-type]
            click.echo(output)
        except ValueError as e:
            print_error(f"Failed to format output: {e}")

    except Exception as e:
        print_error(f"Failed to load configuration: {e}")


@config.command()
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file to validate",
)
@click.pass_context
def validate(ctx: click.Context, config_file: Path | None) -> None:
    r"""Validate configuration file.

    Checks YAML syntax, the configuration schema and whether the study
    design admits a balanced sequence.

    \b
    Examples:
        $ focusstudy config validate --config-file study.yaml
        $ focusstudy -c study.yaml config validate

    \b
    Exit codes:
        0 - Configuration is valid
        1 - Configuration is invalid
    """
    if config_file is None:
        config_file = ctx.obj.get("config_file")

    if config_file is None:
        print_error("No configuration file specified. Use --config-file or -c.")
        return

    profile = ctx.obj.get("profile", "default")
    verbose = ctx.obj.get("verbose", False)

    try:
        from focusstudy.config import load_config, validate_config

        # load directly so schema errors reach the handler below
        cfg = load_config(config_path=config_file, profile=profile)
        if verbose:
            print_info(f"Loaded {config_file} over profile: {profile}")

        errors = validate_config(cfg)

    except ValidationError as e:
        print_error("Configuration validation failed:", exit_code=0)
        for error in e.errors():
            location = " → ".join(str(loc) for loc in error["loc"])
            click.echo(f"  • {location}: {error['msg']}", err=True)
        ctx.exit(1)

    except Exception as e:
        print_error(f"Failed to validate configuration: {e}")

    if errors:
        print_error("Configuration validation failed:", exit_code=0)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        ctx.exit(1)

    print_success(f"Configuration is valid: {config_file}")


@config.command()
def profiles() -> None:
    r"""List available configuration profiles.

    \b
    Examples:
        $ focusstudy config profiles
    """
    from focusstudy.config import get_profile, list_profiles

    print_info("Available configuration profiles:")
    click.echo()

    for profile_name in list_profiles():
        study = get_profile(profile_name).study
        click.echo(
            f"  • {profile_name} ({study.total_sessions} sessions, "
            f"algorithm={study.algorithm})"
        )

    click.echo()
    print_info("Use --profile to select a profile:")
    click.echo("  $ focusstudy --profile dev config show")
