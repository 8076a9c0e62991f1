"""Main CLI entry point for focusstudy package.

This module provides the root command group. Subcommand groups are loaded
on first use.
"""

from __future__ import annotations

import importlib
from pathlib import Path

import click

from focusstudy import __version__


@click.group()
@click.version_option(version=__version__, prog_name="focusstudy")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: use profile defaults)",
)
@click.option(
    "--profile",
    "-p",
    type=click.Choice(["default", "dev", "prod", "test"], case_sensitive=False),
    default="default",
    help="Configuration profile to use",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress all output except errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    profile: str,
    verbose: bool,
    quiet: bool,
) -> None:
    r"""CLI for counterbalanced timer-condition studies.

    Generates and inspects condition sequences, enrolls participants and
    tells each participant which timer condition their next focus session
    uses.

    \b
    Examples:
        # Show version
        $ focusstudy --version

        # Generate a sequence with a fixed seed
        $ focusstudy sequence generate --sessions 8 --seed 42

        # Which condition does session 3 use?
        $ focusstudy sequence resolve '["HOURGLASS","COUNTDOWN","COUNTDOWN","HOURGLASS"]' --session 3

        # Enroll ten participants with the development profile
        $ focusstudy --profile dev participants enroll --count 10

        # Show current configuration
        $ focusstudy config show
    """
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["profile"] = profile
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


class LazyGroup(click.Group):
    """Click group that lazily loads subcommands."""

    def __init__(
        self,
        name: str | None = None,
        lazy_subcommands: dict[str, tuple[str, str]] | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(name=name, **kwargs)
        self._lazy_subcommands: dict[str, tuple[str, str]] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(base + lazy)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command, loading it lazily if needed."""
        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Import and return a lazy command."""
        module_path, attr_name = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)
        return getattr(module, attr_name)  # type: ignore[no-any-return]


cli = LazyGroup(
    name="focusstudy",
    help=cli.help,
    params=cli.params,
    callback=cli.callback,
    lazy_subcommands={
        "config": ("focusstudy.cli.config", "config"),
        "participants": ("focusstudy.cli.participants", "participants"),
        "sequence": ("focusstudy.cli.sequence", "sequence"),
    },
)


def main() -> None:
    """Run the focusstudy CLI."""
    cli()
