"""Condition sequence commands for focusstudy CLI.

This module provides commands for generating, resolving, analyzing, and
simulating counterbalanced condition sequences.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.table import Table

from focusstudy.cli.utils import (
    config_from_context,
    console,
    format_output,
    parse_sequence_argument,
    print_error,
    print_success,
    print_warning,
)
from focusstudy.randomization import (
    ALGORITHMS,
    InvalidConfigurationError,
    SequenceGenerator,
    SessionOutOfRangeError,
    analyze_sequence,
    condition_for_session,
    longest_run,
)


def _design_options(
    config_sessions: int,
    config_min: int | None,
    sessions: int | None,
    min_per_condition: int | None,
) -> tuple[int, int | None]:
    """Resolve session count and minimum from options and configuration.

    The configured minimum only applies when the session count also comes
    from configuration.
    """
    if sessions is None:
        sessions = config_sessions
        if min_per_condition is None:
            min_per_condition = config_min
    return sessions, min_per_condition


@click.group()
def sequence() -> None:
    r"""Condition sequence commands.

    \b
    Examples:
        $ focusstudy sequence generate --sessions 8 --seed 42
        $ focusstudy sequence resolve HOURGLASS,COUNTDOWN,COUNTDOWN,HOURGLASS --session 2
        $ focusstudy sequence analyze '["COUNTDOWN","HOURGLASS"]'
        $ focusstudy sequence simulate --trials 10000 --sessions 8
    """


@sequence.command()
@click.option(
    "--sessions",
    "-n",
    type=int,
    default=None,
    help="Sessions per sequence (default: study.total_sessions)",
)
@click.option(
    "--min-per-condition",
    "-m",
    type=int,
    default=None,
    help="Minimum sessions per condition (default: study.min_per_condition)",
)
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(ALGORITHMS),
    default=None,
    help="Counterbalancing algorithm (default: study.algorithm)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed (default: study.random_seed)",
)
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=1,
    help="Number of sequences to generate (default: 1)",
)
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["json", "table"], case_sensitive=False),
    default="json",
    help="Output format (default: json)",
)
@click.pass_context
def generate(
    ctx: click.Context,
    sessions: int | None,
    min_per_condition: int | None,
    algorithm: str | None,
    seed: int | None,
    count: int,
    format_type: str,
) -> None:
    r"""Generate balanced condition sequences.

    JSON output prints one array of condition labels per line.

    \b
    Examples:
        $ focusstudy sequence generate
        $ focusstudy sequence generate --sessions 4 --seed 7 --count 3
        $ focusstudy sequence generate --algorithm shuffle --format table
    """
    cfg = config_from_context(ctx)
    total, minimum = _design_options(
        cfg.study.total_sessions,
        cfg.study.min_per_condition,
        sessions,
        min_per_condition,
    )
    generator = SequenceGenerator(
        random_seed=seed if seed is not None else cfg.study.random_seed
    )
    chosen = algorithm or cfg.study.algorithm

    try:
        sequences = [
            generator.generate(total, minimum, chosen)  # type: ignore[arg-type]
            for _ in range(count)
        ]
    except InvalidConfigurationError as e:
        print_error(str(e))
        return

    if format_type == "json":
        for seq in sequences:
            click.echo(json.dumps([c.value for c in seq]))
        return

    table = Table(
        title=f"{total}-session sequences ({chosen})", header_style="bold cyan"
    )
    table.add_column("#", style="yellow", justify="right")
    for session_number in range(1, total + 1):
        table.add_column(str(session_number))
    table.add_column("Transitions", justify="right")

    for index, seq in enumerate(sequences, start=1):
        table.add_row(
            str(index),
            *(c.value for c in seq),
            str(analyze_sequence(seq).transitions),
        )
    console.print(table)


@sequence.command()
@click.argument("sequence_value", metavar="SEQUENCE")
@click.option(
    "--session",
    "-s",
    "session_number",
    type=int,
    required=True,
    help="1-based session number",
)
def resolve(sequence_value: str, session_number: int) -> None:
    r"""Print the condition assigned to a session.

    SEQUENCE is a JSON array or a comma-separated list of condition labels.

    \b
    Examples:
        $ focusstudy sequence resolve HOURGLASS,COUNTDOWN --session 2
        $ focusstudy sequence resolve '["HOURGLASS","COUNTDOWN"]' -s 1

    \b
    Exit codes:
        0 - Condition printed
        1 - Session number out of range
    """
    parsed = parse_sequence_argument(sequence_value)

    try:
        condition = condition_for_session(parsed, session_number)
    except SessionOutOfRangeError as e:
        print_error(str(e))
        return

    click.echo(condition.value)


@sequence.command()
@click.argument("sequence_value", metavar="SEQUENCE")
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["json", "yaml", "table"], case_sensitive=False),
    default="json",
    help="Output format (default: json)",
)
def analyze(sequence_value: str, format_type: str) -> None:
    r"""Report counts, balance, and transitions for a sequence.

    \b
    Examples:
        $ focusstudy sequence analyze COUNTDOWN,COUNTDOWN,HOURGLASS,HOURGLASS
        $ focusstudy sequence analyze '[]' --format table
    """
    parsed = parse_sequence_argument(sequence_value)
    report = analyze_sequence(parsed).model_dump()
    report["longest_run"] = longest_run(parsed)

    click.echo(format_output(report, format_type).rstrip())  # type: ignore[arg-type]


@sequence.command()
@click.option(
    "--trials",
    "-t",
    type=click.IntRange(min=1),
    default=10_000,
    help="Number of sequences to generate (default: 10000)",
)
@click.option(
    "--sessions",
    "-n",
    type=int,
    default=None,
    help="Sessions per sequence (default: study.total_sessions)",
)
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(ALGORITHMS),
    default=None,
    help="Counterbalancing algorithm (default: study.algorithm)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed (default: study.random_seed)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write per-trial results to this CSV file",
)
@click.pass_context
def simulate(
    ctx: click.Context,
    trials: int,
    sessions: int | None,
    algorithm: str | None,
    seed: int | None,
    output: Path | None,
) -> None:
    r"""Generate many sequences and summarize balance and transitions.

    Every generated sequence must be balanced; the transition counts show
    whether ordering is actually randomized.

    \b
    Examples:
        $ focusstudy sequence simulate
        $ focusstudy sequence simulate --trials 1000 --algorithm shuffle
        $ focusstudy sequence simulate --seed 1 --output trials.csv
    """
    from focusstudy.randomization.simulation import (
        simulate_sequences,
        summarize_simulation,
    )

    cfg = config_from_context(ctx)
    total, minimum = _design_options(
        cfg.study.total_sessions, cfg.study.min_per_condition, sessions, None
    )
    chosen = algorithm or cfg.study.algorithm

    try:
        frame = simulate_sequences(
            trials,
            total,
            algorithm=chosen,  # type: ignore[arg-type]
            random_seed=seed if seed is not None else cfg.study.random_seed,
            min_per_condition=minimum,
        )
    except InvalidConfigurationError as e:
        print_error(str(e))
        return

    summary = summarize_simulation(frame)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(output, index=False)
        print_success(f"Wrote {len(frame)} trials to {output}")

    click.echo(format_output(summary.model_dump(mode="json"), "table"))

    if summary.balanced_share < 1.0:
        print_warning(
            f"Only {summary.balanced_share:.1%} of sequences were balanced"
        )
    if len(summary.transition_counts) < 2:
        print_warning("Every sequence had the same number of transitions")
