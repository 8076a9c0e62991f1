"""Participant commands for focusstudy CLI.

This module provides commands for enrolling participants and looking up
the session each participant is due for.
"""

from __future__ import annotations

import json
from pathlib import Path
from uuid import UUID

import click
from rich.table import Table

from focusstudy.cli.utils import (
    config_from_context,
    console,
    print_error,
    print_info,
    print_success,
)
from focusstudy.data.serialization import DeserializationError
from focusstudy.participants import (
    ParticipantCollection,
    enroll_participant,
    sequence_to_json,
)
from focusstudy.randomization import InvalidConfigurationError, SequenceGenerator


def _load_collection(path: Path) -> ParticipantCollection:
    """Load the participants file or exit with an error."""
    if not path.exists():
        print_error(f"Participants file not found: {path}")
    try:
        return ParticipantCollection.from_jsonl(path, name=path.stem)
    except DeserializationError as e:
        print_error(f"Failed to load participants: {e}", exit_code=0)
        raise SystemExit(1) from e


@click.group()
def participants() -> None:
    r"""Participant enrollment commands.

    \b
    Examples:
        $ focusstudy participants enroll --count 20
        $ focusstudy participants next-session <participant-id> --completed 3
        $ focusstudy participants list
    """


@participants.command()
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    help="Number of participants to enroll (default: 1)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Participants JSONL file to append to (default: paths.participants_file)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed (default: study.random_seed)",
)
@click.option("--study-id", type=str, default=None, help="Study identifier")
@click.option(
    "--cohort",
    type=str,
    default=None,
    help="Cohort label (default: study.cohort)",
)
@click.pass_context
def enroll(
    ctx: click.Context,
    count: int,
    output: Path | None,
    seed: int | None,
    study_id: str | None,
    cohort: str | None,
) -> None:
    r"""Enroll participants and fix their condition sequences.

    Each participant's sequence is generated once, at enrollment, and
    appended to the participants file. With a seed, a run that appends to
    an existing file first skips the sequences already drawn for its
    participants, so repeated runs continue one seeded stream.

    \b
    Examples:
        $ focusstudy participants enroll
        $ focusstudy participants enroll --count 10 --seed 42 --study-id pilot
        $ focusstudy -p dev participants enroll -o pilot.jsonl
    """
    cfg = config_from_context(ctx)
    study = cfg.study
    path = output if output is not None else cfg.paths.participants_path

    random_seed = seed if seed is not None else study.random_seed
    generator = SequenceGenerator(random_seed=random_seed)

    already_enrolled = len(_load_collection(path)) if path.exists() else 0
    fields: dict[str, str] = {}
    if study_id is not None:
        fields["study_id"] = study_id
    if cohort is not None:
        fields["cohort"] = cohort

    collection = ParticipantCollection(name=path.stem)
    try:
        if random_seed is not None and already_enrolled:
            for _ in range(already_enrolled):
                generator.generate(
                    study.total_sessions, study.min_per_condition, study.algorithm
                )
            print_info(
                f"Seed {random_seed}: skipped {already_enrolled} sequence(s) "
                f"already drawn for {path}"
            )
        for _ in range(count):
            collection.add_participant(
                enroll_participant(study, generator=generator, **fields)
            )
    except InvalidConfigurationError as e:
        print_error(str(e))
        return

    collection.to_jsonl(path, append=True)

    for participant in collection.participants:
        sequence_json = sequence_to_json(participant.condition_sequence)
        click.echo(f"{participant.id}\t{sequence_json}")
    print_success(f"Enrolled {len(collection)} participant(s) in {path}")


@participants.command(name="next-session")
@click.argument("participant_id", type=click.UUID)
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Participants JSONL file (default: paths.participants_file)",
)
@click.option(
    "--completed",
    type=click.IntRange(min=0),
    default=0,
    help="Sessions already completed (default: 0)",
)
@click.option(
    "--post-treatment-submitted",
    is_flag=True,
    default=False,
    help="The post-treatment survey has been submitted",
)
@click.pass_context
def next_session(
    ctx: click.Context,
    participant_id: UUID,
    input_file: Path | None,
    completed: int,
    post_treatment_submitted: bool,
) -> None:
    r"""Show the next session and its condition for a participant.

    Prints the plan as JSON. ``next_condition`` is null once the
    participant has completed the study.

    \b
    Examples:
        $ focusstudy participants next-session 0190... --completed 3
        $ focusstudy participants next-session 0190... --post-treatment-submitted
    """
    cfg = config_from_context(ctx)
    path = input_file if input_file is not None else cfg.paths.participants_path
    collection = _load_collection(path)

    participant = collection.get_by_id(participant_id)
    if participant is None:
        print_error(f"Participant not found: {participant_id}")
        return

    plan = participant.plan_next_session(completed, post_treatment_submitted)
    report = plan.model_dump(mode="json")
    report["participant_id"] = str(participant.id)
    report["remaining_sessions"] = plan.remaining_sessions
    report["progress_percent"] = plan.progress_percent
    report["withdrawn"] = participant.withdrawn

    click.echo(json.dumps(report, indent=2))
    if participant.withdrawn:
        print_info("Participant has withdrawn; no further sessions will be run")


@participants.command(name="list")
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Participants JSONL file (default: paths.participants_file)",
)
@click.option(
    "--csv",
    "csv_output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the participant table to this CSV file",
)
@click.pass_context
def list_participants(
    ctx: click.Context, input_file: Path | None, csv_output: Path | None
) -> None:
    r"""List enrolled participants with their sequence balance.

    \b
    Examples:
        $ focusstudy participants list
        $ focusstudy participants list --csv participants.csv
    """
    cfg = config_from_context(ctx)
    path = input_file if input_file is not None else cfg.paths.participants_path
    collection = _load_collection(path)

    if not collection.participants:
        print_info(f"No participants in {path}")
        return

    frame = collection.to_dataframe()

    table = Table(title=f"Participants ({len(collection)})", header_style="bold cyan")
    for column in ("participant_id", "study_id", "condition_sequence", "transitions"):
        table.add_column(column)
    for row in frame.itertuples(index=False):
        table.add_row(
            row.participant_id,
            row.study_id or "",
            row.condition_sequence,
            str(row.transitions),
        )
    console.print(table)

    if csv_output is not None:
        csv_output.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(csv_output, index=False)
        print_success(f"Wrote {len(frame)} participants to {csv_output}")
