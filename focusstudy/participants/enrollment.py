"""Participant enrollment and session start.

Enrollment runs the configured sequence generator exactly once for a new
participant. Session start consults the participant's plan and opens a
FocusSession under the condition that is due.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from focusstudy.config.study import StudyDesignConfig
from focusstudy.data.timestamps import now_iso8601
from focusstudy.participants.models import Participant
from focusstudy.randomization.generator import SequenceGenerator
from focusstudy.sessions.models import FocusSession, SessionStateError

logger = logging.getLogger(__name__)


def enroll_participant(
    study: StudyDesignConfig,
    generator: SequenceGenerator | None = None,
    **fields: Any,
) -> Participant:
    """Enroll a participant and fix their condition sequence.

    Parameters
    ----------
    study : StudyDesignConfig
        Study design (session total, minimum per condition, algorithm).
    generator : SequenceGenerator | None
        Generator to draw from. If None, a generator seeded with
        ``study.random_seed`` is created. Reuse one generator when enrolling
        several participants, otherwise a seeded study gives every
        participant the same sequence.
    **fields : Any
        Extra Participant fields (``study_id``, ``cohort``, ``notes``...).
        ``cohort`` defaults to ``study.cohort``.

    Returns
    -------
    Participant
        The new participant.

    Raises
    ------
    InvalidConfigurationError
        If the study design cannot produce a balanced sequence.

    Examples
    --------
    >>> study = StudyDesignConfig(total_sessions=4, random_seed=3)
    >>> participant = enroll_participant(study, study_id="pilot")
    >>> participant.total_sessions
    4
    """
    if generator is None:
        generator = SequenceGenerator(random_seed=study.random_seed)

    sequence = generator.generate(
        study.total_sessions, study.min_per_condition, study.algorithm
    )
    fields.setdefault("cohort", study.cohort)
    participant = Participant(condition_sequence=sequence, **fields)

    logger.info(
        f"Enrolled participant {participant.id} with {len(sequence)} sessions "
        f"({study.algorithm})"
    )
    return participant


def start_next_session(
    participant: Participant,
    completed_sessions: int,
    post_treatment_submitted: bool = False,
    target_duration: int | None = None,
    at: datetime | None = None,
    study: StudyDesignConfig | None = None,
) -> FocusSession:
    """Open the participant's next due session.

    Parameters
    ----------
    participant : Participant
        The participant starting a session.
    completed_sessions : int
        Number of session records already stored for the participant.
    post_treatment_submitted : bool
        Whether the post-treatment survey has been submitted.
    target_duration : int | None
        Target seconds. Defaults to ``study.target_duration_seconds``, or
        the FocusSession default when no study is given.
    at : datetime | None
        Start time (default: now).
    study : StudyDesignConfig | None
        Study design supplying the default target duration.

    Returns
    -------
    FocusSession
        A running session under the planned condition.

    Raises
    ------
    SessionStateError
        If the participant has withdrawn or has no session due.
    """
    if participant.withdrawn:
        raise SessionStateError(f"Participant {participant.id} has withdrawn")

    plan = participant.plan_next_session(completed_sessions, post_treatment_submitted)
    if (
        plan.is_complete
        or plan.next_session_number is None
        or plan.next_condition is None
    ):
        raise SessionStateError(
            f"Participant {participant.id} has no session due "
            f"({completed_sessions} of {plan.total_sessions} completed)"
        )

    session_fields: dict[str, Any] = {
        "participant_id": participant.id,
        "session_number": plan.next_session_number,
        "condition": plan.next_condition,
        "start_time": at or now_iso8601(),
    }
    if target_duration is None and study is not None:
        target_duration = study.target_duration_seconds
    if target_duration is not None:
        session_fields["target_duration"] = target_duration

    session = FocusSession(**session_fields)
    logger.info(
        f"Started session {session.session_number} of {plan.total_sessions} "
        f"for participant {participant.id} ({session.condition})"
    )
    return session
