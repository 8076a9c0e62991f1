"""Participant data model.

A participant owns exactly one condition sequence, fixed at enrollment. The
sequence is a frozen field: it can be read for every later session but
never reassigned.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime

from pydantic import Field, field_validator

from focusstudy.data.base import StudyBaseModel
from focusstudy.data.timestamps import now_iso8601
from focusstudy.randomization.analysis import SequenceAnalysis, analyze_sequence
from focusstudy.randomization.conditions import (
    Condition,
    ConditionSequence,
    parse_sequence,
)
from focusstudy.randomization.resolver import condition_for_session
from focusstudy.sessions.planning import SessionPlan, plan_next_session


def sequence_to_json(sequence: Sequence[Condition]) -> str:
    """Serialize a condition sequence as a JSON array of labels.

    Examples
    --------
    >>> sequence_to_json([Condition.HOURGLASS, Condition.COUNTDOWN])
    '["HOURGLASS", "COUNTDOWN"]'
    """
    return json.dumps([Condition(c).value for c in sequence])


def sequence_from_json(text: str) -> ConditionSequence:
    """Parse a condition sequence stored as a JSON array of labels.

    Raises
    ------
    ValueError
        If the text is not a JSON array of known condition labels.

    Examples
    --------
    >>> sequence_from_json('["COUNTDOWN", "HOURGLASS"]')
    (<Condition.COUNTDOWN: 'COUNTDOWN'>, <Condition.HOURGLASS: 'HOURGLASS'>)
    """
    try:
        values = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Condition sequence is not valid JSON: {e}") from e
    if not isinstance(values, list):
        raise ValueError(
            f"Condition sequence must be a JSON array, not {type(values).__name__}"
        )
    return parse_sequence(values)


class Participant(StudyBaseModel):
    """An enrolled study participant.

    Attributes
    ----------
    id : UUID
        Internal unique identifier (UUIDv7, inherited).
    condition_sequence : tuple[Condition, ...]
        Condition for each session, in session order. Frozen.
    study_id : str | None
        Study this participant belongs to.
    cohort : str | None
        Recruitment cohort label.
    enrolled_at : datetime
        When the baseline survey was submitted and the sequence generated.
    withdrawn : bool
        Whether the participant has withdrawn.
    notes : str | None
        Free-text notes.

    Examples
    --------
    >>> p = Participant(condition_sequence=["HOURGLASS", "COUNTDOWN"])
    >>> p.total_sessions
    2
    >>> p.condition_for_session(1)
    <Condition.HOURGLASS: 'HOURGLASS'>
    """

    condition_sequence: tuple[Condition, ...] = Field(
        ..., frozen=True, description="Condition per session"
    )
    study_id: str | None = Field(default=None, description="Study identifier")
    cohort: str | None = Field(default=None, description="Cohort label")
    enrolled_at: datetime = Field(
        default_factory=now_iso8601, description="Enrollment timestamp"
    )
    withdrawn: bool = Field(default=False, description="Participant withdrew")
    notes: str | None = Field(default=None, description="Free-text notes")

    @field_validator("condition_sequence")
    @classmethod
    def validate_condition_sequence(
        cls, v: tuple[Condition, ...]
    ) -> tuple[Condition, ...]:
        """Validate the sequence is a non-empty balanced plan.

        Parameters
        ----------
        v : tuple[Condition, ...]
            Sequence to validate.

        Returns
        -------
        tuple[Condition, ...]
            Validated sequence.

        Raises
        ------
        ValueError
            If the sequence is empty, has an odd length, or does not hold
            equal COUNTDOWN and HOURGLASS counts.
        """
        if not v:
            raise ValueError("condition_sequence must contain at least one session")
        if len(v) % 2 != 0:
            raise ValueError(
                f"condition_sequence must have an even length, got {len(v)}"
            )
        analysis = analyze_sequence(v)
        if not analysis.balance:
            raise ValueError(
                "condition_sequence must be balanced, got "
                f"{analysis.countdown} COUNTDOWN and {analysis.hourglass} HOURGLASS"
            )
        return v

    @property
    def total_sessions(self) -> int:
        """Number of sessions in the participant's plan."""
        return len(self.condition_sequence)

    def condition_for_session(self, session_number: int) -> Condition:
        """Get the condition for a 1-based session number.

        Raises
        ------
        SessionOutOfRangeError
            If ``session_number`` is outside the plan.
        """
        return condition_for_session(self.condition_sequence, session_number)

    def plan_next_session(
        self, completed_sessions: int, post_treatment_submitted: bool = False
    ) -> SessionPlan:
        """Determine the next session given stored session records.

        Parameters
        ----------
        completed_sessions : int
            Number of session records stored for this participant.
        post_treatment_submitted : bool
            Whether the post-treatment survey has been submitted.

        Returns
        -------
        SessionPlan
            Next session number and condition, or a completed plan.
        """
        return plan_next_session(
            self.condition_sequence, completed_sessions, post_treatment_submitted
        )

    def analyze_sequence(self) -> SequenceAnalysis:
        """Balance statistics of this participant's sequence."""
        return analyze_sequence(self.condition_sequence)

    def withdraw(self) -> None:
        """Mark the participant as withdrawn."""
        self.withdrawn = True
        self.update_modified_time()
