"""Next-session planning for participant dashboards and session start.

Wraps the resolver with the bookkeeping the session workflow owns: a
participant with ``completed_sessions`` stored sessions is next due
session ``completed_sessions + 1``, unless the plan is exhausted or the
post-treatment survey has already been submitted.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from focusstudy.randomization.conditions import Condition
from focusstudy.randomization.resolver import condition_for_session
from focusstudy.sessions.timing import calculate_completion_rate

logger = logging.getLogger(__name__)


class SessionPlan(BaseModel):
    """Where a participant stands in their condition sequence.

    Attributes
    ----------
    total_sessions : int
        Length of the condition sequence.
    completed_sessions : int
        Sessions already stored for the participant.
    next_session_number : int | None
        1-based number of the next session, or None when complete.
    next_condition : Condition | None
        Condition for the next session, or None when complete.
    is_complete : bool
        Whether the participant has no further sessions.
    """

    model_config = ConfigDict(frozen=True)

    total_sessions: int = Field(..., ge=0)
    completed_sessions: int = Field(..., ge=0)
    next_session_number: int | None = Field(default=None, ge=1)
    next_condition: Condition | None = None
    is_complete: bool

    @property
    def remaining_sessions(self) -> int:
        """Sessions left in the plan (0 once complete)."""
        if self.is_complete:
            return 0
        return self.total_sessions - self.completed_sessions

    @property
    def progress_percent(self) -> int:
        """Completed sessions as a rounded percentage of the plan."""
        return min(
            100, calculate_completion_rate(self.completed_sessions, self.total_sessions)
        )


def plan_next_session(
    sequence: Sequence[Condition],
    completed_sessions: int,
    post_treatment_submitted: bool = False,
) -> SessionPlan:
    """Determine the next session and its condition.

    Parameters
    ----------
    sequence : Sequence[Condition]
        The participant's condition sequence.
    completed_sessions : int
        Number of session records already stored for the participant.
    post_treatment_submitted : bool
        Whether the participant has submitted the post-treatment survey,
        which ends their participation regardless of session count.

    Returns
    -------
    SessionPlan
        Next session number and condition, or a completed plan.

    Raises
    ------
    ValueError
        If ``completed_sessions`` is negative.

    Examples
    --------
    >>> from focusstudy.randomization.conditions import parse_sequence
    >>> seq = parse_sequence(["HOURGLASS", "COUNTDOWN"])
    >>> plan = plan_next_session(seq, completed_sessions=1)
    >>> plan.next_session_number, plan.next_condition
    (2, <Condition.COUNTDOWN: 'COUNTDOWN'>)
    >>> plan_next_session(seq, completed_sessions=2).is_complete
    True
    """
    if completed_sessions < 0:
        raise ValueError(
            f"completed_sessions must be non-negative, got {completed_sessions}"
        )

    total_sessions = len(sequence)
    is_complete = completed_sessions >= total_sessions or post_treatment_submitted

    if is_complete:
        logger.debug(
            f"Plan complete after {completed_sessions} of {total_sessions} sessions"
        )
        return SessionPlan(
            total_sessions=total_sessions,
            completed_sessions=completed_sessions,
            is_complete=True,
        )

    next_session_number = completed_sessions + 1
    return SessionPlan(
        total_sessions=total_sessions,
        completed_sessions=completed_sessions,
        next_session_number=next_session_number,
        next_condition=condition_for_session(sequence, next_session_number),
        is_complete=False,
    )
