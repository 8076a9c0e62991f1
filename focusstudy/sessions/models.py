"""Focus session records.

A FocusSession is created when a participant starts the session their plan
says is due, may be paused and resumed, and is ended once. Ending computes
the actual duration, whether the target was reached, and any overrun.
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from pydantic import Field

from focusstudy.data.base import StudyBaseModel
from focusstudy.data.timestamps import now_iso8601
from focusstudy.randomization.conditions import Condition
from focusstudy.sessions.timing import (
    calculate_duration,
    calculate_overrun,
    is_session_complete,
)

logger = logging.getLogger(__name__)

DEFAULT_TARGET_DURATION = 1500


class SessionStateError(Exception):
    """Raised when a session operation is not valid in its current state."""

    pass


def _empty_pause_list() -> list[SessionPause]:
    """Return empty pause list."""
    return []


class SessionPause(StudyBaseModel):
    """A pause within a focus session.

    Attributes
    ----------
    paused_at : datetime
        When the participant paused.
    resumed_at : datetime | None
        When the participant resumed; None while the pause is open.
    pause_duration : int | None
        Whole seconds paused, set on resume.
    """

    paused_at: datetime = Field(default_factory=now_iso8601)
    resumed_at: datetime | None = Field(default=None)
    pause_duration: int | None = Field(default=None, ge=0)

    @property
    def is_open(self) -> bool:
        """Whether the pause has not been resumed yet."""
        return self.resumed_at is None


class FocusSession(StudyBaseModel):
    """One focus session under a single timer condition.

    Attributes
    ----------
    participant_id : UUID
        Owning participant.
    session_number : int
        1-based position in the participant's condition sequence.
    condition : Condition
        Timer visualization shown in this session.
    target_duration : int
        Target length in seconds.
    start_time : datetime
        When the session started.
    end_time : datetime | None
        When the session ended; None while running.
    actual_duration : int | None
        Whole seconds from start to end.
    completed_full_session : bool | None
        Whether the target duration was reached.
    overrun_amount : int | None
        Seconds past the target, None if stopped early.
    pause_count : int
        Number of completed pauses.
    total_paused_time : int
        Total seconds spent paused.
    pauses : list[SessionPause]
        Pause events in order.

    Examples
    --------
    >>> from datetime import timedelta
    >>> from uuid import uuid4
    >>> start = now_iso8601()
    >>> session = FocusSession(
    ...     participant_id=uuid4(),
    ...     session_number=1,
    ...     condition=Condition.HOURGLASS,
    ...     start_time=start,
    ... )
    >>> _ = session.end(at=start + timedelta(seconds=1560))
    >>> session.completed_full_session, session.overrun_amount
    (True, 60)
    """

    participant_id: UUID = Field(..., description="Participant UUID")
    session_number: int = Field(..., ge=1, description="1-based session number")
    condition: Condition = Field(..., description="Timer condition")
    target_duration: int = Field(
        default=DEFAULT_TARGET_DURATION, gt=0, description="Target seconds"
    )
    start_time: datetime = Field(default_factory=now_iso8601)
    end_time: datetime | None = Field(default=None)
    actual_duration: int | None = Field(default=None)
    completed_full_session: bool | None = Field(default=None)
    overrun_amount: int | None = Field(default=None)
    pause_count: int = Field(default=0, ge=0)
    total_paused_time: int = Field(default=0, ge=0)
    pauses: list[SessionPause] = Field(default_factory=_empty_pause_list)

    @property
    def is_ended(self) -> bool:
        """Whether the session has ended."""
        return self.end_time is not None

    @property
    def active_pause(self) -> SessionPause | None:
        """The open pause, if any."""
        for pause in reversed(self.pauses):
            if pause.is_open:
                return pause
        return None

    def pause(self, at: datetime | None = None) -> SessionPause:
        """Pause the running session.

        Parameters
        ----------
        at : datetime | None
            Pause time (default: now).

        Returns
        -------
        SessionPause
            The new open pause.

        Raises
        ------
        SessionStateError
            If the session has ended or is already paused.
        """
        if self.is_ended:
            raise SessionStateError("Cannot pause an ended session")
        if self.active_pause is not None:
            raise SessionStateError("Session is already paused")

        pause = SessionPause(paused_at=at or now_iso8601())
        self.pauses.append(pause)
        self.update_modified_time()
        return pause

    def resume(
        self, at: datetime | None = None, pause_id: UUID | None = None
    ) -> SessionPause:
        """Resume from the open pause.

        Parameters
        ----------
        at : datetime | None
            Resume time (default: now).
        pause_id : UUID | None
            Expected id of the open pause, if the caller tracks it.

        Returns
        -------
        SessionPause
            The closed pause with its duration.

        Raises
        ------
        SessionStateError
            If the session has ended, is not paused, or ``pause_id`` does
            not match the open pause.
        """
        if self.is_ended:
            raise SessionStateError("Cannot resume an ended session")

        pause = self.active_pause
        if pause is None:
            raise SessionStateError("Session is not paused")
        if pause_id is not None and pause.id != pause_id:
            raise SessionStateError(
                f"Pause {pause_id} is not the open pause of this session"
            )

        self._close_pause(pause, at or now_iso8601())
        self.update_modified_time()
        return pause

    def _close_pause(self, pause: SessionPause, resumed_at: datetime) -> None:
        if resumed_at < pause.paused_at:
            raise SessionStateError("Resume time is before the pause started")
        pause.pause_duration = calculate_duration(pause.paused_at, resumed_at)
        pause.resumed_at = resumed_at
        self.pause_count += 1
        self.total_paused_time += pause.pause_duration

    def end(self, at: datetime | None = None) -> FocusSession:
        """End the session and compute its outcome.

        An open pause is closed at the end time.

        Parameters
        ----------
        at : datetime | None
            End time (default: now).

        Returns
        -------
        FocusSession
            This session, updated.

        Raises
        ------
        SessionStateError
            If the session has already ended or ``at`` is before the start
            time.
        """
        if self.is_ended:
            raise SessionStateError("Session already ended")

        end_time = at or now_iso8601()
        if end_time < self.start_time:
            raise SessionStateError(
                f"End time {end_time.isoformat()} is before start time "
                f"{self.start_time.isoformat()}"
            )
        pause = self.active_pause
        if pause is not None:
            self._close_pause(pause, end_time)
        actual_duration = calculate_duration(self.start_time, end_time)

        self.end_time = end_time
        self.actual_duration = actual_duration
        self.completed_full_session = is_session_complete(
            actual_duration, self.target_duration
        )
        self.overrun_amount = calculate_overrun(actual_duration, self.target_duration)
        self.update_modified_time()

        logger.info(
            f"Session {self.session_number} ({self.condition}) ended after "
            f"{actual_duration}s (target {self.target_duration}s)"
        )
        return self
