"""Focus sessions: next-session planning, session records and timing."""

from __future__ import annotations

from focusstudy.sessions.models import (
    DEFAULT_TARGET_DURATION,
    FocusSession,
    SessionPause,
    SessionStateError,
)
from focusstudy.sessions.planning import SessionPlan, plan_next_session
from focusstudy.sessions.timing import (
    calculate_completion_rate,
    calculate_duration,
    calculate_overrun,
    calculate_progress,
    format_time,
    has_completed_study,
    is_session_complete,
    is_valid_likert,
)

__all__ = [
    # Records
    "DEFAULT_TARGET_DURATION",
    "FocusSession",
    "SessionPause",
    "SessionStateError",
    # Planning
    "SessionPlan",
    "plan_next_session",
    # Timing
    "calculate_completion_rate",
    "calculate_duration",
    "calculate_overrun",
    "calculate_progress",
    "format_time",
    "has_completed_study",
    "is_session_complete",
    "is_valid_likert",
]
