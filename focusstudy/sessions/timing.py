"""Timing and progress helpers for focus sessions."""

from __future__ import annotations

import math
from datetime import datetime


def calculate_duration(start_time: datetime, end_time: datetime) -> int:
    """Whole seconds elapsed between two times, floored.

    Examples
    --------
    >>> from datetime import timedelta
    >>> start = datetime(2025, 1, 1, 12, 0, 0)
    >>> calculate_duration(start, start + timedelta(seconds=90.9))
    90
    """
    return math.floor((end_time - start_time).total_seconds())


def is_session_complete(actual_duration: int, target_duration: int) -> bool:
    """Whether a session reached its target duration."""
    return actual_duration >= target_duration


def calculate_overrun(actual_duration: int, target_duration: int) -> int | None:
    """Seconds spent past the target, or None if the session stopped early.

    Examples
    --------
    >>> calculate_overrun(1560, 1500)
    60
    >>> calculate_overrun(1500, 1500) is None
    True
    """
    if actual_duration <= target_duration:
        return None
    return actual_duration - target_duration


def calculate_progress(current: float, total: float) -> float:
    """Percentage of ``total`` reached, clamped to [0, 100]."""
    if total == 0:
        return 0.0
    return min(100.0, max(0.0, current / total * 100))


def calculate_completion_rate(completed_sessions: int, total_sessions: int) -> int:
    """Completed sessions as a rounded whole percentage.

    Examples
    --------
    >>> calculate_completion_rate(3, 8)
    38
    """
    if total_sessions == 0:
        return 0
    # round half up; built-in round() rounds half to even
    return int(completed_sessions / total_sessions * 100 + 0.5)


def has_completed_study(completed_sessions: int, required_sessions: int) -> bool:
    """Whether a participant has finished all required sessions."""
    return completed_sessions >= required_sessions


def is_valid_likert(value: object) -> bool:
    """Whether ``value`` is an integer rating on the 1-5 scale.

    Examples
    --------
    >>> is_valid_likert(3)
    True
    >>> is_valid_likert(3.5), is_valid_likert(True), is_valid_likert(6)
    (False, False, False)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 1 <= value <= 5


def format_time(seconds: int) -> str:
    """Format seconds as zero-padded ``mm:ss``.

    Examples
    --------
    >>> format_time(1477)
    '24:37'
    """
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
