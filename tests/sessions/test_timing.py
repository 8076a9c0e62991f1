"""Tests for session timing helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from focusstudy.sessions import (
    calculate_completion_rate,
    calculate_duration,
    calculate_overrun,
    calculate_progress,
    format_time,
    has_completed_study,
    is_session_complete,
    is_valid_likert,
)

START = datetime(2025, 3, 1, 9, 0, tzinfo=UTC)


def test_calculate_duration_whole_seconds() -> None:
    """Test that durations are floored to whole seconds."""
    end = START + timedelta(seconds=90, milliseconds=999)
    assert calculate_duration(START, end) == 90


def test_calculate_duration_zero() -> None:
    """Test a zero-length interval."""
    assert calculate_duration(START, START) == 0


@pytest.mark.parametrize(
    ("actual", "target", "expected"),
    [(1500, 1500, True), (1499, 1500, False), (1800, 1500, True)],
)
def test_is_session_complete(actual: int, target: int, expected: bool) -> None:
    """Test completion against the target duration."""
    assert is_session_complete(actual, target) is expected


def test_calculate_overrun() -> None:
    """Test overrun past the target and None when stopped early."""
    assert calculate_overrun(1560, 1500) == 60
    assert calculate_overrun(1500, 1500) is None
    assert calculate_overrun(1200, 1500) is None


def test_calculate_progress() -> None:
    """Test clamped percentage progress."""
    assert calculate_progress(750, 1500) == 50.0
    assert calculate_progress(3000, 1500) == 100.0
    assert calculate_progress(-5, 1500) == 0.0
    assert calculate_progress(10, 0) == 0.0


@pytest.mark.parametrize(
    ("completed", "total", "expected"),
    [(0, 8, 0), (1, 8, 13), (3, 8, 38), (4, 8, 50), (8, 8, 100), (1, 0, 0)],
)
def test_calculate_completion_rate(completed: int, total: int, expected: int) -> None:
    """Test rounded completion percentages, halves rounding up."""
    assert calculate_completion_rate(completed, total) == expected


def test_has_completed_study() -> None:
    """Test the required session threshold."""
    assert has_completed_study(8, 8)
    assert not has_completed_study(7, 8)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1, True), (5, True), (0, False), (6, False), (3.0, False), (True, False)],
)
def test_is_valid_likert(value: object, expected: bool) -> None:
    """Test 1-5 integer Likert validation."""
    assert is_valid_likert(value) is expected


@pytest.mark.parametrize(
    ("seconds", "expected"), [(0, "00:00"), (59, "00:59"), (1500, "25:00")]
)
def test_format_time(seconds: int, expected: str) -> None:
    """Test mm:ss formatting."""
    assert format_time(seconds) == expected
