"""Tests for session-number to condition resolution."""

from __future__ import annotations

import pytest

from focusstudy.randomization import (
    Condition,
    ConditionSequence,
    RandomizationError,
    SequenceGenerator,
    SessionOutOfRangeError,
    condition_for_session,
)

C = Condition.COUNTDOWN
H = Condition.HOURGLASS


class TestConditionForSession:
    """Tests for condition_for_session function."""

    @pytest.mark.parametrize(
        ("session_number", "expected"), [(1, H), (2, C), (3, C), (4, H)]
    )
    def test_one_based_lookup(
        self,
        hcch_sequence: ConditionSequence,
        session_number: int,
        expected: Condition,
    ) -> None:
        """Test lookup on [H, C, C, H]."""
        assert condition_for_session(hcch_sequence, session_number) is expected

    @pytest.mark.parametrize("session_number", [0, 5, -1, 100])
    def test_out_of_range(
        self, hcch_sequence: ConditionSequence, session_number: int
    ) -> None:
        """Test that numbers outside 1..4 raise SessionOutOfRangeError."""
        with pytest.raises(SessionOutOfRangeError):
            condition_for_session(hcch_sequence, session_number)

    def test_negative_does_not_index_from_end(
        self, hcch_sequence: ConditionSequence
    ) -> None:
        """Test that -1 is rejected rather than returning the last session."""
        with pytest.raises(SessionOutOfRangeError):
            condition_for_session(hcch_sequence, -1)

    def test_error_carries_context(self, hcch_sequence: ConditionSequence) -> None:
        """Test that the error reports the session number and plan length."""
        with pytest.raises(SessionOutOfRangeError) as exc_info:
            condition_for_session(hcch_sequence, 5)

        assert exc_info.value.session_number == 5
        assert exc_info.value.total_sessions == 4
        assert str(exc_info.value) == "Invalid session number: 5 (expected 1 to 4)"

    def test_error_hierarchy(self, hcch_sequence: ConditionSequence) -> None:
        """Test that the error is a RandomizationError and an IndexError."""
        with pytest.raises(RandomizationError):
            condition_for_session(hcch_sequence, 0)
        with pytest.raises(IndexError):
            condition_for_session(hcch_sequence, 0)

    def test_empty_sequence(self) -> None:
        """Test that every session number is out of range for an empty plan."""
        with pytest.raises(SessionOutOfRangeError):
            condition_for_session((), 1)

    def test_accepts_list(self) -> None:
        """Test that any sequence type is accepted."""
        assert condition_for_session([C, H], 2) is H

    def test_same_answer_every_time(self) -> None:
        """Test that resolution is stable for a generated plan."""
        sequence = SequenceGenerator(random_seed=8).generate(8)
        for session_number in range(1, 9):
            first = condition_for_session(sequence, session_number)
            assert all(
                condition_for_session(sequence, session_number) is first
                for _ in range(5)
            )
            assert first is sequence[session_number - 1]
