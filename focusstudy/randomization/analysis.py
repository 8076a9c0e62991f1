"""Balance analysis for condition sequences.

Used by tests and validation tooling to check that generated sequences are
exactly balanced and actually randomized. Accepts any sequence, including
hand-built or malformed ones.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from focusstudy.randomization.conditions import Condition


class SequenceAnalysis(BaseModel):
    """Summary statistics of a condition sequence.

    Attributes
    ----------
    total : int
        Sequence length.
    countdown : int
        Number of COUNTDOWN sessions.
    hourglass : int
        Number of HOURGLASS sessions.
    balance : bool
        Whether both counts are equal.
    transitions : int
        Number of adjacent positions whose conditions differ.
    max_possible_transitions : int
        ``total - 1``, or 0 for an empty sequence.
    """

    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=0, description="Sequence length")
    countdown: int = Field(..., ge=0, description="COUNTDOWN count")
    hourglass: int = Field(..., ge=0, description="HOURGLASS count")
    balance: bool = Field(..., description="Counts are equal")
    transitions: int = Field(..., ge=0, description="Condition changes")
    max_possible_transitions: int = Field(
        ..., ge=0, description="Upper bound on transitions"
    )


def analyze_sequence(sequence: Sequence[Condition]) -> SequenceAnalysis:
    """Compute balance and transition statistics for a sequence.

    Parameters
    ----------
    sequence : Sequence[Condition]
        Sequence to analyze. May be empty.

    Returns
    -------
    SequenceAnalysis
        Counts, balance flag and transition statistics.

    Examples
    --------
    >>> from focusstudy.randomization.conditions import parse_sequence
    >>> seq = parse_sequence(["COUNTDOWN", "COUNTDOWN", "HOURGLASS", "HOURGLASS"])
    >>> result = analyze_sequence(seq)
    >>> result.balance, result.transitions, result.max_possible_transitions
    (True, 1, 3)
    >>> analyze_sequence([]).balance
    True
    """
    countdown = sum(1 for c in sequence if c == Condition.COUNTDOWN)
    hourglass = sum(1 for c in sequence if c == Condition.HOURGLASS)
    transitions = sum(
        1 for i in range(1, len(sequence)) if sequence[i] != sequence[i - 1]
    )

    return SequenceAnalysis(
        total=len(sequence),
        countdown=countdown,
        hourglass=hourglass,
        balance=countdown == hourglass,
        transitions=transitions,
        max_possible_transitions=max(len(sequence) - 1, 0),
    )


def longest_run(sequence: Sequence[Condition]) -> int:
    """Length of the longest block of identical consecutive conditions.

    Parameters
    ----------
    sequence : Sequence[Condition]
        Sequence to inspect.

    Returns
    -------
    int
        Longest run length; 0 for an empty sequence.

    Examples
    --------
    >>> from focusstudy.randomization.conditions import parse_sequence
    >>> longest_run(parse_sequence(["COUNTDOWN", "HOURGLASS", "HOURGLASS"]))
    2
    """
    best = 0
    current = 0
    previous: Condition | None = None
    for condition in sequence:
        current = current + 1 if condition == previous else 1
        best = max(best, current)
        previous = condition
    return best
