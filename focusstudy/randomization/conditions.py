"""Experimental conditions and condition sequences.

A participant's plan is an immutable, ordered sequence of conditions,
1-indexed by session number. It is stored as a JSON array of the condition
string literals.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum


class Condition(StrEnum):
    """Timer visualization shown during a focus session.

    Attributes
    ----------
    COUNTDOWN
        Numeric mm:ss countdown.
    HOURGLASS
        Non-numeric draining hourglass.

    Examples
    --------
    >>> Condition("HOURGLASS") is Condition.HOURGLASS
    True
    >>> str(Condition.COUNTDOWN)
    'COUNTDOWN'
    """

    COUNTDOWN = "COUNTDOWN"
    HOURGLASS = "HOURGLASS"


type ConditionSequence = tuple[Condition, ...]


def parse_sequence(values: Iterable[str | Condition]) -> ConditionSequence:
    """Build a condition sequence from stored labels.

    Parameters
    ----------
    values : Iterable[str | Condition]
        Condition labels in session order.

    Returns
    -------
    ConditionSequence
        Sequence with the same order as ``values``.

    Raises
    ------
    ValueError
        If a label is not a known condition.

    Examples
    --------
    >>> parse_sequence(["HOURGLASS", "COUNTDOWN"])
    (<Condition.HOURGLASS: 'HOURGLASS'>, <Condition.COUNTDOWN: 'COUNTDOWN'>)
    """
    sequence: list[Condition] = []
    for position, value in enumerate(values, start=1):
        try:
            sequence.append(Condition(value))
        except ValueError as e:
            raise ValueError(
                f"Unknown condition {value!r} at session {position}; "
                f"expected one of: {', '.join(c.value for c in Condition)}"
            ) from e
    return tuple(sequence)
