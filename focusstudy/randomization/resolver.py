"""Session-number to condition resolution."""

from __future__ import annotations

from collections.abc import Sequence

from focusstudy.randomization.conditions import Condition
from focusstudy.randomization.errors import SessionOutOfRangeError


def condition_for_session(
    sequence: Sequence[Condition], session_number: int
) -> Condition:
    """Get the condition for a 1-based session number.

    This is a plain lookup. Whether a next session is due (study complete,
    post-treatment survey submitted) is decided by the caller; see
    :func:`focusstudy.sessions.planning.plan_next_session`.

    Parameters
    ----------
    sequence : Sequence[Condition]
        The participant's condition sequence.
    session_number : int
        Session number, starting at 1.

    Returns
    -------
    Condition
        The condition at position ``session_number``.

    Raises
    ------
    SessionOutOfRangeError
        If ``session_number`` is below 1 or above ``len(sequence)``.

    Examples
    --------
    >>> from focusstudy.randomization.conditions import parse_sequence
    >>> seq = parse_sequence(["HOURGLASS", "COUNTDOWN", "COUNTDOWN", "HOURGLASS"])
    >>> condition_for_session(seq, 3)
    <Condition.COUNTDOWN: 'COUNTDOWN'>
    """
    if session_number < 1 or session_number > len(sequence):
        raise SessionOutOfRangeError(session_number, len(sequence))
    return sequence[session_number - 1]
