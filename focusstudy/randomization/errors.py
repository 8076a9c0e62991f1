"""Randomization-specific exceptions."""

from __future__ import annotations


class RandomizationError(Exception):
    """Base exception for randomization errors."""

    pass


class InvalidConfigurationError(RandomizationError, ValueError):
    """Raised when a study design cannot produce a balanced sequence.

    Signals a setup bug (odd or non-positive session total, or an
    unsatisfiable minimum per condition). Callers should fail at study
    setup rather than retry.
    """

    pass


class SessionOutOfRangeError(RandomizationError, IndexError):
    """Raised when a session number falls outside a participant's plan.

    Parameters
    ----------
    session_number
        The requested 1-based session number.
    total_sessions
        Length of the condition sequence.

    Examples
    --------
    >>> try:
    ...     raise SessionOutOfRangeError(5, 4)
    ... except SessionOutOfRangeError as e:
    ...     print(e)
    Invalid session number: 5 (expected 1 to 4)
    """

    def __init__(self, session_number: int, total_sessions: int) -> None:
        self.session_number = session_number
        self.total_sessions = total_sessions
        super().__init__(
            f"Invalid session number: {session_number} "
            f"(expected 1 to {total_sessions})"
        )
