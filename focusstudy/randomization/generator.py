"""Condition sequence generation for the within-subjects design.

Two algorithms are provided and selected by name:

- ``"pair_shuffle"`` (default): the sequence is built from
  ``total_sessions / 2`` pairs of ``[COUNTDOWN, HOURGLASS]``, each reversed
  on an unbiased coin flip. Counts are exactly balanced and no condition
  runs for more than 2 consecutive sessions.
- ``"shuffle"``: a Fisher-Yates shuffle over ``total_sessions / 2`` copies
  of each condition. Counts are exactly balanced but runs are unbounded.

Randomness comes from an injected NumPy generator or seed. Passing a seed
gives reproducible sequences; passing None draws fresh OS entropy.
"""

from __future__ import annotations

import logging
from typing import Literal

import numpy as np

from focusstudy.randomization.conditions import Condition, ConditionSequence
from focusstudy.randomization.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

type Algorithm = Literal["pair_shuffle", "shuffle"]

ALGORITHMS: tuple[Algorithm, ...] = ("pair_shuffle", "shuffle")

type RandomSource = np.random.Generator | int | None


def validate_design(total_sessions: int, min_per_condition: int | None = None) -> None:
    """Check that a study design admits an exactly balanced sequence.

    Parameters
    ----------
    total_sessions : int
        Total number of sessions per participant.
    min_per_condition : int | None
        Minimum number of sessions of each condition, if constrained.

    Raises
    ------
    InvalidConfigurationError
        If ``total_sessions`` is not a positive even integer, or if
        ``min_per_condition * 2 > total_sessions``.

    Examples
    --------
    >>> validate_design(8, min_per_condition=2)
    >>> try:
    ...     validate_design(7)
    ... except InvalidConfigurationError as e:
    ...     print(e)
    Total sessions must be even for balanced design, got 7
    """
    if isinstance(total_sessions, bool) or not isinstance(total_sessions, int):
        msg = f"Total sessions must be an integer, got {total_sessions!r}"
        logger.error(msg)
        raise InvalidConfigurationError(msg)
    if total_sessions < 1:
        msg = f"Total sessions must be positive, got {total_sessions}"
        logger.error(msg)
        raise InvalidConfigurationError(msg)
    if total_sessions % 2 != 0:
        msg = f"Total sessions must be even for balanced design, got {total_sessions}"
        logger.error(msg)
        raise InvalidConfigurationError(msg)

    if min_per_condition is None:
        return
    if min_per_condition < 0:
        msg = f"Minimum per condition must be non-negative, got {min_per_condition}"
        logger.error(msg)
        raise InvalidConfigurationError(msg)
    if min_per_condition * 2 > total_sessions:
        msg = (
            f"Minimum per condition ({min_per_condition}) is too high for "
            f"{total_sessions} total sessions"
        )
        logger.error(msg)
        raise InvalidConfigurationError(msg)


class SequenceGenerator:
    """Generates balanced condition sequences for new participants.

    Parameters
    ----------
    random_seed : int | None, default=None
        Seed for reproducibility. If None, uses non-deterministic RNG.
    rng : np.random.Generator | None, default=None
        Explicit generator to draw from. Takes precedence over
        ``random_seed``.

    Attributes
    ----------
    random_seed : int | None
        Seed the generator was created with.

    Examples
    --------
    >>> generator = SequenceGenerator(random_seed=42)
    >>> sequence = generator.pair_shuffle(8)
    >>> len(sequence)
    8
    >>> sequence.count(Condition.COUNTDOWN) == sequence.count(Condition.HOURGLASS)
    True
    """

    def __init__(
        self,
        random_seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.random_seed = random_seed
        self._rng = rng if rng is not None else np.random.default_rng(random_seed)

    def pair_shuffle(
        self, total_sessions: int, min_per_condition: int | None = None
    ) -> ConditionSequence:
        """Generate a sequence by shuffling within consecutive pairs.

        Parameters
        ----------
        total_sessions : int
            Positive even number of sessions.
        min_per_condition : int | None
            Optional minimum sessions per condition.

        Returns
        -------
        ConditionSequence
            Balanced sequence in which no condition appears more than twice
            in a row.

        Raises
        ------
        InvalidConfigurationError
            If the design is invalid (see :func:`validate_design`).
        """
        validate_design(total_sessions, min_per_condition)

        n_pairs = total_sessions // 2
        flips = self._rng.random(n_pairs) < 0.5

        sequence: list[Condition] = []
        for flip in flips:
            pair = [Condition.COUNTDOWN, Condition.HOURGLASS]
            if flip:
                pair.reverse()
            sequence.extend(pair)

        logger.debug(
            f"Generated {total_sessions}-session sequence (pair_shuffle): "
            f"{', '.join(sequence)}"
        )
        return tuple(sequence)

    def shuffle(
        self, total_sessions: int, min_per_condition: int | None = None
    ) -> ConditionSequence:
        """Generate a sequence by Fisher-Yates shuffling a balanced list.

        Unlike :meth:`pair_shuffle`, runs of one condition are not bounded.

        Parameters
        ----------
        total_sessions : int
            Positive even number of sessions.
        min_per_condition : int | None
            Optional minimum sessions per condition.

        Returns
        -------
        ConditionSequence
            Balanced sequence in uniformly random order.

        Raises
        ------
        InvalidConfigurationError
            If the design is invalid (see :func:`validate_design`).
        """
        validate_design(total_sessions, min_per_condition)

        half = total_sessions // 2
        sequence = [Condition.COUNTDOWN] * half + [Condition.HOURGLASS] * half

        for i in range(len(sequence) - 1, 0, -1):
            j = int(self._rng.integers(0, i + 1))
            sequence[i], sequence[j] = sequence[j], sequence[i]

        logger.debug(
            f"Generated {total_sessions}-session sequence (shuffle): "
            f"{', '.join(sequence)}"
        )
        return tuple(sequence)

    def generate(
        self,
        total_sessions: int,
        min_per_condition: int | None = None,
        algorithm: Algorithm = "pair_shuffle",
    ) -> ConditionSequence:
        """Generate a sequence with the named algorithm.

        Parameters
        ----------
        total_sessions : int
            Positive even number of sessions.
        min_per_condition : int | None
            Optional minimum sessions per condition.
        algorithm : {"pair_shuffle", "shuffle"}
            Counterbalancing algorithm.

        Returns
        -------
        ConditionSequence
            Balanced sequence.

        Raises
        ------
        InvalidConfigurationError
            If the design is invalid or the algorithm is unknown.
        """
        if algorithm == "pair_shuffle":
            return self.pair_shuffle(total_sessions, min_per_condition)
        if algorithm == "shuffle":
            return self.shuffle(total_sessions, min_per_condition)

        msg = (
            f"Unknown sequence algorithm {algorithm!r}. "
            f"Available algorithms: {', '.join(ALGORITHMS)}"
        )
        logger.error(msg)
        raise InvalidConfigurationError(msg)


def generate_session_sequence(
    total_sessions: int,
    min_per_condition: int | None = None,
    rng: RandomSource = None,
) -> ConditionSequence:
    """Generate a pair-shuffled sequence.

    Parameters
    ----------
    total_sessions : int
        Positive even number of sessions.
    min_per_condition : int | None
        Optional minimum sessions per condition.
    rng : np.random.Generator | int | None
        Generator or seed to draw from.

    Returns
    -------
    ConditionSequence
        Balanced sequence with runs of at most 2.

    Examples
    --------
    >>> a = generate_session_sequence(8, rng=7)
    >>> b = generate_session_sequence(8, rng=7)
    >>> a == b
    True
    """
    return SequenceGenerator(rng=np.random.default_rng(rng)).pair_shuffle(
        total_sessions, min_per_condition
    )


def generate_shuffled_sequence(
    total_sessions: int,
    min_per_condition: int | None = None,
    rng: RandomSource = None,
) -> ConditionSequence:
    """Generate a Fisher-Yates shuffled sequence.

    Parameters
    ----------
    total_sessions : int
        Positive even number of sessions.
    min_per_condition : int | None
        Optional minimum sessions per condition.
    rng : np.random.Generator | int | None
        Generator or seed to draw from.

    Returns
    -------
    ConditionSequence
        Balanced sequence with unbounded runs.
    """
    return SequenceGenerator(rng=np.random.default_rng(rng)).shuffle(
        total_sessions, min_per_condition
    )
