"""Many-trial validation of the sequence generators.

Generates a batch of sequences from one seeded generator and tabulates their
analysis, so that balance (always exact) and randomization (transition
counts vary) can be checked empirically.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
from pydantic import BaseModel, Field

from focusstudy.randomization.analysis import analyze_sequence, longest_run
from focusstudy.randomization.generator import Algorithm, SequenceGenerator

logger = logging.getLogger(__name__)

SIMULATION_COLUMNS = [
    "trial",
    "total",
    "countdown",
    "hourglass",
    "balance",
    "transitions",
    "max_possible_transitions",
    "longest_run",
]


class SimulationSummary(BaseModel):
    """Aggregate statistics over simulated sequences.

    Attributes
    ----------
    n_trials : int
        Number of generated sequences.
    balanced_share : float
        Fraction of sequences with equal condition counts.
    min_transitions : int
        Fewest transitions observed.
    mean_transitions : float
        Mean transitions per sequence.
    max_transitions : int
        Most transitions observed.
    transition_counts : dict[int, int]
        Number of sequences per observed transition count.
    max_run_length : int
        Longest run of one condition in any sequence.
    """

    n_trials: int = Field(..., ge=0)
    balanced_share: float = Field(..., ge=0.0, le=1.0)
    min_transitions: int = Field(..., ge=0)
    mean_transitions: float = Field(..., ge=0.0)
    max_transitions: int = Field(..., ge=0)
    transition_counts: dict[int, int] = Field(default_factory=dict)
    max_run_length: int = Field(..., ge=0)


def simulate_sequences(
    n_trials: int,
    total_sessions: int,
    algorithm: Algorithm = "pair_shuffle",
    random_seed: int | None = None,
    min_per_condition: int | None = None,
) -> pd.DataFrame:
    """Generate ``n_trials`` sequences and tabulate their analysis.

    Parameters
    ----------
    n_trials : int
        Number of sequences to generate (must be >= 1).
    total_sessions : int
        Sessions per sequence.
    algorithm : {"pair_shuffle", "shuffle"}
        Generator algorithm.
    random_seed : int | None
        Seed for the shared generator.
    min_per_condition : int | None
        Optional minimum sessions per condition.

    Returns
    -------
    pd.DataFrame
        One row per trial with columns listed in ``SIMULATION_COLUMNS``.

    Raises
    ------
    ValueError
        If ``n_trials < 1``.
    InvalidConfigurationError
        If the design is invalid.
    """
    if n_trials < 1:
        raise ValueError(f"n_trials must be >= 1, got {n_trials}")

    generator = SequenceGenerator(random_seed=random_seed)
    rows: list[dict[str, int | bool]] = []
    for trial in range(n_trials):
        sequence = generator.generate(total_sessions, min_per_condition, algorithm)
        analysis = analyze_sequence(sequence)
        rows.append(
            {
                "trial": trial,
                **analysis.model_dump(),
                "longest_run": longest_run(sequence),
            }
        )

    logger.info(
        f"Simulated {n_trials} sequences of {total_sessions} sessions ({algorithm})"
    )
    return pd.DataFrame(rows, columns=SIMULATION_COLUMNS)


def summarize_simulation(frame: pd.DataFrame) -> SimulationSummary:
    """Summarize a frame produced by :func:`simulate_sequences`.

    Parameters
    ----------
    frame : pd.DataFrame
        Simulation results.

    Returns
    -------
    SimulationSummary
        Aggregate statistics. All zeros for an empty frame.
    """
    if frame.empty:
        return SimulationSummary(
            n_trials=0,
            balanced_share=0.0,
            min_transitions=0,
            mean_transitions=0.0,
            max_transitions=0,
            max_run_length=0,
        )

    transitions = frame["transitions"].to_numpy()
    counts = frame["transitions"].value_counts().sort_index()

    return SimulationSummary(
        n_trials=len(frame),
        balanced_share=float(frame["balance"].mean()),
        min_transitions=int(np.min(transitions)),
        mean_transitions=float(np.mean(transitions)),
        max_transitions=int(np.max(transitions)),
        transition_counts={int(k): int(v) for k, v in counts.items()},
        max_run_length=int(frame["longest_run"].max()),
    )
