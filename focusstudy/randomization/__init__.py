"""Session randomization and counterbalancing.

Generates each participant's fixed sequence of timer conditions, resolves
the condition for a session number, and analyzes sequence balance.

Examples
--------
>>> from focusstudy.randomization import (
...     SequenceGenerator,
...     analyze_sequence,
...     condition_for_session,
... )
>>> sequence = SequenceGenerator(random_seed=1).generate(8)
>>> analyze_sequence(sequence).balance
True
>>> condition_for_session(sequence, 1) in sequence
True
"""

from __future__ import annotations

from focusstudy.randomization.analysis import (
    SequenceAnalysis,
    analyze_sequence,
    longest_run,
)
from focusstudy.randomization.conditions import (
    Condition,
    ConditionSequence,
    parse_sequence,
)
from focusstudy.randomization.errors import (
    InvalidConfigurationError,
    RandomizationError,
    SessionOutOfRangeError,
)
from focusstudy.randomization.generator import (
    ALGORITHMS,
    Algorithm,
    SequenceGenerator,
    generate_session_sequence,
    generate_shuffled_sequence,
    validate_design,
)
from focusstudy.randomization.resolver import condition_for_session

__all__ = [
    # Conditions
    "Condition",
    "ConditionSequence",
    "parse_sequence",
    # Errors
    "RandomizationError",
    "InvalidConfigurationError",
    "SessionOutOfRangeError",
    # Generation
    "ALGORITHMS",
    "Algorithm",
    "SequenceGenerator",
    "generate_session_sequence",
    "generate_shuffled_sequence",
    "validate_design",
    # Resolution
    "condition_for_session",
    # Analysis
    "SequenceAnalysis",
    "analyze_sequence",
    "longest_run",
]
