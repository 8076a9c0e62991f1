"""Pytest fixtures for participant tests."""

from __future__ import annotations

import pytest

from focusstudy.config import StudyDesignConfig
from focusstudy.participants import Participant, ParticipantCollection
from focusstudy.randomization import SequenceGenerator


@pytest.fixture
def study() -> StudyDesignConfig:
    """Seeded eight-session study design."""
    return StudyDesignConfig(total_sessions=8, min_per_condition=2, random_seed=42)


@pytest.fixture
def participant() -> Participant:
    """Participant with the plan HOURGLASS, COUNTDOWN, COUNTDOWN, HOURGLASS."""
    return Participant(
        condition_sequence=["HOURGLASS", "COUNTDOWN", "COUNTDOWN", "HOURGLASS"],
        study_id="pilot",
    )


@pytest.fixture
def populated_collection(study: StudyDesignConfig) -> ParticipantCollection:
    """Collection of five participants enrolled from one generator."""
    from focusstudy.participants import enroll_participant

    generator = SequenceGenerator(random_seed=study.random_seed)
    collection = ParticipantCollection(name="pilot")
    for _ in range(5):
        collection.add_participant(
            enroll_participant(study, generator=generator, study_id="pilot")
        )
    return collection
