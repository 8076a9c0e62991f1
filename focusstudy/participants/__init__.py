"""Participants: enrollment, condition sequences and collections.

Examples
--------
>>> from focusstudy.config import StudyDesignConfig
>>> from focusstudy.participants import enroll_participant
>>> participant = enroll_participant(StudyDesignConfig(random_seed=0))
>>> participant.plan_next_session(completed_sessions=0).next_session_number
1
"""

from focusstudy.participants.collection import ParticipantCollection
from focusstudy.participants.enrollment import enroll_participant, start_next_session
from focusstudy.participants.models import (
    Participant,
    sequence_from_json,
    sequence_to_json,
)

__all__ = [
    "Participant",
    "ParticipantCollection",
    "enroll_participant",
    "start_next_session",
    "sequence_from_json",
    "sequence_to_json",
]
