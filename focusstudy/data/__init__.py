"""Data infrastructure for focusstudy.

Base record model, identifiers, timestamps and JSONLines serialization.
"""

from __future__ import annotations

from focusstudy.data.base import StudyBaseModel
from focusstudy.data.identifiers import generate_uuid, is_valid_uuid7
from focusstudy.data.serialization import (
    DeserializationError,
    SerializationError,
    read_jsonlines,
    write_jsonlines,
)
from focusstudy.data.timestamps import now_iso8601

__all__ = [
    "StudyBaseModel",
    "generate_uuid",
    "is_valid_uuid7",
    "now_iso8601",
    "read_jsonlines",
    "write_jsonlines",
    "SerializationError",
    "DeserializationError",
]
