"""Base Pydantic model for focusstudy records.

Provides StudyBaseModel, the Pydantic v2 model that participant and session
records inherit from. It supplies UUIDv7 identifiers, creation and
modification timestamps, a schema version and free-form metadata.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from focusstudy.data.identifiers import generate_uuid
from focusstudy.data.timestamps import now_iso8601


class StudyBaseModel(BaseModel):
    """Base Pydantic model for all focusstudy records.

    Attributes
    ----------
    id : UUID
        Unique identifier (UUIDv7) generated on creation.
    created_at : datetime
        UTC timestamp when the record was created.
    modified_at : datetime
        UTC timestamp when the record was last modified.
    version : str
        Schema version string (default: "1.0.0").
    metadata : dict[str, Any]
        Arbitrary key-value metadata.

    Examples
    --------
    >>> class Note(StudyBaseModel):
    ...     text: str
    >>> note = Note(text="hello")
    >>> note.version
    '1.0.0'
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    id: UUID = Field(default_factory=generate_uuid)
    created_at: datetime = Field(default_factory=now_iso8601)
    modified_at: datetime = Field(default_factory=now_iso8601)
    version: str = Field(default="1.0.0")
    metadata: dict[str, Any] = Field(default_factory=dict)

    def update_modified_time(self) -> None:
        """Update the modified_at timestamp to current UTC time."""
        self.modified_at = now_iso8601()
