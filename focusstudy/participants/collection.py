"""Participant collection with JSONL I/O and DataFrame support."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal
from uuid import UUID

import pandas as pd
import polars as pl
from pydantic import Field, field_validator

from focusstudy.data.base import StudyBaseModel
from focusstudy.data.serialization import read_jsonlines, write_jsonlines
from focusstudy.participants.models import Participant

DataFrame = pd.DataFrame | pl.DataFrame

DATAFRAME_COLUMNS = [
    "participant_id",
    "study_id",
    "cohort",
    "enrolled_at",
    "withdrawn",
    "total_sessions",
    "condition_sequence",
    "countdown",
    "hourglass",
    "balance",
    "transitions",
]


def _empty_participant_list() -> list[Participant]:
    """Return empty participant list."""
    return []


class ParticipantCollection(StudyBaseModel):
    """Collection of participants with JSONL I/O and DataFrame support.

    Attributes
    ----------
    name : str
        Name of this collection.
    participants : list[Participant]
        Participants in enrollment order.

    Examples
    --------
    >>> collection = ParticipantCollection(name="pilot")
    >>> collection.add_participant(
    ...     Participant(condition_sequence=["COUNTDOWN", "HOURGLASS"])
    ... )
    >>> len(collection)
    1
    """

    name: str = Field(..., description="Collection name")
    participants: list[Participant] = Field(
        default_factory=_empty_participant_list, description="Participants"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is non-empty."""
        if not v or not v.strip():
            raise ValueError("Collection name cannot be empty")
        return v.strip()

    def __len__(self) -> int:
        """Return number of participants."""
        return len(self.participants)

    def add_participant(self, participant: Participant) -> None:
        """Add a participant to the collection.

        Parameters
        ----------
        participant : Participant
            Participant to add.

        Raises
        ------
        ValueError
            If a participant with the same id is already present.
        """
        if self.get_by_id(participant.id) is not None:
            raise ValueError(f"Participant {participant.id} is already enrolled")
        self.participants.append(participant)
        self.update_modified_time()

    def get_by_id(self, participant_id: UUID) -> Participant | None:
        """Get participant by UUID.

        Parameters
        ----------
        participant_id : UUID
            Participant UUID to find.

        Returns
        -------
        Participant | None
            Participant if found, None otherwise.
        """
        for p in self.participants:
            if p.id == participant_id:
                return p
        return None

    # JSONL I/O

    def to_jsonl(self, path: Path | str, append: bool = False) -> None:
        """Write participants to JSONL file.

        Parameters
        ----------
        path : Path | str
            Path to output file.
        append : bool
            Append to an existing file instead of overwriting.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        write_jsonlines(self.participants, path, append=append)

    @classmethod
    def from_jsonl(
        cls,
        path: Path | str,
        name: str = "loaded_participants",
    ) -> ParticipantCollection:
        """Load participants from JSONL file.

        Parameters
        ----------
        path : Path | str
            Path to JSONL file.
        name : str
            Name for the collection.

        Returns
        -------
        ParticipantCollection
            Collection with loaded participants.
        """
        participants = read_jsonlines(Path(path), Participant)
        return cls(name=name, participants=participants)

    # DataFrame conversion

    def to_dataframe(
        self, backend: Literal["pandas", "polars"] = "pandas"
    ) -> DataFrame:
        """Convert to a pandas or polars DataFrame, one row per participant.

        Parameters
        ----------
        backend : Literal["pandas", "polars"]
            DataFrame backend to use (default: "pandas").

        Returns
        -------
        DataFrame
            Participant rows with their sequence (comma-joined) and its
            balance statistics. Columns are ``DATAFRAME_COLUMNS``.

        Examples
        --------
        >>> collection = ParticipantCollection(name="pilot")
        >>> collection.add_participant(
        ...     Participant(condition_sequence=["COUNTDOWN", "HOURGLASS"])
        ... )
        >>> df = collection.to_dataframe()
        >>> df.loc[0, "condition_sequence"]
        'COUNTDOWN,HOURGLASS'
        """
        rows: list[dict[str, Any]] = []
        for p in self.participants:
            analysis = p.analyze_sequence()
            rows.append(
                {
                    "participant_id": str(p.id),
                    "study_id": p.study_id,
                    "cohort": p.cohort,
                    "enrolled_at": p.enrolled_at,
                    "withdrawn": p.withdrawn,
                    "total_sessions": p.total_sessions,
                    "condition_sequence": ",".join(p.condition_sequence),
                    "countdown": analysis.countdown,
                    "hourglass": analysis.hourglass,
                    "balance": analysis.balance,
                    "transitions": analysis.transitions,
                }
            )

        if backend == "polars":
            if not rows:
                return pl.DataFrame(schema=DATAFRAME_COLUMNS)
            return pl.DataFrame(rows)
        return pd.DataFrame(rows, columns=DATAFRAME_COLUMNS)
