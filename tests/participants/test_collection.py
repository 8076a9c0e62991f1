"""Tests for ParticipantCollection."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import polars as pl
import pytest

from focusstudy.data import DeserializationError
from focusstudy.participants import Participant, ParticipantCollection
from focusstudy.participants.collection import DATAFRAME_COLUMNS


class TestParticipantCollection:
    """Tests for collection membership."""

    def test_add_and_get(self, participant: Participant) -> None:
        """Test adding and retrieving by id."""
        collection = ParticipantCollection(name="pilot")
        collection.add_participant(participant)
        assert len(collection) == 1
        assert collection.get_by_id(participant.id) is participant

    def test_duplicate_rejected(self, participant: Participant) -> None:
        """Test that a participant cannot be enrolled twice."""
        collection = ParticipantCollection(name="pilot")
        collection.add_participant(participant)
        with pytest.raises(ValueError, match="already enrolled"):
            collection.add_participant(participant)

    def test_get_missing(self, populated_collection: ParticipantCollection) -> None:
        """Test that an unknown id returns None."""
        stranger = Participant(condition_sequence=["COUNTDOWN", "HOURGLASS"])
        assert populated_collection.get_by_id(stranger.id) is None

    def test_blank_name_rejected(self) -> None:
        """Test that the collection needs a name."""
        with pytest.raises(ValueError):
            ParticipantCollection(name="  ")


class TestJsonl:
    """Tests for JSONL persistence."""

    def test_round_trip(
        self, tmp_path: Path, populated_collection: ParticipantCollection
    ) -> None:
        """Test that participants reload with their sequences in order."""
        path = tmp_path / "nested" / "participants.jsonl"
        populated_collection.to_jsonl(path)

        loaded = ParticipantCollection.from_jsonl(path)
        assert len(loaded) == 5
        for original, restored in zip(
            populated_collection.participants, loaded.participants, strict=True
        ):
            assert restored.id == original.id
            assert restored.condition_sequence == original.condition_sequence

    def test_append(
        self, tmp_path: Path, populated_collection: ParticipantCollection
    ) -> None:
        """Test appending a second batch to the same file."""
        path = tmp_path / "participants.jsonl"
        populated_collection.to_jsonl(path)

        extra = ParticipantCollection(name="late")
        extra.add_participant(
            Participant(condition_sequence=["COUNTDOWN", "HOURGLASS"])
        )
        extra.to_jsonl(path, append=True)

        assert len(ParticipantCollection.from_jsonl(path)) == 6

    def test_stored_as_label_array(
        self, tmp_path: Path, participant: Participant
    ) -> None:
        """Test that the file holds the sequence as a JSON array of labels."""
        path = tmp_path / "participants.jsonl"
        ParticipantCollection(name="p", participants=[participant]).to_jsonl(path)
        assert (
            '"condition_sequence":["HOURGLASS","COUNTDOWN","COUNTDOWN","HOURGLASS"]'
            in path.read_text()
        )

    def test_corrupt_line(self, tmp_path: Path) -> None:
        """Test that an invalid record raises DeserializationError."""
        path = tmp_path / "participants.jsonl"
        path.write_text('{"condition_sequence": ["STOPWATCH"]}\n')
        with pytest.raises(DeserializationError):
            ParticipantCollection.from_jsonl(path)

    def test_unbalanced_line(self, tmp_path: Path) -> None:
        """Test that a stored sequence with unequal counts is rejected."""
        path = tmp_path / "participants.jsonl"
        path.write_text(
            '{"condition_sequence": ["COUNTDOWN", "COUNTDOWN", "COUNTDOWN"]}\n'
        )
        with pytest.raises(DeserializationError):
            ParticipantCollection.from_jsonl(path)


class TestDataFrame:
    """Tests for DataFrame conversion."""

    def test_pandas(self, populated_collection: ParticipantCollection) -> None:
        """Test pandas conversion."""
        df = populated_collection.to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == DATAFRAME_COLUMNS
        assert len(df) == 5
        assert df["balance"].all()
        assert (df["countdown"] == 4).all()

    def test_polars(self, populated_collection: ParticipantCollection) -> None:
        """Test polars conversion."""
        df = populated_collection.to_dataframe(backend="polars")
        assert isinstance(df, pl.DataFrame)
        assert df.columns == DATAFRAME_COLUMNS
        assert df.height == 5

    def test_sequence_column(self, participant: Participant) -> None:
        """Test the comma-joined sequence column."""
        collection = ParticipantCollection(name="p", participants=[participant])
        df = collection.to_dataframe()
        assert df.loc[0, "condition_sequence"] == (
            "HOURGLASS,COUNTDOWN,COUNTDOWN,HOURGLASS"
        )

    def test_empty(self) -> None:
        """Test that an empty collection keeps the columns."""
        collection = ParticipantCollection(name="empty")
        assert list(collection.to_dataframe().columns) == DATAFRAME_COLUMNS
        assert collection.to_dataframe(backend="polars").columns == DATAFRAME_COLUMNS
