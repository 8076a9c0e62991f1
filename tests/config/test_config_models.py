"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from focusstudy.config import (
    LoggingConfig,
    PathsConfig,
    StudyConfig,
    StudyDesignConfig,
)


class TestStudyDesignConfig:
    """Tests for StudyDesignConfig model."""

    def test_defaults(self) -> None:
        """Test the default eight-session design."""
        config = StudyDesignConfig()
        assert config.total_sessions == 8
        assert config.min_per_condition == 2
        assert config.algorithm == "pair_shuffle"
        assert config.random_seed is None
        assert config.target_duration_seconds == 1500
        assert config.cohort is None

    def test_odd_total_rejected(self) -> None:
        """Test that an odd session total fails validation."""
        with pytest.raises(ValidationError, match="must be even"):
            StudyDesignConfig(total_sessions=7)

    def test_zero_total_rejected(self) -> None:
        """Test that zero sessions fails validation."""
        with pytest.raises(ValidationError):
            StudyDesignConfig(total_sessions=0)

    def test_min_per_condition_too_high(self) -> None:
        """Test that m * 2 > n fails validation."""
        with pytest.raises(ValidationError, match="too high"):
            StudyDesignConfig(total_sessions=4, min_per_condition=3)

    def test_min_per_condition_optional(self) -> None:
        """Test that the minimum can be unset."""
        config = StudyDesignConfig(total_sessions=2, min_per_condition=None)
        assert config.min_per_condition is None

    def test_unknown_algorithm(self) -> None:
        """Test that only known algorithms are accepted."""
        with pytest.raises(ValidationError):
            StudyDesignConfig(algorithm="latin_square")  # type: ignore[arg-type]


class TestPathsConfig:
    """Tests for PathsConfig model."""

    def test_relative_participants_path(self) -> None:
        """Test that a relative participants file resolves under data_dir."""
        config = PathsConfig(data_dir=Path("study"))
        assert config.participants_path == Path("study/participants.jsonl")

    def test_absolute_participants_path(self, tmp_path: Path) -> None:
        """Test that an absolute participants file is used as is."""
        target = tmp_path / "p.jsonl"
        config = PathsConfig(participants_file=target)
        assert config.participants_path == target


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        """Test default logging settings."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.console is True
        assert config.file is None

    def test_invalid_level(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]


class TestStudyConfig:
    """Tests for StudyConfig model."""

    def test_defaults(self) -> None:
        """Test default sections."""
        config = StudyConfig()
        assert config.profile == "default"
        assert config.study.total_sessions == 8
        assert config.paths.data_dir == Path("data")

    def test_nested_dict_input(self) -> None:
        """Test constructing from nested dictionaries."""
        config = StudyConfig(
            study={"total_sessions": 4, "min_per_condition": 1},  # type: ignore[arg-type]
        )
        assert config.study.total_sessions == 4

    def test_to_dict(self) -> None:
        """Test conversion to a dictionary."""
        data = StudyConfig().to_dict()
        assert data["study"]["total_sessions"] == 8
        assert set(data) == {"profile", "study", "paths", "logging"}

    def test_to_yaml_non_defaults_only(self) -> None:
        """Test that to_yaml omits default values."""
        config = StudyConfig(study=StudyDesignConfig(random_seed=3))
        text = config.to_yaml()
        assert "random_seed: 3" in text
        assert "total_sessions" not in text
