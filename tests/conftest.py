"""Root pytest configuration for focusstudy package tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from focusstudy.randomization import Condition, ConditionSequence, SequenceGenerator

C = Condition.COUNTDOWN
H = Condition.HOURGLASS


@pytest.fixture(scope="session")
def tests_dir() -> Path:
    """Get tests directory path.

    Returns
    -------
    Path
        Path to tests directory
    """
    return Path(__file__).parent


@pytest.fixture
def sample_data_dir(tmp_path: Path) -> Path:
    """Create temporary directory for test data.

    Parameters
    ----------
    tmp_path : Path
        Pytest's tmp_path fixture

    Returns
    -------
    Path
        Path to temporary data directory
    """
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded NumPy generator."""
    return np.random.default_rng(20240601)


@pytest.fixture
def seeded_generator() -> SequenceGenerator:
    """Sequence generator with a fixed seed."""
    return SequenceGenerator(random_seed=42)


@pytest.fixture
def hcch_sequence() -> ConditionSequence:
    """The four-session sequence HOURGLASS, COUNTDOWN, COUNTDOWN, HOURGLASS."""
    return (H, C, C, H)


@pytest.fixture
def eight_session_sequence() -> ConditionSequence:
    """A fixed, balanced eight-session sequence."""
    return (C, H, H, C, C, H, H, C)
