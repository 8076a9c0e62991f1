"""Pytest fixtures for config module tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_yaml_file(tmp_path: Path) -> Path:
    """Create a sample YAML config file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created YAML config file.
    """
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
profile: test
study:
  total_sessions: 6
  algorithm: shuffle
paths:
  data_dir: /test/data
logging:
  level: DEBUG
"""
    )
    return config_file


@pytest.fixture
def malformed_yaml_file(tmp_path: Path) -> Path:
    """Create a malformed YAML file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the malformed YAML file.
    """
    config_file = tmp_path / "malformed.yaml"
    config_file.write_text("study:\n  total_sessions: [8\n")
    return config_file


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove FOCUSSTUDY_ variables from the environment.

    Returns
    -------
    pytest.MonkeyPatch
        Monkeypatch for setting variables in the test.
    """
    import os

    for key in list(os.environ):
        if key.startswith("FOCUSSTUDY_"):
            monkeypatch.delenv(key)
    return monkeypatch
