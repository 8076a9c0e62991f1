"""Test fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from focusstudy.cli.main import cli


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Click CLI test runner.

    Returns
    -------
    CliRunner
        Click test runner.
    """
    return CliRunner()


@pytest.fixture
def mock_config_file(tmp_path: Path) -> Path:
    """Create a valid focusstudy.yaml config file.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to config file.
    """
    config_file = tmp_path / "focusstudy.yaml"
    config_file.write_text(
        """
profile: test

study:
  total_sessions: 4
  min_per_condition: 1
  random_seed: 7

logging:
  level: CRITICAL
  console: false
"""
    )
    return config_file


@pytest.fixture
def mock_invalid_config_file(tmp_path: Path) -> Path:
    """Create a config file whose study design is unbalanced.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to invalid config file.
    """
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text("study:\n  total_sessions: 7\n")
    return config_file


@pytest.fixture
def enrolled_file(cli_runner: CliRunner, tmp_path: Path) -> Path:
    """Enroll three participants through the CLI.

    Returns
    -------
    Path
        Participants JSONL file.
    """
    path = tmp_path / "participants.jsonl"
    result = cli_runner.invoke(
        cli,
        ["--profile", "test", "participants", "enroll", "--count", "3", "-o", str(path)],
    )
    assert result.exit_code == 0, result.output
    return path
