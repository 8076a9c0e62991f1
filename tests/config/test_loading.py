"""Tests for configuration loading, environment overrides and profiles."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from focusstudy.config import (
    get_default_config,
    get_profile,
    list_profiles,
    load_config,
    load_from_env,
    load_yaml_file,
    merge_configs,
)
from focusstudy.config.env import env_to_nested_dict, parse_env_value


class TestMergeConfigs:
    """Tests for merge_configs function."""

    def test_merge_nested_dicts(self) -> None:
        """Test deep merge of nested dictionaries."""
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        override = {"b": {"d": 4, "e": 5}}
        assert merge_configs(base, override) == {"a": 1, "b": {"c": 2, "d": 4, "e": 5}}

    def test_override_replaces_non_dict(self) -> None:
        """Test that non-dict values are replaced entirely."""
        assert merge_configs({"a": {"b": 1}}, {"a": 2}) == {"a": 2}

    def test_does_not_mutate_base(self) -> None:
        """Test that the base dictionary is left unchanged."""
        base = {"a": 1}
        merge_configs(base, {"a": 2})
        assert base == {"a": 1}


class TestLoadYamlFile:
    """Tests for load_yaml_file function."""

    def test_load_valid_yaml(self, sample_yaml_file: Path) -> None:
        """Test loading a valid YAML file."""
        result = load_yaml_file(sample_yaml_file)
        assert result["study"]["total_sessions"] == 6

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """Test loading an empty YAML file."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_yaml_file(config_file) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_yaml_file(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, malformed_yaml_file: Path) -> None:
        """Test that malformed YAML raises YAMLError."""
        with pytest.raises(yaml.YAMLError):
            load_yaml_file(malformed_yaml_file)


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_profile_only(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test loading a profile without a file."""
        config = load_config(profile="dev")
        assert config.profile == "dev"
        assert config.study.total_sessions == 2

    def test_yaml_over_profile(
        self, clean_env: pytest.MonkeyPatch, sample_yaml_file: Path
    ) -> None:
        """Test that YAML values override the profile."""
        config = load_config(config_path=sample_yaml_file)
        assert config.study.total_sessions == 6
        assert config.study.algorithm == "shuffle"
        assert config.study.min_per_condition == 2
        assert config.paths.data_dir == Path("/test/data")

    def test_env_over_yaml(
        self, clean_env: pytest.MonkeyPatch, sample_yaml_file: Path
    ) -> None:
        """Test that environment variables override YAML."""
        clean_env.setenv("FOCUSSTUDY_STUDY__TOTAL_SESSIONS", "4")
        config = load_config(config_path=sample_yaml_file)
        assert config.study.total_sessions == 4

    def test_numeric_cohort_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test that a numeric-looking cohort label stays a string."""
        clean_env.setenv("FOCUSSTUDY_STUDY__COHORT", "2024")
        config = load_config()
        assert config.study.cohort == "2024"

    def test_env_ignored_when_disabled(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        """Test that use_env=False skips environment variables."""
        clean_env.setenv("FOCUSSTUDY_STUDY__RANDOM_SEED", "5")
        assert load_config(use_env=False).study.random_seed is None

    def test_overrides_win(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test that keyword overrides have the highest precedence."""
        clean_env.setenv("FOCUSSTUDY_STUDY__TOTAL_SESSIONS", "4")
        config = load_config(study__total_sessions=10)
        assert config.study.total_sessions == 10

    def test_invalid_override(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test that an odd session total fails validation."""
        with pytest.raises(ValidationError):
            load_config(study__total_sessions=7)

    def test_unknown_profile(self) -> None:
        """Test that an unknown profile raises ValueError."""
        with pytest.raises(ValueError, match="not found"):
            load_config(profile="staging")


class TestEnvironment:
    """Tests for environment variable parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("8", 8),
            ("0.5", 0.5),
            ("true", True),
            ("off", False),
            ("null", None),
            ("shuffle", "shuffle"),
        ],
    )
    def test_parse_env_value(self, raw: str, expected: object) -> None:
        """Test type coercion of raw values."""
        assert parse_env_value(raw) == expected

    def test_parse_path(self) -> None:
        """Test that absolute-looking values become paths."""
        assert parse_env_value("/tmp/study") == Path("/tmp/study")

    def test_env_to_nested_dict(self) -> None:
        """Test double-underscore nesting and prefix filtering."""
        result = env_to_nested_dict(
            {"FOCUSSTUDY_STUDY__COHORT": "spring", "OTHER": "x"}, "FOCUSSTUDY_"
        )
        assert result == {"study": {"cohort": "spring"}}

    def test_text_fields_not_parsed(self) -> None:
        """Test that free-text fields keep the raw value."""
        result = env_to_nested_dict(
            {
                "FOCUSSTUDY_STUDY__COHORT": "2024",
                "FOCUSSTUDY_STUDY__RANDOM_SEED": "7",
            },
            "FOCUSSTUDY_",
        )
        assert result == {"study": {"cohort": "2024", "random_seed": 7}}

    def test_load_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test reading prefixed variables from the process environment."""
        clean_env.setenv("FOCUSSTUDY_LOGGING__LEVEL", "DEBUG")
        assert load_from_env() == {"logging": {"level": "DEBUG"}}


class TestProfiles:
    """Tests for configuration profiles."""

    def test_list_profiles(self) -> None:
        """Test the available profile names."""
        assert list_profiles() == ["default", "dev", "prod", "test"]

    def test_test_profile_is_seeded(self) -> None:
        """Test that the test profile fixes the random seed."""
        assert get_profile("test").study.random_seed == 42

    def test_prod_profile_is_unseeded(self) -> None:
        """Test that production randomization is never seeded."""
        assert get_profile("prod").study.random_seed is None

    def test_get_profile_returns_copy(self) -> None:
        """Test that modifying a returned profile does not leak."""
        profile = get_profile("dev")
        profile.study.cohort = "changed"
        assert get_profile("dev").study.cohort is None

    def test_default_config_copy(self) -> None:
        """Test that get_default_config returns independent copies."""
        assert get_default_config() is not get_default_config()
