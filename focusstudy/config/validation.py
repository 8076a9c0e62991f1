"""Pre-flight validation of configuration objects."""

from focusstudy.config.config import StudyConfig
from focusstudy.randomization.errors import InvalidConfigurationError
from focusstudy.randomization.generator import validate_design


def check_paths_exist(config: StudyConfig) -> list[str]:
    """Check that absolute configured paths exist.

    Parameters
    ----------
    config : StudyConfig
        Configuration to check.

    Returns
    -------
    list[str]
        Path validation errors.
    """
    errors: list[str] = []

    if config.paths.data_dir.is_absolute() and not config.paths.data_dir.exists():
        errors.append(f"data_dir does not exist: {config.paths.data_dir}")

    if config.paths.output_dir.is_absolute() and not config.paths.output_dir.exists():
        errors.append(f"output_dir does not exist: {config.paths.output_dir}")

    if (
        config.logging.file is not None
        and config.logging.file.is_absolute()
        and not config.logging.file.parent.exists()
    ):
        errors.append(
            "logging file parent directory does not exist: "
            f"{config.logging.file.parent}"
        )

    return errors


def check_study_design(config: StudyConfig) -> list[str]:
    """Check that the study design admits a balanced sequence.

    Parameters
    ----------
    config : StudyConfig
        Configuration to check.

    Returns
    -------
    list[str]
        Study design errors.
    """
    try:
        validate_design(config.study.total_sessions, config.study.min_per_condition)
    except InvalidConfigurationError as e:
        return [str(e)]
    return []


def validate_config(config: StudyConfig) -> list[str]:
    """Run all pre-flight checks.

    Parameters
    ----------
    config : StudyConfig
        Configuration to validate.

    Returns
    -------
    list[str]
        All validation errors. Empty if the configuration is usable.

    Examples
    --------
    >>> from focusstudy.config import get_default_config
    >>> validate_config(get_default_config())
    []
    """
    return check_study_design(config) + check_paths_exist(config)
