"""Logging configuration models for the focusstudy package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from rich.console import Console
from rich.logging import RichHandler


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Parameters
    ----------
    level : str
        Log level.
    format : str
        Log format string.
    file : Path | None
        Log file path.
    console : bool
        Whether to log to console.

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'INFO'
    >>> config.console
    True
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file: Path | None = Field(default=None, description="Log file path")
    console: bool = Field(default=True, description="Log to console")


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Apply a logging configuration to the ``focusstudy`` logger.

    Existing handlers on the package logger are replaced, so calling this
    twice does not duplicate output.

    Parameters
    ----------
    config : LoggingConfig
        Logging configuration.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    logger = logging.getLogger("focusstudy")
    logger.setLevel(config.level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.console:
        # rich renders time and level itself
        console_handler = RichHandler(console=Console(stderr=True), show_path=False)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
