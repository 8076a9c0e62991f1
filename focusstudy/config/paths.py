"""Path configuration models for the focusstudy package."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class PathsConfig(BaseModel):
    """Configuration for file system paths.

    Parameters
    ----------
    data_dir : Path
        Base directory for study data.
    output_dir : Path
        Base directory for generated reports.
    participants_file : Path
        JSONL file of enrolled participants, relative to ``data_dir`` unless
        absolute.

    Examples
    --------
    >>> config = PathsConfig()
    >>> config.data_dir
    PosixPath('data')
    >>> config.participants_path
    PosixPath('data/participants.jsonl')
    """

    data_dir: Path = Field(default=Path("data"), description="Study data directory")
    output_dir: Path = Field(default=Path("output"), description="Output directory")
    participants_file: Path = Field(
        default=Path("participants.jsonl"), description="Participants JSONL file"
    )

    @property
    def participants_path(self) -> Path:
        """Resolved path of the participants file."""
        if self.participants_file.is_absolute():
            return self.participants_file
        return self.data_dir / self.participants_file
