"""Study design configuration models for the focusstudy package."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class StudyDesignConfig(BaseModel):
    """Configuration for the within-subjects study design.

    The number of sessions per participant is a study-level setting; code
    that needs it reads it from here rather than assuming a value.

    Parameters
    ----------
    total_sessions : int
        Sessions per participant. Must be positive and even.
    min_per_condition : int | None
        Minimum sessions of each condition. ``min_per_condition * 2`` must
        not exceed ``total_sessions``.
    algorithm : str
        Counterbalancing algorithm: ``"pair_shuffle"`` bounds runs to 2,
        ``"shuffle"`` does not.
    random_seed : int | None
        Seed for sequence generation. Leave unset in production.
    target_duration_seconds : int
        Target focus-session length.
    cohort : str | None
        Cohort label stored on newly enrolled participants.

    Examples
    --------
    >>> config = StudyDesignConfig()
    >>> config.total_sessions
    8
    >>> config.algorithm
    'pair_shuffle'
    """

    total_sessions: int = Field(
        default=8, gt=0, description="Sessions per participant"
    )
    min_per_condition: int | None = Field(
        default=2, ge=0, description="Minimum sessions per condition"
    )
    algorithm: Literal["pair_shuffle", "shuffle"] = Field(
        default="pair_shuffle", description="Counterbalancing algorithm"
    )
    random_seed: int | None = Field(default=None, description="Random seed")
    target_duration_seconds: int = Field(
        default=1500, gt=0, description="Target session duration in seconds"
    )
    cohort: str | None = Field(default=None, description="Participant cohort label")

    @field_validator("total_sessions")
    @classmethod
    def validate_total_sessions(cls, v: int) -> int:
        """Validate total_sessions is even.

        Parameters
        ----------
        v : int
            Total sessions value.

        Returns
        -------
        int
            Validated value.

        Raises
        ------
        ValueError
            If value is odd.
        """
        if v % 2 != 0:
            msg = f"total_sessions must be even for balanced design, got {v}"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_min_per_condition(self) -> StudyDesignConfig:
        """Validate the minimum per condition fits the session total."""
        if (
            self.min_per_condition is not None
            and self.min_per_condition * 2 > self.total_sessions
        ):
            raise ValueError(
                f"min_per_condition ({self.min_per_condition}) is too high for "
                f"{self.total_sessions} total sessions"
            )
        return self
