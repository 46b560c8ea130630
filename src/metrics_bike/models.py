"""
Data models for the Metrics.bike package.

This module defines all the core data structures used throughout the application,
ensuring type safety and data validation using Pydantic models.
"""

import time
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .constants import BestEffortDurations


class EffortDuration(str, Enum):
    """Fixed durations used for best-effort analysis, keyed by display label."""

    FIVE_SECONDS = "5s"
    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    TWENTY_MINUTES = "20m"

    @property
    def seconds(self) -> int:
        """Return the duration length in seconds."""
        return BestEffortDurations.get_standard_durations()[self.value]

    @property
    def label(self) -> str:
        """Return the display label (e.g. '5m')."""
        return self.value


class PowerMetrics(BaseModel):
    """Power metrics for a single sample series. ``None`` marks an absent value."""

    average_power: int | None = Field(
        None, description="Mean of strictly positive samples in watts"
    )
    normalized_power: int | None = Field(
        None, description="Fourth-power mean of 30s rolling averages in watts"
    )
    best_efforts: dict[str, int | None] = Field(
        ..., description="Best mean power per effort duration label in watts"
    )

    @classmethod
    def empty(cls) -> "PowerMetrics":
        """Return a result with every metric absent."""
        return cls(best_efforts={duration.label: None for duration in EffortDuration})


class WorkoutFile(BaseModel):
    """Reference to the FIT file recorded for a workout."""

    model_config = ConfigDict(extra="ignore")

    url: str | None = None


class WorkoutSummary(BaseModel):
    """Aggregate values reported by the API for a workout."""

    model_config = ConfigDict(extra="ignore")

    file: WorkoutFile | None = None
    distance_accum: float | None = Field(None, description="Distance in meters")
    calories_accum: float | None = Field(None, description="Energy in kcal")
    heart_rate_avg: float | None = Field(None, description="Average heart rate (bpm)")
    speed_avg: float | None = Field(None, description="Average speed in m/s")
    duration_active_accum: float | None = Field(
        None, description="Active duration in seconds"
    )


class Workout(BaseModel):
    """Workout metadata record as returned by the workout listing."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    name: str | None = None
    starts: datetime | None = None
    minutes: float | None = None
    workout_summary: WorkoutSummary | None = None

    @property
    def file_url(self) -> str | None:
        """Return the FIT file URL, if the workout has one."""
        if self.workout_summary is None or self.workout_summary.file is None:
            return None
        return self.workout_summary.file.url or None


class AnalyzedWorkout(BaseModel):
    """A workout together with the power metrics computed from its FIT file."""

    workout: Workout
    metrics: PowerMetrics
    sample_count: int = Field(0, description="Number of power samples analyzed")


class TokenSet(BaseModel):
    """OAuth tokens with their absolute expiry time."""

    access_token: str
    refresh_token: str | None = None
    expires_at: float = Field(..., description="Expiry as epoch seconds")

    @classmethod
    def from_response(cls, payload: dict, now: float | None = None) -> "TokenSet":
        """Build a token set from a token endpoint JSON response."""
        now = time.time() if now is None else now
        return cls(
            access_token=payload["access_token"],
            refresh_token=payload.get("refresh_token"),
            expires_at=now + float(payload.get("expires_in", 0)),
        )

    def is_expired(self, now: float | None = None) -> bool:
        """Check whether the access token has expired."""
        now = time.time() if now is None else now
        return now >= self.expires_at


class AuthResult(BaseModel):
    """Outcome of handling an OAuth redirect."""

    authenticated: bool
    token: str | None = None
    error: str | None = None
