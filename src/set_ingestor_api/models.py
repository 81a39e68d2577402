"""Data models for the set ingestor API."""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so aware and naive values can be compared."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ParseVoiceSetRequest(BaseModel):
    """Request body for voice set parsing."""
    transcription: str
    validate_values: Optional[bool] = Field(
        default=None,
        alias="validate",
        description="Reject non-positive weight/reps; defaults to server setting",
    )

    class Config:
        populate_by_name = True


class WorkoutSetRecord(BaseModel):
    """A single logged set."""
    exercise_name: str
    reps: int
    weight_lbs: float = Field(..., allow_inf_nan=False)
    timestamp: datetime

    class Config:
        extra = "ignore"  # Ignore sync metadata like record IDs

    @field_validator("timestamp")
    @classmethod
    def _timestamp_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class WorkoutSessionRecord(BaseModel):
    """A workout session and the sets logged in it."""
    id: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    is_active: bool = True
    sets: List[WorkoutSetRecord] = Field(default_factory=list)

    class Config:
        extra = "ignore"

    @field_validator("start_time", "end_time")
    @classmethod
    def _times_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class ProgressSummaryRequest(BaseModel):
    """Request body for per-exercise progress."""
    exercise_name: str
    sessions: List[WorkoutSessionRecord] = Field(default_factory=list)


class SessionVolume(BaseModel):
    session_id: Optional[str] = None
    start_time: datetime
    volume: float


class ExerciseProgressSummary(BaseModel):
    """Progress statistics for one exercise."""
    exercise_name: str
    max_weight: float = 0.0
    total_volume: float = 0.0
    total_sets: int = 0
    history: List[WorkoutSetRecord] = Field(default_factory=list)
    session_volumes: List[SessionVolume] = Field(default_factory=list)


class SessionStats(BaseModel):
    """Summary figures for a single session."""
    total_sets: int
    exercise_count: int
    duration_seconds: float
