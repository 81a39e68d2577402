"""API routes for voice set parsing, exercise catalog and progress."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from set_ingestor_api.models import (
    ExerciseProgressSummary,
    ParseVoiceSetRequest,
    ProgressSummaryRequest,
    SessionStats,
    WorkoutSessionRecord,
)
from set_ingestor_api.services.exercise_catalog_service import (
    ExerciseCatalogService,
    MuscleGroup,
)
from set_ingestor_api.services.progress_service import ProgressService
from set_ingestor_api.services.voice_parsing_service import (
    TranscriptTooLongError,
    VoiceParsingService,
)

logger = logging.getLogger(__name__)

BUILD_TIMESTAMP = datetime.now().isoformat()

router = APIRouter()


# ---------------------------------------------------------------------------
# Version / health
# ---------------------------------------------------------------------------


@router.get("/version")
async def get_version():
    """Get API version and build information."""
    return JSONResponse(
        {
            "service": "set-ingestor-api",
            "build_timestamp": BUILD_TIMESTAMP,
            "build_date": BUILD_TIMESTAMP,
        }
    )


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Voice set parsing
# ---------------------------------------------------------------------------


@router.post("/sets/parse-voice")
def parse_voice_set(request: ParseVoiceSetRequest):
    """Parse a spoken set description into exercise, weight and reps."""
    try:
        result = VoiceParsingService.parse_voice_set(
            request.transcription,
            validate=request.validate_values,
        )
    except TranscriptTooLongError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return result.to_dict()


# ---------------------------------------------------------------------------
# Exercise catalog
# ---------------------------------------------------------------------------


def _resolve_muscle_group(label: str) -> MuscleGroup:
    for group in MuscleGroup:
        if group.value.lower() == label.lower() or group.name.lower() == label.lower():
            return group
    raise HTTPException(status_code=404, detail=f"Unknown muscle group: {label}")


@router.get("/exercises")
def list_exercises(
    q: str = Query(default="", description="Substring of name or muscle group"),
    muscle_group: Optional[str] = Query(default=None),
):
    """Search the exercise catalog."""
    exercises = ExerciseCatalogService.search_exercises(q)
    if muscle_group:
        group = _resolve_muscle_group(muscle_group)
        exercises = [e for e in exercises if e.muscle_group == group]

    return {
        "exercises": [e.to_dict() for e in exercises],
        "count": len(exercises),
    }


@router.get("/exercises/{name}")
def get_exercise(name: str):
    """Look up one exercise by name (case-insensitive)."""
    exercise = ExerciseCatalogService.find_exercise(name)
    if not exercise:
        raise HTTPException(status_code=404, detail=f"Exercise not found: {name}")
    return exercise.to_dict()


@router.get("/muscle-groups")
def list_muscle_groups():
    """List muscle groups with their exercise counts."""
    groups = ExerciseCatalogService.muscle_groups()
    return {"muscle_groups": groups, "count": len(groups)}


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------


@router.post("/progress/summary", response_model=ExerciseProgressSummary)
def progress_summary(request: ProgressSummaryRequest):
    """Max weight, volume and history for one exercise."""
    summary = ProgressService.summarize_exercise(request.sessions, request.exercise_name)
    if summary.total_sets == 0:
        raise HTTPException(
            status_code=404,
            detail=f"No sets logged for {request.exercise_name}",
        )
    return summary


@router.post("/progress/session-stats", response_model=SessionStats)
def session_stats(session: WorkoutSessionRecord):
    """Set count, distinct exercises and duration for a session."""
    return ProgressService.session_stats(session)
