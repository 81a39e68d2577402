"""Progress statistics over logged workout sets.

Sessions are supplied by the caller; nothing here reads or writes storage.
"""
import logging
from datetime import datetime
from typing import List, Optional

from set_ingestor_api.models import (
    ExerciseProgressSummary,
    SessionStats,
    SessionVolume,
    WorkoutSessionRecord,
    WorkoutSetRecord,
    as_utc,
)

logger = logging.getLogger(__name__)


def set_volume(workout_set: WorkoutSetRecord) -> float:
    """Weight moved in one set (weight x reps)."""
    return workout_set.weight_lbs * workout_set.reps


class ProgressService:
    """Per-exercise progress and per-session summaries."""

    @staticmethod
    def exercise_names(sessions: List[WorkoutSessionRecord]) -> List[str]:
        """Sorted unique exercise names across all sessions."""
        return sorted({s.exercise_name for session in sessions for s in session.sets})

    @staticmethod
    def sets_for_exercise(
        sessions: List[WorkoutSessionRecord], exercise_name: str
    ) -> List[WorkoutSetRecord]:
        return [
            s
            for session in sessions
            for s in session.sets
            if s.exercise_name == exercise_name
        ]

    @classmethod
    def summarize_exercise(
        cls, sessions: List[WorkoutSessionRecord], exercise_name: str
    ) -> ExerciseProgressSummary:
        """
        Build the progress summary for one exercise.

        Args:
            sessions: Sessions with their logged sets
            exercise_name: Exact exercise name to summarize

        Returns:
            ExerciseProgressSummary; all figures are zero when there are no sets
        """
        sets = cls.sets_for_exercise(sessions, exercise_name)

        session_volumes = []
        for session in sessions:
            matching = [s for s in session.sets if s.exercise_name == exercise_name]
            if not matching:
                continue
            session_volumes.append(
                SessionVolume(
                    session_id=session.id,
                    start_time=session.start_time,
                    volume=sum(set_volume(s) for s in matching),
                )
            )
        session_volumes.sort(key=lambda v: v.start_time)

        logger.debug(f"Summarizing {len(sets)} set(s) of {exercise_name}")
        return ExerciseProgressSummary(
            exercise_name=exercise_name,
            max_weight=max((s.weight_lbs for s in sets), default=0.0),
            total_volume=sum(set_volume(s) for s in sets),
            total_sets=len(sets),
            history=sorted(sets, key=lambda s: s.timestamp),
            session_volumes=session_volumes,
        )

    @staticmethod
    def session_stats(
        session: WorkoutSessionRecord, now: Optional[datetime] = None
    ) -> SessionStats:
        """Set count, distinct exercises and duration (open sessions run until now)."""
        end = session.end_time
        if end is None:
            end = as_utc(now) or datetime.now(session.start_time.tzinfo)

        return SessionStats(
            total_sets=len(session.sets),
            exercise_count=len({s.exercise_name for s in session.sets}),
            duration_seconds=(end - session.start_time).total_seconds(),
        )
