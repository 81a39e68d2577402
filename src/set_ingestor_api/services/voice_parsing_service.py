"""Voice set parsing service.

Turns a speech-to-text transcript into a set ready to be saved: parses it,
resolves the exercise against the catalog and checks that weight and reps
are positive before handing it back to the caller.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from set_ingestor_api.config import settings
from set_ingestor_api.parsers.models import ParsedSetCandidate, SetParseFailure
from set_ingestor_api.parsers.voice_set_parser import VoiceSetParser
from set_ingestor_api.services.exercise_catalog_service import (
    ExerciseCatalogService,
    ExerciseInfo,
)


logger = logging.getLogger(__name__)

RETRY_MESSAGE = "Could not parse set data. Please try again."


class TranscriptTooLongError(ValueError):
    """Raised when a transcript exceeds the configured maximum length."""


@dataclass
class VoiceSetParseResult:
    """Result of parsing a voice transcription into a set."""
    success: bool
    set_data: Optional[ParsedSetCandidate] = None
    exercise: Optional[ExerciseInfo] = None
    failure: Optional[SetParseFailure] = None
    suggestions: List[str] = field(default_factory=list)
    error: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "set": self.set_data.model_dump() if self.set_data else None,
            "exercise": self.exercise.to_dict() if self.exercise else None,
            "failure": self.failure.value if self.failure else None,
            "suggestions": self.suggestions,
            "error": self.error,
            "message": self.message,
        }


class VoiceParsingService:
    """Service for parsing voice transcriptions into workout sets."""

    parser = VoiceSetParser()

    @classmethod
    def parse_voice_set(
        cls,
        transcription: str,
        validate: Optional[bool] = None,
    ) -> VoiceSetParseResult:
        """
        Parse a voice transcription into a single set.

        Args:
            transcription: The transcribed text from voice input
            validate: Reject non-positive weight/reps (default: settings)

        Returns:
            VoiceSetParseResult with parsed set or failure reason

        Raises:
            TranscriptTooLongError: If the transcription exceeds MAX_TRANSCRIPT_LENGTH
        """
        if validate is None:
            validate = settings.ENFORCE_POSITIVE_VALUES

        if not transcription or not transcription.strip():
            return VoiceSetParseResult(
                success=False,
                failure=SetParseFailure.NO_NUMERIC_DATA,
                error="Could not understand set description",
                message=RETRY_MESSAGE,
            )

        if len(transcription) > settings.MAX_TRANSCRIPT_LENGTH:
            logger.warning(
                f"Transcription length {len(transcription)} exceeds max "
                f"({settings.MAX_TRANSCRIPT_LENGTH})"
            )
            raise TranscriptTooLongError("Transcription too long")

        parsed = cls.parser.parse_with_reason(transcription)
        if not parsed.success:
            logger.info(f"Voice set parse failed ({parsed.failure}): {transcription!r}")
            return VoiceSetParseResult(
                success=False,
                failure=SetParseFailure(parsed.failure),
                error=parsed.message,
                message=RETRY_MESSAGE,
            )

        candidate = parsed.candidate
        exercise = ExerciseCatalogService.find_exercise(candidate.exercise_name)
        suggestions: List[str] = []

        if exercise:
            # Save under the catalog spelling
            candidate = candidate.model_copy(update={"exercise_name": exercise.name})
        else:
            suggestions = [
                e.name for e in ExerciseCatalogService.suggest_exercises(candidate.exercise_name)
            ]

        if validate:
            failure = cls.parser.validate_candidate(candidate)
            if failure:
                logger.info(
                    f"Rejected set with weight={candidate.weight} reps={candidate.reps}"
                )
                return VoiceSetParseResult(
                    success=False,
                    set_data=candidate,
                    exercise=exercise,
                    failure=failure,
                    suggestions=suggestions,
                    error="Weight and reps must be greater than zero",
                    message=RETRY_MESSAGE,
                )

        logger.debug(
            f"Parsed set: {candidate.exercise_name} {candidate.weight} x {candidate.reps}"
        )
        return VoiceSetParseResult(
            success=True,
            set_data=candidate,
            exercise=exercise,
            suggestions=suggestions,
        )
