"""
Voice Set Parser

Parses a single spoken set description such as "Bench press, 185 pounds, 8 reps"
into an exercise name, a weight and a rep count.

Supported shapes:
- "Bench press, 185 pounds, 8 reps"
- "Bench press 185 pounds 8 reps"
- "185 pounds 8 reps bench press" (name resolved from the exercise catalog)

Malformed or incomplete speech is the common case, so failures are returned
as values rather than raised.
"""

import math
import re
import logging
from typing import List, Optional, Tuple

from set_ingestor_api.parsers.models import (
    ParsedSetCandidate,
    SetParseFailure,
    SetParseResult,
)
from set_ingestor_api.services.exercise_catalog_service import ExerciseCatalogService

logger = logging.getLogger(__name__)


class VoiceSetParser:
    """Parser for single-set voice transcripts"""

    NUMBER_PATTERN = re.compile(r'\d+(?:\.\d+)?')  # "185", "22.5"
    WEIGHT_UNIT_TOKENS = ("pound", "lbs", "lb")
    WORD_PATTERN = re.compile(r'\S+')

    def __init__(self, catalog: type = ExerciseCatalogService):
        self.catalog = catalog

    def parse(self, text: str) -> Optional[ParsedSetCandidate]:
        """Parse a transcript, returning None when no set could be extracted."""
        return self.parse_with_reason(text).candidate

    def parse_with_reason(self, text: str) -> SetParseResult:
        """
        Parse a transcript and report why it failed, if it did.

        Args:
            text: Raw speech-to-text output for one utterance

        Returns:
            SetParseResult with the candidate or the failure reason
        """
        lowercased = (text or "").lower()

        numbers = self.extract_numbers(lowercased)
        if len(numbers) < 2:
            logger.debug(f"Found {len(numbers)} number(s) in transcript, need 2")
            return SetParseResult(
                success=False,
                failure=SetParseFailure.NO_NUMERIC_DATA,
                message="Need both a weight and a rep count",
            )

        # Digit runs too long for a float come back as inf
        if not all(math.isfinite(value) for _, value in numbers[:2]):
            logger.debug("Weight or rep count out of range")
            return SetParseResult(
                success=False,
                failure=SetParseFailure.NO_NUMERIC_DATA,
                message="Weight or rep count is out of range",
            )

        weight, reps = self.assign_weight_and_reps(lowercased, numbers)

        first_offset = numbers[0][0]
        exercise_name = self.extract_exercise_name(lowercased, first_offset)

        if not exercise_name:
            match = self.catalog.find_in_transcript(lowercased)
            if match:
                logger.debug(f"Resolved exercise from catalog: {match.name}")
                exercise_name = match.name

        if not exercise_name:
            return SetParseResult(
                success=False,
                failure=SetParseFailure.NO_EXERCISE_NAME,
                message="Could not determine the exercise name",
            )

        return SetParseResult(
            success=True,
            candidate=ParsedSetCandidate(
                exercise_name=exercise_name,
                weight=weight,
                reps=reps,
            ),
        )

    def extract_numbers(self, text: str) -> List[Tuple[int, float]]:
        """Return (start offset, value) for every number in the text, left to right."""
        return [
            (match.start(), float(match.group(0)))
            for match in self.NUMBER_PATTERN.finditer(text)
        ]

    def assign_weight_and_reps(
        self, text: str, numbers: List[Tuple[int, float]]
    ) -> Tuple[float, int]:
        """
        Pick the weight and rep count out of the extracted numbers.

        The first number is the weight and the second the reps. A unit word is
        located when present but does not change which number is the weight.
        """
        unit_offset = self.find_weight_unit(text)
        if unit_offset is not None:
            logger.debug(f"Weight unit found at offset {unit_offset}")

        weight = numbers[0][1]
        reps = int(numbers[1][1])
        return weight, reps

    def find_weight_unit(self, text: str) -> Optional[int]:
        """Offset of the first weight unit token by priority, or None."""
        for token in self.WEIGHT_UNIT_TOKENS:
            offset = text.find(token)
            if offset != -1:
                return offset
        return None

    def extract_exercise_name(self, text: str, first_offset: int) -> Optional[str]:
        """Take the text before the first number as the exercise name."""
        name = text[:first_offset].strip()
        if name.endswith(","):
            name = name[:-1]
        name = name.strip()

        if not name:
            return None
        return self.capitalize_words(name)

    def capitalize_words(self, text: str) -> str:
        """Upper-case the first letter of each whitespace-separated word, lower the rest."""
        return self.WORD_PATTERN.sub(lambda m: m.group(0).capitalize(), text)

    @staticmethod
    def validate_candidate(candidate: ParsedSetCandidate) -> Optional[SetParseFailure]:
        """Return INVALID_MAGNITUDE when weight or reps is not positive and finite."""
        if not math.isfinite(candidate.weight) or candidate.weight <= 0 or candidate.reps <= 0:
            return SetParseFailure.INVALID_MAGNITUDE
        return None


_default_parser = VoiceSetParser()


def parse_set_data(text: str) -> Optional[ParsedSetCandidate]:
    """Parse a transcript with the default parser."""
    return _default_parser.parse(text)
