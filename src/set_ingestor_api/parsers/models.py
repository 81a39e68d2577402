"""
Parser Models

Pydantic models for the structured set data produced by the voice parser.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SetParseFailure(str, Enum):
    """Reasons a transcript did not yield a usable set"""
    NO_NUMERIC_DATA = "no_numeric_data"      # Fewer than two numbers in the transcript
    NO_EXERCISE_NAME = "no_exercise_name"    # Neither text nor catalog gave a name
    INVALID_MAGNITUDE = "invalid_magnitude"  # Weight or reps not positive


class ParsedSetCandidate(BaseModel):
    """A tentative set pending validation and persistence"""
    exercise_name: str = Field(..., description="Exercise name, title-cased or catalog canonical")
    weight: float = Field(..., description="Weight as spoken, no unit conversion")
    reps: int = Field(..., description="Rep count, truncated toward zero")

    class Config:
        frozen = True


class SetParseResult(BaseModel):
    """Outcome of a single parse attempt"""
    success: bool = False
    candidate: Optional[ParsedSetCandidate] = None
    failure: Optional[SetParseFailure] = None
    message: Optional[str] = None

    class Config:
        use_enum_values = True
