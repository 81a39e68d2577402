"""
Tests for voice-to-set parsing.

Covers VoiceParsingService and the /sets/parse-voice endpoint that converts
a spoken set description into exercise, weight and reps.
"""

import pytest

from set_ingestor_api.config import settings
from set_ingestor_api.parsers.models import SetParseFailure
from set_ingestor_api.services.exercise_catalog_service import MuscleGroup
from set_ingestor_api.services.voice_parsing_service import (
    RETRY_MESSAGE,
    TranscriptTooLongError,
    VoiceParsingService,
)


# ---------------------------------------------------------------------------
# Service Tests
# ---------------------------------------------------------------------------


class TestVoiceParsingService:
    """Tests for VoiceParsingService.parse_voice_set."""

    def test_parse_catalog_exercise(self):
        """Test that a catalog exercise is resolved to its entry."""
        result = VoiceParsingService.parse_voice_set("Bench press, 185 pounds, 8 reps")

        assert result.success is True
        assert result.set_data.exercise_name == "Bench Press"
        assert result.set_data.weight == 185.0
        assert result.set_data.reps == 8
        assert result.exercise.muscle_group == MuscleGroup.CHEST
        assert result.suggestions == []

    def test_catalog_spelling_replaces_parsed_name(self):
        """Test that the saved name uses the catalog spelling."""
        result = VoiceParsingService.parse_voice_set("t-bar row 90 10")

        assert result.success is True
        assert result.set_data.exercise_name == "T-Bar Row"

    def test_unknown_exercise_gets_suggestions(self):
        """Test that names outside the catalog are kept with suggestions."""
        result = VoiceParsingService.parse_voice_set("bench pres 185 8")

        assert result.success is True
        assert result.exercise is None
        assert result.set_data.exercise_name == "Bench Pres"
        assert "Bench Press" in result.suggestions

    def test_name_only_fails(self):
        """Test that a transcript without numbers asks for a retry."""
        result = VoiceParsingService.parse_voice_set("Squat")

        assert result.success is False
        assert result.failure == SetParseFailure.NO_NUMERIC_DATA
        assert result.message == RETRY_MESSAGE
        assert result.set_data is None

    def test_missing_name_fails(self):
        result = VoiceParsingService.parse_voice_set("185 pounds 8 reps")

        assert result.success is False
        assert result.failure == SetParseFailure.NO_EXERCISE_NAME

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_transcription(self, text):
        result = VoiceParsingService.parse_voice_set(text)

        assert result.success is False
        assert result.failure == SetParseFailure.NO_NUMERIC_DATA
        assert result.error == "Could not understand set description"

    def test_zero_weight_rejected(self):
        """Test that non-positive values fail validation but keep the candidate."""
        result = VoiceParsingService.parse_voice_set("bench press 0 pounds 8 reps")

        assert result.success is False
        assert result.failure == SetParseFailure.INVALID_MAGNITUDE
        assert result.set_data.weight == 0.0
        assert result.exercise is not None

    def test_zero_weight_allowed_without_validation(self):
        result = VoiceParsingService.parse_voice_set("bench press 0 pounds 8 reps", validate=False)

        assert result.success is True
        assert result.set_data.weight == 0.0

    def test_validation_follows_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "ENFORCE_POSITIVE_VALUES", False)

        result = VoiceParsingService.parse_voice_set("squat 100 0")

        assert result.success is True
        assert result.set_data.reps == 0

    def test_too_long_transcription(self, monkeypatch):
        monkeypatch.setattr(settings, "MAX_TRANSCRIPT_LENGTH", 10)

        with pytest.raises(TranscriptTooLongError):
            VoiceParsingService.parse_voice_set("Bench press, 185 pounds, 8 reps")

    def test_to_dict(self):
        data = VoiceParsingService.parse_voice_set("squat 100 5").to_dict()

        assert data["success"] is True
        assert data["set"] == {"exercise_name": "Squat", "weight": 100.0, "reps": 5}
        assert data["exercise"]["muscle_group"] == "Quads"
        assert data["failure"] is None


# ---------------------------------------------------------------------------
# Endpoint Tests
# ---------------------------------------------------------------------------


class TestParseVoiceEndpoint:
    """Tests for /sets/parse-voice endpoint."""

    def test_parse_set(self, client):
        response = client.post(
            "/sets/parse-voice",
            json={"transcription": "Bench press, 185 pounds, 8 reps"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["set"] == {"exercise_name": "Bench Press", "weight": 185.0, "reps": 8}
        assert data["exercise"]["muscle_group"] == "Chest"

    def test_unparseable_set_is_not_an_http_error(self, client):
        response = client.post("/sets/parse-voice", json={"transcription": "squat"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["failure"] == "no_numeric_data"
        assert data["message"] == RETRY_MESSAGE

    def test_validate_flag(self, client):
        response = client.post(
            "/sets/parse-voice",
            json={"transcription": "bench press 0 8", "validate": False},
        )

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_invalid_magnitude(self, client):
        response = client.post(
            "/sets/parse-voice",
            json={"transcription": "bench press 185 0"},
        )

        data = response.json()
        assert data["success"] is False
        assert data["failure"] == "invalid_magnitude"

    def test_out_of_range_weight(self, client):
        """Test that an oversized number is a parse failure, not a server error."""
        response = client.post(
            "/sets/parse-voice",
            json={"transcription": "squat " + "9" * 400 + " 5"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["failure"] == "no_numeric_data"
        assert data["set"] is None

    def test_too_long(self, client):
        response = client.post(
            "/sets/parse-voice",
            json={"transcription": "bench press " * 100},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Transcription too long"

    def test_missing_transcription(self, client):
        response = client.post("/sets/parse-voice", json={})

        assert response.status_code == 422
