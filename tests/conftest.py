"""
Test fixtures for set-ingestor-api.

Provides the FastAPI test client and sample sessions for progress tests.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import set_ingestor_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from set_ingestor_api.main import app
from set_ingestor_api.models import WorkoutSessionRecord
from set_ingestor_api.parsers.voice_set_parser import VoiceSetParser


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def api_client() -> TestClient:
    """Shared FastAPI TestClient for set-ingestor-api."""
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient (for tests needing fresh state)."""
    return TestClient(app)


@pytest.fixture
def parser() -> VoiceSetParser:
    return VoiceSetParser()


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_sessions_data() -> List[Dict[str, Any]]:
    """Two bench sessions plus squats, oldest session listed last."""
    return [
        {
            "id": "session-2",
            "start_time": "2026-10-12T18:00:00",
            "end_time": "2026-10-12T19:15:00",
            "is_active": False,
            "sets": [
                {
                    "exercise_name": "Bench Press",
                    "reps": 5,
                    "weight_lbs": 195.0,
                    "timestamp": "2026-10-12T18:10:00",
                },
                {
                    "exercise_name": "Squat",
                    "reps": 5,
                    "weight_lbs": 225.0,
                    "timestamp": "2026-10-12T18:40:00",
                },
            ],
        },
        {
            "id": "session-1",
            "start_time": "2026-10-05T18:00:00",
            "end_time": "2026-10-05T19:00:00",
            "is_active": False,
            "sets": [
                {
                    "exercise_name": "Bench Press",
                    "reps": 8,
                    "weight_lbs": 185.0,
                    "timestamp": "2026-10-05T18:05:00",
                },
                {
                    "exercise_name": "Bench Press",
                    "reps": 6,
                    "weight_lbs": 185.0,
                    "timestamp": "2026-10-05T18:10:00",
                },
            ],
        },
    ]


@pytest.fixture
def sample_sessions(sample_sessions_data) -> List[WorkoutSessionRecord]:
    return [WorkoutSessionRecord(**data) for data in sample_sessions_data]


@pytest.fixture
def open_session() -> WorkoutSessionRecord:
    """An active session with no end time."""
    return WorkoutSessionRecord(
        id="session-open",
        start_time=datetime(2026, 10, 19, 7, 0, 0),
        sets=[
            {
                "exercise_name": "Deadlift",
                "reps": 3,
                "weight_lbs": 315.0,
                "timestamp": "2026-10-19T07:10:00",
            },
        ],
    )
