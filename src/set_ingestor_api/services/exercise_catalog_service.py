"""Static exercise catalog and lookup service.

The catalog is a fixed, compiled-in list of known exercises grouped by
muscle group. It is built once at import and never mutated, so lookups are
plain linear scans that are safe to call from any thread.
"""
import logging
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from enum import Enum
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class MuscleGroup(str, Enum):
    """Muscle group categories; values are the display labels."""
    CHEST = "Chest"
    LOWER_BACK = "Lower Back"
    MIDDLE_BACK = "Middle Back"
    LATS = "Lats"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    FOREARMS = "Forearms"
    ABS = "Abs"
    QUADS = "Quads"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"


@dataclass(frozen=True)
class ExerciseInfo:
    """A single catalog entry."""
    name: str
    muscle_group: MuscleGroup
    id: str = field(default="")

    def __post_init__(self):
        if not self.id:
            object.__setattr__(self, "id", self.name)

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "muscle_group": self.muscle_group.value,
        }


def _group(muscle_group: MuscleGroup, *names: str) -> List[ExerciseInfo]:
    return [ExerciseInfo(name=name, muscle_group=muscle_group) for name in names]


ALL_EXERCISES: Tuple[ExerciseInfo, ...] = tuple(
    _group(
        MuscleGroup.CHEST,
        "Bench Press",
        "Incline Bench Press",
        "Decline Bench Press",
        "Dumbbell Bench Press",
        "Dumbbell Flyes",
        "Cable Flyes",
        "Push-ups",
        "Chest Press Machine",
    )
    + _group(
        MuscleGroup.LATS,
        "Pull-ups",
        "Chin-ups",
        "Lat Pulldown",
        "Close-Grip Pulldown",
        "Dumbbell Pullover",
    )
    + _group(
        MuscleGroup.MIDDLE_BACK,
        "Barbell Row",
        "Dumbbell Row",
        "Cable Row",
        "T-Bar Row",
        "Chest Supported Row",
        "Face Pulls",
    )
    + _group(
        MuscleGroup.LOWER_BACK,
        "Deadlift",
        "Romanian Deadlift",
        "Good Mornings",
        "Back Extensions",
    )
    + _group(
        MuscleGroup.SHOULDERS,
        "Overhead Press",
        "Dumbbell Shoulder Press",
        "Arnold Press",
        "Lateral Raises",
        "Front Raises",
        "Rear Delt Flyes",
        "Upright Row",
        "Shrugs",
    )
    + _group(
        MuscleGroup.BICEPS,
        "Barbell Curl",
        "Dumbbell Curl",
        "Hammer Curl",
        "Preacher Curl",
        "Cable Curl",
        "Concentration Curl",
    )
    + _group(
        MuscleGroup.TRICEPS,
        "Close-Grip Bench Press",
        "Dips",
        "Tricep Pushdown",
        "Overhead Tricep Extension",
        "Skull Crushers",
        "Tricep Kickbacks",
    )
    + _group(
        MuscleGroup.FOREARMS,
        "Wrist Curls",
        "Reverse Wrist Curls",
        "Farmer's Walk",
    )
    + _group(
        MuscleGroup.QUADS,
        "Squat",
        "Front Squat",
        "Leg Press",
        "Leg Extension",
        "Bulgarian Split Squat",
        "Lunges",
    )
    + _group(
        MuscleGroup.HAMSTRINGS,
        "Leg Curl",
        "Nordic Curls",
        "Stiff-Leg Deadlift",
    )
    + _group(
        MuscleGroup.GLUTES,
        "Hip Thrust",
        "Glute Bridge",
        "Cable Kickbacks",
    )
    + _group(
        MuscleGroup.CALVES,
        "Calf Raise",
        "Seated Calf Raise",
    )
    + _group(
        MuscleGroup.ABS,
        "Crunches",
        "Planks",
        "Leg Raises",
        "Cable Crunches",
        "Ab Wheel",
        "Russian Twists",
    )
)


class ExerciseCatalogService:
    """Read-only queries over the static exercise catalog."""

    exercises: Tuple[ExerciseInfo, ...] = ALL_EXERCISES

    @classmethod
    def all_exercises(cls) -> List[ExerciseInfo]:
        return list(cls.exercises)

    @classmethod
    def find_exercise(cls, name: str) -> Optional[ExerciseInfo]:
        """Exact, case-insensitive lookup by name."""
        if not name:
            return None
        needle = name.lower()
        for exercise in cls.exercises:
            if exercise.name.lower() == needle:
                return exercise
        return None

    @classmethod
    def search_exercises(cls, query: str) -> List[ExerciseInfo]:
        """
        Case-insensitive substring search over names and muscle group labels.

        Results keep catalog declaration order. An empty query returns the
        whole catalog.
        """
        if not query:
            return list(cls.exercises)

        needle = query.lower()
        return [
            exercise
            for exercise in cls.exercises
            if needle in exercise.name.lower()
            or needle in exercise.muscle_group.value.lower()
        ]

    @classmethod
    def exercises_by_muscle_group(cls, muscle_group: MuscleGroup) -> List[ExerciseInfo]:
        return [e for e in cls.exercises if e.muscle_group == muscle_group]

    @classmethod
    def muscle_groups(cls) -> List[Dict[str, object]]:
        """All muscle groups in declaration order with their entry counts."""
        return [
            {"name": group.value, "count": len(cls.exercises_by_muscle_group(group))}
            for group in MuscleGroup
        ]

    @classmethod
    def find_in_transcript(cls, text: str) -> Optional[ExerciseInfo]:
        """Return the first catalog entry whose name appears in the text."""
        haystack = text.lower()
        for exercise in cls.exercises:
            if exercise.name.lower() in haystack:
                return exercise
        return None

    @classmethod
    def suggest_exercises(
        cls,
        name: str,
        limit: int = 3,
        cutoff: float = 0.6,
    ) -> List[ExerciseInfo]:
        """
        Suggest catalog entries that look like a name not found in the catalog.

        Args:
            name: The spoken or typed exercise name
            limit: Maximum number of suggestions
            cutoff: Minimum similarity ratio (0.0 - 1.0)

        Returns:
            Entries ranked by similarity, best first
        """
        if not name or limit <= 0:
            return []

        needle = name.lower().strip()
        scored = []
        for index, exercise in enumerate(cls.exercises):
            ratio = SequenceMatcher(None, needle, exercise.name.lower()).ratio()
            if ratio >= cutoff:
                scored.append((ratio, index, exercise))

        # Ties keep catalog order
        scored.sort(key=lambda item: (-item[0], item[1]))
        suggestions = [exercise for _, _, exercise in scored[:limit]]
        logger.debug(f"Suggestions for '{name}': {[e.name for e in suggestions]}")
        return suggestions
