from .workout import (
    WorkoutType,
    WORKOUT_ROTATION,
    WORKOUT_NAMES,
    SetType,
    ExerciseCategory,
    DEFAULT_REST_SECONDS,
    Rating,
    RATING_LABELS,
    RATING_EMOJI,
    ExerciseSet,
    LoggedExercise,
    WorkoutSession,
    workout_short_name,
    workout_full_name,
)
from .template import ExerciseBlueprint, WorkoutTemplate, default_templates
from .record import PersonalRecord
from .state import AppState

__all__ = [
    "WorkoutType",
    "WORKOUT_ROTATION",
    "WORKOUT_NAMES",
    "SetType",
    "ExerciseCategory",
    "DEFAULT_REST_SECONDS",
    "Rating",
    "RATING_LABELS",
    "RATING_EMOJI",
    "ExerciseSet",
    "LoggedExercise",
    "WorkoutSession",
    "workout_short_name",
    "workout_full_name",
    "ExerciseBlueprint",
    "WorkoutTemplate",
    "default_templates",
    "PersonalRecord",
    "AppState",
]
