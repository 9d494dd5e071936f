from .history import (
    ExerciseHistoryEntry,
    completed_history,
    exercise_history,
    exercise_names,
    top_records,
)
from .stats import WorkoutStats, workout_stats

__all__ = [
    "ExerciseHistoryEntry",
    "completed_history",
    "exercise_history",
    "exercise_names",
    "top_records",
    "WorkoutStats",
    "workout_stats",
]
