"""Workout session models: sets, logged exercises and sessions."""

from __future__ import annotations
from typing import Literal, Self
from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator


# Workout types, in rotation order.
WorkoutType = Literal["A", "B", "C"]
WORKOUT_ROTATION: tuple[WorkoutType, ...] = ("A", "B", "C")

WORKOUT_NAMES: dict[WorkoutType, str] = {
    "A": "Bench Focus",
    "B": "Squat Focus",
    "C": "OHP + Back",
}

SetType = Literal["warmup", "working"]

ExerciseCategory = Literal["main_lift", "compound", "accessory"]

# Rest between sets when an exercise doesn't override it.
DEFAULT_REST_SECONDS: dict[ExerciseCategory, int] = {
    "main_lift": 150,
    "compound": 90,
    "accessory": 60,
}

Rating = Literal["poor", "ok", "good"]

RATING_LABELS: dict[Rating, str] = {
    "poor": "Poor",
    "ok": "OK",
    "good": "Good",
}

RATING_EMOJI: dict[Rating, str] = {
    "poor": "😓",
    "ok": "😐",
    "good": "💪",
}


def workout_short_name(workout_type: WorkoutType) -> str:
    """E.g. 'Workout A'."""
    return f"Workout {workout_type}"


def workout_full_name(workout_type: WorkoutType) -> str:
    """E.g. 'Workout A – Bench Focus'."""
    return f"{workout_short_name(workout_type)} – {WORKOUT_NAMES[workout_type]}"


class ExerciseSet(BaseModel):
    """One planned or performed set.

    A set is either rep/weight based or time based; neither pair of fields is
    required.
    """

    id: UUID = Field(default_factory=uuid4)
    reps: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)
    duration_seconds: int | None = Field(default=None, ge=0)
    set_type: SetType = "working"
    completed: bool = False

    @property
    def is_time_based(self) -> bool:
        return self.duration_seconds is not None

    @property
    def is_working(self) -> bool:
        return self.set_type == "working"

    def volume(self) -> float:
        """Weight × reps for a completed working set, otherwise 0."""
        if not (self.is_working and self.completed):
            return 0.0
        if self.weight is not None and self.reps is not None:
            return self.weight * self.reps
        return 0.0


class LoggedExercise(BaseModel):
    """One exercise instance inside a session.

    `name` is the join key for history and PR lookups, compared exactly.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    category: ExerciseCategory
    sets: list[ExerciseSet] = []
    notes: str = ""
    rest_seconds: int | None = Field(default=None, ge=0)  # None -> category default
    superset_pair_id: UUID | None = None

    @model_validator(mode="after")
    def _default_rest_from_category(self) -> Self:
        if self.rest_seconds is None:
            self.rest_seconds = DEFAULT_REST_SECONDS[self.category]
        return self

    def working_sets(self) -> list[ExerciseSet]:
        return [s for s in self.sets if s.is_working]

    def completed_working_sets(self) -> list[ExerciseSet]:
        return [s for s in self.working_sets() if s.completed]

    def total_volume(self) -> float:
        """Sum of set volumes (only completed working sets contribute)."""
        return sum(s.volume() for s in self.sets)

    def best_set(self) -> ExerciseSet | None:
        """The completed working set with the greatest (weight, reps) pair.

        Sets missing either weight or reps are not candidates. On an exact tie
        the earliest set wins.
        """
        candidates = [
            s
            for s in self.completed_working_sets()
            if s.weight is not None and s.reps is not None
        ]
        if not candidates:
            return None
        return max(candidates, key=lambda s: (s.weight, s.reps))

    def find_set(self, set_id: UUID) -> ExerciseSet | None:
        return next((s for s in self.sets if s.id == set_id), None)


class WorkoutSession(BaseModel):
    """A single training session, in progress or completed."""

    id: UUID = Field(default_factory=uuid4)
    workout_type: WorkoutType
    exercises: list[LoggedExercise] = []
    start_time: datetime
    end_time: datetime | None = None
    energy: Rating | None = None
    sleep: Rating | None = None
    bodyweight: float | None = None
    notes: str = ""
    completed: bool = False

    @model_validator(mode="after")
    def _end_time_iff_completed(self) -> Self:
        if (self.end_time is not None) != self.completed:
            raise ValueError("end_time must be set if and only if the session is completed")
        return self

    def duration_seconds(self) -> int | None:
        """Elapsed seconds between start and end, or None while in progress."""
        if self.end_time is None:
            return None
        return int((self.end_time - self.start_time).total_seconds())

    def total_volume(self) -> float:
        """Total volume across all exercises."""
        return sum(e.total_volume() for e in self.exercises)

    def total_sets(self) -> int:
        """Count completed sets of any kind."""
        return sum(1 for e in self.exercises for s in e.sets if s.completed)

    def main_lift(self) -> LoggedExercise | None:
        return next((e for e in self.exercises if e.category == "main_lift"), None)

    def find_exercise(self, exercise_id: UUID) -> LoggedExercise | None:
        return next((e for e in self.exercises if e.id == exercise_id), None)
