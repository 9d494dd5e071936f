"""Workout templates: the user-editable recipe behind each workout type."""

from __future__ import annotations
from typing import Self
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from .workout import DEFAULT_REST_SECONDS, ExerciseCategory, WorkoutType


class ExerciseBlueprint(BaseModel):
    """How one exercise is planned inside a template.

    `default_reps` fixes the rep target for every working set; when unset, reps
    are carried over from the previous session. `default_duration_seconds`
    marks the exercise as time based.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    category: ExerciseCategory
    default_sets: int = Field(default=3, ge=0)
    default_reps: int | None = Field(default=None, ge=0)
    default_duration_seconds: int | None = Field(default=None, ge=0)
    rest_seconds: int | None = Field(default=None, ge=0)  # None -> category default

    @model_validator(mode="after")
    def _default_rest_from_category(self) -> Self:
        if self.rest_seconds is None:
            self.rest_seconds = DEFAULT_REST_SECONDS[self.category]
        return self


class WorkoutTemplate(BaseModel):
    """The ordered exercises making up one workout type."""

    id: UUID = Field(default_factory=uuid4)
    workout_type: WorkoutType
    exercises: list[ExerciseBlueprint] = []


def default_templates() -> list[WorkoutTemplate]:
    """Built-in templates used on first run and after a data reset."""
    return [
        WorkoutTemplate(
            workout_type="A",
            exercises=[
                ExerciseBlueprint(name="Bench Press", category="main_lift", default_sets=5, default_reps=5),
                ExerciseBlueprint(name="Incline Dumbbell Press", category="compound", default_sets=3, default_reps=10),
                ExerciseBlueprint(name="Cable Fly", category="accessory", default_sets=3, default_reps=12),
                ExerciseBlueprint(name="Tricep Pushdown", category="accessory", default_sets=3, default_reps=12),
                ExerciseBlueprint(name="Lateral Raise", category="accessory", default_sets=3, default_reps=15),
            ],
        ),
        WorkoutTemplate(
            workout_type="B",
            exercises=[
                ExerciseBlueprint(name="Squat", category="main_lift", default_sets=5, default_reps=5),
                ExerciseBlueprint(name="Romanian Deadlift", category="compound", default_sets=3, default_reps=8),
                ExerciseBlueprint(name="Leg Press", category="compound", default_sets=3, default_reps=10),
                ExerciseBlueprint(name="Leg Curl", category="accessory", default_sets=3, default_reps=12),
                ExerciseBlueprint(name="Calf Raise", category="accessory", default_sets=3, default_reps=15),
            ],
        ),
        WorkoutTemplate(
            workout_type="C",
            exercises=[
                ExerciseBlueprint(name="Overhead Press", category="main_lift", default_sets=5, default_reps=5),
                ExerciseBlueprint(name="Barbell Row", category="compound", default_sets=3, default_reps=8),
                ExerciseBlueprint(name="Pull-ups", category="compound", default_sets=3, default_reps=8),
                ExerciseBlueprint(name="Face Pull", category="accessory", default_sets=3, default_reps=15),
                ExerciseBlueprint(name="Bicep Curl", category="accessory", default_sets=3, default_reps=12),
            ],
        ),
    ]
