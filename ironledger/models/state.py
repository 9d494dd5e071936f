"""The persisted application aggregate."""

from __future__ import annotations
from typing import Self

from pydantic import BaseModel

from .record import PersonalRecord
from .template import WorkoutTemplate, default_templates
from .workout import WORKOUT_ROTATION, WorkoutSession, WorkoutType


class AppState(BaseModel):
    """Everything that survives a restart.

    `history` is append-only and holds completed sessions only; the session in
    progress lives outside this aggregate. `personal_records` is keyed by
    exercise name.
    """

    next_workout_type: WorkoutType = WORKOUT_ROTATION[0]
    templates: list[WorkoutTemplate] = []
    history: list[WorkoutSession] = []
    personal_records: dict[str, PersonalRecord] = {}

    @classmethod
    def default(cls) -> Self:
        """First-run state: built-in templates, rotation at the first type."""
        return cls(templates=default_templates())

    def template_for(self, workout_type: WorkoutType) -> WorkoutTemplate | None:
        return next((t for t in self.templates if t.workout_type == workout_type), None)
