"""Read-only views over the completed-session history."""

from datetime import datetime
from typing import Iterable
from uuid import UUID

from pydantic import BaseModel

from ironledger.models import ExerciseSet, PersonalRecord, WorkoutSession, WorkoutType


class ExerciseHistoryEntry(BaseModel):
    """One session's completed working sets of a single exercise."""

    session_id: UUID
    date: datetime
    sets: list[ExerciseSet]


def completed_history(
    history: Iterable[WorkoutSession],
    workout_type: WorkoutType | None = None,
    limit: int | None = None,
) -> list[WorkoutSession]:
    """Completed sessions, newest first, optionally of one type."""
    sessions = [
        s
        for s in history
        if s.completed and (workout_type is None or s.workout_type == workout_type)
    ]
    sessions.sort(key=lambda s: s.start_time, reverse=True)
    if limit is not None:
        return sessions[:limit]
    return sessions


def exercise_history(
    history: Iterable[WorkoutSession], name: str
) -> list[ExerciseHistoryEntry]:
    """Completed working sets of exercise `name` per session, newest first.

    Matching is by exact name, the same key used for pre-fill and records.
    """
    entries = []
    for session in completed_history(history):
        exercise = next((e for e in session.exercises if e.name == name), None)
        if exercise is None:
            continue
        entries.append(
            ExerciseHistoryEntry(
                session_id=session.id,
                date=session.start_time,
                sets=exercise.completed_working_sets(),
            )
        )
    return entries


def exercise_names(history: Iterable[WorkoutSession]) -> list[str]:
    """Every exercise name that appears in completed history, sorted."""
    return sorted(
        {e.name for s in history if s.completed for e in s.exercises}
    )


def top_records(
    records: dict[str, PersonalRecord], limit: int = 5
) -> list[PersonalRecord]:
    """Heaviest records first."""
    return sorted(records.values(), key=lambda r: r.weight, reverse=True)[:limit]
