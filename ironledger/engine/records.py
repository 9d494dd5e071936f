"""Personal record detection."""

import logging
from datetime import date

from ironledger.models import ExerciseSet, LoggedExercise, PersonalRecord, WorkoutSession

logger = logging.getLogger(__name__)


def evaluate_personal_records(
    records: dict[str, PersonalRecord], session: WorkoutSession, today: date
) -> list[PersonalRecord]:
    """Commit any new personal records set in `session`.

    For every exercise with a best set, the candidate record is inserted when
    the exercise has none, or replaces the stored one only if it strictly
    beats it. `records` is mutated in place; nothing is persisted here.

    Returns:
        The records that were inserted or replaced. Re-evaluating the same
        session yields an empty list.
    """
    committed: list[PersonalRecord] = []
    for exercise in session.exercises:
        best = exercise.best_set()
        if best is None or best.weight is None or best.reps is None:
            continue

        candidate = PersonalRecord(
            exercise_name=exercise.name,
            weight=best.weight,
            reps=best.reps,
            date=today,
            session_id=session.id,
        )
        existing = records.get(exercise.name)
        if existing is None or candidate.beats(existing):
            records[exercise.name] = candidate
            committed.append(candidate)
            logger.info(
                f"New PR for {exercise.name}: {candidate.weight:g} x {candidate.reps}"
            )
    return committed


def is_personal_record(
    records: dict[str, PersonalRecord],
    exercise: LoggedExercise,
    exercise_set: ExerciseSet,
) -> bool:
    """Whether a completed working set beats the stored record for its exercise.

    Exercises without a stored record never report a PR here; the first
    record for an exercise is only established when its session completes.
    """
    if not (exercise_set.is_working and exercise_set.completed):
        return False
    if exercise_set.weight is None or exercise_set.reps is None:
        return False
    existing = records.get(exercise.name)
    if existing is None:
        return False
    return exercise_set.weight > existing.weight or (
        exercise_set.weight == existing.weight and exercise_set.reps > existing.reps
    )
