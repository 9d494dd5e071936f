"""Build new sessions from templates and step the workout rotation."""

import logging
from datetime import datetime
from typing import Iterable

from ironledger.models import (
    WORKOUT_ROTATION,
    AppState,
    ExerciseBlueprint,
    ExerciseSet,
    LoggedExercise,
    WorkoutSession,
    WorkoutTemplate,
    WorkoutType,
)

logger = logging.getLogger(__name__)

# Main lifts always open with this many empty warm-up sets.
MAIN_LIFT_WARMUP_SETS = 2


def completed_sessions_newest_first(
    history: Iterable[WorkoutSession], workout_type: WorkoutType
) -> list[WorkoutSession]:
    """Completed sessions of `workout_type`, most recent start time first."""
    sessions = [s for s in history if s.workout_type == workout_type and s.completed]
    return sorted(sessions, key=lambda s: s.start_time, reverse=True)


def last_completed_session(
    history: Iterable[WorkoutSession], workout_type: WorkoutType
) -> WorkoutSession | None:
    """Return the most recent completed session of `workout_type`."""
    sessions = completed_sessions_newest_first(history, workout_type)
    return sessions[0] if sessions else None


def last_performance(
    references: list[WorkoutSession], name: str
) -> LoggedExercise | None:
    """The same-named exercise from the newest of `references` that has one.

    `references` must already be sorted newest first. Usually that's the very
    last session; an exercise missing from it (say, after a template edit)
    falls back to the latest session that included it.
    """
    for session in references:
        for exercise in session.exercises:
            if exercise.name == name:
                return exercise
    return None


def build_exercise(
    blueprint: ExerciseBlueprint, previous: LoggedExercise | None
) -> LoggedExercise:
    """Plan one exercise, pre-filled from its `previous` performance."""
    previous_working = previous.working_sets() if previous is not None else []

    sets: list[ExerciseSet] = []
    if blueprint.category == "main_lift":
        sets.extend(
            ExerciseSet(set_type="warmup") for _ in range(MAIN_LIFT_WARMUP_SETS)
        )

    for i in range(blueprint.default_sets):
        last = previous_working[i] if i < len(previous_working) else None
        reps = blueprint.default_reps
        if reps is None and last is not None:
            reps = last.reps
        sets.append(
            ExerciseSet(
                reps=reps,
                weight=last.weight if last is not None else None,
                duration_seconds=blueprint.default_duration_seconds,
                set_type="working",
            )
        )

    return LoggedExercise(
        name=blueprint.name,
        category=blueprint.category,
        sets=sets,
        rest_seconds=blueprint.rest_seconds,
    )


def build_session(
    template: WorkoutTemplate, history: Iterable[WorkoutSession], now: datetime
) -> WorkoutSession:
    """Create an uncompleted session for `template`, pre-filled from history.

    History is only read. Each blueprint looks up its own exercise by name,
    starting from the most recent completed session of the template's type.
    """
    references = completed_sessions_newest_first(history, template.workout_type)
    if not references:
        logger.debug(f"No previous {template.workout_type} session to pre-fill from")

    return WorkoutSession(
        workout_type=template.workout_type,
        exercises=[
            build_exercise(bp, last_performance(references, bp.name))
            for bp in template.exercises
        ],
        start_time=now,
    )


def start_session(
    state: AppState, workout_type: WorkoutType, now: datetime
) -> WorkoutSession | None:
    """Build a session for `workout_type`, or None if it has no template."""
    template = state.template_for(workout_type)
    if template is None:
        logger.warning(f"No template configured for workout {workout_type}")
        return None
    return build_session(template, state.history, now)


def next_workout_type(workout_type: WorkoutType) -> WorkoutType:
    """Successor in the fixed A -> B -> C -> A cycle."""
    index = WORKOUT_ROTATION.index(workout_type)
    return WORKOUT_ROTATION[(index + 1) % len(WORKOUT_ROTATION)]


def advance_rotation(state: AppState, completed_type: WorkoutType) -> WorkoutType:
    """Point the rotation at the workout after `completed_type`."""
    state.next_workout_type = next_workout_type(completed_type)
    return state.next_workout_type
