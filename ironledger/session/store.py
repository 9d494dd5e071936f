"""The session store: sole owner of the app state and the active session.

Lifecycle of the active session:

    absent --start_session--> active --complete_session--> absent (in history)
                                     --discard_session--> absent (dropped)

In-progress edits live only in memory. Completing a session is the point where
records are evaluated, history grows, the rotation advances and the state is
written out.
"""

import logging
import threading
from uuid import UUID

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ironledger.agg import (
    ExerciseHistoryEntry,
    WorkoutStats,
    completed_history,
    exercise_history,
    workout_stats,
)
from ironledger.db import KeyValueStore, load_app_state, save_app_state
from ironledger.engine import (
    advance_rotation,
    evaluate_personal_records,
    is_personal_record,
    session_summary,
    start_session,
)
from ironledger.models import (
    AppState,
    ExerciseSet,
    LoggedExercise,
    PersonalRecord,
    Rating,
    WorkoutSession,
    WorkoutTemplate,
    WorkoutType,
)
from ironledger.utils.clock import Clock, utc_now
from ironledger.utils.input import parse_bodyweight
from .rest_timer import DEFAULT_EXTEND_SECONDS, RestTimer, RestTimerStatus

logger = logging.getLogger(__name__)

# State models don't validate on assignment, so caller values are checked here.
_workout_type_adapter = TypeAdapter(WorkoutType)
_rating_adapter = TypeAdapter(Rating | None)


class SessionAlreadyActiveError(RuntimeError):
    """Raised when starting a session while another one is in progress.

    Callers are expected to check `active_session` first; the store never
    discards a session implicitly.
    """

    pass


class SetEdit(BaseModel):
    """Field changes for one set. Only fields explicitly given are applied."""

    reps: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)
    duration_seconds: int | None = Field(default=None, ge=0)


class SetToggleResult(BaseModel):
    """Outcome of ticking a set on or off."""

    completed: bool
    start_rest: bool
    rest_seconds: int | None = None


class SessionStore:
    """Single source of truth for the app state and the session in progress.

    Every public method holds one re-entrant lock, so a store can be shared by
    the worker threads of a web server. Queries hand out deep copies; nothing
    returned aliases internal state.

    Failures such as "no active session" or "unknown set" are reported through
    return values (None or False), not exceptions.

    Args:
        storage: Where the state blob is persisted.
        clock: Returns the current time. Injected for tests.
        rest_timer: Timer started when a working set is ticked complete.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        clock: Clock = utc_now,
        rest_timer: RestTimer | None = None,
    ):
        self._storage = storage
        self._clock = clock
        self._lock = threading.RLock()
        self._state: AppState = load_app_state(storage)
        self._active: WorkoutSession | None = None
        self.rest_timer = (
            rest_timer
            if rest_timer is not None
            else RestTimer(clock=clock, on_expired=self._on_rest_expired)
        )

    # --- Persistence ---

    def save(self) -> bool:
        """Write the full state. Returns False if the write failed.

        The in-memory state is kept either way, so a failed save can be retried.
        """
        with self._lock:
            try:
                save_app_state(self._storage, self._state)
            except OSError:
                logger.exception("Failed to persist app state")
                return False
            return True

    # --- Session lifecycle ---

    def start_session(self, workout_type: WorkoutType) -> WorkoutSession | None:
        """Begin a session pre-filled from history. None if there's no template.

        Raises:
            SessionAlreadyActiveError: If a session is already in progress.
        """
        with self._lock:
            if self._active is not None:
                raise SessionAlreadyActiveError(
                    f"Session {self._active.id} is still in progress"
                )
            session = start_session(self._state, workout_type, self._clock())
            if session is None:
                return None
            self._active = session
            logger.info(f"Started workout {workout_type} (session {session.id})")
            return session.model_copy(deep=True)

    def complete_session(
        self,
        energy: Rating | None = None,
        sleep: Rating | None = None,
        bodyweight: str | float | None = None,
        notes: str = "",
    ) -> WorkoutSession | None:
        """Finalize the active session.

        Returns None, changing nothing, if no session is active or a rating is
        not one of the allowed values.

        Records are evaluated, the session is appended to history, the
        rotation advances past its type and the state is persisted. The
        session is finalized even if the write fails; see `save()`.
        """
        try:
            energy = _rating_adapter.validate_python(energy)
            sleep = _rating_adapter.validate_python(sleep)
        except ValidationError as e:
            logger.warning(f"Rejected session ratings: {e}")
            return None
        if not isinstance(notes, str):
            logger.warning(f"Rejected session notes of type {type(notes).__name__}")
            return None

        with self._lock:
            if self._active is None:
                return None
            session = self._active
            session.energy = energy
            session.sleep = sleep
            session.bodyweight = parse_bodyweight(bodyweight)
            session.notes = notes
            session.end_time = self._clock()
            session.completed = True

            new_records = evaluate_personal_records(
                self._state.personal_records, session, session.end_time.date()
            )
            self._state.history.append(session)
            advance_rotation(self._state, session.workout_type)
            self._active = None
            self.rest_timer.dismiss()
            self.save()
            logger.info(
                f"Completed workout {session.workout_type} (session {session.id}), "
                f"{len(new_records)} new records, next up {self._state.next_workout_type}"
            )
            return session.model_copy(deep=True)

    def discard_session(self) -> bool:
        """Drop the active session without a trace. False if none was active."""
        with self._lock:
            if self._active is None:
                return False
            logger.info(f"Discarded session {self._active.id}")
            self._active = None
            self.rest_timer.dismiss()
            return True

    # --- In-session edits ---

    def _locate(
        self, exercise_id: UUID, set_id: UUID | None = None
    ) -> tuple[LoggedExercise, ExerciseSet | None] | None:
        if self._active is None:
            return None
        exercise = self._active.find_exercise(exercise_id)
        if exercise is None:
            return None
        if set_id is None:
            return exercise, None
        exercise_set = exercise.find_set(set_id)
        if exercise_set is None:
            return None
        return exercise, exercise_set

    def record_set_edit(self, exercise_id: UUID, set_id: UUID, edit: SetEdit) -> bool:
        """Apply `edit` to a set of the active session. False if not found."""
        try:
            # Re-check in case fields were assigned after construction.
            changes = SetEdit.model_validate(edit.model_dump(exclude_unset=True)).model_dump(
                exclude_unset=True
            )
        except ValidationError:
            logger.warning(f"Rejected invalid set edit {edit!r}")
            return False
        with self._lock:
            found = self._locate(exercise_id, set_id)
            if found is None:
                return False
            _, exercise_set = found
            for field, value in changes.items():
                setattr(exercise_set, field, value)
            return True

    def toggle_set_complete(
        self, exercise_id: UUID, set_id: UUID
    ) -> SetToggleResult | None:
        """Flip a set's completed flag. None if the set can't be found.

        Completing a working set starts the rest timer with the exercise's
        rest duration; the result carries the same information for callers
        that run their own timer.
        """
        with self._lock:
            found = self._locate(exercise_id, set_id)
            if found is None:
                return None
            exercise, exercise_set = found
            exercise_set.completed = not exercise_set.completed

            if exercise_set.completed and exercise_set.is_working:
                self.rest_timer.start(exercise.rest_seconds)
                return SetToggleResult(
                    completed=True, start_rest=True, rest_seconds=exercise.rest_seconds
                )
            return SetToggleResult(completed=exercise_set.completed, start_rest=False)

    def add_set(self, exercise_id: UUID) -> ExerciseSet | None:
        """Append a working set copying the last set's reps and weight."""
        with self._lock:
            found = self._locate(exercise_id)
            if found is None:
                return None
            exercise, _ = found
            last = exercise.sets[-1] if exercise.sets else None
            new_set = ExerciseSet(
                reps=last.reps if last is not None else None,
                weight=last.weight if last is not None else None,
                duration_seconds=last.duration_seconds if last is not None else None,
                set_type="working",
            )
            exercise.sets.append(new_set)
            return new_set.model_copy()

    def update_exercise_notes(self, exercise_id: UUID, notes: str) -> bool:
        if not isinstance(notes, str):
            return False
        with self._lock:
            found = self._locate(exercise_id)
            if found is None:
                return False
            exercise, _ = found
            exercise.notes = notes
            return True

    def is_personal_record(self, exercise_id: UUID, set_id: UUID) -> bool:
        """Whether a set of the active session beats the stored record."""
        with self._lock:
            found = self._locate(exercise_id, set_id)
            if found is None:
                return False
            exercise, exercise_set = found
            return is_personal_record(self._state.personal_records, exercise, exercise_set)

    # --- Rest timer ---

    def _on_rest_expired(self) -> None:
        logger.info("Rest period over")

    def rest_status(self) -> RestTimerStatus:
        """Refresh the rest timer against the clock and return its state."""
        with self._lock:
            self.rest_timer.refresh()
            return self.rest_timer.status()

    def extend_rest(
        self, seconds: int = DEFAULT_EXTEND_SECONDS
    ) -> RestTimerStatus | None:
        """Add time to the current rest. None if no rest timer is running."""
        with self._lock:
            if not self.rest_timer.extend(seconds):
                return None
            return self.rest_timer.status()

    def dismiss_rest(self) -> RestTimerStatus:
        with self._lock:
            self.rest_timer.dismiss()
            return self.rest_timer.status()

    # --- Configuration ---

    def set_next_workout(self, workout_type: WorkoutType) -> bool:
        """Override the rotation pointer. Allowed while a session is active.

        Returns whether the change was persisted. An unknown workout type is
        rejected without changing anything.
        """
        try:
            workout_type = _workout_type_adapter.validate_python(workout_type)
        except ValidationError:
            logger.warning(f"Rejected unknown workout type {workout_type!r}")
            return False
        with self._lock:
            self._state.next_workout_type = workout_type
            logger.info(f"Next workout set to {workout_type}")
            return self.save()

    def update_template(self, template: WorkoutTemplate) -> bool:
        """Replace the template for `template.workout_type`.

        Returns False, changing nothing, if that type has no template, and
        also False if the template is invalid or the change couldn't be persisted.
        """
        try:
            template = WorkoutTemplate.model_validate(template.model_dump())
        except ValidationError:
            logger.warning(f"Rejected invalid template for workout {template.workout_type!r}")
            return False
        with self._lock:
            for i, existing in enumerate(self._state.templates):
                if existing.workout_type == template.workout_type:
                    self._state.templates[i] = template.model_copy(deep=True)
                    logger.info(f"Updated template for workout {template.workout_type}")
                    return self.save()
            logger.warning(f"No template for workout {template.workout_type} to update")
            return False

    def reset_all_data(self) -> bool:
        """Restore first-run state and drop any session in progress."""
        with self._lock:
            self._state = AppState.default()
            self._active = None
            self.rest_timer.dismiss()
            logger.info("Reset all data")
            return self.save()

    # --- Queries ---

    @property
    def next_workout_type(self) -> WorkoutType:
        with self._lock:
            return self._state.next_workout_type

    @property
    def active_session(self) -> WorkoutSession | None:
        with self._lock:
            if self._active is None:
                return None
            return self._active.model_copy(deep=True)

    def templates(self) -> list[WorkoutTemplate]:
        with self._lock:
            return [t.model_copy(deep=True) for t in self._state.templates]

    def template_for(self, workout_type: WorkoutType) -> WorkoutTemplate | None:
        with self._lock:
            template = self._state.template_for(workout_type)
            return template.model_copy(deep=True) if template is not None else None

    def history(
        self, workout_type: WorkoutType | None = None, limit: int | None = None
    ) -> list[WorkoutSession]:
        """Completed sessions, newest first."""
        with self._lock:
            sessions = completed_history(self._state.history, workout_type, limit)
            return [s.model_copy(deep=True) for s in sessions]

    def get_session(self, session_id: UUID) -> WorkoutSession | None:
        with self._lock:
            session = next((s for s in self._state.history if s.id == session_id), None)
            return session.model_copy(deep=True) if session is not None else None

    def personal_records(self) -> dict[str, PersonalRecord]:
        with self._lock:
            return {
                name: record.model_copy()
                for name, record in self._state.personal_records.items()
            }

    def exercise_history(self, name: str) -> list[ExerciseHistoryEntry]:
        with self._lock:
            return [
                entry.model_copy(deep=True)
                for entry in exercise_history(self._state.history, name)
            ]

    def summary(self, session_id: UUID, unit: str = "lbs") -> str | None:
        """Text export of a completed session, or None if it isn't in history."""
        with self._lock:
            session = next((s for s in self._state.history if s.id == session_id), None)
            if session is None:
                return None
            return session_summary(session, self._state.personal_records, unit)

    def stats(self) -> WorkoutStats:
        with self._lock:
            return workout_stats(
                self._state.history, self._state.personal_records, self._clock()
            )
