"""Routes for the workout session in progress."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from ironledger.models import ExerciseSet, WorkoutSession
from ironledger.session import SessionStore, SetEdit, SetToggleResult
from ironledger.app.dependencies import session_store
from ironledger.app.models import (
    CompleteSessionRequest,
    ExerciseNotesRequest,
    PersonalRecordCheckResponse,
    StartSessionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


def _not_found(exercise_id: UUID, set_id: UUID | None = None) -> HTTPException:
    if set_id is None:
        detail = f"Exercise {exercise_id} not found in the active session"
    else:
        detail = f"Set {set_id} of exercise {exercise_id} not found in the active session"
    return HTTPException(status_code=404, detail=detail)


def _require_active(store: SessionStore) -> None:
    if store.active_session is None:
        raise HTTPException(status_code=409, detail="No session in progress")


@router.get("", response_model=WorkoutSession)
def get_active_session(store: SessionStore = Depends(session_store)) -> WorkoutSession:
    """Get the session in progress."""
    session = store.active_session
    if session is None:
        raise HTTPException(status_code=404, detail="No session in progress")
    return session


@router.post("", response_model=WorkoutSession, status_code=201)
def start_session(
    request: StartSessionRequest,
    store: SessionStore = Depends(session_store),
) -> WorkoutSession:
    """Start a session, pre-filled from the last session of the same type.

    Starts the next workout in the rotation unless `workout_type` is given.
    """
    if store.active_session is not None:
        raise HTTPException(status_code=409, detail="A session is already in progress")
    workout_type = request.workout_type or store.next_workout_type
    session = store.start_session(workout_type)
    if session is None:
        raise HTTPException(
            status_code=404, detail=f"No template for workout {workout_type}"
        )
    return session


@router.patch(
    "/exercises/{exercise_id}/sets/{set_id}", response_model=dict[str, str]
)
def edit_set(
    exercise_id: UUID,
    set_id: UUID,
    edit: SetEdit,
    store: SessionStore = Depends(session_store),
) -> dict[str, str]:
    """Update reps, weight or duration of a set. Omitted fields are unchanged."""
    _require_active(store)
    if not store.record_set_edit(exercise_id, set_id, edit):
        raise _not_found(exercise_id, set_id)
    return {"message": "Set updated"}


@router.post(
    "/exercises/{exercise_id}/sets/{set_id}/toggle", response_model=SetToggleResult
)
def toggle_set(
    exercise_id: UUID,
    set_id: UUID,
    store: SessionStore = Depends(session_store),
) -> SetToggleResult:
    """Tick a set complete or incomplete.

    Completing a working set starts the rest timer.
    """
    _require_active(store)
    result = store.toggle_set_complete(exercise_id, set_id)
    if result is None:
        raise _not_found(exercise_id, set_id)
    return result


@router.post(
    "/exercises/{exercise_id}/sets", response_model=ExerciseSet, status_code=201
)
def add_set(
    exercise_id: UUID,
    store: SessionStore = Depends(session_store),
) -> ExerciseSet:
    """Append a working set copying the previous set's numbers."""
    _require_active(store)
    new_set = store.add_set(exercise_id)
    if new_set is None:
        raise _not_found(exercise_id)
    return new_set


@router.put("/exercises/{exercise_id}/notes", response_model=dict[str, str])
def update_notes(
    exercise_id: UUID,
    request: ExerciseNotesRequest,
    store: SessionStore = Depends(session_store),
) -> dict[str, str]:
    _require_active(store)
    if not store.update_exercise_notes(exercise_id, request.notes):
        raise _not_found(exercise_id)
    return {"message": "Notes updated"}


@router.get(
    "/exercises/{exercise_id}/sets/{set_id}/pr",
    response_model=PersonalRecordCheckResponse,
)
def check_personal_record(
    exercise_id: UUID,
    set_id: UUID,
    store: SessionStore = Depends(session_store),
) -> PersonalRecordCheckResponse:
    """Whether a completed set beats the stored record for its exercise."""
    _require_active(store)
    return PersonalRecordCheckResponse(
        is_personal_record=store.is_personal_record(exercise_id, set_id)
    )


@router.post("/complete", response_model=WorkoutSession)
def complete_session(
    request: CompleteSessionRequest,
    store: SessionStore = Depends(session_store),
) -> WorkoutSession:
    """Finish the session: records, history and rotation are updated and saved."""
    session = store.complete_session(
        energy=request.energy,
        sleep=request.sleep,
        bodyweight=request.bodyweight,
        notes=request.notes,
    )
    if session is None:
        raise HTTPException(status_code=409, detail="No session in progress")
    return session


@router.delete("", response_model=dict[str, str])
def discard_session(store: SessionStore = Depends(session_store)) -> dict[str, str]:
    """Throw away the session in progress. Nothing is saved."""
    if not store.discard_session():
        raise HTTPException(status_code=409, detail="No session in progress")
    return {"message": "Session discarded"}
