"""Routes for completed workout history."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from ironledger.agg import ExerciseHistoryEntry, exercise_names
from ironledger.models import WorkoutSession, WorkoutType
from ironledger.session import SessionStore
from ironledger.app.dependencies import session_store, weight_unit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=list[WorkoutSession])
def get_history(
    workout_type: Optional[WorkoutType] = Query(None, description="Only sessions of this workout"),
    limit: Optional[int] = Query(None, description="Number of sessions to return", ge=1),
    store: SessionStore = Depends(session_store),
) -> list[WorkoutSession]:
    """Get completed sessions, newest first."""
    return store.history(workout_type=workout_type, limit=limit)


@router.get("/exercises", response_model=list[str])
def get_exercise_names(store: SessionStore = Depends(session_store)) -> list[str]:
    """Names of every exercise that appears in history, sorted."""
    return exercise_names(store.history())


@router.get("/exercises/{name}", response_model=list[ExerciseHistoryEntry])
def get_exercise_history(
    name: str,
    store: SessionStore = Depends(session_store),
) -> list[ExerciseHistoryEntry]:
    """Completed working sets of one exercise per session, newest first."""
    return store.exercise_history(name)


@router.get("/{session_id}", response_model=WorkoutSession)
def get_session(
    session_id: UUID,
    store: SessionStore = Depends(session_store),
) -> WorkoutSession:
    session = store.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session


@router.get("/{session_id}/summary", response_class=PlainTextResponse)
def get_session_summary(
    session_id: UUID,
    store: SessionStore = Depends(session_store),
    unit: str = Depends(weight_unit),
) -> str:
    """Plain-text summary of a session, for pasting elsewhere."""
    summary = store.summary(session_id, unit=unit)
    if summary is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return summary
