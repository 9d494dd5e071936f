"""Routes for the workout rotation pointer."""

from fastapi import APIRouter, Depends, HTTPException

from ironledger.models import workout_full_name
from ironledger.session import SessionStore
from ironledger.app.dependencies import session_store
from ironledger.app.models import RotationResponse, SetNextWorkoutRequest

router = APIRouter(prefix="/rotation", tags=["rotation"])


@router.get("", response_model=RotationResponse)
def get_rotation(store: SessionStore = Depends(session_store)) -> RotationResponse:
    """Get the workout that's up next."""
    next_type = store.next_workout_type
    return RotationResponse(next_workout_type=next_type, full_name=workout_full_name(next_type))


@router.put("", response_model=RotationResponse)
def set_next_workout(
    request: SetNextWorkoutRequest,
    store: SessionStore = Depends(session_store),
) -> RotationResponse:
    """Override which workout comes next. History is untouched."""
    if not store.set_next_workout(request.workout_type):
        raise HTTPException(status_code=503, detail="Rotation changed but could not be saved")
    return get_rotation(store)
