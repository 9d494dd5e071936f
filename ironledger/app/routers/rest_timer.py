"""Routes for the rest countdown between sets."""

from fastapi import APIRouter, Depends, HTTPException

from ironledger.session import RestTimerStatus, SessionStore
from ironledger.app.dependencies import session_store
from ironledger.app.models import ExtendRestRequest

router = APIRouter(prefix="/rest-timer", tags=["rest-timer"])


@router.get("", response_model=RestTimerStatus)
def get_rest_timer(store: SessionStore = Depends(session_store)) -> RestTimerStatus:
    """Recompute and return the remaining rest time.

    Clients poll this on every refresh and after resuming from the background.
    `just_expired` is set on exactly one poll per countdown.
    """
    return store.rest_status()


@router.post("/extend", response_model=RestTimerStatus)
def extend_rest_timer(
    request: ExtendRestRequest,
    store: SessionStore = Depends(session_store),
) -> RestTimerStatus:
    """Add time to the current rest."""
    status = store.extend_rest(request.seconds)
    if status is None:
        raise HTTPException(status_code=409, detail="No rest timer running")
    return status


@router.delete("", response_model=RestTimerStatus)
def dismiss_rest_timer(store: SessionStore = Depends(session_store)) -> RestTimerStatus:
    """Skip the rest of the current rest period."""
    return store.dismiss_rest()
