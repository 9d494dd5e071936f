"""Routes for personal records."""

from fastapi import APIRouter, Depends, Query

from ironledger.agg import top_records
from ironledger.models import PersonalRecord
from ironledger.session import SessionStore
from ironledger.app.dependencies import session_store

router = APIRouter(prefix="/records", tags=["records"])


@router.get("", response_model=dict[str, PersonalRecord])
def get_records(store: SessionStore = Depends(session_store)) -> dict[str, PersonalRecord]:
    """Get the best (weight, reps) for every exercise, keyed by exercise name."""
    return store.personal_records()


@router.get("/top", response_model=list[PersonalRecord])
def get_top_records(
    limit: int = Query(5, description="Number of records to return", ge=1, le=50),
    store: SessionStore = Depends(session_store),
) -> list[PersonalRecord]:
    """Heaviest records first."""
    return top_records(store.personal_records(), limit=limit)
