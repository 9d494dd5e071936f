"""Routes for workout templates."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ironledger.models import WorkoutTemplate, WorkoutType
from ironledger.session import SessionStore
from ironledger.app.dependencies import session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[WorkoutTemplate])
def get_templates(store: SessionStore = Depends(session_store)) -> list[WorkoutTemplate]:
    """Get the template for every workout type."""
    return store.templates()


@router.get("/{workout_type}", response_model=WorkoutTemplate)
def get_template(
    workout_type: WorkoutType,
    store: SessionStore = Depends(session_store),
) -> WorkoutTemplate:
    template = store.template_for(workout_type)
    if template is None:
        raise HTTPException(status_code=404, detail=f"No template for workout {workout_type}")
    return template


@router.put("/{workout_type}", response_model=WorkoutTemplate)
def update_template(
    workout_type: WorkoutType,
    template: WorkoutTemplate,
    store: SessionStore = Depends(session_store),
) -> WorkoutTemplate:
    """Replace a template. Sessions already started keep their exercises."""
    if template.workout_type != workout_type:
        raise HTTPException(
            status_code=400,
            detail=f"Template is for workout {template.workout_type}, not {workout_type}",
        )
    if store.template_for(workout_type) is None:
        raise HTTPException(status_code=404, detail=f"No template for workout {workout_type}")
    if not store.update_template(template):
        raise HTTPException(status_code=503, detail="Template changed but could not be saved")
    return template
