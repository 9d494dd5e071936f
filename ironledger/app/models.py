from typing import Optional

from pydantic import BaseModel, Field

from ironledger.models import Rating, WorkoutType
from ironledger.session import DEFAULT_EXTEND_SECONDS


class StartSessionRequest(BaseModel):
    """Request model to start a session. Defaults to the next workout in rotation."""

    workout_type: Optional[WorkoutType] = None


class CompleteSessionRequest(BaseModel):
    """Request model for finishing the active session.

    `bodyweight` is accepted as entered; values that aren't a number between
    50 and 500 are dropped rather than rejected.
    """

    energy: Optional[Rating] = None
    sleep: Optional[Rating] = None
    bodyweight: Optional[str | float] = None
    notes: str = ""


class ExerciseNotesRequest(BaseModel):
    notes: str


class RotationResponse(BaseModel):
    next_workout_type: WorkoutType
    full_name: str


class SetNextWorkoutRequest(BaseModel):
    workout_type: WorkoutType


class ExtendRestRequest(BaseModel):
    seconds: int = Field(default=DEFAULT_EXTEND_SECONDS, ge=1)


class PersonalRecordCheckResponse(BaseModel):
    is_personal_record: bool
