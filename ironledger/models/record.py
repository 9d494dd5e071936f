"""Personal record model."""

from datetime import date
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class PersonalRecord(BaseModel):
    """Best known (weight, reps) pair for one exercise name."""

    id: UUID = Field(default_factory=uuid4)
    exercise_name: str
    weight: float = Field(ge=0)
    reps: int = Field(ge=0)
    date: date
    session_id: UUID

    def beats(self, other: "PersonalRecord") -> bool:
        """Higher weight wins; at equal weight, more reps wins. Ties never win."""
        if self.weight > other.weight:
            return True
        return self.weight == other.weight and self.reps > other.reps
