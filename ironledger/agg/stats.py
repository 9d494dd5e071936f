from datetime import datetime, timedelta
from typing import Iterable

from pydantic import BaseModel

from ironledger.models import PersonalRecord, WorkoutSession


class WorkoutStats(BaseModel):
    """Headline numbers for the home and settings screens."""

    total_workouts: int
    workouts_this_week: int
    total_personal_records: int
    total_volume: float


def start_of_week(now: datetime) -> datetime:
    """Midnight on the Monday of `now`'s ISO week, in `now`'s timezone."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=now.weekday())


def workout_stats(
    history: Iterable[WorkoutSession],
    records: dict[str, PersonalRecord],
    now: datetime,
) -> WorkoutStats:
    completed = [s for s in history if s.completed]
    week_start = start_of_week(now)
    return WorkoutStats(
        total_workouts=len(completed),
        workouts_this_week=sum(1 for s in completed if s.start_time >= week_start),
        total_personal_records=len(records),
        total_volume=sum(s.total_volume() for s in completed),
    )
