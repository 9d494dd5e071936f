from .progression import (
    build_session,
    start_session,
    last_completed_session,
    last_performance,
    next_workout_type,
    advance_rotation,
)
from .records import evaluate_personal_records, is_personal_record
from .summary import session_summary

__all__ = [
    "build_session",
    "start_session",
    "last_completed_session",
    "last_performance",
    "next_workout_type",
    "advance_rotation",
    "evaluate_personal_records",
    "is_personal_record",
    "session_summary",
]
