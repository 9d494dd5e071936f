"""Plain-text export of a completed session.

The format is stable because it's pasted elsewhere by the user:

    Workout A – Bench Focus | Oct 19, 2026

    Bench Press: 145×5, 145×5, 140×5 🏆 PR
      → felt fast
    Cable Fly: 30×12, 30×12

    Volume: 3,625 lbs | Duration: 52 min
    Energy: Good 💪 | Sleep: OK 😐
    Bodyweight: 180 lbs

    Notes: good session
"""

from ironledger.models import (
    RATING_EMOJI,
    RATING_LABELS,
    ExerciseSet,
    LoggedExercise,
    PersonalRecord,
    Rating,
    WorkoutSession,
    workout_full_name,
)

PR_MARKER = "🏆 PR"


def format_weight(weight: float) -> str:
    """Whole numbers without a decimal point, everything else as-is."""
    return f"{weight:g}"


def format_set(exercise_set: ExerciseSet) -> str:
    if exercise_set.duration_seconds is not None:
        return f"{exercise_set.duration_seconds}s"
    if exercise_set.weight is not None and exercise_set.reps is not None:
        return f"{format_weight(exercise_set.weight)}×{exercise_set.reps}"
    return "—"


def format_duration(seconds: int | None) -> str:
    if seconds is None:
        return "—"
    return f"{seconds // 60} min"


def _format_rating(label: str, rating: Rating) -> str:
    return f"{label}: {RATING_LABELS[rating]} {RATING_EMOJI[rating]}"


def _matches_record(exercise: LoggedExercise, records: dict[str, PersonalRecord]) -> bool:
    # A session that set the record shows the marker, as does one that tied it.
    best = exercise.best_set()
    record = records.get(exercise.name)
    if best is None or record is None or best.weight is None or best.reps is None:
        return False
    return best.weight >= record.weight and best.reps >= record.reps


def session_summary(
    session: WorkoutSession,
    records: dict[str, PersonalRecord],
    unit: str = "lbs",
) -> str:
    """Render `session` in the export format.

    Exercises without a completed working set are left out.
    """
    date_str = f"{session.start_time:%b} {session.start_time.day}, {session.start_time.year}"
    lines = [f"{workout_full_name(session.workout_type)} | {date_str}", ""]

    for exercise in session.exercises:
        done = exercise.completed_working_sets()
        if not done:
            continue
        line = f"{exercise.name}: " + ", ".join(format_set(s) for s in done)
        if _matches_record(exercise, records):
            line += f" {PR_MARKER}"
        lines.append(line)
        if exercise.notes:
            lines.append(f"  → {exercise.notes}")

    lines.append("")
    stats = f"Volume: {int(session.total_volume()):,} {unit}"
    duration = session.duration_seconds()
    if duration is not None:
        stats += f" | Duration: {format_duration(duration)}"
    lines.append(stats)

    context = []
    if session.energy is not None:
        context.append(_format_rating("Energy", session.energy))
    if session.sleep is not None:
        context.append(_format_rating("Sleep", session.sleep))
    if context:
        lines.append(" | ".join(context))

    if session.bodyweight is not None:
        lines.append(f"Bodyweight: {format_weight(session.bodyweight)} {unit}")

    if session.notes:
        lines.extend(["", f"Notes: {session.notes}"])

    return "\n".join(lines) + "\n"
