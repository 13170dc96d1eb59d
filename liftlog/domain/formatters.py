from datetime import datetime
from typing import Any

from liftlog.domain.calculators import (
    calculate_average_weight,
    calculate_max_weight,
    calculate_total_reps,
    calculate_total_volume,
)
from liftlog.models import ExerciseDisplay, ExerciseLogEntry
from liftlog.utils import dates
from liftlog.utils.numbers import format_fixed


def format_timestamp(value: Any) -> str:
    """
    Render a point in time as DD/MM/YYYY HH:mm:ss (24h, UTC).

    Accepts a datetime or a parseable timestamp string; anything else is
    replaced by the current time instead of raising.
    """
    if isinstance(value, str):
        value = dates.parse_timestamp(value)

    if not isinstance(value, datetime):
        value = dates.now()

    return dates.to_utc(value).strftime(dates.DISPLAY_FORMAT)


def format_volume(volume: float, include_unit: bool = False) -> str:
    formatted = format_fixed(volume, 1)
    return f"{formatted} kg" if include_unit else formatted


def format_exercise_for_storage(entry: ExerciseLogEntry) -> ExerciseLogEntry:
    return entry.model_copy(update={"timestamp": format_timestamp(entry.timestamp)})


def format_exercise_for_display(entry: ExerciseLogEntry) -> ExerciseDisplay:
    sets = entry.sets
    return ExerciseDisplay(
        exercise_summary=f"{entry.exercise.group} - {entry.exercise.name}",
        formatted_timestamp=format_timestamp(entry.timestamp),
        set_count=len(sets),
        total_reps=calculate_total_reps(sets),
        total_volume=format_volume(calculate_total_volume(sets), True),
        average_weight=format_volume(calculate_average_weight(sets), True),
        max_weight=format_volume(calculate_max_weight(sets), True),
        failure=entry.failure,
    )
