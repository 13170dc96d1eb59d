"""
Derived metrics over exercise sets. Pure functions, empty input yields 0.
"""

from typing import Sequence

from liftlog.models import ExerciseSet
from liftlog.utils.numbers import round_half_up


def calculate_set_volume(s: ExerciseSet) -> float:
    return s.weight * s.reps


def calculate_total_volume(sets: Sequence[ExerciseSet]) -> float:
    if not sets:
        return 0
    return sum(calculate_set_volume(s) for s in sets)


def calculate_total_reps(sets: Sequence[ExerciseSet]) -> int | float:
    if not sets:
        return 0
    return sum(s.reps for s in sets)


def calculate_average_weight(sets: Sequence[ExerciseSet]) -> float:
    if not sets:
        return 0
    total_weight = sum(s.weight for s in sets)
    return round_half_up(total_weight / len(sets), 2)


def calculate_max_weight(sets: Sequence[ExerciseSet]) -> float:
    if not sets:
        return 0
    return max(s.weight for s in sets)


def calculate_one_rep_max(s: ExerciseSet) -> float:
    """
    Estimate a one-rep max with the Epley formula: weight * (1 + reps / 30).

    Only trustworthy for roughly 1-10 reps; higher rep counts are not
    clamped and will extrapolate.
    """
    if s.weight == 0 or s.reps == 0:
        return 0
    if s.reps == 1:
        return s.weight

    return round_half_up(s.weight * (1 + s.reps / 30), 1)
