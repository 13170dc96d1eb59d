"""
Validation rules for exercise logs and credentials.

Everything here is pure and total: any input, however malformed, produces a
bool or a ValidationResult rather than an exception. Field identifiers in the
returned errors are relied on by callers for field highlighting.
"""

import math
import re
from typing import Any

from liftlog.models import ExerciseLogEntry, FieldError, ValidationResult

MAX_NAME_LENGTH = 100
MAX_WEIGHT = 1000  # kg
MAX_REPS = 1000
MAX_SETS = 50

MIN_PASSWORD_LENGTH = 8
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 20

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful weight or rep count
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ------------------------- EXERCISE -------------------------


def validate_exercise_name(name: Any) -> bool:
    if not isinstance(name, str):
        return False
    trimmed = name.strip()
    return 0 < len(trimmed) <= MAX_NAME_LENGTH


def validate_exercise_group(group: Any) -> bool:
    return isinstance(group, str) and len(group.strip()) > 0


def validate_weight(weight: Any) -> bool:
    if not _is_number(weight) or not math.isfinite(weight):
        return False
    return 0 < weight <= MAX_WEIGHT


def validate_reps(reps: Any) -> bool:
    if not _is_number(reps) or not math.isfinite(reps):
        return False
    if reps != int(reps):
        return False
    return 0 < reps <= MAX_REPS


def _set_value(s: Any, attr: str) -> Any:
    if isinstance(s, dict):
        return s.get(attr)
    return getattr(s, attr, None)


def validate_sets(sets: Any) -> ValidationResult:
    if not sets:
        return ValidationResult(
            errors=[FieldError(field="sets", message="Must have at least one set")]
        )

    if len(sets) > MAX_SETS:
        return ValidationResult(
            errors=[
                FieldError(
                    field="sets",
                    message=f"Cannot have more than {MAX_SETS} sets (too many sets provided)",
                )
            ]
        )

    errors: list[FieldError] = []
    for index, s in enumerate(sets):
        if not validate_weight(_set_value(s, "weight")):
            errors.append(
                FieldError(
                    field=f"sets[{index}].weight",
                    message=f"Set {index + 1}: Weight must be a positive number (max {MAX_WEIGHT}kg)",
                )
            )
        if not validate_reps(_set_value(s, "reps")):
            errors.append(
                FieldError(
                    field=f"sets[{index}].reps",
                    message=f"Set {index + 1}: Reps must be a positive whole number (max {MAX_REPS})",
                )
            )

    return ValidationResult(errors=errors)


def validate_exercise(entry: ExerciseLogEntry) -> ValidationResult:
    """
    Validate a whole log entry. Every independent rule is checked, so a
    single call reports all problems in the order timestamp, group, name, sets.
    """
    errors: list[FieldError] = []

    timestamp = getattr(entry, "timestamp", None)
    if not isinstance(timestamp, str) or not timestamp.strip():
        errors.append(FieldError(field="timestamp", message="Timestamp is required"))

    exercise = getattr(entry, "exercise", None)

    if not validate_exercise_group(getattr(exercise, "group", None)):
        errors.append(
            FieldError(field="exercise.group", message="Exercise group is required")
        )

    if not validate_exercise_name(getattr(exercise, "name", None)):
        errors.append(
            FieldError(
                field="exercise.name",
                message=f"Exercise name is required (max {MAX_NAME_LENGTH} characters)",
            )
        )

    errors.extend(validate_sets(getattr(entry, "sets", None)).errors)

    return ValidationResult(errors=errors)


# ------------------------- AUTH -------------------------


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_email(email: Any) -> ValidationResult:
    if _is_blank(email):
        return ValidationResult(
            errors=[FieldError(field="email", message="Email is required")]
        )

    if not EMAIL_RE.match(email):
        return ValidationResult(
            errors=[
                FieldError(field="email", message="Please enter a valid email address")
            ]
        )

    return ValidationResult()


def validate_password(password: Any) -> ValidationResult:
    if _is_blank(password):
        return ValidationResult(
            errors=[FieldError(field="password", message="Password is required")]
        )

    if len(password) < MIN_PASSWORD_LENGTH:
        return ValidationResult(
            errors=[
                FieldError(
                    field="password",
                    message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            ]
        )

    return ValidationResult()


def validate_username(username: Any) -> ValidationResult:
    if _is_blank(username):
        return ValidationResult(
            errors=[FieldError(field="username", message="Username is required")]
        )

    errors: list[FieldError] = []

    if not MIN_USERNAME_LENGTH <= len(username) <= MAX_USERNAME_LENGTH:
        errors.append(
            FieldError(
                field="username",
                message=f"Username must be between {MIN_USERNAME_LENGTH} and {MAX_USERNAME_LENGTH} characters",
            )
        )

    if not USERNAME_RE.match(username):
        errors.append(
            FieldError(
                field="username",
                message="Username can only contain letters, numbers, underscores, and hyphens",
            )
        )

    return ValidationResult(errors=errors)


def validate_login_credentials(credentials: Any) -> ValidationResult:
    return ValidationResult.of(
        validate_email(getattr(credentials, "email", None)),
        validate_password(getattr(credentials, "password", None)),
    )


def validate_register_credentials(credentials: Any) -> ValidationResult:
    password = getattr(credentials, "password", None)
    confirm = getattr(credentials, "confirm_password", None)

    result = ValidationResult.of(
        validate_username(getattr(credentials, "username", None)),
        validate_email(getattr(credentials, "email", None)),
        validate_password(password),
    )

    if password != confirm:
        result.errors.append(
            FieldError(field="confirmPassword", message="Passwords do not match")
        )

    return result


# ------------------------- WORKOUT PLANS -------------------------


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_workout_plan(plan: Any) -> ValidationResult:
    """
    Check a plan and every exercise target in it. Field paths follow the
    backend shape, e.g. `workoutDayDTOList[0].exercises[1].minReps`.
    """
    errors: list[FieldError] = []

    if _is_blank(getattr(plan, "name", None)):
        errors.append(FieldError(field="name", message="Plan name is required"))

    if not _is_positive_int(getattr(plan, "duration", None)):
        errors.append(
            FieldError(field="duration", message="Duration must be at least 1")
        )

    for d, day in enumerate(getattr(plan, "workout_days", None) or []):
        for t, target in enumerate(getattr(day, "exercises", None) or []):
            prefix = f"workoutDayDTOList[{d}].exercises[{t}]"
            label = f"Day {d + 1}, exercise {t + 1}"

            exercise = getattr(target, "exercise", None)
            if _is_blank(getattr(exercise, "id", None)):
                errors.append(
                    FieldError(
                        field=f"{prefix}.exercise",
                        message=f"{label}: Exercise is required",
                    )
                )

            for attr, alias, name in (
                ("sets", "sets", "Sets"),
                ("min_reps", "minReps", "Min reps"),
                ("max_reps", "maxReps", "Max reps"),
            ):
                if not _is_positive_int(getattr(target, attr, None)):
                    errors.append(
                        FieldError(
                            field=f"{prefix}.{alias}",
                            message=f"{label}: {name} must be at least 1",
                        )
                    )

            min_reps = getattr(target, "min_reps", None)
            max_reps = getattr(target, "max_reps", None)
            if (
                _is_positive_int(min_reps)
                and _is_positive_int(max_reps)
                and min_reps > max_reps
            ):
                errors.append(
                    FieldError(
                        field=f"{prefix}.maxReps",
                        message=f"{label}: Max reps cannot be less than min reps",
                    )
                )

    return ValidationResult(errors=errors)
