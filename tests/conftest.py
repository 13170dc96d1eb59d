from datetime import datetime, timezone
from typing import Any, Callable

import pytest
import requests

from liftlog.adapters.errors import StorageError
from liftlog.models import (
    Exercise,
    ExerciseLogEntry,
    ExerciseSet,
    ExerciseTarget,
    Role,
    TargetExercise,
    User,
    WorkoutDay,
    WorkoutPlan,
)
from liftlog.utils import dates
from tests.test_data import TEST_ISO_TIMESTAMP, USER_EMAIL, USER_ID, USER_NAME


@pytest.fixture
def fixed_now(monkeypatch) -> datetime:
    now = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    monkeypatch.setattr(dates, "now", lambda: now)
    return now


# --------------- Entries ---------------


@pytest.fixture
def entry_factory() -> Callable[..., ExerciseLogEntry]:
    def _make(**overrides: Any) -> ExerciseLogEntry:
        base = ExerciseLogEntry(
            timestamp=TEST_ISO_TIMESTAMP,
            exercise=Exercise(group="CHEST", name="Bench Press"),
            sets=[ExerciseSet(weight=100, reps=10), ExerciseSet(weight=100, reps=8)],
            failure=False,
        )
        return base.model_copy(update=overrides)

    return _make


@pytest.fixture
def user() -> User:
    return User(id=USER_ID, username=USER_NAME, email=USER_EMAIL, role=Role.USER)


# --------------- Workout plans ---------------


@pytest.fixture
def plan_factory() -> Callable[..., WorkoutPlan]:
    def _make(**overrides: Any) -> WorkoutPlan:
        base = WorkoutPlan(
            name="Push Pull Legs",
            duration=8,
            workout_days=[
                WorkoutDay(
                    description="Push",
                    exercises=[
                        ExerciseTarget(
                            exercise=TargetExercise(id="1", name="Bench Press", group="CHEST"),
                            sets=3,
                            min_reps=8,
                            max_reps=12,
                        )
                    ],
                )
            ],
        )
        return base.model_copy(update=overrides)

    return _make


# --------------- Storage ---------------


class FakeStorage:
    """
    In-memory StoragePort that records calls.

    - `fail_on`: operation names that should raise StorageError
      (e.g. {"save", "keys"})
    - `corrupt_keys`: keys whose load raises StorageError
    """

    def __init__(self, *, fail_on: set[str] | None = None):
        self.data: dict[str, Any] = {}
        self.fail_on: set[str] = set(fail_on or [])
        self.corrupt_keys: set[str] = set()
        self.save_calls: list[tuple[str, Any]] = []
        self.removed: list[str] = []

    def _maybe_fail(self, op: str):
        if op in self.fail_on:
            raise StorageError(f"Boom in {op}")

    def save(self, key: str, value: Any) -> None:
        self._maybe_fail("save")
        self.save_calls.append((key, value))
        self.data[key] = value

    def load(self, key: str) -> Any | None:
        self._maybe_fail("load")
        if key in self.corrupt_keys:
            raise StorageError(f"Corrupt record {key}")
        value = self.data.get(key)
        if hasattr(value, "model_dump"):
            return value.model_dump(mode="json")
        return value

    def remove(self, key: str) -> None:
        self._maybe_fail("remove")
        self.removed.append(key)
        self.data.pop(key, None)

    def clear(self) -> None:
        self._maybe_fail("clear")
        self.data.clear()

    def keys(self) -> list[str]:
        self._maybe_fail("keys")
        return sorted(self.data)


@pytest.fixture
def fake_storage() -> FakeStorage:
    return FakeStorage()


# --------------- Notifications ---------------


class FakeNotifier:
    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def notify(self, type: str, message: str) -> None:
        self.calls.append((type, message))

    def success(self, message: str) -> None:
        self.notify("success", message)

    def error(self, message: str) -> None:
        self.notify("error", message)

    def info(self, message: str) -> None:
        self.notify("info", message)

    def warning(self, message: str) -> None:
        self.notify("warning", message)

    def types(self) -> list[str]:
        return [t for t, _ in self.calls]


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


# --------------- HTTP ---------------

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, json_data: Any = _NO_JSON, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._json is _NO_JSON:
            raise ValueError("No JSON body")
        return self._json


@pytest.fixture
def fake_response():
    """
    Factory fixture that returns a function to build FakeResponse objects.
    Example:
        resp = fake_response(status_code=409, json_data={"error": "dupe"})
    """

    def _make(status_code=200, json_data: Any = _NO_JSON, text=""):
        return FakeResponse(status_code=status_code, json_data=json_data, text=text)

    return _make


class FakeSession:
    """
    Stand-in for requests.Session. Queue responses (or exceptions) in
    `responses`; every request is recorded in `calls`.
    """

    def __init__(self, *responses: Any):
        self.responses: list[Any] = list(responses)
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected request {method} {url}")
        outcome = self.responses.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def network_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")


@pytest.fixture
def fake_session() -> FakeSession:
    """
    Empty FakeSession; tests queue outcomes with
    `fake_session.responses.append(fake_response(...))`.
    """
    return FakeSession()
