from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    PORT_FAILURE = "port_failure"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of every fallible service or port operation.

    Exactly one of `data` (on success) or `error` (on failure) is meaningful.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    kind: ErrorKind | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> "Result[T]":
        return cls(success=True, data=data)

    @classmethod
    def err(
        cls, error: str, kind: ErrorKind = ErrorKind.PORT_FAILURE
    ) -> "Result[T]":
        return cls(success=False, error=error, kind=kind)

    def unwrap(self) -> T | None:
        if not self.success:
            raise ValueError(f"Called unwrap on a failed result: {self.error}")
        return self.data
