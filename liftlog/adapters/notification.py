import logging
from dataclasses import dataclass
from typing import Literal, Protocol

from liftlog.utils.log import logger

NotificationType = Literal["success", "error", "info", "warning"]

_LEVELS: dict[str, int] = {
    "success": logging.INFO,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class NotificationPort(Protocol):
    def success(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def notify(self, type: NotificationType, message: str) -> None: ...


class _NotificationShortcuts:
    def notify(self, type: NotificationType, message: str) -> None:
        raise NotImplementedError

    def success(self, message: str) -> None:
        self.notify("success", message)

    def error(self, message: str) -> None:
        self.notify("error", message)

    def info(self, message: str) -> None:
        self.notify("info", message)

    def warning(self, message: str) -> None:
        self.notify("warning", message)


class LoggingNotificationAdapter(_NotificationShortcuts):
    """Writes user-facing notifications to the liftlog logger."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def notify(self, type: NotificationType, message: str) -> None:
        self._log.log(_LEVELS.get(type, logging.INFO), f"[{type.upper()}] {message}")


@dataclass(frozen=True)
class Notification:
    type: NotificationType
    message: str


class QueuedNotificationAdapter(_NotificationShortcuts):
    """Collects notifications until a UI drains them."""

    def __init__(self) -> None:
        self._pending: list[Notification] = []

    def notify(self, type: NotificationType, message: str) -> None:
        self._pending.append(Notification(type=type, message=message))

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        drained, self._pending = self._pending, []
        return drained
