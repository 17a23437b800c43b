"""Application notifications – NotificationClient port and in-memory fake."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from bugsnag_logger.observability.logging.protocol import Severity

__all__ = [
    "InMemoryNotificationClient",
    "NotificationClient",
    "NotifiedError",
    "NotifiedException",
]


@runtime_checkable
class NotificationClient(Protocol):
    """Port: report errors to a remote monitoring service."""

    def notify_exception(
        self,
        exception: BaseException,
        context: Mapping[str, Any],
        severity: Severity | str,
    ) -> None: ...

    def notify_error(
        self,
        title: str,
        message: str,
        context: Mapping[str, Any],
        severity: Severity | str,
    ) -> None: ...


@dataclass(frozen=True)
class NotifiedException:
    """A recorded ``notify_exception`` call."""

    exception: BaseException
    context: dict[str, Any] = field(default_factory=dict)
    severity: Severity | str = Severity.ERROR


@dataclass(frozen=True)
class NotifiedError:
    """A recorded ``notify_error`` call."""

    title: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)
    severity: Severity | str = Severity.ERROR


class InMemoryNotificationClient:
    """Fake NotificationClient that captures reports in memory.

    Pass ``fail_with`` to make every notify call raise that exception after
    the call has been recorded.
    """

    def __init__(self, fail_with: BaseException | None = None) -> None:
        self.sent: list[NotifiedException | NotifiedError] = []
        self.fail_with = fail_with

    def notify_exception(
        self,
        exception: BaseException,
        context: Mapping[str, Any],
        severity: Severity | str,
    ) -> None:
        self.sent.append(NotifiedException(exception, dict(context), severity))
        self._maybe_fail()

    def notify_error(
        self,
        title: str,
        message: str,
        context: Mapping[str, Any],
        severity: Severity | str,
    ) -> None:
        self.sent.append(NotifiedError(title, message, dict(context), severity))
        self._maybe_fail()

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    @property
    def exceptions(self) -> list[NotifiedException]:
        return [n for n in self.sent if isinstance(n, NotifiedException)]

    @property
    def errors(self) -> list[NotifiedError]:
        return [n for n in self.sent if isinstance(n, NotifiedError)]

    def reset(self) -> None:
        self.sent.clear()

    @property
    def count(self) -> int:
        return len(self.sent)

    def last(self) -> NotifiedException | NotifiedError | None:
        return self.sent[-1] if self.sent else None
