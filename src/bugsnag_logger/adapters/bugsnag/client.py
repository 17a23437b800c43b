"""Adapters – BugsnagNotificationClient (requires bugsnag)."""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from bugsnag_logger.kernel.errors import BaseError
from bugsnag_logger.observability.logging.protocol import Severity

__all__ = [
    "BUGSNAG_SEVERITY",
    "BugsnagNotificationClient",
    "ERROR_TAB",
    "LOG_TAB",
    "LoggedError",
    "METADATA_TAB",
]

METADATA_TAB = "context"
ERROR_TAB = "error"
LOG_TAB = "log"

# bugsnag-python only accepts info/warning/error and downgrades anything
# else to warning.
BUGSNAG_SEVERITY = MappingProxyType({
    Severity.FATAL: "error",
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.INFO: "info",
})


def _require_bugsnag() -> Any:  # pragma: no cover
    try:
        import bugsnag  # noqa: PLC0415
        return bugsnag
    except ImportError as exc:
        raise ImportError(
            "bugsnag is required for BugsnagNotificationClient. "
            "Install it with: pip install bugsnag"
        ) from exc


class LoggedError(Exception):
    """Carrier for a log message that did not originate from an exception."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


def _severity_value(severity: Severity | str) -> str:
    return severity.value if isinstance(severity, Enum) else str(severity)


def _bugsnag_severity(severity: Severity | str) -> str:
    try:
        return BUGSNAG_SEVERITY[Severity(_severity_value(severity))]
    except ValueError:
        return _severity_value(severity)


class BugsnagNotificationClient:
    """NotificationClient that reports through a ``bugsnag.Client``.

    Parameters
    ----------
    client:
        A configured ``bugsnag.Client`` (or anything with the same
        ``notify(exception, **options)`` method).  When omitted one is built
        from *client_options* on first use.
    **client_options:
        Keyword arguments for ``bugsnag.Client`` (``api_key``,
        ``release_stage`` ...).

    Severities are mapped through :data:`BUGSNAG_SEVERITY` (``fatal`` is
    reported as ``error``); the logger's own severity is kept in the ``log``
    metadata tab.  The log context is sent as the ``context`` tab.  Exceptions
    from :mod:`bugsnag_logger.kernel.errors` also get an ``error`` tab with
    their :meth:`~BaseError.to_dict` payload.
    """

    def __init__(self, client: Any = None, **client_options: Any) -> None:
        self._client = client
        self._client_options = client_options

    @property
    def client(self) -> Any:
        if self._client is None:
            bugsnag = _require_bugsnag()
            self._client = bugsnag.Client(**self._client_options)
        return self._client

    def notify_exception(
        self,
        exception: BaseException,
        context: Mapping[str, Any],
        severity: Severity | str,
    ) -> None:
        metadata = self._metadata(context, severity)
        if isinstance(exception, BaseError):
            metadata[ERROR_TAB] = exception.to_dict()
        self.client.notify(exception, severity=_bugsnag_severity(severity), metadata=metadata)

    def notify_error(
        self,
        title: str,
        message: str,
        context: Mapping[str, Any],
        severity: Severity | str,
    ) -> None:
        self.client.notify(
            LoggedError(title, message),
            severity=_bugsnag_severity(severity),
            context=title,
            metadata=self._metadata(context, severity),
        )

    @staticmethod
    def _metadata(context: Mapping[str, Any], severity: Severity | str) -> dict[str, Any]:
        return {
            METADATA_TAB: dict(context),
            LOG_TAB: {"severity": _severity_value(severity)},
        }
