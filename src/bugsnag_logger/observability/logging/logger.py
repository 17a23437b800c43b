"""Observability – NotifierLogger, the logger that reports to Bugsnag.

Every call produces exactly one call on the injected
:class:`~bugsnag_logger.application.notifications.NotificationClient`:

* exceptions go to ``notify_exception`` untouched;
* anything else is formatted and goes to ``notify_error`` with a title taken
  from ``context["title"]`` or, failing that, from the start of the message.

The ``title`` key is stripped from the context in both cases.  Whatever the
client raises reaches the caller unchanged.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from bugsnag_logger.config.settings import LoggerSettings
from bugsnag_logger.kernel.support import get_or_default, omit_key, truncate
from bugsnag_logger.observability.logging.formatting import format_message
from bugsnag_logger.observability.logging.processors import get_logger
from bugsnag_logger.observability.logging.protocol import LogEvent, LogLevel
from bugsnag_logger.observability.logging.severity import parse_level, severity_for

if TYPE_CHECKING:
    from bugsnag_logger.application.notifications import NotificationClient

_log = get_logger(__name__)

TITLE_KEY = "title"


class NotifierLogger:
    """Multi-level logger backed by a :class:`NotificationClient`.

    Parameters
    ----------
    client:
        Receives one ``notify_exception`` or ``notify_error`` call per log
        call.
    settings:
        Title truncation settings.  Defaults to :class:`LoggerSettings()`.

    Example
    -------
    ::

        logger = NotifierLogger(BugsnagNotificationClient(bugsnag_client))
        logger.error("payment gateway timed out", {"order_id": 42})
        try:
            charge()
        except GatewayError as exc:
            logger.critical(exc, {"title": "charge failed"})
    """

    def __init__(self, client: NotificationClient, settings: LoggerSettings | None = None) -> None:
        self._client = client
        self._settings = settings or LoggerSettings()

    @property
    def client(self) -> NotificationClient:
        return self._client

    def emergency(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.EMERGENCY, message, context)

    def alert(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.ALERT, message, context)

    def critical(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.CRITICAL, message, context)

    def error(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.ERROR, message, context)

    def warning(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.WARNING, message, context)

    def notice(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.NOTICE, message, context)

    def info(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.INFO, message, context)

    def debug(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        self.log(LogLevel.DEBUG, message, context)

    def log(self, level: LogLevel | str, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Report *message* at *level*.

        Raises
        ------
        InvalidLevelError
            When *level* is not one of the eight levels; the client is not
            called.
        """
        level = parse_level(level)
        severity = severity_for(level)
        context = context or {}
        metadata = omit_key(context, TITLE_KEY)

        if isinstance(message, BaseException):
            _log.debug("notifier.dispatch", level=level.value, severity=severity.value, path="exception")
            self._client.notify_exception(message, metadata, severity)
            return

        formatted = format_message(message)
        title = get_or_default(context, TITLE_KEY)
        if title is None:
            title = truncate(formatted, self._settings.title_limit, self._settings.title_end)
        _log.debug("notifier.dispatch", level=level.value, severity=severity.value, path="error")
        self._client.notify_error(str(title), formatted, metadata, severity)

    def log_event(self, event: LogEvent) -> None:
        self.log(event.level, event.message, event.context)


__all__ = ["NotifierLogger", "TITLE_KEY"]
