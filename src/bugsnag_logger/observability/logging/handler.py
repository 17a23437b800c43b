"""Observability – NotifierHandler.

A :class:`logging.Handler` that routes stdlib log records through a
:class:`NotifierLogger`, so code written against :mod:`logging` reports to
Bugsnag without changes.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from bugsnag_logger.observability.logging.logger import TITLE_KEY, NotifierLogger
from bugsnag_logger.observability.logging.processors import is_internal
from bugsnag_logger.observability.logging.protocol import LogLevel

LOG_MESSAGE_KEY = "log_message"


def level_for_record(levelno: int) -> LogLevel:
    """Map a stdlib level number onto the nearest :class:`LogLevel`."""
    if levelno >= logging.CRITICAL:
        return LogLevel.CRITICAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    if levelno >= logging.INFO:
        return LogLevel.INFO
    return LogLevel.DEBUG


class NotifierHandler(logging.Handler):
    """Forward log records to a :class:`NotifierLogger`.

    Typical usage::

        notifier = NotifierLogger(BugsnagNotificationClient(bugsnag_client))
        logging.getLogger().addHandler(NotifierHandler(notifier, level=logging.ERROR))

        log.error("sync failed", extra={"context": {"job": "nightly"}, "title": "Sync"})

    The record's ``context`` extra (a mapping) becomes the report context,
    with ``logger`` set to the record's logger name.  A ``title`` extra
    overrides the derived title.  When the record carries ``exc_info`` the
    exception itself is reported.

    When ``exc_info`` is reported, the record's own text is kept in the
    context under ``log_message``.

    Records from this package's loggers and from the ``bugsnag`` client are
    skipped, as is anything logged on the same thread while a record is
    being reported.  Failures raised by the notifier propagate to the
    logging call site.
    """

    def __init__(self, notifier: NotifierLogger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._notifier = notifier
        self._local = threading.local()

    def emit(self, record: logging.LogRecord) -> None:
        if is_internal(record.name) or getattr(self._local, "emitting", False):
            return
        self._local.emitting = True
        try:
            self._notifier.log(level_for_record(record.levelno), self._message(record), self._context(record))
        finally:
            self._local.emitting = False

    @staticmethod
    def _message(record: logging.LogRecord) -> Any:
        if record.exc_info and record.exc_info[1] is not None:
            return record.exc_info[1]
        return record.getMessage()

    @staticmethod
    def _context(record: logging.LogRecord) -> dict[str, Any]:
        extra = getattr(record, "context", None)
        context: dict[str, Any] = dict(extra) if isinstance(extra, Mapping) else {}
        context.setdefault("logger", record.name)
        if record.exc_info and record.exc_info[1] is not None:
            context.setdefault(LOG_MESSAGE_KEY, record.getMessage())
        title = getattr(record, TITLE_KEY, None)
        if title is not None:
            context[TITLE_KEY] = title
        return context


__all__ = ["LOG_MESSAGE_KEY", "NotifierHandler", "level_for_record"]
