"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from bugsnag_logger.observability.logging.handler import NotifierHandler
from bugsnag_logger.observability.logging.logger import NotifierLogger


class JsonLoggerFactory:
    """Configure structlog for JSON output and optionally report to Bugsnag."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        notifier: NotifierLogger | None = None,
        notifier_level: int = logging.ERROR,
    ) -> list[logging.Handler]:
        """Install JSON rendering on the root logger.

        When *notifier* is given a :class:`NotifierHandler` is attached as
        well, so records at *notifier_level* and above are reported.

        Returns the handlers now installed on the root logger.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)

        handlers: list[logging.Handler] = [stream]
        if notifier is not None:
            handlers.append(NotifierHandler(notifier, level=notifier_level))

        root = logging.getLogger()
        root.handlers.clear()
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)
        return handlers


__all__ = ["JsonLoggerFactory"]
