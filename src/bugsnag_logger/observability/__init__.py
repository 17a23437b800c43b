"""Observability – logging surface."""

from bugsnag_logger.observability.logging import (
    JsonLoggerFactory,
    LoggerInterface,
    LogLevel,
    NotifierHandler,
    NotifierLogger,
    Severity,
)

__all__ = [
    "JsonLoggerFactory",
    "LogLevel",
    "LoggerInterface",
    "NotifierHandler",
    "NotifierLogger",
    "Severity",
]
