"""Observability – the Bugsnag-backed logger and its logging plumbing."""
from bugsnag_logger.observability.logging.protocol import LogEvent, LoggerInterface, LogLevel, Severity
from bugsnag_logger.observability.logging.severity import SEVERITY_BY_LEVEL, parse_level, severity_for
from bugsnag_logger.observability.logging.formatting import Arrayable, Jsonable, format_message
from bugsnag_logger.observability.logging.processors import get_logger
from bugsnag_logger.observability.logging.logger import NotifierLogger
from bugsnag_logger.observability.logging.handler import NotifierHandler, level_for_record
from bugsnag_logger.observability.logging.factory import JsonLoggerFactory

__all__ = [
    "Arrayable",
    "JsonLoggerFactory",
    "Jsonable",
    "LogEvent",
    "LogLevel",
    "LoggerInterface",
    "NotifierHandler",
    "NotifierLogger",
    "SEVERITY_BY_LEVEL",
    "Severity",
    "format_message",
    "get_logger",
    "level_for_record",
    "parse_level",
    "severity_for",
]
