"""Observability – level to Bugsnag severity mapping."""
from __future__ import annotations

from types import MappingProxyType

from bugsnag_logger.kernel.errors import InvalidLevelError
from bugsnag_logger.observability.logging.protocol import LogLevel, Severity

SEVERITY_BY_LEVEL = MappingProxyType({
    LogLevel.EMERGENCY: Severity.FATAL,
    LogLevel.ALERT: Severity.FATAL,
    LogLevel.CRITICAL: Severity.ERROR,
    LogLevel.ERROR: Severity.ERROR,
    LogLevel.WARNING: Severity.WARNING,
    LogLevel.NOTICE: Severity.WARNING,
    LogLevel.INFO: Severity.INFO,
    LogLevel.DEBUG: Severity.INFO,
})


def parse_level(level: LogLevel | str) -> LogLevel:
    """Coerce *level* to a :class:`LogLevel`, matching strings case-insensitively.

    Raises
    ------
    InvalidLevelError
        When *level* names none of the eight levels.
    """
    if isinstance(level, LogLevel):
        return level
    try:
        return LogLevel(str(level).lower())
    except ValueError as exc:
        raise InvalidLevelError(level, cause=exc) from exc


def severity_for(level: LogLevel | str) -> Severity:
    return SEVERITY_BY_LEVEL[parse_level(level)]


__all__ = ["SEVERITY_BY_LEVEL", "parse_level", "severity_for"]
