"""Observability – log levels, severities, LogEvent and the logger protocol."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class LogLevel(str, Enum):
    """The eight levels of the conventional logging facade, most severe first."""

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"


class Severity(str, Enum):
    """Severities understood by Bugsnag."""

    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """A single log call captured as a value."""
    level: LogLevel | str
    message: Any
    context: Mapping[str, Any] = dataclasses.field(default_factory=dict)


@runtime_checkable
class LoggerInterface(Protocol):
    """Multi-level logger: one method per level plus a generic ``log``."""

    def emergency(self, message: Any, context: Mapping[str, Any] | None = None) -> None: ...
    def alert(self, message: Any, context: Mapping[str, Any] | None = None) -> None: ...
    def critical(self, message: Any, context: Mapping[str, Any] | None = None) -> None: ...
    def error(self, message: Any, context: Mapping[str, Any] | None = None) -> None: ...
    def warning(self, message: Any, context: Mapping[str, Any] | None = None) -> None: ...
    def notice(self, message: Any, context: Mapping[str, Any] | None = None) -> None: ...
    def info(self, message: Any, context: Mapping[str, Any] | None = None) -> None: ...
    def debug(self, message: Any, context: Mapping[str, Any] | None = None) -> None: ...
    def log(self, level: LogLevel | str, message: Any, context: Mapping[str, Any] | None = None) -> None: ...


__all__ = ["LogEvent", "LogLevel", "LoggerInterface", "Severity"]
