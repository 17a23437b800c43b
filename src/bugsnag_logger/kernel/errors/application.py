"""Application-layer errors raised by the logger itself."""

from __future__ import annotations

from typing import Any

from bugsnag_logger.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Misuse of the logger or its configuration."""

    default_code = "application_error"


class InvalidLevelError(ApplicationError):
    """A log call named a level outside the eight recognised ones."""

    default_code = "invalid_level"

    def __init__(self, level: Any, **kwargs: Any) -> None:
        super().__init__(f"Unknown log level {level!r}", detail={"level": str(level)}, **kwargs)
        self.level = level


__all__ = ["ApplicationError", "InvalidLevelError"]
