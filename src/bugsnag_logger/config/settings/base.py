"""Config settings – Settings base class and LoggerSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from bugsnag_logger.config.validation import InvalidSettingValueError
from bugsnag_logger.kernel.support import DEFAULT_END, DEFAULT_LIMIT


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Tunables for :class:`~bugsnag_logger.observability.logging.NotifierLogger`.

    ``title_limit`` is the number of characters of the formatted message kept
    when a title has to be derived from it; ``title_end`` is appended to
    titles that were cut.
    """

    _prefix: ClassVar[str] = "BUGSNAG_LOGGER"

    title_limit: int = DEFAULT_LIMIT
    title_end: str = DEFAULT_END

    def _validate(self) -> None:
        if self.title_limit <= 0:
            raise InvalidSettingValueError("title_limit", self.title_limit, "must be positive")


__all__ = ["LoggerSettings", "Settings"]
