"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        ├── InvalidLevelError
        └── ConfigError      (bugsnag_logger.config.validation)

Failures raised by a notification client are never wrapped in this
hierarchy; they reach the caller of the logger untouched.
"""

from bugsnag_logger.kernel.errors.application import ApplicationError, InvalidLevelError
from bugsnag_logger.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InvalidLevelError",
]
