"""Bugsnag adapter – NotificationClient backed by bugsnag-python."""
from bugsnag_logger.adapters.bugsnag.client import (
    BUGSNAG_SEVERITY,
    ERROR_TAB,
    LOG_TAB,
    METADATA_TAB,
    BugsnagNotificationClient,
    LoggedError,
)

__all__ = [
    "BUGSNAG_SEVERITY",
    "BugsnagNotificationClient",
    "ERROR_TAB",
    "LOG_TAB",
    "LoggedError",
    "METADATA_TAB",
]
