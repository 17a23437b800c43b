"""Application notifications – NotificationClient port + in-memory fake."""
from bugsnag_logger.application.notifications.client import (
    InMemoryNotificationClient,
    NotificationClient,
    NotifiedError,
    NotifiedException,
)

__all__ = [
    "InMemoryNotificationClient",
    "NotificationClient",
    "NotifiedError",
    "NotifiedException",
]
