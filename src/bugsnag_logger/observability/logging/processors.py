"""Observability – get_logger helper for the package's own diagnostics."""
from __future__ import annotations

from typing import Any

import structlog

LOGGER_NAMESPACE = "bugsnag_logger"
# bugsnag-python logs its own delivery failures under "bugsnag"
INTERNAL_NAMESPACES = (LOGGER_NAMESPACE, "bugsnag")


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def is_internal(logger_name: str) -> bool:
    """True for records emitted by this package or by the bugsnag client."""
    return any(
        logger_name == namespace or logger_name.startswith(namespace + ".")
        for namespace in INTERNAL_NAMESPACES
    )


__all__ = ["INTERNAL_NAMESPACES", "LOGGER_NAMESPACE", "get_logger", "is_internal"]
