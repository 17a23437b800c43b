"""
bugsnag_logger – forward application log events to Bugsnag.

Import path convention::

    from bugsnag_logger.observability.logging import NotifierLogger, NotifierHandler
    from bugsnag_logger.adapters.bugsnag import BugsnagNotificationClient
    from bugsnag_logger.kernel.errors import InvalidLevelError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
