"""Kernel support – small pure helpers for mappings and strings."""
from bugsnag_logger.kernel.support.arrays import get_or_default, omit_key
from bugsnag_logger.kernel.support.strings import DEFAULT_END, DEFAULT_LIMIT, truncate

__all__ = ["DEFAULT_END", "DEFAULT_LIMIT", "get_or_default", "omit_key", "truncate"]
