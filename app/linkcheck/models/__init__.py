"""Data models for linkcheck.

This module exports the core data structures used throughout the application.
"""

from linkcheck.models.config import (
    DEFAULT_CACHE_TIMEOUT,
    DEFAULT_USER_AGENT,
    LinkCheckConfig,
    WarningPolicy,
)
from linkcheck.models.header import (
    HeaderInterpolationError,
    HeaderParseError,
    HttpHeader,
    MissingSeparatorError,
)
from linkcheck.models.pattern import LinkPattern

__all__ = [
    "DEFAULT_CACHE_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "HeaderInterpolationError",
    "HeaderParseError",
    "HttpHeader",
    "LinkCheckConfig",
    "LinkPattern",
    "MissingSeparatorError",
    "WarningPolicy",
]
