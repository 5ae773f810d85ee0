"""gitcore exception hierarchy.

All exceptions can be imported from this package:
    from gitcore.exceptions import ClassifiedError, ConfigError
"""

from __future__ import annotations

from gitcore.exceptions.base import GitcoreError
from gitcore.exceptions.config import ConfigError
from gitcore.exceptions.git import (
    ClassifiedError,
    ErrorCategory,
    ErrorDetails,
    ErrorSeverity,
)

__all__ = [
    "ClassifiedError",
    "ConfigError",
    "ErrorCategory",
    "ErrorDetails",
    "ErrorSeverity",
    "GitcoreError",
]
