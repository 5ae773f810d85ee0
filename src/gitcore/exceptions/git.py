"""Classified git errors.

Every failed git invocation surfaces as exactly one :class:`ClassifiedError`.
Categorization is data (a category and severity pair) rather than a subclass
identity, so callers branch on ``error.category`` and ``error.retryable``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from gitcore.exceptions.base import GitcoreError


class ErrorCategory(str, Enum):
    """Stable taxonomy of failure sources."""

    SYSTEM = "system"
    VALIDATION = "validation"
    OPERATION = "operation"
    REPOSITORY = "repository"
    NETWORK = "network"
    CONFIGURATION = "configuration"
    SECURITY = "security"


class ErrorSeverity(str, Enum):
    """Severity of a classified error, independent of its category."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


DEFAULT_SEVERITY: dict[ErrorCategory, ErrorSeverity] = {
    ErrorCategory.SYSTEM: ErrorSeverity.CRITICAL,
    ErrorCategory.VALIDATION: ErrorSeverity.HIGH,
    ErrorCategory.OPERATION: ErrorSeverity.HIGH,
    ErrorCategory.REPOSITORY: ErrorSeverity.HIGH,
    ErrorCategory.NETWORK: ErrorSeverity.HIGH,
    ErrorCategory.CONFIGURATION: ErrorSeverity.MEDIUM,
    ErrorCategory.SECURITY: ErrorSeverity.CRITICAL,
}

RECOVERY_STEPS: dict[ErrorCategory, tuple[str, ...]] = {
    ErrorCategory.SYSTEM: (
        "Check system permissions and access rights",
        "Verify file system access",
        "Check available disk space",
        "Ensure required dependencies are installed",
    ),
    ErrorCategory.VALIDATION: (
        "Verify input parameters are correct",
        "Check path formatting and permissions",
        "Ensure all required fields are provided",
    ),
    ErrorCategory.OPERATION: (
        "Verify Git command syntax",
        "Check repository state",
        "Ensure working directory is clean",
        "Try running git status for more information",
    ),
    ErrorCategory.REPOSITORY: (
        "Verify repository exists and is accessible",
        "Check repository permissions",
        "Ensure .git directory is intact",
        "Try reinitializing the repository",
    ),
    ErrorCategory.NETWORK: (
        "Check network connectivity",
        "Verify remote repository access",
        "Check authentication credentials",
        "Try using git remote -v to verify remote configuration",
    ),
    ErrorCategory.CONFIGURATION: (
        "Check Git configuration",
        "Verify environment variables",
        "Ensure required settings are configured",
        "Try git config --list to view current configuration",
    ),
    ErrorCategory.SECURITY: (
        "Check file and directory permissions",
        "Verify authentication credentials",
        "Ensure secure connection to remote",
        "Review security settings",
    ),
}

# Backoff in milliseconds for retryable categories
_RETRY_DELAY_MS: dict[ErrorCategory, int] = {
    ErrorCategory.NETWORK: 1000,
    ErrorCategory.REPOSITORY: 500,
    ErrorCategory.OPERATION: 200,
}
_DEFAULT_RETRY_DELAY_MS = 1000


def is_retryable(category: ErrorCategory, severity: ErrorSeverity) -> bool:
    """Derive retryability from category and severity.

    Validation and security errors, and anything critical, are never
    retryable. Network errors always are. Operation and repository errors
    are retryable at any non-critical severity.
    """
    if category in (ErrorCategory.VALIDATION, ErrorCategory.SECURITY):
        return False
    if severity is ErrorSeverity.CRITICAL:
        return False
    if category is ErrorCategory.NETWORK:
        return True
    return category in (ErrorCategory.OPERATION, ErrorCategory.REPOSITORY)


def retry_delay_ms(category: ErrorCategory, severity: ErrorSeverity) -> int:
    """Suggested delay before retrying, or 0 when not retryable."""
    if not is_retryable(category, severity):
        return 0
    return _RETRY_DELAY_MS.get(category, _DEFAULT_RETRY_DELAY_MS)


@dataclass(frozen=True, slots=True)
class ErrorDetails:
    """Raw diagnostics captured at the failure point.

    Attributes:
        exit_code: Process exit code, or None when no process was spawned.
        stdout: Captured standard output (redacted).
        stderr: Captured standard error (redacted).
        command: Argument tokens of the failed invocation (redacted).
        operation: Name of the gitcore operation that failed.
    """

    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    command: tuple[str, ...] = ()
    operation: str = ""

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


class ClassifiedError(GitcoreError):
    """A categorized, severity-tagged git failure.

    Attributes:
        message: Human-readable error message.
        category: Failure category.
        severity: Failure severity.
        recovery_steps: Human-readable suggestions selected by category.
        details: Raw diagnostics (exit code, output, command).
    """

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory,
        severity: ErrorSeverity | None = None,
        details: ErrorDetails | None = None,
    ) -> None:
        """Initialize the ClassifiedError.

        Args:
            message: Human-readable error message.
            category: Failure category.
            severity: Failure severity. Defaults to the category's default.
            details: Raw diagnostics for the failed invocation.
        """
        self.category = category
        self.severity = severity or DEFAULT_SEVERITY[category]
        self.recovery_steps = RECOVERY_STEPS[category]
        self.details = details or ErrorDetails()
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        """True if retrying the same invocation may succeed."""
        return is_retryable(self.category, self.severity)

    @property
    def retry_delay_ms(self) -> int:
        """Suggested backoff before a retry, 0 when not retryable."""
        return retry_delay_ms(self.category, self.severity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "recovery_steps": list(self.recovery_steps),
            "retryable": self.retryable,
            "retry_delay_ms": self.retry_delay_ms,
            "details": self.details.to_dict(),
        }

    def __repr__(self) -> str:
        return (
            f"ClassifiedError({self.message!r}, category={self.category.value}, "
            f"severity={self.severity.value})"
        )


__all__ = [
    "ClassifiedError",
    "DEFAULT_SEVERITY",
    "ErrorCategory",
    "ErrorDetails",
    "ErrorSeverity",
    "RECOVERY_STEPS",
    "is_retryable",
    "retry_delay_ms",
]
