"""Map failed git invocations onto the error taxonomy.

:func:`classify_result` is a pure function of a :class:`CommandResult`, the
argument tokens and the operation name. Rules are applied in priority order:
spawn failures, runner faults, exit codes, stderr substrings, then a default.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from gitcore.exceptions import (
    ClassifiedError,
    ErrorCategory,
    ErrorDetails,
    ErrorSeverity,
)
from gitcore.runners.models import CommandResult
from gitcore.utils.security import scrub_args, scrub_secrets

__all__ = ["STDERR_RULES", "classify_result"]

_CATEGORY_LABELS: dict[ErrorCategory, str] = {
    ErrorCategory.NETWORK: "Network error",
    ErrorCategory.SECURITY: "Security error",
    ErrorCategory.REPOSITORY: "Repository error",
    ErrorCategory.VALIDATION: "Invalid input",
    ErrorCategory.OPERATION: "Git operation failed",
    ErrorCategory.CONFIGURATION: "Configuration error",
    ErrorCategory.SYSTEM: "System error",
}

# Ordered stderr table; first match wins. Matching is case-insensitive.
STDERR_RULES: list[tuple[str, ErrorCategory, ErrorSeverity]] = [
    # Network
    (r"could not resolve host", ErrorCategory.NETWORK, ErrorSeverity.HIGH),
    (r"unable to access", ErrorCategory.NETWORK, ErrorSeverity.HIGH),
    (r"connection refused", ErrorCategory.NETWORK, ErrorSeverity.HIGH),
    (r"connection timed out", ErrorCategory.NETWORK, ErrorSeverity.HIGH),
    (r"could not read from remote", ErrorCategory.NETWORK, ErrorSeverity.HIGH),
    (r"network is unreachable", ErrorCategory.NETWORK, ErrorSeverity.HIGH),
    (r"early eof", ErrorCategory.NETWORK, ErrorSeverity.HIGH),
    # Credentials
    (r"authentication failed", ErrorCategory.SECURITY, ErrorSeverity.CRITICAL),
    (r"permission denied \(publickey", ErrorCategory.SECURITY, ErrorSeverity.CRITICAL),
    (r"invalid username or password", ErrorCategory.SECURITY, ErrorSeverity.CRITICAL),
    # Lock contention
    (r"unable to lock ref", ErrorCategory.REPOSITORY, ErrorSeverity.MEDIUM),
    (r"cannot lock ref", ErrorCategory.REPOSITORY, ErrorSeverity.MEDIUM),
    (r"index\.lock", ErrorCategory.REPOSITORY, ErrorSeverity.MEDIUM),
    # Repository state
    (r"not a git repository", ErrorCategory.REPOSITORY, ErrorSeverity.HIGH),
    (r"CONFLICT", ErrorCategory.REPOSITORY, ErrorSeverity.HIGH),
    # Input
    (r"already exists", ErrorCategory.VALIDATION, ErrorSeverity.MEDIUM),
    (r"nothing to commit", ErrorCategory.OPERATION, ErrorSeverity.LOW),
    (r"unknown revision", ErrorCategory.VALIDATION, ErrorSeverity.HIGH),
    (r"bad revision", ErrorCategory.VALIDATION, ErrorSeverity.HIGH),
    (r"ambiguous argument", ErrorCategory.VALIDATION, ErrorSeverity.HIGH),
    (r"did not match any file", ErrorCategory.VALIDATION, ErrorSeverity.HIGH),
    (r"invalid reference", ErrorCategory.VALIDATION, ErrorSeverity.HIGH),
    (
        r"not a valid (?:object|branch|ref)",
        ErrorCategory.VALIDATION,
        ErrorSeverity.HIGH,
    ),
    (r"unknown option", ErrorCategory.VALIDATION, ErrorSeverity.HIGH),
    (r"unknown switch", ErrorCategory.VALIDATION, ErrorSeverity.HIGH),
    (
        r"cannot do a (?:soft|hard) reset with paths",
        ErrorCategory.VALIDATION,
        ErrorSeverity.HIGH,
    ),
    # Identity
    (r"please tell me who you are", ErrorCategory.CONFIGURATION, ErrorSeverity.MEDIUM),
    (r"user\.email", ErrorCategory.CONFIGURATION, ErrorSeverity.MEDIUM),
    (r"user\.name", ErrorCategory.CONFIGURATION, ErrorSeverity.MEDIUM),
    (r"empty ident name", ErrorCategory.CONFIGURATION, ErrorSeverity.MEDIUM),
    # Filesystem access
    (r"permission denied", ErrorCategory.SECURITY, ErrorSeverity.CRITICAL),
    # Push rejection
    (r"\[rejected\]", ErrorCategory.OPERATION, ErrorSeverity.HIGH),
    (r"non-fast-forward", ErrorCategory.OPERATION, ErrorSeverity.HIGH),
    (r"failed to push some refs", ErrorCategory.OPERATION, ErrorSeverity.HIGH),
]

_COMPILED_STDERR_RULES: list[tuple[re.Pattern[str], ErrorCategory, ErrorSeverity]] = [
    (re.compile(pattern, re.IGNORECASE), category, severity)
    for pattern, category, severity in STDERR_RULES
]

_EXIT_NOT_FOUND = 127
_EXIT_NOT_EXECUTABLE = 126
_EXIT_USAGE = 129
_EXIT_FATAL = 128


def _match_stderr(text: str) -> tuple[ErrorCategory, ErrorSeverity, str] | None:
    """Return the first matching rule and the line it matched on."""
    for pattern, category, severity in _COMPILED_STDERR_RULES:
        match = pattern.search(text)
        if match:
            start = text.rfind("\n", 0, match.start()) + 1
            end = text.find("\n", match.end())
            line = text[start:] if end == -1 else text[start:end]
            return category, severity, line.strip()
    return None


def _first_line(text: str) -> str:
    for line in text.splitlines():
        line = line.strip()
        if line:
            return line
    return ""


def _classify(
    result: CommandResult,
) -> tuple[ErrorCategory, ErrorSeverity, str, str | None]:
    """Return ``(category, severity, summary, matched_line)`` for a failed result.

    ``matched_line`` is the diagnostic line a stderr rule matched, if any.
    """
    rc = result.returncode

    if rc == _EXIT_NOT_FOUND:
        summary = "git executable not found"
        return ErrorCategory.SYSTEM, ErrorSeverity.CRITICAL, summary, None
    if rc == _EXIT_NOT_EXECUTABLE:
        summary = "git executable is not runnable"
        return ErrorCategory.SECURITY, ErrorSeverity.CRITICAL, summary, None

    if result.timed_out:
        return ErrorCategory.SYSTEM, ErrorSeverity.HIGH, "git command timed out", None
    if result.output_exceeded:
        summary = "git output exceeded the size limit"
        return ErrorCategory.SYSTEM, ErrorSeverity.HIGH, summary, None
    if rc < 0:
        summary = f"git was terminated by signal {-rc}"
        return ErrorCategory.SYSTEM, ErrorSeverity.HIGH, summary, None

    if rc == _EXIT_USAGE:
        summary = "Invalid git arguments"
        return ErrorCategory.VALIDATION, ErrorSeverity.HIGH, summary, None

    # Some commands report on stdout only (e.g. "nothing to commit")
    diagnostic = result.stderr or result.stdout
    matched = _match_stderr(diagnostic)
    if matched is not None:
        category, severity, line = matched
        return category, severity, _CATEGORY_LABELS[category], line

    if rc == _EXIT_FATAL:
        category = ErrorCategory.REPOSITORY
    else:
        category = ErrorCategory.OPERATION
    return category, ErrorSeverity.HIGH, _CATEGORY_LABELS[category], None


def classify_result(
    result: CommandResult,
    command: Sequence[str],
    operation: str,
) -> ClassifiedError:
    """Build the :class:`ClassifiedError` for a failed invocation.

    Args:
        result: The runner's record of the failed invocation.
        command: Argument tokens that were executed (without the executable).
        operation: Name of the gitcore operation.

    Returns:
        A classified error with redacted diagnostics. The caller raises it.
    """
    category, severity, summary, matched_line = _classify(result)
    stderr = scrub_secrets(result.stderr)
    stdout = scrub_secrets(result.stdout)

    if matched_line:
        reason = scrub_secrets(matched_line)
    else:
        reason = _first_line(stderr) or _first_line(stdout)
    message = f"{summary}: {reason}" if reason and reason not in summary else summary

    return ClassifiedError(
        message,
        category=category,
        severity=severity,
        details=ErrorDetails(
            exit_code=result.returncode,
            stdout=stdout,
            stderr=stderr,
            command=scrub_args(command),
            operation=operation,
        ),
    )
