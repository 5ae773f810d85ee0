"""Shared plumbing for git operations.

Each operation module exposes pure ``build_*_args(options)`` encoders and an
``execute_*(invoke, options)`` coroutine that composes encode, run and parse.
``invoke`` is a :class:`GitInvocation` bound to one runner, one execution
context and one operation name; it turns any failed invocation into a raised
:class:`~gitcore.exceptions.ClassifiedError`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gitcore.commands.builder import build_command
from gitcore.errors.classifier import classify_result
from gitcore.exceptions import ClassifiedError, ErrorCategory, ErrorDetails
from gitcore.parsers.conflicts import has_conflicts

if TYPE_CHECKING:
    from gitcore.runners.command import GitRunner
    from gitcore.runners.models import CommandResult

__all__ = [
    "GitInvocation",
    "Operation",
    "OperationKind",
    "non_interactive_editor_env",
    "positional",
    "require",
    "validation_error",
]


class OperationKind(str, Enum):
    """Closed set of operations the client dispatches."""

    INIT = "init"
    CLONE = "clone"
    STATUS = "status"
    ADD = "add"
    COMMIT = "commit"
    LOG = "log"
    SHOW = "show"
    DIFF = "diff"
    BLAME = "blame"
    REFLOG = "reflog"
    BRANCH = "branch"
    CHECKOUT = "checkout"
    MERGE = "merge"
    CHERRY_PICK = "cherry-pick"
    REBASE = "rebase"
    FETCH = "fetch"
    PULL = "pull"
    PUSH = "push"
    RESET = "reset"
    CLEAN = "clean"
    STASH = "stash"
    TAG = "tag"
    REMOTE = "remote"
    WORKTREE = "worktree"


@dataclass(frozen=True, slots=True)
class Operation:
    """Registry entry tying an operation kind to its option type and executor."""

    kind: OperationKind
    options_type: type
    execute: Callable[[GitInvocation, Any], Awaitable[Any]]


def validation_error(message: str, operation: str) -> ClassifiedError:
    """Build a Validation error for bad caller input detected before spawning."""
    return ClassifiedError(
        message,
        category=ErrorCategory.VALIDATION,
        details=ErrorDetails(operation=operation),
    )


def require(value: str | None, field: str, operation: str) -> str:
    """Return *value*, or raise a Validation error when it is missing or blank."""
    if value is None or not value.strip():
        raise validation_error(f"{field} is required for {operation}", operation)
    return value


def positional(value: str, field: str, operation: str) -> str:
    """Return *value* for use as a positional argument.

    Revisions, ref names, remotes and paths placed before any ``--`` would be
    read by git as options if they began with a dash, so such values are
    rejected as a Validation error.
    """
    if value.startswith("-"):
        raise validation_error(
            f"{field} must not start with '-' for {operation}", operation
        )
    return value


def non_interactive_editor_env() -> dict[str, str]:
    """Environment that lets commit-producing continues run without an editor."""
    return {"GIT_EDITOR": "true", "GIT_SEQUENCE_EDITOR": "true"}


class GitInvocation:
    """Runs git for one operation call and classifies failures.

    Args:
        runner: Runner used for every invocation of this call.
        working_dir: Directory git runs in.
        operation: Operation name recorded in error details.
        network_timeout: Timeout used for network-bound invocations.
    """

    def __init__(
        self,
        runner: GitRunner,
        working_dir: Path,
        operation: OperationKind,
        *,
        network_timeout: float | None = None,
    ) -> None:
        self._runner = runner
        self._working_dir = working_dir
        self._operation = operation
        self._network_timeout = network_timeout

    @property
    def working_dir(self) -> Path:
        """Directory git runs in."""
        return self._working_dir

    @property
    def operation(self) -> OperationKind:
        """Operation this invocation belongs to."""
        return self._operation

    async def __call__(
        self,
        args: Sequence[str],
        *,
        allow_conflicts: bool = False,
        network: bool = False,
        env: Mapping[str, str] | None = None,
        accept: Callable[[CommandResult], bool] | None = None,
    ) -> CommandResult:
        """Run git with *args* and return the result if it counts as success.

        Args:
            args: Subcommand and argument tokens.
            allow_conflicts: Return (rather than raise) a non-zero exit whose
                output reports ``CONFLICT (`` lines.
            network: Use the network timeout instead of the runner default.
            env: Extra environment variables for this invocation.
            accept: Return (rather than raise) a non-zero exit for which this
                predicate is true.

        Raises:
            ClassifiedError: For invalid tokens or any failed invocation.
        """
        spec = build_command(args[0], args[1:], operation=self._operation.value)
        result = await self._runner.run(
            spec.tokens,
            cwd=self._working_dir,
            timeout=self._network_timeout if network else None,
            env=env,
        )
        if result.success:
            return result
        # Only a normal non-zero exit can carry a usable partial outcome
        exited = (
            result.returncode > 0
            and not result.timed_out
            and not result.output_exceeded
        )
        if exited and allow_conflicts and has_conflicts(result.stdout, result.stderr):
            return result
        if exited and accept is not None and accept(result):
            return result
        raise classify_result(result, spec.tokens, self._operation.value)
