"""Argument encoding for git invocations.

Commands are always carried as token lists and handed to
``asyncio.create_subprocess_exec``; nothing here produces a string that is
executed by a shell. Shell metacharacters in values are therefore inert and
are accepted as-is. The only token content rejected is the NUL byte, which
cannot be represented in an argv entry.
"""

from __future__ import annotations

import shlex
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from gitcore.exceptions import ClassifiedError, ErrorCategory, ErrorDetails
from gitcore.utils.security import scrub_args

__all__ = [
    "CommandSpec",
    "build_command",
    "join_args",
    "quote_arg",
    "validate_args",
]


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """A git subcommand plus its ordered argument tokens.

    Attributes:
        subcommand: The git subcommand (e.g. ``"status"``).
        args: Argument tokens following the subcommand.
    """

    subcommand: str
    args: tuple[str, ...] = ()

    @property
    def tokens(self) -> list[str]:
        """Subcommand and arguments, without the executable."""
        return [self.subcommand, *self.args]

    def argv(self, executable: str = "git") -> list[str]:
        """Full argv list for process creation."""
        return [executable, *self.tokens]

    def display(self, executable: str = "git") -> str:
        """Shell-quoted rendering for logs and diagnostics only."""
        return join_args(self.argv(executable))


def validate_args(tokens: Iterable[str], *, operation: str = "") -> None:
    """Reject tokens that cannot be passed safely as argv entries.

    Raises:
        ClassifiedError: Validation category, if a token holds a null byte or
            is not a string.
    """
    for index, token in enumerate(tokens):
        if not isinstance(token, str):
            raise ClassifiedError(
                f"Argument {index} must be a string, got {type(token).__name__}",
                category=ErrorCategory.VALIDATION,
                details=ErrorDetails(operation=operation),
            )
        if "\x00" in token:
            raise ClassifiedError(
                f"Argument {index} contains a null byte",
                category=ErrorCategory.VALIDATION,
                details=ErrorDetails(
                    command=scrub_args([token.replace("\x00", "\\0")]),
                    operation=operation,
                ),
            )


def build_command(
    subcommand: str,
    args: Sequence[str] = (),
    *,
    operation: str = "",
) -> CommandSpec:
    """Validate tokens and assemble a :class:`CommandSpec`.

    Args:
        subcommand: Git subcommand name.
        args: Argument tokens in the order git expects them.
        operation: Operation name used in error details.

    Returns:
        A new :class:`CommandSpec`.

    Raises:
        ClassifiedError: Validation category, for an invalid token.
    """
    validate_args([subcommand, *args], operation=operation or subcommand)
    return CommandSpec(subcommand=subcommand, args=tuple(args))


def quote_arg(token: str) -> str:
    """POSIX-quote one token for display; safe tokens are left bare."""
    return shlex.quote(token)


def join_args(tokens: Iterable[str]) -> str:
    """Join tokens into a shell-quoted string that splits back losslessly."""
    return shlex.join(tokens)
