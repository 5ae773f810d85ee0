"""Argument encoding: token lists for git, never shell strings."""

from __future__ import annotations

from gitcore.commands.builder import (
    CommandSpec,
    build_command,
    join_args,
    quote_arg,
    validate_args,
)

__all__ = [
    "CommandSpec",
    "build_command",
    "join_args",
    "quote_arg",
    "validate_args",
]
