"""Git process execution: environment, runner and raw result model."""

from __future__ import annotations

from gitcore.runners.command import GitRunner
from gitcore.runners.environment import (
    GIT_CONFIG_OVERRIDES,
    GIT_ENV_OVERRIDES,
    build_git_env,
    git_config_args,
)
from gitcore.runners.models import CommandResult

__all__ = [
    "CommandResult",
    "GIT_CONFIG_OVERRIDES",
    "GIT_ENV_OVERRIDES",
    "GitRunner",
    "build_git_env",
    "git_config_args",
]
