"""Process environment for git invocations.

Every invocation gets the same deterministic overrides: interactive prompts
are disabled and the locale is pinned so that stderr text (which the error
classifier and conflict detection match against) does not vary with the
host's language settings.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from gitcore.constants import DEFAULT_LOCALE

__all__ = [
    "GIT_CONFIG_OVERRIDES",
    "GIT_ENV_OVERRIDES",
    "build_git_env",
    "git_config_args",
]

#: Overrides applied on top of the inherited environment.
GIT_ENV_OVERRIDES: dict[str, str] = {
    "GIT_TERMINAL_PROMPT": "0",
    "GIT_ASKPASS": "echo",
    "GCM_INTERACTIVE": "never",
}

#: Settings passed as ``-c key=value`` ahead of every subcommand. Paths are
#: printed verbatim (UTF-8) instead of C-quoted octal escapes.
GIT_CONFIG_OVERRIDES: dict[str, str] = {
    "core.quotePath": "false",
}


def build_git_env(
    extra: Mapping[str, str] | None = None,
    *,
    base: Mapping[str, str] | None = None,
    locale: str = DEFAULT_LOCALE,
) -> dict[str, str]:
    """Build the environment for one git invocation.

    Args:
        extra: Caller overrides, applied last.
        base: Environment to inherit. Defaults to ``os.environ``.
        locale: Value for ``LANG`` and ``LC_ALL``.

    Returns:
        A new dictionary. ``os.environ`` and *base* are never modified.
    """
    env = dict(os.environ if base is None else base)
    env.update(GIT_ENV_OVERRIDES)
    env["LANG"] = locale
    env["LC_ALL"] = locale
    if extra:
        env.update(extra)
    return env


def git_config_args() -> list[str]:
    """Global ``-c`` options for :data:`GIT_CONFIG_OVERRIDES`."""
    args: list[str] = []
    for key, value in GIT_CONFIG_OVERRIDES.items():
        args.extend(["-c", f"{key}={value}"])
    return args
