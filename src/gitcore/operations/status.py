"""``git status`` in porcelain v2 format."""

from __future__ import annotations

from gitcore.models.options import StatusOptions
from gitcore.models.results import StatusResult
from gitcore.operations.base import GitInvocation
from gitcore.parsers.status import parse_status

__all__ = ["build_status_args", "execute_status"]


def build_status_args(options: StatusOptions) -> list[str]:
    args = ["status", "--porcelain=v2", "-b", "-z"]
    if not options.include_untracked:
        args.append("--untracked-files=no")
    if options.ignore_submodules:
        args.append("--ignore-submodules")
    return args


async def execute_status(invoke: GitInvocation, options: StatusOptions) -> StatusResult:
    result = await invoke(build_status_args(options))
    return parse_status(result.stdout)
