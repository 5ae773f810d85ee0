"""Branch listing and management."""

from __future__ import annotations

from gitcore.models.options import BranchOptions
from gitcore.models.results import BranchResult, RenamePair
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.listings import BRANCH_FORMAT, parse_branches

__all__ = ["build_branch_args", "execute_branch"]


def _build_list_args(options: BranchOptions) -> list[str]:
    args = ["for-each-ref", f"--format={BRANCH_FORMAT}"]
    if options.merged is True:
        args.append("--merged")
    elif isinstance(options.merged, str) and options.merged:
        args.append(f"--merged={options.merged}")
    if options.no_merged:
        args.append(f"--no-merged={options.no_merged}")
    args.append("refs/remotes/" if options.remote else "refs/heads/")
    return args


def build_branch_args(options: BranchOptions) -> list[str]:
    """Encode the command for ``options.mode``.

    Listing uses ``for-each-ref`` so that upstream tracking information comes
    back in a delimited format rather than ``git branch -vv`` columns.
    """
    if options.mode == "list":
        return _build_list_args(options)

    operation = f"branch {options.mode}"
    name = positional(require(options.name, "name", operation), "name", operation)
    if options.mode == "create":
        args = ["branch"]
        if options.force:
            args.append("--force")
        args.append(name)
        if options.start_point:
            args.append(positional(options.start_point, "start_point", operation))
        return args
    if options.mode == "delete":
        return ["branch", "-D" if options.force else "-d", name]
    if options.mode == "rename":
        new_name = positional(
            require(options.new_name, "new_name", operation), "new_name", operation
        )
        args = ["branch", "-m"]
        if options.force:
            args.append("--force")
        args.extend([name, new_name])
        return args
    raise validation_error(f"Unknown branch mode: {options.mode}", "branch")


async def execute_branch(invoke: GitInvocation, options: BranchOptions) -> BranchResult:
    result = await invoke(build_branch_args(options))
    if options.mode == "list":
        return BranchResult(mode="list", branches=tuple(parse_branches(result.stdout)))
    if options.mode == "create":
        return BranchResult(mode="create", created=options.name)
    if options.mode == "delete":
        return BranchResult(mode="delete", deleted=options.name)
    return BranchResult(
        mode="rename",
        renamed=RenamePair(old=options.name or "", new=options.new_name or ""),
    )
