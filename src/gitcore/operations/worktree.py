"""``git worktree`` management."""

from __future__ import annotations

from gitcore.models.options import WorktreeOptions
from gitcore.models.results import RenamePair, WorktreeResult
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.worktree import parse_pruned_worktrees, parse_worktrees

__all__ = ["build_worktree_args", "execute_worktree"]


def build_worktree_args(options: WorktreeOptions) -> list[str]:
    mode = options.mode
    if mode == "list":
        return ["worktree", "list", "--porcelain"]
    if mode == "prune":
        return ["worktree", "prune", "--verbose"]

    operation = f"worktree {mode}"
    path = positional(require(options.path, "path", operation), "path", operation)
    if mode == "add":
        args = ["worktree", "add"]
        if options.force:
            args.append("--force")
        if options.detach:
            args.append("--detach")
        elif options.branch:
            args.extend(["-b", options.branch])
        args.append(path)
        if options.commitish:
            args.append(positional(options.commitish, "commitish", operation))
        return args
    if mode == "remove":
        args = ["worktree", "remove"]
        if options.force:
            args.append("--force")
        args.append(path)
        return args
    if mode == "move":
        new_path = require(options.new_path, "new_path", operation)
        positional(new_path, "new_path", operation)
        return ["worktree", "move", path, new_path]
    raise validation_error(f"Unknown worktree mode: {mode}", "worktree")


async def execute_worktree(
    invoke: GitInvocation, options: WorktreeOptions
) -> WorktreeResult:
    result = await invoke(build_worktree_args(options))
    mode = options.mode
    if mode == "list":
        return WorktreeResult(
            mode=mode, worktrees=tuple(parse_worktrees(result.stdout))
        )
    if mode == "prune":
        return WorktreeResult(
            mode=mode, pruned=tuple(parse_pruned_worktrees(result.output))
        )
    if mode == "add":
        return WorktreeResult(mode=mode, added=options.path)
    if mode == "remove":
        return WorktreeResult(mode=mode, removed=options.path)
    return WorktreeResult(
        mode=mode,
        moved=RenamePair(old=options.path or "", new=options.new_path or ""),
    )
