"""``git stash`` management."""

from __future__ import annotations

from gitcore.constants import DEFAULT_STASH_REF
from gitcore.models.options import StashOptions
from gitcore.models.results import StashResult
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.conflicts import parse_conflicts
from gitcore.parsers.listings import parse_stashes

__all__ = ["build_stash_args", "execute_stash"]

_SAVED_MARKER = "Saved working directory"


def build_stash_args(options: StashOptions) -> list[str]:
    mode = options.mode
    if mode == "list":
        return ["stash", "list"]
    if mode == "push":
        args = ["stash", "push"]
        if options.message:
            args.extend(["-m", options.message])
        if options.include_untracked:
            args.append("--include-untracked")
        if options.keep_index:
            args.append("--keep-index")
        return args
    if mode in ("pop", "apply"):
        ref = options.stash_ref or DEFAULT_STASH_REF
        return ["stash", mode, positional(ref, "stash_ref", f"stash {mode}")]
    if mode == "drop":
        ref = require(options.stash_ref, "stash_ref", "stash drop")
        return ["stash", "drop", positional(ref, "stash_ref", "stash drop")]
    if mode == "clear":
        return ["stash", "clear"]
    raise validation_error(f"Unknown stash mode: {mode}", "stash")


async def execute_stash(invoke: GitInvocation, options: StashOptions) -> StashResult:
    mode = options.mode
    result = await invoke(
        build_stash_args(options),
        allow_conflicts=mode in ("pop", "apply"),
    )
    if mode == "list":
        return StashResult(mode=mode, stashes=tuple(parse_stashes(result.stdout)))
    if mode == "push":
        # "No local changes to save" exits 0 without creating an entry
        created = DEFAULT_STASH_REF if _SAVED_MARKER in result.output else None
        return StashResult(mode=mode, created=created)
    if mode in ("pop", "apply"):
        ref = options.stash_ref or DEFAULT_STASH_REF
        if not result.success:
            conflicts = parse_conflicts(result.stdout, result.stderr)
            return StashResult(
                mode=mode,
                conflicts=True,
                conflicted_files=tuple(conflict.path for conflict in conflicts),
            )
        return StashResult(mode=mode, applied=ref)
    if mode == "drop":
        return StashResult(mode=mode, dropped=options.stash_ref)
    return StashResult(mode=mode, cleared=True)
