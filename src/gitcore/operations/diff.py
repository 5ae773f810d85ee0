"""``git diff`` with numstat totals and optional untracked listing."""

from __future__ import annotations

from gitcore.models.options import DiffOptions
from gitcore.models.results import DiffResult
from gitcore.operations.base import GitInvocation, positional, validation_error
from gitcore.parsers.working_tree import parse_numstat

__all__ = [
    "build_diff_args",
    "build_numstat_args",
    "execute_diff",
]

_UNTRACKED_ARGS = ["ls-files", "--others", "--exclude-standard"]


def _cached_flag(options: DiffOptions) -> list[str]:
    return ["--cached"] if options.staged else []


def _revision_args(options: DiffOptions) -> list[str]:
    args: list[str] = []
    if options.source:
        args.append(positional(options.source, "source", "diff"))
    if options.target:
        args.append(positional(options.target, "target", "diff"))
    if options.paths:
        args.extend(["--", *options.paths])
    return args


def build_numstat_args(options: DiffOptions) -> list[str]:
    return ["diff", "--numstat", *_cached_flag(options), *_revision_args(options)]


def build_diff_args(options: DiffOptions) -> list[str]:
    if options.context_lines < 0:
        raise validation_error("context_lines must not be negative", "diff")
    args = ["diff", f"-U{options.context_lines}"]
    args.extend(_cached_flag(options))
    if options.name_only:
        args.append("--name-only")
    elif options.stat:
        args.append("--stat")
    args.extend(_revision_args(options))
    return args


async def execute_diff(invoke: GitInvocation, options: DiffOptions) -> DiffResult:
    """Collect totals first, then the diff text, then untracked files."""
    numstat = parse_numstat((await invoke(build_numstat_args(options))).stdout)
    diff = await invoke(build_diff_args(options))

    untracked: tuple[str, ...] = ()
    if options.include_untracked:
        listing = await invoke(_UNTRACKED_ARGS)
        untracked = tuple(line for line in listing.stdout.splitlines() if line.strip())

    return DiffResult(
        diff=diff.stdout,
        files_changed=len(numstat.files),
        insertions=numstat.insertions,
        deletions=numstat.deletions,
        binary=numstat.binary,
        untracked_files=untracked,
    )
