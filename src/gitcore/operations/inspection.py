"""Line and ref inspection: ``git blame --porcelain`` and ``git reflog``."""

from __future__ import annotations

from gitcore.models.options import BlameOptions, ReflogOptions
from gitcore.models.results import BlameResult, ReflogResult
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.blame import parse_blame
from gitcore.parsers.reflog import REFLOG_FORMAT, parse_reflog

__all__ = [
    "build_blame_args",
    "build_reflog_args",
    "execute_blame",
    "execute_reflog",
]


def _line_range(options: BlameOptions) -> str | None:
    start, end = options.start_line, options.end_line
    if start is None and end is None:
        return None
    if (start is not None and start < 1) or (end is not None and end < 1):
        raise validation_error("line numbers start at 1", "blame")
    if start is not None and end is not None and end < start:
        raise validation_error("end_line must not precede start_line", "blame")
    return f"{start or 1},{end if end is not None else ''}"


def build_blame_args(options: BlameOptions) -> list[str]:
    require(options.file, "file", "blame")
    args = ["blame", "--porcelain"]
    if options.ignore_whitespace:
        args.append("-w")
    line_range = _line_range(options)
    if line_range is not None:
        args.extend(["-L", line_range])
    args.extend(["--", options.file])
    return args


async def execute_blame(invoke: GitInvocation, options: BlameOptions) -> BlameResult:
    result = await invoke(build_blame_args(options))
    lines = parse_blame(result.stdout)
    return BlameResult(file=options.file, lines=tuple(lines), total_lines=len(lines))


def build_reflog_args(options: ReflogOptions) -> list[str]:
    if options.max_count is not None and options.max_count < 0:
        raise validation_error("max_count must not be negative", "reflog")
    args = ["reflog", f"--format={REFLOG_FORMAT}"]
    if options.max_count is not None:
        args.append(f"-n{options.max_count}")
    if options.ref:
        args.append(positional(options.ref, "ref", "reflog"))
    return args


async def execute_reflog(invoke: GitInvocation, options: ReflogOptions) -> ReflogResult:
    result = await invoke(build_reflog_args(options))
    entries = parse_reflog(result.stdout)
    return ReflogResult(
        ref=options.ref,
        entries=tuple(entries),
        total_entries=len(entries),
    )
