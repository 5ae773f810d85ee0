"""History operations: commit, log and show."""

from __future__ import annotations

from gitcore.models.options import CommitOptions, LogOptions, ShowOptions
from gitcore.models.results import CommitResult, LogResult, ShowResult
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.log import (
    COMMIT_METADATA_FORMAT,
    LOG_FORMAT,
    parse_commit_metadata,
    parse_log,
    parse_show,
)

__all__ = [
    "build_commit_args",
    "build_log_args",
    "build_show_args",
    "execute_commit",
    "execute_log",
    "execute_show",
]


# =============================================================================
# commit
# =============================================================================


def build_commit_args(options: CommitOptions) -> list[str]:
    """Encode ``git commit``; the message is always one token after ``-m``."""
    require(options.message, "message", "commit")
    args = ["commit", "-m", options.message]
    if options.amend:
        args.append("--amend")
    if options.allow_empty:
        args.append("--allow-empty")
    if options.no_verify:
        args.append("--no-verify")
    if options.sign:
        args.append("--gpg-sign")
    if options.author is not None:
        args.append(f"--author={options.author.render()}")
    if options.files:
        args.extend(["--", *options.files])
    return args


def build_commit_metadata_args(commit_hash: str) -> list[str]:
    return ["show", f"--format={COMMIT_METADATA_FORMAT}", "--name-only", commit_hash]


async def execute_commit(invoke: GitInvocation, options: CommitOptions) -> CommitResult:
    """Commit, then read back the new hash, author, time and changed files."""
    await invoke(build_commit_args(options))
    head = await invoke(["rev-parse", "HEAD"])
    commit_hash = head.stdout.strip()
    metadata = await invoke(build_commit_metadata_args(commit_hash))
    author, timestamp, files = parse_commit_metadata(metadata.stdout)
    return CommitResult(
        commit_hash=commit_hash,
        message=options.message,
        author=author,
        timestamp=timestamp,
        files_changed=tuple(files),
    )


# =============================================================================
# log
# =============================================================================


def build_log_args(options: LogOptions) -> list[str]:
    for name in ("max_count", "skip"):
        value = getattr(options, name)
        if value is not None and value < 0:
            raise validation_error(f"{name} must not be negative", "log")

    args = ["log", f"--format={LOG_FORMAT}"]
    if options.max_count is not None:
        args.append(f"--max-count={options.max_count}")
    if options.skip is not None:
        args.append(f"--skip={options.skip}")
    if options.since:
        args.append(f"--since={options.since}")
    if options.until:
        args.append(f"--until={options.until}")
    if options.author:
        args.append(f"--author={options.author}")
    if options.grep:
        args.append(f"--grep={options.grep}")
    if options.stat:
        args.append("--stat")
    if options.patch:
        args.append("-p")
    if options.branch:
        args.append(positional(options.branch, "branch", "log"))
    if options.path:
        args.extend(["--", options.path])
    return args


async def execute_log(invoke: GitInvocation, options: LogOptions) -> LogResult:
    result = await invoke(build_log_args(options))
    commits = parse_log(result.stdout, stat=options.stat, patch=options.patch)
    return LogResult(commits=tuple(commits), total_count=len(commits))


# =============================================================================
# show
# =============================================================================


def build_show_args(options: ShowOptions) -> list[str]:
    object_name = positional(
        require(options.object_name, "object_name", "show"), "object_name", "show"
    )
    args = ["show"]
    if options.stat:
        args.append("--stat")
    args.extend(["--format=raw", object_name])
    if options.path:
        args.extend(["--", options.path])
    return args


async def execute_show(invoke: GitInvocation, options: ShowOptions) -> ShowResult:
    result = await invoke(build_show_args(options))
    return parse_show(result.stdout, options.object_name)
