"""Network operations: fetch, pull and push.

These run with the network timeout rather than the runner default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitcore.models.options import FetchOptions, PullOptions, PushOptions
from gitcore.models.results import FetchResult, PullResult, PushResult
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.conflicts import parse_conflicts
from gitcore.parsers.transfer import (
    detect_pull_strategy,
    has_push_rejections,
    parse_fetch_refs,
    parse_push_refs,
)
from gitcore.parsers.working_tree import parse_merge_stat_files

if TYPE_CHECKING:
    from gitcore.runners.models import CommandResult

__all__ = [
    "build_fetch_args",
    "build_pull_args",
    "build_push_args",
    "execute_fetch",
    "execute_pull",
    "execute_push",
]


def build_fetch_args(options: FetchOptions) -> list[str]:
    remote = positional(require(options.remote, "remote", "fetch"), "remote", "fetch")
    if options.depth is not None and options.depth < 1:
        raise validation_error("depth must be a positive integer", "fetch")
    args = ["fetch"]
    if options.prune:
        args.append("--prune")
    if options.tags:
        args.append("--tags")
    if options.depth is not None:
        args.append(f"--depth={options.depth}")
    args.append(remote)
    if options.refspec:
        args.append(positional(options.refspec, "refspec", "fetch"))
    return args


async def execute_fetch(invoke: GitInvocation, options: FetchOptions) -> FetchResult:
    result = await invoke(build_fetch_args(options), network=True)
    # Ref updates are reported on stderr
    fetched, pruned = parse_fetch_refs(result.stderr or result.stdout)
    return FetchResult(
        remote=options.remote,
        fetched_refs=tuple(fetched),
        pruned_refs=tuple(pruned),
    )


def build_pull_args(options: PullOptions) -> list[str]:
    remote = positional(require(options.remote, "remote", "pull"), "remote", "pull")
    args = ["pull"]
    if options.rebase:
        args.append("--rebase")
    if options.fast_forward_only:
        args.append("--ff-only")
    args.append(remote)
    if options.branch:
        args.append(positional(options.branch, "branch", "pull"))
    return args


async def execute_pull(invoke: GitInvocation, options: PullOptions) -> PullResult:
    result = await invoke(build_pull_args(options), network=True, allow_conflicts=True)
    strategy = detect_pull_strategy(result.output, rebase=options.rebase)
    if not result.success:
        conflicts = parse_conflicts(result.stdout, result.stderr)
        return PullResult(
            remote=options.remote,
            branch=options.branch,
            strategy=strategy,
            success=False,
            conflicts=True,
            conflicted_files=tuple(conflict.path for conflict in conflicts),
            files_changed=tuple(parse_merge_stat_files(result.stdout)),
        )
    return PullResult(
        remote=options.remote,
        branch=options.branch,
        strategy=strategy,
        files_changed=tuple(parse_merge_stat_files(result.stdout)),
    )


def build_push_args(options: PushOptions) -> list[str]:
    """Encode push; ``--force`` wins over ``--force-with-lease``.

    ``--porcelain`` makes git report one machine-readable line per ref.
    """
    remote = positional(require(options.remote, "remote", "push"), "remote", "push")
    args = ["push", "--porcelain"]
    if options.force:
        args.append("--force")
    elif options.force_with_lease:
        args.append("--force-with-lease")
    if options.set_upstream:
        args.append("--set-upstream")
    if options.tags:
        args.append("--tags")
    if options.dry_run:
        args.append("--dry-run")
    args.append(remote)
    if options.branch:
        args.append(positional(options.branch, "branch", "push"))
    return args


def _rejected_refs_only(result: CommandResult) -> bool:
    # git exits 1 when the remote turned down a ref; the porcelain lines say which
    return result.returncode == 1 and has_push_rejections(result.stdout)


async def execute_push(invoke: GitInvocation, options: PushOptions) -> PushResult:
    """Push and report per-ref outcomes.

    Refs the remote rejected (non-fast-forward, fetch first, hook declined)
    come back in ``rejected_refs`` with ``success`` false rather than as a
    raised error. Any other failure is raised.
    """
    result = await invoke(
        build_push_args(options), network=True, accept=_rejected_refs_only
    )
    pushed, rejected = parse_push_refs(result.stdout)
    return PushResult(
        remote=options.remote,
        branch=options.branch,
        pushed_refs=tuple(pushed),
        rejected_refs=tuple(rejected),
        upstream_set=options.set_upstream and not options.dry_run and not rejected,
        success=not rejected,
    )
