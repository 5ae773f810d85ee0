"""Integrating history: merge, cherry-pick and rebase.

All three may stop on conflicts. A conflicted stop is returned as a result
with ``success=False`` and ``conflicts=True``; every other failure raises.
"""

from __future__ import annotations

from gitcore.constants import DEFAULT_MERGE_STRATEGY
from gitcore.logging import get_logger
from gitcore.models.options import CherryPickOptions, MergeOptions, RebaseOptions
from gitcore.models.results import CherryPickResult, MergeResult, RebaseResult
from gitcore.operations.base import (
    GitInvocation,
    non_interactive_editor_env,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.conflicts import parse_conflicts
from gitcore.parsers.working_tree import parse_merge_stat_files, parse_rebased_count

__all__ = [
    "build_cherry_pick_args",
    "build_merge_args",
    "build_rebase_args",
    "execute_cherry_pick",
    "execute_merge",
    "execute_rebase",
]

logger = get_logger(__name__)


# =============================================================================
# merge
# =============================================================================


def build_merge_args(options: MergeOptions) -> list[str]:
    if options.abort:
        return ["merge", "--abort"]
    branch = require(options.branch, "branch", "merge")
    args = ["merge"]
    if options.no_fast_forward:
        args.append("--no-ff")
    if options.squash:
        args.append("--squash")
    if options.strategy:
        args.append(f"--strategy={options.strategy}")
    if options.message:
        args.extend(["-m", options.message])
    args.append(positional(branch, "branch", "merge"))
    return args


async def execute_merge(invoke: GitInvocation, options: MergeOptions) -> MergeResult:
    strategy = options.strategy or DEFAULT_MERGE_STRATEGY
    result = await invoke(build_merge_args(options), allow_conflicts=not options.abort)

    if options.abort:
        return MergeResult(success=True, strategy=strategy, message="Merge aborted")

    if not result.success:
        conflicts = parse_conflicts(result.stdout, result.stderr)
        logger.info(
            "git_merge_conflicts",
            branch=options.branch,
            conflicted_files=len(conflicts),
        )
        return MergeResult(
            success=False,
            strategy=strategy,
            conflicts=True,
            conflicted_files=tuple(conflict.path for conflict in conflicts),
            conflict_details=tuple(conflicts),
            message=result.output,
        )

    return MergeResult(
        success=True,
        strategy=strategy,
        fast_forward="Fast-forward" in result.stdout,
        merged_files=tuple(parse_merge_stat_files(result.stdout)),
        message=result.stdout,
    )


# =============================================================================
# cherry-pick
# =============================================================================


def build_cherry_pick_args(options: CherryPickOptions) -> list[str]:
    """Encode cherry-pick; ``--abort`` wins over ``--continue``."""
    if options.abort:
        return ["cherry-pick", "--abort"]
    if options.continue_:
        return ["cherry-pick", "--continue"]
    if not options.commits:
        raise validation_error("commits are required for cherry-pick", "cherry-pick")
    args = ["cherry-pick"]
    if options.no_commit:
        args.append("--no-commit")
    args.extend(
        positional(commit, "commits", "cherry-pick") for commit in options.commits
    )
    return args


async def execute_cherry_pick(
    invoke: GitInvocation, options: CherryPickOptions
) -> CherryPickResult:
    sequencer_step = options.abort or options.continue_
    result = await invoke(
        build_cherry_pick_args(options),
        allow_conflicts=not options.abort,
        env=non_interactive_editor_env() if sequencer_step else None,
    )
    if not result.success:
        conflicts = parse_conflicts(result.stdout, result.stderr)
        return CherryPickResult(
            success=False,
            conflicts=True,
            conflicted_files=tuple(conflict.path for conflict in conflicts),
        )
    return CherryPickResult(
        success=True,
        picked_commits=() if sequencer_step else tuple(options.commits),
    )


# =============================================================================
# rebase
# =============================================================================


def build_rebase_args(options: RebaseOptions) -> list[str]:
    if options.mode != "start":
        if options.mode not in ("continue", "abort", "skip"):
            raise validation_error(f"Unknown rebase mode: {options.mode}", "rebase")
        return ["rebase", f"--{options.mode}"]

    upstream = positional(
        require(options.upstream, "upstream", "rebase"), "upstream", "rebase"
    )
    args = ["rebase"]
    if options.interactive:
        args.append("--interactive")
    if options.onto:
        args.extend(["--onto", positional(options.onto, "onto", "rebase")])
    args.append(upstream)
    if options.branch:
        args.append(positional(options.branch, "branch", "rebase"))
    return args


async def _count_rebased(
    invoke: GitInvocation, options: RebaseOptions, output: str
) -> int:
    count = parse_rebased_count(output)
    if count or options.mode != "start" or "is up to date" in output:
        return count
    base = options.onto or options.upstream
    counted = await invoke(["rev-list", "--count", f"{base}..HEAD"])
    text = counted.stdout.strip()
    return int(text) if text.isdigit() else 0


async def execute_rebase(invoke: GitInvocation, options: RebaseOptions) -> RebaseResult:
    """Run a rebase step.

    ``--interactive`` and ``--continue`` run with no-op editors, so the todo
    list and commit messages are accepted as git prepared them.
    """
    needs_editor = options.interactive or options.mode == "continue"
    result = await invoke(
        build_rebase_args(options),
        allow_conflicts=options.mode != "abort",
        env=non_interactive_editor_env() if needs_editor else None,
    )
    if not result.success:
        conflicts = parse_conflicts(result.stdout, result.stderr)
        return RebaseResult(
            success=False,
            rebased_commits=parse_rebased_count(result.output),
            conflicts=True,
            conflicted_files=tuple(conflict.path for conflict in conflicts),
        )
    if options.mode == "abort":
        return RebaseResult(success=True)
    return RebaseResult(
        success=True,
        rebased_commits=await _count_rebased(invoke, options, result.output),
    )
