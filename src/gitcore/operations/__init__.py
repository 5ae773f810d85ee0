"""Git operations, one executor per :class:`OperationKind`.

``OPERATIONS`` is the closed registry the client dispatches through.
"""

from __future__ import annotations

from gitcore.models import options as opts
from gitcore.operations.base import (
    GitInvocation,
    Operation,
    OperationKind,
    positional,
    require,
    validation_error,
)
from gitcore.operations.branch import execute_branch
from gitcore.operations.checkout import execute_checkout
from gitcore.operations.diff import execute_diff
from gitcore.operations.history import execute_commit, execute_log, execute_show
from gitcore.operations.inspection import execute_blame, execute_reflog
from gitcore.operations.integration import (
    execute_cherry_pick,
    execute_merge,
    execute_rebase,
)
from gitcore.operations.remote import execute_remote
from gitcore.operations.setup import execute_clone, execute_init
from gitcore.operations.stash import execute_stash
from gitcore.operations.staging import execute_add, execute_clean, execute_reset
from gitcore.operations.status import execute_status
from gitcore.operations.tag import execute_tag
from gitcore.operations.transfer import execute_fetch, execute_pull, execute_push
from gitcore.operations.worktree import execute_worktree

__all__ = [
    "GitInvocation",
    "OPERATIONS",
    "Operation",
    "OperationKind",
    "positional",
    "require",
    "validation_error",
]

OPERATIONS: dict[OperationKind, Operation] = {
    op.kind: op
    for op in (
        Operation(OperationKind.INIT, opts.InitOptions, execute_init),
        Operation(OperationKind.CLONE, opts.CloneOptions, execute_clone),
        Operation(OperationKind.STATUS, opts.StatusOptions, execute_status),
        Operation(OperationKind.ADD, opts.AddOptions, execute_add),
        Operation(OperationKind.COMMIT, opts.CommitOptions, execute_commit),
        Operation(OperationKind.LOG, opts.LogOptions, execute_log),
        Operation(OperationKind.SHOW, opts.ShowOptions, execute_show),
        Operation(OperationKind.DIFF, opts.DiffOptions, execute_diff),
        Operation(OperationKind.BLAME, opts.BlameOptions, execute_blame),
        Operation(OperationKind.REFLOG, opts.ReflogOptions, execute_reflog),
        Operation(OperationKind.BRANCH, opts.BranchOptions, execute_branch),
        Operation(OperationKind.CHECKOUT, opts.CheckoutOptions, execute_checkout),
        Operation(OperationKind.MERGE, opts.MergeOptions, execute_merge),
        Operation(
            OperationKind.CHERRY_PICK, opts.CherryPickOptions, execute_cherry_pick
        ),
        Operation(OperationKind.REBASE, opts.RebaseOptions, execute_rebase),
        Operation(OperationKind.FETCH, opts.FetchOptions, execute_fetch),
        Operation(OperationKind.PULL, opts.PullOptions, execute_pull),
        Operation(OperationKind.PUSH, opts.PushOptions, execute_push),
        Operation(OperationKind.RESET, opts.ResetOptions, execute_reset),
        Operation(OperationKind.CLEAN, opts.CleanOptions, execute_clean),
        Operation(OperationKind.STASH, opts.StashOptions, execute_stash),
        Operation(OperationKind.TAG, opts.TagOptions, execute_tag),
        Operation(OperationKind.REMOTE, opts.RemoteOptions, execute_remote),
        Operation(OperationKind.WORKTREE, opts.WorktreeOptions, execute_worktree),
    )
}
