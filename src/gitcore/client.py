"""Async façade over the git operations.

:class:`GitClient` offers one coroutine per operation. Every call runs
through :meth:`GitClient._dispatch`, which binds log context, looks the
operation up in :data:`~gitcore.operations.OPERATIONS` and either returns
the typed result or lets exactly one
:class:`~gitcore.exceptions.ClassifiedError` propagate.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from gitcore.config import GitcoreConfig
from gitcore.exceptions import ClassifiedError
from gitcore.logging import get_logger, operation_context
from gitcore.operations import (
    OPERATIONS,
    GitInvocation,
    OperationKind,
    validation_error,
)
from gitcore.runners.command import GitRunner

if TYPE_CHECKING:
    from gitcore.models import options as opts
    from gitcore.models import results as res
    from gitcore.models.context import ExecutionContext

__all__ = ["GitClient"]

logger = get_logger(__name__)


class GitClient:
    """Run git operations against the repository named by each call's context.

    The client holds no per-call state; one instance may serve concurrent
    calls against different repositories.

    Args:
        runner: Pre-configured runner. Built from *config* if not provided.
        config: Settings for timeouts, output cap, locale and environment.
            Defaults are used if not provided.

    Example:
        ```python
        client = GitClient()
        context = ExecutionContext(working_dir=Path("/srv/repo"))
        status = await client.status(StatusOptions(), context)
        if not status.is_clean:
            await client.add(AddOptions(all_changes=True), context)
        ```
    """

    def __init__(
        self,
        runner: GitRunner | None = None,
        config: GitcoreConfig | None = None,
    ) -> None:
        self._config = config or GitcoreConfig()
        self._runner = runner or GitRunner.from_config(self._config)

    @property
    def config(self) -> GitcoreConfig:
        """Settings this client was built with."""
        return self._config

    @property
    def runner(self) -> GitRunner:
        """Runner used for every invocation."""
        return self._runner

    # =====================================================================
    # Dispatch
    # =====================================================================

    async def _dispatch(
        self,
        kind: OperationKind,
        options: Any,
        context: ExecutionContext,
    ) -> Any:
        operation = OPERATIONS[kind]
        if not isinstance(options, operation.options_type):
            raise validation_error(
                f"{kind.value} expects {operation.options_type.__name__}, "
                f"got {type(options).__name__}",
                kind.value,
            )

        invoke = GitInvocation(
            self._runner,
            context.working_dir,
            kind,
            network_timeout=self._config.network_timeout_seconds,
        )
        start_time = time.monotonic()
        with operation_context(operation=kind.value, **context.log_fields()):
            try:
                result = await operation.execute(invoke, options)
            except ClassifiedError as e:
                logger.warning(
                    "git_operation_failed",
                    category=e.category.value,
                    severity=e.severity.value,
                    retryable=e.retryable,
                    error=e.message,
                    exit_code=e.details.exit_code,
                )
                raise
            logger.info(
                "git_operation_completed",
                duration_ms=int((time.monotonic() - start_time) * 1000),
            )
        return result

    # =====================================================================
    # Repository setup
    # =====================================================================

    async def init(
        self, options: opts.InitOptions, context: ExecutionContext
    ) -> res.InitResult:
        """Create a repository (``git init``)."""
        return await self._dispatch(OperationKind.INIT, options, context)

    async def clone(
        self, options: opts.CloneOptions, context: ExecutionContext
    ) -> res.CloneResult:
        """Clone a remote into ``options.local_path``, relative to the context."""
        return await self._dispatch(OperationKind.CLONE, options, context)

    # =====================================================================
    # Working tree and index
    # =====================================================================

    async def status(
        self, options: opts.StatusOptions, context: ExecutionContext
    ) -> res.StatusResult:
        """Report branch, upstream and per-file state."""
        return await self._dispatch(OperationKind.STATUS, options, context)

    async def add(
        self, options: opts.AddOptions, context: ExecutionContext
    ) -> res.AddResult:
        """Stage paths, or every change with ``all_changes``."""
        return await self._dispatch(OperationKind.ADD, options, context)

    async def reset(
        self, options: opts.ResetOptions, context: ExecutionContext
    ) -> res.ResetResult:
        return await self._dispatch(OperationKind.RESET, options, context)

    async def clean(
        self, options: opts.CleanOptions, context: ExecutionContext
    ) -> res.CleanResult:
        """Remove (or with ``dry_run`` list) untracked files."""
        return await self._dispatch(OperationKind.CLEAN, options, context)

    async def checkout(
        self, options: opts.CheckoutOptions, context: ExecutionContext
    ) -> res.CheckoutResult:
        return await self._dispatch(OperationKind.CHECKOUT, options, context)

    # =====================================================================
    # History
    # =====================================================================

    async def commit(
        self, options: opts.CommitOptions, context: ExecutionContext
    ) -> res.CommitResult:
        """Record a commit and return its hash, author and changed files."""
        return await self._dispatch(OperationKind.COMMIT, options, context)

    async def log(
        self, options: opts.LogOptions, context: ExecutionContext
    ) -> res.LogResult:
        return await self._dispatch(OperationKind.LOG, options, context)

    async def show(
        self, options: opts.ShowOptions, context: ExecutionContext
    ) -> res.ShowResult:
        return await self._dispatch(OperationKind.SHOW, options, context)

    async def diff(
        self, options: opts.DiffOptions, context: ExecutionContext
    ) -> res.DiffResult:
        """Return diff text with file, insertion and deletion totals."""
        return await self._dispatch(OperationKind.DIFF, options, context)

    async def blame(
        self, options: opts.BlameOptions, context: ExecutionContext
    ) -> res.BlameResult:
        return await self._dispatch(OperationKind.BLAME, options, context)

    async def reflog(
        self, options: opts.ReflogOptions, context: ExecutionContext
    ) -> res.ReflogResult:
        return await self._dispatch(OperationKind.REFLOG, options, context)

    # =====================================================================
    # Branching and integration
    # =====================================================================

    async def branch(
        self, options: opts.BranchOptions, context: ExecutionContext
    ) -> res.BranchResult:
        """List, create, delete or rename branches."""
        return await self._dispatch(OperationKind.BRANCH, options, context)

    async def merge(
        self, options: opts.MergeOptions, context: ExecutionContext
    ) -> res.MergeResult:
        """Merge a branch. Conflicts come back as a result, not an error."""
        return await self._dispatch(OperationKind.MERGE, options, context)

    async def cherry_pick(
        self, options: opts.CherryPickOptions, context: ExecutionContext
    ) -> res.CherryPickResult:
        return await self._dispatch(OperationKind.CHERRY_PICK, options, context)

    async def rebase(
        self, options: opts.RebaseOptions, context: ExecutionContext
    ) -> res.RebaseResult:
        return await self._dispatch(OperationKind.REBASE, options, context)

    # =====================================================================
    # Remotes
    # =====================================================================

    async def fetch(
        self, options: opts.FetchOptions, context: ExecutionContext
    ) -> res.FetchResult:
        return await self._dispatch(OperationKind.FETCH, options, context)

    async def pull(
        self, options: opts.PullOptions, context: ExecutionContext
    ) -> res.PullResult:
        return await self._dispatch(OperationKind.PULL, options, context)

    async def push(
        self, options: opts.PushOptions, context: ExecutionContext
    ) -> res.PushResult:
        return await self._dispatch(OperationKind.PUSH, options, context)

    async def remote(
        self, options: opts.RemoteOptions, context: ExecutionContext
    ) -> res.RemoteResult:
        """List or change configured remotes."""
        return await self._dispatch(OperationKind.REMOTE, options, context)

    # =====================================================================
    # Stash, tags, worktrees
    # =====================================================================

    async def stash(
        self, options: opts.StashOptions, context: ExecutionContext
    ) -> res.StashResult:
        return await self._dispatch(OperationKind.STASH, options, context)

    async def tag(
        self, options: opts.TagOptions, context: ExecutionContext
    ) -> res.TagResult:
        return await self._dispatch(OperationKind.TAG, options, context)

    async def worktree(
        self, options: opts.WorktreeOptions, context: ExecutionContext
    ) -> res.WorktreeResult:
        return await self._dispatch(OperationKind.WORKTREE, options, context)
