"""Tests for fetch, pull and push."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from gitcore.exceptions import ClassifiedError, ErrorCategory
from gitcore.models.options import FetchOptions, PullOptions, PushOptions
from gitcore.operations import GitInvocation, OperationKind
from gitcore.operations.transfer import (
    build_fetch_args,
    build_pull_args,
    build_push_args,
    execute_fetch,
    execute_pull,
    execute_push,
)

from .conftest import conflict_result, make_result


class TestFetch:
    """Tests for fetch."""

    def test_args(self) -> None:
        assert build_fetch_args(FetchOptions()) == ["fetch", "origin"]
        assert build_fetch_args(
            FetchOptions(
                remote="upstream", refspec="main", prune=True, tags=True, depth=5
            )
        ) == ["fetch", "--prune", "--tags", "--depth=5", "upstream", "main"]

    def test_invalid_depth(self) -> None:
        with pytest.raises(ClassifiedError):
            build_fetch_args(FetchOptions(depth=0))

    @pytest.mark.asyncio
    async def test_execute(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(
            stderr=(
                "From https://example.com/repo\n"
                " * [new branch]      feature    -> origin/feature\n"
                " - [deleted]         (none)     -> origin/old"
            )
        )
        invoke = make_invoke(OperationKind.FETCH, network_timeout=300.0)

        result = await execute_fetch(invoke, FetchOptions(prune=True))

        assert result.remote == "origin"
        assert result.fetched_refs == ("feature",)
        assert result.pruned_refs == ("origin/old",)
        assert mock_runner.run.call_args.kwargs["timeout"] == 300.0

    @pytest.mark.asyncio
    async def test_unreachable_remote_is_network_error(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(
            stderr="fatal: unable to access 'https://example.com/': "
            "Could not resolve host: example.com",
            returncode=128,
        )

        with pytest.raises(ClassifiedError) as exc_info:
            await execute_fetch(make_invoke(OperationKind.FETCH), FetchOptions())

        assert exc_info.value.category is ErrorCategory.NETWORK
        assert exc_info.value.retryable is True


class TestPull:
    """Tests for pull."""

    def test_args(self) -> None:
        assert build_pull_args(
            PullOptions(branch="main", rebase=True, fast_forward_only=True)
        ) == ["pull", "--rebase", "--ff-only", "origin", "main"]

    @pytest.mark.asyncio
    async def test_fast_forward(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(
            stdout="Updating 1a2b..3c4d\nFast-forward\n README.md | 1 +"
        )

        result = await execute_pull(make_invoke(OperationKind.PULL), PullOptions())

        assert result.success is True
        assert result.strategy == "fast-forward"
        assert result.files_changed == ("README.md",)

    @pytest.mark.asyncio
    async def test_conflict(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = conflict_result("a.py")

        result = await execute_pull(make_invoke(OperationKind.PULL), PullOptions())

        assert result.success is False
        assert result.conflicts is True
        assert result.strategy == "merge"
        assert result.conflicted_files == ("a.py",)

    @pytest.mark.asyncio
    async def test_rebase_strategy(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        result = await execute_pull(
            make_invoke(OperationKind.PULL), PullOptions(rebase=True)
        )
        assert result.strategy == "rebase"


class TestPush:
    """Tests for push."""

    def test_args(self) -> None:
        assert build_push_args(
            PushOptions(
                branch="feature",
                force=True,
                force_with_lease=True,
                set_upstream=True,
                tags=True,
                dry_run=True,
            )
        ) == [
            "push",
            "--porcelain",
            "--force",
            "--set-upstream",
            "--tags",
            "--dry-run",
            "origin",
            "feature",
        ]
        assert "--force-with-lease" in build_push_args(
            PushOptions(force_with_lease=True)
        )

    @pytest.mark.asyncio
    async def test_execute(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(
            stdout=(
                "To https://example.com/repo.git\n"
                "*\trefs/heads/feature:refs/heads/feature\t[new branch]\n"
                "Done"
            )
        )
        options = PushOptions(branch="feature", set_upstream=True)

        result = await execute_push(make_invoke(OperationKind.PUSH), options)

        assert result.success is True
        assert result.pushed_refs == ("feature",)
        assert result.rejected_refs == ()
        assert result.upstream_set is True

    @pytest.mark.asyncio
    async def test_rejected_refs_are_reported(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(
            stdout=(
                "To https://example.com/repo.git\n"
                "*\trefs/heads/feature:refs/heads/feature\t[new branch]\n"
                "!\trefs/heads/main:refs/heads/main\t[rejected] (non-fast-forward)\n"
                "Done"
            ),
            stderr="error: failed to push some refs to 'https://example.com/repo.git'",
            returncode=1,
        )
        options = PushOptions(set_upstream=True)

        result = await execute_push(make_invoke(OperationKind.PUSH), options)

        assert result.success is False
        assert result.pushed_refs == ("feature",)
        assert result.rejected_refs == ("main",)
        assert result.upstream_set is False

    @pytest.mark.asyncio
    async def test_failure_without_ref_lines_raises(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(
            stderr=(
                " ! [rejected]        main -> main (non-fast-forward)\n"
                "error: failed to push some refs to 'https://example.com/repo.git'"
            ),
            returncode=1,
        )

        with pytest.raises(ClassifiedError) as exc_info:
            await execute_push(
                make_invoke(OperationKind.PUSH), PushOptions(branch="main")
            )

        assert exc_info.value.category is ErrorCategory.OPERATION
        assert exc_info.value.severity.value == "high"

    @pytest.mark.asyncio
    async def test_fatal_exit_with_ref_lines_raises(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(
            stdout="!\trefs/heads/main:refs/heads/main\t[rejected] (fetch first)",
            stderr="fatal: the remote end hung up unexpectedly",
            returncode=128,
        )

        with pytest.raises(ClassifiedError):
            await execute_push(
                make_invoke(OperationKind.PUSH), PushOptions(branch="main")
            )
