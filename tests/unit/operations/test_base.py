"""Tests for GitInvocation and the operation registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import fields
from typing import Any
from unittest.mock import AsyncMock

import pytest

from gitcore.exceptions import ClassifiedError, ErrorCategory
from gitcore.models import options as opts
from gitcore.operations import (
    OPERATIONS,
    GitInvocation,
    OperationKind,
    positional,
    require,
)
from gitcore.operations.branch import build_branch_args
from gitcore.operations.checkout import build_checkout_args
from gitcore.operations.diff import build_diff_args
from gitcore.operations.history import build_log_args, build_show_args, execute_log
from gitcore.operations.inspection import build_reflog_args
from gitcore.operations.integration import (
    build_cherry_pick_args,
    build_merge_args,
    build_rebase_args,
)
from gitcore.operations.remote import build_remote_args
from gitcore.operations.setup import build_init_args
from gitcore.operations.staging import build_reset_args
from gitcore.operations.stash import build_stash_args
from gitcore.operations.tag import build_tag_args
from gitcore.operations.transfer import (
    build_fetch_args,
    build_pull_args,
    build_push_args,
)
from gitcore.operations.worktree import build_worktree_args
from gitcore.runners import CommandResult

from .conftest import REPO, conflict_result, make_result


class TestGitInvocation:
    """Tests for GitInvocation.__call__()."""

    @pytest.mark.asyncio
    async def test_success_returns_result(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(stdout="ok")
        invoke = make_invoke(OperationKind.STATUS)

        result = await invoke(["status", "--porcelain=v2"])

        assert result.stdout == "ok"
        mock_runner.run.assert_awaited_once_with(
            ["status", "--porcelain=v2"], cwd=REPO, timeout=None, env=None
        )

    @pytest.mark.asyncio
    async def test_network_uses_network_timeout(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        invoke = make_invoke(OperationKind.FETCH, network_timeout=600.0)

        await invoke(["fetch", "origin"], network=True)
        await invoke(["rev-parse", "HEAD"])

        first, second = mock_runner.run.call_args_list
        assert first.kwargs["timeout"] == 600.0
        assert second.kwargs["timeout"] is None

    @pytest.mark.asyncio
    async def test_failure_raises_classified_error(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(
            stderr="fatal: not a git repository", returncode=128
        )
        invoke = make_invoke(OperationKind.STATUS)

        with pytest.raises(ClassifiedError) as exc_info:
            await invoke(["status"])

        error = exc_info.value
        assert error.category is ErrorCategory.REPOSITORY
        assert error.details.operation == "status"
        assert error.details.command == ("status",)

    @pytest.mark.asyncio
    async def test_conflict_returned_when_allowed(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = conflict_result("a.py")
        invoke = make_invoke(OperationKind.MERGE)

        result = await invoke(["merge", "topic"], allow_conflicts=True)

        assert result.returncode == 1
        with pytest.raises(ClassifiedError):
            await invoke(["merge", "topic"])

    @pytest.mark.asyncio
    async def test_accepted_failure_is_returned(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = make_result(stdout="partial", returncode=1)
        invoke = make_invoke(OperationKind.PUSH)

        result = await invoke(["push"], accept=lambda r: r.stdout == "partial")

        assert result.returncode == 1
        with pytest.raises(ClassifiedError):
            await invoke(["push"], accept=lambda r: False)

    @pytest.mark.asyncio
    async def test_timed_out_conflict_output_still_raises(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        mock_runner.run.return_value = CommandResult(
            returncode=-1,
            stdout="CONFLICT (content): Merge conflict in a.py",
            stderr="",
            timed_out=True,
        )
        invoke = make_invoke(OperationKind.MERGE)

        with pytest.raises(ClassifiedError) as exc_info:
            await invoke(["merge", "topic"], allow_conflicts=True)
        assert exc_info.value.category is ErrorCategory.SYSTEM

    @pytest.mark.asyncio
    async def test_null_byte_rejected_before_spawn(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        invoke = make_invoke(OperationKind.COMMIT)

        with pytest.raises(ClassifiedError) as exc_info:
            await invoke(["commit", "-m", "bad\x00message"])

        assert exc_info.value.category is ErrorCategory.VALIDATION
        mock_runner.run.assert_not_awaited()


class TestRequire:
    """Tests for require()."""

    def test_returns_value(self) -> None:
        assert require("main", "branch", "merge") == "main"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_raises_validation(self, value: str | None) -> None:
        with pytest.raises(ClassifiedError) as exc_info:
            require(value, "branch", "merge")

        assert exc_info.value.category is ErrorCategory.VALIDATION
        assert "branch" in exc_info.value.message


class TestPositional:
    """Values that would be read as options are refused before spawning."""

    def test_returns_value(self) -> None:
        assert positional("feature/x", "branch", "log") == "feature/x"
        assert positional("HEAD~1", "commit", "reset") == "HEAD~1"

    def test_leading_dash_raises_validation(self) -> None:
        with pytest.raises(ClassifiedError) as exc_info:
            positional("--output=/tmp/x", "branch", "log")

        assert exc_info.value.category is ErrorCategory.VALIDATION
        assert "branch" in exc_info.value.message
        assert "/tmp/x" not in exc_info.value.message

    @pytest.mark.parametrize(
        ("build", "options"),
        [
            (build_log_args, opts.LogOptions(branch="--output=/tmp/out")),
            (build_show_args, opts.ShowOptions(object_name="--output=x")),
            (build_diff_args, opts.DiffOptions(source="--output=x")),
            (build_diff_args, opts.DiffOptions(target="-R")),
            (build_checkout_args, opts.CheckoutOptions(target="--orphan")),
            (build_merge_args, opts.MergeOptions(branch="--no-verify")),
            (build_cherry_pick_args, opts.CherryPickOptions(commits=("abc", "-m"))),
            (build_rebase_args, opts.RebaseOptions(upstream="--exec=sh")),
            (
                build_rebase_args,
                opts.RebaseOptions(upstream="main", onto="--root"),
            ),
            (build_reflog_args, opts.ReflogOptions(ref="--output=x")),
            (build_fetch_args, opts.FetchOptions(remote="--upload-pack=x")),
            (build_fetch_args, opts.FetchOptions(refspec="--all")),
            (build_pull_args, opts.PullOptions(branch="--upload-pack=x")),
            (build_push_args, opts.PushOptions(remote="--receive-pack=x")),
            (build_push_args, opts.PushOptions(branch="--mirror")),
            (build_reset_args, opts.ResetOptions(commit="--hard")),
            (build_stash_args, opts.StashOptions(mode="pop", stash_ref="--index")),
            (build_branch_args, opts.BranchOptions(mode="create", name="-f")),
            (
                build_branch_args,
                opts.BranchOptions(mode="create", name="x", start_point="-D"),
            ),
            (build_tag_args, opts.TagOptions(mode="create", tag_name="-d")),
            (build_remote_args, opts.RemoteOptions(mode="add", name="o", url="-x")),
            (build_worktree_args, opts.WorktreeOptions(mode="add", path="--lock")),
            (build_init_args, opts.InitOptions(path="--template=/tmp/x")),
        ],
    )
    def test_builders_reject_option_like_values(
        self, build: Callable[[Any], list[str]], options: Any
    ) -> None:
        with pytest.raises(ClassifiedError) as exc_info:
            build(options)
        assert exc_info.value.category is ErrorCategory.VALIDATION

    @pytest.mark.asyncio
    async def test_log_with_option_like_branch_never_spawns(
        self,
        mock_runner: AsyncMock,
        make_invoke: Callable[..., GitInvocation],
    ) -> None:
        with pytest.raises(ClassifiedError):
            await execute_log(
                make_invoke(OperationKind.LOG),
                opts.LogOptions(branch="--output=/tmp/log.txt"),
            )

        mock_runner.run.assert_not_awaited()


class TestRegistry:
    """Tests for the OPERATIONS registry."""

    def test_every_kind_registered(self) -> None:
        assert set(OPERATIONS) == set(OperationKind)
        for kind, operation in OPERATIONS.items():
            assert operation.kind is kind

    def test_options_types(self) -> None:
        assert OPERATIONS[OperationKind.CHERRY_PICK].options_type is (
            opts.CherryPickOptions
        )
        assert OPERATIONS[OperationKind.WORKTREE].options_type is opts.WorktreeOptions
        for operation in OPERATIONS.values():
            assert fields(operation.options_type)
