from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from gitcore.operations import GitInvocation, OperationKind
from gitcore.runners import CommandResult, GitRunner

REPO = Path("/repo")


def make_result(
    stdout: str = "",
    stderr: str = "",
    returncode: int = 0,
) -> CommandResult:
    """Create a CommandResult for mocking runner calls."""
    return CommandResult(returncode=returncode, stdout=stdout, stderr=stderr)


def conflict_result(*paths: str, stdout_prefix: str = "") -> CommandResult:
    """A non-zero result whose stdout reports a content conflict per path."""
    lines = [f"CONFLICT (content): Merge conflict in {path}" for path in paths]
    return make_result(stdout=stdout_prefix + "\n".join(lines), returncode=1)


@pytest.fixture
def mock_runner() -> AsyncMock:
    """GitRunner mock whose ``run`` returns an empty successful result."""
    runner = AsyncMock(spec=GitRunner)
    runner.run.return_value = make_result()
    return runner


@pytest.fixture
def make_invoke(mock_runner: AsyncMock) -> Callable[..., GitInvocation]:
    """Factory for a GitInvocation bound to the mock runner."""

    def _make(
        kind: OperationKind, network_timeout: float | None = None
    ) -> GitInvocation:
        return GitInvocation(mock_runner, REPO, kind, network_timeout=network_timeout)

    return _make


def commands(mock_runner: AsyncMock) -> list[list[str]]:
    """Argument tokens of every runner call, in order."""
    return [list(call.args[0]) for call in mock_runner.run.call_args_list]
