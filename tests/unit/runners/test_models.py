"""Tests for CommandResult."""

from __future__ import annotations

import dataclasses

import pytest

from gitcore.runners import CommandResult


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success(self) -> None:
        assert CommandResult(returncode=0, stdout="", stderr="").success is True

    @pytest.mark.parametrize(
        ("returncode", "timed_out", "output_exceeded"),
        [(1, False, False), (-1, True, False), (-9, False, True), (0, False, True)],
    )
    def test_not_success(
        self, returncode: int, timed_out: bool, output_exceeded: bool
    ) -> None:
        result = CommandResult(
            returncode=returncode,
            stdout="",
            stderr="",
            timed_out=timed_out,
            output_exceeded=output_exceeded,
        )
        assert result.success is False

    def test_output_combines_streams(self) -> None:
        assert CommandResult(0, "out", "err").output == "out\nerr"
        assert CommandResult(0, "", "err").output == "err"
        assert CommandResult(0, "out", "").output == "out"

    def test_is_frozen(self) -> None:
        result = CommandResult(0, "", "")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.returncode = 1  # type: ignore[misc]
