"""Unit tests for argument encoding."""

from __future__ import annotations

import shlex

import pytest

from gitcore.commands import (
    CommandSpec,
    build_command,
    join_args,
    quote_arg,
    validate_args,
)
from gitcore.exceptions import ClassifiedError, ErrorCategory


class TestValidateArgs:
    """Tests for validate_args()."""

    def test_accepts_shell_metacharacters(self) -> None:
        validate_args(["commit", "-m", "fix; rm -rf / | cat `id` $HOME"])

    def test_accepts_spaces_and_newlines(self) -> None:
        validate_args(["commit", "-m", "subject\n\nbody with spaces"])

    def test_rejects_null_byte(self) -> None:
        with pytest.raises(ClassifiedError) as exc_info:
            validate_args(["log", "--grep=a\x00b"], operation="log")

        error = exc_info.value
        assert error.category is ErrorCategory.VALIDATION
        assert "null byte" in error.message
        assert error.details.operation == "log"
        assert "\x00" not in "".join(error.details.command)
        assert error.retryable is False

    def test_rejects_non_string(self) -> None:
        with pytest.raises(ClassifiedError) as exc_info:
            validate_args(["log", 5])  # type: ignore[list-item]
        assert exc_info.value.category is ErrorCategory.VALIDATION


class TestBuildCommand:
    """Tests for build_command() and CommandSpec."""

    def test_build_command(self) -> None:
        spec = build_command("status", ["--porcelain=v2", "-b"])
        assert spec == CommandSpec(subcommand="status", args=("--porcelain=v2", "-b"))
        assert spec.tokens == ["status", "--porcelain=v2", "-b"]
        assert spec.argv() == ["git", "status", "--porcelain=v2", "-b"]
        assert spec.argv("/usr/bin/git")[0] == "/usr/bin/git"

    def test_build_command_validates(self) -> None:
        with pytest.raises(ClassifiedError):
            build_command("tag", ["-m", "bad\x00message"])

    def test_display_is_quoted(self) -> None:
        spec = build_command("commit", ["-m", "it's done"])
        assert shlex.split(spec.display()) == ["git", "commit", "-m", "it's done"]


class TestQuoting:
    """Tests for quote_arg() and join_args()."""

    def test_quote_plain(self) -> None:
        assert quote_arg("main") == "main"

    def test_quote_metacharacters(self) -> None:
        assert quote_arg("a;b") == "'a;b'"
        assert shlex.split(quote_arg("it's")) == ["it's"]

    def test_quote_empty(self) -> None:
        assert quote_arg("") == "''"

    @pytest.mark.parametrize(
        "tokens",
        [
            ["git", "status"],
            ["commit", "-m", "it's a \"test\""],
            ["log", "--grep=$(whoami)", "`id`", "a;b|c&d"],
            ["commit", "-m", "line one\nline two\ttabbed"],
            ["add", "--", "path with spaces/file.txt", "", "'"],
            ["tag", "-a", "-m", "ünïcödé ✓", "v1.0"],
        ],
    )
    def test_join_args_round_trip(self, tokens: list[str]) -> None:
        assert shlex.split(join_args(tokens)) == tokens
