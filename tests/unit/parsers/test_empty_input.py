"""Every parser accepts empty output."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from gitcore import parsers


@pytest.mark.parametrize(
    "parse",
    [
        parsers.parse_log,
        parsers.parse_blame,
        parsers.parse_reflog,
        parsers.parse_worktrees,
        parsers.parse_pruned_worktrees,
        parsers.parse_tags,
        parsers.parse_stashes,
        parsers.parse_remotes,
        parsers.parse_branches,
        parsers.parse_conflicts,
        parsers.parse_checkout_files,
        parsers.parse_merge_stat_files,
    ],
)
def test_empty_output_yields_empty_list(parse: Callable[[str], Any]) -> None:
    assert parse("") == []


def test_empty_status_is_clean() -> None:
    assert parsers.parse_status("").is_clean is True


def test_empty_show_is_blob() -> None:
    result = parsers.parse_show("", "HEAD:empty.txt")
    assert result.object_type == "blob"
    assert result.content == ""
