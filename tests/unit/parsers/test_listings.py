"""Tests for tag, stash, remote and branch listings."""

from __future__ import annotations

from gitcore.models.results import RemoteInfo
from gitcore.parsers import (
    BRANCH_FORMAT,
    parse_branches,
    parse_remotes,
    parse_stashes,
    parse_tags,
)

HASH_A = "a" * 40
HASH_B = "b" * 40


class TestParseTags:
    """Tests for parse_tags()."""

    def test_names(self) -> None:
        tags = parse_tags("v1.0\nv1.1\n\nrelease/2024\n")
        assert [tag.name for tag in tags] == ["v1.0", "v1.1", "release/2024"]

    def test_empty(self) -> None:
        assert parse_tags("") == []


class TestParseStashes:
    """Tests for parse_stashes()."""

    def test_entries(self) -> None:
        raw = (
            "stash@{0}: WIP on main: abc1234 fix: handle: colons\n"
            "stash@{1}: On feature: before rebase"
        )
        first, second = parse_stashes(raw)

        assert first.index == 0
        assert first.ref == "stash@{0}"
        assert first.description == "WIP on main: abc1234 fix: handle: colons"
        assert second.index == 1
        assert second.description == "On feature: before rebase"

    def test_ignores_noise(self) -> None:
        assert parse_stashes("No local changes to save") == []


class TestParseRemotes:
    """Tests for parse_remotes()."""

    def test_groups_fetch_and_push(self) -> None:
        raw = (
            "origin\thttps://example.com/repo.git (fetch)\n"
            "origin\tgit@example.com:repo.git (push)\n"
            "upstream\thttps://example.com/upstream.git (fetch)\n"
        )
        remotes = parse_remotes(raw)

        assert remotes == [
            RemoteInfo(
                name="origin",
                fetch_url="https://example.com/repo.git",
                push_url="git@example.com:repo.git",
            ),
            RemoteInfo(
                name="upstream",
                fetch_url="https://example.com/upstream.git",
                push_url="https://example.com/upstream.git",
            ),
        ]

    def test_empty(self) -> None:
        assert parse_remotes("") == []


class TestParseBranches:
    """Tests for parse_branches()."""

    def test_format_fields(self) -> None:
        assert BRANCH_FORMAT.count("%1f") == 4
        assert "%x" not in BRANCH_FORMAT
        assert "%(upstream:track)" in BRANCH_FORMAT

    def test_local_branches(self) -> None:
        raw = (
            f"refs/heads/main\x1f{HASH_A}\x1forigin/main\x1f[ahead 2, behind 1]\x1f*\n"
            f"refs/heads/feature/x\x1f{HASH_B}\x1f\x1f\x1f \n"
        )
        main, feature = parse_branches(raw)

        assert main.name == "main"
        assert main.commit_hash == HASH_A
        assert main.current is True
        assert main.upstream == "origin/main"
        assert main.ahead == 2
        assert main.behind == 1

        assert feature.name == "feature/x"
        assert feature.current is False
        assert feature.upstream is None
        assert feature.ahead == 0

    def test_remote_head_pointer_skipped(self) -> None:
        raw = (
            f"refs/remotes/origin/HEAD\x1f{HASH_A}\x1f\x1f\x1f \n"
            f"refs/remotes/origin/main\x1f{HASH_A}\x1f\x1f\x1f \n"
        )
        assert [b.name for b in parse_branches(raw)] == ["origin/main"]

    def test_empty(self) -> None:
        assert parse_branches("") == []
