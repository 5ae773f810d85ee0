"""Tests for parse_reflog()."""

from __future__ import annotations

from gitcore.parsers import REFLOG_FORMAT, parse_reflog

HASH_A = "a" * 40
HASH_B = "b" * 40


class TestParseReflog:
    """Tests for delimited reflog parsing."""

    def test_format(self) -> None:
        assert REFLOG_FORMAT == "%H%x1f%gd%x1f%gs%x1f%ct%x1e"

    def test_empty(self) -> None:
        assert parse_reflog("") == []

    def test_single_entry(self) -> None:
        raw = f"{HASH_A}\x1fHEAD@{{0}}\x1fcommit: msg\x1f1700000000\x1e"
        entries = parse_reflog(raw)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.hash == HASH_A
        assert entry.ref_name == "HEAD@{0}"
        assert entry.action == "0"
        assert entry.message == "commit: msg"
        assert entry.timestamp == 1700000000

    def test_index_comes_from_selector(self) -> None:
        raw = (
            f"{HASH_A}\x1fmain@{{3}}\x1fcheckout: moving from a to b\x1f1\x1e\n"
            f"{HASH_B}\x1fmain@{{7}}\x1freset: moving to HEAD~1\x1f2\x1e\n"
        )
        entries = parse_reflog(raw)

        assert [entry.action for entry in entries] == ["3", "7"]
        assert entries[1].message == "reset: moving to HEAD~1"

    def test_message_with_special_characters(self) -> None:
        raw = f"{HASH_A}\x1fHEAD@{{0}}\x1fcommit: fix | pipe; $x\x1f5\x1e"
        assert parse_reflog(raw)[0].message == "commit: fix | pipe; $x"
