"""Tests for conflict detection."""

from __future__ import annotations

from gitcore.parsers import has_conflicts, parse_conflicts


class TestHasConflicts:
    """Tests for has_conflicts()."""

    def test_marker_on_either_stream(self) -> None:
        line = "CONFLICT (content): Merge conflict in a.py"
        assert has_conflicts(line) is True
        assert has_conflicts("", line) is True

    def test_no_marker(self) -> None:
        assert has_conflicts("Merge made by the 'ort' strategy.", "") is False
        assert has_conflicts("") is False


class TestParseConflicts:
    """Tests for parse_conflicts()."""

    def test_empty(self) -> None:
        assert parse_conflicts("", "") == []

    def test_content_conflicts_in_order(self) -> None:
        stdout = (
            "Auto-merging src/app.py\n"
            "CONFLICT (content): Merge conflict in src/app.py\n"
            "Auto-merging README.md\n"
            "CONFLICT (content): Merge conflict in README.md\n"
            "Automatic merge failed; fix conflicts and then commit the result."
        )
        conflicts = parse_conflicts(stdout)

        assert [c.path for c in conflicts] == ["src/app.py", "README.md"]
        assert conflicts[0].reason == "content"
        assert conflicts[0].message == (
            "CONFLICT (content): Merge conflict in src/app.py"
        )

    def test_modify_delete(self) -> None:
        stderr = (
            "CONFLICT (modify/delete): docs/a.md deleted in HEAD and modified "
            "in topic.  Version topic of docs/a.md left in tree."
        )
        conflicts = parse_conflicts("", stderr)

        assert len(conflicts) == 1
        assert conflicts[0].reason == "modify/delete"
        assert conflicts[0].path == "docs/a.md"

    def test_duplicate_paths_keep_first(self) -> None:
        stdout = "CONFLICT (content): Merge conflict in a.py"
        stderr = "CONFLICT (content): Merge conflict in a.py\n"
        conflicts = parse_conflicts(stdout, stderr)

        assert len(conflicts) == 1
        assert conflicts[0].path == "a.py"
