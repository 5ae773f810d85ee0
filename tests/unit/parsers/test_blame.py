"""Tests for parse_blame()."""

from __future__ import annotations

from gitcore.parsers import parse_blame

HASH_A = "a" * 40
HASH_B = "b" * 40


def _block(commit: str, orig: int, final: int, content: str, meta: bool) -> str:
    lines = [f"{commit} {orig} {final} 1"]
    if meta:
        name = "Ada" if commit == HASH_A else "Grace"
        lines += [
            f"author {name}",
            f"author-mail <{name.lower()}@example.com>",
            "author-time 1700000000",
            "author-tz +0000",
            f"summary change by {name}",
            "filename src/app.py",
        ]
    lines.append(f"\t{content}")
    return "\n".join(lines)


class TestParseBlame:
    """Tests for porcelain blame parsing."""

    def test_empty(self) -> None:
        assert parse_blame("") == []

    def test_two_commits(self) -> None:
        raw = "\n".join(
            [
                _block(HASH_A, 1, 1, "import os", meta=True),
                _block(HASH_B, 2, 2, "print(os.getcwd())", meta=True),
            ]
        )
        lines = parse_blame(raw)

        assert len(lines) == 2
        assert lines[0].commit_hash == HASH_A
        assert lines[0].author == "Ada"
        assert lines[0].line_number == 1
        assert lines[0].content == "import os"
        assert lines[1].commit_hash == HASH_B
        assert lines[1].author == "Grace"
        assert lines[1].summary == "change by Grace"
        assert lines[1].timestamp == 1700000000

    def test_repeated_commit_reuses_metadata(self) -> None:
        raw = "\n".join(
            [
                _block(HASH_A, 1, 1, "first", meta=True),
                _block(HASH_B, 1, 2, "second", meta=True),
                _block(HASH_A, 2, 3, "third", meta=False),
            ]
        )
        lines = parse_blame(raw)

        assert [line.line_number for line in lines] == [1, 2, 3]
        assert lines[2].author == "Ada"
        assert lines[2].summary == "change by Ada"
        assert lines[2].content == "third"

    def test_content_keeps_tabs_and_spaces(self) -> None:
        raw = _block(HASH_A, 1, 1, "\tindented  text ", meta=True)
        assert parse_blame(raw)[0].content == "\tindented  text "
