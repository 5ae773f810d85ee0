"""Parser for ``git status --porcelain=v2 --branch`` output.

Line grammar (fields separated by single spaces)::

    # branch.oid <commit> | (initial)
    # branch.head <branch> | (detached)
    # branch.upstream <upstream>
    # branch.ab +<ahead> -<behind>
    1 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <path>
    2 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <Xscore> <path><TAB><origPath>
    u <XY> <sub> <m1> <m2> <m3> <mW> <h1> <h2> <h3> <path>
    ? <path>
    ! <path>

Paths are the final field and may contain spaces, so each entry type is
split with a bounded ``maxsplit`` and the remainder taken verbatim.

With ``-z`` every record ends in NUL instead of a newline and a rename
record carries ``<origPath>`` as the following NUL-terminated record. Paths
are then never quoted, so this is the form the status operation requests.
Newline-terminated output is still accepted.
"""

from __future__ import annotations

from collections.abc import Iterator

from gitcore.models.results import (
    RenamePair,
    StagedChanges,
    StatusResult,
    UnstagedChanges,
)

__all__ = ["parse_status"]

_DETACHED = "(detached)"
_INITIAL = "(initial)"

# Number of space-separated fields preceding the path, per entry type
_ORDINARY_FIELDS = 8
_RENAME_FIELDS = 9
_UNMERGED_FIELDS = 10


class _StatusBuilder:
    """Accumulates classified paths while scanning status lines."""

    def __init__(self) -> None:
        self.branch: str | None = None
        self.commit: str | None = None
        self.upstream: str | None = None
        self.ahead = 0
        self.behind = 0
        self.staged_added: list[str] = []
        self.staged_modified: list[str] = []
        self.staged_deleted: list[str] = []
        self.staged_renamed: list[RenamePair] = []
        self.unstaged_modified: list[str] = []
        self.unstaged_deleted: list[str] = []
        self.untracked: list[str] = []
        self.conflicted: list[str] = []

    def header(self, line: str) -> None:
        key, _, value = line[2:].partition(" ")
        if key == "branch.head":
            self.branch = None if value == _DETACHED else value
        elif key == "branch.oid":
            self.commit = None if value == _INITIAL else value
        elif key == "branch.upstream":
            self.upstream = value
        elif key == "branch.ab":
            for part in value.split(" "):
                if part.startswith("+") and part[1:].isdigit():
                    self.ahead = int(part[1:])
                elif part.startswith("-") and part[1:].isdigit():
                    self.behind = int(part[1:])

    def classify(self, xy: str, path: str, orig_path: str | None = None) -> None:
        index_code = xy[0] if xy else "."
        worktree_code = xy[1] if len(xy) > 1 else "."

        if index_code in ("A", "C"):
            self.staged_added.append(path)
        elif index_code in ("M", "T"):
            self.staged_modified.append(path)
        elif index_code == "D":
            self.staged_deleted.append(path)
        elif index_code == "R":
            self.staged_renamed.append(RenamePair(old=orig_path or path, new=path))

        if worktree_code in ("M", "T"):
            self.unstaged_modified.append(path)
        elif worktree_code == "D":
            self.unstaged_deleted.append(path)

    def build(self) -> StatusResult:
        staged = StagedChanges(
            added=tuple(self.staged_added),
            modified=tuple(self.staged_modified),
            deleted=tuple(self.staged_deleted),
            renamed=tuple(self.staged_renamed),
        )
        unstaged = UnstagedChanges(
            modified=tuple(self.unstaged_modified),
            deleted=tuple(self.unstaged_deleted),
        )
        is_clean = not any(
            (
                self.staged_added,
                self.staged_modified,
                self.staged_deleted,
                self.staged_renamed,
                self.unstaged_modified,
                self.unstaged_deleted,
                self.untracked,
                self.conflicted,
            )
        )
        return StatusResult(
            current_branch=self.branch,
            is_clean=is_clean,
            staged_changes=staged,
            unstaged_changes=unstaged,
            untracked_files=tuple(self.untracked),
            conflicted_files=tuple(self.conflicted),
            commit=self.commit,
            upstream=self.upstream,
            ahead=self.ahead,
            behind=self.behind,
        )


def _records(raw: str) -> Iterator[tuple[str, str | None]]:
    """Yield ``(record, orig_path)`` pairs; orig_path is set for renames only."""
    if "\x00" not in raw:
        for line in raw.splitlines():
            if line.startswith("2 "):
                record, _, orig_path = line.partition("\t")
                yield record, orig_path or None
            elif line:
                yield line, None
        return

    fields = iter(raw.split("\x00"))
    for record in fields:
        if not record:
            continue
        if record.startswith("2 "):
            yield record, next(fields, None) or None
        else:
            yield record, None


def parse_status(raw: str) -> StatusResult:
    """Parse porcelain v2 status output into a :class:`StatusResult`.

    Accepts both ``-z`` (NUL-terminated) and newline-terminated output.
    Empty output (no header, no entries) yields a clean result with no
    branch name.
    """
    builder = _StatusBuilder()

    for record, orig_path in _records(raw):
        kind = record[0]

        if kind == "#":
            builder.header(record)
        elif kind == "1":
            parts = record.split(" ", _ORDINARY_FIELDS)
            if len(parts) > 2:
                builder.classify(parts[1], parts[-1])
        elif kind == "2":
            parts = record.split(" ", _RENAME_FIELDS)
            if len(parts) > 2:
                builder.classify(parts[1], parts[-1], orig_path)
        elif kind == "u":
            parts = record.split(" ", _UNMERGED_FIELDS)
            if len(parts) > 2:
                builder.conflicted.append(parts[-1])
        elif kind == "?":
            builder.untracked.append(record[2:])
        # "!" (ignored) records carry nothing callers need

    return builder.build()
