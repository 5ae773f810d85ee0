"""Conflict detection for merge-like operations.

Merge, cherry-pick, rebase, pull and stash apply all report conflicts with
lines of the form::

    CONFLICT (content): Merge conflict in src/app.py
    CONFLICT (modify/delete): docs/a.md deleted in HEAD and modified in topic.
    CONFLICT (rename/delete): old.txt renamed to new.txt in HEAD, but deleted in topic.

Git prints them on stdout or stderr depending on the command and version, so
both streams are scanned. The marker text is English; every invocation runs
with a pinned locale so the scan is reliable.
"""

from __future__ import annotations

import re

from gitcore.models.results import MergeConflict

__all__ = ["CONFLICT_MARKER", "has_conflicts", "parse_conflicts"]

CONFLICT_MARKER = "CONFLICT ("

_CONFLICT_RE = re.compile(r"CONFLICT \(([^)]*)\):\s*(.*)$")
_MERGE_CONFLICT_IN_RE = re.compile(r"Merge conflict in (.+)$")
_LEADING_PATH_RE = re.compile(r"^(\S+) (?:deleted|renamed|added|modified)\b")
_TRAILING_IN_RE = re.compile(r"\bin (\S+?)\.?$")


def _conflict_path(detail: str) -> str:
    detail = detail.strip()
    match = _MERGE_CONFLICT_IN_RE.search(detail)
    if match:
        return match.group(1).strip()
    match = _LEADING_PATH_RE.match(detail)
    if match:
        return match.group(1)
    match = _TRAILING_IN_RE.search(detail)
    if match:
        return match.group(1)
    return detail


def has_conflicts(stdout: str, stderr: str = "") -> bool:
    """True if either stream contains a ``CONFLICT (`` marker."""
    return CONFLICT_MARKER in stdout or CONFLICT_MARKER in stderr


def parse_conflicts(stdout: str, stderr: str = "") -> list[MergeConflict]:
    """Extract every conflict line from stdout then stderr.

    Paths reported more than once keep their first position.
    """
    conflicts: list[MergeConflict] = []
    seen: set[str] = set()
    for line in (*stdout.splitlines(), *stderr.splitlines()):
        match = _CONFLICT_RE.search(line)
        if not match:
            continue
        path = _conflict_path(match.group(2))
        if path in seen:
            continue
        seen.add(path)
        conflicts.append(
            MergeConflict(reason=match.group(1), path=path, message=line.strip())
        )
    return conflicts
